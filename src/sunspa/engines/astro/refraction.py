"""
sunspa.engines.astro.refraction
-------------------------------
Topocentric elevation/zenith/azimuth with Bennett-style atmospheric
refraction, and the incidence angle on a tilted surface.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ...core.types import Atmosphere, Location
from .angles import limit_degrees
from .topocentric import TopocentricSun

SUN_RADIUS = 0.26667  # apparent solar semidiameter, degrees


def topocentric_elevation_angle(latitude: float, delta_prime: float, h_prime: float) -> float:
    """e0, degrees, without refraction."""
    lat_rad = math.radians(latitude)
    delta_prime_rad = math.radians(delta_prime)
    return math.degrees(math.asin(
        math.sin(lat_rad) * math.sin(delta_prime_rad)
        + math.cos(lat_rad) * math.cos(delta_prime_rad) * math.cos(math.radians(h_prime))
    ))


def atmospheric_refraction_correction(
    pressure: float, temperature: float, atmos_refract: float, e0: float
) -> float:
    """Δe in degrees; zero once the upper limb is below the refracted horizon."""
    if e0 < -1.0 * (SUN_RADIUS + atmos_refract):
        return 0.0
    return (
        (pressure / 1010.0) * (283.0 / (273.0 + temperature))
        * 1.02 / (60.0 * math.tan(math.radians(e0 + 10.3 / (e0 + 5.11))))
    )


def topocentric_elevation_angle_corrected(e0: float, delta_e: float) -> float:
    return e0 + delta_e


def topocentric_zenith_angle(e: float) -> float:
    return 90.0 - e


def topocentric_azimuth_angle_astro(h_prime: float, latitude: float, delta_prime: float) -> float:
    """Azimuth measured westward from south, [0, 360)."""
    h_prime_rad = math.radians(h_prime)
    lat_rad = math.radians(latitude)
    return limit_degrees(math.degrees(math.atan2(
        math.sin(h_prime_rad),
        math.cos(h_prime_rad) * math.sin(lat_rad) - math.tan(math.radians(delta_prime)) * math.cos(lat_rad),
    )))


def topocentric_azimuth_angle(azimuth_astro: float) -> float:
    """Azimuth measured eastward from north, [0, 360)."""
    return limit_degrees(azimuth_astro + 180.0)


def surface_incidence_angle(zenith: float, azimuth_astro: float, azm_rotation: float, slope: float) -> float:
    zenith_rad = math.radians(zenith)
    slope_rad = math.radians(slope)
    c = (
        math.cos(zenith_rad) * math.cos(slope_rad)
        + math.sin(slope_rad) * math.sin(zenith_rad) * math.cos(math.radians(azimuth_astro - azm_rotation))
    )
    # rounding can push a surface facing the sun just past cos = 1
    return math.degrees(math.acos(max(-1.0, min(1.0, c))))


@dataclass(frozen=True)
class HorizontalPosition:
    e0: float
    del_e: float
    e: float
    zenith: float
    azimuth_astro: float
    azimuth: float


def horizontal_position(topo: TopocentricSun, location: Location, atmosphere: Atmosphere) -> HorizontalPosition:
    e0 = topocentric_elevation_angle(location.latitude, topo.delta_prime, topo.h_prime)
    del_e = atmospheric_refraction_correction(
        atmosphere.pressure, atmosphere.temperature, atmosphere.atmos_refract, e0
    )
    e = topocentric_elevation_angle_corrected(e0, del_e)
    azimuth_astro = topocentric_azimuth_angle_astro(topo.h_prime, location.latitude, topo.delta_prime)
    return HorizontalPosition(
        e0=e0,
        del_e=del_e,
        e=e,
        zenith=topocentric_zenith_angle(e),
        azimuth_astro=azimuth_astro,
        azimuth=topocentric_azimuth_angle(azimuth_astro),
    )
