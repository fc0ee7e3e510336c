"""
sunspa.engines.astro.topocentric
--------------------------------
Parallax correction from the geocenter to an observer on the WGS-like
ellipsoid (flattening ratio b/a = 0.99664719, equatorial radius 6378140 m).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ...core.types import Location
from .angles import limit_degrees
from .geocentric import GeocentricSun

EARTH_AXIS_RATIO = 0.99664719
EARTH_RADIUS_M = 6378140.0


def observer_hour_angle(nu: float, longitude: float, alpha_deg: float) -> float:
    """H = ν + λ_obs - α, degrees in [0, 360)."""
    return limit_degrees(nu + longitude - alpha_deg)


def sun_equatorial_horizontal_parallax(r: float) -> float:
    """ξ = 8.794"/(3600 R), degrees."""
    return 8.794 / (3600.0 * r)


def right_ascension_parallax_and_topocentric_dec(
    latitude: float,
    elevation: float,
    xi: float,
    h: float,
    delta: float,
) -> Tuple[float, float]:
    """(Δα, δ') in degrees."""
    lat_rad = math.radians(latitude)
    xi_rad = math.radians(xi)
    h_rad = math.radians(h)
    delta_rad = math.radians(delta)

    u = math.atan(EARTH_AXIS_RATIO * math.tan(lat_rad))
    y = EARTH_AXIS_RATIO * math.sin(u) + elevation * math.sin(lat_rad) / EARTH_RADIUS_M
    x = math.cos(u) + elevation * math.cos(lat_rad) / EARTH_RADIUS_M

    denom = math.cos(delta_rad) - x * math.sin(xi_rad) * math.cos(h_rad)
    delta_alpha_rad = math.atan2(-x * math.sin(xi_rad) * math.sin(h_rad), denom)
    delta_prime = math.degrees(math.atan2(
        (math.sin(delta_rad) - y * math.sin(xi_rad)) * math.cos(delta_alpha_rad),
        denom,
    ))
    return math.degrees(delta_alpha_rad), delta_prime


def topocentric_right_ascension(alpha_deg: float, delta_alpha: float) -> float:
    return alpha_deg + delta_alpha


def topocentric_local_hour_angle(h: float, delta_alpha: float) -> float:
    return h - delta_alpha


@dataclass(frozen=True)
class TopocentricSun:
    h: float            # observer local hour angle
    xi: float           # equatorial horizontal parallax
    del_alpha: float    # parallax in right ascension
    alpha_prime: float  # topocentric right ascension
    delta_prime: float  # topocentric declination
    h_prime: float      # topocentric local hour angle


def topocentric_sun(geo: GeocentricSun, location: Location) -> TopocentricSun:
    h = observer_hour_angle(geo.nu, location.longitude, geo.alpha)
    xi = sun_equatorial_horizontal_parallax(geo.R)
    del_alpha, delta_prime = right_ascension_parallax_and_topocentric_dec(
        location.latitude, location.elevation, xi, h, geo.delta
    )
    return TopocentricSun(
        h=h,
        xi=xi,
        del_alpha=del_alpha,
        alpha_prime=topocentric_right_ascension(geo.alpha, del_alpha),
        delta_prime=delta_prime,
        h_prime=topocentric_local_hour_angle(h, del_alpha),
    )
