"""
sunspa.engines.astro.heliocentric
---------------------------------
Earth heliocentric longitude, latitude and radius vector from the
truncated VSOP87 tables in `earth_tables`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from . import earth_tables as et
from .angles import limit_degrees
from .series import PowerSeries


@dataclass(frozen=True)
class EarthSeries:
    longitude: PowerSeries
    latitude: PowerSeries
    radius: PowerSeries

    @classmethod
    def build(cls) -> "EarthSeries":
        return cls(
            longitude=PowerSeries.from_rows(et.L_TERMS),
            latitude=PowerSeries.from_rows(et.B_TERMS),
            radius=PowerSeries.from_rows(et.R_TERMS),
        )


@dataclass(frozen=True)
class HeliocentricPosition:
    L: float  # longitude, degrees [0, 360)
    B: float  # latitude, degrees
    R: float  # radius vector, AU


def earth_heliocentric_longitude(jme: float, series: EarthSeries) -> float:
    return limit_degrees(math.degrees(series.longitude.eval(jme)))


def earth_heliocentric_latitude(jme: float, series: EarthSeries) -> float:
    return math.degrees(series.latitude.eval(jme))


def earth_radius_vector(jme: float, series: EarthSeries) -> float:
    return series.radius.eval(jme)


def heliocentric_position(jme: float, series: EarthSeries) -> HeliocentricPosition:
    return HeliocentricPosition(
        L=earth_heliocentric_longitude(jme, series),
        B=earth_heliocentric_latitude(jme, series),
        R=earth_radius_vector(jme, series),
    )
