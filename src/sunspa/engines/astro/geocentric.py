"""
sunspa.engines.astro.geocentric
-------------------------------
Geocentric solar coordinates: apparent longitude, right ascension,
declination, Greenwich sidereal time and the equation of time.

All angles are degrees. `geocentric_sun` runs the full chain for one JD and
returns every intermediate; the solver reuses it at whole-day offsets.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .angles import limit_degrees, limit_minutes
from .heliocentric import EarthSeries, HeliocentricPosition, heliocentric_position
from .nutation import Nutation, NutationSeries, nutation_and_obliquity
from .time_scales import JD_J2000, JulianDates


@dataclass(frozen=True)
class SolarTerms:
    """Compiled periodic tables used by the geocentric chain."""
    earth: EarthSeries
    nutation: NutationSeries

    @classmethod
    def build(cls) -> "SolarTerms":
        return cls(earth=EarthSeries.build(), nutation=NutationSeries.build())


# ============================================================
# Ecliptic -> geocentric
# ============================================================

def geocentric_longitude(L: float) -> float:
    """Θ = L + 180, kept in [0, 360)."""
    theta = L + 180.0
    if theta >= 360.0:
        theta -= 360.0
    return theta


def geocentric_latitude(B: float) -> float:
    return -B


def aberration_correction(R: float) -> float:
    """Δτ = -20.4898"/(3600 R), degrees."""
    return -20.4898 / (3600.0 * R)


def apparent_sun_longitude(theta: float, del_psi: float, del_tau: float) -> float:
    return theta + del_psi + del_tau


def greenwich_mean_sidereal_time(jd: float, jc: float) -> float:
    return limit_degrees(
        280.46061837 + 360.98564736629 * (jd - JD_J2000) + jc * jc * (0.000387933 - jc / 38710000.0)
    )


def greenwich_sidereal_time(nu0: float, del_psi: float, epsilon: float) -> float:
    """Apparent sidereal time ν = ν0 + Δψ cos ε."""
    return nu0 + del_psi * math.cos(math.radians(epsilon))


def geocentric_right_ascension(lamda: float, epsilon: float, beta: float) -> float:
    lamda_rad = math.radians(lamda)
    epsilon_rad = math.radians(epsilon)
    return limit_degrees(math.degrees(math.atan2(
        math.sin(lamda_rad) * math.cos(epsilon_rad) - math.tan(math.radians(beta)) * math.sin(epsilon_rad),
        math.cos(lamda_rad),
    )))


def geocentric_declination(beta: float, epsilon: float, lamda: float) -> float:
    beta_rad = math.radians(beta)
    epsilon_rad = math.radians(epsilon)
    return math.degrees(math.asin(
        math.sin(beta_rad) * math.cos(epsilon_rad)
        + math.cos(beta_rad) * math.sin(epsilon_rad) * math.sin(math.radians(lamda))
    ))


# ============================================================
# Equation of time
# ============================================================

def sun_mean_longitude(jme: float) -> float:
    return limit_degrees(
        280.4664567 + jme * (360007.6982779 + jme * (0.03032028 + jme * (1.0 / 49931.0 + jme * (
            -1.0 / 15300.0 + jme * (-1.0 / 2000000.0)))))
    )


def equation_of_time(m: float, alpha: float, del_psi: float, epsilon: float) -> float:
    """Apparent minus mean solar time, minutes in [-20, 20]."""
    return limit_minutes(4.0 * (m - 0.0057183 - alpha + del_psi * math.cos(math.radians(epsilon))))


# ============================================================
# Full chain
# ============================================================

@dataclass(frozen=True)
class GeocentricSun:
    dates: JulianDates
    helio: HeliocentricPosition
    theta: float    # geocentric longitude
    beta: float     # geocentric latitude
    nutation: Nutation
    del_tau: float  # aberration correction
    lamda: float    # apparent sun longitude
    nu0: float      # Greenwich mean sidereal time
    nu: float       # Greenwich apparent sidereal time
    alpha: float    # right ascension
    delta: float    # declination

    @property
    def R(self) -> float:
        return self.helio.R

    @property
    def del_psi(self) -> float:
        return self.nutation.del_psi

    @property
    def epsilon(self) -> float:
        return self.nutation.epsilon

    def equation_of_time(self) -> float:
        m = sun_mean_longitude(self.dates.jme)
        return equation_of_time(m, self.alpha, self.del_psi, self.epsilon)


def geocentric_sun(jd: float, delta_t: float, terms: SolarTerms) -> GeocentricSun:
    dates = JulianDates.from_jd(jd, delta_t)
    helio = heliocentric_position(dates.jme, terms.earth)

    theta = geocentric_longitude(helio.L)
    beta = geocentric_latitude(helio.B)

    nut = nutation_and_obliquity(dates.jce, dates.jme, terms.nutation)

    del_tau = aberration_correction(helio.R)
    lamda = apparent_sun_longitude(theta, nut.del_psi, del_tau)

    nu0 = greenwich_mean_sidereal_time(dates.jd, dates.jc)
    nu = greenwich_sidereal_time(nu0, nut.del_psi, nut.epsilon)

    return GeocentricSun(
        dates=dates,
        helio=helio,
        theta=theta,
        beta=beta,
        nutation=nut,
        del_tau=del_tau,
        lamda=lamda,
        nu0=nu0,
        nu=nu,
        alpha=geocentric_right_ascension(lamda, nut.epsilon, beta),
        delta=geocentric_declination(beta, nut.epsilon, lamda),
    )
