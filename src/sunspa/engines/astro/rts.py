"""
sunspa.engines.astro.rts
------------------------
Sunrise, sun transit and sunset for the civil date of an instant.

Geocentric α/δ are sampled at 0h UT of the day before, the day itself and
the day after; each event is located by a first approximation followed by
one interpolation/correction pass.

The solver walks a small state machine:

    SEARCH_TRANSIT -> SEARCH_RISE -> SEARCH_SET -> DONE
                   \\-> NO_CROSSING   (polar day / polar night)

On NO_CROSSING the meridian transit is still reported, while sunrise,
sunset and their hour angles hold the sentinel NO_CROSSING (-99999.0),
which sits below every valid hour value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Sequence, Tuple

from ...core.types import Atmosphere, Location, TimeInstant
from .angles import limit_degrees180, limit_degrees180pm
from .geocentric import SolarTerms, geocentric_sun
from .refraction import SUN_RADIUS
from .time_scales import dayfrac_to_local_hr, julian_day, limit_zero2one

NO_CROSSING = -99999.0

# sidereal degrees per solar day fraction
_SIDEREAL_RATE = 360.985647


class RtsState(Enum):
    SEARCH_TRANSIT = "search_transit"
    SEARCH_RISE = "search_rise"
    SEARCH_SET = "search_set"
    DONE = "done"
    NO_CROSSING = "no_crossing"


@dataclass(frozen=True)
class RiseTransitSet:
    state: RtsState
    suntransit: float       # local hours
    sunrise: float          # local hours, or NO_CROSSING
    sunset: float           # local hours, or NO_CROSSING
    sun_transit_alt: float  # degrees
    srha: float             # hour angle at sunrise, degrees
    ssha: float             # hour angle at sunset, degrees

    @property
    def has_crossing(self) -> bool:
        return self.state is RtsState.DONE


# ============================================================
# Pieces
# ============================================================

def standard_altitude(atmos_refract: float) -> float:
    """h0' = -(solar semidiameter + horizon refraction), degrees."""
    return -1.0 * (SUN_RADIUS + atmos_refract)


def approx_sun_transit_time(alpha_zero: float, longitude: float, nu: float) -> float:
    return (alpha_zero - longitude - nu) / 360.0


def sun_hour_angle_at_rise_set(latitude: float, delta_zero: float, h0_prime: float) -> float:
    """H0 in [0, 180), or NO_CROSSING when the sun never reaches h0'."""
    lat_rad = math.radians(latitude)
    delta_zero_rad = math.radians(delta_zero)
    argument = (math.sin(math.radians(h0_prime)) - math.sin(lat_rad) * math.sin(delta_zero_rad)) / (
        math.cos(lat_rad) * math.cos(delta_zero_rad)
    )
    if abs(argument) <= 1.0:
        return limit_degrees180(math.degrees(math.acos(argument)))
    return NO_CROSSING


def interpolate_three_point(samples: Sequence[float], n: float) -> float:
    """Interpolate day-before/day/day-after samples at day fraction n.

    Differences of 2 or more are folded with limit_zero2one, which handles
    right ascension passing 360 -> 0 between samples.
    """
    a = samples[1] - samples[0]
    b = samples[2] - samples[1]
    if abs(a) >= 2.0:
        a = limit_zero2one(a)
    if abs(b) >= 2.0:
        b = limit_zero2one(b)
    return samples[1] + n * (a + b + (b - a) * n) / 2.0


def rts_sun_altitude(latitude: float, delta_prime: float, h_prime: float) -> float:
    lat_rad = math.radians(latitude)
    delta_prime_rad = math.radians(delta_prime)
    return math.degrees(math.asin(
        math.sin(lat_rad) * math.sin(delta_prime_rad)
        + math.cos(lat_rad) * math.cos(delta_prime_rad) * math.cos(math.radians(h_prime))
    ))


def sun_rise_and_set_correction(
    m: float, h: float, delta_prime: float, latitude: float, h_prime: float, h0_prime: float
) -> float:
    return m + (h - h0_prime) / (
        360.0 * math.cos(math.radians(delta_prime)) * math.cos(math.radians(latitude))
        * math.sin(math.radians(h_prime))
    )


@dataclass(frozen=True)
class _Event:
    m: float
    h_prime: float
    h: float
    delta_prime: float


def _refine(
    m: float,
    nu: float,
    delta_t: float,
    longitude: float,
    latitude: float,
    alpha: Sequence[float],
    delta: Sequence[float],
) -> _Event:
    nu_i = nu + _SIDEREAL_RATE * m
    n = m + delta_t / 86400.0
    alpha_prime = interpolate_three_point(alpha, n)
    delta_prime = interpolate_three_point(delta, n)
    h_prime = limit_degrees180pm(nu_i + longitude - alpha_prime)
    return _Event(m=m, h_prime=h_prime, h=rts_sun_altitude(latitude, delta_prime, h_prime), delta_prime=delta_prime)


def _daily_samples(
    time: TimeInstant, terms: SolarTerms
) -> Tuple[float, Tuple[float, float, float], Tuple[float, float, float]]:
    """(ν at 0h UT, α samples, δ samples) for the date of `time`."""
    jd0 = julian_day(time.year, time.month, time.day)
    nu = geocentric_sun(jd0, time.delta_t, terms).nu

    # day samples are taken with ΔT = 0
    samples = [geocentric_sun(jd0 + k, 0.0, terms) for k in (-1, 0, 1)]
    alpha = (samples[0].alpha, samples[1].alpha, samples[2].alpha)
    delta = (samples[0].delta, samples[1].delta, samples[2].delta)
    return nu, alpha, delta


# ============================================================
# Solver
# ============================================================

def rise_transit_set(
    time: TimeInstant,
    location: Location,
    atmosphere: Atmosphere,
    terms: SolarTerms,
) -> RiseTransitSet:
    lat, lon = location.latitude, location.longitude
    h0_prime = standard_altitude(atmosphere.atmos_refract)
    nu, alpha, delta = _daily_samples(time, terms)

    m0 = approx_sun_transit_time(alpha[1], lon, nu)
    h0 = sun_hour_angle_at_rise_set(lat, delta[1], h0_prime)

    events: Dict[RtsState, _Event] = {}
    state = RtsState.SEARCH_TRANSIT
    while state not in (RtsState.DONE, RtsState.NO_CROSSING):
        if state is RtsState.SEARCH_TRANSIT:
            events[state] = _refine(limit_zero2one(m0), nu, time.delta_t, lon, lat, alpha, delta)
            state = RtsState.SEARCH_RISE if h0 >= 0.0 else RtsState.NO_CROSSING
        elif state is RtsState.SEARCH_RISE:
            m_rise = limit_zero2one(m0 - h0 / 360.0)
            events[state] = _refine(m_rise, nu, time.delta_t, lon, lat, alpha, delta)
            state = RtsState.SEARCH_SET
        else:
            m_set = limit_zero2one(m0 + h0 / 360.0)
            events[state] = _refine(m_set, nu, time.delta_t, lon, lat, alpha, delta)
            state = RtsState.DONE

    tz = time.timezone
    transit = events[RtsState.SEARCH_TRANSIT]
    suntransit = dayfrac_to_local_hr(transit.m - transit.h_prime / 360.0, tz)

    if state is RtsState.NO_CROSSING:
        return RiseTransitSet(
            state=state,
            suntransit=suntransit,
            sunrise=NO_CROSSING,
            sunset=NO_CROSSING,
            sun_transit_alt=transit.h,
            srha=NO_CROSSING,
            ssha=NO_CROSSING,
        )

    rise = events[RtsState.SEARCH_RISE]
    sett = events[RtsState.SEARCH_SET]
    return RiseTransitSet(
        state=state,
        suntransit=suntransit,
        sunrise=dayfrac_to_local_hr(
            sun_rise_and_set_correction(rise.m, rise.h, rise.delta_prime, lat, rise.h_prime, h0_prime), tz
        ),
        sunset=dayfrac_to_local_hr(
            sun_rise_and_set_correction(sett.m, sett.h, sett.delta_prime, lat, sett.h_prime, h0_prime), tz
        ),
        sun_transit_alt=transit.h,
        srha=rise.h_prime,
        ssha=sett.h_prime,
    )
