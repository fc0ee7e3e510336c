from __future__ import annotations

from dataclasses import dataclass
import math


JD_J2000 = 2451545.0          # J2000.0 epoch
JD_GREGORIAN_START = 2299160.0  # last JD of the Julian calendar (1582-10-04/15)


def _integer(x: float) -> int:
    """Truncate toward zero."""
    return int(x)


# ============================================================
# Calendar date/time -> Julian Day
# ============================================================

def julian_day(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
    delta_ut1: float = 0.0,
    timezone: float = 0.0,
) -> float:
    """
    Local civil date/time -> JD (UT1).

    Meeus calendar algorithm. Dates before 1582-10-15 are read on the Julian
    calendar, later ones on the Gregorian calendar. The timezone (hours east
    of UTC) and UT1-UTC (seconds) are folded into the day fraction.
    """
    day_decimal = day + (hour - timezone + (minute + (second + delta_ut1) / 60.0) / 60.0) / 24.0

    if month < 3:
        month += 12
        year -= 1

    jd = _integer(365.25 * (year + 4716.0)) + _integer(30.6001 * (month + 1)) + day_decimal - 1524.5

    if jd > JD_GREGORIAN_START:
        a = _integer(year / 100)
        jd += 2 - a + _integer(a / 4)

    return jd


# ============================================================
# Julian century / ephemeris scales
# ============================================================

def julian_century(jd: float) -> float:
    """JC = (JD - 2451545) / 36525."""
    return (jd - JD_J2000) / 36525.0


def julian_ephemeris_day(jd: float, delta_t: float) -> float:
    """JDE = JD + ΔT/86400 (ΔT in seconds)."""
    return jd + delta_t / 86400.0


def julian_ephemeris_century(jde: float) -> float:
    return (jde - JD_J2000) / 36525.0


def julian_ephemeris_millennium(jce: float) -> float:
    return jce / 10.0


@dataclass(frozen=True)
class JulianDates:
    """The Julian Day family for one instant."""
    jd: float
    jde: float
    jc: float
    jce: float
    jme: float

    @property
    def jle(self) -> float:
        """Alias of jme."""
        return self.jme

    @classmethod
    def from_jd(cls, jd: float, delta_t: float) -> "JulianDates":
        jde = julian_ephemeris_day(jd, delta_t)
        jce = julian_ephemeris_century(jde)
        return cls(
            jd=jd,
            jde=jde,
            jc=julian_century(jd),
            jce=jce,
            jme=julian_ephemeris_millennium(jce),
        )


# ============================================================
# Fractional day helpers
# ============================================================

def limit_zero2one(value: float) -> float:
    """Wrap to [0, 1)."""
    limited = value - math.floor(value)
    if limited < 0.0:
        limited += 1.0
    return limited


def dayfrac_to_local_hr(dayfrac: float, timezone: float) -> float:
    """Fraction of a UT day -> local fractional hours in [0, 24)."""
    return 24.0 * limit_zero2one(dayfrac + timezone / 24.0)
