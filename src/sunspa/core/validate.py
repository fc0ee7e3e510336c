"""
sunspa.core.validate
--------------------
Input range checks run before any computation.

Each field maps to one stable error code. Checks run in a fixed order and
stop at the first violation, so callers always get the same code for the
same inputs. Non-finite values fail the check of their own field.
"""

from __future__ import annotations

import math
from enum import IntEnum

from .types import Atmosphere, FunctionCode, Location, Surface, TimeInstant


class ErrorCode(IntEnum):
    OK = 0
    YEAR = 1
    MONTH = 2
    DAY = 3
    HOUR = 4
    MINUTE = 5
    SECOND = 6
    DELTA_T = 7
    TIMEZONE = 8
    LONGITUDE = 9
    LATITUDE = 10
    ELEVATION = 11
    PRESSURE = 12
    TEMPERATURE = 13
    SLOPE = 14
    AZM_ROTATION = 15
    ATMOS_REFRACT = 16
    DELTA_UT1 = 17

    @property
    def field(self) -> str:
        return self.name.lower()


def _bad(x: float) -> bool:
    return not math.isfinite(x)


def _outside(x: float, lo: float, hi: float) -> bool:
    """True unless lo <= x <= hi (NaN is always outside)."""
    return not (lo <= x <= hi)


def validate_inputs(
    t: TimeInstant,
    loc: Location,
    atm: Atmosphere,
    surf: Surface,
    function: FunctionCode,
) -> ErrorCode:
    """Return ErrorCode.OK, or the code of the first field out of range."""
    if _outside(t.year, -2000, 6000):
        return ErrorCode.YEAR
    if _outside(t.month, 1, 12):
        return ErrorCode.MONTH
    if _outside(t.day, 1, 31):
        return ErrorCode.DAY
    if _outside(t.hour, 0, 24):
        return ErrorCode.HOUR
    if _outside(t.minute, 0, 59):
        return ErrorCode.MINUTE
    if _bad(t.second) or t.second < 0 or t.second >= 60:
        return ErrorCode.SECOND
    if _outside(atm.pressure, 0, 5000):
        return ErrorCode.PRESSURE
    if _bad(atm.temperature) or atm.temperature <= -273 or atm.temperature > 6000:
        return ErrorCode.TEMPERATURE
    if _bad(t.delta_ut1) or t.delta_ut1 <= -1 or t.delta_ut1 >= 1:
        return ErrorCode.DELTA_UT1

    # 24:00:00 is allowed, 24:00:01 is not
    if t.hour == 24 and t.minute > 0:
        return ErrorCode.MINUTE
    if t.hour == 24 and t.second > 0:
        return ErrorCode.SECOND

    if _outside(t.delta_t, -8000, 8000):
        return ErrorCode.DELTA_T
    if _outside(t.timezone, -18, 18):
        return ErrorCode.TIMEZONE
    if _outside(loc.longitude, -180, 180):
        return ErrorCode.LONGITUDE
    if _outside(loc.latitude, -90, 90):
        return ErrorCode.LATITUDE
    if _outside(atm.atmos_refract, -5, 5):
        return ErrorCode.ATMOS_REFRACT
    if _bad(loc.elevation) or loc.elevation < -6500000:
        return ErrorCode.ELEVATION

    if FunctionCode(function).needs_incidence:
        if _outside(surf.slope, -360, 360):
            return ErrorCode.SLOPE
        if _outside(surf.azm_rotation, -360, 360):
            return ErrorCode.AZM_ROTATION

    return ErrorCode.OK
