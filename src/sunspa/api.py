from __future__ import annotations

import logging
import math
import threading
from dataclasses import asdict
from datetime import datetime
from typing import Any, Optional

from .core.errors import SpaCalculationError, SpaRangeError
from .core.types import (
    DEFAULT_OPTIONS,
    Atmosphere,
    FunctionCode,
    Location,
    SpaFormattedResult,
    SpaOptions,
    SpaResult,
    Surface,
    TimeInstant,
)
from .core.validate import ErrorCode
from .engines.astro.deltat import estimate_delta_t
from .engines.spa import SpaEngine

logger = logging.getLogger(__name__)

_engine: Optional[SpaEngine] = None
_engine_lock = threading.Lock()


# ============================================================
# Shared engine handle
# ============================================================

def init() -> SpaEngine:
    """Build the shared engine once; later calls return the same object.

    Concurrent first callers block on the lock and all receive the engine
    built by the winner. A failed build leaves the handle empty, so the
    next call tries again.
    """
    global _engine
    eng = _engine
    if eng is not None:
        return eng
    with _engine_lock:
        if _engine is None:
            logger.debug("building SPA engine")
            _engine = SpaEngine.build()
            logger.debug("SPA engine ready: %s", _engine.info())
        return _engine


def get_engine() -> SpaEngine:
    return init()


def is_initialized() -> bool:
    return _engine is not None


def reset() -> None:
    """Drop the shared engine (tests)."""
    global _engine
    with _engine_lock:
        _engine = None


# ============================================================
# Argument checks
# ============================================================

def _check_coordinate(name: str, value: Any, limit: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        raise TypeError(f"{name} must be a number, got {value!r}")
    if not (-limit <= value <= limit):
        raise SpaRangeError(f"{name} must be between -{limit:g} and {limit:g}, got {value!r}")
    return float(value)


def _timezone_hours(when: datetime) -> float:
    off = when.utcoffset()
    if off is None:
        return 0.0
    return off.total_seconds() / 3600.0


# ============================================================
# Binding
# ============================================================

def spa(
    when: datetime,
    latitude: float,
    longitude: float,
    *,
    timezone: Optional[float] = DEFAULT_OPTIONS.timezone,
    elevation: float = DEFAULT_OPTIONS.elevation,
    pressure: float = DEFAULT_OPTIONS.pressure,
    temperature: float = DEFAULT_OPTIONS.temperature,
    delta_ut1: float = DEFAULT_OPTIONS.delta_ut1,
    delta_t: Optional[float] = DEFAULT_OPTIONS.delta_t,
    slope: float = DEFAULT_OPTIONS.slope,
    azm_rotation: float = DEFAULT_OPTIONS.azm_rotation,
    atmos_refract: float = DEFAULT_OPTIONS.atmos_refract,
    function: FunctionCode = DEFAULT_OPTIONS.function,
) -> SpaResult:
    """
    Solar position for a civil datetime at (latitude, longitude).

    `when` is read as local time in `timezone` (hours east of UTC). When
    `timezone` is None it comes from the datetime's UTC offset, and naive
    datetimes are taken as UTC. `delta_t=None` estimates ΔT from the date.

    Raises TypeError / SpaRangeError for bad coordinates and
    SpaCalculationError when any other input is out of range.
    """
    lat = _check_coordinate("latitude", latitude, 90.0)
    lon = _check_coordinate("longitude", longitude, 180.0)

    tz = _timezone_hours(when) if timezone is None else float(timezone)
    if delta_t is None:
        delta_t = estimate_delta_t(when.year, when.month)
        logger.debug("estimated delta_t=%.2f s for %04d-%02d", delta_t, when.year, when.month)

    result = get_engine().compute(
        TimeInstant(
            year=when.year,
            month=when.month,
            day=when.day,
            hour=when.hour,
            minute=when.minute,
            second=when.second + when.microsecond / 1e6,
            timezone=tz,
            delta_ut1=delta_ut1,
            delta_t=delta_t,
        ),
        Location(latitude=lat, longitude=lon, elevation=elevation),
        Atmosphere(pressure=pressure, temperature=temperature, atmos_refract=atmos_refract),
        Surface(slope=slope, azm_rotation=azm_rotation),
        FunctionCode(function),
    )
    if not result.ok:
        code = ErrorCode(result.error_code)
        logger.debug("SPA returned error code %d (%s)", code, code.field)
        raise SpaCalculationError(code, code.field)
    return result


def spa_with_options(when: datetime, latitude: float, longitude: float, options: SpaOptions = DEFAULT_OPTIONS) -> SpaResult:
    return spa(when, latitude, longitude, **asdict(options))


def format_time(hours: float) -> str:
    """Fractional hours -> "HH:MM:SS" (nearest second, wraps at 24h); "N/A" if absent."""
    if not math.isfinite(hours) or hours < 0:
        return "N/A"
    total = int(math.floor(hours * 3600.0 + 0.5))
    hh = (total // 3600) % 24
    mm = (total % 3600) // 60
    ss = total % 60
    return f"{hh:02d}:{mm:02d}:{ss:02d}"


def format_result(result: SpaResult) -> SpaFormattedResult:
    return SpaFormattedResult(
        zenith=result.zenith,
        azimuth_astro=result.azimuth_astro,
        azimuth=result.azimuth,
        incidence=result.incidence,
        sunrise=format_time(result.sunrise),
        sunset=format_time(result.sunset),
        suntransit=format_time(result.suntransit),
        sun_transit_alt=result.sun_transit_alt,
        eot=result.eot,
        error_code=result.error_code,
    )


def spa_formatted(when: datetime, latitude: float, longitude: float, **kwargs: Any) -> SpaFormattedResult:
    """Like `spa`, with sunrise/transit/sunset as "HH:MM:SS" strings."""
    return format_result(spa(when, latitude, longitude, **kwargs))
