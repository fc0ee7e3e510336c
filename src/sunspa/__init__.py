"""sunspa public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    init,
    get_engine,
    reset,
    spa,
    spa_formatted,
    spa_with_options,
    format_time,
)
from .core.errors import SpaCalculationError, SpaError, SpaRangeError
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
from .engines.spa import SpaEngine, compute

__all__ = [
    "init",
    "get_engine",
    "reset",
    "spa",
    "spa_formatted",
    "spa_with_options",
    "format_time",
    "compute",
    "SpaEngine",
    "SpaError",
    "SpaRangeError",
    "SpaCalculationError",
    "ErrorCode",
    "FunctionCode",
    "TimeInstant",
    "Location",
    "Atmosphere",
    "Surface",
    "SpaResult",
    "SpaFormattedResult",
    "SpaOptions",
    "DEFAULT_OPTIONS",
]
