from __future__ import annotations
from dataclasses import asdict, dataclass, replace
from enum import IntEnum
from typing import Any, Dict, Optional


class FunctionCode(IntEnum):
    """Selects which output subset `compute` fills in."""
    ZA = 0        # zenith and azimuth
    ZA_INC = 1    # zenith, azimuth and surface incidence
    ZA_RTS = 2    # zenith, azimuth, sunrise/transit/sunset
    ALL = 3       # everything

    @property
    def needs_incidence(self) -> bool:
        return self in (FunctionCode.ZA_INC, FunctionCode.ALL)

    @property
    def needs_rts(self) -> bool:
        return self in (FunctionCode.ZA_RTS, FunctionCode.ALL)


@dataclass(frozen=True)
class TimeInstant:
    """Local civil date/time plus the time-scale corrections (seconds)."""
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0.0
    timezone: float = 0.0   # hours from UTC, negative west
    delta_ut1: float = 0.0  # UT1 - UTC
    delta_t: float = 67.0   # TT - UT1


@dataclass(frozen=True)
class Location:
    latitude: float             # degrees, positive north
    longitude: float            # degrees, positive east
    elevation: float = 0.0      # meters


@dataclass(frozen=True)
class Atmosphere:
    pressure: float = 1013.25       # mbar
    temperature: float = 15.0       # degrees Celsius
    atmos_refract: float = 0.5667   # refraction at sunrise/sunset, degrees


@dataclass(frozen=True)
class Surface:
    slope: float = 0.0          # degrees from horizontal
    azm_rotation: float = 0.0   # degrees from south, positive west


@dataclass(frozen=True)
class SpaResult:
    """Fixed-shape output of one `compute` call.

    All angles are degrees, rise/transit/set are fractional local hours and
    eot is minutes. A non-zero error_code means every numeric field is 0.0.
    """
    zenith: float = 0.0
    azimuth_astro: float = 0.0
    azimuth: float = 0.0
    incidence: float = 0.0
    sunrise: float = 0.0
    sunset: float = 0.0
    suntransit: float = 0.0
    sun_transit_alt: float = 0.0
    eot: float = 0.0
    error_code: int = 0

    @classmethod
    def failed(cls, code: int) -> "SpaResult":
        return cls(error_code=int(code))

    @property
    def ok(self) -> bool:
        return self.error_code == 0

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SpaFormattedResult:
    """SpaResult with rise/transit/set rendered as HH:MM:SS ("N/A" when absent)."""
    zenith: float
    azimuth_astro: float
    azimuth: float
    incidence: float
    sunrise: str
    sunset: str
    suntransit: str
    sun_transit_alt: float
    eot: float
    error_code: int


@dataclass(frozen=True)
class SpaOptions:
    """Pure data defaults for the binding layer (`sunspa.api.spa`)."""
    timezone: Optional[float] = None   # None -> taken from the datetime
    elevation: float = 0.0
    pressure: float = 1013.25
    temperature: float = 15.0
    delta_ut1: float = 0.0
    delta_t: Optional[float] = 67.0    # None -> estimated from the date
    slope: float = 0.0
    azm_rotation: float = 0.0
    atmos_refract: float = 0.5667
    function: FunctionCode = FunctionCode.ALL

    def tweak(self, **kwargs: Any) -> "SpaOptions":
        """Return a copy with the given fields replaced."""
        return replace(self, **kwargs)


DEFAULT_OPTIONS = SpaOptions()
