#ephemeris/skyfield_sun.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from . import require_ephemeris


@dataclass
class SkyfieldSun:
    """
    Apparent geocentric right ascension / declination of the Sun (true
    equator and equinox of date) from a JPL ephemeris via skyfield.

    Requires optional deps:
      pip install "sunspa[ephemeris]"
    The kernel (default de421.bsp, 1900-2050) is downloaded by skyfield on
    first use unless a local path is given.
    """
    ts: object
    earth: object
    sun: object

    @classmethod
    def load(cls, kernel: Optional[str] = None) -> "SkyfieldSun":
        require_ephemeris()
        from skyfield.api import load, load_file  # type: ignore

        eph = load_file(kernel) if kernel else load("de421.bsp")
        return cls(ts=load.timescale(), earth=eph["earth"], sun=eph["sun"])

    def radec_deg(self, jde: float) -> Tuple[float, float]:
        """(α, δ) in degrees at TT Julian day `jde`."""
        t = self.ts.tt_jd(jde)
        ra, dec, _ = self.earth.at(t).observe(self.sun).apparent().radec(epoch="date")
        return ra.hours * 15.0, dec.degrees
