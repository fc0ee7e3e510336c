"""
sunspa.engines.spa
------------------
The position engine: validation, the staged pipeline and output assembly.

`SpaEngine` bundles the compiled term tables. It is immutable, holds no
per-call state and can be shared between threads. `compute` never raises
for out-of-range inputs; it reports them through `SpaResult.error_code`.
A function code outside `FunctionCode` is a caller error and raises
`TypeError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..core.types import Atmosphere, FunctionCode, Location, SpaResult, Surface, TimeInstant
from ..core.validate import ErrorCode, validate_inputs
from .astro.geocentric import SolarTerms, geocentric_sun
from .astro.refraction import horizontal_position, surface_incidence_angle
from .astro.rts import rise_transit_set
from .astro.time_scales import julian_day
from .astro.topocentric import topocentric_sun


@dataclass(frozen=True)
class SpaEngine:
    terms: SolarTerms

    @classmethod
    def build(cls) -> "SpaEngine":
        return cls(terms=SolarTerms.build())

    def info(self) -> Dict[str, Any]:
        return {
            "earth_terms": {
                "L": len(self.terms.earth.longitude),
                "B": len(self.terms.earth.latitude),
                "R": len(self.terms.earth.radius),
            },
            "nutation_terms": len(self.terms.nutation.longitude.terms),
        }

    def compute(
        self,
        time: TimeInstant,
        location: Location,
        atmosphere: Atmosphere = Atmosphere(),
        surface: Surface = Surface(),
        function: FunctionCode = FunctionCode.ALL,
    ) -> SpaResult:
        try:
            function = FunctionCode(function)
        except ValueError:
            raise TypeError(f"unknown function code {function!r}") from None
        code = validate_inputs(time, location, atmosphere, surface, function)
        if code != ErrorCode.OK:
            return SpaResult.failed(code)

        jd = julian_day(
            time.year, time.month, time.day,
            time.hour, time.minute, time.second,
            time.delta_ut1, time.timezone,
        )
        geo = geocentric_sun(jd, time.delta_t, self.terms)
        topo = topocentric_sun(geo, location)
        horiz = horizontal_position(topo, location, atmosphere)

        out: Dict[str, Any] = {
            "zenith": horiz.zenith,
            "azimuth_astro": horiz.azimuth_astro,
            "azimuth": horiz.azimuth,
            "eot": geo.equation_of_time(),
        }

        if function.needs_incidence:
            out["incidence"] = surface_incidence_angle(
                horiz.zenith, horiz.azimuth_astro, surface.azm_rotation, surface.slope
            )

        if function.needs_rts:
            rts = rise_transit_set(time, location, atmosphere, self.terms)
            out["sunrise"] = rts.sunrise
            out["sunset"] = rts.sunset
            out["suntransit"] = rts.suntransit
            out["sun_transit_alt"] = rts.sun_transit_alt

        return SpaResult(**out)

    def explain(self, jd: float, delta_t: float) -> Dict[str, Any]:
        """Intermediate geocentric values for one JD (UT1), for debugging."""
        geo = geocentric_sun(jd, delta_t, self.terms)
        d, n = geo.dates, geo.nutation
        return {
            "jd": d.jd, "jde": d.jde, "jc": d.jc, "jce": d.jce, "jme": d.jme,
            "L": geo.helio.L, "B": geo.helio.B, "R": geo.helio.R,
            "theta": geo.theta, "beta": geo.beta,
            "del_psi": n.del_psi, "del_epsilon": n.del_epsilon,
            "epsilon0": n.epsilon0, "epsilon": n.epsilon,
            "del_tau": geo.del_tau, "lamda": geo.lamda,
            "nu0": geo.nu0, "nu": geo.nu,
            "alpha": geo.alpha, "delta": geo.delta,
            "eot": geo.equation_of_time(),
        }


def compute(
    time: TimeInstant,
    location: Location,
    atmosphere: Atmosphere = Atmosphere(),
    surface: Surface = Surface(),
    function: FunctionCode = FunctionCode.ALL,
) -> SpaResult:
    """One-shot compute on a freshly built engine.

    Callers evaluating many instants should build a `SpaEngine` once (or use
    `sunspa.api.get_engine()`) and call its `compute` method.
    """
    return SpaEngine.build().compute(time, location, atmosphere, surface, function)
