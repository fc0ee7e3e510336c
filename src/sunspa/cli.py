from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from .core.errors import SpaError


_DATE_RE = re.compile(r"^-?\d{1,4}-\d{1,2}-\d{1,2}$")

_FUNCTIONS = {"za": 0, "za_inc": 1, "za_rts": 2, "all": 3}


def _parse_ymd(s: str) -> tuple[int, int, int]:
    """YYYY-MM-DD, negative (astronomical) years allowed; no range check here."""
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    neg = s.startswith("-")
    y, m, d = map(int, s.lstrip("-").split("-"))
    return (-y if neg else y), m, d


def _parse_delta_t(s: str) -> float | str:
    if s == "auto":
        return s
    try:
        return float(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected seconds or 'auto', got {s!r}") from None


def _flag_negative_dates(argv: list[str]) -> list[str]:
    """argparse takes '-500-06-21' for an option; pass such dates as --date=..."""
    out: list[str] = []
    for a in argv:
        if a.startswith("-") and _DATE_RE.match(a):
            if out and out[-1] == "--date":
                out.pop()
            a = f"--date={a}"
        out.append(a)
    return out


def _parse_hms(s: str) -> tuple[int, int, float]:
    parts = s.split(":")
    if len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError(f"expected HH:MM[:SS], got {s!r}")
    hh, mm = int(parts[0]), int(parts[1])
    ss = float(parts[2]) if len(parts) == 3 else 0.0
    return hh, mm, ss


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_position(argv: list[str]) -> int:
    from .api import format_time, get_engine
    from .core.types import DEFAULT_OPTIONS as D
    from .core.types import Atmosphere, FunctionCode, Location, Surface, TimeInstant
    from .core.validate import ErrorCode
    from .engines.astro.deltat import estimate_delta_t

    p = argparse.ArgumentParser(prog="sunspa position", description="Solar position, incidence and sunrise/transit/sunset.")
    p.add_argument("date", nargs="?", type=_parse_ymd, help="YYYY-MM-DD (local civil date)")
    p.add_argument("--date", dest="date_opt", type=_parse_ymd, help="Same as the positional date; needed for negative years")
    p.add_argument("time", type=_parse_hms, help="HH:MM[:SS] (local civil time)")
    p.add_argument("--lat", type=float, required=True, help="Observer latitude in degrees (positive North)")
    p.add_argument("--lon", type=float, required=True, help="Observer longitude in degrees (positive East)")
    p.add_argument("--tz", type=float, default=0.0, help="Timezone, hours from UTC (negative West)")
    p.add_argument("--elevation", type=float, default=D.elevation, help="Meters")
    p.add_argument("--pressure", type=float, default=D.pressure, help="Annual average pressure, mbar")
    p.add_argument("--temperature", type=float, default=D.temperature, help="Annual average temperature, C")
    p.add_argument("--delta-ut1", type=float, default=D.delta_ut1, help="UT1 - UTC, seconds")
    p.add_argument("--delta-t", type=_parse_delta_t, default=D.delta_t, help="TT - UT1 in seconds, or 'auto' to estimate")
    p.add_argument("--slope", type=float, default=D.slope, help="Surface slope, degrees")
    p.add_argument("--azm-rotation", type=float, default=D.azm_rotation, help="Surface azimuth rotation from south, degrees")
    p.add_argument("--atmos-refract", type=float, default=D.atmos_refract, help="Refraction at sunrise/sunset, degrees")
    p.add_argument("--function", choices=sorted(_FUNCTIONS), default="all")
    args = p.parse_args(_flag_negative_dates(argv))
    if (args.date is None) == (args.date_opt is None):
        p.error("give the date exactly once")

    year, month, day = args.date or args.date_opt
    hour, minute, second = args.time
    if args.delta_t == "auto":
        delta_t = estimate_delta_t(year, month)
    else:
        delta_t = args.delta_t

    r = get_engine().compute(
        TimeInstant(year, month, day, hour, minute, second,
                    timezone=args.tz, delta_ut1=args.delta_ut1, delta_t=delta_t),
        Location(args.lat, args.lon, args.elevation),
        Atmosphere(args.pressure, args.temperature, args.atmos_refract),
        Surface(args.slope, args.azm_rotation),
        FunctionCode(_FUNCTIONS[args.function]),
    )
    if not r.ok:
        code = ErrorCode(r.error_code)
        print(f"error: {code.field} out of range (error code {int(code)})", file=sys.stderr)
        return 2

    print(f"Input:")
    print(f"  {year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{second:06.3f}  tz={args.tz:+g}  delta_t={delta_t:.3f} s")
    print()
    print("Position (degrees):")
    print(f"  Zenith             = {r.zenith:.6f}")
    print(f"  Azimuth (astro)    = {r.azimuth_astro:.6f}")
    print(f"  Azimuth            = {r.azimuth:.6f}")
    print(f"  Incidence          = {r.incidence:.6f}")
    print()
    print(f"Equation of Time (minutes) = {r.eot:.6f}")
    print()
    print("Sunrise / Transit / Sunset (local):")
    print(f"  Sunrise            = {format_time(r.sunrise)}  ({r.sunrise:.6f} h)")
    print(f"  Transit            = {format_time(r.suntransit)}  ({r.suntransit:.6f} h)")
    print(f"  Sunset             = {format_time(r.sunset)}  ({r.sunset:.6f} h)")
    print(f"  Transit altitude   = {r.sun_transit_alt:.6f}")
    return 0


def cmd_astro_args(argv: list[str]) -> int:
    from .api import get_engine

    p = argparse.ArgumentParser(prog="sunspa astro-args", description="Print intermediate solar values at a given JD(UT1).")
    p.add_argument("--jd", type=float, default=2451545.0, help="Julian Date in UT1 (default: J2000.0 = 2451545.0)")
    p.add_argument("--delta-t", type=float, default=67.0, help="TT - UT1, seconds")
    args = p.parse_args(argv)

    v = get_engine().explain(args.jd, args.delta_t)

    print(f"JD   = {v['jd']:.6f}")
    print(f"JDE  = {v['jde']:.6f}")
    print(f"JC   = {v['jc']:.12f}")
    print(f"JCE  = {v['jce']:.12f}")
    print(f"JME  = {v['jme']:.12f}")
    print()
    print("Earth heliocentric")
    print(f"  L      = {v['L']:.10f} deg")
    print(f"  B      = {v['B']:.10f} deg")
    print(f"  R      = {v['R']:.10f} AU")
    print()
    print("Geocentric")
    print(f"  Theta  = {v['theta']:.10f}")
    print(f"  beta   = {v['beta']:.10f}")
    print()
    print("Nutation and obliquity")
    print(f"  dpsi   = {v['del_psi']:.10f}")
    print(f"  deps   = {v['del_epsilon']:.10f}")
    print(f"  eps0   = {v['epsilon0']:.6f} arcsec")
    print(f"  eps    = {v['epsilon']:.10f}")
    print()
    print("Apparent")
    print(f"  dtau   = {v['del_tau']:.10f}")
    print(f"  lambda = {v['lamda']:.10f}")
    print(f"  nu0    = {v['nu0']:.10f}")
    print(f"  nu     = {v['nu']:.10f}")
    print(f"  alpha  = {v['alpha']:.10f}")
    print(f"  delta  = {v['delta']:.10f}")
    print(f"  eot    = {v['eot']:.6f} min")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `sunspa YYYY-MM-DD HH:MM:SS --lat .. --lon ..`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["position"] + argv
    argv = _flag_negative_dates(argv)

    p = argparse.ArgumentParser(prog="sunspa", description="NREL solar position toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("position", help="Solar position, incidence and sunrise/transit/sunset")
    sub.add_parser("astro-args", help="Print intermediate solar values at a given JD(UT1)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools (need the diagnostics/ephemeris extras)")
    p_diag.add_argument(
        "tool",
        choices=["day-profile", "validate-ref"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.cmd == "position":
            return cmd_position(rest)

        if args.cmd == "astro-args":
            return cmd_astro_args(rest)

        if args.cmd == "diag":
            tool_map = {
                "day-profile": "sunspa.diagnostics.day_profile",
                "validate-ref": "sunspa.diagnostics.validate_reference",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except SpaError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
