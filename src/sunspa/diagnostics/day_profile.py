#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from sunspa.api import format_time, get_engine
from sunspa.core.types import Atmosphere, FunctionCode, Location, TimeInstant


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "sunspa[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "sunspa[diagnostics]"') from e


def sample_day(np, year: int, month: int, day: int, loc: Location, *, tz: float, delta_t: float,
               step_minutes: float, atm: Atmosphere = Atmosphere()):
    """Local hours in [0, 24) and the zenith angle at each of them."""
    eng = get_engine()
    hours = np.arange(0.0, 24.0, step_minutes / 60.0)
    zen = np.empty_like(hours)
    for i, h in enumerate(hours):
        total = int(round(float(h) * 3600.0))
        t = TimeInstant(year, month, day, total // 3600, (total % 3600) // 60, float(total % 60),
                        timezone=tz, delta_t=delta_t)
        r = eng.compute(t, loc, atm, function=FunctionCode.ZA)
        if not r.ok:
            raise ValueError(f"input out of range (error code {r.error_code})")
        zen[i] = r.zenith
    return hours, zen


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot the solar zenith angle over one local day.")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--lat", type=float, default=39.742476)
    p.add_argument("--lon", type=float, default=-105.1786)
    p.add_argument("--elevation", type=float, default=0.0)
    p.add_argument("--tz", type=float, default=0.0)
    p.add_argument("--delta-t", type=float, default=67.0)
    p.add_argument("--step-minutes", type=float, default=10.0)
    p.add_argument("--out-png", default="day_profile.png")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    y, m, d = map(int, args.date.split("-"))
    loc = Location(args.lat, args.lon, args.elevation)
    hours, zen = sample_day(np, y, m, d, loc, tz=args.tz, delta_t=args.delta_t, step_minutes=args.step_minutes)

    rts = get_engine().compute(TimeInstant(y, m, d, 12, timezone=args.tz, delta_t=args.delta_t), loc,
                               function=FunctionCode.ZA_RTS)
    print(f"Sunrise {format_time(rts.sunrise)}  Transit {format_time(rts.suntransit)}  Sunset {format_time(rts.sunset)}")
    print(f"Minimum zenith {float(np.min(zen)):.4f} deg at {format_time(float(hours[int(np.argmin(zen))]))}")

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(hours, zen, color='orange')
    ax.axhline(90.0, color='gray', lw=0.8, ls='--')
    for h in (rts.sunrise, rts.suntransit, rts.sunset):
        if h >= 0:
            ax.axvline(h, color='blue', lw=0.6, alpha=0.6)
    ax.set_xlim(0, 24)
    ax.invert_yaxis()
    ax.set_xlabel("Local time (h)")
    ax.set_ylabel("Zenith (deg)")
    ax.set_title(f"Solar zenith on {args.date} at ({args.lat:.4f}, {args.lon:.4f})")
    ax.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(args.out_png, dpi=150)
    print(f"Plot saved to {args.out_png}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
