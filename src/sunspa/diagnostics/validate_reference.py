#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from sunspa.api import get_engine
from sunspa.engines.astro.geocentric import geocentric_sun
from sunspa.engines.astro.time_scales import julian_day
from sunspa.ephemeris.skyfield_sun import SkyfieldSun

logger = logging.getLogger(__name__)


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


def wrap180(deg: float) -> float:
    return (deg + 180.0) % 360.0 - 180.0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate apparent solar RA/Dec against a JPL ephemeris (skyfield).")
    p.add_argument("--year-start", type=int, default=1950)
    p.add_argument("--year-end", type=int, default=2049)
    p.add_argument("--step-days", type=float, default=10.0)
    p.add_argument("--delta-t", type=float, default=67.0, help="TT - UT1 used for the analytical side, seconds")
    p.add_argument("--kernel", default=None, help="Path to a local .bsp kernel (default: download de421.bsp)")
    p.add_argument("--out-png", default=None, help="Write a residual plot here")
    args = p.parse_args(argv)

    np = _need_numpy()

    print("Loading ephemeris...")
    ref = SkyfieldSun.load(args.kernel)
    terms = get_engine().terms

    jd_start = julian_day(args.year_start, 1, 1)
    jd_end = julian_day(args.year_end, 12, 31)
    if jd_start >= jd_end:
        raise ValueError("--year-start must precede --year-end")

    jds = np.arange(jd_start, jd_end, args.step_days)
    print(f"Validating {len(jds)} points from {args.year_start} to {args.year_end}...")

    d_alpha = np.empty_like(jds)
    d_delta = np.empty_like(jds)
    for i, jd in enumerate(jds):
        geo = geocentric_sun(float(jd), args.delta_t, terms)
        ra_ref, dec_ref = ref.radec_deg(geo.dates.jde)
        d_alpha[i] = wrap180(geo.alpha - ra_ref) * 3600.0
        d_delta[i] = (geo.delta - dec_ref) * 3600.0
        logger.debug("jd=%.1f dRA=%.3f\" dDec=%.3f\"", jd, d_alpha[i], d_delta[i])

    print("Residuals (analytical - ephemeris, arcsec):")
    print(f"  RA : rms={float(np.sqrt(np.mean(d_alpha ** 2))):.4f}  max|.|={float(np.max(np.abs(d_alpha))):.4f}")
    print(f"  Dec: rms={float(np.sqrt(np.mean(d_delta ** 2))):.4f}  max|.|={float(np.max(np.abs(d_delta))):.4f}")

    if args.out_png:
        plt = _need_matplotlib()
        years = args.year_start + (jds - jd_start) / 365.25

        fig, axs = plt.subplots(2, 1, figsize=(12, 7), sharex=True)
        axs[0].scatter(years, d_alpha, s=1, alpha=0.5, color='orange')
        axs[0].set_title("Apparent Right Ascension Error (SPA - ephemeris)")
        axs[0].set_ylabel("Error (arcsec)")
        axs[0].grid(True, alpha=0.3)

        axs[1].scatter(years, d_delta, s=1, alpha=0.5, color='blue')
        axs[1].set_title("Apparent Declination Error (SPA - ephemeris)")
        axs[1].set_ylabel("Error (arcsec)")
        axs[1].set_xlabel("Year")
        axs[1].grid(True, alpha=0.3)

        plt.tight_layout()
        plt.savefig(args.out_png, dpi=200)
        print(f"Plot saved to {args.out_png}")

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
