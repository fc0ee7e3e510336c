from __future__ import annotations

import math


# ------------------------------------------------------------
# Range reduction (degrees)
# ------------------------------------------------------------

def limit_degrees(deg: float) -> float:
    """Wrap degrees to [0, 360)."""
    d = deg / 360.0
    limited = 360.0 * (d - math.floor(d))
    if limited < 0.0:
        limited += 360.0
    return limited


def limit_degrees180(deg: float) -> float:
    """Wrap degrees to [0, 180)."""
    d = deg / 180.0
    limited = 180.0 * (d - math.floor(d))
    if limited < 0.0:
        limited += 180.0
    return limited


def limit_degrees180pm(deg: float) -> float:
    """Wrap degrees to [-180, 180]."""
    d = deg / 360.0
    limited = 360.0 * (d - math.floor(d))
    if limited < -180.0:
        limited += 360.0
    elif limited > 180.0:
        limited -= 360.0
    return limited


def limit_minutes(minutes: float) -> float:
    """Fold a time difference in minutes into [-20, 20] by whole days."""
    limited = minutes
    if limited < -20.0:
        limited += 1440.0
    elif limited > 20.0:
        limited -= 1440.0
    return limited


def third_order_polynomial(a: float, b: float, c: float, d: float, x: float) -> float:
    """((a*x + b)*x + c)*x + d."""
    return ((a * x + b) * x + c) * x + d
