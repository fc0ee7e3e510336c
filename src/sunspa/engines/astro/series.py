"""
sunspa.engines.astro.series
---------------------------
Generic evaluators for the periodic-term tables.

Two shapes cover every table in the pipeline:

  * PowerSeries: x -> (Σ_k x**k * Σ_i A_ki cos(B_ki + C_ki x)) / scale
    (Earth heliocentric L, B, R).
  * LinCombSeries: Σ_i coeff_i(t) * trig(Σ_j m_ij * X_j)
    (nutation in longitude and obliquity).

Summation order is fixed: rows in table order, groups in ascending power,
argument multipliers left to right. Keeping one order everywhere makes the
results reproducible bit for bit on IEEE-754 doubles.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence, Tuple


@dataclass(frozen=True)
class PeriodicTerm:
    """A * cos(B + C*x)."""
    amplitude: float
    phase: float
    frequency: float


PeriodicSeries = Tuple[PeriodicTerm, ...]


def make_series(rows: Iterable[Sequence[float]]) -> PeriodicSeries:
    terms = []
    for row in rows:
        if len(row) != 3:
            raise ValueError(f"periodic term needs (A, B, C), got {tuple(row)!r}")
        a, b, c = row
        terms.append(PeriodicTerm(float(a), float(b), float(c)))
    return tuple(terms)


def eval_cos_series(series: PeriodicSeries, x: float) -> float:
    total = 0.0
    for term in series:
        total += term.amplitude * math.cos(term.phase + term.frequency * x)
    return total


@dataclass(frozen=True)
class PowerSeries:
    """Polynomial in x whose coefficients are periodic series in x."""
    groups: Tuple[PeriodicSeries, ...]
    scale: float = 1.0e8

    @classmethod
    def from_rows(cls, groups: Iterable[Iterable[Sequence[float]]], scale: float = 1.0e8) -> "PowerSeries":
        return cls(tuple(make_series(g) for g in groups), float(scale))

    def __len__(self) -> int:
        return sum(len(g) for g in self.groups)

    def eval(self, x: float) -> float:
        total = 0.0
        for k, group in enumerate(self.groups):
            total += eval_cos_series(group, x) * x ** k
        return total / self.scale


# ============================================================
# Integer linear combinations of fundamental arguments
# ============================================================

@dataclass(frozen=True)
class LinComb:
    mult: Tuple[int, ...]  # integer multipliers, one per argument


def eval_lincomb(lc: LinComb, args: Sequence[float]) -> float:
    s = 0.0
    for k, x in zip(lc.mult, args):
        s += x * k
    return s


@dataclass(frozen=True)
class LinCombTerm:
    """(a + b*t) * trig(theta), with theta a linear combination of arguments."""
    theta: LinComb
    a: float
    b: float


@dataclass(frozen=True)
class LinCombSeries:
    terms: Tuple[LinCombTerm, ...]
    trig: Callable[[float], float]
    scale: float = 1.0

    def eval(self, args_deg: Sequence[float], t: float) -> float:
        """Evaluate with arguments in degrees and time variable t."""
        total = 0.0
        for term in self.terms:
            ang = math.radians(eval_lincomb(term.theta, args_deg))
            total += (term.a + term.b * t) * self.trig(ang)
        return total / self.scale


def make_lincomb_series(
    multipliers: Sequence[Sequence[int]],
    coeffs: Sequence[Tuple[float, float]],
    trig: Callable[[float], float],
    scale: float = 1.0,
) -> LinCombSeries:
    if len(multipliers) != len(coeffs):
        raise ValueError(f"table length mismatch: {len(multipliers)} multiplier rows, {len(coeffs)} coefficient rows")
    terms = tuple(
        LinCombTerm(LinComb(tuple(int(k) for k in m)), float(a), float(b))
        for m, (a, b) in zip(multipliers, coeffs)
    )
    return LinCombSeries(terms, trig, float(scale))
