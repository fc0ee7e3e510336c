"""
sunspa.engines.astro.nutation
-----------------------------
Nutation in longitude and obliquity (63-term IAU 1980 series) and the
obliquity of the ecliptic.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from . import nutation_tables as nt
from .angles import third_order_polynomial
from .series import LinCombSeries, make_lincomb_series

# series coefficients are in 0.0001 arcsec; dividing by 36e6 gives degrees
_NUTATION_SCALE = 36000000.0


@dataclass(frozen=True)
class NutationSeries:
    longitude: LinCombSeries  # Δψ, sine terms
    obliquity: LinCombSeries  # Δε, cosine terms

    @classmethod
    def build(cls) -> "NutationSeries":
        return cls(
            longitude=make_lincomb_series(
                nt.Y_TERMS, [(a, b) for a, b, _, _ in nt.PE_TERMS], math.sin, _NUTATION_SCALE
            ),
            obliquity=make_lincomb_series(
                nt.Y_TERMS, [(c, d) for _, _, c, d in nt.PE_TERMS], math.cos, _NUTATION_SCALE
            ),
        )


@dataclass(frozen=True)
class FundamentalArguments:
    """Lunisolar fundamental arguments, degrees (not range-reduced)."""
    D: float      # mean elongation of the Moon from the Sun
    M: float      # mean anomaly of the Sun
    Mp: float     # mean anomaly of the Moon
    F: float      # Moon's argument of latitude
    Omega: float  # longitude of the Moon's ascending node

    def as_tuple(self) -> Tuple[float, float, float, float, float]:
        return (self.D, self.M, self.Mp, self.F, self.Omega)


def mean_elongation_moon_sun(jce: float) -> float:
    return third_order_polynomial(1.0 / 189474.0, -0.0019142, 445267.11148, 297.85036, jce)


def mean_anomaly_sun(jce: float) -> float:
    return third_order_polynomial(-1.0 / 300000.0, -0.0001603, 35999.05034, 357.52772, jce)


def mean_anomaly_moon(jce: float) -> float:
    return third_order_polynomial(1.0 / 56250.0, 0.0086972, 477198.867398, 134.96298, jce)


def argument_latitude_moon(jce: float) -> float:
    return third_order_polynomial(1.0 / 327270.0, -0.0036825, 483202.017538, 93.27191, jce)


def ascending_longitude_moon(jce: float) -> float:
    return third_order_polynomial(1.0 / 450000.0, 0.0020708, -1934.136261, 125.04452, jce)


def fundamental_arguments(jce: float) -> FundamentalArguments:
    return FundamentalArguments(
        D=mean_elongation_moon_sun(jce),
        M=mean_anomaly_sun(jce),
        Mp=mean_anomaly_moon(jce),
        F=argument_latitude_moon(jce),
        Omega=ascending_longitude_moon(jce),
    )


def nutation_longitude_and_obliquity(
    jce: float, args: FundamentalArguments, series: NutationSeries
) -> Tuple[float, float]:
    """(Δψ, Δε) in degrees."""
    x = args.as_tuple()
    return series.longitude.eval(x, jce), series.obliquity.eval(x, jce)


def ecliptic_mean_obliquity(jme: float) -> float:
    """Mean obliquity ε0 in arcseconds (Laskar polynomial in U = JME/10)."""
    u = jme / 10.0
    return 84381.448 + u * (-4680.93 + u * (-1.55 + u * (1999.25 + u * (-51.38 + u * (-249.67 +
                       u * (-39.05 + u * (7.12 + u * (27.87 + u * (5.79 + u * 2.45)))))))))


def ecliptic_true_obliquity(delta_epsilon: float, epsilon0: float) -> float:
    """ε = ε0/3600 + Δε, degrees."""
    return delta_epsilon + epsilon0 / 3600.0


@dataclass(frozen=True)
class Nutation:
    del_psi: float      # degrees
    del_epsilon: float  # degrees
    epsilon0: float     # mean obliquity, arcsec
    epsilon: float      # true obliquity, degrees


def nutation_and_obliquity(jce: float, jme: float, series: NutationSeries) -> Nutation:
    args = fundamental_arguments(jce)
    del_psi, del_epsilon = nutation_longitude_and_obliquity(jce, args, series)
    epsilon0 = ecliptic_mean_obliquity(jme)
    return Nutation(
        del_psi=del_psi,
        del_epsilon=del_epsilon,
        epsilon0=epsilon0,
        epsilon=ecliptic_true_obliquity(del_epsilon, epsilon0),
    )
