# normal.py
# Standard normal density and the Abramowitz & Stegun (26.2.17) CDF.
# Prices depend on this exact polynomial, not an erf-based CDF.

from __future__ import annotations
import math

__all__ = ["P", "COEFFICIENTS", "density", "cumulative"]

P = 0.2316419
COEFFICIENTS = (
    0.319381530,
    -0.356563782,
    1.781477937,
    -1.821255978,
    1.330274429,
)

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def density(x: float) -> float:
    """Standard normal pdf, (1/sqrt(2*pi)) * exp(-x^2/2)."""
    return _INV_SQRT_2PI * math.exp(-0.5 * x * x)


def cumulative(x: float) -> float:
    """Standard normal CDF, absolute error below 7.5e-8."""
    a1, a2, a3, a4, a5 = COEFFICIENTS
    k = 1.0 / (1.0 + P * abs(x))
    poly = k * (a1 + k * (a2 + k * (a3 + k * (a4 + k * a5))))
    c = 1.0 - density(x) * poly
    return c if x >= 0.0 else 1.0 - c
