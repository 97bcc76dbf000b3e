# black_scholes_vec.py
# Vectorised Black-Scholes pricing and Greeks.
# All public functions accept scalars *or* NumPy arrays and broadcast.
# Uses the same Abramowitz & Stegun CDF as normal.py, so results match the
# scalar pricers to rounding.

from __future__ import annotations
import numpy as np

from .core import OptionKind, CALL
from .errors import DomainComputationError
from .normal import P, COEFFICIENTS

__all__ = ["density_vec", "cumulative_vec", "bs_price_vec", "bs_greeks_vec"]

_INV_SQRT_2PI = 1.0 / np.sqrt(2.0 * np.pi)


# ---------------------------------------------------------------------------
# Normal distribution
# ---------------------------------------------------------------------------
def density_vec(x) -> np.ndarray:
    x = np.asarray(x, dtype=float)
    return _INV_SQRT_2PI * np.exp(-0.5 * x * x)


def cumulative_vec(x) -> np.ndarray:
    """Elementwise A&S CDF approximation."""
    x = np.asarray(x, dtype=float)
    a1, a2, a3, a4, a5 = COEFFICIENTS
    k = 1.0 / (1.0 + P * np.abs(x))
    poly = k * (a1 + k * (a2 + k * (a3 + k * (a4 + k * a5))))
    c = 1.0 - density_vec(x) * poly
    return np.where(x >= 0.0, c, 1.0 - c)


_N = cumulative_vec
_n = density_vec


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _check(S, K, T, sigma):
    for name, arr in (("S", S), ("K", K), ("T", T), ("sigma", sigma)):
        if not np.all(np.isfinite(arr)) or np.any(arr <= 0):
            raise DomainComputationError(f"{name} must be positive and finite")


def _d1_d2(S, K, T, r, sigma):
    """Compute d1, d2 arrays.  All inputs broadcast."""
    sqrt_T = np.sqrt(T)
    sig_sqrt_T = sigma * sqrt_T
    d1 = (np.log(S / K) + (r + 0.5 * sigma * sigma) * T) / sig_sqrt_T
    d2 = d1 - sig_sqrt_T
    return d1, d2


def _prepare(S, K, T, r, sigma):
    S, K, T, r, sigma = (np.asarray(x, dtype=float) for x in (S, K, T, r, sigma))
    _check(S, K, T, sigma)
    if not np.all(np.isfinite(r)):
        raise DomainComputationError("r must be finite")
    return S, K, T, r, sigma


# ---------------------------------------------------------------------------
# Vectorised price
# ---------------------------------------------------------------------------
def bs_price_vec(S, K, T, r, sigma, kind=CALL) -> np.ndarray:
    """Vectorised Black-Scholes price.

    ``kind`` is a single option kind applied to every element.

    Returns
    -------
    np.ndarray
        Option prices (same shape as broadcasted inputs).
    """
    kind = OptionKind.parse(kind)
    S, K, T, r, sigma = _prepare(S, K, T, r, sigma)
    d1, d2 = _d1_d2(S, K, T, r, sigma)
    disc_r = np.exp(-r * T)

    if kind is CALL:
        return S * _N(d1) - disc_r * K * _N(d2)
    return disc_r * K * _N(-d2) - S * _N(-d1)


# ---------------------------------------------------------------------------
# Vectorised Greeks
# ---------------------------------------------------------------------------
def bs_greeks_vec(S, K, T, r, sigma) -> dict[str, np.ndarray]:
    """Vectorised Black-Scholes Greeks for both sides.

    Returns dict keyed like :class:`bsvol.core.Greeks`.  Vega is
    dPrice/dSigma (absolute), theta is dPrice/dt (per year).
    """
    S, K, T, r, sigma = _prepare(S, K, T, r, sigma)
    d1, d2 = _d1_d2(S, K, T, r, sigma)
    disc_r = np.exp(-r * T)
    sqrt_T = np.sqrt(T)
    n_d1 = _n(d1)

    # Common
    gamma = n_d1 / (S * sigma * sqrt_T)
    vega  = S * n_d1 * sqrt_T
    decay = -S * n_d1 * sigma / (2 * sqrt_T)
    delta_c = _N(d1)

    return {
        "delta_call": delta_c,
        "delta_put": delta_c - 1.0,
        "gamma": gamma,
        "theta_call": decay - r * K * disc_r * _N(d2),
        "theta_put": decay + r * K * disc_r * _N(-d2),
        "vega": vega,
        "rho_call": K * T * disc_r * _N(d2),
        "rho_put": -K * T * disc_r * _N(-d2),
    }
