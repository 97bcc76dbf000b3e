"""Historical (realised) volatility.

Annualised close-to-close volatility of a price series:

1. log-returns ``ln(p[i] / p[i-1])`` for ``i = 1 .. n-1``;
2. their arithmetic mean;
3. sum of squared deviations divided by ``n - 2`` (the number of
   log-returns minus one);
4. ``sqrt(variance) * sqrt(252)``.

The divisor is kept at ``n - 2`` so results stay comparable with the
legacy calculator; a two-point series therefore has zero degrees of
freedom and is rejected with :class:`DegenerateSampleError`.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from .errors import (
    DegenerateSampleError,
    DomainComputationError,
    InsufficientDataError,
)

__all__ = ["TRADING_DAYS", "log_returns", "estimate"]

logger = logging.getLogger(__name__)

TRADING_DAYS = 252


def _as_series(prices: Sequence[float] | np.ndarray) -> np.ndarray:
    arr = np.asarray(prices, dtype=float)
    if arr.ndim != 1:
        raise DomainComputationError(
            f"price series must be one-dimensional, got shape {arr.shape}"
        )
    if len(arr) < 2:
        raise InsufficientDataError(
            f"at least 2 prices required, got {len(arr)}"
        )
    if not np.all(np.isfinite(arr)):
        raise DomainComputationError("price series contains non-finite values")
    bad = np.flatnonzero(arr <= 0.0)
    if bad.size:
        i = int(bad[0])
        raise DomainComputationError(
            f"prices must be positive, got {arr[i]} at position {i}"
        )
    return arr


def log_returns(prices: Sequence[float] | np.ndarray) -> np.ndarray:
    """Continuously-compounded returns between consecutive prices.

    Returns
    -------
    np.ndarray, shape (n - 1,)
    """
    arr = _as_series(prices)
    with np.errstate(over="ignore", under="ignore", divide="ignore"):
        lr = np.log(arr[1:] / arr[:-1])
    if not np.all(np.isfinite(lr)):
        i = int(np.flatnonzero(~np.isfinite(lr))[0])
        raise DomainComputationError(
            f"price ratio {arr[i + 1]!r}/{arr[i]!r} at position {i + 1} "
            "is outside the floating-point range"
        )
    return lr


def estimate(prices: Sequence[float] | np.ndarray) -> float:
    """Annualised historical volatility of *prices*.

    Parameters
    ----------
    prices : sequence of float
        Chronologically ordered, strictly positive observations sampled
        once per trading day.

    Returns
    -------
    float
        Volatility as a decimal (0.2 = 20%).  A constant series gives
        exactly ``0.0``.

    Raises
    ------
    InsufficientDataError
        Fewer than two prices.
    DegenerateSampleError
        Exactly two prices.
    DomainComputationError
        Non-positive or non-finite prices, or a price ratio that
        overflows.
    """
    lr = log_returns(prices)
    n = len(lr) + 1
    if n == 2:
        raise DegenerateSampleError(
            "2 prices give a single log-return; at least 3 prices are "
            "needed for the (n - 2) sample variance"
        )

    with np.errstate(over="ignore", invalid="ignore"):
        mean = lr.sum() / len(lr)
        variance = float(np.sum((lr - mean) ** 2)) / (n - 2)
        vol = float(np.sqrt(variance) * np.sqrt(TRADING_DAYS))
    if not np.isfinite(vol):
        raise DomainComputationError(f"non-finite volatility ({vol}) from {n} prices")
    logger.debug("n=%d mean=%.6g variance=%.6g volatility=%.6f", n, mean, variance, vol)
    return vol
