from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, replace, asdict
from enum import Enum

from .errors import DomainComputationError, InvalidOptionKindError


# ---------------------------------------------------------------------------
# Option kind
# ---------------------------------------------------------------------------
class OptionKind(str, Enum):
    """European option side.  Only call and put exist."""

    CALL = "call"
    PUT = "put"

    @classmethod
    def parse(cls, value) -> "OptionKind":
        """Coerce *value* to an ``OptionKind``.

        Accepts an ``OptionKind``, ``"call"``/``"c"``/``"put"``/``"p"``
        (any case) and the legacy menu codes ``1`` (call) and ``2`` (put).
        Anything else raises :class:`InvalidOptionKindError`.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidOptionKindError(f"invalid option kind: {value!r}")
        if isinstance(value, numbers.Integral):
            if value == 1:
                return cls.CALL
            if value == 2:
                return cls.PUT
            raise InvalidOptionKindError(
                f"invalid option kind: {value!r} (use 1 for call, 2 for put)"
            )
        if isinstance(value, str):
            s = value.strip().lower()
            if s in {"call", "c", "1"}:
                return cls.CALL
            if s in {"put", "p", "2"}:
                return cls.PUT
        raise InvalidOptionKindError(
            f"kind must be 'call' or 'put', got {value!r}"
        )


CALL = OptionKind.CALL
PUT  = OptionKind.PUT


# ---------------------------------------------------------------------------
# Market inputs
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class MarketInputs:
    """Scalar inputs of the Black-Scholes formula.

    Construction does not validate: a zero volatility (e.g. estimated from
    a flat price series) is representable.  The pricers call
    :meth:`validate` before evaluating anything.

    Parameters
    ----------
    spot : float
        Current underlying price.
    strike : float
        Strike price.
    rate : float
        Continuously-compounded risk-free rate (0.05 = 5%).
    time : float
        Time to expiry in years.
    volatility : float
        Annualised standard deviation of log-returns.
    """
    spot: float
    strike: float
    rate: float
    time: float        # years
    volatility: float

    def validate(self) -> "MarketInputs":
        for name in ("spot", "strike", "rate", "time", "volatility"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise DomainComputationError(f"{name} must be finite, got {value}")
        if self.spot <= 0:
            raise DomainComputationError(f"spot must be positive, got {self.spot}")
        if self.strike <= 0:
            raise DomainComputationError(f"strike must be positive, got {self.strike}")
        if self.time <= 0:
            raise DomainComputationError(f"time must be positive, got {self.time}")
        if self.volatility <= 0:
            raise DomainComputationError(
                f"volatility must be positive, got {self.volatility}"
            )
        return self

    def with_volatility(self, volatility: float) -> "MarketInputs":
        return replace(self, volatility=volatility)


# ---------------------------------------------------------------------------
# Greeks
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Greeks:
    """The eight Black-Scholes sensitivities for one set of inputs.

    Vega and rho are per unit change (1.00 = 100 percentage points) in
    volatility and rate; theta is per year.
    """
    delta_call: float
    delta_put: float
    gamma: float
    theta_call: float
    theta_put: float
    vega: float
    rho_call: float
    rho_put: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)

    def for_kind(self, kind) -> tuple[float, float, float]:
        """Return ``(delta, theta, rho)`` for one side."""
        if OptionKind.parse(kind) is CALL:
            return self.delta_call, self.theta_call, self.rho_call
        return self.delta_put, self.theta_put, self.rho_put
