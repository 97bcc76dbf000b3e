import math
from math import log, sqrt, exp
from .core import MarketInputs, OptionKind, Greeks, CALL
from .errors import DomainComputationError
from .normal import density, cumulative

__all__ = ["d1_d2", "price", "greeks"]


def d1_d2(inputs: MarketInputs) -> tuple[float, float]:
    inputs.validate()
    S, K, r, T, sigma = inputs.spot, inputs.strike, inputs.rate, inputs.time, inputs.volatility
    rt = sigma * sqrt(T)
    d1 = (log(S / K) + (r + 0.5 * sigma * sigma) * T) / rt
    d2 = d1 - rt
    return d1, d2


def price(inputs: MarketInputs, kind=CALL) -> float:
    """European Black-Scholes price, no dividends.

    ``kind`` is anything :meth:`OptionKind.parse` accepts; an unknown kind
    raises ``InvalidOptionKindError`` before any number is computed.
    """
    kind = OptionKind.parse(kind)
    d1, d2 = d1_d2(inputs)
    disc_r = exp(-inputs.rate * inputs.time)
    if kind is CALL:
        px = inputs.spot * cumulative(d1) - inputs.strike * disc_r * cumulative(d2)
    else:
        px = inputs.strike * disc_r * cumulative(-d2) - inputs.spot * cumulative(-d1)
    if not math.isfinite(px):
        raise DomainComputationError(f"non-finite {kind.value} price for {inputs}")
    return px


def greeks(inputs: MarketInputs) -> Greeks:
    """All eight greeks; vega and rho per unit (1.00) change, theta per year."""
    d1, d2 = d1_d2(inputs)
    S, K, r, T, sigma = inputs.spot, inputs.strike, inputs.rate, inputs.time, inputs.volatility
    n_d1   = density(d1)
    N_d2   = cumulative(d2)
    Nm_d2  = cumulative(-d2)
    disc_r = exp(-r * T)
    sqrt_T = sqrt(T)

    # Common
    delta_call = cumulative(d1)
    gamma = n_d1 / (S * sigma * sqrt_T)
    vega  = S * n_d1 * sqrt_T
    decay = -(S * n_d1 * sigma) / (2.0 * sqrt_T)

    g = Greeks(
        delta_call=delta_call,
        delta_put=delta_call - 1.0,
        gamma=gamma,
        theta_call=decay - r * K * disc_r * N_d2,
        theta_put=decay + r * K * disc_r * Nm_d2,
        vega=vega,
        rho_call=K * T * disc_r * N_d2,
        rho_put=-K * T * disc_r * Nm_d2,
    )
    if not all(math.isfinite(v) for v in g.as_dict().values()):
        raise DomainComputationError(f"non-finite greeks for {inputs}")
    return g
