"""Bump-and-reprice risk helpers.

Numerical Greeks via central finite differences of the closed-form
pricer, used to cross-check the analytic Greeks, and a spot x vol
scenario grid.
"""

from __future__ import annotations

import numpy as np
from dataclasses import replace

from .core import MarketInputs, Greeks, OptionKind, CALL, PUT
from .black_scholes import price

__all__ = [
    "numerical_greeks",
    "scenario_grid",
]


# ---------------------------------------------------------------------------
# Numerical Greeks
# ---------------------------------------------------------------------------

def numerical_greeks(
    inputs: MarketInputs,
    *,
    bump_pct: float = 0.01,
) -> Greeks:
    """Compute the eight Greeks via central finite differences.

    Parameters
    ----------
    inputs : MarketInputs
        Market and instrument parameters.
    bump_pct : float
        Relative bump size for spot, vol and time; absolute for rate
        (default 0.01).

    Returns
    -------
    Greeks
        Same conventions as :func:`bsvol.black_scholes.greeks`: vega and
        rho per unit change, theta per year of calendar decay.
    """
    out = {}
    for kind in (CALL, PUT):
        def px(**bumps):
            return price(replace(inputs, **bumps), kind)

        P0 = px()

        # --- Delta & Gamma (spot bump) ---
        eps_S = bump_pct * inputs.spot
        P_up = px(spot=inputs.spot + eps_S)
        P_dn = px(spot=inputs.spot - eps_S)
        out[f"delta_{kind.value}"] = (P_up - P_dn) / (2.0 * eps_S)
        if kind is CALL:
            out["gamma"] = (P_up - 2.0 * P0 + P_dn) / (eps_S ** 2)

        # --- Vega (vol bump) ---
        if kind is CALL:
            eps_v = max(bump_pct * inputs.volatility, 1e-4)
            v_up = inputs.volatility + eps_v
            v_dn = max(inputs.volatility - eps_v, 1e-6)
            out["vega"] = (px(volatility=v_up) - px(volatility=v_dn)) / (v_up - v_dn)

        # --- Theta (time bump, sign flipped: value lost as expiry nears) ---
        eps_T = bump_pct * inputs.time
        P_tup = px(time=inputs.time + eps_T)
        P_tdn = px(time=inputs.time - eps_T)
        out[f"theta_{kind.value}"] = -(P_tup - P_tdn) / (2.0 * eps_T)

        # --- Rho (rate bump) ---
        eps_r = bump_pct
        P_rup = px(rate=inputs.rate + eps_r)
        P_rdn = px(rate=inputs.rate - eps_r)
        out[f"rho_{kind.value}"] = (P_rup - P_rdn) / (2.0 * eps_r)

    return Greeks(**{k: float(v) for k, v in out.items()})


# ---------------------------------------------------------------------------
# Scenario grid
# ---------------------------------------------------------------------------

def scenario_grid(
    inputs: MarketInputs,
    kind,
    spot_range: np.ndarray,
    vol_range: np.ndarray,
) -> dict:
    """Evaluate the pricer across a 2-D (spot x vol) scenario grid.

    Parameters
    ----------
    spot_range : array, shape (n_spot,)
        Spot values to evaluate.
    vol_range : array, shape (n_vol,)
        Volatility values to evaluate.

    Returns
    -------
    dict
        ``"spot_values"``, ``"vol_values"``, ``"prices"`` (shape n_spot x n_vol).
    """
    kind = OptionKind.parse(kind)
    spot_range = np.asarray(spot_range, dtype=float)
    vol_range = np.asarray(vol_range, dtype=float)
    prices = np.empty((len(spot_range), len(vol_range)))

    for i, s in enumerate(spot_range):
        for j, v in enumerate(vol_range):
            prices[i, j] = price(replace(inputs, spot=float(s), volatility=float(v)), kind)

    return {
        "spot_values": spot_range.copy(),
        "vol_values": vol_range.copy(),
        "prices": prices,
    }
