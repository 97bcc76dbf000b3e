# report.py
# Plain-text rendering of prices and Greeks for the command line.

from __future__ import annotations

from .core import Greeks

__all__ = ["format_price", "format_volatility", "format_greeks"]

_HEADER = "===== Option Greeks Explanation ====="
_FOOTER = "======================================"

# (field, label, explanation lines)
_ROWS = [
    ("delta_call", "Delta (Call):",
     ["Change in the CALL price when the stock price rises by $1."]),
    ("delta_put", "Delta (Put):",
     ["Change in the PUT price when the stock price rises by $1."]),
    ("gamma", "Gamma:",
     ["Change in Delta when the stock price rises by $1.",
      "(Same for calls and puts; higher gamma = more sensitivity.)"]),
    ("theta_call", "Theta (Call):",
     ["Value the CALL gains (+) or loses (-) per year of time decay."]),
    ("theta_put", "Theta (Put):",
     ["Value the PUT gains (+) or loses (-) per year of time decay."]),
    ("vega", "Vega:",
     ["Change in the option price per 1.00 (100 points) rise in volatility;",
      "divide by 100 for a 1% move."]),
    ("rho_call", "Rho (Call):",
     ["Change in the CALL price per 1.00 (100 points) rise in rates;",
      "divide by 100 for a 1% move."]),
    ("rho_put", "Rho (Put):",
     ["Change in the PUT price per 1.00 (100 points) rise in rates;",
      "divide by 100 for a 1% move."]),
]


def format_price(value: float) -> str:
    return f"Option Price: {value:.4f}"


def format_volatility(value: float) -> str:
    return f"Historical Volatility: {value:.6f} ({value * 100:.2f}% annualised)"


def format_greeks(g: Greeks) -> str:
    """Multi-line report, each Greek to 6 decimals with its meaning."""
    lines = [_HEADER, ""]
    for field, label, explanation in _ROWS:
        lines.append(f"{label:<17} {getattr(g, field):.6f}")
        lines.append(f"  -> {explanation[0]}")
        lines.extend(f"     {extra}" for extra in explanation[1:])
        lines.append("")
    lines.append(_FOOTER)
    return "\n".join(lines)
