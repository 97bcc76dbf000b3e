# bsvol: Black-Scholes pricing with historical volatility
# Public API

# Data model
from .core import MarketInputs, OptionKind, Greeks, CALL, PUT

# Errors
from .errors import (
    BSVolError, InputUnreadableError, InsufficientDataError,
    DegenerateSampleError, InvalidOptionKindError, DomainComputationError,
)

# Numerical core
from .normal import density, cumulative
from .volatility import TRADING_DAYS, log_returns, estimate as estimate_volatility
from .black_scholes import d1_d2, price as bs_price, greeks as bs_greeks

# Vectorised pricers
from .black_scholes_vec import bs_price_vec, bs_greeks_vec

# Risk engine
from .risk import numerical_greeks, scenario_grid

# Input / output collaborators
from .series import read_price_series
from .report import format_price, format_volatility, format_greeks

__all__ = [
    # Data model
    "MarketInputs", "OptionKind", "Greeks", "CALL", "PUT",
    # Errors
    "BSVolError", "InputUnreadableError", "InsufficientDataError",
    "DegenerateSampleError", "InvalidOptionKindError", "DomainComputationError",
    # Numerical core
    "density", "cumulative",
    "TRADING_DAYS", "log_returns", "estimate_volatility",
    "d1_d2", "bs_price", "bs_greeks",
    # Vectorised
    "bs_price_vec", "bs_greeks_vec",
    # Risk
    "numerical_greeks", "scenario_grid",
    # I/O
    "read_price_series", "format_price", "format_volatility", "format_greeks",
]

__version__ = "0.1.0"
