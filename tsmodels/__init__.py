"""Seasonal decomposition, Holt-Winters smoothing, Ljung-Box, ARMA likelihood, OLS and Nelder-Mead."""

__version__ = "0.1.0"

__all__ = [
    "seasonal",
    "decompose",
    "transform",
    "holt_winters",
    "diagnostics",
    "kalman",
    "ols",
    "nelder_mead",
]