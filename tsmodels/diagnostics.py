"""Residual diagnostics: the Ljung-Box test for serial correlation.

Under the null of uncorrelated residuals the statistic
``Q = n (n + 2) sum_{k=1..h} rho_k^2 / (n - k)`` is approximately
chi-squared with ``h - m`` degrees of freedom, where ``m`` is the number
of fitted ARMA parameters.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

_A1 = 0.254_829_592
_A2 = -0.284_496_736
_A3 = 1.421_413_741
_A4 = -1.453_152_027
_A5 = 1.061_405_429
_P = 0.327_591_1


@dataclass(frozen=True)
class LjungBox:
    """Result of a Ljung-Box test.

    ``df`` is ``lags - fitted_params``, clamped to at least 1. Reject the
    null of white-noise residuals when ``p_value`` is below the chosen
    significance level.
    """

    q: float
    df: int
    p_value: float


def ljung_box(residuals: Sequence[float], lags: int, fitted_params: int) -> LjungBox:
    """Ljung-Box test on ``residuals`` with lag cutoff ``lags``.

    ``fitted_params`` is the number of ARMA parameters of the model that
    produced the residuals (``0`` for a raw series); it reduces the
    degrees of freedom.
    """
    values = [float(r) for r in residuals]
    n = len(values)
    mean = sum(values) / n if n else 0.0
    centered = [v - mean for v in values]
    denom = sum(v * v for v in centered)

    q = 0.0
    for k in range(1, min(lags, n - 1) + 1):
        num = sum(a * b for a, b in zip(centered[k:], centered))
        rho_k = num / denom if denom > 0.0 else 0.0
        q += rho_k * rho_k / (n - k)
    q *= n * (n + 2.0)

    df = max(lags - fitted_params, 1)
    return LjungBox(q=q, df=df, p_value=chi2_survival(q, float(df)))


def chi2_survival(x: float, df: float) -> float:
    """Approximate ``P[X > x]`` for ``X ~ chi2(df)`` (Wilson-Hilferty).

    Returns 1 for non-finite or non-positive ``x`` and for ``df <= 0``.
    """
    if not math.isfinite(x) or x <= 0.0 or df <= 0.0:
        return 1.0
    two_ninths_df = 2.0 / (9.0 * df)
    z = ((x / df) ** (1.0 / 3.0) - (1.0 - two_ninths_df)) / math.sqrt(two_ninths_df)
    return 1.0 - phi_cdf(z)


def phi_cdf(z: float) -> float:
    """Standard normal CDF built on :func:`erf`."""
    return 0.5 * (1.0 + erf(z / math.sqrt(2.0)))


def erf(x: float) -> float:
    """Error function via the Abramowitz-Stegun 7.1.26 approximation."""
    sign = -1.0 if x < 0.0 else 1.0
    ax = abs(x)
    t = 1.0 / (1.0 + _P * ax)
    poly = ((((_A5 * t + _A4) * t) + _A3) * t + _A2) * t + _A1
    return sign * (1.0 - poly * t * math.exp(-ax * ax))