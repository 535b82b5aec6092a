"""Holt-Winters exponential smoothing with caller-supplied parameters.

The model reduces to simple exponential smoothing when ``beta == 0`` and
``gamma == 0``, to Holt's linear method when only ``gamma == 0``, and to
full seasonal smoothing when ``gamma > 0`` and ``seasonal_periods >= 2``.

Initialisation seeds the level and trend from the means of the first one
or two seasonal cycles, and the seasonal indices from the first cycle's
deviations from that level (``y - mean`` or ``y / mean``).
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from tsmodels.seasonal import DecomposeMode


class HoltWintersError(ValueError):
    """Raised when a Holt-Winters model cannot be fitted.

    ``reason`` is one of ``"invalid_alpha"``, ``"invalid_beta"``,
    ``"invalid_gamma"``, ``"non_finite"``, ``"too_short"`` or
    ``"non_positive"``.
    """

    def __init__(
        self,
        reason: str,
        message: str,
        *,
        value: float | None = None,
        n: int | None = None,
        min_length: int | None = None,
        minimum: float | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.value = value
        self.n = n
        self.min_length = min_length
        self.minimum = minimum


@dataclass
class HoltWintersOpts:
    """Smoothing parameters and seasonal settings."""

    alpha: float
    beta: float = 0.0
    gamma: float = 0.0
    seasonal_periods: int = 0
    mode: DecomposeMode = DecomposeMode.ADDITIVE


@dataclass
class HoltWintersFit:
    """A fitted Holt-Winters model.

    ``fitted`` holds the in-sample one-step-ahead predictions. ``seasonal``
    holds the final seasonal indices in cycle order (empty when the
    seasonal term is off); ``next_index`` is the index applied one step
    after the last observation.
    """

    fitted: list[float]
    opts: HoltWintersOpts
    level: float
    trend: float
    seasonal: list[float] = field(default_factory=list)
    next_index: int = 0

    def forecast(self, steps: int) -> list[float]:
        """Forecast ``steps`` values past the end of the series."""
        m = self.opts.seasonal_periods
        has_seasonal = self.opts.gamma > 0.0 and m >= 2
        multiplicative = self.opts.mode is DecomposeMode.MULTIPLICATIVE
        out: list[float] = []
        for h in range(1, steps + 1):
            combined = self.level + h * self.trend
            if has_seasonal:
                s = self.seasonal[(self.next_index + h - 1) % m]
                combined = combined * s if multiplicative else combined + s
            out.append(combined)
        return out


def _check_unit(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise HoltWintersError(
            f"invalid_{name}",
            f"{name} must lie in [0, 1], got {value}",
            value=value,
        )


def holt_winters(y: Sequence[float], opts: HoltWintersOpts) -> HoltWintersFit:
    """Fit a Holt-Winters model, returning fitted values and final state.

    Raises :class:`HoltWintersError` for smoothing parameters outside
    ``[0, 1]``, non-finite input, a series too short for the model
    (seasonal needs ``2 * m`` values, Holt's linear method needs 2), or a
    non-positive value in multiplicative seasonal mode.
    """
    alpha, beta, gamma = opts.alpha, opts.beta, opts.gamma
    _check_unit("alpha", alpha)
    _check_unit("beta", beta)
    _check_unit("gamma", gamma)

    multiplicative = opts.mode is DecomposeMode.MULTIPLICATIVE
    m = opts.seasonal_periods
    has_seasonal = gamma > 0.0 and m >= 2
    has_trend = beta > 0.0

    values = [float(v) for v in y]
    n = len(values)
    if n == 0:
        return HoltWintersFit(fitted=[], opts=opts, level=0.0, trend=0.0)
    if not all(math.isfinite(v) for v in values):
        raise HoltWintersError("non_finite", "series contains non-finite values")
    if multiplicative:
        minimum = min(values)
        if minimum <= 0.0:
            raise HoltWintersError(
                "non_positive",
                f"multiplicative mode needs positive values, minimum is {minimum}",
                minimum=minimum,
            )

    seasonal: list[float] = []
    if has_seasonal:
        if n < 2 * m:
            raise HoltWintersError(
                "too_short",
                f"series of length {n} is shorter than {2 * m}",
                n=n,
                min_length=2 * m,
            )
        mean_first = sum(values[:m]) / m
        mean_second = sum(values[m:2 * m]) / m
        level = mean_first
        trend = (mean_second - mean_first) / m if has_trend else 0.0
        if multiplicative:
            seasonal = [v / mean_first for v in values[:m]]
        else:
            seasonal = [v - mean_first for v in values[:m]]
    elif has_trend:
        if n < 2:
            raise HoltWintersError(
                "too_short",
                f"series of length {n} is shorter than 2",
                n=n,
                min_length=2,
            )
        level = values[0]
        trend = values[1] - values[0]
    else:
        level = values[0]
        trend = 0.0

    fitted: list[float] = []
    for t, y_t in enumerate(values):
        s_idx = t % m if has_seasonal else 0
        if has_seasonal:
            prev_s = seasonal[s_idx]
        else:
            prev_s = 1.0 if multiplicative else 0.0

        if has_seasonal:
            yhat = (level + trend) * prev_s if multiplicative else level + trend + prev_s
        else:
            yhat = level + trend
        fitted.append(yhat)

        if has_seasonal:
            deseasoned = y_t / prev_s if multiplicative else y_t - prev_s
        else:
            deseasoned = y_t
        new_level = alpha * deseasoned + (1.0 - alpha) * (level + trend)
        new_trend = beta * (new_level - level) + (1.0 - beta) * trend if has_trend else 0.0
        if has_seasonal:
            ratio = y_t / new_level if multiplicative else y_t - new_level
            seasonal[s_idx] = gamma * ratio + (1.0 - gamma) * prev_s
        level = new_level
        trend = new_trend

    return HoltWintersFit(
        fitted=fitted,
        opts=opts,
        level=level,
        trend=trend,
        seasonal=seasonal,
        next_index=n % m if has_seasonal else 0,
    )