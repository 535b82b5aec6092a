"""Classical moving-average seasonal-trend decomposition."""

from __future__ import annotations

import math
from collections.abc import Sequence

from tsmodels.seasonal import (
    DecomposeMode,
    Decomposition,
    Missing,
    SeasonalDecomposeOpts,
    interpolate_missing,
)


class SeasonalDecomposeError(ValueError):
    """Raised when a series cannot be decomposed.

    ``reason`` is one of ``"invalid_period"``, ``"too_short"``,
    ``"non_finite"`` or ``"non_positive"``.
    """

    def __init__(
        self,
        reason: str,
        message: str,
        *,
        n: int | None = None,
        min_length: int | None = None,
        minimum: float | None = None,
        period: int | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.n = n
        self.min_length = min_length
        self.minimum = minimum
        self.period = period


def centered_ma(y: Sequence[float], window: int) -> list[float]:
    """Centred moving average of length ``window``.

    Odd windows use the plain ``window``-MA; even windows use the
    ``(window, 2)``-MA, weighting the two endpoints by ``1/(2*window)``.
    Positions where the centred window does not fit are NaN.
    """
    n = len(y)
    out = [math.nan] * n
    if window == 0 or n < window:
        return out
    half = window // 2
    if window % 2 == 1:
        inv = 1.0 / window
        for i in range(half, n - half):
            out[i] = sum(y[i - half:i + half + 1]) * inv
    else:
        inv = 1.0 / (2 * window)
        for i in range(half, n - half):
            total = y[i - half] + y[i + half]
            for v in y[i - half + 1:i + half]:
                total += 2.0 * v
            out[i] = total * inv
    return out


def _prepare(y: Sequence[float], missing: Missing) -> tuple[list[float], list[bool] | None]:
    values = [float(v) for v in y]
    mask = [not math.isfinite(v) for v in values]
    if not any(mask):
        return values, None
    if missing is Missing.ERROR:
        raise SeasonalDecomposeError("non_finite", "series contains non-finite values")
    try:
        filled = interpolate_missing(values)
    except ValueError as exc:
        raise SeasonalDecomposeError(
            "non_finite", "series has no finite values"
        ) from exc
    return filled, mask


def seasonal_decompose(y: Sequence[float], opts: SeasonalDecomposeOpts) -> Decomposition:
    """Decompose ``y`` into trend, seasonal and residual components.

    The trend is a centred moving average of length ``opts.period``; its
    first and last ``period // 2`` entries (and those of the residual)
    are NaN. The seasonal pattern is the per-phase mean of the detrended
    series, centred to sum to zero (additive) or to average one
    (multiplicative).
    """
    if opts.period < 2:
        raise SeasonalDecomposeError(
            "invalid_period",
            f"period must be at least 2, got {opts.period}",
            period=opts.period,
        )
    period = opts.period
    min_length = 2 * period

    if len(y) == 0:
        raise SeasonalDecomposeError(
            "too_short",
            f"series of length 0 is shorter than {min_length}",
            n=0,
            min_length=min_length,
        )

    raw, missing_mask = _prepare(y, opts.missing)
    n = len(raw)
    if n < min_length:
        raise SeasonalDecomposeError(
            "too_short",
            f"series of length {n} is shorter than {min_length}",
            n=n,
            min_length=min_length,
        )

    multiplicative = opts.mode is DecomposeMode.MULTIPLICATIVE
    if multiplicative:
        minimum = min(raw)
        if minimum <= 0.0:
            raise SeasonalDecomposeError(
                "non_positive",
                f"multiplicative mode needs positive values, minimum is {minimum}",
                minimum=minimum,
            )

    trend = centered_ma(raw, period)

    def detrend(value: float, level: float) -> float:
        if math.isnan(level):
            return math.nan
        return value / level if multiplicative else value - level

    detrended = [detrend(v, t) for v, t in zip(raw, trend)]

    phase_sums = [0.0] * period
    phase_counts = [0] * period
    for i, d in enumerate(detrended):
        if not math.isnan(d):
            phase_sums[i % period] += d
            phase_counts[i % period] += 1

    neutral = 1.0 if multiplicative else 0.0
    phase_means = [
        total / count if count > 0 else neutral
        for total, count in zip(phase_sums, phase_counts)
    ]
    pattern_mean = sum(phase_means) / period
    if multiplicative:
        pattern = [m / pattern_mean for m in phase_means]
    else:
        pattern = [m - pattern_mean for m in phase_means]

    seasonal = [pattern[i % period] for i in range(n)]

    def residual_at(i: int) -> float:
        if math.isnan(trend[i]):
            return math.nan
        if multiplicative:
            return raw[i] / (trend[i] * seasonal[i])
        return raw[i] - trend[i] - seasonal[i]

    residual = [residual_at(i) for i in range(n)]
    if missing_mask is not None:
        residual = [math.nan if gone else r for r, gone in zip(residual, missing_mask)]

    return Decomposition(trend=trend, seasonal=seasonal, residual=residual)