"""Shared types for seasonal-trend decomposition."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class DecomposeMode(Enum):
    """How trend, seasonal and residual combine to rebuild the input.

    ``ADDITIVE``: ``y = trend + seasonal + residual``.
    ``MULTIPLICATIVE``: ``y = trend * seasonal * residual``; seasonal and
    residual are then dimensionless ratios centred around 1.
    """

    ADDITIVE = "additive"
    MULTIPLICATIVE = "multiplicative"


class Missing(Enum):
    """Policy for non-finite (NaN / infinite) entries in the input.

    ``ERROR`` rejects them. ``INTERPOLATE`` fills them linearly, runs the
    decomposition on the filled series and leaves NaN in the residual at
    the originally missing positions.
    """

    ERROR = "error"
    INTERPOLATE = "interpolate"


@dataclass
class Decomposition:
    """Trend, seasonal and residual components of a series."""

    trend: list[float]
    seasonal: list[float]
    residual: list[float]


@dataclass
class SeasonalDecomposeOpts:
    """Options for classical seasonal decomposition."""

    period: int
    mode: DecomposeMode = DecomposeMode.ADDITIVE
    missing: Missing = Missing.ERROR


def interpolate_missing(y: Iterable[float]) -> list[float]:
    """Fill non-finite values of ``y`` by linear interpolation.

    Leading and trailing runs take the nearest finite value; interior runs
    are interpolated between the surrounding finite values. Raises
    ``ValueError`` when ``y`` holds no finite value at all.
    """
    values = [float(v) for v in y]
    finite = [i for i, v in enumerate(values) if math.isfinite(v)]
    if not finite:
        raise ValueError("series has no finite values to interpolate from")

    first, last = finite[0], finite[-1]
    out = list(values)
    out[:first] = [values[first]] * first
    out[last + 1:] = [values[last]] * (len(values) - last - 1)

    for lo, hi in zip(finite, finite[1:]):
        gap = hi - lo
        if gap <= 1:
            continue
        start, end = out[lo], out[hi]
        for k in range(lo + 1, hi):
            alpha = (k - lo) / gap
            out[k] = start + alpha * (end - start)
    return out