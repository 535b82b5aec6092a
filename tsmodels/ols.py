"""Least-squares solver via the normal equations and Cholesky factorisation."""

from __future__ import annotations

import math
from collections.abc import Sequence


class SingularMatrixError(ValueError):
    """Raised when ``X'X`` is not strictly positive definite."""


def _cholesky_solve(a: list[list[float]], b: list[float]) -> list[float]:
    n = len(b)
    low = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1):
            total = a[i][j] - sum(low[i][k] * low[j][k] for k in range(j))
            if i == j:
                if total <= 0.0:
                    raise SingularMatrixError("normal-equations matrix is singular")
                low[i][i] = math.sqrt(total)
            else:
                low[i][j] = total / low[j][j]

    z = [0.0] * n
    for i in range(n):
        z[i] = (b[i] - sum(low[i][k] * z[k] for k in range(i))) / low[i][i]
    x = [0.0] * n
    for i in reversed(range(n)):
        x[i] = (z[i] - sum(low[k][i] * x[k] for k in range(i + 1, n))) / low[i][i]
    return x


def solve(x: Sequence[Sequence[float]], y: Sequence[float]) -> list[float]:
    """Least-squares ``beta`` minimising ``|X beta - y|``.

    ``x`` is a sequence of rows. Raises :class:`SingularMatrixError` when
    the normal equations are singular and ``ValueError`` on shape mismatch.
    """
    if len(x) != len(y):
        raise ValueError(f"x has {len(x)} rows but y has {len(y)} values")
    if not x:
        return []
    cols = len(x[0])
    if any(len(row) != cols for row in x):
        raise ValueError("rows of x differ in length")
    if cols == 0:
        return []

    xtx = [[0.0] * cols for _ in range(cols)]
    xty = [0.0] * cols
    for row, yi in zip(x, y):
        for i, ri in enumerate(row):
            xty[i] += ri * yi
            for j in range(i, cols):
                xtx[i][j] += ri * row[j]
    for i in range(cols):
        for j in range(i):
            xtx[i][j] = xtx[j][i]
    return _cholesky_solve(xtx, xty)