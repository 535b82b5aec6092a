"""Nelder-Mead simplex minimiser.

Uses the textbook coefficients (reflection 1, expansion 2, contraction
0.5, shrink 0.5). Convergence is declared when both the spread of the
function values and the per-coordinate spread of the vertices fall below
the tolerance.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

Objective = Callable[[Sequence[float]], float]

_REFLECT = 1.0
_EXPAND = 2.0
_CONTRACT = 0.5
_SHRINK = 0.5


def _vertex_spread(simplex: list[list[float]]) -> float:
    return max(max(coords) - min(coords) for coords in zip(*simplex))


def minimize(
    x0: Sequence[float], f: Objective, max_iter: int, tol: float
) -> tuple[list[float], float, bool]:
    """Minimise ``f`` from ``x0``.

    Returns ``(x_min, f_min, converged)``.
    """
    n = len(x0)
    if n == 0:
        return [], f([]), True

    simplex = [list(map(float, x0))]
    for i in range(n):
        vertex = list(map(float, x0))
        vertex[i] += 0.05 * vertex[i] if abs(vertex[i]) > 1e-8 else 0.05
        simplex.append(vertex)
    fvals = [f(v) for v in simplex]

    for _ in range(max_iter):
        order = sorted(range(n + 1), key=lambda k: fvals[k])
        simplex = [simplex[k] for k in order]
        fvals = [fvals[k] for k in order]

        if fvals[n] - fvals[0] < tol and _vertex_spread(simplex) < tol:
            return list(simplex[0]), fvals[0], True

        centroid = [sum(coords) / n for coords in zip(*simplex[:n])]
        worst = simplex[n]

        xr = [c + _REFLECT * (c - w) for c, w in zip(centroid, worst)]
        fr = f(xr)
        if fvals[0] <= fr < fvals[n - 1]:
            simplex[n], fvals[n] = xr, fr
            continue

        if fr < fvals[0]:
            xe = [c + _EXPAND * (r - c) for c, r in zip(centroid, xr)]
            fe = f(xe)
            if fe < fr:
                simplex[n], fvals[n] = xe, fe
            else:
                simplex[n], fvals[n] = xr, fr
            continue

        xc = [c + _CONTRACT * (w - c) for c, w in zip(centroid, worst)]
        fc = f(xc)
        if fc < fvals[n]:
            simplex[n], fvals[n] = xc, fc
            continue

        best = simplex[0]
        for i in range(1, n + 1):
            simplex[i] = [b + _SHRINK * (v - b) for b, v in zip(best, simplex[i])]
            fvals[i] = f(simplex[i])

    best_i = min(range(n + 1), key=lambda k: fvals[k])
    return list(simplex[best_i]), fvals[best_i], False