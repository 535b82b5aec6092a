"""Reparameterisations keeping ARMA polynomials stationary and invertible.

An unconstrained real maps to a partial autocorrelation in (-1, 1) via
``r / sqrt(1 + r^2)``; the Durbin-Levinson recursion turns a PACF vector
into AR coefficients. MA invertibility is the AR stationarity condition on
the negated coefficients, so the MA maps reuse the AR ones.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

_PACF_LIMIT = 0.999_999


def real_to_pacf(r: float) -> float:
    """Map a real number into (-1, 1)."""
    return r / math.sqrt(1.0 + r * r)


def pacf_to_real(p: float) -> float:
    """Inverse of :func:`real_to_pacf`, clamping ``p`` just inside (-1, 1)."""
    clamped = min(max(p, -_PACF_LIMIT), _PACF_LIMIT)
    return clamped / math.sqrt(1.0 - clamped * clamped)


def pacf_to_ar_poly(pacf: Sequence[float]) -> list[float]:
    """Durbin-Levinson: partial autocorrelations to AR coefficients."""
    phi: list[float] = []
    for r_k in pacf:
        phi = [a - r_k * b for a, b in zip(phi, reversed(phi))] + [r_k]
    return phi


def ar_poly_to_pacf(phi: Sequence[float]) -> list[float]:
    """Inverse Durbin-Levinson: AR coefficients to partial autocorrelations.

    On a degenerate step (a PACF of magnitude one) the remaining lower
    entries are left at zero.
    """
    p = len(phi)
    pacf = [0.0] * p
    cur = list(phi)
    for k in range(p - 1, -1, -1):
        pacf[k] = cur[k]
        if k == 0:
            break
        r = cur[k]
        denom = 1.0 - r * r
        if abs(denom) < 1e-12:
            return pacf
        head = cur[:k]
        cur = [(a + r * b) / denom for a, b in zip(head, reversed(head))]
    return pacf


def pacf_to_ma_poly(pacf: Sequence[float]) -> list[float]:
    """Partial autocorrelations to invertible MA coefficients."""
    return [-c for c in pacf_to_ar_poly(pacf)]


def ma_poly_to_pacf(theta: Sequence[float]) -> list[float]:
    """Inverse of :func:`pacf_to_ma_poly`."""
    return ar_poly_to_pacf([-t for t in theta])