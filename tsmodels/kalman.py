"""Kalman filter for the exact Gaussian likelihood of an ARMA process.

The ARMA(p, q) model on a centred, fully differenced series is put in
companion state-space form with state dimension ``r = max(p, q + 1)``:

* transition ``T``: AR coefficients in the first column, ones on the
  super-diagonal;
* selection ``R = [1, theta_1, ..., theta_{r-1}]`` (zero padded);
* observation ``y_t = alpha_t[0]``.

The initial state covariance solves ``P = T P T' + R R'`` with unit noise
variance; the noise variance is profiled out of the concentrated
likelihood ``n log(sigma2_hat) + sum log F_t`` with
``sigma2_hat = (1/n) sum v_t^2 / F_t``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

Matrix = list[list[float]]

_LYAPUNOV_MAX_ITER = 500
_LYAPUNOV_TOL = 1e-12


def _t_x_tt(phi: Sequence[float], x: Matrix) -> Matrix:
    """Companion-form ``T X T'`` in O(r^2)."""
    r = len(phi)
    tx = [
        [
            phi[i] * x[0][col] + (x[i + 1][col] if i + 1 < r else 0.0)
            for col in range(r)
        ]
        for i in range(r)
    ]
    return [
        [
            tx[i][0] * phi[j] + (tx[i][j + 1] if j + 1 < r else 0.0)
            for j in range(r)
        ]
        for i in range(r)
    ]


def _t_vec(phi: Sequence[float], v: Sequence[float]) -> list[float]:
    """Companion-form ``T v`` in O(r)."""
    r = len(phi)
    return [phi[i] * v[0] + (v[i + 1] if i + 1 < r else 0.0) for i in range(r)]


class ArmaStateSpace:
    """Companion-form state-space representation of an ARMA(p, q) model."""

    def __init__(self, phi: Sequence[float], theta: Sequence[float]) -> None:
        p, q = len(phi), len(theta)
        r = max(p, q + 1, 1)
        self.r = r
        self.t_col0 = [float(phi[i]) if i < p else 0.0 for i in range(r)]
        self.t_matrix: Matrix = [
            [
                self.t_col0[i] if j == 0 else (1.0 if j == i + 1 else 0.0)
                for j in range(r)
            ]
            for i in range(r)
        ]
        if r > 1:
            # Column 0 and the super-diagonal overlap at (0, 1) only when r == 1.
            for i in range(r - 1):
                self.t_matrix[i][i + 1] = 1.0
        self.r_vec = [1.0] + [
            float(theta[i - 1]) if i - 1 < q else 0.0 for i in range(1, r)
        ]
        self.rrt: Matrix = [[a * b for b in self.r_vec] for a in self.r_vec]

    def lyapunov_p0(self) -> Matrix:
        """Solve ``P = T P T' + R R'`` by fixed-point iteration.

        Stops after a bounded number of sweeps if convergence is slow and
        returns the current iterate.
        """
        p = [row[:] for row in self.rrt]
        for _ in range(_LYAPUNOV_MAX_ITER):
            tpt = _t_x_tt(self.t_col0, p)
            new_p = [
                [a + b for a, b in zip(row_t, row_r)]
                for row_t, row_r in zip(tpt, self.rrt)
            ]
            max_diff = max(
                abs(a - b)
                for row_new, row_old in zip(new_p, p)
                for a, b in zip(row_new, row_old)
            )
            p = new_p
            if max_diff < _LYAPUNOV_TOL:
                break
        return p

    def _run(self, y: Sequence[float]):
        """Yield ``(prediction, innovation, variance)`` for each step.

        Stops early after yielding a step whose innovation variance is not
        finite and positive.
        """
        r = self.r
        a = [0.0] * r
        p_mat = self.lyapunov_p0()
        for y_t in y:
            v = float(y_t) - a[0]
            f = p_mat[0][0]
            yield a[0], v, f
            if not math.isfinite(f) or f <= 0.0:
                return
            k_gain = [p_mat[i][0] / f for i in range(r)]
            a_upd = [a_i + k_i * v for a_i, k_i in zip(a, k_gain)]
            p_upd = [
                [p_mat[i][j] - k_gain[i] * f * k_gain[j] for j in range(r)]
                for i in range(r)
            ]
            a = _t_vec(self.t_col0, a_upd)
            tpt = _t_x_tt(self.t_col0, p_upd)
            p_mat = [
                [x + z for x, z in zip(row_t, row_r)]
                for row_t, row_r in zip(tpt, self.rrt)
            ]

    def filter(self, y: Sequence[float]) -> tuple[float, float]:
        """Return ``(sum v_t^2 / F_t, sum log F_t)`` over ``y``.

        A non-positive or non-finite innovation variance yields
        ``(inf, 0.0)``.
        """
        sum_v2_f = 0.0
        sum_log_f = 0.0
        for _, v, f in self._run(y):
            if not math.isfinite(f) or f <= 0.0:
                return math.inf, 0.0
            sum_v2_f += v * v / f
            sum_log_f += math.log(f)
        return sum_v2_f, sum_log_f

    def filter_with_predictions(
        self, y: Sequence[float]
    ) -> tuple[list[float], list[float]]:
        """Return one-step-ahead predictions and innovations over ``y``.

        Both lists have the length of ``y``; if the filter breaks down the
        steps after the failing one are NaN.
        """
        predicted: list[float] = []
        innovations: list[float] = []
        for pred, v, _ in self._run(y):
            predicted.append(pred)
            innovations.append(v)
        missing = len(y) - len(predicted)
        predicted.extend([math.nan] * missing)
        innovations.extend([math.nan] * missing)
        return predicted, innovations


def concentrated_neg_loglik(
    y: Sequence[float], phi: Sequence[float], theta: Sequence[float]
) -> float:
    """Concentrated negative log-likelihood, up to additive constants.

    Returns infinity where the likelihood is undefined.
    """
    sum_v2_f, sum_log_f = ArmaStateSpace(phi, theta).filter(y)
    if not math.isfinite(sum_v2_f) or sum_v2_f <= 0.0:
        return math.inf
    n = len(y)
    sigma2_hat = sum_v2_f / n
    if not math.isfinite(sigma2_hat) or sigma2_hat <= 0.0:
        return math.inf
    return n * math.log(sigma2_hat) + sum_log_f


def concentrated_sigma2(
    y: Sequence[float], phi: Sequence[float], theta: Sequence[float]
) -> float:
    """Profiled innovation variance ``(1/n) sum v_t^2 / F_t``; NaN for empty ``y``."""
    if len(y) == 0:
        return math.nan
    sum_v2_f, _ = ArmaStateSpace(phi, theta).filter(y)
    return sum_v2_f / len(y)


def fitted_residuals(
    y: Sequence[float], phi: Sequence[float], theta: Sequence[float]
) -> tuple[list[float], list[float]]:
    """One-step-ahead predictions and innovations at ``(phi, theta)``."""
    return ArmaStateSpace(phi, theta).filter_with_predictions(y)