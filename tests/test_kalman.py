import math

import pytest

from tsmodels.kalman import (
    ArmaStateSpace,
    concentrated_neg_loglik,
    concentrated_sigma2,
    fitted_residuals,
)


def test_ar1_lyapunov_matches_closed_form():
    phi = 0.7
    ss = ArmaStateSpace([phi], [])
    p = ss.lyapunov_p0()
    assert ss.r == 1
    assert p[0][0] == pytest.approx(1.0 / (1.0 - phi * phi), rel=1e-8)


def test_ma1_lyapunov_matches_closed_form():
    theta = 0.4
    ss = ArmaStateSpace([], [theta])
    p = ss.lyapunov_p0()
    assert ss.r == 2
    assert p[0][0] == pytest.approx(1.0 + theta * theta, rel=1e-8)


def test_filter_runs_on_short_series():
    # AR(1) with phi = 0.5: the first step has variance 1 / (1 - 0.25),
    # later steps have unit variance and innovation y_t - 0.5 * y_{t-1}.
    ss = ArmaStateSpace([0.5], [])
    sum_v2_f, sum_log_f = ss.filter([0.0, 0.5, 0.25, 0.125, 0.0625])
    assert sum_v2_f == pytest.approx(0.25)
    assert sum_log_f == pytest.approx(math.log(4.0 / 3.0))


def test_state_space_structure():
    ss = ArmaStateSpace([0.5, -0.2], [0.3, 0.1])
    assert ss.r == 3
    assert ss.t_matrix == [[0.5, 1.0, 0.0], [-0.2, 0.0, 1.0], [0.0, 0.0, 0.0]]
    assert ss.r_vec == [1.0, 0.3, 0.1]


def test_white_noise_likelihood_is_closed_form():
    y = [0.5, -1.0, 2.0, 0.25]
    sum_v2_f, sum_log_f = ArmaStateSpace([], []).filter(y)
    assert sum_v2_f == pytest.approx(sum(v * v for v in y))
    assert sum_log_f == pytest.approx(0.0)
    mean_sq = sum(v * v for v in y) / len(y)
    assert concentrated_sigma2(y, [], []) == pytest.approx(mean_sq)
    assert concentrated_neg_loglik(y, [], []) == pytest.approx(len(y) * math.log(mean_sq))


def test_ar1_predictions_are_previous_value_scaled():
    phi = 0.6
    y = [1.0, -0.5, 0.8, 0.3, -1.2]
    predicted, innovations = fitted_residuals(y, [phi], [])
    assert len(predicted) == len(y)
    assert predicted[0] == 0.0
    for t in range(1, len(y)):
        assert predicted[t] == pytest.approx(phi * y[t - 1])
    for obs, pred, res in zip(y, predicted, innovations):
        assert res == pytest.approx(obs - pred)


def test_all_zero_series_gives_infinite_nll():
    assert concentrated_neg_loglik([0.0, 0.0, 0.0], [0.5], []) == math.inf


def test_empty_series_sigma2_is_nan():
    assert str(concentrated_sigma2([], [0.5], [])) == "nan"


def test_nll_prefers_true_ar_coefficient():
    y = [1.0, 0.5, 0.25, 0.125, 0.0625, 0.03125, 1.0, 0.5, 0.25]
    assert concentrated_neg_loglik(y, [0.5], []) < concentrated_neg_loglik(y, [-0.5], [])