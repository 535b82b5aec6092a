import math

import pytest

from tsmodels.holt_winters import (
    HoltWintersError,
    HoltWintersFit,
    HoltWintersOpts,
    holt_winters,
)
from tsmodels.seasonal import DecomposeMode


def test_ses_first_fitted_is_y0():
    fit = holt_winters([1.0, 2.0, 3.0, 4.0], HoltWintersOpts(0.5))
    assert len(fit.fitted) == 4
    assert fit.fitted[0] == 1.0


def test_holt_linear_runs():
    fit = holt_winters([1.0, 2.0, 3.0, 4.0, 5.0], HoltWintersOpts(0.5, beta=0.3))
    assert len(fit.fitted) == 5
    assert all(math.isfinite(v) for v in fit.fitted)


def test_seasonal_too_short():
    opts = HoltWintersOpts(0.5, beta=0.1, gamma=0.3, seasonal_periods=4)
    with pytest.raises(HoltWintersError) as info:
        holt_winters([1.0, 2.0, 3.0, 4.0, 5.0], opts)
    assert info.value.reason == "too_short"
    assert info.value.n == 5
    assert info.value.min_length == 8


def test_holt_linear_too_short():
    with pytest.raises(HoltWintersError) as info:
        holt_winters([1.0], HoltWintersOpts(0.5, beta=0.2))
    assert info.value.reason == "too_short"
    assert info.value.min_length == 2


def test_invalid_alpha_errors():
    with pytest.raises(HoltWintersError) as info:
        holt_winters([1.0, 2.0], HoltWintersOpts(1.5))
    assert info.value.reason == "invalid_alpha"
    assert info.value.value == 1.5


@pytest.mark.parametrize(
    "opts, reason",
    [
        (HoltWintersOpts(0.5, beta=-0.1), "invalid_beta"),
        (HoltWintersOpts(0.5, gamma=2.0), "invalid_gamma"),
    ],
)
def test_invalid_beta_gamma(opts, reason):
    with pytest.raises(HoltWintersError) as info:
        holt_winters([1.0, 2.0], opts)
    assert info.value.reason == reason


def test_multiplicative_rejects_non_positive():
    opts = HoltWintersOpts(
        0.5, beta=0.1, gamma=0.3, seasonal_periods=2, mode=DecomposeMode.MULTIPLICATIVE
    )
    with pytest.raises(HoltWintersError) as info:
        holt_winters([1.0, 0.0, 2.0, 3.0], opts)
    assert info.value.reason == "non_positive"
    assert info.value.minimum == 0.0


def test_rejects_nan():
    with pytest.raises(HoltWintersError) as info:
        holt_winters([1.0, math.nan, 3.0], HoltWintersOpts(0.5))
    assert info.value.reason == "non_finite"


def test_empty_input_returns_empty():
    fit = holt_winters([], HoltWintersOpts(0.5))
    assert fit.fitted == []
    assert fit.forecast(3) == [0.0, 0.0, 0.0]


def test_ses_forecast_is_flat_at_final_level():
    fit = holt_winters([1.0, 2.0, 3.0, 4.0], HoltWintersOpts(0.5))
    for v in fit.forecast(5):
        assert abs(v - fit.level) < 1e-12


def test_ses_known_values():
    fit = holt_winters([1.0, 2.0, 3.0, 4.0], HoltWintersOpts(0.5))
    assert fit.fitted == [1.0, 1.0, 1.5, 2.25]
    assert fit.level == 3.125
    assert fit.trend == 0.0


def test_holt_forecast_extrapolates_linearly():
    fit = holt_winters([1.0, 2.0, 3.0, 4.0, 5.0], HoltWintersOpts(0.5, beta=0.5))
    for h, fc in enumerate(fit.forecast(3)):
        expected = fit.level + (h + 1) * fit.trend
        assert abs(fc - expected) < 1e-12


def test_additive_seasonal_forecast_cycles_through_indices():
    y = [10.0, 20.0, 10.0, 20.0, 10.0, 20.0, 10.0, 20.0]
    opts = HoltWintersOpts(
        alpha=0.5, beta=0.0, gamma=0.5, seasonal_periods=2, mode=DecomposeMode.ADDITIVE
    )
    fit = holt_winters(y, opts)
    for a, e in zip(fit.forecast(4), [10.0, 20.0, 10.0, 20.0]):
        assert abs(a - e) < 1e-12


def test_multiplicative_seasonal_forecast_cycles():
    y = [10.0, 20.0] * 4
    opts = HoltWintersOpts(
        alpha=0.5, gamma=0.5, seasonal_periods=2, mode=DecomposeMode.MULTIPLICATIVE
    )
    fit = holt_winters(y, opts)
    for a, e in zip(fit.forecast(4), [10.0, 20.0, 10.0, 20.0]):
        assert abs(a - e) < 1e-9
    for a, e in zip(fit.fitted, y):
        assert abs(a - e) < 1e-9


def test_seasonal_forecast_starts_at_next_phase():
    y = [10.0, 20.0, 30.0] * 3 + [10.0]
    opts = HoltWintersOpts(alpha=0.5, gamma=0.5, seasonal_periods=3)
    fit = holt_winters(y, opts)
    assert fit.next_index == 1
    for a, e in zip(fit.forecast(3), [20.0, 30.0, 10.0]):
        assert abs(a - e) < 1e-9


def test_forecast_on_hand_built_state():
    fit = HoltWintersFit(
        fitted=[],
        opts=HoltWintersOpts(0.5, beta=0.1, gamma=0.1, seasonal_periods=2),
        level=100.0,
        trend=1.0,
        seasonal=[-3.0, 3.0],
        next_index=1,
    )
    assert fit.forecast(3) == [104.0, 99.0, 106.0]