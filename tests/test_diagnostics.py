import math

import pytest

from tsmodels.diagnostics import chi2_survival, erf, ljung_box, phi_cdf

_MASK = (1 << 64) - 1
_U64_MAX = float(_MASK)


def _normals(count, seed=1):
    s = seed

    def step():
        nonlocal s
        s ^= (s << 13) & _MASK
        s ^= s >> 7
        s ^= (s << 17) & _MASK
        return s

    out = []
    for _ in range(count):
        u1 = max(step() / _U64_MAX, 1e-300)
        u2 = step() / _U64_MAX
        out.append(math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2))
    return out


def test_erf_known_values():
    assert abs(erf(0.0)) < 1e-7
    assert abs(erf(1.0) - 0.8427007929497149) < 1e-6
    assert abs(erf(-1.0) + 0.8427007929497149) < 1e-6
    assert abs(erf(5.0) - 1.0) < 1e-6


def test_erf_matches_math_erf():
    for x in (-2.5, -0.3, 0.2, 0.7, 1.9):
        assert abs(erf(x) - math.erf(x)) < 2e-7


def test_phi_cdf_symmetry_and_centre():
    assert abs(phi_cdf(0.0) - 0.5) < 1e-7
    assert abs(phi_cdf(1.959963984540054) - 0.975) < 1e-6
    assert abs(phi_cdf(1.3) + phi_cdf(-1.3) - 1.0) < 1e-12


def test_chi2_survival_known_values():
    assert abs(chi2_survival(0.4549, 1.0) - 0.5) < 0.05
    assert abs(chi2_survival(3.841, 1.0) - 0.05) < 0.01
    assert abs(chi2_survival(23.21, 10.0) - 0.01) < 0.01


@pytest.mark.parametrize(
    "x, df", [(0.0, 3.0), (-1.0, 3.0), (math.inf, 3.0), (math.nan, 3.0), (2.0, 0.0)]
)
def test_chi2_survival_degenerate_inputs(x, df):
    assert chi2_survival(x, df) == 1.0


def test_ljung_box_white_noise_not_rejected():
    e = _normals(500)
    r = ljung_box(e, 10, 0)
    assert r.p_value > 0.01


def test_ljung_box_autocorrelated_rejected():
    eps = _normals(499)
    y = [0.0]
    for v in eps:
        y.append(0.7 * y[-1] + v)
    r = ljung_box(y, 10, 0)
    assert r.p_value < 0.01


def test_ljung_box_df_clamped_and_reduced():
    e = _normals(100)
    assert ljung_box(e, 10, 3).df == 7
    assert ljung_box(e, 2, 5).df == 1


def test_ljung_box_constant_series_has_zero_q():
    r = ljung_box([3.0] * 20, 5, 0)
    assert r.q == 0.0
    assert r.p_value == 1.0


def test_ljung_box_known_short_series():
    # Centered: [-1.5, -0.5, 0.5, 1.5], denom 5, lag-1 sum 1.25.
    r = ljung_box([1.0, 2.0, 3.0, 4.0], 1, 0)
    assert abs(r.q - 4 * 6 * (0.25 ** 2) / 3) < 1e-12
    assert r.df == 1


def test_ljung_box_lags_beyond_length_are_ignored():
    data = [1.0, 2.0, 3.0, 4.0]
    assert ljung_box(data, 50, 0).q == ljung_box(data, 3, 0).q