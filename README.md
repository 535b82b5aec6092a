# tsmodels

Time-series building blocks written in plain Python. The package needs only the standard library.

What it contains:

- `tsmodels.seasonal`: shared types for decomposition.
  - `DecomposeMode` (`ADDITIVE`, `MULTIPLICATIVE`)
  - `Missing` (`ERROR`, `INTERPOLATE`)
  - `Decomposition`
  - `SeasonalDecomposeOpts`
  - `interpolate_missing`
- `tsmodels.decompose`: classical moving-average seasonal decomposition (`seasonal_decompose`, `centered_ma`).
- `tsmodels.holt_winters`: Holt-Winters exponential smoothing with smoothing parameters you supply. It covers SES, Holt's linear method, and additive or multiplicative seasonal smoothing.
- `tsmodels.diagnostics`: the Ljung-Box test (`ljung_box`). It also has the helpers behind the test: `chi2_survival`, `phi_cdf` and `erf`.
- `tsmodels.transform`: PACF reparameterisation that keeps ARMA polynomials stationary and invertible.
- `tsmodels.kalman`: a companion-form Kalman filter that gives the exact concentrated ARMA likelihood.
- `tsmodels.ols`: least squares through the normal equations and a Cholesky factorisation.
- `tsmodels.nelder_mead`: a Nelder-Mead simplex minimiser.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

### Seasonal decomposition

```python
from tsmodels.decompose import seasonal_decompose
from tsmodels.seasonal import SeasonalDecomposeOpts, DecomposeMode, Missing

y = [...]  # at least two full periods
d = seasonal_decompose(
    y,
    SeasonalDecomposeOpts(period=12, mode=DecomposeMode.MULTIPLICATIVE, missing=Missing.INTERPOLATE),
)
d.trend, d.seasonal, d.residual
```

The components of the result:

- **Trend**: a centred moving average of length `period`.
- **Seasonal**: the per-phase mean of the detrended series. In additive mode it is centred to sum to zero; in multiplicative mode it is scaled so its mean is one.
- **Residual**: what is left after trend and seasonal are removed.

The first and last `period // 2` entries of `trend` and `residual` are `nan`. With `Missing.INTERPOLATE`, non-finite inputs are filled linearly, and the residual is `nan` at those positions.

`SeasonalDecomposeError` (a `ValueError`) is raised for bad input. Its `reason` attribute is one of:

- `"invalid_period"`
- `"too_short"`
- `"non_finite"`
- `"non_positive"`

### Holt-Winters

```python
from tsmodels.holt_winters import holt_winters, HoltWintersOpts
from tsmodels.seasonal import DecomposeMode

fit = holt_winters(
    [10, 20, 10, 20, 10, 20, 10, 20],
    HoltWintersOpts(alpha=0.5, gamma=0.5, seasonal_periods=2, mode=DecomposeMode.ADDITIVE),
)
fit.fitted          # one-step-ahead in-sample predictions
fit.level, fit.trend, fit.seasonal
fit.forecast(4)     # [10.0, 20.0, 10.0, 20.0]
```

`HoltWintersError` (a `ValueError`) is raised in these cases:

- a smoothing parameter lies outside `[0, 1]`;
- the input holds non-finite values;
- the series is too short: seasonal smoothing needs `2 * seasonal_periods` values, and Holt's linear method needs 2;
- multiplicative mode is used with non-positive data.

An empty series returns an empty fit and does not raise.

### Ljung-Box

```python
from tsmodels.diagnostics import ljung_box

result = ljung_box(residuals, lags=10, fitted_params=2)
result.q, result.df, result.p_value
```

`df` is `lags - fitted_params`, with a floor of 1. The p-value uses the Wilson-Hilferty approximation to the chi-squared distribution.

### PACF reparameterisation

```python
from tsmodels.transform import real_to_pacf, pacf_to_ar_poly, ar_poly_to_pacf, pacf_to_ma_poly

phi = pacf_to_ar_poly([0.4, 0.3])      # [0.28, 0.3]
ar_poly_to_pacf(phi)                   # [0.4, 0.3]
theta = pacf_to_ma_poly([0.4, -0.2])
real_to_pacf(3.0)                      # always inside (-1, 1)
```

### Kalman likelihood

```python
from tsmodels.kalman import (
    ArmaStateSpace, concentrated_neg_loglik, concentrated_sigma2, fitted_residuals,
)

nll = concentrated_neg_loglik(w, [0.6, -0.2], [0.3])
sigma2 = concentrated_sigma2(w, [0.6, -0.2], [0.3])
predicted, innovations = fitted_residuals(w, [0.6, -0.2], [0.3])

ss = ArmaStateSpace([0.7], [])
ss.lyapunov_p0()     # [[1 / (1 - 0.49)]]
ss.filter(w)         # (sum v^2 / F, sum log F)
```

`w` is a centred series that has already been differenced.

### Least squares

```python
from tsmodels.ols import solve, SingularMatrixError

beta = solve([[1.0, 0.0], [1.0, 1.0], [1.0, 2.0]], [2.0, 5.0, 8.0])  # [2.0, 3.0]
```

`solve` raises `SingularMatrixError` when `X'X` is not positive definite.

### Nelder-Mead

```python
from tsmodels.nelder_mead import minimize

x, fmin, converged = minimize(
    [0.0, 0.0], lambda v: (v[0] - 3) ** 2 + (v[1] + 2) ** 2, 1000, 1e-10
)
```

## What the package does not do

- It does not fit ARIMA or SARIMA models, select models automatically, or produce ARIMA forecasts. It only supplies the pieces such a fit is built from: the likelihood, the parameter transforms, least squares and a minimiser.
- It has no STL (LOESS-based) decomposition. Only the classical moving-average method is available.
- The Kalman filter gives the likelihood value only. There is no analytic gradient.
- There is no gradient-based optimiser. Nelder-Mead is the only minimiser.
- There is no command-line interface.