# -*- coding: utf-8 -*-
"""
test_regression.py

@author: LKouadio <etanoyau@gmail.com>
"""
import numpy as np
import pytest

from statnotes.compat.sklearn import InvalidParameterError
from statnotes.datasets import load_mtcars, simulate_admissions, simulate_growth
from statnotes.exceptions import HeaderError
from statnotes.models import (
    coefficient_table,
    compare_models,
    fit_logistic,
    fit_ols,
    fit_polynomial,
    fit_quantile,
    fit_regularized,
    odds_ratios,
)


@pytest.fixture(scope="module")
def cars():
    return load_mtcars()


def test_fit_ols_mtcars(cars):
    fit = fit_ols("mpg ~ wt", cars)
    assert fit.params["wt"] == pytest.approx(-5.3445, abs=1e-4)
    assert fit.params["Intercept"] == pytest.approx(37.2851, abs=1e-4)
    assert fit.rsquared == pytest.approx(0.7528, abs=1e-4)
    assert int(fit.nobs) == 32


def test_fit_ols_dot_formula(cars):
    fit = fit_ols("mpg ~ . - model", cars)
    assert len(fit.params) == 11
    assert fit.rsquared == pytest.approx(0.869, abs=1e-3)


def test_fit_polynomial_recovers_curvature():
    growth = simulate_growth(200, noise=0.5, seed=0)
    fit = fit_polynomial(growth, "dose", "growth", degree=2)
    assert fit.params["I(dose ** 2)"] == pytest.approx(-0.35, abs=0.05)
    assert fit.params["dose"] == pytest.approx(4.0, abs=0.4)


def test_fit_polynomial_validation(cars):
    with pytest.raises(HeaderError):
        fit_polynomial(cars, "weight", "mpg")
    with pytest.raises(InvalidParameterError):
        fit_polynomial(cars, "wt", "mpg", degree=0)


def test_compare_models_nested(cars):
    small = fit_ols("mpg ~ wt", cars)
    large = fit_ols("mpg ~ wt + hp", cars)
    table = compare_models(small, large)
    assert table.shape[0] == 2
    assert table["Pr(>F)"].iloc[1] < 0.01
    single = compare_models(large)
    assert "wt" in single.index
    with pytest.raises(ValueError):
        compare_models()


def test_fit_logistic_and_odds_ratios():
    admissions = simulate_admissions(2000, seed=0)
    fit = fit_logistic("admit ~ gre + gpa + C(rank)", admissions)
    assert fit.params["gpa"] == pytest.approx(1.2, abs=0.4)
    assert fit.params["C(rank)[T.4]"] < 0
    ratios = odds_ratios(fit)
    assert list(ratios.columns) == ["odds_ratio", "lower", "upper", "pvalue"]
    assert np.allclose(ratios["odds_ratio"], np.exp(fit.params))
    assert (ratios["lower"] <= ratios["odds_ratio"]).all()
    assert (ratios["odds_ratio"] <= ratios["upper"]).all()


def test_fit_quantile(cars):
    median = fit_quantile("mpg ~ wt", cars, q=0.5)
    assert median.params["wt"] < 0
    with pytest.raises(InvalidParameterError):
        fit_quantile("mpg ~ wt", cars, q=1.0)


@pytest.mark.parametrize("kind", ["ridge", "lasso", "elasticnet"])
def test_fit_regularized(cars, kind):
    res = fit_regularized("mpg ~ . - model", cars, kind=kind, cv=5, seed=0)
    assert res.alpha > 0
    assert len(res.coefficients) == 10
    assert res.n_nonzero <= 10
    assert res.coefficients["wt"] <= 0
    pred = res.model.predict(cars)
    assert np.corrcoef(pred, cars["mpg"])[0, 1] > 0.85


def test_coefficient_table(cars):
    table = coefficient_table(fit_ols("mpg ~ wt", cars))
    assert list(table.columns) == [
        "estimate", "std_error", "statistic", "pvalue", "lower", "upper"]
    assert table.loc["wt", "lower"] < table.loc["wt", "estimate"] < table.loc["wt", "upper"]
    assert table.loc["wt", "std_error"] == pytest.approx(0.5591, abs=1e-4)


if __name__ == '__main__':
    pytest.main([__file__])
