# -*- coding: utf-8 -*-
"""
test_narrative.py

@author: LKouadio <etanoyau@gmail.com>
"""
import numpy as np
import pandas as pd
import pytest

from statnotes.api.structures import Boxspace
from statnotes.datasets import load_mtcars, simulate_admissions
from statnotes.models import fit_logistic, fit_quantile
from statnotes.narrative import (
    correlation_strength,
    describe_clusters,
    describe_coefficients,
    describe_confusion,
    describe_metrics,
    describe_model_fit,
    describe_variance,
    format_number,
    format_pvalue,
    kappa_agreement,
    significance_phrase,
)


@pytest.mark.parametrize("value, expected", [
    (None, "NA"),
    (np.nan, "NA"),
    (np.inf, "infinity"),
    (np.int64(3), "3"),
    (123456.7, "123,457"),
    (0.5, "0.500"),
    (0.0, "0.000"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_pvalues_and_significance():
    assert format_pvalue(0.5) == "p = 0.500"
    assert format_pvalue(0.004, threshold=0.01) == "p < 0.01"
    assert significance_phrase(0.03, alpha=0.01).startswith("not statistically")
    with pytest.raises(ValueError):
        significance_phrase(0.03, alpha=1.5)


def test_correlation_strength_and_kappa():
    assert correlation_strength(0.45) == "moderate positive"
    assert correlation_strength(-0.2) == "weak negative"
    with pytest.raises(ValueError):
        correlation_strength(1.2)
    assert kappa_agreement(-0.1) == "poor"
    assert kappa_agreement(0.1) == "slight"
    assert kappa_agreement(0.5) == "moderate"
    assert kappa_agreement(0.7) == "substantial"


def test_describe_coefficients_odds():
    table = pd.DataFrame({"odds_ratio": [0.5, 2.0], "pvalue": [0.01, 0.2]},
                         index=["Intercept", "gpa"])
    assert describe_coefficients(table, response="admission", odds=True) == (
        "Each one-unit increase in gpa multiplies the odds of admission by"
        " 2.000 (a 100.0% increase); the effect is not statistically"
        " significant at the 5% level (p = 0.200).")


def test_describe_model_fit_kinds():
    admissions = simulate_admissions(400, seed=0)
    logit = fit_logistic("admit ~ gpa", admissions)
    assert describe_model_fit(logit).startswith("The logit model has a McFadden")
    median = fit_quantile("mpg ~ wt", load_mtcars(), q=0.5)
    assert describe_model_fit(median).startswith("The quantile regression")
    assert "32 observations" in describe_model_fit(median)


def test_describe_metrics():
    text = describe_metrics({"rmse": 1.5, "mae": 1.0, "r2": 0.8})
    assert text == (
        "On the held-out data the root mean squared error is 1.500 (mean"
        " absolute error 1.000) and the model explains 80.0% of the variance"
        " of the response.")
    assert "balanced accuracy is 0.750" in describe_metrics(
        {"accuracy": 0.8, "balanced_accuracy": 0.75})
    with pytest.raises(ValueError):
        describe_metrics({"auc": 0.9})


def test_describe_confusion():
    cm = pd.DataFrame([[10, 0, 0], [0, 8, 2], [0, 1, 9]],
                      index=["setosa", "versicolor", "virginica"],
                      columns=["setosa", "versicolor", "virginica"])
    assert describe_confusion(cm) == (
        "The 3 errors mistake versicolor for virginica and virginica for"
        " versicolor; setosa is always recognised.")
    cm.loc["setosa", "virginica"] = 1
    assert "always recognised" not in describe_confusion(cm)
    assert describe_confusion(pd.DataFrame([[3, 0], [0, 2]])) == (
        "Every case of the test set is classified correctly.")


def test_describe_clusters_without_silhouette():
    res = Boxspace(sizes=pd.Series([300]), silhouette=float("nan"))
    assert describe_clusters(res) == "k-means found 1 clusters of 300 observations."
    weak = Boxspace(sizes=pd.Series([10, 12]), silhouette=0.3)
    assert describe_clusters(weak).endswith("a weak structure that could be artificial.")


def test_describe_variance():
    assert describe_variance([0.5, 0.2, 0.1]) == (
        "The first component explains 50.0% of the variance and the first two"
        " together 70.0%. Three components are enough to retain 80% of the"
        " variance.")
    assert describe_variance([0.3, 0.2]).endswith(
        "All 2 components together retain 50.0% of the variance.")
    frame = pd.DataFrame({"ratio": [0.9, 0.1]})
    assert "One component is enough" in describe_variance(frame)
    with pytest.raises(ValueError):
        describe_variance([])


if __name__ == '__main__':
    pytest.main([__file__])
