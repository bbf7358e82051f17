# -*- coding: utf-8 -*-
"""
test_formula.py

@author: LKouadio <etanoyau@gmail.com>
"""
import numpy as np
import pandas as pd
import pytest
from sklearn.exceptions import NotFittedError
from sklearn.linear_model import LinearRegression, LogisticRegression

from statnotes.datasets import load_iris, load_mtcars
from statnotes.exceptions import FormulaError
from statnotes.models.formula import (
    FormulaModel,
    design_matrices,
    expand_formula,
    split_formula,
)


def test_split_formula():
    assert split_formula("  y ~ a + b ") == ("y", "a + b")


@pytest.mark.parametrize("formula", ["y a + b", "y ~ a ~ b", " ~ a", "y ~ ", 3])
def test_split_formula_rejects_malformed(formula):
    with pytest.raises(FormulaError):
        split_formula(formula)


def test_expand_formula_dot_and_removal():
    df = pd.DataFrame(columns=["y", "a", "b", "c"])
    assert expand_formula("y ~ .", df) == "y ~ a + b + c"
    assert expand_formula("y ~ . - b - c", df) == "y ~ a"
    assert expand_formula("y ~ a + b", df) == "y ~ a + b"


def test_expand_formula_keeps_arithmetic_inside_calls():
    df = pd.DataFrame(columns=["y", "a", "b"])
    assert expand_formula("y ~ . + I(a - b)", df) == "y ~ a + b + I(a - b)"
    assert expand_formula("y ~ . - a + I(a - b)", df) == "y ~ b + I(a - b)"


def test_expand_formula_quotes_odd_names():
    df = pd.DataFrame(columns=["y", "sepal length", "b"])
    assert expand_formula("y ~ .", df) == 'y ~ Q("sepal length") + b'


def test_expand_formula_empty_expansion():
    with pytest.raises(FormulaError, match="expands to no column"):
        expand_formula("y ~ .", pd.DataFrame(columns=["y"]))


def test_design_matrices_has_no_intercept():
    y, X, info = design_matrices("mpg ~ wt + hp", load_mtcars())
    assert list(X.columns) == ["wt", "hp"]
    assert y.name == "mpg"
    assert len(y) == len(X) == 32


def test_design_matrices_categorical_and_missing():
    df = pd.DataFrame({
        "y": [1.0, 2.0, np.nan, 4.0, 5.0],
        "g": ["a", "b", "a", "b", "a"],
        "x": [0.1, 0.2, 0.3, np.nan, 0.5],
    })
    y, X, _ = design_matrices("y ~ g + x", df)
    assert list(X.index) == [0, 1, 4]
    assert y.index.equals(X.index)
    assert X.shape[1] == 3


def test_formula_model_linear_regression():
    cars = load_mtcars()
    model = FormulaModel(LinearRegression(), "mpg ~ wt").fit(cars)
    assert model.feature_names_ == ["wt"]
    assert model.estimator_.coef_[0] == pytest.approx(-5.344472, rel=1e-5)
    assert model.estimator_.intercept_ == pytest.approx(37.285126, rel=1e-5)
    pred = model.predict(pd.DataFrame({"wt": [3.0]}))
    assert pred[0] == pytest.approx(37.285126 - 3 * 5.344472, rel=1e-5)
    assert "FormulaModel(LinearRegression()" in repr(model)


def test_formula_model_classifier_keeps_labels():
    iris = load_iris()
    model = FormulaModel(LogisticRegression(max_iter=500), "species ~ .").fit(iris)
    assert list(model.classes_) == ["setosa", "versicolor", "virginica"]
    proba = model.predict_proba(iris.head())
    assert proba.shape == (5, 3)
    assert model.response(iris.head()).tolist() == ["setosa"] * 5


def test_formula_model_not_fitted():
    model = FormulaModel(LinearRegression(), "mpg ~ wt")
    with pytest.raises(NotFittedError):
        model.predict(load_mtcars())
    clf = FormulaModel(LogisticRegression(), "species ~ .")
    with pytest.raises(NotFittedError):
        clf.predict_proba(load_iris())
    with pytest.raises(NotFittedError):
        clf.classes_


if __name__ == '__main__':
    pytest.main([__file__])
