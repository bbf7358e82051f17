# -*- coding: utf-8 -*-
"""
test_evaluation.py

@author: LKouadio <etanoyau@gmail.com>
"""
import numpy as np
import pandas as pd
import pytest
from sklearn.linear_model import LinearRegression
from sklearn.svm import SVC

from statnotes.api.formatter import MetricFormatter
from statnotes.datasets import load_iris, load_mtcars
from statnotes.exceptions import HeaderError
from statnotes.models import (
    classification_metrics,
    confusion_table,
    cross_validate_model,
    regression_metrics,
    split_data,
)


def test_split_data_stratified():
    iris = load_iris()
    train, test = split_data(iris, "species", test_size=0.3, stratify=True, seed=0)
    assert len(train) == 105 and len(test) == 45
    assert test["species"].value_counts().tolist() == [15, 15, 15]
    assert not set(train.index) & set(test.index)


def test_split_data_reproducible():
    cars = load_mtcars()
    a, _ = split_data(cars, "mpg", seed=3)
    b, _ = split_data(cars, "mpg", seed=3)
    assert a.index.equals(b.index)
    with pytest.raises(HeaderError):
        split_data(cars, "price")


def test_cross_validate_model_classifier():
    iris = load_iris()
    folds, summary = cross_validate_model(
        SVC(), iris.drop(columns="species"), iris["species"], cv=5, seed=0)
    assert list(folds.columns) == ["accuracy"]
    assert folds.index.tolist() == [1, 2, 3, 4, 5]
    assert summary.loc["accuracy", "mean"] > 0.9


def test_cross_validate_model_regressor_multiple_scores():
    cars = load_mtcars()
    folds, summary = cross_validate_model(
        LinearRegression(), cars[["wt", "hp"]], cars["mpg"], cv=4,
        scoring=["r2", "neg_mean_absolute_error"], seed=1)
    assert set(folds.columns) == {"r2", "neg_mean_absolute_error"}
    assert (folds["neg_mean_absolute_error"] < 0).all()
    assert list(summary.columns) == ["mean", "std"]


def test_classification_metrics():
    m = classification_metrics(["a", "a", "b", "b"], ["a", "a", "b", "a"])
    assert isinstance(m, MetricFormatter)
    assert m.accuracy == pytest.approx(0.75)
    assert m.kappa == pytest.approx(0.5)
    assert m.balanced_accuracy == pytest.approx(0.75)


def test_regression_metrics():
    m = regression_metrics(pd.Series([1.0, 2.0, 3.0]), np.array([1.0, 2.0, 3.0]))
    assert m.rmse == 0.0 and m.mae == 0.0 and m.r2 == 1.0


def test_confusion_table_orders_labels():
    y_true = pd.Series(pd.Categorical(["b", "a", "c"], categories=["c", "b", "a"]))
    table = confusion_table(y_true, ["b", "a", "a"])
    assert list(table.index) == ["c", "b", "a"]
    assert table.loc["c", "a"] == 1
    assert table.index.name == "reference"
    assert table.columns.name == "prediction"
    assert int(np.trace(table.to_numpy())) == 2


if __name__ == '__main__':
    pytest.main([__file__])
