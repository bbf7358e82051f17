# -*- coding: utf-8 -*-
"""
test_classification.py

@author: LKouadio <etanoyau@gmail.com>
"""
import pandas as pd
import pytest
from sklearn.ensemble import RandomForestRegressor
from sklearn.pipeline import Pipeline

from statnotes.datasets import load_iris, simulate_customers, simulate_housing
from statnotes.exceptions import EstimatorError
from statnotes.models import (
    feature_importances,
    fit_classifier,
    fit_regressor,
    make_estimator,
    tune_hyperparameters,
)


@pytest.fixture(scope="module")
def iris():
    return load_iris()


def test_make_estimator_pipelines_and_seeds():
    svm = make_estimator("svm", C=10.0)
    assert isinstance(svm, Pipeline)
    assert svm.named_steps["model"].C == 10.0
    forest = make_estimator("random_forest", task="regression", seed=5,
                            n_estimators=20)
    assert isinstance(forest, RandomForestRegressor)
    assert forest.random_state == 5


def test_make_estimator_errors():
    with pytest.raises(EstimatorError, match="Unknown estimator"):
        make_estimator("xgboost")
    with pytest.raises(EstimatorError, match="no regression"):
        make_estimator("lda", task="regression")


@pytest.mark.parametrize("name", ["svm", "knn", "lda", "random_forest"])
def test_fit_classifier_on_iris(iris, name):
    res = fit_classifier(name, "species ~ .", iris, cv=5, seed=0)
    assert res.metrics.accuracy > 0.85
    assert len(res.test) == 45
    assert list(res.confusion.index) == ["setosa", "versicolor", "virginica"]
    assert int(res.confusion.to_numpy().sum()) == 45
    assert list(res.cv_scores.columns) == ["accuracy", "balanced_accuracy"]
    assert len(res.cv_scores) == 5


def test_fit_classifier_without_cv(iris):
    res = fit_classifier("knn", "species ~ petal_length + petal_width", iris,
                         cv=None, seed=1, n_neighbors=3)
    assert res.cv_scores is None
    assert res.model.feature_names_ == ["petal_length", "petal_width"]
    assert res.y_pred.index.equals(res.y_test.index)


def test_fit_classifier_is_reproducible(iris):
    a = fit_classifier("random_forest", "species ~ .", iris, cv=3, seed=4,
                       n_estimators=25)
    b = fit_classifier("random_forest", "species ~ .", iris, cv=3, seed=4,
                       n_estimators=25)
    pd.testing.assert_frame_equal(a.cv_scores, b.cv_scores)
    assert a.metrics.accuracy == b.metrics.accuracy


def test_fit_regressor_housing():
    housing = simulate_housing(300, seed=0)
    res = fit_regressor("gradient_boosting", "price ~ .", housing, cv=3, seed=0,
                        n_estimators=100)
    assert res.metrics.r2 > 0.7
    assert {"r2", "rmse"} == set(res.cv_scores.columns)
    assert (res.cv_scores["rmse"] > 0).all()


def test_feature_importances_forest_and_lda(iris):
    forest = fit_classifier("random_forest", "species ~ .", iris, cv=None,
                            seed=0, n_estimators=50)
    importance = feature_importances(forest.model)
    assert importance.name == "importance"
    assert importance.index[0].startswith("petal")
    assert importance.sum() == pytest.approx(1.0)
    assert importance.is_monotonic_decreasing

    lda = fit_classifier("lda", "species ~ .", iris, cv=None, seed=0)
    assert len(feature_importances(lda.model)) == 4


def test_feature_importances_unsupported(iris):
    knn = fit_classifier("knn", "species ~ .", iris, cv=None, seed=0)
    with pytest.raises(EstimatorError):
        feature_importances(knn.model)


def test_tune_hyperparameters_knn():
    customers = simulate_customers(200, seed=0)
    res = tune_hyperparameters(
        "knn", "segment ~ age + income + spending + visits", customers,
        {"n_neighbors": [1, 5, 15]}, cv=4, seed=0)
    assert set(res.best_params) == {"n_neighbors"}
    assert res.best_params["n_neighbors"] in (1, 5, 15)
    assert list(res.results.columns) == [
        "n_neighbors", "mean_test_score", "std_test_score", "rank_test_score"]
    assert res.results["rank_test_score"].iloc[0] == 1
    assert res.best_score == pytest.approx(res.results["mean_test_score"].max())


def test_tune_hyperparameters_regression_without_pipeline():
    housing = simulate_housing(120, seed=1)
    res = tune_hyperparameters(
        "random_forest", "price ~ size + age", housing,
        {"max_depth": [2, 4]}, task="regression", cv=3, seed=0)
    assert res.best_params["max_depth"] in (2, 4)
    assert "max_depth" in res.results.columns


if __name__ == '__main__':
    pytest.main([__file__])
