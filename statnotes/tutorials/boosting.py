# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Gradient boosting against a linear baseline."""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from ..datasets import simulate_housing
from ..models import (
    feature_importances,
    fit_ols,
    fit_regressor,
    regression_metrics,
    split_data,
)
from ..narrative import format_number
from ..plot import plot_feature_importance, plot_predicted_vs_actual
from ._registry import register


@register(
    "boosting",
    "Gradient boosting",
    tags=("regression", "ensemble"),
    requires=("scikit-learn", "statsmodels"),
)
def build(doc, seed):
    """
    Predict house prices with gradient-boosted trees and measure the gain
    over a linear model fitted on the same training houses.
    """
    housing = simulate_housing(seed=seed)
    doc.output(housing.describe())

    doc.heading("Linear baseline")
    train, test = split_data(housing, "price", test_size=0.3, seed=seed)
    ols = fit_ols("price ~ size + rooms + age + center + distance", train)
    baseline = regression_metrics(test["price"], ols.predict(test),
                                  title="Linear model, test set")
    doc.output(baseline)
    doc.text(
        f"A straight-line model reaches R-squared = "
        f"{format_number(baseline.r2)} on the held-out houses, with an RMSE "
        f"of {format_number(baseline.rmse, 1)} thousand.")

    doc.heading("Boosted trees")
    boost = fit_regressor(
        "gradient_boosting", "price ~ .", housing, test_size=0.3, cv=5,
        seed=seed, n_estimators=400, learning_rate=0.05, max_depth=3,
        subsample=0.8)
    doc.code(
        'boost = fit_regressor("gradient_boosting", "price ~ .", housing,\n'
        '                      n_estimators=400, learning_rate=0.05,\n'
        '                      max_depth=3, subsample=0.8)')
    doc.output(boost.cv_scores.agg(["mean", "std"]))
    doc.output(boost.metrics)
    gain = 1 - boost.metrics.rmse / baseline.rmse
    doc.text(
        f"The test RMSE goes from {format_number(baseline.rmse, 1)} for the "
        f"linear model to {format_number(boost.metrics.rmse, 1)} for boosting "
        f"({100 * abs(gain):.0f}% {'lower' if gain >= 0 else 'higher'}). Each shallow "
        "tree corrects the residuals of the previous ones, which lets the "
        "ensemble follow the curvature in size and its interaction with the "
        "city centre.")

    # test error after each boosting stage
    estimator = boost.model.estimator_
    X_test = boost.model.transform(boost.test)
    staged = [np.sqrt(np.mean((boost.y_test.to_numpy() - pred) ** 2))
              for pred in estimator.staged_predict(X_test)]
    stages = pd.Series(staged, index=np.arange(1, len(staged) + 1),
                       name="test_rmse")
    fig, axes = plt.subplots(1, 2, figsize=(10, 4))
    axes[0].plot(stages.index, stages.to_numpy())
    axes[0].axhline(baseline.rmse, linestyle="--", color="gray",
                    label="linear model")
    axes[0].set_xlabel("boosting iterations")
    axes[0].set_ylabel("test RMSE")
    axes[0].legend()
    plot_predicted_vs_actual(boost.y_test, boost.y_pred, ax=axes[1])
    doc.figure(fig, "boosting", "Test error along the iterations and "
               "predicted against observed prices")
    doc.text(
        f"The test error levels off after about {int(stages.idxmin())} "
        "iterations; the small learning rate keeps later trees from "
        "overfitting quickly.")

    importance = feature_importances(boost.model)
    doc.figure(plot_feature_importance(importance), "importance",
               "Importance of each predictor")

    doc.record("ols_rmse", baseline.rmse)
    doc.record("boost_rmse", boost.metrics.rmse)
    doc.record("boost_r2", boost.metrics.r2)
    doc.record("best_iteration", int(stages.idxmin()))
    doc.record("top_feature", importance.index[0])
