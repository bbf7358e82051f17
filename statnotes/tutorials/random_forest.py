# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Random forests for classification and regression."""

from ..datasets import simulate_customers, simulate_housing
from ..models import feature_importances, fit_classifier, fit_regressor
from ..narrative import describe_metrics, format_number
from ..plot import (
    plot_confusion_matrix,
    plot_feature_importance,
    plot_predicted_vs_actual,
)
from ._registry import register


@register(
    "random_forest",
    "Random forests",
    tags=("classification", "regression", "ensemble"),
    requires=("scikit-learn",),
)
def build(doc, seed):
    """
    Grow forests of decorrelated decision trees to classify customer
    segments and to predict house prices, and read which predictors the
    forests rely on.
    """
    doc.heading("Classifying segments")
    customers = simulate_customers(seed=seed)
    clf = fit_classifier("random_forest", "segment ~ .", customers,
                         test_size=0.3, cv=5, seed=seed, n_estimators=300)
    doc.code(
        'clf = fit_classifier("random_forest", "segment ~ .", customers,\n'
        f'                     cv=5, seed={seed}, n_estimators=300)')
    doc.text(
        "The categorical channel enters through dummy columns; trees need no "
        "scaling of the numeric predictors.")
    doc.output(clf.metrics)
    doc.figure(plot_confusion_matrix(clf.confusion), "confusion",
               "Confusion matrix of the forest")
    doc.text(describe_metrics(clf.metrics))

    importance = feature_importances(clf.model)
    doc.table(importance.to_frame(), floatfmt=".3f")
    doc.figure(plot_feature_importance(importance), "importance",
               "Impurity-based importance of each predictor")
    doc.text(
        f"{importance.index[0]} carries the most information "
        f"({format_number(importance.iloc[0])} of the total impurity "
        "decrease). Impurity importances favour continuous predictors with "
        "many split points, so the channel dummies rank low even when the "
        "channel is related to the segment.")

    doc.heading("Predicting prices")
    housing = simulate_housing(seed=seed)
    reg = fit_regressor("random_forest", "price ~ .", housing, test_size=0.3,
                        cv=5, seed=seed, n_estimators=300)
    doc.output(reg.cv_scores.agg(["mean", "std"]))
    doc.output(reg.metrics)
    doc.figure(plot_predicted_vs_actual(reg.y_test, reg.y_pred),
               "predicted", "Predicted against observed prices")
    doc.text(
        describe_metrics(reg.metrics)
        + " The forest picks up the saturating effect of size and its "
        "interaction with the city centre without being told about them.")
    reg_importance = feature_importances(reg.model)
    doc.figure(plot_feature_importance(reg_importance, color="tab:green"),
               "price-importance", "Importance of each predictor of price")

    doc.record("accuracy", clf.metrics.accuracy)
    doc.record("kappa", clf.metrics.kappa)
    doc.record("top_feature", importance.index[0])
    doc.record("rmse", reg.metrics.rmse)
    doc.record("r2", reg.metrics.r2)
    doc.record("top_price_feature", reg_importance.index[0])
