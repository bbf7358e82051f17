# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Binary logistic regression, odds ratios and classification accuracy."""

import numpy as np
import pandas as pd

from ..datasets import simulate_admissions
from ..models import (
    classification_metrics,
    confusion_table,
    fit_logistic,
    odds_ratios,
    split_data,
)
from ..narrative import (
    describe_coefficients,
    describe_metrics,
    describe_model_fit,
    format_number,
)
from ..plot import plot_confusion_matrix
from ._registry import register


@register(
    "logistic_regression",
    "Logistic regression",
    tags=("regression", "classification"),
    requires=("statsmodels", "scikit-learn"),
)
def build(doc, seed):
    """
    Model the probability of graduate admission from test score, grade
    point average and the prestige rank of the undergraduate institution.
    """
    admissions = simulate_admissions(seed=seed)
    doc.output(admissions.head())
    rate = admissions["admit"].mean()
    doc.text(
        f"{len(admissions)} applications, {100 * rate:.1f}% of them admitted. "
        "Rank is a category (1 is the most prestigious) rather than a number, "
        "so it enters the model through dummy variables.")

    doc.heading("Fitting the model")
    train, test = split_data(admissions, "admit", test_size=0.25,
                             stratify=True, seed=seed)
    fit = fit_logistic("admit ~ gre + gpa + C(rank)", train)
    doc.code('fit = fit_logistic("admit ~ gre + gpa + C(rank)", train)')
    doc.output(fit)
    doc.text(describe_model_fit(fit))

    doc.heading("Odds ratios")
    ratios = odds_ratios(fit)
    doc.table(ratios, floatfmt=".4f")
    doc.text(describe_coefficients(ratios, response="admission", odds=True))
    gpa_or = ratios.loc["gpa", "odds_ratio"]
    doc.text(
        f"For instance, one more grade point multiplies the odds of admission "
        f"by {format_number(gpa_or, 2)}, other things equal.")

    doc.heading("Prediction")
    probability = fit.predict(test)
    predicted = (probability >= 0.5).astype(int)
    metrics = classification_metrics(test["admit"], predicted,
                                     title="Logistic regression, test set")
    doc.output(metrics)
    confusion = confusion_table(test["admit"], predicted, labels=[0, 1])
    doc.table(confusion)
    doc.figure(plot_confusion_matrix(confusion), "confusion",
               "Confusion matrix at a 0.5 threshold")
    doc.text(
        describe_metrics(metrics)
        + " With a 0.5 threshold the model predicts "
        f"{int(predicted.sum())} admissions against "
        f"{int(test['admit'].sum())} observed.")

    profile = pd.DataFrame({"gre": [580] * 4, "gpa": [3.4] * 4,
                            "rank": [1, 2, 3, 4]})
    profile["probability"] = np.asarray(fit.predict(profile))
    doc.table(profile, caption="Predicted probability for an average applicant",
              index=False)

    doc.record("gpa_coef", float(fit.params["gpa"]))
    doc.record("gpa_odds_ratio", float(gpa_or))
    doc.record("accuracy", metrics.accuracy)
    doc.record("kappa", metrics.kappa)
    doc.record("admit_rate", float(rate))
