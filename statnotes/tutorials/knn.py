# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""k-nearest neighbours classification."""

import matplotlib.pyplot as plt

from ..datasets import simulate_customers
from ..models import fit_classifier, tune_hyperparameters
from ..narrative import describe_confusion, describe_metrics, format_number
from ..plot import plot_confusion_matrix
from ._registry import register

FORMULA = "segment ~ age + income + spending + visits"


@register(
    "knn",
    "k-nearest neighbours",
    tags=("classification",),
    requires=("scikit-learn",),
)
def build(doc, seed):
    """
    Assign customers to market segments by majority vote among their
    nearest neighbours, choosing the number of neighbours by
    cross-validation.
    """
    customers = simulate_customers(seed=seed)
    doc.code(f"customers = simulate_customers(seed={seed})")
    doc.output(customers.head())
    doc.output(customers["segment"].value_counts())
    doc.text(
        "Age, income, spending and visits live on very different scales, so "
        "the predictors are standardized before distances are computed.")

    doc.heading("Choosing k")
    result = fit_classifier("knn", FORMULA, customers, test_size=0.3, cv=10,
                            seed=seed, n_neighbors=5)
    grid = {"n_neighbors": list(range(1, 31, 2))}
    tuned = tune_hyperparameters("knn", FORMULA, result.train, grid, cv=10,
                                 seed=seed)
    doc.code(
        f"tuned = tune_hyperparameters(\"knn\", \"{FORMULA}\", train,\n"
        "                             {\"n_neighbors\": list(range(1, 31, 2))},"
        " cv=10)")
    curve = tuned.results.astype({"n_neighbors": int}).sort_values("n_neighbors")
    fig, ax = plt.subplots(figsize=(6, 4))
    ax.errorbar(curve["n_neighbors"], curve["mean_test_score"],
                yerr=curve["std_test_score"], marker="o", capsize=3)
    ax.set_xlabel("number of neighbours k")
    ax.set_ylabel("cross-validated accuracy")
    doc.figure(fig, "k", "Accuracy against the number of neighbours")
    best_k = tuned.best_params["n_neighbors"]
    doc.text(
        f"Accuracy peaks at k = {best_k} "
        f"({format_number(tuned.best_score)}). Very small k follows the noise "
        "of single customers; very large k blurs the segment boundaries.")

    doc.heading("Final model")
    final = fit_classifier("knn", FORMULA, customers, test_size=0.3, cv=10,
                           seed=seed, n_neighbors=best_k)
    doc.output(final.metrics)
    doc.table(final.confusion)
    doc.figure(plot_confusion_matrix(final.confusion), "confusion",
               f"Confusion matrix with k = {best_k}")
    doc.text(
        describe_metrics(final.metrics) + " "
        + describe_confusion(final.confusion))

    doc.record("best_k", best_k)
    doc.record("cv_accuracy", float(tuned.best_score))
    doc.record("accuracy", final.metrics.accuracy)
    doc.record("kappa", final.metrics.kappa)
    doc.record("accuracy_k5", result.metrics.accuracy)
