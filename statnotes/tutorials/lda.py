# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Linear discriminant analysis as classifier and projection."""

from ..analysis import lda_projection
from ..datasets import load_iris
from ..models import fit_classifier
from ..narrative import describe_metrics
from ..plot import plot_confusion_matrix, plot_lda_projection
from ._registry import register


@register(
    "lda",
    "Linear discriminant analysis",
    tags=("classification", "dimensionality"),
    requires=("scikit-learn", "seaborn"),
)
def build(doc, seed):
    """
    Separate the three iris species with linear discriminant analysis,
    first as a classifier and then as a supervised projection to two
    dimensions.
    """
    iris = load_iris()
    doc.heading("Classification")
    result = fit_classifier("lda", "species ~ .", iris, test_size=0.3, cv=10,
                            seed=seed)
    doc.code(f'result = fit_classifier("lda", "species ~ .", iris, seed={seed})')
    doc.output(result.cv_scores.agg(["mean", "std"]))
    doc.output(result.metrics)
    doc.figure(plot_confusion_matrix(result.confusion), "confusion",
               "Confusion matrix on the test set")
    doc.text(
        describe_metrics(result.metrics)
        + " LDA assumes Gaussian classes sharing one covariance matrix; on "
        "iris this simple model is hard to beat.")

    doc.heading("Discriminant projection")
    projection = lda_projection(iris, "species")
    doc.code('projection = lda_projection(iris, "species")')
    doc.table(projection.scalings, caption="Coefficients of the discriminants",
              floatfmt=".3f")
    ratio = projection.explained_variance_ratio
    doc.table(ratio.to_frame(), floatfmt=".4f")
    doc.figure(plot_lda_projection(projection, "species"), "projection",
               "Flowers on the first two linear discriminants")
    doc.text(
        f"The first discriminant captures {100 * ratio.iloc[0]:.1f}% of the "
        "between-species variance and on its own separates setosa from the "
        "other two species; the second adds little.")

    doc.record("accuracy", result.metrics.accuracy)
    doc.record("kappa", result.metrics.kappa)
    doc.record("cv_accuracy", float(result.cv_scores["accuracy"].mean()))
    doc.record("ld1_ratio", float(ratio.iloc[0]))
