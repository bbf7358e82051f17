# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Principal component analysis."""

from ..analysis import pca
from ..datasets import load_iris
from ..narrative import describe_variance, format_number
from ..plot import plot_biplot, plot_scree
from ._registry import register


@register(
    "pca",
    "Principal component analysis",
    tags=("dimensionality", "unsupervised"),
    requires=("scikit-learn", "seaborn"),
)
def build(doc, seed):
    """
    Summarize the four iris measurements with a few uncorrelated principal
    components and read the components through their loadings.
    """
    iris = load_iris()
    doc.heading("Components")
    result = pca(iris, scale=True)
    doc.code("result = pca(iris, scale=True)")
    doc.text(
        "The measurements are standardized first, otherwise the petal length "
        "with its large variance would dominate the first component.")
    doc.table(result.explained, floatfmt=".4f")
    doc.figure(plot_scree(result.explained), "scree",
               "Proportion of variance by component")
    doc.text(describe_variance(result.explained))

    doc.heading("Loadings")
    doc.table(result.loadings, floatfmt=".3f")
    pc1 = result.loadings["PC1"]
    sepal_width = pc1.abs().idxmin()
    doc.text(
        f"The first component weighs the petal measurements and sepal length "
        f"about equally, with {sepal_width} contributing least "
        f"({format_number(pc1[sepal_width])}): it is an overall size axis. "
        "The second component is dominated by sepal width.")
    doc.figure(plot_biplot(result, hue=iris["species"]), "biplot",
               "Flowers and variables on the first two components")
    doc.text(
        "In the biplot setosa forms a separate group along PC1 although the "
        "species labels were never used to build the components.")

    doc.record("pc1_ratio", float(result.explained["ratio"].iloc[0]))
    doc.record("pc2_cumulative", float(result.explained["cumulative"].iloc[1]))
    doc.record("n_components", int(len(result.explained)))
