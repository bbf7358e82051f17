# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Exploratory factor analysis of questionnaire items."""

from ..analysis import factor_analysis, kaiser_criterion
from ..datasets import simulate_survey
from ..plot import plot_correlation_heatmap, plot_loadings_heatmap, plot_scree
from ..stats import correlation_matrix
from ._registry import register


@register(
    "factor_analysis",
    "Factor analysis",
    tags=("dimensionality", "unsupervised"),
    requires=("scikit-learn", "seaborn"),
)
def build(doc, seed):
    """
    Find the latent traits behind six questionnaire items: count the
    factors with the Kaiser criterion and a scree plot, then read the
    varimax-rotated loadings.
    """
    survey = simulate_survey(n_samples=500, n_factors=2, items_per_factor=3,
                             seed=seed)
    doc.code(f"survey = simulate_survey(n_samples=500, seed={seed})")
    doc.output(survey.describe().round(2))
    corr, _ = correlation_matrix(survey)
    doc.figure(plot_correlation_heatmap(corr), "correlation",
               "Correlations between the items")
    doc.text(
        "The items fall into two blocks of mutually correlated answers, a "
        "first hint at two underlying traits.")

    doc.heading("Number of factors")
    kaiser = kaiser_criterion(survey)
    doc.table(kaiser.eigenvalues.to_frame(), floatfmt=".3f")
    doc.figure(plot_scree(kaiser.eigenvalues, kaiser=True), "scree",
               "Eigenvalues of the correlation matrix")
    doc.text(
        f"{kaiser.n_factors} eigenvalue(s) exceed 1, the Kaiser threshold "
        "below which a factor explains less than a single item. The scree "
        "plot flattens after the same point.")

    doc.heading("Loadings")
    n_factors = max(kaiser.n_factors, 1)
    result = factor_analysis(survey, n_factors, rotation="varimax", seed=seed)
    doc.code(f'result = factor_analysis(survey, {n_factors}, '
             f'rotation="varimax", seed={seed})')
    doc.table(result.loadings.join(result.communalities), floatfmt=".3f")
    doc.figure(plot_loadings_heatmap(result.loadings), "loadings",
               "Varimax-rotated loadings")
    doc.table(result.variance, floatfmt=".3f")
    dominant = result.loadings.abs().idxmax(axis=1)
    groups = "; ".join(
        f"{factor}: {', '.join(dominant[dominant == factor].index)}"
        for factor in result.loadings.columns
        if (dominant == factor).any())
    doc.text(
        f"Each item loads mainly on one factor ({groups}). After rotation "
        "the factors can be named after the items they gather; "
        f"together they account for "
        f"{100 * result.variance['cumulative'].iloc[-1]:.1f}% of the item "
        "variance.")

    doc.record("n_factors", kaiser.n_factors)
    doc.record("first_eigenvalue", float(kaiser.eigenvalues.iloc[0]))
    doc.record("cumulative_variance",
               float(result.variance["cumulative"].iloc[-1]))
    doc.record("min_communality", float(result.communalities.min()))
