# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Ridge, lasso and elastic net with cross-validated penalties."""

import pandas as pd

from ..datasets import load_mtcars
from ..models import fit_ols, fit_regularized
from ..narrative import format_number
from ..plot import plot_feature_importance
from ._registry import register


@register(
    "regularized_regression",
    "Regularized regression",
    tags=("regression",),
    requires=("scikit-learn", "statsmodels"),
)
def build(doc, seed):
    """
    Predict fuel economy from all ten road-test measurements with
    penalized least squares, choosing the penalty by cross-validation.
    """
    cars = load_mtcars()
    formula = "mpg ~ . - model"
    doc.heading("Unpenalized baseline")
    ols = fit_ols(formula, cars)
    doc.text(
        f"With ten predictors for {len(cars)} cars, ordinary least squares "
        f"reaches R-squared = {format_number(ols.rsquared)} but only "
        f"{int((ols.pvalues.drop('Intercept') < 0.05).sum())} coefficient(s) "
        "are individually significant: the predictors are strongly "
        "correlated and the estimates unstable.")

    doc.heading("Penalized fits")
    fits = {kind: fit_regularized(formula, cars, kind=kind, cv=5, seed=seed)
            for kind in ("ridge", "lasso", "elasticnet")}
    doc.code(
        """
        fits = {kind: fit_regularized("mpg ~ . - model", cars, kind=kind,
                                      cv=5, seed=seed)
                for kind in ("ridge", "lasso", "elasticnet")}
        """)
    coefficients = pd.DataFrame(
        {kind: fit.coefficients for kind, fit in fits.items()})
    doc.table(coefficients, caption="Coefficients on the standardized scale",
              floatfmt=".3f")
    alphas = pd.Series({kind: fit.alpha for kind, fit in fits.items()},
                       name="alpha")
    doc.table(alphas.to_frame(), caption="Penalties selected by 5-fold CV",
              floatfmt=".4f")
    lasso = fits["lasso"]
    kept = list(lasso.coefficients[lasso.coefficients.abs() > 1e-10].index)
    doc.text(
        "Ridge shrinks every coefficient towards zero but keeps them all. "
        f"The lasso sets some exactly to zero and keeps {lasso.n_nonzero} "
        f"predictor(s): {', '.join(kept) or 'none'}. The elastic net "
        "compromises between the two penalties.")

    ax = plot_feature_importance(lasso.coefficients.abs().rename("|coefficient|"))
    doc.figure(ax, "lasso", "Absolute lasso coefficients")

    doc.record("ols_r_squared", float(ols.rsquared))
    doc.record("ridge_alpha", fits["ridge"].alpha)
    doc.record("lasso_alpha", lasso.alpha)
    doc.record("lasso_n_nonzero", lasso.n_nonzero)
    doc.record("elasticnet_alpha", fits["elasticnet"].alpha)
