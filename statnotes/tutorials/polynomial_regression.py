# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Polynomial terms and nested-model comparison."""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from ..datasets import simulate_growth
from ..models import coefficient_table, compare_models, fit_polynomial
from ..narrative import format_number, significance_phrase
from ..plot import plot_residuals
from ._registry import register


@register(
    "polynomial_regression",
    "Polynomial regression",
    tags=("regression",),
    requires=("statsmodels", "matplotlib"),
)
def build(doc, seed):
    """
    Fit straight-line, quadratic and cubic trends to a dose-response
    experiment and let an analysis of variance choose the degree.
    """
    growth = simulate_growth(seed=seed)
    doc.code(f"growth = simulate_growth(seed={seed})")
    doc.output(growth.describe())

    fits = {degree: fit_polynomial(growth, "dose", "growth", degree)
            for degree in (1, 2, 3)}
    doc.heading("Quadratic fit")
    quad = fits[2]
    doc.output(quad)
    doc.table(coefficient_table(quad), floatfmt=".4f")
    b2 = quad.params["I(dose ** 2)"]
    vertex = -quad.params["dose"] / (2 * b2)
    doc.text(
        f"The squared term has coefficient {format_number(b2)}, "
        f"{significance_phrase(quad.pvalues['I(dose ** 2)'])}. Being "
        f"{'negative' if b2 < 0 else 'positive'}, it bends the curve "
        f"{'downward' if b2 < 0 else 'upward'}: growth peaks near a dose of "
        f"{format_number(vertex, 2)}.")

    doc.heading("Choosing the degree")
    anova = compare_models(fits[1], fits[2], fits[3])
    doc.output(anova)
    p_quad, p_cubic = anova["Pr(>F)"].iloc[1], anova["Pr(>F)"].iloc[2]
    doc.text(
        f"Going from a line to a parabola is {significance_phrase(p_quad)}; "
        f"adding a cubic term is {significance_phrase(p_cubic)}. R-squared "
        f"moves from {format_number(fits[1].rsquared)} to "
        f"{format_number(fits[2].rsquared)} and "
        f"{format_number(fits[3].rsquared)}.")

    grid = pd.DataFrame({"dose": np.linspace(growth["dose"].min(),
                                             growth["dose"].max(), 200)})
    fig, axes = plt.subplots(1, 2, figsize=(10, 4))
    axes[0].scatter(growth["dose"], growth["growth"], alpha=0.7, label="data")
    for degree, fit in fits.items():
        axes[0].plot(grid["dose"], fit.predict(grid), label=f"degree {degree}")
    axes[0].set_xlabel("dose")
    axes[0].set_ylabel("growth")
    axes[0].legend()
    plot_residuals(quad, ax=axes[1])
    doc.figure(fig, "fits", "Polynomial fits and quadratic residuals")
    cubic_gain = fits[3].rsquared - quad.rsquared
    doc.text(
        "The straight line misses the curvature at both ends; "
        + ("the quadratic and cubic curves are almost indistinguishable."
           if cubic_gain < 0.01 else
           f"the cubic term still adds {format_number(cubic_gain)} to R-squared."))

    doc.record("r_squared_linear", float(fits[1].rsquared))
    doc.record("r_squared_quadratic", float(quad.rsquared))
    doc.record("quadratic_coef", float(b2))
    doc.record("quadratic_pvalue", float(p_quad))
    doc.record("cubic_pvalue", float(p_cubic))
