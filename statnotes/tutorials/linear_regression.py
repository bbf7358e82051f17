# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Simple and multiple linear regression with statsmodels formulas."""

import matplotlib.pyplot as plt

from ..datasets import load_mtcars, simulate_salaries
from ..models import coefficient_table, compare_models, fit_ols
from ..narrative import (
    describe_coefficients,
    describe_model_fit,
    format_number,
    significance_phrase,
)
from ..plot import plot_residuals, plot_scatter_fit
from ._registry import register


@register(
    "linear_regression",
    "Linear regression",
    tags=("regression",),
    requires=("statsmodels", "pandas", "seaborn"),
)
def build(doc, seed):
    """
    Regress fuel economy on weight, read the coefficient table and the
    residuals, then add horsepower and test whether the larger model fits
    significantly better.
    """
    cars = load_mtcars()
    doc.heading("Simple regression")
    fit = fit_ols("mpg ~ wt", cars)
    doc.code('fit = fit_ols("mpg ~ wt", cars)\nprint(fit.summary())')
    doc.output(fit)
    slope, intercept = fit.params["wt"], fit.params["Intercept"]
    doc.text(
        f"The fitted line is mpg = {format_number(intercept, 3)} "
        f"{'-' if slope < 0 else '+'} {format_number(abs(slope), 3)} x wt. "
        + describe_coefficients(coefficient_table(fit), response="mpg")
        + " Since weight is measured in thousands of pounds, every extra "
        f"1000 lbs costs about {format_number(abs(slope), 2)} miles per gallon.")
    doc.text(describe_model_fit(fit))

    fig, axes = plt.subplots(1, 2, figsize=(10, 4))
    plot_scatter_fit(cars, "wt", "mpg", ax=axes[0])
    plot_residuals(fit, ax=axes[1])
    doc.figure(fig, "fit", "Fitted line and residuals")
    # mean residual per weight band
    low, high = cars["wt"].quantile([0.25, 0.75])
    light = fit.resid[cars["wt"] <= low].mean()
    middle = fit.resid[(cars["wt"] > low) & (cars["wt"] < high)].mean()
    heavy = fit.resid[cars["wt"] >= high].mean()
    if light > 0 and heavy > 0 and middle < 0:
        shape = ("curve upwards: the lightest and heaviest cars sit above the "
                 "line, a hint that the relation is not quite linear")
    elif light < 0 and heavy < 0 and middle > 0:
        shape = ("curve downwards: the lightest and heaviest cars sit below "
                 "the line, a hint that the relation is not quite linear")
    else:
        shape = "show no systematic bend, so a straight line is adequate"
    doc.text(
        f"The residuals {shape} (mean residual {format_number(light, 2)} for "
        f"the lightest quarter, {format_number(middle, 2)} in the middle and "
        f"{format_number(heavy, 2)} for the heaviest quarter).")

    doc.heading("Multiple regression")
    full = fit_ols("mpg ~ wt + hp", cars)
    doc.table(coefficient_table(full), caption="mpg ~ wt + hp", floatfmt=".4f")
    anova = compare_models(fit, full)
    doc.output(anova)
    p_value = anova["Pr(>F)"].iloc[-1]
    doc.text(
        f"Adding horsepower raises R-squared from {format_number(fit.rsquared)} "
        f"to {format_number(full.rsquared)}. The F-test comparing the nested "
        f"models is {significance_phrase(p_value)}, so horsepower "
        + ("carries information that weight alone does not." if p_value < 0.05
           else "adds little once weight is known."))

    doc.heading("Categorical predictors")
    salaries = simulate_salaries(seed=seed)
    wages = fit_ols("salary ~ experience + C(education)", salaries)
    doc.table(coefficient_table(wages), floatfmt=".2f")
    master = wages.params["C(education)[T.master]"]
    doc.text(
        "Education enters through treatment-coded dummies, bachelor being the "
        f"reference level: at equal experience a master's degree adds "
        f"{format_number(master, 1)} (thousands) to the expected salary. "
        + describe_model_fit(wages))

    doc.record("slope", float(slope))
    doc.record("intercept", float(intercept))
    doc.record("r_squared", float(fit.rsquared))
    doc.record("r_squared_wt_hp", float(full.rsquared))
    doc.record("anova_pvalue", float(p_value))
    doc.record("residual_light", float(light))
    doc.record("residual_middle", float(middle))
    doc.record("residual_heavy", float(heavy))
    doc.record("salary_r_squared", float(wages.rsquared))
