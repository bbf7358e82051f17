# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Quantile regression against least squares."""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from ..datasets import load_mtcars
from ..models import fit_ols, fit_quantile
from ..narrative import describe_model_fit, format_number
from ._registry import register

QUANTILES = (0.1, 0.25, 0.5, 0.75, 0.9)


@register(
    "quantile_regression",
    "Quantile regression",
    tags=("regression",),
    requires=("statsmodels", "matplotlib"),
)
def build(doc, seed):
    """
    Estimate how weight shifts different quantiles of fuel economy, not
    only its mean.
    """
    cars = load_mtcars()
    doc.heading("Median regression")
    median = fit_quantile("mpg ~ wt", cars, q=0.5)
    doc.code('median = fit_quantile("mpg ~ wt", cars, q=0.5)')
    doc.output(median)
    doc.text(describe_model_fit(median))

    doc.heading("Several quantiles")
    ols = fit_ols("mpg ~ wt", cars)
    fits = {q: fit_quantile("mpg ~ wt", cars, q=q) for q in QUANTILES}
    rows = []
    for q, fit in fits.items():
        low, high = fit.conf_int().loc["wt"]
        rows.append({"quantile": q, "intercept": fit.params["Intercept"],
                     "slope": fit.params["wt"], "lower": low, "upper": high})
    slopes = pd.DataFrame(rows).set_index("quantile")
    doc.table(slopes, floatfmt=".3f")
    doc.text(
        f"The least-squares slope is {format_number(ols.params['wt'])}. The "
        f"slope ranges from {format_number(slopes['slope'].min())} to "
        f"{format_number(slopes['slope'].max())} across quantiles. Unequal "
        "slopes mean that weight changes the spread of fuel economy, not "
        "only its centre; the confidence intervals show how far apart they "
        "really are with 32 cars.")

    grid = pd.DataFrame({"wt": np.linspace(cars["wt"].min(), cars["wt"].max(), 50)})
    fig, ax = plt.subplots(figsize=(6, 4))
    ax.scatter(cars["wt"], cars["mpg"], color="gray", alpha=0.7)
    for q, fit in fits.items():
        ax.plot(grid["wt"], fit.predict(grid), label=f"q = {q}")
    ax.plot(grid["wt"], ols.predict(grid), color="black", linestyle="--",
            label="least squares")
    ax.set_xlabel("wt")
    ax.set_ylabel("mpg")
    ax.legend(fontsize="small")
    doc.figure(fig, "quantiles", "Quantile regression lines")

    doc.record("median_slope", float(median.params["wt"]))
    doc.record("ols_slope", float(ols.params["wt"]))
    for q in QUANTILES:
        doc.record(f"slope_q{int(q * 100)}", float(slopes.loc[q, "slope"]))
