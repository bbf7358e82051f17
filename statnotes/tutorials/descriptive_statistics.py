# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Summaries, frequency tables, correlations and the chi-square test."""

from ..datasets import load_hair_eye, load_mtcars
from ..narrative import (
    correlation_strength,
    format_number,
    significance_phrase,
)
from ..stats import (
    chi_square_test,
    correlation_matrix,
    crosstab,
    describe,
    frequency_table,
    group_summary,
)
from ._registry import register


@register(
    "descriptive_statistics",
    "Descriptive statistics",
    tags=("data", "statistics"),
    requires=("pandas", "scipy"),
)
def build(doc, seed):
    """
    Describe the Motor Trend road tests with numeric summaries, frequency
    tables and correlations, then test the association between hair and
    eye colour.
    """
    cars = load_mtcars()
    doc.heading("Numeric summaries")
    summary = describe(cars, ["mpg", "hp", "wt", "qsec"])
    doc.table(summary, floatfmt=".2f")
    mpg = summary.loc["mpg"]
    doc.text(
        f"Fuel consumption averages {format_number(mpg['mean'], 2)} miles per "
        f"gallon with a standard deviation of {format_number(mpg['std'], 2)}, "
        f"from {format_number(mpg['min'], 1)} to {format_number(mpg['max'], 1)}. "
        f"The skewness of {format_number(mpg['skew'], 2)} indicates a longer "
        + ("right tail: a few very economical cars." if mpg["skew"] > 0
           else "left tail."))

    doc.heading("Counts")
    cylinders = frequency_table(cars, "cyl", normalize=True)
    doc.table(cylinders)
    doc.text(
        f"Eight-cylinder engines are the most common "
        f"({int(cylinders.loc[8, 'count'])} cars).")
    by_am = group_summary(cars.assign(
        transmission=cars["am"].map({0: "automatic", 1: "manual"})),
        "transmission", "mpg")
    doc.table(by_am, caption="Miles per gallon by transmission", floatfmt=".2f")
    doc.table(crosstab(cars, "cyl", "gear", margins=True),
              caption="Cylinders by number of gears")

    doc.heading("Correlations")
    corr, pvalues = correlation_matrix(cars, ["mpg", "wt", "hp", "disp"])
    doc.table(corr, caption="Pearson correlations")
    r = corr.loc["mpg", "wt"]
    doc.text(
        f"Weight and fuel economy show a {correlation_strength(r)} correlation "
        f"(r = {format_number(r)}), {significance_phrase(pvalues.loc['mpg', 'wt'])}.")

    doc.heading("Association between two categorical variables")
    table = load_hair_eye(as_table=True)
    doc.table(table, caption="Hair colour by eye colour")
    test = chi_square_test(table)
    doc.output(test)
    doc.text(
        f"The chi-square statistic is {format_number(test.statistic, 2)} on "
        f"{test.dof} degrees of freedom: hair and eye colour are "
        f"{'associated' if test.pvalue < 0.05 else 'not associated'}, the "
        f"result being {significance_phrase(test.pvalue)}.")

    doc.record("mean_mpg", float(mpg["mean"]))
    doc.record("corr_mpg_wt", float(r))
    doc.record("chi2", test.statistic)
    doc.record("chi2_dof", test.dof)
