# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Missing values, dates and categorical columns."""

from ..datasets import simulate_air_quality
from ..dataops import (
    drop_missing,
    parse_dates,
    standardize,
    summarize_missing,
    to_categorical,
)
from ..narrative import format_number
from ..stats import group_summary
from ._registry import register


@register(
    "data_cleaning",
    "Cleaning data",
    tags=("data",),
    requires=("pandas", "scikit-learn"),
)
def build(doc, seed):
    """
    Inspect and repair a daily air-quality record: count the missing
    readings, drop incomplete rows, parse the dates, order the months and
    standardize the measurements.
    """
    air = simulate_air_quality(missing_rate=0.15, seed=seed)
    doc.heading("Raw data")
    doc.code(f"air = simulate_air_quality(missing_rate=0.15, seed={seed})")
    doc.output(air.head(8))
    doc.text(
        f"The record covers {len(air)} days. Dates and month names arrive as "
        "plain strings, as they would from a text file.")

    doc.heading("Missing values")
    missing = summarize_missing(air)
    doc.table(missing, floatfmt=".3f")
    n_ozone = int(missing.loc["ozone", "missing"])
    doc.text(
        f"{n_ozone} ozone readings ({100 * missing.loc['ozone', 'ratio']:.1f}%) "
        f"and {int(missing.loc['solar_r', 'missing'])} solar radiation readings "
        "are missing. Rows without ozone cannot be used to study ozone, so "
        "they are dropped; missing radiation values are kept.")
    complete = drop_missing(air, columns=["ozone"])
    doc.code('complete = drop_missing(air, columns=["ozone"])')
    doc.text(f"{len(complete)} of {len(air)} rows remain.")

    doc.heading("Types")
    months = list(dict.fromkeys(complete["month"]))
    cleaned = parse_dates(complete, "date", format="%Y-%m-%d")
    cleaned = to_categorical(cleaned, "month", ordered=True, categories=months)
    doc.code(
        """
        cleaned = parse_dates(complete, "date", format="%Y-%m-%d")
        cleaned = to_categorical(cleaned, "month", ordered=True,
                                 categories=months)
        """)
    doc.output(cleaned.dtypes.to_frame("dtype"))
    doc.text(
        "With dates parsed, calendar arithmetic works "
        f"(the record spans {(cleaned['date'].max() - cleaned['date'].min()).days} "
        "days), and the ordered month factor sorts chronologically rather "
        "than alphabetically.")

    by_month = group_summary(cleaned, "month", "ozone")
    doc.table(by_month, caption="Ozone by month", floatfmt=".1f")
    peak = by_month["mean"].idxmax()
    doc.text(
        f"Mean ozone peaks in {peak} at "
        f"{format_number(by_month.loc[peak, 'mean'], 1)} ppb.")

    doc.heading("Standardization")
    scaled = standardize(cleaned, ["ozone", "temp", "wind"])
    doc.output(scaled[["ozone", "temp", "wind"]].describe().loc[["mean", "std"]])
    doc.text(
        "After standardization every measurement has mean zero and unit "
        "variance, so the variables can be compared on a common scale.")

    doc.record("n_rows", len(air))
    doc.record("n_missing_ozone", n_ozone)
    doc.record("n_complete", len(complete))
    doc.record("peak_month", str(peak))
