# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Exploratory graphics with seaborn and matplotlib."""

import matplotlib.pyplot as plt

from ..datasets import load_iris, load_mtcars
from ..plot import (
    plot_bar_counts,
    plot_box,
    plot_correlation_heatmap,
    plot_histogram,
    plot_pairs,
    plot_scatter_fit,
)
from ._registry import register


@register(
    "visualization",
    "Visualizing data",
    tags=("data", "plot"),
    requires=("matplotlib", "seaborn"),
)
def build(doc, seed):
    """
    The usual exploratory charts: distributions, group comparisons, scatter
    plots with a trend line, scatter-plot matrices, bar counts and a
    correlation heatmap.
    """
    cars = load_mtcars().assign(
        cyl=lambda d: d["cyl"].astype("category"),
        transmission=lambda d: d["am"].map({0: "automatic", 1: "manual"}),
    )

    doc.heading("Distributions")
    fig, axes = plt.subplots(1, 2, figsize=(10, 4))
    plot_histogram(cars, "mpg", bins=8, ax=axes[0])
    plot_box(cars, "mpg", by="cyl", ax=axes[1])
    doc.code(
        """
        plot_histogram(cars, "mpg", bins=8, ax=axes[0])
        plot_box(cars, "mpg", by="cyl", ax=axes[1])
        """)
    doc.figure(fig, "distribution", "Fuel economy overall and by cylinders")
    medians = cars.groupby("cyl", observed=True)["mpg"].median()
    doc.text(
        "The histogram is right-skewed. The box plots separate the three "
        f"engine sizes clearly: median consumption falls from "
        f"{medians.iloc[0]:.1f} mpg with four cylinders to "
        f"{medians.iloc[-1]:.1f} mpg with eight.")

    doc.heading("Relationships")
    ax = plot_scatter_fit(cars, "wt", "mpg")
    doc.figure(ax, "scatter_fit", "Miles per gallon versus weight")
    doc.text(
        "Heavier cars travel fewer miles per gallon; the least-squares line "
        "and its 95% confidence band summarise the trend.")

    iris = load_iris()
    grid = plot_pairs(iris, hue="species")
    doc.figure(grid, "pairs", "Scatter-plot matrix of the iris measurements")
    doc.text(
        "In the scatter-plot matrix the petal measurements alone separate "
        "setosa from the two other species.")

    doc.heading("Counts and correlations")
    ax = plot_bar_counts(cars, "gear", hue="transmission")
    doc.figure(ax, "counts", "Number of gears by transmission")
    ax = plot_correlation_heatmap(cars[["mpg", "disp", "hp", "drat", "wt", "qsec"]])
    doc.figure(ax, "heatmap", "Correlation heatmap")
    doc.text(
        "Every manual car has four or five gears. In the heatmap displacement, "
        "horsepower and weight are strongly correlated with each other and "
        "negatively with fuel economy.")

    doc.record("n_figures", len(doc.figures))
