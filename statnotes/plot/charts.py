# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>

"""
Exploratory charts drawn with seaborn: distributions, group comparisons,
scatter plots with a fitted trend, pair plots, bar counts and correlation
heatmaps.
"""

from __future__ import annotations
from typing import List, Optional

import numpy as np
import pandas as pd
import seaborn as sns
from matplotlib.axes import Axes

from .utils import check_columns, get_ax

__all__ = [
    "plot_histogram",
    "plot_box",
    "plot_scatter_fit",
    "plot_pairs",
    "plot_bar_counts",
    "plot_correlation_heatmap",
]


def plot_histogram(
    data: pd.DataFrame,
    column: str,
    hue: Optional[str] = None,
    bins="auto",
    kde: bool = True,
    ax: Optional[Axes] = None,
    **kws
):
    """
    Histogram of one numeric column, optionally split by a categorical one.

    Parameters
    ----------
    data : pandas.DataFrame
    column : str
        Numeric column on the x axis.
    hue : str, optional
        Categorical column coloring the bars.
    bins : int or str, default='auto'
    kde : bool, default=True
        Overlay a kernel density estimate.
    ax : matplotlib.axes.Axes, optional
        Axes to draw on. A new figure is created when None.
    **kws : dict
        Passed to :func:`seaborn.histplot`.

    Returns
    -------
    ax : matplotlib.axes.Axes
    """
    check_columns(data, column, hue)
    ax = get_ax(ax)
    sns.histplot(data=data, x=column, hue=hue, bins=bins, kde=kde, ax=ax, **kws)
    ax.set_title(f"Distribution of {column}")
    return ax


def plot_box(
    data: pd.DataFrame,
    column: str,
    by: Optional[str] = None,
    ax: Optional[Axes] = None,
    **kws
):
    """Box plot of `column`, one box per level of `by`."""
    check_columns(data, column, by)
    ax = get_ax(ax)
    sns.boxplot(data=data, x=by, y=column, ax=ax, **kws)
    ax.set_title(f"{column} by {by}" if by else f"Box plot of {column}")
    return ax


def plot_scatter_fit(
    data: pd.DataFrame,
    x: str,
    y: str,
    order: int = 1,
    ci: Optional[int] = 95,
    ax: Optional[Axes] = None,
    **kws
):
    """
    Scatter plot of `y` against `x` with a fitted polynomial trend.

    Parameters
    ----------
    data : pandas.DataFrame
    x, y : str
        Columns on the horizontal and vertical axes.
    order : int, default=1
        Degree of the fitted polynomial; 1 draws the least-squares line.
    ci : int or None, default=95
        Size of the confidence band around the trend; None hides it.
    ax : matplotlib.axes.Axes, optional

    Returns
    -------
    ax : matplotlib.axes.Axes

    Examples
    --------
    >>> from statnotes.datasets import load_mtcars
    >>> from statnotes.plot.charts import plot_scatter_fit
    >>> ax = plot_scatter_fit(load_mtcars(), "wt", "mpg")
    >>> ax.get_xlabel()
    'wt'
    """
    check_columns(data, x, y)
    ax = get_ax(ax)
    sns.regplot(data=data, x=x, y=y, order=order, ci=ci, ax=ax,
                line_kws={"color": "tab:red"}, **kws)
    ax.set_title(f"{y} versus {x}")
    return ax


def plot_pairs(
    data: pd.DataFrame,
    columns: Optional[List[str]] = None,
    hue: Optional[str] = None,
    **kws
):
    """
    Scatter-plot matrix of numeric columns.

    Returns
    -------
    seaborn.PairGrid
        The grid; its figure is ``grid.figure``.
    """
    if columns is not None:
        check_columns(data, *columns, hue)
        data = data[list(columns) + ([hue] if hue else [])]
    return sns.pairplot(data, hue=hue, corner=True, **kws)


def plot_bar_counts(
    data: pd.DataFrame,
    column: str,
    hue: Optional[str] = None,
    ax: Optional[Axes] = None,
    **kws
):
    """Bar chart of the number of rows in each level of `column`."""
    check_columns(data, column, hue)
    ax = get_ax(ax)
    sns.countplot(data=data, x=column, hue=hue, ax=ax, **kws)
    ax.set_ylabel("count")
    return ax


def plot_correlation_heatmap(
    data: pd.DataFrame,
    method: str = "pearson",
    annot: bool = True,
    ax: Optional[Axes] = None,
    **kws
):
    """
    Heatmap of a correlation matrix.

    Parameters
    ----------
    data : pandas.DataFrame
        Either a square correlation matrix (same labels on both axes) or a
        frame whose numeric columns are correlated with `method`.
    method : {'pearson', 'spearman', 'kendall'}, default='pearson'
    annot : bool, default=True
        Print the coefficients in the cells.
    ax : matplotlib.axes.Axes, optional

    Returns
    -------
    ax : matplotlib.axes.Axes
    """
    is_matrix = (
        data.shape[0] == data.shape[1]
        and list(data.index) == list(data.columns)
    )
    corr = data if is_matrix else data.select_dtypes(include="number").corr(
        method=method)
    ax = get_ax(ax, figsize=(1 + 0.6 * len(corr), 0.6 * len(corr) + 0.5))
    mask = np.triu(np.ones_like(corr, dtype=bool), k=1)
    sns.heatmap(corr, mask=mask, annot=annot, fmt=".2f", vmin=-1, vmax=1,
                cmap="vlag", square=True, ax=ax, **kws)
    return ax
