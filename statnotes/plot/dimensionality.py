# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>

"""
Plots of dimension reductions: scree plots, PCA biplots, loading heatmaps,
correspondence analysis maps and discriminant projections.
"""

from __future__ import annotations
from typing import Optional, Tuple

import numpy as np
import pandas as pd
import seaborn as sns
from matplotlib.axes import Axes

from ..exceptions import PlotError
from .utils import get_ax

__all__ = [
    "plot_scree",
    "plot_biplot",
    "plot_loadings_heatmap",
    "plot_ca_map",
    "plot_lda_projection",
]


def plot_scree(
    explained,
    kaiser: bool = False,
    ax: Optional[Axes] = None,
):
    """
    Scree plot of component variances.

    Parameters
    ----------
    explained : pandas.DataFrame or pandas.Series
        Either the ``explained`` frame of
        :func:`statnotes.analysis.decomposition.pca` (the ``ratio`` column is
        drawn as bars and ``cumulative`` as a line) or a Series of
        eigenvalues, e.g. from
        :func:`statnotes.analysis.factors.kaiser_criterion`.
    kaiser : bool, default=False
        With eigenvalues, draw the Kaiser threshold at 1.
    ax : matplotlib.axes.Axes, optional

    Returns
    -------
    ax : matplotlib.axes.Axes
    """
    ax = get_ax(ax)
    if isinstance(explained, pd.DataFrame):
        positions = np.arange(1, len(explained) + 1)
        ax.bar(positions, explained["ratio"], color="tab:blue", alpha=0.8,
               label="explained")
        if "cumulative" in explained:
            ax.plot(positions, explained["cumulative"], marker="o",
                    color="tab:red", label="cumulative")
        ax.set_xticks(positions)
        ax.set_xticklabels(explained.index.astype(str))
        ax.set_ylabel("Proportion of variance")
        ax.legend(loc="center right")
    else:
        eigenvalues = pd.Series(explained)
        positions = np.arange(1, len(eigenvalues) + 1)
        ax.plot(positions, eigenvalues.to_numpy(), marker="o")
        ax.set_xticks(positions)
        ax.set_ylabel("Eigenvalue")
        if kaiser:
            ax.axhline(1, linestyle="--", color="gray", label="Kaiser criterion")
            ax.legend()
    ax.set_xlabel("Component")
    ax.set_title("Scree plot")
    return ax


def plot_biplot(
    result,
    components: Tuple[str, str] = ("PC1", "PC2"),
    hue=None,
    arrow_scale: Optional[float] = None,
    ax: Optional[Axes] = None,
):
    """
    PCA biplot: row scores as points and variable loadings as arrows.

    Parameters
    ----------
    result : Boxspace
        Output of :func:`statnotes.analysis.decomposition.pca`.
    components : tuple of str, default=('PC1', 'PC2')
    hue : array-like, optional
        Groups coloring the points.
    arrow_scale : float, optional
        Length factor of the arrows. Defaults to a value fitting the arrows
        in the cloud of scores.
    ax : matplotlib.axes.Axes, optional

    Returns
    -------
    ax : matplotlib.axes.Axes
    """
    first, second = components
    if first not in result.scores or second not in result.scores:
        raise PlotError(
            f"Components {components} not in {list(result.scores.columns)}.")
    scores, loadings = result.scores, result.loadings
    ax = get_ax(ax, figsize=(6, 6))
    sns.scatterplot(
        x=scores[first], y=scores[second],
        hue=None if hue is None else np.asarray(hue),
        alpha=0.7, ax=ax)

    if arrow_scale is None:
        arrow_scale = 0.8 * np.abs(scores[[first, second]].to_numpy()).max() / max(
            np.abs(loadings[[first, second]].to_numpy()).max(), 1e-12)
    for name, row in loadings.iterrows():
        dx, dy = row[first] * arrow_scale, row[second] * arrow_scale
        ax.arrow(0, 0, dx, dy, color="tab:red", alpha=0.8,
                 head_width=0.03 * arrow_scale)
        ax.text(dx * 1.1, dy * 1.1, str(name), color="tab:red",
                ha="center", va="center")
    ax.axhline(0, color="gray", linewidth=0.5)
    ax.axvline(0, color="gray", linewidth=0.5)
    ax.set_xlabel(first)
    ax.set_ylabel(second)
    ax.set_title("PCA biplot")
    return ax


def plot_loadings_heatmap(
    loadings: pd.DataFrame,
    ax: Optional[Axes] = None,
    cmap: str = "vlag",
):
    """Heatmap of loadings (variables x components or factors)."""
    ax = get_ax(ax, figsize=(1.5 + 1.1 * loadings.shape[1],
                             0.5 * loadings.shape[0] + 1))
    sns.heatmap(loadings, annot=True, fmt=".2f", center=0, vmin=-1, vmax=1,
                cmap=cmap, ax=ax)
    ax.set_title("Loadings")
    return ax


def plot_ca_map(
    result,
    dims: Tuple[str, str] = ("Dim1", "Dim2"),
    ax: Optional[Axes] = None,
):
    """
    Symmetric correspondence analysis map: rows and columns in principal
    coordinates on the same plane.

    Parameters
    ----------
    result : Boxspace
        Output of
        :func:`statnotes.analysis.correspondence.correspondence_analysis`
        with at least two dimensions.
    dims : tuple of str, default=('Dim1', 'Dim2')
    ax : matplotlib.axes.Axes, optional
    """
    rows, cols = result.row_coordinates, result.column_coordinates
    first, second = dims
    if first not in rows or second not in rows:
        raise PlotError(
            f"Dimensions {dims} not in {list(rows.columns)}; a map needs two.")
    ax = get_ax(ax, figsize=(6, 6))
    ax.scatter(rows[first], rows[second], marker="o", color="tab:blue",
               label="rows")
    ax.scatter(cols[first], cols[second], marker="^", color="tab:red",
               label="columns")
    for frame, color in ((rows, "tab:blue"), (cols, "tab:red")):
        for name, row in frame.iterrows():
            ax.annotate(str(name), (row[first], row[second]), color=color,
                        textcoords="offset points", xytext=(4, 4))
    ratio = result.inertia["ratio"]
    ax.set_xlabel(f"{first} ({100 * ratio[first]:.1f}%)")
    ax.set_ylabel(f"{second} ({100 * ratio[second]:.1f}%)")
    ax.axhline(0, color="gray", linewidth=0.5)
    ax.axvline(0, color="gray", linewidth=0.5)
    ax.legend()
    ax.set_title("Correspondence analysis")
    return ax


def plot_lda_projection(
    result,
    target: str,
    ax: Optional[Axes] = None,
):
    """
    Rows projected on the first two linear discriminants (or a histogram
    of the single discriminant of a two-class problem).

    Parameters
    ----------
    result : Boxspace
        Output of :func:`statnotes.analysis.decomposition.lda_projection`.
    target : str
        Class column of ``result.scores``.
    ax : matplotlib.axes.Axes, optional
    """
    scores = result.scores
    if target not in scores:
        raise PlotError(f"Target column {target!r} not in the projection.")
    ax = get_ax(ax, figsize=(6, 5))
    if "LD2" in scores:
        sns.scatterplot(data=scores, x="LD1", y="LD2", hue=target,
                        style=target, ax=ax)
    else:
        sns.histplot(data=scores, x="LD1", hue=target, element="step", ax=ax)
    ax.set_title("Linear discriminant projection")
    return ax
