# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>

"""
The `cluster` module provides visualization tools for cluster analysis:
the elbow curve used to choose *k* and the scatter plot of the clusters
found.
"""

from __future__ import annotations
from typing import Optional

import numpy as np
import pandas as pd
import seaborn as sns
from matplotlib.axes import Axes

from .utils import check_columns, get_ax

__all__ = ["plot_elbow", "plot_clusters"]


def plot_elbow(
    scores: pd.DataFrame,
    marker: str = "o",
    ax: Optional[Axes] = None,
):
    """
    Plot the elbow curve of k-means inertia, with the silhouette width on a
    secondary axis.

    Parameters
    ----------
    scores : pandas.DataFrame
        Indexed by *k* with columns ``inertia`` and, optionally,
        ``silhouette``, as returned by
        :func:`statnotes.analysis.cluster.elbow_scores`.
    marker : str, default='o'
    ax : matplotlib.axes.Axes, optional

    Returns
    -------
    ax : matplotlib.axes.Axes
        The axes holding the inertia curve.

    Notes
    -----
    The inertia for k-means clustering is defined as:

    .. math::
        \\text{Inertia} = \\sum_{i=1}^{n} \\min_{\\mu_j \\in C} (||x_i - \\mu_j||^2)

    The point where the inertia starts to decrease more slowly (forming an
    "elbow") indicates a sensible number of clusters.
    """
    ax = get_ax(ax)
    ax.plot(scores.index, scores["inertia"], marker=marker, color="tab:blue")
    ax.set_xlabel("Number of clusters")
    ax.set_ylabel("Inertia", color="tab:blue")
    ax.set_xticks(list(scores.index))

    if "silhouette" in scores and scores["silhouette"].notna().any():
        twin = ax.twinx()
        twin.plot(scores.index, scores["silhouette"], marker="s",
                  linestyle="--", color="tab:orange")
        twin.set_ylabel("Silhouette", color="tab:orange")
    ax.set_title("Elbow method")
    return ax


def plot_clusters(
    data: pd.DataFrame,
    x: str,
    y: str,
    labels,
    centers: Optional[pd.DataFrame] = None,
    ax: Optional[Axes] = None,
    **kws
):
    """
    Scatter plot of two variables colored by cluster label.

    Parameters
    ----------
    data : pandas.DataFrame
    x, y : str
        Columns on the axes.
    labels : array-like
        Cluster of each row.
    centers : pandas.DataFrame, optional
        Cluster centers with columns `x` and `y`, drawn as crosses.
    ax : matplotlib.axes.Axes, optional

    Returns
    -------
    ax : matplotlib.axes.Axes
    """
    check_columns(data, x, y)
    ax = get_ax(ax, figsize=(6, 5))
    sns.scatterplot(x=data[x], y=data[y], hue=np.asarray(labels).astype(str),
                    palette="deep", ax=ax, **kws)
    if centers is not None:
        ax.scatter(centers[x], centers[y], marker="X", s=200, c="black",
                   label="centers")
    ax.legend(title="cluster")
    ax.set_title("Clusters")
    return ax
