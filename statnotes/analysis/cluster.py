# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
K-means clustering with scikit-learn and the elbow/silhouette diagnostics
used to choose the number of clusters.
"""

from numbers import Integral

import numpy as np
import pandas as pd
from sklearn.cluster import KMeans
from sklearn.metrics import silhouette_score
from sklearn.preprocessing import StandardScaler

from .._statnoteslog import statnoteslog
from ..api.structures import Boxspace
from ..compat.sklearn import validate_params, Interval
from ..dataops.cleaning import _check_columns

logger = statnoteslog.get_statnotes_logger(__name__)

__all__ = ["kmeans", "elbow_scores"]


def _numeric_matrix(data, columns, scale):
    columns = _check_columns(data, columns)
    frame = data[columns].select_dtypes(include="number")
    if frame.shape[1] == 0:
        raise ValueError("No numeric column to cluster.")
    scaler = StandardScaler() if scale else None
    X = scaler.fit_transform(frame) if scale else frame.to_numpy(dtype=float)
    return frame, X, scaler


@validate_params({
    "data": [pd.DataFrame],
    "n_clusters": [Interval(Integral, 1, None, closed="left")],
    "scale": ["boolean"],
    "seed": [Interval(Integral, 0, None, closed="left"), None],
    "n_init": [Interval(Integral, 1, None, closed="left")],
})
def kmeans(data, n_clusters, columns=None, scale=True, seed=None, n_init=10):
    """
    K-means clustering of the numeric columns of a frame.

    Parameters
    ----------
    data : pandas.DataFrame
    n_clusters : int
        Number of clusters *k*.
    columns : list of str, optional
        Columns to cluster on. Non-numeric columns are ignored. All numeric
        columns when None.
    scale : bool, default=True
        Standardize the columns first so that each one weighs the same in
        the Euclidean distance.
    seed : int, optional
        Seed of the centroid initialisation.
    n_init : int, default=10
        Number of initialisations; the run with the lowest inertia is kept.

    Returns
    -------
    Boxspace
        ``labels`` (Series aligned with `data`), ``centers`` (one row per
        cluster, in the original units), ``sizes``, ``inertia`` (within-
        cluster sum of squares on the clustered scale), ``silhouette`` (NaN
        when ``k == 1``), ``model`` and ``columns``.

    Examples
    --------
    >>> from statnotes.datasets import simulate_blobs
    >>> from statnotes.analysis.cluster import kmeans
    >>> res = kmeans(simulate_blobs(seed=0), 3, columns=["x", "y"], seed=0)
    >>> int(res.sizes.sum())
    300
    """
    frame, X, scaler = _numeric_matrix(data, columns, scale)
    if n_clusters > len(frame):
        raise ValueError(
            f"n_clusters={n_clusters} exceeds the number of rows ({len(frame)}).")
    model = KMeans(n_clusters=n_clusters, n_init=n_init, random_state=seed).fit(X)

    centers = model.cluster_centers_
    if scaler is not None:
        centers = scaler.inverse_transform(centers)
    labels = pd.Series(model.labels_, index=data.index, name="cluster")
    silhouette = (
        float(silhouette_score(X, model.labels_)) if 1 < n_clusters < len(X)
        else np.nan
    )
    logger.info("k-means k=%d: inertia=%.4f, silhouette=%.4f",
                n_clusters, model.inertia_, silhouette)
    return Boxspace(
        labels=labels,
        centers=pd.DataFrame(
            centers, columns=frame.columns,
            index=pd.RangeIndex(n_clusters, name="cluster")),
        sizes=labels.value_counts().sort_index().rename("size"),
        inertia=float(model.inertia_),
        silhouette=silhouette,
        model=model,
        columns=list(frame.columns),
    )


def elbow_scores(data, k_range=range(1, 9), columns=None, scale=True,
                 seed=None, n_init=10):
    """
    Within-cluster inertia and silhouette width for several values of *k*.

    The *elbow* is the value of *k* after which adding a cluster no longer
    reduces the inertia much; the silhouette width should peak around the
    same value.

    Returns
    -------
    pandas.DataFrame
        Indexed by ``k`` with columns ``inertia`` and ``silhouette``.

    Examples
    --------
    >>> from statnotes.datasets import simulate_blobs
    >>> from statnotes.analysis.cluster import elbow_scores
    >>> scores = elbow_scores(simulate_blobs(seed=0), range(1, 5),
    ...                       columns=["x", "y"], seed=0)
    >>> list(scores.index)
    [1, 2, 3, 4]
    """
    _, X, _ = _numeric_matrix(data, columns, scale)
    rows = []
    for k in k_range:
        model = KMeans(n_clusters=k, n_init=n_init, random_state=seed).fit(X)
        rows.append({
            "k": k,
            "inertia": float(model.inertia_),
            "silhouette": (
                float(silhouette_score(X, model.labels_)) if 1 < k < len(X)
                else np.nan
            ),
        })
    return pd.DataFrame(rows).set_index("k")
