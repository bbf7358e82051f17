# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Principal component analysis and linear discriminant projections.

Both functions return labelled frames (components named ``PC1, PC2, ...``
or ``LD1, LD2, ...``) so the results print and plot without further
bookkeeping.
"""

from numbers import Integral

import numpy as np
import pandas as pd
from sklearn.decomposition import PCA
from sklearn.discriminant_analysis import LinearDiscriminantAnalysis
from sklearn.preprocessing import StandardScaler

from .._statnoteslog import statnoteslog
from ..api.structures import Boxspace
from ..compat.sklearn import validate_params, Interval
from ..dataops.cleaning import _check_columns
from ..exceptions import HeaderError

logger = statnoteslog.get_statnotes_logger(__name__)

__all__ = ["pca", "lda_projection"]


@validate_params({
    "data": [pd.DataFrame],
    "scale": ["boolean"],
    "n_components": [Interval(Integral, 1, None, closed="left"), None],
})
def pca(data, columns=None, scale=True, n_components=None):
    """
    Principal component analysis of numeric columns.

    Parameters
    ----------
    data : pandas.DataFrame
    columns : list of str, optional
        Variables to analyse. All numeric columns when None.
    scale : bool, default=True
        Standardize the variables, i.e. analyse the correlation matrix rather
        than the covariance matrix.
    n_components : int, optional
        Number of components kept. All of them when None.

    Returns
    -------
    Boxspace
        ``explained`` (per component: ``variance`` (eigenvalue), ``ratio``
        and ``cumulative``), ``loadings`` (variables x components),
        ``scores`` (rows x components), ``model`` and ``columns``.

    Examples
    --------
    >>> from statnotes.datasets import load_iris
    >>> from statnotes.analysis.decomposition import pca
    >>> res = pca(load_iris())
    >>> round(float(res.explained.loc["PC1", "ratio"]), 4)
    0.7296
    """
    columns = _check_columns(data, columns)
    frame = data[columns].select_dtypes(include="number").dropna()
    X = (
        StandardScaler().fit_transform(frame) if scale
        else frame.to_numpy(dtype=float)
    )
    model = PCA(n_components=n_components).fit(X)
    names = [f"PC{i + 1}" for i in range(model.n_components_)]

    explained = pd.DataFrame({
        "variance": model.explained_variance_,
        "ratio": model.explained_variance_ratio_,
        "cumulative": np.cumsum(model.explained_variance_ratio_),
    }, index=pd.Index(names, name="component"))
    logger.info("PCA on %d variables: first component explains %.2f%%",
                frame.shape[1], 100 * explained["ratio"].iloc[0])
    return Boxspace(
        explained=explained,
        loadings=pd.DataFrame(
            model.components_.T, index=frame.columns, columns=names),
        scores=pd.DataFrame(model.transform(X), index=frame.index, columns=names),
        model=model,
        columns=list(frame.columns),
    )


def lda_projection(data, target, features=None, n_components=None):
    """
    Project rows onto the linear discriminants of a categorical target.

    Parameters
    ----------
    data : pandas.DataFrame
    target : str
        Class column.
    features : list of str, optional
        Numeric predictors. All numeric columns except `target` when None.
    n_components : int, optional
        At most ``n_classes - 1`` discriminants.

    Returns
    -------
    Boxspace
        ``scores`` (``LD1, LD2, ...`` plus the target column),
        ``explained_variance_ratio`` (between-class variance captured by
        each discriminant), ``scalings`` (features x discriminants) and
        ``model``.

    Examples
    --------
    >>> from statnotes.datasets import load_iris
    >>> from statnotes.analysis.decomposition import lda_projection
    >>> res = lda_projection(load_iris(), "species")
    >>> bool(res.explained_variance_ratio.iloc[0] > 0.95)
    True
    """
    if target not in data.columns:
        raise HeaderError(f"Target column {target!r} not found in data.")
    if features is None:
        features = [
            c for c in data.select_dtypes(include="number").columns if c != target]
    features = _check_columns(data, features)

    frame = data[features + [target]].dropna()
    model = LinearDiscriminantAnalysis(n_components=n_components).fit(
        frame[features], frame[target])
    projected = model.transform(frame[features])
    names = [f"LD{i + 1}" for i in range(projected.shape[1])]

    scores = pd.DataFrame(projected, index=frame.index, columns=names)
    scores[target] = frame[target]
    return Boxspace(
        scores=scores,
        explained_variance_ratio=pd.Series(
            model.explained_variance_ratio_[:len(names)], index=names,
            name="ratio"),
        scalings=pd.DataFrame(
            model.scalings_[:, :len(names)], index=features, columns=names),
        model=model,
    )
