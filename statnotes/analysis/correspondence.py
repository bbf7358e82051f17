# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Simple correspondence analysis of a two-way contingency table.

The table of counts ``N`` (total ``n``) is turned into correspondence
proportions ``P = N / n`` with row masses ``r`` and column masses ``c``.
The matrix of standardized residuals::

    S = D_r^{-1/2} (P - r c^T) D_c^{-1/2}

is decomposed by a singular value decomposition ``S = U diag(s) V^T``.
The squared singular values are the principal inertias; they add up to the
total inertia, which equals the Pearson chi-square statistic divided by
``n``. Principal coordinates of rows and columns are
``D_r^{-1/2} U diag(s)`` and ``D_c^{-1/2} V diag(s)``.
"""

from numbers import Integral

import numpy as np
import pandas as pd
from scipy import linalg

from .._statnoteslog import statnoteslog
from ..api.structures import Boxspace
from ..compat.sklearn import validate_params, Interval

logger = statnoteslog.get_statnotes_logger(__name__)

__all__ = ["correspondence_analysis"]


def _as_table(table):
    if isinstance(table, pd.DataFrame):
        return table.astype(float)
    values = np.asarray(table, dtype=float)
    if values.ndim != 2:
        raise ValueError(f"Expect a two-way table. Got {values.ndim} dimension(s).")
    return pd.DataFrame(
        values,
        index=[f"row{i + 1}" for i in range(values.shape[0])],
        columns=[f"col{j + 1}" for j in range(values.shape[1])],
    )


@validate_params({
    "n_components": [Interval(Integral, 1, None, closed="left")],
})
def correspondence_analysis(table, n_components=2):
    """
    Correspondence analysis of a contingency table.

    Parameters
    ----------
    table : pandas.DataFrame or array-like of shape (n_rows, n_cols)
        Non-negative counts. Row and column labels of a frame are kept.
    n_components : int, default=2
        Number of dimensions reported in the coordinates. Clipped to
        ``min(n_rows, n_cols) - 1``.

    Returns
    -------
    Boxspace
        ``row_coordinates`` and ``column_coordinates`` (principal
        coordinates, dimensions ``Dim1, Dim2, ...``), ``inertia`` (principal
        inertia, its share and cumulative share per dimension over all
        dimensions), ``total_inertia``, ``chi2``, ``row_masses``,
        ``column_masses`` and ``row_contributions`` /
        ``column_contributions`` (share of each dimension's inertia).

    Raises
    ------
    ValueError
        If the table has negative entries, an empty row or column, or fewer
        than two rows or columns.

    Examples
    --------
    >>> from statnotes.datasets import load_hair_eye
    >>> from statnotes.analysis.correspondence import correspondence_analysis
    >>> res = correspondence_analysis(load_hair_eye(as_table=True))
    >>> round(res.total_inertia, 4)
    0.2336
    """
    N = _as_table(table)
    values = N.to_numpy()
    if np.isnan(values).any():
        raise ValueError("The contingency table contains missing values.")
    if (values < 0).any():
        raise ValueError("The contingency table contains negative counts.")
    if min(values.shape) < 2:
        raise ValueError(
            f"Expect at least two rows and two columns. Got {values.shape}.")
    n = values.sum()
    row_sums, col_sums = values.sum(axis=1), values.sum(axis=0)
    if n == 0 or (row_sums == 0).any() or (col_sums == 0).any():
        raise ValueError(
            "Every row and column of the contingency table must have a"
            " positive total.")

    P = values / n
    r, c = P.sum(axis=1), P.sum(axis=0)
    S = (P - np.outer(r, c)) / np.sqrt(np.outer(r, c))
    U, s, Vt = linalg.svd(S, full_matrices=False)

    n_dims = min(values.shape) - 1
    s, U, V = s[:n_dims], U[:, :n_dims], Vt.T[:, :n_dims]
    # Fix the arbitrary SVD signs: largest column loading positive.
    signs = np.sign(V[np.argmax(np.abs(V), axis=0), np.arange(n_dims)])
    signs[signs == 0] = 1
    U, V = U * signs, V * signs

    eigenvalues = s ** 2
    total = float(eigenvalues.sum())
    names = [f"Dim{i + 1}" for i in range(n_dims)]
    inertia = pd.DataFrame({
        "inertia": eigenvalues,
        "ratio": eigenvalues / total if total > 0 else np.nan,
    }, index=pd.Index(names, name="dimension"))
    inertia["cumulative"] = inertia["ratio"].cumsum()

    k = min(n_components, n_dims)
    row_coords = (U * s) / np.sqrt(r)[:, None]
    col_coords = (V * s) / np.sqrt(c)[:, None]
    logger.info(
        "Correspondence analysis of a %dx%d table: total inertia=%.4f",
        values.shape[0], values.shape[1], total)
    return Boxspace(
        row_coordinates=pd.DataFrame(
            row_coords[:, :k], index=N.index, columns=names[:k]),
        column_coordinates=pd.DataFrame(
            col_coords[:, :k], index=N.columns, columns=names[:k]),
        inertia=inertia,
        total_inertia=total,
        chi2=total * n,
        row_masses=pd.Series(r, index=N.index, name="mass"),
        column_masses=pd.Series(c, index=N.columns, name="mass"),
        row_contributions=pd.DataFrame(
            U[:, :k] ** 2, index=N.index, columns=names[:k]),
        column_contributions=pd.DataFrame(
            V[:, :k] ** 2, index=N.columns, columns=names[:k]),
    )
