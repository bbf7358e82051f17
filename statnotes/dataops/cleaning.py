# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Cleaning steps shared by the tutorial documents.

All functions return a new DataFrame and leave their input untouched so
they can be chained with the usual pandas methods (``query``, ``assign``,
``pipe``).
"""

import pandas as pd
from sklearn.preprocessing import StandardScaler

from .._statnoteslog import statnoteslog
from ..compat.sklearn import validate_params, StrOptions
from ..exceptions import HeaderError

logger = statnoteslog.get_statnotes_logger(__name__)

__all__ = [
    "drop_missing",
    "to_categorical",
    "parse_dates",
    "standardize",
    "summarize_missing",
]


def _check_columns(data, columns):
    if columns is None:
        return list(data.columns)
    if isinstance(columns, str):
        columns = [columns]
    columns = list(columns)
    missing = [c for c in columns if c not in data.columns]
    if missing:
        raise HeaderError(
            f"Column(s) {missing} not found in data. "
            f"Available columns: {list(data.columns)}.")
    return columns


@validate_params({
    "data": [pd.DataFrame],
    "how": [StrOptions({"any", "all"})],
})
def drop_missing(data, columns=None, how="any"):
    """
    Drop rows with missing values in the given columns.

    Parameters
    ----------
    data : pandas.DataFrame
        Input frame.
    columns : str or list of str, optional
        Columns to inspect. All columns when None.
    how : {'any', 'all'}, default='any'
        Drop a row when any (or all) of the inspected values is missing.

    Returns
    -------
    pandas.DataFrame
        The complete rows, with a fresh index.

    Raises
    ------
    HeaderError
        If a column does not exist.

    Examples
    --------
    >>> import numpy as np, pandas as pd
    >>> from statnotes.dataops import drop_missing
    >>> df = pd.DataFrame({"a": [1, np.nan, 3], "b": [np.nan, 2, 3]})
    >>> drop_missing(df, "a").shape
    (2, 2)
    """
    columns = _check_columns(data, columns)
    cleaned = data.dropna(subset=columns, how=how).reset_index(drop=True)
    logger.info(
        "Dropped %d of %d rows with missing values in %s",
        len(data) - len(cleaned), len(data), columns)
    return cleaned


@validate_params({"data": [pd.DataFrame], "ordered": ["boolean"]})
def to_categorical(data, columns, ordered=False, categories=None):
    """
    Convert columns to pandas categoricals.

    Parameters
    ----------
    data : pandas.DataFrame
        Input frame.
    columns : str or list of str
        Columns to convert.
    ordered : bool, default=False
        Whether the categories have a meaningful order.
    categories : list, optional
        Explicit level order. Only valid when a single column is converted.

    Examples
    --------
    >>> import pandas as pd
    >>> from statnotes.dataops import to_categorical
    >>> df = to_categorical(pd.DataFrame({"cyl": [4, 6, 8, 4]}), "cyl")
    >>> df.cyl.cat.categories.tolist()
    [4, 6, 8]
    """
    columns = _check_columns(data, columns)
    if categories is not None and len(columns) != 1:
        raise ValueError(
            "Explicit categories can only be given for a single column.")
    out = data.copy()
    for col in columns:
        out[col] = pd.Categorical(
            out[col], categories=categories, ordered=ordered)
    return out


@validate_params({"data": [pd.DataFrame]})
def parse_dates(data, columns, format=None):
    """
    Convert string columns to datetimes with :func:`pandas.to_datetime`.

    Examples
    --------
    >>> import pandas as pd
    >>> from statnotes.dataops import parse_dates
    >>> parse_dates(pd.DataFrame({"d": ["2024-01-02"]}), "d").d.dt.day.item()
    2
    """
    columns = _check_columns(data, columns)
    out = data.copy()
    for col in columns:
        out[col] = pd.to_datetime(out[col], format=format)
    return out


@validate_params({"data": [pd.DataFrame]})
def standardize(data, columns=None):
    """
    Scale numeric columns to zero mean and unit variance.

    Uses :class:`sklearn.preprocessing.StandardScaler` (population standard
    deviation). Non-numeric columns are left unchanged.

    Examples
    --------
    >>> import pandas as pd
    >>> from statnotes.dataops import standardize
    >>> out = standardize(pd.DataFrame({"a": [1.0, 2.0, 3.0]}))
    >>> out.a.round(4).tolist()
    [-1.2247, 0.0, 1.2247]
    """
    columns = _check_columns(data, columns)
    numeric = [
        c for c in columns if pd.api.types.is_numeric_dtype(data[c])
        and not pd.api.types.is_bool_dtype(data[c])
    ]
    out = data.copy()
    if numeric:
        out[numeric] = StandardScaler().fit_transform(data[numeric])
    return out


@validate_params({"data": [pd.DataFrame]})
def summarize_missing(data):
    """
    Count missing values per column.

    Returns
    -------
    pandas.DataFrame
        Columns ``missing`` and ``ratio``, one row per input column.

    Examples
    --------
    >>> import numpy as np, pandas as pd
    >>> from statnotes.dataops import summarize_missing
    >>> float(summarize_missing(pd.DataFrame({"a": [1, np.nan]})).loc["a", "ratio"])
    0.5
    """
    missing = data.isna().sum()
    return pd.DataFrame({
        "missing": missing.astype(int),
        "ratio": (missing / max(len(data), 1)).round(4),
    })
