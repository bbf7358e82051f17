# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Descriptive statistics printed at the start of most tutorial documents:
location, spread and shape of numeric columns, frequency tables, grouped
summaries, correlations and contingency tables.
"""

import numpy as np
import pandas as pd
from scipy import stats as spstats

from ..api.summary import ResultSummary
from ..compat.sklearn import validate_params, StrOptions
from ..exceptions import HeaderError

__all__ = [
    "describe",
    "frequency_table",
    "group_summary",
    "correlation_matrix",
    "crosstab",
    "chi_square_test",
]


def _numeric_columns(data, columns=None):
    if columns is None:
        columns = [
            c for c in data.columns
            if pd.api.types.is_numeric_dtype(data[c])
            and not pd.api.types.is_bool_dtype(data[c])
        ]
    else:
        columns = [columns] if isinstance(columns, str) else list(columns)
        missing = [c for c in columns if c not in data.columns]
        if missing:
            raise HeaderError(f"Column(s) {missing} not found in data.")
    if not columns:
        raise ValueError("No numeric column to summarize.")
    return columns


@validate_params({"data": [pd.DataFrame]})
def describe(data, columns=None):
    """
    Summarize numeric columns.

    Parameters
    ----------
    data : pandas.DataFrame
        Input frame.
    columns : list of str, optional
        Columns to summarize. Defaults to every numeric column.

    Returns
    -------
    pandas.DataFrame
        One row per column with ``count``, ``mean``, ``std`` (sample),
        ``min``, ``25%``, ``50%``, ``75%``, ``max``, ``skew`` and
        ``kurtosis`` (excess, bias-corrected as in pandas).

    Examples
    --------
    >>> from statnotes.datasets import load_mtcars
    >>> from statnotes.stats import describe
    >>> round(float(describe(load_mtcars(), ["mpg"]).loc["mpg", "mean"]), 3)
    20.091
    """
    columns = _numeric_columns(data, columns)
    frame = data[columns]
    table = frame.describe().T
    table["skew"] = frame.skew()
    table["kurtosis"] = frame.kurt()
    table["count"] = table["count"].astype(int)
    return table


def frequency_table(data, column, normalize=False, dropna=True):
    """
    Count how often each level of a column occurs.

    Parameters
    ----------
    data : pandas.DataFrame
    column : str
    normalize : bool, default=False
        Add a ``proportion`` column.
    dropna : bool, default=True
        Whether missing values are ignored.

    Examples
    --------
    >>> from statnotes.datasets import load_mtcars
    >>> from statnotes.stats import frequency_table
    >>> frequency_table(load_mtcars(), "cyl")["count"].tolist()
    [11, 7, 14]
    """
    if column not in data.columns:
        raise HeaderError(f"Column {column!r} not found in data.")
    counts = data[column].value_counts(dropna=dropna, sort=False).sort_index()
    table = counts.rename("count").to_frame()
    table.index.name = column
    if normalize:
        table["proportion"] = (table["count"] / table["count"].sum()).round(4)
    return table


def group_summary(data, by, column, stats=("mean", "std", "count")):
    """
    Aggregate a numeric column within groups.

    Examples
    --------
    >>> from statnotes.datasets import load_mtcars
    >>> from statnotes.stats import group_summary
    >>> group_summary(load_mtcars(), "am", "mpg").shape
    (2, 3)
    """
    for col in ([by] if isinstance(by, str) else list(by)) + [column]:
        if col not in data.columns:
            raise HeaderError(f"Column {col!r} not found in data.")
    return data.groupby(by, observed=True)[column].agg(list(stats))


@validate_params({
    "data": [pd.DataFrame],
    "method": [StrOptions({"pearson", "spearman", "kendall"})],
})
def correlation_matrix(data, columns=None, method="pearson"):
    """
    Pairwise correlations with their p-values.

    Parameters
    ----------
    data : pandas.DataFrame
    columns : list of str, optional
        Defaults to every numeric column.
    method : {'pearson', 'spearman', 'kendall'}, default='pearson'

    Returns
    -------
    corr : pandas.DataFrame
        The correlation coefficients.
    pvalues : pandas.DataFrame
        Two-sided p-values of the test of no correlation (scipy), with
        zeros on the diagonal.

    Examples
    --------
    >>> from statnotes.datasets import load_mtcars
    >>> from statnotes.stats import correlation_matrix
    >>> corr, p = correlation_matrix(load_mtcars(), ["mpg", "wt"])
    >>> round(float(corr.loc["mpg", "wt"]), 4)
    -0.8677
    """
    columns = _numeric_columns(data, columns)
    frame = data[columns].dropna()
    tests = {
        "pearson": spstats.pearsonr,
        "spearman": spstats.spearmanr,
        "kendall": spstats.kendalltau,
    }
    corr = frame.corr(method=method)
    pvalues = pd.DataFrame(
        np.zeros((len(columns), len(columns))), index=columns, columns=columns)
    for i, a in enumerate(columns):
        for b in columns[i + 1:]:
            p = float(tests[method](frame[a], frame[b])[1])
            pvalues.loc[a, b] = pvalues.loc[b, a] = p
    return corr, pvalues


def crosstab(data, row, col, margins=False):
    """
    Two-way contingency table of counts.

    Examples
    --------
    >>> from statnotes.datasets import load_mtcars
    >>> from statnotes.stats import crosstab
    >>> int(crosstab(load_mtcars(), "am", "cyl").to_numpy().sum())
    32
    """
    for c in (row, col):
        if c not in data.columns:
            raise HeaderError(f"Column {c!r} not found in data.")
    return pd.crosstab(data[row], data[col], margins=margins)


def chi_square_test(table, correction=True):
    """
    Pearson's chi-square test of independence on a contingency table.

    Parameters
    ----------
    table : pandas.DataFrame or array-like
        Observed counts.
    correction : bool, default=True
        Yates' continuity correction for 2 x 2 tables (scipy default).

    Returns
    -------
    ResultSummary
        ``statistic``, ``pvalue``, ``dof`` and the ``expected`` counts.

    Examples
    --------
    >>> from statnotes.datasets import load_hair_eye
    >>> from statnotes.stats import chi_square_test
    >>> res = chi_square_test(load_hair_eye(as_table=True))
    >>> res.dof
    9
    """
    observed = np.asarray(table, dtype=float)
    statistic, pvalue, dof, expected = spstats.chi2_contingency(
        observed, correction=correction)
    if isinstance(table, pd.DataFrame):
        expected = pd.DataFrame(expected, index=table.index, columns=table.columns)
    return ResultSummary(name="chi square test", pad_keys="auto").add_results({
        "statistic": float(statistic),
        "pvalue": float(pvalue),
        "dof": int(dof),
        "n": int(observed.sum()),
        "expected": expected,
    })
