# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Loaders for the small sample datasets bundled with statnotes, plus a reader
dispatching on file extension for the data-import tutorial.
"""

import os
import sqlite3
import difflib
from contextlib import closing

import pandas as pd
from sklearn import datasets as sk_datasets

from .._statnoteslog import statnoteslog
from ..api.structures import Boxspace
from ..exceptions import DatasetError, FileHandlingError
from ._descr import DESCRIPTIONS

logger = statnoteslog.get_statnotes_logger(__name__)

__all__ = [
    "get_data_path",
    "list_datasets",
    "read_data",
    "load_mtcars",
    "load_hair_eye",
    "load_iris",
]

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")

_CSV_EXT = (".csv", ".txt")
_EXCEL_EXT = (".xlsx", ".xls")
_SQLITE_EXT = (".db", ".sqlite", ".sqlite3")
_JSON_EXT = (".json",)


def list_datasets():
    """Return the names of the bundled sample files, without extension."""
    return sorted(
        os.path.splitext(f)[0] for f in os.listdir(DATA_DIR)
        if f.endswith(_CSV_EXT)
    )


def get_data_path(name):
    """
    Return the absolute path of a bundled sample file.

    Parameters
    ----------
    name : str
        Dataset name, with or without the ``.csv`` extension.

    Raises
    ------
    DatasetError
        If no bundled file has this name.

    Examples
    --------
    >>> from statnotes.datasets import get_data_path
    >>> get_data_path("mtcars").endswith("mtcars.csv")
    True
    """
    stem = os.path.splitext(os.path.basename(str(name)))[0]
    available = list_datasets()
    if stem not in available:
        close = difflib.get_close_matches(stem, available, n=1)
        hint = f" Did you mean {close[0]!r}?" if close else ""
        raise DatasetError(
            f"Unknown dataset {name!r}. Available datasets: {available}.{hint}")
    return os.path.join(DATA_DIR, stem + ".csv")


def read_data(path, *, table=None, sheet_name=0, **kws):
    """
    Read a tabular file into a DataFrame, choosing the reader from the file
    extension.

    Parameters
    ----------
    path : str or os.PathLike
        Path to a comma-separated file (``.csv``, ``.txt``), a spreadsheet
        (``.xlsx``, ``.xls``), an embedded SQLite database (``.db``,
        ``.sqlite``, ``.sqlite3``) or a JSON records file (``.json``).
    table : str, optional
        Table to read when `path` is a database file. A full ``SELECT``
        statement is also accepted.
    sheet_name : str or int, default=0
        Sheet to read when `path` is a spreadsheet.
    **kws : dict
        Extra keyword arguments forwarded to the pandas reader.

    Returns
    -------
    pandas.DataFrame

    Raises
    ------
    FileNotFoundError
        If `path` does not exist.
    FileHandlingError
        If the extension is not handled.
    ValueError
        If `table` is missing for a database file.

    Examples
    --------
    >>> from statnotes.datasets import read_data, get_data_path
    >>> cars = read_data(get_data_path("mtcars"))
    >>> cars.shape
    (32, 12)
    """
    path = os.fspath(path)
    ext = os.path.splitext(path)[1].lower()
    if not os.path.isfile(path):
        raise FileNotFoundError(f"No such file: {path!r}")

    logger.info("Reading %s", path)
    if ext in _CSV_EXT:
        return pd.read_csv(path, **kws)
    if ext in _EXCEL_EXT:
        if ext == ".xlsx":
            kws.setdefault("engine", "openpyxl")
        return pd.read_excel(path, sheet_name=sheet_name, **kws)
    if ext in _SQLITE_EXT:
        if not table:
            raise ValueError(
                "A table name or a SELECT statement is required to read"
                f" from the database file {path!r}.")
        query = table if table.lstrip().lower().startswith("select") else (
            f'SELECT * FROM "{table}"')
        with closing(sqlite3.connect(path)) as conn:
            return pd.read_sql(query, conn, **kws)
    if ext in _JSON_EXT:
        return pd.read_json(path, **kws)

    raise FileHandlingError(
        f"Unsupported file extension {ext!r}. Expect one of "
        f"{_CSV_EXT + _EXCEL_EXT + _SQLITE_EXT + _JSON_EXT}.")


def _to_box(frame, target_name, name):
    feature_names = [c for c in frame.columns if c != target_name]
    target = frame[target_name]
    return Boxspace(
        data=frame[feature_names],
        target=target,
        frame=frame,
        feature_names=feature_names,
        target_names=(
            list(target.cat.categories)
            if isinstance(target.dtype, pd.CategoricalDtype) else [target_name]
        ),
        DESCR=DESCRIPTIONS[name],
    )


def load_mtcars(as_frame=True, target_name="mpg"):
    """
    Load the Motor Trend car road tests sample.

    Parameters
    ----------
    as_frame : bool, default=True
        If True, return the DataFrame. Otherwise return a `Boxspace` with
        ``data``, ``target``, ``frame``, ``feature_names``,
        ``target_names`` and ``DESCR``.
    target_name : str, default='mpg'
        Column used as ``target`` when ``as_frame=False``.

    Examples
    --------
    >>> from statnotes.datasets import load_mtcars
    >>> cars = load_mtcars()
    >>> cars.loc[cars.model == "Fiat 128", "mpg"].item()
    32.4
    """
    frame = read_data(get_data_path("mtcars"))
    if as_frame:
        return frame
    return _to_box(frame.set_index("model"), target_name, "mtcars")


def _hair_eye_table(frame, by_sex):
    index = ["sex", "hair"] if by_sex else "hair"
    table = frame.pivot_table(
        index=index, columns="eye", values="count", aggfunc="sum",
        observed=True)
    table.columns = table.columns.astype(str)
    table.columns.name = "eye"
    return table


def load_hair_eye(as_frame=True, as_table=False, by_sex=False):
    """
    Load the hair/eye colour counts of 592 students.

    Parameters
    ----------
    as_frame : bool, default=True
        If True, return a DataFrame (see `as_table`). Otherwise return a
        `Boxspace` whose ``frame`` is the long-format frame and ``data``
        the contingency table, with ``feature_names`` (eye colours),
        ``target_names`` (hair colours) and ``DESCR``.
    as_table : bool, default=False
        With ``as_frame=True``, return the hair-by-eye contingency table
        (counts summed over sex unless `by_sex` is set) instead of the
        long ``hair, eye, sex, count`` frame.
    by_sex : bool, default=False
        Keep sex as an outer row level of the contingency table.

    Returns
    -------
    pandas.DataFrame or Boxspace

    Examples
    --------
    >>> from statnotes.datasets import load_hair_eye
    >>> load_hair_eye().columns.tolist()
    ['hair', 'eye', 'sex', 'count']
    >>> int(load_hair_eye(as_table=True).to_numpy().sum())
    592
    """
    frame = read_data(get_data_path("hair_eye"))
    order = {
        "hair": ["Black", "Brown", "Red", "Blond"],
        "eye": ["Brown", "Blue", "Hazel", "Green"],
        "sex": ["Male", "Female"],
    }
    for col, levels in order.items():
        frame[col] = pd.Categorical(frame[col], categories=levels)
    if as_frame:
        return _hair_eye_table(frame, by_sex) if as_table else frame
    table = _hair_eye_table(frame, by_sex)
    return Boxspace(
        data=table,
        frame=frame,
        feature_names=list(table.columns),
        target_names=list(frame["hair"].cat.categories),
        DESCR=DESCRIPTIONS["hair_eye"],
    )


def load_iris(as_frame=True):
    """
    Load Fisher's iris data from scikit-learn with tidy column names.

    Examples
    --------
    >>> from statnotes.datasets import load_iris
    >>> load_iris().species.value_counts().tolist()
    [50, 50, 50]
    """
    raw = sk_datasets.load_iris(as_frame=True)
    frame = raw.frame.rename(columns={
        "sepal length (cm)": "sepal_length",
        "sepal width (cm)": "sepal_width",
        "petal length (cm)": "petal_length",
        "petal width (cm)": "petal_width",
    })
    frame["species"] = pd.Categorical.from_codes(
        frame.pop("target"), categories=list(raw.target_names))
    if as_frame:
        return frame
    return _to_box(frame, "species", "iris")
