# -*- coding: utf-8 -*-
"""
test_cleaning.py

@author: LKouadio <etanoyau@gmail.com>
"""
import numpy as np
import pandas as pd
import pytest

from statnotes.compat.sklearn import InvalidParameterError
from statnotes.dataops import (
    drop_missing,
    parse_dates,
    standardize,
    summarize_missing,
    to_categorical,
)
from statnotes.exceptions import HeaderError


@pytest.fixture
def frame():
    return pd.DataFrame({
        "a": [1.0, np.nan, 3.0, np.nan],
        "b": [np.nan, 2.0, 3.0, np.nan],
        "label": ["x", "y", "x", "z"],
    })


def test_drop_missing_any_and_all(frame):
    assert len(drop_missing(frame)) == 1
    assert len(drop_missing(frame, ["a", "b"], how="all")) == 3
    out = drop_missing(frame, "a")
    assert out.index.tolist() == [0, 1]
    assert len(frame) == 4


def test_drop_missing_unknown_column(frame):
    with pytest.raises(HeaderError, match="not found"):
        drop_missing(frame, "c")


def test_drop_missing_invalid_how(frame):
    with pytest.raises(InvalidParameterError):
        drop_missing(frame, how="some")


def test_to_categorical_with_order(frame):
    out = to_categorical(frame, "label", ordered=True, categories=["z", "y", "x"])
    assert out["label"].cat.ordered
    assert out["label"].min() == "z"
    assert not isinstance(frame["label"].dtype, pd.CategoricalDtype)


def test_to_categorical_categories_need_single_column(frame):
    with pytest.raises(ValueError, match="single column"):
        to_categorical(frame, ["label", "a"], categories=["x"])


def test_parse_dates():
    df = pd.DataFrame({"d": ["2024-03-01", "2024-03-15"]})
    out = parse_dates(df, "d", format="%Y-%m-%d")
    assert pd.api.types.is_datetime64_any_dtype(out["d"])
    assert (out["d"].iloc[1] - out["d"].iloc[0]).days == 14


def test_standardize_numeric_only(frame):
    out = standardize(frame.dropna(subset=["a"]), ["a", "label"])
    assert out["a"].tolist() == [-1.0, 1.0]
    assert out["label"].tolist() == ["x", "x"]


def test_summarize_missing(frame):
    summary = summarize_missing(frame)
    assert summary.loc["a", "missing"] == 2
    assert summary.loc["b", "ratio"] == 0.5
    assert summary.loc["label", "missing"] == 0


if __name__ == '__main__':
    pytest.main([__file__])
