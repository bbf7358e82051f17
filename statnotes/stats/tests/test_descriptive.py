# -*- coding: utf-8 -*-
"""
test_descriptive.py

@author: LKouadio <etanoyau@gmail.com>
"""
import numpy as np
import pandas as pd
import pytest

from statnotes.api.summary import ResultSummary
from statnotes.datasets import load_hair_eye, load_mtcars
from statnotes.exceptions import HeaderError
from statnotes.stats import (
    chi_square_test,
    correlation_matrix,
    crosstab,
    describe,
    frequency_table,
    group_summary,
)


@pytest.fixture(scope="module")
def cars():
    return load_mtcars()


def test_describe_mtcars(cars):
    table = describe(cars, ["mpg", "wt"])
    assert table.loc["mpg", "count"] == 32
    assert table.loc["mpg", "mean"] == pytest.approx(20.090625)
    assert table.loc["mpg", "std"] == pytest.approx(6.026948, rel=1e-5)
    assert table.loc["mpg", "50%"] == pytest.approx(19.2)
    assert {"skew", "kurtosis"} <= set(table.columns)


def test_describe_defaults_to_numeric(cars):
    table = describe(cars)
    assert "model" not in table.index
    assert len(table) == 11


def test_describe_errors(cars):
    with pytest.raises(HeaderError):
        describe(cars, ["nope"])
    with pytest.raises(ValueError, match="No numeric"):
        describe(pd.DataFrame({"s": ["a", "b"]}))


def test_frequency_table(cars):
    table = frequency_table(cars, "cyl", normalize=True)
    assert table["count"].tolist() == [11, 7, 14]
    assert table["proportion"].sum() == pytest.approx(1.0, abs=1e-3)
    with pytest.raises(HeaderError):
        frequency_table(cars, "colour")


def test_group_summary(cars):
    table = group_summary(cars, "am", "mpg")
    assert table.loc[0, "mean"] == pytest.approx(17.147368, rel=1e-5)
    assert table.loc[1, "mean"] == pytest.approx(24.392308, rel=1e-5)
    assert table.loc[1, "count"] == 13


def test_correlation_matrix(cars):
    corr, pvalues = correlation_matrix(cars, ["mpg", "wt", "hp"])
    assert corr.loc["mpg", "wt"] == pytest.approx(-0.867659, rel=1e-5)
    assert np.allclose(np.diag(corr), 1.0)
    assert pvalues.loc["mpg", "wt"] < 1e-9
    assert pvalues.loc["wt", "mpg"] == pvalues.loc["mpg", "wt"]
    spearman, _ = correlation_matrix(cars, ["mpg", "wt"], method="spearman")
    assert spearman.loc["mpg", "wt"] < -0.8


def test_crosstab(cars):
    table = crosstab(cars, "am", "cyl", margins=True)
    assert table.loc["All", "All"] == 32
    assert table.loc[1, 4] == 8


def test_chi_square_hair_eye():
    res = chi_square_test(load_hair_eye(as_table=True))
    assert isinstance(res, ResultSummary)
    assert res.dof == 9
    assert res.n == 592
    assert res.statistic == pytest.approx(138.29, abs=0.01)
    assert res.pvalue < 1e-20
    assert res.expected.shape == (4, 4)


def test_chi_square_yates_correction():
    table = [[10, 20], [20, 10]]
    corrected = chi_square_test(table)
    raw = chi_square_test(table, correction=False)
    assert raw.statistic > corrected.statistic
    assert raw.statistic == pytest.approx(6.6667, abs=1e-4)


if __name__ == '__main__':
    pytest.main([__file__])
