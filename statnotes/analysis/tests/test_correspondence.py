# -*- coding: utf-8 -*-
"""
test_correspondence.py

@author: LKouadio <etanoyau@gmail.com>
"""
import numpy as np
import pandas as pd
import pytest

from statnotes.analysis import correspondence_analysis
from statnotes.datasets import load_hair_eye


@pytest.fixture(scope="module")
def hair_eye():
    return load_hair_eye(as_table=True)


def test_hair_eye_inertia(hair_eye):
    res = correspondence_analysis(hair_eye)
    assert res.total_inertia == pytest.approx(0.2336, abs=1e-4)
    assert res.chi2 == pytest.approx(138.29, abs=0.01)
    assert list(res.inertia.index) == ["Dim1", "Dim2", "Dim3"]
    assert res.inertia["inertia"].is_monotonic_decreasing
    assert res.inertia["cumulative"].iloc[-1] == pytest.approx(1.0)
    assert res.inertia.loc["Dim1", "ratio"] > 0.85


def test_coordinates_and_masses(hair_eye):
    res = correspondence_analysis(hair_eye, n_components=2)
    assert list(res.row_coordinates.index) == list(hair_eye.index)
    assert list(res.column_coordinates.columns) == ["Dim1", "Dim2"]
    assert res.row_masses.sum() == pytest.approx(1.0)
    assert res.column_masses.sum() == pytest.approx(1.0)
    # mass-weighted squared principal coordinates give the principal inertias
    weighted = (res.row_coordinates ** 2).mul(res.row_masses, axis=0).sum()
    assert np.allclose(weighted, res.inertia["inertia"].iloc[:2])
    assert np.allclose(res.row_contributions.sum(), 1.0)
    assert np.allclose(res.column_contributions.sum(), 1.0)


def test_array_input_and_clipping():
    res = correspondence_analysis([[10, 5], [3, 12]], n_components=4)
    assert list(res.row_coordinates.index) == ["row1", "row2"]
    assert list(res.column_coordinates.index) == ["col1", "col2"]
    assert res.row_coordinates.shape == (2, 1)


def test_independent_table_has_no_inertia():
    res = correspondence_analysis(np.outer([1, 2, 3], [4, 5, 6]))
    assert res.total_inertia == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("table", [
    [[1.0, np.nan], [2.0, 3.0]],
    [[1, -2], [3, 4]],
    [[1, 2, 3]],
    [[0, 0], [1, 2]],
])
def test_invalid_tables(table):
    with pytest.raises(ValueError):
        correspondence_analysis(pd.DataFrame(table))


if __name__ == '__main__':
    pytest.main([__file__])
