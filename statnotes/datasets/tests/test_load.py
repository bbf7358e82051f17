# -*- coding: utf-8 -*-
"""
test_load.py

@author: LKouadio <etanoyau@gmail.com>
"""
import sqlite3
from contextlib import closing
from unittest.mock import patch

import numpy as np
import pandas as pd
import pytest

from statnotes.api.structures import Boxspace
from statnotes.datasets.load import (
    get_data_path,
    list_datasets,
    load_hair_eye,
    load_iris,
    load_mtcars,
    read_data,
)
from statnotes.exceptions import DatasetError, FileHandlingError


def test_list_datasets():
    names = list_datasets()
    assert "mtcars" in names and "hair_eye" in names


def test_get_data_path_accepts_extension():
    assert get_data_path("mtcars.csv") == get_data_path("mtcars")


def test_get_data_path_unknown_suggests_close_name():
    with pytest.raises(DatasetError, match="Did you mean 'mtcars'"):
        get_data_path("mtcar")


def test_load_mtcars_frame():
    cars = load_mtcars()
    assert cars.shape == (32, 12)
    assert list(cars.columns[:3]) == ["model", "mpg", "cyl"]
    assert cars["mpg"].mean() == pytest.approx(20.090625)
    assert cars["wt"].mean() == pytest.approx(3.21725)


def test_load_mtcars_box():
    box = load_mtcars(as_frame=False)
    assert isinstance(box, Boxspace)
    assert box.target.name == "mpg"
    assert "mpg" not in box.feature_names
    assert box.data.shape == (32, 10)
    assert "Motor Trend" in box.DESCR


def test_load_hair_eye_table():
    table = load_hair_eye(as_table=True)
    assert table.shape == (4, 4)
    assert int(table.to_numpy().sum()) == 592
    assert list(table.index) == ["Black", "Brown", "Red", "Blond"]
    assert list(table.columns) == ["Brown", "Blue", "Hazel", "Green"]


def test_load_hair_eye_by_sex():
    table = load_hair_eye(as_table=True, by_sex=True)
    assert table.shape == (8, 4)
    assert int(table.loc["Male"].to_numpy().sum()) + int(
        table.loc["Female"].to_numpy().sum()) == 592


def test_load_hair_eye_frame_and_box():
    frame = load_hair_eye()
    assert list(frame.columns) == ["hair", "eye", "sex", "count"]
    assert int(frame["count"].sum()) == 592
    assert list(frame["eye"].cat.categories) == ["Brown", "Blue", "Hazel", "Green"]

    box = load_hair_eye(as_frame=False)
    assert isinstance(box, Boxspace)
    assert box.frame.shape == frame.shape
    assert box.data.shape == (4, 4)
    assert box.feature_names == ["Brown", "Blue", "Hazel", "Green"]
    assert box.target_names == ["Black", "Brown", "Red", "Blond"]
    assert load_hair_eye(as_frame=False, by_sex=True).data.shape == (8, 4)


def test_load_iris():
    iris = load_iris()
    assert iris.shape == (150, 5)
    assert list(iris.species.cat.categories) == ["setosa", "versicolor", "virginica"]
    box = load_iris(as_frame=False)
    assert box.target_names == ["setosa", "versicolor", "virginica"]


def test_read_data_excel_and_sqlite_roundtrip(tmp_path):
    frame = pd.DataFrame({"a": [1, 2, 3], "b": ["x", "y", "z"]})
    xlsx = tmp_path / "sample.xlsx"
    frame.to_excel(xlsx, index=False)
    pd.testing.assert_frame_equal(read_data(xlsx), frame)

    db = tmp_path / "sample.db"
    with closing(sqlite3.connect(db)) as conn:
        frame.to_sql("items", conn, index=False)
    pd.testing.assert_frame_equal(read_data(db, table="items"), frame)
    selected = read_data(db, table="SELECT a FROM items WHERE a > 1")
    assert selected["a"].tolist() == [2, 3]


def test_read_data_json(tmp_path):
    path = tmp_path / "rows.json"
    pd.DataFrame({"a": [1, 2]}).to_json(path, orient="records")
    assert read_data(path)["a"].tolist() == [1, 2]


def test_read_data_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_data(tmp_path / "missing.csv")
    odd = tmp_path / "data.parquetx"
    odd.write_text("")
    with pytest.raises(FileHandlingError):
        read_data(odd)
    db = tmp_path / "empty.db"
    db.write_bytes(b"")
    with pytest.raises(ValueError, match="table"):
        read_data(db)


@patch("statnotes.datasets.load.read_data")
def test_load_mtcars_uses_reader(mock_read_data):
    mock_read_data.return_value = pd.DataFrame(
        {"model": ["a", "b"], "mpg": [20.0, 30.0], "wt": [3.0, 2.0]})
    cars = load_mtcars()
    mock_read_data.assert_called_once()
    assert cars["mpg"].tolist() == [20.0, 30.0]
    box = load_mtcars(as_frame=False)
    assert np.allclose(box.target.to_numpy(), [20.0, 30.0])


if __name__ == '__main__':
    pytest.main([__file__])
