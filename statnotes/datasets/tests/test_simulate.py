# -*- coding: utf-8 -*-
"""
test_simulate.py

@author: LKouadio <etanoyau@gmail.com>
"""
import numpy as np
import pandas as pd
import pytest

from statnotes.compat.sklearn import InvalidParameterError
from statnotes.datasets import (
    simulate_admissions,
    simulate_air_quality,
    simulate_blobs,
    simulate_customers,
    simulate_growth,
    simulate_housing,
    simulate_salaries,
    simulate_survey,
)


@pytest.mark.parametrize("simulate", [
    simulate_salaries, simulate_growth, simulate_admissions,
    simulate_customers, simulate_blobs, simulate_survey, simulate_housing,
])
def test_same_seed_same_frame(simulate):
    pd.testing.assert_frame_equal(simulate(seed=3), simulate(seed=3))
    assert not simulate(seed=3).equals(simulate(seed=4))


def test_simulate_salaries_structure():
    df = simulate_salaries(500, noise=0.0, seed=0)
    bonus = df["education"].map({"bachelor": 0.0, "master": 8.0, "phd": 15.0})
    expected = 30 + 2.5 * df["experience"] + bonus.astype(float)
    assert np.allclose(df["salary"], expected, atol=0.01)
    assert list(df["education"].cat.categories) == ["bachelor", "master", "phd"]


def test_simulate_growth_sorted_doses():
    df = simulate_growth(40, seed=1)
    assert df["dose"].is_monotonic_increasing
    assert df["dose"].between(0, 10).all()


def test_simulate_admissions_ranges():
    df = simulate_admissions(seed=0)
    assert df["gre"].between(220, 800).all()
    assert df["gpa"].between(2.2, 4.0).all()
    assert set(df["rank"]) <= {1, 2, 3, 4}
    assert 0.2 < df["admit"].mean() < 0.6


def test_simulate_customers_segments_and_channel():
    df = simulate_customers(200, seed=2)
    assert list(df.columns) == [
        "age", "income", "spending", "visits", "channel", "segment"]
    means = df.groupby("segment", observed=True)["income"].mean()
    assert means["budget"] < means["regular"] < means["premium"]
    assert df["age"].between(18, 80).all()


def test_simulate_blobs_groups():
    df = simulate_blobs(100, n_centers=4, cluster_std=0.5, seed=0)
    assert df["group"].between(0, 3).all()
    spread = df.groupby("group")[["x", "y"]].std()
    assert (spread < 1.0).all().all()


def test_simulate_survey_items():
    df = simulate_survey(300, n_factors=3, items_per_factor=2, seed=0)
    assert list(df.columns) == ["q11", "q12", "q21", "q22", "q31", "q32"]
    assert df.min().min() >= 1 and df.max().max() <= 7
    corr = df.corr()
    assert corr.loc["q11", "q12"] > corr.loc["q11", "q21"]


def test_simulate_air_quality_missing():
    df = simulate_air_quality(100, missing_rate=0.1, seed=0)
    assert int(df["ozone"].isna().sum()) == 10
    assert int(df["solar_r"].isna().sum()) == 5
    assert df["date"].iloc[0] == "1973-05-01"
    assert df["month"].iloc[0] == "May"
    clean = simulate_air_quality(20, missing_rate=0.0, seed=0)
    assert not clean.isna().any().any()


def test_simulate_housing_columns():
    df = simulate_housing(50, seed=0)
    assert list(df.columns) == [
        "size", "rooms", "age", "center", "distance", "price"]
    assert set(df["center"]) <= {0, 1}
    assert (df.loc[df.center == 1, "distance"] <= 3).all()


@pytest.mark.parametrize("kwargs", [
    {"n_samples": 0}, {"noise": -1.0}, {"seed": -5},
])
def test_invalid_parameters(kwargs):
    with pytest.raises(InvalidParameterError):
        simulate_salaries(**kwargs)


if __name__ == '__main__':
    pytest.main([__file__])
