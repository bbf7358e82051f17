# -*- coding: utf-8 -*-
"""
test_decomposition.py

@author: LKouadio <etanoyau@gmail.com>
"""
import numpy as np
import pytest

from statnotes.analysis import lda_projection, pca
from statnotes.datasets import load_iris, load_mtcars
from statnotes.exceptions import HeaderError


@pytest.fixture(scope="module")
def iris():
    return load_iris()


def test_pca_iris_standardized(iris):
    res = pca(iris)
    assert res.columns == [
        "sepal_length", "sepal_width", "petal_length", "petal_width"]
    assert list(res.explained.index) == ["PC1", "PC2", "PC3", "PC4"]
    assert res.explained.loc["PC1", "ratio"] == pytest.approx(0.7296, abs=1e-4)
    assert res.explained.loc["PC2", "cumulative"] == pytest.approx(0.9581, abs=1e-4)
    assert res.explained["cumulative"].iloc[-1] == pytest.approx(1.0)
    # eigenvalues of the correlation matrix (n - 1 denominator) sum to p * n / (n - 1)
    assert res.explained["variance"].sum() == pytest.approx(4 * 150 / 149)


def test_pca_loadings_and_scores(iris):
    res = pca(iris, n_components=2)
    assert res.loadings.shape == (4, 2)
    assert res.scores.shape == (150, 2)
    assert np.allclose((res.loadings ** 2).sum(axis=0), 1.0)
    assert abs(res.loadings.loc["sepal_width", "PC1"]) < abs(
        res.loadings.loc["petal_length", "PC1"])
    assert abs(np.corrcoef(res.scores["PC1"], res.scores["PC2"])[0, 1]) < 1e-8


def test_pca_unscaled_is_dominated_by_large_variance():
    cars = load_mtcars()
    res = pca(cars, columns=["mpg", "disp", "hp", "wt"], scale=False)
    assert res.loadings["PC1"].abs().idxmax() == "disp"
    assert res.explained.loc["PC1", "ratio"] > 0.9


def test_lda_projection(iris):
    res = lda_projection(iris, "species")
    assert list(res.scores.columns) == ["LD1", "LD2", "species"]
    assert res.explained_variance_ratio.iloc[0] > 0.95
    assert res.scalings.shape == (4, 2)
    means = res.scores.groupby("species", observed=True)["LD1"].mean()
    assert means.idxmin() in ("setosa", "virginica")
    assert means.idxmax() in ("setosa", "virginica")


def test_lda_projection_errors(iris):
    with pytest.raises(HeaderError):
        lda_projection(iris, "genus")


if __name__ == '__main__':
    pytest.main([__file__])
