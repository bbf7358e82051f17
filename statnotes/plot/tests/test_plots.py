# -*- coding: utf-8 -*-
"""
test_plots.py

@author: LKouadio <etanoyau@gmail.com>
"""
import os

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest
from matplotlib.axes import Axes

from statnotes.analysis import (
    correspondence_analysis,
    elbow_scores,
    kaiser_criterion,
    kmeans,
    lda_projection,
    pca,
)
from statnotes.config import config_context
from statnotes.datasets import (
    load_hair_eye,
    load_iris,
    load_mtcars,
    simulate_blobs,
    simulate_survey,
)
from statnotes.exceptions import PlotError
from statnotes.models import confusion_table, cross_validate_model, fit_ols
from statnotes.plot import (
    plot_bar_counts,
    plot_biplot,
    plot_box,
    plot_ca_map,
    plot_clusters,
    plot_confusion_matrix,
    plot_correlation_heatmap,
    plot_cv_scores,
    plot_elbow,
    plot_feature_importance,
    plot_histogram,
    plot_lda_projection,
    plot_loadings_heatmap,
    plot_pairs,
    plot_predicted_vs_actual,
    plot_residuals,
    plot_scatter_fit,
    plot_scree,
    savefigure,
)
from statnotes.plot.utils import check_columns, get_ax


@pytest.fixture(scope="module")
def cars():
    return load_mtcars()


@pytest.fixture(scope="module")
def iris():
    return load_iris()


def test_get_ax():
    fig, ax = plt.subplots()
    assert get_ax(ax) is ax
    assert isinstance(get_ax(), Axes)
    with pytest.raises(PlotError):
        get_ax("not an axes")


def test_check_columns(cars):
    check_columns(cars, "mpg", None)
    with pytest.raises(PlotError, match="not found"):
        check_columns(cars, "mpg", "price")


def test_savefigure_adds_extension_and_dirs(tmp_path):
    fig, ax = plt.subplots()
    ax.plot([1, 2], [3, 4])
    path = savefigure(fig, tmp_path / "nested" / "line")
    assert path.endswith("line.png")
    assert os.path.isfile(path)

    with config_context(figure_format="svg"):
        svg = savefigure(ax, tmp_path / "line")
    assert svg.endswith(".svg") and os.path.isfile(svg)

    explicit = savefigure(fig, tmp_path / "line.pdf", ext="png")
    assert explicit.endswith(".pdf")

    with pytest.raises(PlotError):
        savefigure("figure", tmp_path / "bad")


def test_exploratory_charts(cars):
    assert plot_histogram(cars, "mpg").get_title() == "Distribution of mpg"
    assert plot_box(cars, "mpg", by="cyl").get_title() == "mpg by cyl"
    assert plot_scatter_fit(cars, "wt", "mpg", order=2, ci=None).get_xlabel() == "wt"
    assert isinstance(plot_bar_counts(cars, "gear"), Axes)
    ax = plot_correlation_heatmap(cars[["mpg", "wt", "hp"]])
    assert len(ax.get_xticklabels()) == 3
    with pytest.raises(PlotError):
        plot_histogram(cars, "price")


def test_correlation_heatmap_accepts_matrix(cars):
    corr = cars[["mpg", "wt"]].corr()
    fig, ax = plt.subplots()
    assert plot_correlation_heatmap(corr, ax=ax) is ax


def test_plot_pairs(iris):
    grid = plot_pairs(iris, columns=["sepal_length", "petal_length"],
                      hue="species")
    assert grid.axes.shape == (2, 2)
    assert grid.figure is not None
    with pytest.raises(PlotError):
        plot_pairs(iris, columns=["sepal_length", "stem"])


def test_evaluation_plots(cars):
    confusion = confusion_table(["a", "b", "b", "a"], ["a", "b", "a", "a"])
    ax = plot_confusion_matrix(confusion, normalize=True)
    assert ax.get_xlabel() == "prediction"
    assert ax.get_ylabel() == "reference"

    importances = pd.Series({"wt": 0.5, "hp": 0.3, "qsec": 0.2}, name="importance")
    ax = plot_feature_importance(importances, top=2)
    assert len(ax.patches) == 2
    assert ax.patches[-1].get_width() == pytest.approx(0.5)

    fit = fit_ols("mpg ~ wt", cars)
    assert plot_predicted_vs_actual(cars["mpg"], fit.fittedvalues).get_xlabel() == "observed"
    with pytest.raises(PlotError):
        plot_predicted_vs_actual([1, 2, 3], [1, 2])

    assert plot_residuals(fit).get_ylabel() == "residuals"
    assert isinstance(
        plot_residuals(fitted=fit.fittedvalues, residuals=fit.resid,
                       lowess=False), Axes)
    with pytest.raises(PlotError):
        plot_residuals()


def test_plot_cv_scores(cars):
    from sklearn.linear_model import LinearRegression

    folds, _ = cross_validate_model(LinearRegression(), cars[["wt"]], cars["mpg"],
                                    cv=4, seed=0)
    ax = plot_cv_scores(folds)
    assert len(ax.patches) == 4
    assert ax.get_ylabel() == folds.columns[0]
    with pytest.raises(PlotError, match="not in the fold scores"):
        plot_cv_scores(folds, metric="accuracy")


def test_cluster_plots():
    blobs = simulate_blobs(150, n_centers=3, seed=0)
    scores = elbow_scores(blobs, range(1, 5), columns=["x", "y"], seed=0)
    ax = plot_elbow(scores)
    assert ax.get_xlabel() == "Number of clusters"
    assert len(ax.figure.axes) == 2

    res = kmeans(blobs, 3, columns=["x", "y"], seed=0)
    ax = plot_clusters(blobs, "x", "y", res.labels, centers=res.centers)
    assert ax.get_legend().get_title().get_text() == "cluster"
    with pytest.raises(PlotError):
        plot_clusters(blobs, "x", "z", res.labels)


def test_dimensionality_plots(iris):
    res = pca(iris)
    ax = plot_scree(res.explained)
    assert [t.get_text() for t in ax.get_xticklabels()] == ["PC1", "PC2", "PC3", "PC4"]

    eigen = kaiser_criterion(simulate_survey(200, seed=0)).eigenvalues
    ax = plot_scree(eigen, kaiser=True)
    assert ax.get_ylabel() == "Eigenvalue"

    ax = plot_biplot(res, hue=iris["species"])
    assert ax.get_xlabel() == "PC1"
    assert len(ax.texts) == 4
    with pytest.raises(PlotError):
        plot_biplot(res, components=("PC1", "PC9"))

    assert plot_loadings_heatmap(res.loadings).get_title() == "Loadings"

    projection = lda_projection(iris, "species")
    assert plot_lda_projection(projection, "species").get_xlabel() == "LD1"
    with pytest.raises(PlotError):
        plot_lda_projection(projection, "genus")


def test_plot_ca_map():
    res = correspondence_analysis(load_hair_eye(as_table=True))
    ax = plot_ca_map(res)
    assert ax.get_xlabel().startswith("Dim1 (")
    assert len(ax.texts) == 8
    one_dim = correspondence_analysis(np.array([[10, 5], [3, 12]]))
    with pytest.raises(PlotError):
        plot_ca_map(one_dim)


if __name__ == '__main__':
    pytest.main([__file__])
