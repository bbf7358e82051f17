# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>

"""
The `evaluate` module draws the diagnostics of fitted models: confusion
matrices, feature importances, predicted versus observed values, residuals
and cross-validation scores.
"""

from __future__ import annotations
from typing import Optional

import numpy as np
import pandas as pd
import seaborn as sns
from matplotlib.axes import Axes

from ..exceptions import PlotError
from .utils import get_ax

__all__ = [
    "plot_confusion_matrix",
    "plot_feature_importance",
    "plot_predicted_vs_actual",
    "plot_residuals",
    "plot_cv_scores",
]


def plot_confusion_matrix(
    confusion: pd.DataFrame,
    normalize: bool = False,
    cmap: str = "Blues",
    ax: Optional[Axes] = None,
):
    """
    Heatmap of a confusion table.

    Parameters
    ----------
    confusion : pandas.DataFrame
        Counts with the reference classes as rows and the predicted classes
        as columns, as returned by
        :func:`statnotes.models.evaluation.confusion_table`.
    normalize : bool, default=False
        Show row proportions (the recall of each class) instead of counts.
    cmap : str, default='Blues'
    ax : matplotlib.axes.Axes, optional

    Returns
    -------
    ax : matplotlib.axes.Axes
    """
    if not isinstance(confusion, pd.DataFrame):
        confusion = pd.DataFrame(np.asarray(confusion))
    values = confusion
    fmt = "d"
    if normalize:
        values = confusion.div(confusion.sum(axis=1).replace(0, np.nan), axis=0)
        fmt = ".2f"
    ax = get_ax(ax, figsize=(4.5, 4))
    sns.heatmap(values, annot=True, fmt=fmt, cmap=cmap, cbar=False, ax=ax)
    ax.set_xlabel(confusion.columns.name or "prediction")
    ax.set_ylabel(confusion.index.name or "reference")
    ax.set_title("Confusion matrix")
    return ax


def plot_feature_importance(
    importances: pd.Series,
    top: Optional[int] = None,
    ax: Optional[Axes] = None,
    color: str = "tab:blue",
):
    """Horizontal bar chart of importances, the largest at the top."""
    importances = pd.Series(importances).sort_values(ascending=False)
    if top is not None:
        importances = importances.iloc[:top]
    ax = get_ax(ax, figsize=(6, 0.35 * len(importances) + 1))
    ax.barh(importances.index.astype(str)[::-1], importances.to_numpy()[::-1],
            color=color)
    ax.set_xlabel(importances.name or "importance")
    ax.set_title("Feature importance")
    return ax


def plot_predicted_vs_actual(
    y_true,
    y_pred,
    ax: Optional[Axes] = None,
    **kws
):
    """
    Scatter plot of predictions against observed values.

    Points on the dashed identity line are predicted exactly.
    """
    y_true, y_pred = np.asarray(y_true, dtype=float), np.asarray(y_pred, dtype=float)
    if y_true.shape != y_pred.shape:
        raise PlotError(
            f"y_true and y_pred differ in shape: {y_true.shape} != {y_pred.shape}.")
    ax = get_ax(ax, figsize=(5, 5))
    ax.scatter(y_true, y_pred, alpha=0.7, **kws)
    low = min(y_true.min(), y_pred.min())
    high = max(y_true.max(), y_pred.max())
    ax.plot([low, high], [low, high], linestyle="--", color="gray")
    ax.set_xlabel("observed")
    ax.set_ylabel("predicted")
    ax.set_title("Predicted versus observed")
    return ax


def plot_residuals(
    fit=None,
    fitted=None,
    residuals=None,
    lowess: bool = True,
    ax: Optional[Axes] = None,
):
    """
    Residuals versus fitted values.

    Parameters
    ----------
    fit : statsmodels results, optional
        A fitted regression; its ``fittedvalues`` and ``resid`` are used.
    fitted, residuals : array-like, optional
        Explicit values when `fit` is not given.
    lowess : bool, default=True
        Overlay a lowess smoother, flat for a well-specified model.
    ax : matplotlib.axes.Axes, optional

    Returns
    -------
    ax : matplotlib.axes.Axes
    """
    if fit is not None:
        fitted, residuals = fit.fittedvalues, fit.resid
    if fitted is None or residuals is None:
        raise PlotError("Pass a fitted model or both fitted values and residuals.")
    ax = get_ax(ax)
    sns.regplot(x=np.asarray(fitted), y=np.asarray(residuals), lowess=lowess,
                ax=ax, scatter_kws={"alpha": 0.7},
                line_kws={"color": "tab:red"})
    ax.axhline(0, linestyle="--", color="gray")
    ax.set_xlabel("fitted values")
    ax.set_ylabel("residuals")
    ax.set_title("Residuals versus fitted")
    return ax


def plot_cv_scores(
    folds: pd.DataFrame,
    metric: Optional[str] = None,
    ax: Optional[Axes] = None,
):
    """
    Score of each cross-validation fold with the mean as a dashed line.

    Parameters
    ----------
    folds : pandas.DataFrame
        One row per fold, as returned by
        :func:`statnotes.models.evaluation.cross_validate_model`.
    metric : str, optional
        Column to draw. The first column when None.
    ax : matplotlib.axes.Axes, optional
    """
    metric = metric or folds.columns[0]
    if metric not in folds.columns:
        raise PlotError(
            f"Metric {metric!r} not in the fold scores {list(folds.columns)}.")
    scores = folds[metric]
    ax = get_ax(ax)
    ax.bar(scores.index.astype(str), scores.to_numpy(), color="tab:blue",
           alpha=0.8)
    ax.axhline(scores.mean(), linestyle="--", color="tab:red",
               label=f"mean = {scores.mean():.3f}")
    ax.set_xlabel("fold")
    ax.set_ylabel(metric)
    ax.legend(loc="lower right")
    ax.set_title("Cross-validation scores")
    return ax
