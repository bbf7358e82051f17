# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Model evaluation: train/test partitioning, k-fold cross-validation and the
small fixed set of metrics printed by the tutorials (accuracy, Kappa, RMSE,
R-squared and the confusion matrix).
"""

from numbers import Integral, Real

import numpy as np
import pandas as pd
from sklearn.base import is_classifier
from sklearn.metrics import (
    accuracy_score,
    balanced_accuracy_score,
    cohen_kappa_score,
    confusion_matrix,
    mean_absolute_error,
    mean_squared_error,
    r2_score,
)
from sklearn.model_selection import (
    KFold,
    StratifiedKFold,
    cross_validate,
    train_test_split,
)

from .._statnoteslog import statnoteslog
from ..api.formatter import MetricFormatter
from ..compat.sklearn import validate_params, Interval
from ..exceptions import HeaderError
from .formula import as_array

logger = statnoteslog.get_statnotes_logger(__name__)

__all__ = [
    "split_data",
    "cross_validate_model",
    "classification_metrics",
    "regression_metrics",
    "confusion_table",
]


@validate_params({
    "data": [pd.DataFrame],
    "target": [str],
    "test_size": [Interval(Real, 0, 1, closed="neither")],
    "stratify": ["boolean"],
    "seed": [Interval(Integral, 0, None, closed="left"), None],
})
def split_data(data, target, test_size=0.3, stratify=False, seed=None):
    """
    Partition a frame into training and test subsets.

    Parameters
    ----------
    data : pandas.DataFrame
    target : str
        Name of the response column; used for stratification.
    test_size : float, default=0.3
        Share of the rows held out for testing.
    stratify : bool, default=False
        Keep the class proportions of `target` in both subsets.
    seed : int, optional
        Seed of the shuffling.

    Returns
    -------
    train, test : pandas.DataFrame

    Examples
    --------
    >>> from statnotes.datasets import load_iris
    >>> from statnotes.models.evaluation import split_data
    >>> train, test = split_data(load_iris(), "species", stratify=True, seed=1)
    >>> len(train), len(test)
    (105, 45)
    """
    if target not in data.columns:
        raise HeaderError(f"Target column {target!r} not found in data.")
    train, test = train_test_split(
        data, test_size=test_size, random_state=seed,
        stratify=data[target] if stratify else None,
    )
    logger.debug("Split %d rows into %d train / %d test", len(data),
                 len(train), len(test))
    return train, test


def cross_validate_model(estimator, X, y, cv=10, scoring=None, stratified=None,
                         seed=None):
    """
    Estimate out-of-sample performance with k-fold cross-validation.

    Parameters
    ----------
    estimator : sklearn estimator
    X : array-like or DataFrame
    y : array-like
    cv : int, default=10
        Number of folds.
    scoring : str or list of str, optional
        scikit-learn scorer names. Defaults to ``accuracy`` for
        classifiers and ``r2`` otherwise.
    stratified : bool, optional
        Use :class:`~sklearn.model_selection.StratifiedKFold`. Defaults to
        True for classifiers.
    seed : int, optional
        Seed of the fold shuffling.

    Returns
    -------
    folds : pandas.DataFrame
        One row per fold, one column per scorer (``test_`` prefix removed).
    summary : pandas.DataFrame
        Mean and standard deviation of each scorer across folds.

    Examples
    --------
    >>> from sklearn.svm import SVC
    >>> from statnotes.datasets import load_iris
    >>> from statnotes.models.evaluation import cross_validate_model
    >>> iris = load_iris()
    >>> folds, summary = cross_validate_model(
    ...     SVC(), iris.drop(columns="species"), iris.species, cv=5, seed=0)
    >>> len(folds)
    5
    """
    classifier = is_classifier(estimator)
    if stratified is None:
        stratified = classifier
    if scoring is None:
        scoring = "accuracy" if classifier else "r2"
    splitter = (StratifiedKFold if stratified else KFold)(
        n_splits=cv, shuffle=True, random_state=seed)
    scores = cross_validate(estimator, X, y, cv=splitter, scoring=scoring)
    folds = pd.DataFrame({
        key[len("test_"):] if key != "test_score" else (
            scoring if isinstance(scoring, str) else "score"): values
        for key, values in scores.items() if key.startswith("test_")
    })
    folds.index = pd.RangeIndex(1, len(folds) + 1, name="fold")
    summary = folds.agg(["mean", "std"]).T
    logger.info("Cross-validated %s over %d folds: %s",
                type(estimator).__name__, cv, summary["mean"].round(4).to_dict())
    return folds, summary


def classification_metrics(y_true, y_pred, title="Classification metrics"):
    """
    Accuracy, Cohen's Kappa and balanced accuracy.

    Returns
    -------
    MetricFormatter
        Printable bundle with attributes ``accuracy``, ``kappa`` and
        ``balanced_accuracy``.

    Examples
    --------
    >>> from statnotes.models.evaluation import classification_metrics
    >>> m = classification_metrics(["a", "b", "b"], ["a", "b", "a"])
    >>> round(m.accuracy, 4)
    0.6667
    """
    y_true, y_pred = as_array(y_true), as_array(y_pred)
    return MetricFormatter(
        title=title,
        descriptor="classification metrics",
        accuracy=float(accuracy_score(y_true, y_pred)),
        kappa=float(cohen_kappa_score(y_true, y_pred)),
        balanced_accuracy=float(balanced_accuracy_score(y_true, y_pred)),
    )


def regression_metrics(y_true, y_pred, title="Regression metrics"):
    """
    RMSE, MAE and R-squared.

    Examples
    --------
    >>> from statnotes.models.evaluation import regression_metrics
    >>> m = regression_metrics([1.0, 2.0, 3.0], [1.0, 2.0, 4.0])
    >>> round(m.rmse, 4)
    0.5774
    """
    y_true, y_pred = as_array(y_true), as_array(y_pred)
    return MetricFormatter(
        title=title,
        descriptor="regression metrics",
        rmse=float(np.sqrt(mean_squared_error(y_true, y_pred))),
        mae=float(mean_absolute_error(y_true, y_pred)),
        r2=float(r2_score(y_true, y_pred)),
    )


def confusion_table(y_true, y_pred, labels=None):
    """
    Confusion matrix with labelled rows (reference) and columns (prediction).

    Parameters
    ----------
    y_true, y_pred : array-like
    labels : list, optional
        Order of the classes. Defaults to the categories of `y_true` when it
        is categorical, else the sorted union of observed labels.

    Examples
    --------
    >>> from statnotes.models.evaluation import confusion_table
    >>> int(confusion_table(["a", "b", "b"], ["a", "b", "a"]).loc["b", "a"])
    1
    """
    if labels is None:
        if isinstance(getattr(y_true, "dtype", None), pd.CategoricalDtype):
            labels = list(y_true.cat.categories)
        else:
            labels = sorted(set(as_array(y_true)) | set(as_array(y_pred)))
    matrix = confusion_matrix(as_array(y_true), as_array(y_pred), labels=labels)
    return pd.DataFrame(
        matrix,
        index=pd.Index(labels, name="reference"),
        columns=pd.Index(labels, name="prediction"),
    )
