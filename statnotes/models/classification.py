# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Classifiers and nonlinear regressors used by the tutorials: support vector
machines, k-nearest neighbours, random forests, gradient boosting and linear
discriminant analysis.

Each workflow follows the same recipe: split the rows into training and
test subsets, cross-validate on the training subset, fit on the whole
training subset, then score the held-out rows.
"""

from numbers import Integral, Real

import numpy as np
import pandas as pd
from sklearn.discriminant_analysis import LinearDiscriminantAnalysis
from sklearn.ensemble import (
    GradientBoostingClassifier,
    GradientBoostingRegressor,
    RandomForestClassifier,
    RandomForestRegressor,
)
from sklearn.model_selection import GridSearchCV, KFold, StratifiedKFold
from sklearn.neighbors import KNeighborsClassifier, KNeighborsRegressor
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler
from sklearn.svm import SVC, SVR

from .._statnoteslog import statnoteslog
from ..api.structures import Boxspace
from ..compat.sklearn import validate_params, Interval, StrOptions
from ..exceptions import EstimatorError
from .evaluation import (
    classification_metrics,
    confusion_table,
    cross_validate_model,
    regression_metrics,
    split_data,
)
from .formula import FormulaModel, design_matrices, split_formula, expand_formula

logger = statnoteslog.get_statnotes_logger(__name__)

__all__ = [
    "ESTIMATORS",
    "make_estimator",
    "fit_classifier",
    "fit_regressor",
    "feature_importances",
    "tune_hyperparameters",
]

# name -> (classifier, regressor, needs scaling, accepts random_state)
ESTIMATORS = {
    "svm": (SVC, SVR, True, False),
    "knn": (KNeighborsClassifier, KNeighborsRegressor, True, False),
    "random_forest": (RandomForestClassifier, RandomForestRegressor, False, True),
    "gradient_boosting": (
        GradientBoostingClassifier, GradientBoostingRegressor, False, True),
    "lda": (LinearDiscriminantAnalysis, None, False, False),
}


@validate_params({
    "name": [str],
    "task": [StrOptions({"classification", "regression"})],
    "seed": [Interval(Integral, 0, None, closed="left"), None],
})
def make_estimator(name, task="classification", seed=None, **params):
    """
    Build an estimator by name with explicit hyperparameters.

    Distance- and kernel-based estimators (``svm``, ``knn``) are wrapped in
    a pipeline with a :class:`~sklearn.preprocessing.StandardScaler`; the
    hyperparameters are then set on the ``model`` step.

    Parameters
    ----------
    name : {'svm', 'knn', 'random_forest', 'gradient_boosting', 'lda'}
    task : {'classification', 'regression'}, default='classification'
    seed : int, optional
        ``random_state`` of the estimators that accept one.
    **params : dict
        Hyperparameters of the estimator (``C``, ``kernel``,
        ``n_neighbors``, ``n_estimators``, ``learning_rate``...).

    Raises
    ------
    EstimatorError
        If the name is unknown or has no estimator for `task`.

    Examples
    --------
    >>> from statnotes.models.classification import make_estimator
    >>> make_estimator("knn", n_neighbors=7)[-1].n_neighbors
    7
    """
    if name not in ESTIMATORS:
        raise EstimatorError(
            f"Unknown estimator {name!r}. Expect one of {sorted(ESTIMATORS)}.")
    classifier, regressor, scale, seeded = ESTIMATORS[name]
    cls = classifier if task == "classification" else regressor
    if cls is None:
        raise EstimatorError(f"{name!r} has no {task} estimator.")
    if seeded and "random_state" not in params:
        params["random_state"] = seed
    estimator = cls(**params)
    if scale:
        return Pipeline([("scale", StandardScaler()), ("model", estimator)])
    return estimator


def _final_step(estimator):
    return estimator[-1] if isinstance(estimator, Pipeline) else estimator


def _fit_workflow(estimator, formula, data, test_size, cv, seed, task):
    formula = expand_formula(formula, data)
    response, _ = split_formula(formula)
    train, test = split_data(
        data, response, test_size=test_size,
        stratify=(task == "classification"), seed=seed)

    cv_scores = None
    if cv:
        y_train, X_train, _ = design_matrices(formula, train)
        cv_scores, _ = cross_validate_model(
            estimator, X_train, y_train, cv=cv, seed=seed,
            scoring=(
                ["accuracy", "balanced_accuracy"]
                if task == "classification" else
                ["r2", "neg_root_mean_squared_error"]
            ))
        if task == "regression":
            cv_scores["rmse"] = -cv_scores.pop("neg_root_mean_squared_error")

    model = FormulaModel(estimator, formula).fit(train)
    y_test = model.response(test)
    y_pred = model.predict(test)
    return Boxspace(
        model=model,
        formula=formula,
        train=train,
        test=test,
        cv_scores=cv_scores,
        y_test=y_test,
        y_pred=pd.Series(y_pred, index=y_test.index, name="prediction"),
    )


@validate_params({
    "name": [str],
    "data": [pd.DataFrame],
    "test_size": [Interval(Real, 0, 1, closed="neither")],
    "cv": [Interval(Integral, 2, None, closed="left"), None],
    "seed": [Interval(Integral, 0, None, closed="left"), None],
})
def fit_classifier(name, formula, data, *, test_size=0.3, cv=10, seed=None,
                   **params):
    """
    Split, cross-validate, fit and score a classifier described by a formula.

    Parameters
    ----------
    name : str
        Estimator name, see :func:`make_estimator`.
    formula : str
        ``label ~ predictors``.
    data : pandas.DataFrame
    test_size : float, default=0.3
        Share of rows held out (stratified on the label).
    cv : int or None, default=10
        Folds of the stratified cross-validation on the training rows;
        None skips it.
    seed : int, optional
        Seed of the split, of the folds and of the estimator.
    **params : dict
        Hyperparameters of the estimator.

    Returns
    -------
    Boxspace
        ``model``, ``metrics`` (accuracy, Kappa, balanced accuracy on the
        test rows), ``confusion``, ``cv_scores`` (per-fold frame),
        ``y_test``, ``y_pred``, ``train`` and ``test``.

    Examples
    --------
    >>> from statnotes.datasets import load_iris
    >>> from statnotes.models.classification import fit_classifier
    >>> res = fit_classifier("lda", "species ~ .", load_iris(), cv=5, seed=0)
    >>> res.metrics.accuracy > 0.9
    True
    """
    estimator = make_estimator(name, "classification", seed=seed, **params)
    result = _fit_workflow(
        estimator, formula, data, test_size, cv, seed, "classification")
    labels = (
        list(result.y_test.cat.categories)
        if isinstance(result.y_test.dtype, pd.CategoricalDtype) else None
    )
    result.metrics = classification_metrics(
        result.y_test, result.y_pred, title=f"{name} test metrics")
    result.confusion = confusion_table(result.y_test, result.y_pred, labels=labels)
    logger.info("%s: test accuracy=%.4f, kappa=%.4f", name,
                result.metrics.accuracy, result.metrics.kappa)
    return result


@validate_params({
    "name": [str],
    "data": [pd.DataFrame],
    "test_size": [Interval(Real, 0, 1, closed="neither")],
    "cv": [Interval(Integral, 2, None, closed="left"), None],
    "seed": [Interval(Integral, 0, None, closed="left"), None],
})
def fit_regressor(name, formula, data, *, test_size=0.3, cv=10, seed=None,
                  **params):
    """
    Split, cross-validate, fit and score a regressor described by a formula.

    Returns
    -------
    Boxspace
        Same keys as :func:`fit_classifier` with regression ``metrics``
        (RMSE, MAE, R-squared) and no ``confusion``.

    Examples
    --------
    >>> from statnotes.datasets import simulate_housing
    >>> from statnotes.models.classification import fit_regressor
    >>> res = fit_regressor("random_forest", "price ~ .", simulate_housing(),
    ...                     cv=None, seed=0, n_estimators=50)
    >>> res.metrics.r2 > 0.5
    True
    """
    estimator = make_estimator(name, "regression", seed=seed, **params)
    result = _fit_workflow(
        estimator, formula, data, test_size, cv, seed, "regression")
    result.metrics = regression_metrics(
        result.y_test, result.y_pred, title=f"{name} test metrics")
    logger.info("%s: test RMSE=%.4f, R2=%.4f", name,
                result.metrics.rmse, result.metrics.r2)
    return result


def feature_importances(model):
    """
    Importance of each design column, sorted decreasingly.

    Tree ensembles report their impurity-based ``feature_importances_``;
    linear models (LDA, linear SVM) report the mean absolute coefficient
    across classes.

    Parameters
    ----------
    model : FormulaModel
        A fitted model.

    Returns
    -------
    pandas.Series

    Raises
    ------
    EstimatorError
        If the estimator exposes neither importances nor coefficients.
    """
    estimator = _final_step(model.estimator_)
    if hasattr(estimator, "feature_importances_"):
        values = np.asarray(estimator.feature_importances_)
    elif hasattr(estimator, "coef_"):
        values = np.abs(np.atleast_2d(estimator.coef_)).mean(axis=0)
    else:
        raise EstimatorError(
            f"{type(estimator).__name__} exposes neither feature_importances_"
            " nor coef_.")
    return pd.Series(
        values, index=model.feature_names_, name="importance",
    ).sort_values(ascending=False)


def tune_hyperparameters(name, formula, data, param_grid, *, task="classification",
                         cv=5, scoring=None, seed=None):
    """
    Exhaustive grid search of hyperparameters with cross-validation.

    Parameters
    ----------
    name : str
        Estimator name, see :func:`make_estimator`.
    formula : str
    data : pandas.DataFrame
    param_grid : dict
        Hyperparameter names (as accepted by the bare estimator) mapped to
        candidate values.
    task : {'classification', 'regression'}
    cv : int, default=5
    scoring : str, optional
    seed : int, optional

    Returns
    -------
    Boxspace
        ``best_params``, ``best_score``, ``results`` (one row per candidate,
        sorted by rank) and the refitted ``search`` object.

    Examples
    --------
    >>> from statnotes.datasets import load_iris
    >>> from statnotes.models.classification import tune_hyperparameters
    >>> res = tune_hyperparameters("knn", "species ~ .", load_iris(),
    ...                            {"n_neighbors": [3, 5]}, seed=0)
    >>> sorted(res.best_params)
    ['n_neighbors']
    """
    estimator = make_estimator(name, task, seed=seed)
    prefix = "model__" if isinstance(estimator, Pipeline) else ""
    grid = {prefix + key: values for key, values in param_grid.items()}
    y, X, _ = design_matrices(formula, data)
    splitter = (StratifiedKFold if task == "classification" else KFold)(
        n_splits=cv, shuffle=True, random_state=seed)
    search = GridSearchCV(estimator, grid, cv=splitter, scoring=scoring).fit(X, y)

    results = pd.DataFrame(search.cv_results_)
    keep = [c for c in results.columns if c.startswith("param_")] + [
        "mean_test_score", "std_test_score", "rank_test_score"]
    results = results[keep].rename(
        columns=lambda c: c.replace("param_", "").replace(prefix, ""))
    results = results.sort_values("rank_test_score").reset_index(drop=True)
    best_params = {
        k.replace(prefix, "", 1) if prefix else k: v
        for k, v in search.best_params_.items()
    }
    logger.info("Grid search %s: best %s (score=%.4f)", name, best_params,
                search.best_score_)
    return Boxspace(
        best_params=best_params,
        best_score=float(search.best_score_),
        results=results,
        search=search,
    )
