# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Formula interface for scikit-learn estimators.

statsmodels already accepts ``response ~ predictors`` formulas. The helpers
here give scikit-learn estimators the same interface: the right-hand side is
turned into a design matrix by patsy, the left-hand side into the target, and
the design information is kept so that new rows are encoded exactly like the
training rows (same dummy columns, same transformations).
"""

import re

import numpy as np
import pandas as pd
import patsy
from sklearn.base import BaseEstimator, clone

from .._statnoteslog import statnoteslog
from ..compat.sklearn import check_is_fitted
from ..exceptions import FormulaError

logger = statnoteslog.get_statnotes_logger(__name__)

__all__ = [
    "split_formula",
    "expand_formula",
    "design_matrices",
    "FormulaModel",
]

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_DOT_TERM = re.compile(r"(?<![\w.])\.(?![\w.])")
_REMOVED_TERM = re.compile(r"-\s*([A-Za-z_][A-Za-z0-9_]*)")


def split_formula(formula):
    """
    Split a formula into its response and predictor parts.

    Parameters
    ----------
    formula : str
        A formula such as ``"mpg ~ wt + hp"``.

    Returns
    -------
    tuple of str
        ``(response, predictors)`` with surrounding spaces removed.

    Raises
    ------
    FormulaError
        If the formula has no ``~`` or an empty side.

    Examples
    --------
    >>> from statnotes.models.formula import split_formula
    >>> split_formula("mpg ~ wt + hp")
    ('mpg', 'wt + hp')
    """
    if not isinstance(formula, str) or formula.count("~") != 1:
        raise FormulaError(
            f"Expect a formula of the form 'response ~ predictors'. Got {formula!r}.")
    response, predictors = (part.strip() for part in formula.split("~"))
    if not response or not predictors:
        raise FormulaError(
            f"Both sides of the formula must be non-empty. Got {formula!r}.")
    return response, predictors


def _split_removals(predictors):
    # only ``- name`` outside parentheses drops a column, ``I(a - b)`` stays
    removed, kept, last = set(), [], 0
    for match in _REMOVED_TERM.finditer(predictors):
        head = predictors[:match.start()]
        if head.count("(") > head.count(")"):
            continue
        removed.add(match.group(1))
        kept.append(predictors[last:match.start()])
        last = match.end()
    kept.append(predictors[last:])
    return removed, "".join(kept)


def _quote(name):
    return name if _IDENTIFIER.match(str(name)) else f'Q("{name}")'


def expand_formula(formula, data):
    """
    Expand the ``.`` shorthand into all the remaining columns.

    ``y ~ .`` becomes ``y ~ a + b + c`` where ``a, b, c`` are every column of
    `data` except the response; ``y ~ . - b`` leaves `b` out. Column names
    that are not valid identifiers are wrapped in ``Q()`` for patsy.
    Formulas without a ``.`` term are returned unchanged.

    Examples
    --------
    >>> import pandas as pd
    >>> from statnotes.models.formula import expand_formula
    >>> df = pd.DataFrame(columns=["y", "a", "b", "c"])
    >>> expand_formula("y ~ . - b", df)
    'y ~ a + c'
    """
    response, predictors = split_formula(formula)
    if not _DOT_TERM.search(predictors):
        return formula

    used = set(re.findall(r"[A-Za-z_][A-Za-z0-9_]*", response))
    removed, predictors = _split_removals(predictors)
    columns = [
        _quote(c) for c in data.columns
        if c not in used and c not in removed
    ]
    if not columns:
        raise FormulaError(
            f"The '.' in {formula!r} expands to no column.")
    expanded = _DOT_TERM.sub(" + ".join(columns), predictors)
    expanded = re.sub(r"\s+", " ", expanded).strip()
    return f"{response} ~ {expanded}"


def _response(response, data, index):
    if response in data.columns:
        return data.loc[index, response]
    y = patsy.dmatrix(f"{response} - 1", data, return_type="dataframe")
    if y.shape[1] != 1:
        raise FormulaError(
            f"The response {response!r} must evaluate to a single column.")
    return y.iloc[:, 0].loc[index].rename(response)


def design_matrices(formula, data):
    """
    Build the target and the design matrix described by a formula.

    The design matrix has no intercept column (scikit-learn estimators fit
    their own). Rows with missing values in any variable of the formula are
    dropped, as patsy does by default.

    Parameters
    ----------
    formula : str
        ``response ~ predictors``; ``.`` is expanded with
        :func:`expand_formula`.
    data : pandas.DataFrame

    Returns
    -------
    y : pandas.Series
        The response; categorical labels are kept as they are.
    X : pandas.DataFrame
        The design matrix.
    design_info : patsy.DesignInfo
        Encoding of `X`, reusable on new data.

    Examples
    --------
    >>> from statnotes.datasets import load_iris
    >>> from statnotes.models.formula import design_matrices
    >>> y, X, _ = design_matrices("species ~ petal_length + petal_width",
    ...                           load_iris())
    >>> X.shape
    (150, 2)
    """
    formula = expand_formula(formula, data)
    response, predictors = split_formula(formula)
    X = patsy.dmatrix(f"{predictors} - 1", data, return_type="dataframe")
    y = _response(response, data, X.index)
    y_missing = y.isna().to_numpy()
    if y_missing.any():
        X, y = X.loc[~y_missing], y.loc[~y_missing]
    return y, X, X.design_info


class FormulaModel(BaseEstimator):
    """
    Fit a scikit-learn estimator from a formula and a DataFrame.

    Parameters
    ----------
    estimator : sklearn estimator
        Any estimator with ``fit``/``predict``. It is cloned on `fit`.
    formula : str
        ``response ~ predictors``.

    Attributes
    ----------
    estimator_ : sklearn estimator
        The fitted clone.
    feature_names_ : list of str
        Columns of the design matrix.
    design_info_ : patsy.DesignInfo
        Encoding applied to new data in `predict`.
    response_ : str
        Name of the response.

    Examples
    --------
    >>> from sklearn.linear_model import LinearRegression
    >>> from statnotes.datasets import load_mtcars
    >>> from statnotes.models.formula import FormulaModel
    >>> cars = load_mtcars()
    >>> model = FormulaModel(LinearRegression(), "mpg ~ wt").fit(cars)
    >>> round(float(model.estimator_.coef_[0]), 4)
    -5.3445
    """

    def __init__(self, estimator, formula):
        self.estimator = estimator
        self.formula = formula

    def fit(self, data, **fit_params):
        """Encode `data` with the formula and fit a clone of the estimator."""
        y, X, design_info = design_matrices(self.formula, data)
        self.response_, _ = split_formula(expand_formula(self.formula, data))
        self.design_info_ = design_info
        self.feature_names_ = list(X.columns)
        self.estimator_ = clone(self.estimator).fit(X, y, **fit_params)
        logger.debug(
            "Fitted %s on %d rows and %d design columns",
            type(self.estimator).__name__, X.shape[0], X.shape[1])
        return self

    def transform(self, data):
        """Return the design matrix of new rows."""
        check_is_fitted(self, "estimator_")
        (X,) = patsy.build_design_matrices(
            [self.design_info_], data, return_type="dataframe")
        return X

    def predict(self, data):
        """Predict the response of new rows."""
        X = self.transform(data)
        return self.estimator_.predict(X)

    def predict_proba(self, data):
        """Class probabilities of new rows (classifiers only)."""
        X = self.transform(data)
        return self.estimator_.predict_proba(X)

    def response(self, data):
        """Return the observed response of `data` aligned with `transform`."""
        X = self.transform(data)
        return _response(self.response_, data, X.index)

    @property
    def classes_(self):
        check_is_fitted(self, "estimator_")
        return self.estimator_.classes_

    def __repr__(self):
        return (
            f"{self.__class__.__name__}({type(self.estimator).__name__}(),"
            f" formula={self.formula!r})"
        )


def as_array(values):
    """Return a 1-D numpy array from a Series, list or array."""
    if isinstance(values, (pd.Series, pd.Index)):
        return values.to_numpy()
    return np.asarray(values).ravel()
