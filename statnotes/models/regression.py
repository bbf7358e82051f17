# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Regression variants fitted through formulas: ordinary least squares,
polynomial terms, logistic and quantile regression with statsmodels, and
penalized (ridge, lasso, elastic net) regression with scikit-learn.
"""

from numbers import Integral, Real

import numpy as np
import pandas as pd
import statsmodels.formula.api as smf
from statsmodels.stats.anova import anova_lm
from sklearn.linear_model import ElasticNetCV, LassoCV, RidgeCV
from sklearn.pipeline import make_pipeline
from sklearn.preprocessing import StandardScaler

from .._statnoteslog import statnoteslog
from ..api.structures import Boxspace
from ..compat.sklearn import validate_params, Interval, StrOptions
from ..exceptions import HeaderError
from .formula import FormulaModel, expand_formula

logger = statnoteslog.get_statnotes_logger(__name__)

__all__ = [
    "fit_ols",
    "fit_polynomial",
    "compare_models",
    "fit_logistic",
    "odds_ratios",
    "fit_quantile",
    "fit_regularized",
    "coefficient_table",
]


def fit_ols(formula, data):
    """
    Ordinary least squares from a formula.

    Parameters
    ----------
    formula : str
        ``response ~ predictors``; ``.`` expands to every other column.
    data : pandas.DataFrame

    Returns
    -------
    statsmodels.regression.linear_model.RegressionResultsWrapper
        Print ``fit.summary()`` for the default regression table.

    Examples
    --------
    >>> from statnotes.datasets import load_mtcars
    >>> from statnotes.models.regression import fit_ols
    >>> fit = fit_ols("mpg ~ wt", load_mtcars())
    >>> round(float(fit.params["wt"]), 4), round(float(fit.rsquared), 4)
    (-5.3445, 0.7528)
    """
    formula = expand_formula(formula, data)
    fit = smf.ols(formula, data=data).fit()
    logger.info("OLS %s: R2=%.4f, n=%d", formula, fit.rsquared, int(fit.nobs))
    return fit


@validate_params({
    "data": [pd.DataFrame],
    "x": [str],
    "y": [str],
    "degree": [Interval(Integral, 1, None, closed="left")],
})
def fit_polynomial(data, x, y, degree=2):
    """
    Polynomial regression of `y` on powers of `x` up to `degree`.

    The raw powers are entered with patsy's ``I()`` so the coefficients read
    as the usual ``b0 + b1 x + b2 x^2 + ...``.

    Examples
    --------
    >>> from statnotes.datasets import simulate_growth
    >>> from statnotes.models.regression import fit_polynomial
    >>> fit = fit_polynomial(simulate_growth(seed=0), "dose", "growth", 2)
    >>> list(fit.params.index)
    ['Intercept', 'dose', 'I(dose ** 2)']
    """
    for col in (x, y):
        if col not in data.columns:
            raise HeaderError(f"Column {col!r} not found in data.")
    terms = [x] + [f"I({x} ** {k})" for k in range(2, degree + 1)]
    return fit_ols(f"{y} ~ " + " + ".join(terms), data)


def compare_models(*fits, typ=1):
    """
    Analysis of variance comparing nested linear models.

    Parameters
    ----------
    *fits : statsmodels OLS results
        Two or more fits, from the smallest to the largest model. With a
        single fit, its own ANOVA table is returned.
    typ : {1, 2, 3}, default=1
        Type of sums of squares for the single-model table.

    Returns
    -------
    pandas.DataFrame
        The table from :func:`statsmodels.stats.anova.anova_lm`.

    Examples
    --------
    >>> from statnotes.datasets import load_mtcars
    >>> from statnotes.models.regression import fit_ols, compare_models
    >>> cars = load_mtcars()
    >>> table = compare_models(fit_ols("mpg ~ wt", cars),
    ...                        fit_ols("mpg ~ wt + hp", cars))
    >>> table.shape[0]
    2
    """
    if not fits:
        raise ValueError("At least one fitted model is required.")
    if len(fits) == 1:
        return anova_lm(fits[0], typ=typ)
    return anova_lm(*fits)


def fit_logistic(formula, data):
    """
    Binary logistic regression (maximum likelihood, statsmodels ``logit``).

    The response must be coded 0/1.

    Examples
    --------
    >>> from statnotes.datasets import load_mtcars
    >>> from statnotes.models.regression import fit_logistic
    >>> fit = fit_logistic("am ~ wt", load_mtcars())
    >>> bool(fit.params["wt"] < 0)
    True
    """
    formula = expand_formula(formula, data)
    fit = smf.logit(formula, data=data).fit(disp=0)
    logger.info("Logit %s: pseudo-R2=%.4f, converged=%s", formula,
                fit.prsquared, fit.mle_retvals.get("converged"))
    return fit


def odds_ratios(fit, alpha=0.05):
    """
    Exponentiated logistic coefficients with confidence intervals.

    Returns
    -------
    pandas.DataFrame
        Columns ``odds_ratio``, ``lower``, ``upper`` and ``pvalue``.
    """
    ci = np.exp(fit.conf_int(alpha=alpha))
    return pd.DataFrame({
        "odds_ratio": np.exp(fit.params),
        "lower": ci.iloc[:, 0],
        "upper": ci.iloc[:, 1],
        "pvalue": fit.pvalues,
    })


@validate_params({"q": [Interval(Real, 0, 1, closed="neither")]})
def fit_quantile(formula, data, q=0.5):
    """
    Quantile regression at quantile `q` (statsmodels ``quantreg``).

    Examples
    --------
    >>> from statnotes.datasets import load_mtcars
    >>> from statnotes.models.regression import fit_quantile
    >>> fit = fit_quantile("mpg ~ wt", load_mtcars(), q=0.5)
    >>> "wt" in fit.params
    True
    """
    formula = expand_formula(formula, data)
    fit = smf.quantreg(formula, data=data).fit(q=q)
    logger.info("Quantile regression %s at q=%.2f", formula, q)
    return fit


_REGULARIZED = {
    "ridge": lambda cv, seed: RidgeCV(alphas=np.logspace(-3, 3, 50), cv=cv),
    "lasso": lambda cv, seed: LassoCV(
        alphas=np.logspace(-3, 1, 100), cv=cv, random_state=seed, max_iter=10000),
    "elasticnet": lambda cv, seed: ElasticNetCV(
        l1_ratio=[0.1, 0.5, 0.9], cv=cv, random_state=seed, max_iter=10000),
}


@validate_params({
    "data": [pd.DataFrame],
    "kind": [StrOptions(set(_REGULARIZED))],
    "cv": [Interval(Integral, 2, None, closed="left")],
    "seed": [Interval(Integral, 0, None, closed="left"), None],
})
def fit_regularized(formula, data, kind="ridge", cv=5, seed=None):
    """
    Penalized linear regression with the penalty chosen by cross-validation.

    The predictors are standardized inside a pipeline so the penalty
    treats them equally; coefficients are reported on that scale.

    Parameters
    ----------
    formula : str
    data : pandas.DataFrame
    kind : {'ridge', 'lasso', 'elasticnet'}, default='ridge'
    cv : int, default=5
        Folds used to select the penalty strength.
    seed : int, optional

    Returns
    -------
    Boxspace
        ``model`` (fitted :class:`FormulaModel`), ``alpha`` (selected
        penalty), ``coefficients`` (Series on standardized scale) and
        ``n_nonzero``.

    Examples
    --------
    >>> from statnotes.datasets import load_mtcars
    >>> from statnotes.models.regression import fit_regularized
    >>> res = fit_regularized("mpg ~ . - model", load_mtcars(), kind="lasso",
    ...                       seed=0)
    >>> res.n_nonzero <= 10
    True
    """
    estimator = make_pipeline(StandardScaler(), _REGULARIZED[kind](cv, seed))
    model = FormulaModel(estimator, formula).fit(data)
    final = model.estimator_[-1]
    coefficients = pd.Series(final.coef_, index=model.feature_names_,
                             name="coefficient")
    logger.info("%s selected alpha=%.4g", kind, final.alpha_)
    return Boxspace(
        model=model,
        alpha=float(final.alpha_),
        coefficients=coefficients,
        intercept=float(final.intercept_),
        n_nonzero=int((coefficients.abs() > 1e-10).sum()),
    )


def coefficient_table(fit, alpha=0.05):
    """
    Tidy coefficient table of a statsmodels fit.

    Returns
    -------
    pandas.DataFrame
        One row per term with ``estimate``, ``std_error``, ``statistic``,
        ``pvalue``, ``lower`` and ``upper``.

    Examples
    --------
    >>> from statnotes.datasets import load_mtcars
    >>> from statnotes.models.regression import fit_ols, coefficient_table
    >>> coefficient_table(fit_ols("mpg ~ wt", load_mtcars())).shape
    (2, 6)
    """
    ci = fit.conf_int(alpha=alpha)
    return pd.DataFrame({
        "estimate": fit.params,
        "std_error": fit.bse,
        "statistic": fit.tvalues,
        "pvalue": fit.pvalues,
        "lower": ci.iloc[:, 0],
        "upper": ci.iloc[:, 1],
    })
