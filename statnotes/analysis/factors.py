# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Exploratory factor analysis: the Kaiser criterion for the number of
factors and maximum-likelihood factor analysis with an optional rotation.
"""

from numbers import Integral

import numpy as np
import pandas as pd
from sklearn.decomposition import FactorAnalysis
from sklearn.preprocessing import StandardScaler

from .._statnoteslog import statnoteslog
from ..api.structures import Boxspace
from ..compat.sklearn import validate_params, Interval, StrOptions
from ..dataops.cleaning import _check_columns

logger = statnoteslog.get_statnotes_logger(__name__)

__all__ = ["factor_analysis", "kaiser_criterion"]


def _items(data, columns):
    columns = _check_columns(data, columns)
    return data[columns].select_dtypes(include="number").dropna()


def kaiser_criterion(data, columns=None):
    """
    Eigenvalues of the correlation matrix and the number greater than one.

    The Kaiser rule retains as many factors as there are eigenvalues above
    1, that is components that explain more than a single standardized
    item.

    Returns
    -------
    Boxspace
        ``eigenvalues`` (Series, decreasing, indexed from 1) and
        ``n_factors``.

    Examples
    --------
    >>> from statnotes.datasets import simulate_survey
    >>> from statnotes.analysis.factors import kaiser_criterion
    >>> kaiser_criterion(simulate_survey(seed=0)).n_factors
    2
    """
    items = _items(data, columns)
    corr = np.corrcoef(items.to_numpy(dtype=float), rowvar=False)
    eigenvalues = np.sort(np.linalg.eigvalsh(corr))[::-1]
    eigenvalues = pd.Series(
        eigenvalues, index=pd.RangeIndex(1, len(eigenvalues) + 1, name="factor"),
        name="eigenvalue")
    return Boxspace(
        eigenvalues=eigenvalues,
        n_factors=int((eigenvalues > 1).sum()),
    )


@validate_params({
    "data": [pd.DataFrame],
    "n_factors": [Interval(Integral, 1, None, closed="left")],
    "rotation": [StrOptions({"varimax", "quartimax"}), None],
    "seed": [Interval(Integral, 0, None, closed="left"), None],
})
def factor_analysis(data, n_factors, rotation="varimax", columns=None,
                    seed=None):
    """
    Maximum-likelihood factor analysis of standardized items.

    Parameters
    ----------
    data : pandas.DataFrame
    n_factors : int
        Number of latent factors. Must not exceed the number of items.
    rotation : {'varimax', 'quartimax'} or None, default='varimax'
        Orthogonal rotation of the loadings.
    columns : list of str, optional
        Items to analyse. All numeric columns when None.
    seed : int, optional
        Seed of the randomized SVD used by the solver.

    Returns
    -------
    Boxspace
        ``loadings`` (items x factors), ``communalities`` (variance of each
        item shared with the factors), ``uniquenesses`` (the rest),
        ``scores`` (rows x factors), ``variance`` (sum of squared loadings
        per factor and its share of the total) and ``model``.

    Raises
    ------
    ValueError
        If `n_factors` is larger than the number of items.

    Examples
    --------
    >>> from statnotes.datasets import simulate_survey
    >>> from statnotes.analysis.factors import factor_analysis
    >>> res = factor_analysis(simulate_survey(seed=0), 2, seed=0)
    >>> res.loadings.shape
    (6, 2)
    """
    items = _items(data, columns)
    if n_factors > items.shape[1]:
        raise ValueError(
            f"n_factors={n_factors} exceeds the number of items"
            f" ({items.shape[1]}).")
    X = StandardScaler().fit_transform(items)
    model = FactorAnalysis(
        n_components=n_factors, rotation=rotation, random_state=seed).fit(X)
    names = [f"F{i + 1}" for i in range(n_factors)]

    loadings = pd.DataFrame(model.components_.T, index=items.columns,
                            columns=names)
    communalities = (loadings ** 2).sum(axis=1).rename("communality")
    ss_loadings = (loadings ** 2).sum(axis=0)
    variance = pd.DataFrame({
        "ss_loadings": ss_loadings,
        "proportion": ss_loadings / items.shape[1],
    })
    variance["cumulative"] = variance["proportion"].cumsum()
    logger.info("Factor analysis with %d factors (%s): %.2f%% of variance",
                n_factors, rotation, 100 * variance["cumulative"].iloc[-1])
    return Boxspace(
        loadings=loadings,
        communalities=communalities,
        uniquenesses=pd.Series(model.noise_variance_, index=items.columns,
                               name="uniqueness"),
        scores=pd.DataFrame(model.transform(X), index=items.index,
                            columns=names),
        variance=variance,
        model=model,
    )
