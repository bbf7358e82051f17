# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Turn fitted results into plain-English sentences.

The tutorial documents narrate every result they print. The helpers below
produce that prose from the numbers themselves so that the text always
agrees with the output printed above it. Every function returns a plain
string and is deterministic for a given input.
"""

import math
from numbers import Integral, Real

import numpy as np
import pandas as pd

__all__ = [
    "format_number",
    "format_pvalue",
    "significance_phrase",
    "correlation_strength",
    "kappa_agreement",
    "describe_coefficients",
    "describe_model_fit",
    "describe_metrics",
    "describe_confusion",
    "describe_clusters",
    "describe_variance",
]


def _join(items):
    items = [str(i) for i in items]
    if len(items) <= 1:
        return "".join(items)
    return ", ".join(items[:-1]) + " and " + items[-1]


def format_number(value, digits=3):
    """
    Format a number for prose.

    Integers get thousands separators, very small non-zero values switch
    to scientific notation and other values are rounded to `digits`
    decimals. Missing values read ``NA``.

    Examples
    --------
    >>> from statnotes.narrative import format_number
    >>> format_number(-5.344472)
    '-5.344'
    >>> format_number(12500)
    '12,500'
    >>> format_number(0.0000123)
    '1.23e-05'
    """
    if value is None:
        return "NA"
    if isinstance(value, (bool, np.bool_)):
        return str(value)
    if isinstance(value, Integral):
        return f"{int(value):,}"
    value = float(value)
    if math.isnan(value):
        return "NA"
    if math.isinf(value):
        return "infinity" if value > 0 else "minus infinity"
    if value != 0 and abs(value) < 10 ** -digits:
        return f"{value:.{max(digits - 1, 0)}e}"
    if abs(value) >= 1e5:
        return f"{value:,.0f}"
    return f"{value:.{digits}f}"


def format_pvalue(p, threshold=0.001):
    """
    Format a p-value as ``p = 0.023`` or ``p < 0.001``.

    Examples
    --------
    >>> from statnotes.narrative import format_pvalue
    >>> format_pvalue(1e-9)
    'p < 0.001'
    """
    if p < threshold:
        return f"p < {threshold:g}"
    return f"p = {p:.3f}"


def significance_phrase(p, alpha=0.05):
    """
    Describe a p-value against a significance level.

    Examples
    --------
    >>> from statnotes.narrative import significance_phrase
    >>> significance_phrase(0.0002)
    'statistically significant at the 5% level (p < 0.001)'
    >>> significance_phrase(0.41)
    'not statistically significant at the 5% level (p = 0.410)'
    """
    if not 0 < alpha < 1:
        raise ValueError(f"alpha must be in (0, 1). Got {alpha!r}.")
    level = f"{100 * alpha:g}%"
    verdict = "statistically significant" if p < alpha else (
        "not statistically significant")
    return f"{verdict} at the {level} level ({format_pvalue(p)})"


def correlation_strength(r):
    """
    Qualify a correlation coefficient.

    The thresholds 0.1, 0.3, 0.5 and 0.7 on ``|r|`` separate negligible,
    weak, moderate, strong and very strong associations.

    Examples
    --------
    >>> from statnotes.narrative import correlation_strength
    >>> correlation_strength(-0.8677)
    'very strong negative'
    >>> correlation_strength(0.05)
    'negligible'
    """
    if not -1 <= r <= 1:
        raise ValueError(f"A correlation lies in [-1, 1]. Got {r!r}.")
    size = abs(r)
    if size < 0.1:
        return "negligible"
    if size < 0.3:
        strength = "weak"
    elif size < 0.5:
        strength = "moderate"
    elif size < 0.7:
        strength = "strong"
    else:
        strength = "very strong"
    return f"{strength} {'positive' if r > 0 else 'negative'}"


def kappa_agreement(kappa):
    """
    Qualify Cohen's Kappa on the Landis and Koch scale.

    Examples
    --------
    >>> from statnotes.narrative import kappa_agreement
    >>> kappa_agreement(0.9)
    'almost perfect'
    """
    for bound, label in ((0, "poor"), (0.2, "slight"), (0.4, "fair"),
                         (0.6, "moderate"), (0.8, "substantial")):
        if kappa < bound:
            return label
    return "almost perfect"


def describe_coefficients(coef_table, alpha=0.05, response="the response",
                          odds=False):
    """
    One sentence per term of a coefficient table.

    Parameters
    ----------
    coef_table : pandas.DataFrame
        Output of :func:`statnotes.models.regression.coefficient_table`
        (``estimate`` and ``pvalue`` columns), or of
        :func:`statnotes.models.regression.odds_ratios` with ``odds=True``.
    alpha : float, default=0.05
    response : str, default='the response'
        Name of the response used in the sentences.
    odds : bool, default=False
        Read the table as odds ratios (``odds_ratio`` column).

    Returns
    -------
    str

    Examples
    --------
    >>> import pandas as pd
    >>> from statnotes.narrative import describe_coefficients
    >>> table = pd.DataFrame({"estimate": [37.285, -5.344],
    ...                       "pvalue": [1e-20, 1.3e-10]},
    ...                      index=["Intercept", "wt"])
    >>> print(describe_coefficients(table, response="mpg"))
    Each one-unit increase in wt changes mpg by -5.344 on average, holding the other terms fixed; the effect is statistically significant at the 5% level (p < 0.001).
    """
    sentences = []
    column = "odds_ratio" if odds else "estimate"
    for term, row in coef_table.iterrows():
        if term == "Intercept":
            continue
        estimate = row[column]
        significance = significance_phrase(row["pvalue"], alpha)
        if odds:
            change = (estimate - 1) * 100
            direction = "increase" if change >= 0 else "decrease"
            sentences.append(
                f"Each one-unit increase in {term} multiplies the odds of"
                f" {response} by {format_number(estimate)} (a"
                f" {format_number(abs(change), 1)}% {direction}); the effect"
                f" is {significance}.")
        else:
            sentences.append(
                f"Each one-unit increase in {term} changes {response} by"
                f" {format_number(estimate)} on average, holding the other"
                f" terms fixed; the effect is {significance}.")
    return " ".join(sentences)


def describe_model_fit(fit):
    """
    Summarize the goodness of fit of a statsmodels regression.

    Handles ordinary least squares (R-squared and the overall F-test),
    binary logit/probit (McFadden pseudo R-squared and the likelihood-ratio
    test) and quantile regression (pseudo R-squared).

    Examples
    --------
    >>> from statnotes.datasets import load_mtcars
    >>> from statnotes.models.regression import fit_ols
    >>> from statnotes.narrative import describe_model_fit
    >>> describe_model_fit(fit_ols("mpg ~ wt", load_mtcars()))[:44]
    'The model explains 75.3% of the variance of '
    """
    kind = type(fit.model).__name__
    n = int(fit.nobs)
    if kind == "QuantReg":
        q = getattr(fit, "q", np.nan)
        return (
            f"The quantile regression at q = {format_number(q, 2)} has a"
            f" pseudo R-squared of {format_number(fit.prsquared)} on"
            f" {format_number(n)} observations.")
    if kind in ("Logit", "Probit"):
        return (
            f"The {kind.lower()} model has a McFadden pseudo R-squared of"
            f" {format_number(fit.prsquared)}; the likelihood-ratio test"
            f" against the intercept-only model is"
            f" {significance_phrase(fit.llr_pvalue)} on"
            f" {format_number(n)} observations.")
    return (
        f"The model explains {100 * fit.rsquared:.1f}% of the variance of"
        f" the response (R-squared = {format_number(fit.rsquared)}, adjusted"
        f" R-squared = {format_number(fit.rsquared_adj)}, n ="
        f" {format_number(n)}). The overall F-test (F ="
        f" {format_number(fit.fvalue, 2)}) is {significance_phrase(fit.f_pvalue)}.")


def describe_metrics(metrics):
    """
    Narrate classification or regression test metrics.

    Parameters
    ----------
    metrics : MetricFormatter or dict
        With ``accuracy`` and ``kappa`` (classification) or ``rmse`` and
        ``r2`` (regression).

    Examples
    --------
    >>> from statnotes.narrative import describe_metrics
    >>> describe_metrics({"accuracy": 0.9333, "kappa": 0.9})
    'On the held-out data the model classifies 93.3% of the cases correctly, with a Kappa of 0.900 (almost perfect agreement beyond chance).'
    """
    values = metrics.metrics() if hasattr(metrics, "metrics") else dict(metrics)
    if "accuracy" in values:
        text = (
            f"On the held-out data the model classifies"
            f" {100 * values['accuracy']:.1f}% of the cases correctly")
        if "kappa" in values:
            text += (
                f", with a Kappa of {format_number(values['kappa'])}"
                f" ({kappa_agreement(values['kappa'])} agreement beyond chance)")
        if "balanced_accuracy" in values:
            text += (
                f"; the balanced accuracy is"
                f" {format_number(values['balanced_accuracy'])}")
        return text + "."
    if "rmse" in values:
        text = (
            f"On the held-out data the root mean squared error is"
            f" {format_number(values['rmse'])}")
        if "mae" in values:
            text += f" (mean absolute error {format_number(values['mae'])})"
        if "r2" in values:
            text += (
                f" and the model explains {100 * values['r2']:.1f}% of the"
                " variance of the response")
        return text + "."
    raise ValueError(
        f"Cannot describe metrics {sorted(values)}; expect accuracy or rmse.")


def describe_confusion(confusion):
    """
    Narrate where a classifier errs, from its confusion matrix.

    Parameters
    ----------
    confusion : pandas.DataFrame
        Counts with the reference classes as rows and the predicted classes
        as columns, as returned by ``statnotes.models.confusion_table``.

    Examples
    --------
    >>> import pandas as pd
    >>> from statnotes.narrative import describe_confusion
    >>> cm = pd.DataFrame([[5, 0, 0], [0, 4, 1], [0, 0, 5]],
    ...                   index=list("abc"), columns=list("abc"))
    >>> describe_confusion(cm)
    'The 1 error mistakes b for c; a and c are always recognised.'
    """
    counts = confusion.to_numpy()
    n_errors = int(counts.sum() - np.trace(counts))
    if n_errors == 0:
        return "Every case of the test set is classified correctly."
    pairs = [
        f"{confusion.index[i]} for {confusion.columns[j]}"
        for i, j in zip(*np.nonzero(counts)) if i != j
    ]
    text = (
        f"The {n_errors} error{'s' if n_errors > 1 else ''}"
        f" mistake{'' if n_errors > 1 else 's'} {_join(pairs)}")
    totals = counts.sum(axis=1)
    perfect = [
        label for i, label in enumerate(confusion.index)
        if totals[i] and counts[i, i] == totals[i]
    ]
    if perfect:
        text += (
            f"; {_join(perfect)} {'is' if len(perfect) == 1 else 'are'}"
            " always recognised")
    return text + "."


def _silhouette_label(width):
    if width > 0.7:
        return "a strong structure"
    if width > 0.5:
        return "a reasonable structure"
    if width > 0.25:
        return "a weak structure that could be artificial"
    return "no substantial structure"


def describe_clusters(result):
    """
    Narrate a k-means result.

    Parameters
    ----------
    result : Boxspace
        Output of :func:`statnotes.analysis.cluster.kmeans`.

    Examples
    --------
    >>> import pandas as pd
    >>> from statnotes.api.structures import Boxspace
    >>> from statnotes.narrative import describe_clusters
    >>> res = Boxspace(sizes=pd.Series([98, 101, 101]), silhouette=0.72)
    >>> describe_clusters(res)
    'k-means found 3 clusters of 98, 101 and 101 observations. The average silhouette width is 0.720, which indicates a strong structure.'
    """
    sizes = list(result.sizes)
    text = (
        f"k-means found {len(sizes)} clusters of"
        f" {_join(format_number(int(s)) for s in sizes)} observations.")
    silhouette = result.get("silhouette") if hasattr(result, "get") else None
    if silhouette is not None and not (isinstance(silhouette, Real)
                                       and math.isnan(silhouette)):
        text += (
            f" The average silhouette width is {format_number(silhouette)},"
            f" which indicates {_silhouette_label(silhouette)}.")
    return text


def describe_variance(explained, threshold=0.8):
    """
    Narrate how variance accumulates over components.

    Parameters
    ----------
    explained : pandas.DataFrame or array-like
        The ``explained`` frame of :func:`statnotes.analysis.decomposition.pca`
        (``ratio`` column) or a sequence of variance ratios.
    threshold : float, default=0.8
        Share of variance that the retained components should reach.

    Examples
    --------
    >>> from statnotes.narrative import describe_variance
    >>> describe_variance([0.7296, 0.2285, 0.0367, 0.0052])
    'The first component explains 73.0% of the variance and the first two together 95.8%. Two components are enough to retain 80% of the variance.'
    """
    if isinstance(explained, pd.DataFrame):
        ratios = explained["ratio"].to_numpy(dtype=float)
    else:
        ratios = np.asarray(explained, dtype=float)
    if ratios.size == 0:
        raise ValueError("No explained variance to describe.")
    cumulative = np.cumsum(ratios)
    text = f"The first component explains {100 * ratios[0]:.1f}% of the variance"
    if ratios.size > 1:
        text += f" and the first two together {100 * cumulative[1]:.1f}%"
    text += "."
    reached = np.flatnonzero(cumulative >= threshold - 1e-12)
    if reached.size:
        k = int(reached[0]) + 1
        words = {1: "One component is", 2: "Two components are",
                 3: "Three components are"}
        lead = words.get(k, f"{k} components are")
        text += f" {lead} enough to retain {100 * threshold:g}% of the variance."
    else:
        text += (
            f" All {ratios.size} components together retain"
            f" {100 * cumulative[-1]:.1f}% of the variance.")
    return text
