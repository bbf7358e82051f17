# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Synthetic datasets used by the tutorial documents.

Every simulator draws from standard distributions through a
:func:`numpy.random.default_rng` generator created from `seed`, so the same
seed always reproduces the same frame. The data are deliberately small and
carry a known structure (linear, quadratic, logistic, clustered, latent
factors) that the matching tutorial recovers with a library estimator.
"""

from numbers import Integral, Real

import numpy as np
import pandas as pd

from .._statnoteslog import statnoteslog
from ..compat.sklearn import validate_params, Interval

logger = statnoteslog.get_statnotes_logger(__name__)

__all__ = [
    "simulate_salaries",
    "simulate_growth",
    "simulate_admissions",
    "simulate_customers",
    "simulate_blobs",
    "simulate_survey",
    "simulate_air_quality",
    "simulate_housing",
]

_N_SAMPLES = [Interval(Integral, 1, None, closed="left")]
_SEED = [Interval(Integral, 0, None, closed="left"), None]


def _rng(seed, func_name):
    logger.debug("%s: drawing samples with seed=%s", func_name, seed)
    return np.random.default_rng(seed)


@validate_params({
    "n_samples": _N_SAMPLES,
    "noise": [Interval(Real, 0, None, closed="left")],
    "seed": _SEED,
})
def simulate_salaries(n_samples=200, *, noise=5.0, seed=42):
    """
    Simulate employee salaries driven by experience and education.

    The salary (thousands per year) is generated as::

        salary = 30 + 2.5 * experience + bonus[education] + N(0, noise)

    with ``bonus = {'bachelor': 0, 'master': 8, 'phd': 15}``.

    Parameters
    ----------
    n_samples : int, default=200
        Number of employees.
    noise : float, default=5.0
        Standard deviation of the normal noise.
    seed : int, optional
        Seed of the random generator.

    Returns
    -------
    pandas.DataFrame
        Columns ``experience``, ``education`` (categorical) and ``salary``.

    Examples
    --------
    >>> from statnotes.datasets import simulate_salaries
    >>> simulate_salaries(5, seed=0).shape
    (5, 3)
    """
    rng = _rng(seed, "simulate_salaries")
    experience = rng.uniform(0, 30, size=n_samples).round(1)
    levels = ["bachelor", "master", "phd"]
    education = rng.choice(levels, size=n_samples, p=[0.5, 0.35, 0.15])
    bonus = pd.Series(education).map({"bachelor": 0.0, "master": 8.0, "phd": 15.0})
    salary = (
        30.0 + 2.5 * experience + bonus.to_numpy()
        + rng.normal(0, noise, size=n_samples)
    )
    return pd.DataFrame({
        "experience": experience,
        "education": pd.Categorical(education, categories=levels),
        "salary": salary.round(2),
    })


@validate_params({
    "n_samples": _N_SAMPLES,
    "noise": [Interval(Real, 0, None, closed="left")],
    "seed": _SEED,
})
def simulate_growth(n_samples=60, *, noise=2.0, seed=42):
    """
    Simulate a dose-response experiment with a quadratic trend.

    ``growth = 5 + 4 * dose - 0.35 * dose**2 + N(0, noise)`` with doses
    drawn uniformly in [0, 10].

    Examples
    --------
    >>> from statnotes.datasets import simulate_growth
    >>> list(simulate_growth(3, seed=1).columns)
    ['dose', 'growth']
    """
    rng = _rng(seed, "simulate_growth")
    dose = np.sort(rng.uniform(0, 10, size=n_samples)).round(2)
    growth = 5 + 4 * dose - 0.35 * dose ** 2 + rng.normal(0, noise, size=n_samples)
    return pd.DataFrame({"dose": dose, "growth": growth.round(3)})


@validate_params({"n_samples": _N_SAMPLES, "seed": _SEED})
def simulate_admissions(n_samples=400, *, seed=42):
    """
    Simulate graduate admissions with a logistic response.

    The log-odds of admission are
    ``-0.2 + 0.004 * (gre - 500) + 1.2 * (gpa - 3) - 0.6 * (rank - 1)``,
    which admits roughly two applicants out of five.

    Returns
    -------
    pandas.DataFrame
        Columns ``gre``, ``gpa``, ``rank`` (1 = most prestigious) and the
        binary ``admit``.

    Examples
    --------
    >>> from statnotes.datasets import simulate_admissions
    >>> df = simulate_admissions(50, seed=3)
    >>> set(df.admit.unique()) <= {0, 1}
    True
    """
    rng = _rng(seed, "simulate_admissions")
    gre = np.clip(rng.normal(590, 110, size=n_samples), 220, 800).round(-1)
    gpa = np.clip(rng.normal(3.4, 0.38, size=n_samples), 2.2, 4.0).round(2)
    rank = rng.choice([1, 2, 3, 4], size=n_samples, p=[0.15, 0.38, 0.3, 0.17])
    logit = -0.2 + 0.004 * (gre - 500) + 1.2 * (gpa - 3.0) - 0.6 * (rank - 1)
    prob = 1.0 / (1.0 + np.exp(-logit))
    admit = rng.binomial(1, prob)
    return pd.DataFrame({
        "gre": gre.astype(int),
        "gpa": gpa,
        "rank": rank,
        "admit": admit,
    })


@validate_params({
    "n_samples": _N_SAMPLES,
    "class_sep": [Interval(Real, 0, None, closed="neither")],
    "seed": _SEED,
})
def simulate_customers(n_samples=300, *, class_sep=1.0, seed=42):
    """
    Simulate customers belonging to three market segments.

    Each segment has its own mean for ``age``, ``income`` (thousands),
    ``spending`` (0-100 score) and ``visits`` per month; `class_sep` scales
    the distance between segment means. ``channel`` is a categorical
    feature whose distribution also depends on the segment.

    Returns
    -------
    pandas.DataFrame
        Feature columns and the categorical target ``segment`` with levels
        ``budget``, ``regular`` and ``premium``.

    Examples
    --------
    >>> from statnotes.datasets import simulate_customers
    >>> df = simulate_customers(30, seed=0)
    >>> sorted(df.segment.cat.categories)
    ['budget', 'premium', 'regular']
    """
    rng = _rng(seed, "simulate_customers")
    segments = ["budget", "regular", "premium"]
    means = {
        "age": np.array([28.0, 40.0, 50.0]),
        "income": np.array([30.0, 55.0, 90.0]),
        "spending": np.array([35.0, 50.0, 72.0]),
        "visits": np.array([6.0, 4.0, 3.0]),
    }
    scales = {"age": 9.0, "income": 14.0, "spending": 12.0, "visits": 1.6}
    codes = rng.integers(0, 3, size=n_samples)

    columns = {}
    for name, centers in means.items():
        grand = centers.mean()
        shifted = grand + class_sep * (centers - grand)
        columns[name] = shifted[codes] + rng.normal(0, scales[name], size=n_samples)

    channel_p = np.array([
        [0.6, 0.3, 0.1],
        [0.35, 0.4, 0.25],
        [0.15, 0.35, 0.5],
    ])
    channels = np.array(["store", "web", "app"])
    channel = np.array([channels[rng.choice(3, p=channel_p[c])] for c in codes])

    frame = pd.DataFrame({
        "age": np.clip(columns["age"], 18, 80).round().astype(int),
        "income": np.clip(columns["income"], 8, None).round(1),
        "spending": np.clip(columns["spending"], 1, 100).round(1),
        "visits": np.clip(columns["visits"], 0, None).round(1),
        "channel": pd.Categorical(channel, categories=["store", "web", "app"]),
    })
    frame["segment"] = pd.Categorical.from_codes(codes, categories=segments)
    return frame


@validate_params({
    "n_samples": _N_SAMPLES,
    "n_centers": [Interval(Integral, 1, None, closed="left")],
    "cluster_std": [Interval(Real, 0, None, closed="neither")],
    "seed": _SEED,
})
def simulate_blobs(n_samples=300, *, n_centers=3, cluster_std=1.0, seed=42):
    """
    Simulate isotropic Gaussian clusters in two dimensions.

    Centers are drawn uniformly in ``[-10, 10]`` for both coordinates and
    each sample is assigned to a center uniformly at random.

    Returns
    -------
    pandas.DataFrame
        Columns ``x``, ``y`` and the generating cluster ``group`` (int).

    Examples
    --------
    >>> from statnotes.datasets import simulate_blobs
    >>> simulate_blobs(12, n_centers=4, seed=0).group.nunique() <= 4
    True
    """
    rng = _rng(seed, "simulate_blobs")
    centers = rng.uniform(-10, 10, size=(n_centers, 2))
    group = rng.integers(0, n_centers, size=n_samples)
    points = centers[group] + rng.normal(0, cluster_std, size=(n_samples, 2))
    return pd.DataFrame({
        "x": points[:, 0].round(4),
        "y": points[:, 1].round(4),
        "group": group,
    })


@validate_params({
    "n_samples": _N_SAMPLES,
    "n_factors": [Interval(Integral, 1, None, closed="left")],
    "items_per_factor": [Interval(Integral, 2, None, closed="left")],
    "noise": [Interval(Real, 0, None, closed="left")],
    "seed": _SEED,
})
def simulate_survey(n_samples=500, *, n_factors=2, items_per_factor=3,
                    noise=0.6, seed=42):
    """
    Simulate questionnaire answers driven by latent factors.

    Each latent factor ``F_k ~ N(0, 1)`` drives `items_per_factor` items
    ``q<k><j> = loading * F_k + N(0, noise)`` with loadings drawn uniformly
    in [0.6, 0.9]. Answers are then rescaled to a 1-7 Likert-like range and
    rounded to one decimal.

    Returns
    -------
    pandas.DataFrame
        One column per item, named ``q11, q12, ..., q21, ...``.

    Examples
    --------
    >>> from statnotes.datasets import simulate_survey
    >>> simulate_survey(10, n_factors=2, items_per_factor=3, seed=0).shape
    (10, 6)
    """
    rng = _rng(seed, "simulate_survey")
    factors = rng.normal(0, 1, size=(n_samples, n_factors))
    columns = {}
    for k in range(n_factors):
        loadings = rng.uniform(0.6, 0.9, size=items_per_factor)
        for j, loading in enumerate(loadings, start=1):
            raw = loading * factors[:, k] + rng.normal(0, noise, size=n_samples)
            columns[f"q{k + 1}{j}"] = np.clip(4 + 1.2 * raw, 1, 7).round(1)
    return pd.DataFrame(columns)


@validate_params({
    "n_days": _N_SAMPLES,
    "missing_rate": [Interval(Real, 0, 1, closed="left")],
    "seed": _SEED,
})
def simulate_air_quality(n_days=153, *, start="1973-05-01", missing_rate=0.15,
                         seed=42):
    """
    Simulate daily air quality readings with missing values.

    Temperature follows a seasonal curve, wind is gamma distributed and
    ozone increases with temperature and decreases with wind. A fraction
    `missing_rate` of the ``ozone`` and half that fraction of the
    ``solar_r`` readings are removed.

    Returns
    -------
    pandas.DataFrame
        Columns ``date`` (ISO strings, as read from a file), ``month``
        (month name), ``ozone``, ``solar_r``, ``wind`` and ``temp``.

    Examples
    --------
    >>> from statnotes.datasets import simulate_air_quality
    >>> df = simulate_air_quality(30, missing_rate=0.2, seed=1)
    >>> int(df.ozone.isna().sum())
    6
    """
    rng = _rng(seed, "simulate_air_quality")
    dates = pd.date_range(start=start, periods=n_days, freq="D")
    day = np.arange(n_days)
    temp = 68 + 14 * np.sin(np.pi * day / max(n_days, 1)) + rng.normal(0, 5, n_days)
    wind = rng.gamma(shape=6.0, scale=1.6, size=n_days)
    solar = rng.uniform(10, 330, size=n_days)
    ozone = np.clip(
        -60 + 1.6 * temp - 3.0 * wind + 0.05 * solar + rng.normal(0, 15, n_days),
        1, None)

    frame = pd.DataFrame({
        "date": dates.strftime("%Y-%m-%d"),
        "month": dates.strftime("%B"),
        "ozone": ozone.round(),
        "solar_r": solar.round(),
        "wind": wind.round(1),
        "temp": temp.round(),
    })
    n_missing = int(round(missing_rate * n_days))
    if n_missing:
        frame.loc[rng.choice(n_days, n_missing, replace=False), "ozone"] = np.nan
        n_solar = n_missing // 2
        if n_solar:
            frame.loc[
                rng.choice(n_days, n_solar, replace=False), "solar_r"] = np.nan
    return frame


@validate_params({
    "n_samples": _N_SAMPLES,
    "noise": [Interval(Real, 0, None, closed="left")],
    "seed": _SEED,
})
def simulate_housing(n_samples=500, *, noise=15.0, seed=42):
    """
    Simulate house prices with nonlinear effects.

    The price (thousands) combines a saturating effect of size, a premium
    for the city center that grows with size, an age penalty and a bump
    for the number of rooms::

        price = 80 + 120 * log1p(size / 50) + 0.6 * size * center
                - 1.2 * age + 10 * sqrt(rooms) + N(0, noise)

    Examples
    --------
    >>> from statnotes.datasets import simulate_housing
    >>> list(simulate_housing(4, seed=0).columns)
    ['size', 'rooms', 'age', 'center', 'distance', 'price']
    """
    rng = _rng(seed, "simulate_housing")
    size = rng.uniform(30, 250, size=n_samples)
    rooms = np.clip(np.round(size / 35 + rng.normal(0, 0.8, n_samples)), 1, None)
    age = rng.uniform(0, 80, size=n_samples)
    center = rng.binomial(1, 0.3, size=n_samples)
    distance = np.where(
        center == 1, rng.uniform(0, 3, n_samples), rng.uniform(3, 25, n_samples))
    price = (
        80 + 120 * np.log1p(size / 50) + 0.6 * size * center
        - 1.2 * age + 10 * np.sqrt(rooms) - 1.5 * distance
        + rng.normal(0, noise, n_samples)
    )
    return pd.DataFrame({
        "size": size.round(1),
        "rooms": rooms.astype(int),
        "age": age.round().astype(int),
        "center": center,
        "distance": distance.round(2),
        "price": price.round(1),
    })
