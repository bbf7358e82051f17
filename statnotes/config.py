# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>

"""
Provides the configuration settings for the `statnotes` package, allowing
users to customize how tutorial documents are rendered.

Features
--------

- **Random Seed and Reproducibility**:
  Every document synthesises its data and splits its samples from a single
  seed, so that the numbers narrated in the prose are stable across runs.

- **Output Location**:
  Rendered Markdown files and their figures are written below
  ``output_dir``.

- **Figures**:
  The file format and resolution of saved figures.

- **Logging and Verbosity**:
  Fine-grained control over logging levels, from no logging to full
  debug-level verbosity.

Environment variables
---------------------
``STATNOTES_SEED``
    Overrides the default seed (42).
``STATNOTES_OUTPUT_DIR``
    Overrides the default output directory (``./statnotes_output``).

Example:

>>> from statnotes.config import get_config, config_context
>>> get_config().random_seed
42
>>> with config_context(random_seed=7):
...     get_config().random_seed
7
"""
import os
import random
import logging
from contextlib import contextmanager
from numbers import Integral
from typing import Optional

import numpy as np

from ._statnoteslog import statnoteslog
from .compat.sklearn import validate_params, Interval, StrOptions
from .exceptions import ConfigError

logger = statnoteslog.get_statnotes_logger(__name__)

__all__ = ["Configure", "get_config", "set_config", "config_context"]

_VERBOSITY_LEVELS = {
    0: logging.CRITICAL + 10,
    1: logging.ERROR,
    2: logging.WARNING,
    3: logging.INFO,
    4: logging.DEBUG,
}


class Configure:
    """
    A class for managing and customizing the behavior of the `statnotes`
    package.

    Parameters
    ----------
    random_seed : int, optional
        Seed used by simulators, data splits and stochastic estimators.
        Default is the ``STATNOTES_SEED`` environment variable or 42.
    output_dir : str, optional
        Directory where rendered documents are saved. Default is the
        ``STATNOTES_OUTPUT_DIR`` environment variable or
        ``./statnotes_output``.
    figure_format : {'png', 'svg', 'pdf', 'jpg'}, default='png'
        File format of saved figures.
    dpi : int, default=100
        Resolution of saved raster figures.
    verbosity : int, default=2
        Controls the level of logging detail.
        0 = No logging,
        1 = Errors only,
        2 = Warnings,
        3 = Info,
        4 = Debug.

    Examples
    --------
    >>> from statnotes.config import Configure
    >>> config = Configure(random_seed=0, verbosity=3)
    >>> config.set_verbosity(4)
    """

    @validate_params(
        {
            'random_seed': [Interval(Integral, 0, None, closed="left"), None],
            'output_dir': [str, os.PathLike, None],
            'figure_format': [StrOptions({"png", "svg", "pdf", "jpg"})],
            'dpi': [Interval(Integral, 10, None, closed="left")],
            'verbosity': [Interval(Integral, 0, 4, closed="both")],
        }
    )
    def __init__(
        self,
        random_seed: Optional[int] = None,
        output_dir: Optional[str] = None,
        figure_format: str = "png",
        dpi: int = 100,
        verbosity: int = 2,
    ):
        if random_seed is None:
            random_seed = int(os.environ.get("STATNOTES_SEED", 42))
        if output_dir is None:
            output_dir = os.environ.get(
                "STATNOTES_OUTPUT_DIR", os.path.join(".", "statnotes_output"))

        self.random_seed = random_seed
        self.output_dir = str(output_dir)
        self.figure_format = figure_format
        self.dpi = dpi
        self.verbosity = verbosity

        self._setup_logging()

    def set_verbosity(self, level: int):
        """
        Set the verbosity level for logging.

        Parameters
        ----------
        level : int
            Verbosity level between 0 (silent) and 4 (debug).
        """
        if level not in _VERBOSITY_LEVELS:
            raise ConfigError(
                f"Verbosity must be an integer in [0, 4]. Got {level!r}.")
        self.verbosity = level
        self._setup_logging()
        logger.info("Verbosity level set to %d", level)

    def set_random_seed(self, seed: int):
        """
        Set the seed used by documents and seed the global generators.

        Parameters
        ----------
        seed : int
            The seed value to use for random number generation.
        """
        self.random_seed = seed
        random.seed(seed)
        np.random.seed(seed)
        logger.info("Random seed set to %d", seed)

    def as_dict(self):
        """Return the current settings as a plain dictionary."""
        return {
            "random_seed": self.random_seed,
            "output_dir": self.output_dir,
            "figure_format": self.figure_format,
            "dpi": self.dpi,
            "verbosity": self.verbosity,
        }

    def _setup_logging(self):
        """Apply the verbosity level to the package logger."""
        statnoteslog.get_statnotes_logger("statnotes").setLevel(
            _VERBOSITY_LEVELS[self.verbosity])

    def __repr__(self):
        params = ", ".join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"{self.__class__.__name__}({params})"


_config = None


def get_config() -> Configure:
    """Return the active configuration, creating it on first use."""
    global _config
    if _config is None:
        _config = Configure()
    return _config


def set_config(**settings) -> Configure:
    """
    Update the active configuration.

    Parameters
    ----------
    **settings : dict
        Any of ``random_seed``, ``output_dir``, ``figure_format``, ``dpi``
        and ``verbosity``.

    Returns
    -------
    Configure
        The updated configuration object.

    Raises
    ------
    ConfigError
        If an unknown setting is passed.
    """
    global _config
    current = get_config().as_dict()
    unknown = set(settings) - set(current)
    if unknown:
        raise ConfigError(
            f"Unknown configuration setting(s): {sorted(unknown)}. "
            f"Expect any of {sorted(current)}.")
    current.update(settings)
    _config = Configure(**current)
    return _config


@contextmanager
def config_context(**settings):
    """
    Temporarily override configuration settings within a context.

    Usage:
        with config_context(random_seed=1):
            run_tutorial("kmeans")
    """
    global _config
    original = get_config()
    set_config(**settings)
    try:
        yield get_config()
    finally:
        _config = original
        original._setup_logging()
