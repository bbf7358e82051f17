# -*- coding: utf-8 -*-
# License: BSD-3-Clause
# Author: L. Kouadio <etanoyau@gmail.com>

"""
statnotes: Runnable Statistics and Machine-Learning Notes
=========================================================

:code:`statnotes` renders a series of narrative tutorials (data import and
cleaning, descriptive statistics, regressions, classifiers, ensembles,
clustering and dimensionality reduction) to Markdown documents with their
figures. Every document loads or simulates its data from a single seed,
fits the models with the scientific Python stack and narrates the numbers
it obtains.
"""
import logging
import warnings
import importlib
from importlib import metadata

# Configure basic logging and silence the font manager chatter
logging.basicConfig(level=logging.WARNING)
logging.getLogger('matplotlib.font_manager').disabled = True

__version__ = "0.1.0"

# Dependency check
_required_dependencies = [
    ("numpy", None),
    ("pandas", None),
    ("scipy", None),
    ("matplotlib", None),
    ("seaborn", None),
    ("statsmodels", None),
    ("patsy", None),
    ("tqdm", None),
    ("joblib", None),
    ("scikit-learn", "sklearn"),
]

_missing_dependencies = []
for package, import_name in _required_dependencies:
    try:
        importlib.import_module(import_name or package)
    except ImportError as e:
        _missing_dependencies.append(f"{package}: {str(e)}")

if _missing_dependencies:
    warnings.warn(
        "Some dependencies are missing. statnotes may not function correctly:\n"
        + "\n".join(_missing_dependencies), ImportWarning)


def show_versions():
    """
    Return the installed versions of statnotes and its dependencies.

    Returns
    -------
    str
        One ``name: version`` line per package; ``not installed`` when a
        package cannot be found.
    """
    lines = [f"statnotes: {__version__}"]
    for package, _ in _required_dependencies + [("click", None),
                                                 ("openpyxl", None),
                                                 ("pyyaml", None)]:
        try:
            version = metadata.version(package)
        except metadata.PackageNotFoundError:
            version = "not installed"
        lines.append(f"{package}: {version}")
    return "\n".join(lines)


# Setup logging configuration
from ._util import initialize_logging  # noqa: E402
initialize_logging()

from .config import get_config, set_config, config_context  # noqa: E402

__all__ = [
    "__version__",
    "show_versions",
    "get_config",
    "set_config",
    "config_context",
]

# Append the version information to the module's docstring
__doc__ += f"\nVersion: {__version__}\n"
