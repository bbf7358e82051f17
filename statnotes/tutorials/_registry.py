# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Registry of the tutorial documents and the functions that render them.

Each tutorial module defines a builder ``build(doc, seed)`` decorated with
:func:`register`. The builder appends blocks to a fresh
:class:`~statnotes.document.Document` and records its key numbers; it
never reads the output of another tutorial.
"""

import difflib
import importlib
import inspect
import os
import time

import matplotlib
import matplotlib.pyplot as plt
from joblib import Parallel, delayed
from tqdm import tqdm

from .._statnoteslog import statnoteslog
from ..config import config_context, get_config
from ..document import Document
from ..exceptions import TutorialNotFoundError

logger = statnoteslog.get_statnotes_logger(__name__)

__all__ = [
    "Tutorial",
    "register",
    "list_tutorials",
    "get_tutorial",
    "run_tutorial",
    "run_all",
]

# Rendering order of the documents; one module per name.
TUTORIAL_MODULES = (
    "data_import",
    "data_cleaning",
    "descriptive_statistics",
    "visualization",
    "linear_regression",
    "polynomial_regression",
    "logistic_regression",
    "regularized_regression",
    "quantile_regression",
    "svm",
    "knn",
    "random_forest",
    "boosting",
    "lda",
    "kmeans",
    "pca",
    "factor_analysis",
    "correspondence_analysis",
)

_REGISTRY = {}
_LOADED = False


class Tutorial:
    """
    A registered tutorial.

    Attributes
    ----------
    name : str
        Identifier used on the command line.
    title : str
    tags : tuple of str
    requires : tuple of str
        Third-party packages the document relies on.
    builder : callable
        ``builder(doc, seed)`` fills the document.
    summary : str
        First paragraph of the builder docstring.
    """

    def __init__(self, name, title, builder, tags=(), requires=()):
        self.name = name
        self.title = title
        self.builder = builder
        self.tags = tuple(tags)
        self.requires = tuple(requires)
        doc = inspect.getdoc(builder) or ""
        self.summary = doc.split("\n\n")[0].replace("\n", " ").strip()

    def document(self):
        """Return an empty document carrying the tutorial header."""
        return Document(self.title, self.name, summary=self.summary,
                        requirements=self.requires)

    def __repr__(self):
        return f"Tutorial(name={self.name!r}, title={self.title!r}, tags={self.tags})"


def register(name, title, tags=(), requires=()):
    """
    Decorator registering a document builder under `name`.

    Examples
    --------
    >>> from statnotes.tutorials import register
    >>> @register("hello", "Hello", tags=("demo",))
    ... def build(doc, seed):
    ...     '''Say hello.'''
    ...     doc.text("Hello.")
    """
    def decorator(builder):
        if name in _REGISTRY and _REGISTRY[name].builder is not builder:
            raise ValueError(f"Tutorial {name!r} is already registered.")
        _REGISTRY[name] = Tutorial(name, title, builder, tags, requires)
        return builder
    return decorator


def _load_all():
    global _LOADED
    if _LOADED:
        return
    for module in TUTORIAL_MODULES:
        importlib.import_module(f"{__package__}.{module}")
    _LOADED = True


def list_tutorials(tag=None):
    """
    Registered tutorials, in rendering order.

    Parameters
    ----------
    tag : str, optional
        Keep only the tutorials carrying this tag.

    Returns
    -------
    list of Tutorial
    """
    _load_all()
    order = {name: i for i, name in enumerate(TUTORIAL_MODULES)}
    tutorials = sorted(
        _REGISTRY.values(), key=lambda t: (order.get(t.name, len(order)), t.name))
    if tag is not None:
        tutorials = [t for t in tutorials if tag in t.tags]
    return tutorials


def get_tutorial(name):
    """
    Return the registered tutorial `name`.

    Raises
    ------
    TutorialNotFoundError
        If no tutorial has this name; close names are suggested.
    """
    _load_all()
    if name not in _REGISTRY:
        matches = difflib.get_close_matches(str(name), list(_REGISTRY), n=3)
        hint = f" Did you mean {', '.join(map(repr, matches))}?" if matches else (
            " Run `statnotes list` to see the available tutorials.")
        raise TutorialNotFoundError(f"No tutorial named {name!r}.{hint}")
    return _REGISTRY[name]


def _use_agg_backend():
    if matplotlib.get_backend().lower() != "agg":
        plt.switch_backend("Agg")


def run_tutorial(name, output_dir=None, seed=None):
    """
    Build one tutorial document and optionally save it.

    Parameters
    ----------
    name : str
        Registered tutorial name.
    output_dir : str, optional
        When given, the document is written there (``<name>.md`` plus
        ``figures/``) and its figures are closed.
    seed : int, optional
        Seed of the simulations, splits and estimators. Defaults to the
        configured ``random_seed``.

    Returns
    -------
    Document

    Examples
    --------
    >>> from statnotes.tutorials import run_tutorial
    >>> doc = run_tutorial("linear_regression")
    >>> round(doc.results["slope"], 4)
    -5.3445
    """
    tutorial = get_tutorial(name)
    seed = get_config().random_seed if seed is None else seed
    _use_agg_backend()

    logger.info("Building tutorial %r (seed=%s)", name, seed)
    start = time.perf_counter()
    doc = tutorial.document()
    try:
        tutorial.builder(doc, seed)
        if output_dir is not None:
            doc.save(output_dir)
    finally:
        doc.close()
    logger.info("Tutorial %r done in %.2fs", name, time.perf_counter() - start)
    return doc


def _render_path(name, output_dir, seed, settings):
    # joblib workers start from the default configuration
    with config_context(**settings):
        doc = run_tutorial(name, output_dir=output_dir, seed=seed)
    return os.path.join(output_dir, f"{doc.slug}.md")


def run_all(output_dir=None, names=None, n_jobs=1, seed=None):
    """
    Render several tutorials to `output_dir`.

    Parameters
    ----------
    output_dir : str, optional
        Defaults to the configured ``output_dir``.
    names : list of str, optional
        Tutorials to render. All of them when None.
    n_jobs : int, default=1
        Number of parallel workers (joblib); ``-1`` uses every core.
    seed : int, optional

    Returns
    -------
    dict
        Tutorial name mapped to the path of its Markdown file.
    """
    output_dir = os.fspath(output_dir or get_config().output_dir)
    seed = get_config().random_seed if seed is None else seed
    names = list(names) if names is not None else [
        t.name for t in list_tutorials()]
    for name in names:
        get_tutorial(name)

    settings = get_config().as_dict()
    progress = tqdm(names, desc="Rendering tutorials", ascii=True, ncols=100)
    if n_jobs == 1:
        paths = [_render_path(name, output_dir, seed, settings)
                 for name in progress]
    else:
        paths = Parallel(n_jobs=n_jobs)(
            delayed(_render_path)(name, output_dir, seed, settings)
            for name in progress)
    logger.info("Rendered %d tutorials to %s", len(names), output_dir)
    return dict(zip(names, paths))
