# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>

"""
Miscellanous plot utilities.
"""
from __future__ import annotations
import os
from typing import Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from .._statnoteslog import statnoteslog
from ..config import get_config
from ..exceptions import PlotError

logger = statnoteslog.get_statnotes_logger(__name__)

__all__ = ["savefigure", "get_ax", "check_columns"]


def get_ax(ax: Optional[Axes] = None, figsize: Tuple[float, float] = (6, 4)):
    """
    Return `ax` or a fresh Axes on a new figure of size `figsize`.

    Raises
    ------
    PlotError
        If `ax` is neither None nor a matplotlib Axes.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=figsize)
    elif not isinstance(ax, Axes):
        raise PlotError(
            f"Expect a matplotlib Axes. Got {type(ax).__name__!r}.")
    return ax


def check_columns(data, *columns):
    """Raise :class:`PlotError` when a column to draw is absent."""
    missing = [c for c in columns if c is not None and c not in data.columns]
    if missing:
        raise PlotError(
            f"Column(s) {missing} not found. Available: {list(data.columns)}.")


def savefigure(
    fig: object,
    figname: str,
    dpi: Optional[int] = None,
    ext: Optional[str] = None,
    **skws
):
    """
    Save a matplotlib figure, creating the parent directories.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
        Figure to be saved. An Axes is accepted and its figure is saved.
    figname : str or path-like
        Output file. When it has no extension, `ext` is appended.
    dpi : int, optional
        Resolution. Defaults to the configured ``dpi``.
    ext : str, optional
        Extension used when `figname` has none. Defaults to the configured
        ``figure_format``.
    **skws : dict
        Additional keyword arguments passed to
        :meth:`matplotlib.figure.Figure.savefig`.

    Returns
    -------
    str
        Path of the written file.

    Examples
    --------
    >>> import matplotlib.pyplot as plt
    >>> from statnotes.plot.utils import savefigure
    >>> fig, ax = plt.subplots()
    >>> _ = ax.plot([1, 2, 3], [4, 5, 6])
    >>> savefigure(fig, 'figures/my_plot')  # doctest: +SKIP
    'figures/my_plot.png'
    """
    config = get_config()
    if isinstance(fig, Axes):
        fig = fig.figure
    if not hasattr(fig, "savefig"):
        raise PlotError(
            f"Expect a matplotlib figure. Got {type(fig).__name__!r}.")

    ext = str(ext or config.figure_format).lower().strip().replace('.', '')
    figname = os.fspath(figname)
    file, ex = os.path.splitext(figname)
    if not ex:
        figname = file + '.' + ext

    parent = os.path.dirname(figname)
    if parent:
        os.makedirs(parent, exist_ok=True)
    skws.setdefault("bbox_inches", "tight")
    fig.savefig(figname, dpi=dpi or config.dpi, **skws)
    logger.debug("Figure saved to %s", figname)
    return figname
