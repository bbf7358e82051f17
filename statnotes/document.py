# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Narrative documents rendered to Markdown.

A :class:`Document` is an ordered list of blocks: headings, prose, code
snippets, printed library output, tables and figures. Tutorials append
blocks as they run, so the rendered file interleaves what was computed
with what it means. Key numbers are also kept in :attr:`Document.results`
for tests and command-line summaries.
"""

from __future__ import annotations
import os
import textwrap
from numbers import Integral, Real
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from ._statnoteslog import statnoteslog
from .config import get_config
from .exceptions import PlotError
from .plot.utils import savefigure

logger = statnoteslog.get_statnotes_logger(__name__)

__all__ = ["Document", "Block", "to_pipe_table", "render_output"]

FIGURE_DIR = "figures"


class Block:
    """A single piece of a document: its kind and its payload."""

    __slots__ = ("kind", "content", "options")

    def __init__(self, kind: str, content: Any, **options):
        self.kind = kind
        self.content = content
        self.options = options

    def __repr__(self):
        return f"Block(kind={self.kind!r})"


def _format_cell(value, floatfmt):
    if isinstance(value, (bool, np.bool_)):
        text = str(value)
    elif isinstance(value, Integral):
        text = str(int(value))
    elif isinstance(value, Real):
        text = "" if np.isnan(value) else format(float(value), floatfmt)
    elif value is None or value is pd.NA or value is pd.NaT:
        text = ""
    else:
        text = str(value)
    return text.replace("|", "\\|").replace("\n", " ")


def to_pipe_table(frame, floatfmt=".3f", index=True):
    """
    Render a DataFrame (or Series) as a Markdown pipe table.

    Numeric columns are right-aligned, other columns left-aligned. Missing
    values render as empty cells.

    Examples
    --------
    >>> import pandas as pd
    >>> from statnotes.document import to_pipe_table
    >>> print(to_pipe_table(pd.DataFrame({"a": [1, 2], "b": [0.5, 1.25]})))
    |     |   a |     b |
    |:----|----:|------:|
    | 0   |   1 | 0.500 |
    | 1   |   2 | 1.250 |
    """
    if isinstance(frame, pd.Series):
        frame = frame.to_frame()
    frame = pd.DataFrame(frame)
    if index:
        index_name = (
            " / ".join(str(n) for n in frame.index.names if n is not None)
            if any(n is not None for n in frame.index.names) else "")
        labels = [
            " / ".join(str(v) for v in i) if isinstance(i, tuple) else str(i)
            for i in frame.index
        ]
        header = [index_name] + [str(c) for c in frame.columns]
        aligns = ["left"]
        rows = [
            [label] + [_format_cell(v, floatfmt) for v in row]
            for label, row in zip(labels, frame.itertuples(index=False))
        ]
    else:
        header = [str(c) for c in frame.columns]
        aligns = []
        rows = [
            [_format_cell(v, floatfmt) for v in row]
            for row in frame.itertuples(index=False)
        ]
    aligns += [
        "right" if pd.api.types.is_numeric_dtype(frame[c])
        and not pd.api.types.is_bool_dtype(frame[c]) else "left"
        for c in frame.columns
    ]

    widths = [
        max([len(header[j])] + [len(r[j]) for r in rows] + [3])
        for j in range(len(header))
    ]

    def line(cells):
        padded = [
            c.rjust(w) if a == "right" else c.ljust(w)
            for c, w, a in zip(cells, widths, aligns)
        ]
        return "| " + " | ".join(padded) + " |"

    rule = "|" + "|".join(
        ("-" * (w + 1) + ":") if a == "right" else (":" + "-" * (w + 1))
        for w, a in zip(widths, aligns)
    ) + "|"
    return "\n".join([line(header), rule] + [line(r) for r in rows])


def render_output(obj, float_format="{:.4f}".format):
    """
    Text printed by a library object, as it would appear in a console.

    statsmodels results print their ``summary()``; frames and series are
    rendered in full with `float_format`; anything else through ``str``.
    """
    if hasattr(obj, "summary") and callable(obj.summary) and not isinstance(
            obj, (pd.DataFrame, pd.Series)):
        return str(obj.summary())
    if isinstance(obj, pd.DataFrame):
        return obj.to_string(float_format=float_format)
    if isinstance(obj, pd.Series):
        return obj.to_string(float_format=float_format)
    return str(obj)


def _as_figure(fig):
    if isinstance(fig, Axes):
        return fig.figure
    if hasattr(fig, "savefig"):
        return fig
    if hasattr(fig, "figure") and hasattr(fig.figure, "savefig"):
        return fig.figure
    raise PlotError(
        f"Expect a matplotlib Figure, Axes or seaborn grid. Got"
        f" {type(fig).__name__!r}.")


class Document:
    """
    A narrative tutorial document.

    Parameters
    ----------
    title : str
        Title rendered as the top-level heading.
    slug : str
        File stem of the rendered Markdown (``<slug>.md``) and prefix of the
        figure files.
    summary : str, default=''
        Introductory paragraph.
    requirements : sequence of str, default=()
        Packages the document relies on, listed under the title.

    Attributes
    ----------
    blocks : list of Block
    results : dict
        Named key numbers recorded with :meth:`record`.

    Examples
    --------
    >>> from statnotes.document import Document
    >>> doc = Document("Hello", "hello", summary="A first document.")
    >>> _ = doc.heading("Data").text("Some prose.").record("n", 32)
    >>> doc.results["n"]
    32
    >>> print(doc.to_markdown().splitlines()[0])
    # Hello
    """

    def __init__(
        self,
        title: str,
        slug: str,
        summary: str = "",
        requirements: Sequence[str] = (),
    ):
        self.title = title
        self.slug = slug
        self.summary = textwrap.dedent(summary).strip()
        self.requirements = list(requirements)
        self.blocks: List[Block] = []
        self.results: Dict[str, Any] = {}
        self._figures: Dict[str, Any] = {}

    def heading(self, text: str, level: int = 2):
        """Append a section heading (level 2 by default)."""
        if not 1 <= level <= 6:
            raise ValueError(f"Heading level must be in [1, 6]. Got {level}.")
        self.blocks.append(Block("heading", text, level=level))
        return self

    def text(self, text: str):
        """Append a paragraph of prose. Indentation is removed."""
        self.blocks.append(Block("text", textwrap.dedent(text).strip()))
        return self

    def code(self, source: str, language: str = "python"):
        """Append an illustrative code snippet."""
        self.blocks.append(
            Block("code", textwrap.dedent(source).strip("\n"), language=language))
        return self

    def output(self, obj):
        """Append what `obj` prints (statsmodels summary, frame, text...)."""
        self.blocks.append(Block("output", render_output(obj)))
        return self

    def table(self, frame, caption: Optional[str] = None,
              floatfmt: str = ".3f", index: bool = True):
        """Append a frame rendered as a Markdown table."""
        self.blocks.append(Block(
            "table", to_pipe_table(frame, floatfmt=floatfmt, index=index),
            caption=caption))
        return self

    def figure(self, fig, name: str, caption: str = ""):
        """
        Append a figure.

        Parameters
        ----------
        fig : matplotlib Figure, Axes or seaborn grid
        name : str
            Unique name within the document; the file is
            ``figures/<slug>-<name>.<format>``.
        caption : str, default=''
        """
        figure = _as_figure(fig)
        if name in self._figures:
            raise ValueError(f"Figure {name!r} already exists in {self.slug!r}.")
        filename = f"{self.slug}-{name}.{get_config().figure_format}"
        self._figures[name] = (filename, figure)
        self.blocks.append(
            Block("figure", filename, caption=caption or name.replace("_", " ")))
        return self

    def record(self, name: str, value):
        """Keep a named result. Numpy scalars are converted to Python ones."""
        if isinstance(value, np.generic):
            value = value.item()
        self.results[name] = value
        return self

    @property
    def figures(self):
        """Names of the figures in document order."""
        return list(self._figures)

    def _render_block(self, block):
        kind, content = block.kind, block.content
        if kind == "heading":
            return "#" * block.options["level"] + " " + content
        if kind == "text":
            return content
        if kind == "code":
            return f"```{block.options['language']}\n{content}\n```"
        if kind == "output":
            return f"```text\n{content.rstrip()}\n```"
        if kind == "table":
            caption = block.options.get("caption")
            return f"*{caption}*\n\n{content}" if caption else content
        if kind == "figure":
            return f"![{block.options['caption']}]({FIGURE_DIR}/{content})"
        raise ValueError(f"Unknown block kind {kind!r}.")

    def to_markdown(self) -> str:
        """Render the whole document as Markdown text."""
        parts = [f"# {self.title}"]
        if self.summary:
            parts.append(self.summary)
        if self.requirements:
            parts.append(
                "**Requires:** " + ", ".join(f"`{r}`" for r in self.requirements))
        parts.extend(self._render_block(b) for b in self.blocks)
        return "\n\n".join(parts) + "\n"

    def save(self, directory: Optional[str] = None) -> str:
        """
        Write ``<slug>.md`` and its figures below `directory`.

        Parameters
        ----------
        directory : str, optional
            Output directory. Defaults to the configured ``output_dir``.

        Returns
        -------
        str
            Path of the Markdown file.
        """
        directory = os.fspath(directory or get_config().output_dir)
        os.makedirs(directory, exist_ok=True)
        for filename, figure in self._figures.values():
            savefigure(figure, os.path.join(directory, FIGURE_DIR, filename))
        path = os.path.join(directory, f"{self.slug}.md")
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_markdown())
        logger.info("Document %r written to %s (%d figures)", self.slug, path,
                    len(self._figures))
        self.close()
        return path

    def close(self):
        """Close the matplotlib figures held by the document."""
        for _, figure in self._figures.values():
            plt.close(figure)

    def __repr__(self):
        return (
            f"<Document {self.slug!r}: {len(self.blocks)} blocks,"
            f" {len(self._figures)} figures, {len(self.results)} results>"
        )
