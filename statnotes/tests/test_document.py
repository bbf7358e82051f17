# -*- coding: utf-8 -*-
"""
test_document.py

@author: LKouadio <etanoyau@gmail.com>
"""
import os

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest

from statnotes.datasets import load_mtcars
from statnotes.document import Document, render_output, to_pipe_table
from statnotes.exceptions import PlotError
from statnotes.models import fit_ols


def test_pipe_table_alignment_and_missing_values():
    frame = pd.DataFrame(
        {"x": [1.5, np.nan], "label": ["a|b", "c"]},
        index=pd.Index(["r1", "r2"], name="id"))
    lines = to_pipe_table(frame, floatfmt=".1f").splitlines()
    assert lines[0] == "| id  |   x | label |"
    assert lines[1] == "|:----|----:|:------|"
    assert lines[2] == "| r1  | 1.5 | a\\|b  |"
    assert lines[3] == "| r2  |     | c     |"


def test_pipe_table_without_index_and_series():
    text = to_pipe_table(pd.DataFrame({"n": [3, 10]}), index=False)
    assert text.splitlines()[0] == "|   n |"
    series = pd.Series([0.25], index=["wt"], name="estimate")
    assert "0.250" in to_pipe_table(series)


def test_markdown_layout():
    doc = Document("Hello", "hello", summary="""
        A first document.
    """, requirements=["pandas"])
    doc.heading("Data").text("Some prose.").code("x = 1")
    doc.output(pd.Series([1.0], index=["a"]))
    doc.table(pd.DataFrame({"a": [1]}), caption="One row")
    text = doc.to_markdown()
    blocks = text.split("\n\n")
    assert blocks[:4] == [
        "# Hello", "A first document.", "**Requires:** `pandas`", "## Data"]
    assert "```python\nx = 1\n```" in text
    assert "```text\na" in text and "1.0000\n```" in text
    assert "*One row*" in text
    assert text.endswith("\n")
    with pytest.raises(ValueError):
        doc.heading("Too deep", level=7)


def test_figures_are_saved(tmp_path):
    doc = Document("Plots", "plots")
    fig, ax = plt.subplots()
    ax.plot([1, 2], [2, 1])
    doc.figure(ax, "line_plot")
    assert doc.figures == ["line_plot"]
    assert "![line plot](figures/plots-line_plot.png)" in doc.to_markdown()
    with pytest.raises(ValueError, match="already exists"):
        doc.figure(fig, "line_plot")
    with pytest.raises(PlotError):
        doc.figure("not a figure", "other")

    path = doc.save(tmp_path)
    assert path == os.path.join(str(tmp_path), "plots.md")
    assert os.path.isfile(path)
    assert os.path.isfile(tmp_path / "figures" / "plots-line_plot.png")
    assert not plt.fignum_exists(fig.number)


def test_record_converts_numpy_scalars():
    doc = Document("Numbers", "numbers")
    doc.record("mean", np.float64(1.5)).record("n", np.int64(32))
    assert type(doc.results["mean"]) is float
    assert type(doc.results["n"]) is int
    assert "2 results" in repr(doc)


def test_render_output():
    fit = fit_ols("mpg ~ wt", load_mtcars())
    assert "OLS Regression Results" in render_output(fit)
    assert render_output(pd.DataFrame({"a": [0.5]})).splitlines()[1].endswith("0.5000")
    assert render_output(3) == "3"


if __name__ == '__main__':
    pytest.main([__file__])
