# -*- coding: utf-8 -*-
"""
test_structures.py

@author: LKouadio <etanoyau@gmail.com>
"""
import pickle

import numpy as np
import pandas as pd
import pytest

from statnotes.api.formatter import MetricFormatter
from statnotes.api.structures import Boxspace, Bunch
from statnotes.api.summary import ResultSummary
from statnotes.api.util import format_value, to_camel_case, to_snake_case


def test_boxspace_attribute_access():
    box = Boxspace(frame=pd.DataFrame({"a": [1]}), target="a")
    assert box.target == "a"
    box.seed = 3
    assert box["seed"] == 3
    assert set(dir(box)) == {"frame", "target", "seed"}
    with pytest.raises(AttributeError, match="no attribute 'missing'"):
        box.missing


def test_bunch_summarises_values():
    bunch = Bunch(
        scores=[0.5, 1.0],
        weights=np.array([[1.0, 3.0]]),
        frame=pd.DataFrame({"x": [1, 2, 3]}),
        name="fit",
    )
    lines = str(bunch).splitlines()
    assert lines[0].startswith("frame")
    assert "DataFrame (n_rows=3, n_columns=1, dtypes=int64)" in lines[0]
    assert "list (minval=0.5, maxval=1.0, mean=0.75, len=2)" in lines[2]
    assert "shape=1 x 2" in lines[3]
    assert str(Bunch()) == "<empty Bunch>"


def test_metric_formatter():
    metrics = MetricFormatter(title="Test", descriptor="test metrics",
                              rmse=1.23456, r2=0.9)
    assert metrics.metrics() == {"rmse": 1.23456, "r2": 0.9}
    text = str(metrics)
    assert text.splitlines()[1].strip() == "Test"
    assert text.splitlines()[0] == "=" * len("rmse : 1.2346")
    assert "rmse : 1.2346" in text
    assert repr(metrics) == (
        "<TestMetrics with 2 metrics. Use print() to see detailed contents.>")
    assert str(MetricFormatter(descriptor="empty")) == "<Empty Empty>"

    untitled = MetricFormatter(title=None, accuracy=0.5)
    assert str(untitled).splitlines()[1] == "accuracy : 0.5"


def test_result_summary():
    summary = ResultSummary("chi square").add_results(
        {"Statistic": 4.2, "P Value": 0.04, "long": "x" * 150})
    assert summary.statistic == 4.2
    assert summary.p_value == 0.04
    assert str(summary).startswith("ChiSquare(")
    assert "x" * 100 + "..." in str(summary)
    assert repr(ResultSummary()) == "<Empty Result>"
    with pytest.raises(TypeError):
        ResultSummary().add_results([1, 2])


def test_string_helpers():
    assert to_snake_case("CamelCase Name") == "camel_case_name"
    assert to_camel_case("k-means result") == "KMeansResult"
    assert format_value(np.float64(2.0 / 3)) == "0.6667"
    assert format_value(np.int32(4)) == "4"
    assert format_value(True) == "True"


def test_boxspace_pickles_as_dict():
    box = Boxspace(a=1)
    restored = pickle.loads(pickle.dumps(box))
    assert restored["a"] == 1


if __name__ == '__main__':
    pytest.main([__file__])
