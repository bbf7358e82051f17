# -*- coding: utf-8 -*-
"""
test_cluster.py

@author: LKouadio <etanoyau@gmail.com>
"""
import numpy as np
import pandas as pd
import pytest
from sklearn.metrics import adjusted_rand_score

from statnotes.analysis import elbow_scores, kmeans
from statnotes.exceptions import HeaderError


@pytest.fixture(scope="module")
def blobs():
    rng = np.random.default_rng(0)
    centers = np.array([[-6.0, 0.0], [0.0, 6.0], [6.0, 0.0]])
    group = np.repeat([0, 1, 2], 100)
    points = centers[group] + rng.normal(0, 0.8, size=(300, 2))
    return pd.DataFrame({"x": points[:, 0], "y": points[:, 1], "group": group})


def test_kmeans_recovers_groups(blobs):
    res = kmeans(blobs, 3, columns=["x", "y"], seed=0)
    assert res.labels.name == "cluster"
    assert res.labels.index.equals(blobs.index)
    assert int(res.sizes.sum()) == 300
    assert res.centers.shape == (3, 2)
    assert list(res.centers.columns) == ["x", "y"]
    assert adjusted_rand_score(blobs["group"], res.labels) > 0.9
    assert res.silhouette > 0.5


def test_kmeans_centers_in_original_units(blobs):
    res = kmeans(blobs, 3, columns=["x", "y"], seed=0)
    means = blobs[["x", "y"]].groupby(res.labels.to_numpy()).mean()
    assert np.allclose(means.sort_index().to_numpy(),
                       res.centers.sort_index().to_numpy(), atol=1e-3)


def test_kmeans_single_cluster_has_no_silhouette(blobs):
    res = kmeans(blobs, 1, columns=["x", "y"], seed=0)
    assert np.isnan(res.silhouette)
    assert res.sizes.tolist() == [300]


def test_kmeans_errors(blobs):
    with pytest.raises(ValueError):
        kmeans(blobs.head(3), 5, columns=["x", "y"])
    with pytest.raises(HeaderError):
        kmeans(blobs, 2, columns=["z"])
    with pytest.raises(ValueError, match="No numeric"):
        kmeans(pd.DataFrame({"s": list("abc")}), 2)


def test_elbow_scores(blobs):
    scores = elbow_scores(blobs, range(1, 6), columns=["x", "y"], seed=0)
    assert list(scores.index) == [1, 2, 3, 4, 5]
    assert scores.index.name == "k"
    assert scores["inertia"].is_monotonic_decreasing
    assert np.isnan(scores.loc[1, "silhouette"])
    assert int(scores["silhouette"].idxmax()) == 3


if __name__ == '__main__':
    pytest.main([__file__])
