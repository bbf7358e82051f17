# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""k-means clustering and the choice of the number of clusters."""

import pandas as pd
from sklearn.metrics import adjusted_rand_score

from ..analysis import elbow_scores, kmeans
from ..datasets import simulate_blobs
from ..narrative import describe_clusters, format_number
from ..plot import plot_clusters, plot_elbow
from ._registry import register

N_CENTERS = 4


@register(
    "kmeans",
    "k-means clustering",
    tags=("clustering", "unsupervised"),
    requires=("scikit-learn", "seaborn"),
)
def build(doc, seed):
    """
    Recover groups in unlabelled two-dimensional points with k-means, using
    the elbow of the inertia and the silhouette width to pick k.
    """
    points = simulate_blobs(n_samples=400, n_centers=N_CENTERS,
                            cluster_std=1.2, seed=seed)
    doc.code(f"points = simulate_blobs(n_samples=400, n_centers={N_CENTERS}, "
             f"cluster_std=1.2, seed={seed})")
    doc.text(
        f"The points come from {N_CENTERS} Gaussian groups; the generating "
        "group is kept aside and only used to judge the clustering at the "
        "end.")

    doc.heading("How many clusters?")
    scores = elbow_scores(points, k_range=range(1, 9), columns=["x", "y"],
                          seed=seed)
    doc.table(scores, floatfmt=".3f")
    doc.figure(plot_elbow(scores), "elbow",
               "Inertia and silhouette width against k")
    best_k = int(scores["silhouette"].idxmax())
    doc.text(
        "The inertia always decreases as clusters are added; the bend of "
        f"the curve and the largest silhouette width ({best_k} clusters) "
        "indicate where extra clusters stop paying off.")

    doc.heading("The clustering")
    result = kmeans(points, n_clusters=N_CENTERS, columns=["x", "y"],
                    seed=seed)
    doc.code(f'result = kmeans(points, n_clusters={N_CENTERS}, '
             f'columns=["x", "y"], seed={seed})')
    doc.table(result.centers, caption="Cluster centers", floatfmt=".2f")
    doc.text(describe_clusters(result))
    doc.figure(plot_clusters(points, "x", "y", result.labels,
                             centers=result.centers), "clusters",
               "Points colored by cluster with the centers")

    ari = adjusted_rand_score(points["group"], result.labels)
    agreement = pd.crosstab(points["group"], result.labels)
    doc.table(agreement, caption="Generating group against cluster")
    doc.text(
        f"The adjusted Rand index against the true groups is "
        f"{format_number(ari)}; 1 means identical partitions and 0 what "
        "chance alone would give. Cluster numbers are arbitrary, only the "
        "grouping matters.")

    doc.record("best_k", best_k)
    doc.record("inertia", result.inertia)
    doc.record("silhouette", float(result.silhouette))
    doc.record("adjusted_rand", float(ari))
