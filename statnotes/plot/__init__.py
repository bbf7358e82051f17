"""
Plot sub-package: exploratory charts (:mod:`~statnotes.plot.charts`), model
diagnostics (:mod:`~statnotes.plot.evaluate`), clustering
(:mod:`~statnotes.plot.cluster`) and dimension reduction plots
(:mod:`~statnotes.plot.dimensionality`). Every function accepts an optional
``ax`` and returns the Axes it drew on.
"""
from .charts import (
    plot_histogram,
    plot_box,
    plot_scatter_fit,
    plot_pairs,
    plot_bar_counts,
    plot_correlation_heatmap,
)
from .evaluate import (
    plot_confusion_matrix,
    plot_feature_importance,
    plot_predicted_vs_actual,
    plot_residuals,
    plot_cv_scores,
)
from .cluster import plot_elbow, plot_clusters
from .dimensionality import (
    plot_scree,
    plot_biplot,
    plot_loadings_heatmap,
    plot_ca_map,
    plot_lda_projection,
)
from .utils import savefigure

__all__ = [
    "plot_histogram",
    "plot_box",
    "plot_scatter_fit",
    "plot_pairs",
    "plot_bar_counts",
    "plot_correlation_heatmap",
    "plot_confusion_matrix",
    "plot_feature_importance",
    "plot_predicted_vs_actual",
    "plot_residuals",
    "plot_cv_scores",
    "plot_elbow",
    "plot_clusters",
    "plot_scree",
    "plot_biplot",
    "plot_loadings_heatmap",
    "plot_ca_map",
    "plot_lda_projection",
    "savefigure",
]
