"""
Analysis sub-package: k-means clustering (:mod:`~statnotes.analysis.cluster`),
principal component and discriminant projections
(:mod:`~statnotes.analysis.decomposition`), factor analysis
(:mod:`~statnotes.analysis.factors`) and correspondence analysis
(:mod:`~statnotes.analysis.correspondence`).
"""
from .cluster import kmeans, elbow_scores
from .decomposition import pca, lda_projection
from .factors import factor_analysis, kaiser_criterion
from .correspondence import correspondence_analysis

__all__ = [
    "kmeans",
    "elbow_scores",
    "pca",
    "lda_projection",
    "factor_analysis",
    "kaiser_criterion",
    "correspondence_analysis",
]
