"""
Descriptive statistics sub-package (:mod:`~statnotes.stats.descriptive`).
"""
from .descriptive import (
    describe,
    frequency_table,
    group_summary,
    correlation_matrix,
    crosstab,
    chi_square_test,
)

__all__ = [
    "describe",
    "frequency_table",
    "group_summary",
    "correlation_matrix",
    "crosstab",
    "chi_square_test",
]
