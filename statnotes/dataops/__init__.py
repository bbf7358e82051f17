"""
Data-cleaning helpers applied before a model is fitted: dropping incomplete
rows, converting string columns to categorical labels, parsing dates and
standardizing numeric columns.
"""
from .cleaning import (
    drop_missing,
    to_categorical,
    parse_dates,
    standardize,
    summarize_missing,
)

__all__ = [
    "drop_missing",
    "to_categorical",
    "parse_dates",
    "standardize",
    "summarize_missing",
]
