# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
The `structures` module includes the containers returned by the loaders,
the model helpers and the analysis functions: `Boxspace` for
attribute-style dictionaries and `Bunch` for printable result bundles.
"""

import numpy as np
import pandas as pd
from .util import format_value

__all__ = ['Boxspace', 'Bunch']


class Bunch:
    """
    A utility class for storing collections of results or data attributes.

    Attributes are accessed with dot notation and printed as an aligned
    ``key : value`` listing where arrays and frames are summarised instead of
    dumped.

    Examples
    --------
    >>> from statnotes.api.structures import Bunch
    >>> results = Bunch()
    >>> results.accuracy = 0.95
    >>> results.loss = 0.05
    >>> print(results)
    accuracy : 0.95
    loss     : 0.05
    """

    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)

    def __repr__(self):
        return "<Bunch object containing results. Use print() to see contents>"

    def __str__(self):
        if not self.__dict__:
            return "<empty Bunch>"

        keys = sorted(self.__dict__.keys())
        max_key_length = max(len(key) for key in keys)

        formatted_attrs = [
            f"{key:{max_key_length}} : {self._format_iterable(self.__dict__[key])}"
            for key in keys]
        return "\n".join(formatted_attrs)

    def _format_iterable(self, attr):
        """
        Summarise an attribute according to its type: numeric sequences and
        arrays report their range and mean, Series and DataFrames report
        their shape and dtype, anything else goes through `format_value`.
        """
        if isinstance(attr, dict):
            return self._is_dict(attr)
        if isinstance(attr, (list, tuple, set)):
            return self._is_sequences(attr)
        if isinstance(attr, np.ndarray):
            return self._is_ndarray(attr)
        if isinstance(attr, pd.Series):
            return self._is_series(attr)
        if isinstance(attr, pd.DataFrame):
            return self._is_dataframe(attr)
        return format_value(attr)

    def _is_dict(self, attr):
        values = list(attr.values())
        if values and all(isinstance(v, (int, float, np.number)) for v in values):
            return (
                f"Dict (minval={round(min(values), 4)}, "
                f"maxval={round(max(values), 4)}, "
                f"mean={round(float(np.mean(values)), 4)}, items={len(values)})"
            )
        return f"Dict (items={len(attr)})"

    def _is_sequences(self, attr):
        numeric = attr and all(isinstance(item, (int, float)) for item in attr)
        if numeric:
            minval, maxval = round(min(attr), 4), round(max(attr), 4)
            mean = round(float(np.mean(list(attr))), 4)
            return (
                f"{type(attr).__name__} (minval={minval}, maxval={maxval},"
                f" mean={mean}, len={len(attr)})"
            )
        return f"{type(attr).__name__} (len={len(attr)})"

    def _is_ndarray(self, attr):
        shape = " x ".join(str(s) for s in attr.shape)
        if attr.size and np.issubdtype(attr.dtype, np.number):
            return (
                f"Array (minval={round(float(np.nanmin(attr)), 4)}, "
                f"maxval={round(float(np.nanmax(attr)), 4)}, "
                f"mean={round(float(np.nanmean(attr)), 4)}, "
                f"shape={shape}, dtype={attr.dtype})"
            )
        return f"Array (shape={shape}, dtype={attr.dtype})"

    def _is_series(self, attr):
        if pd.api.types.is_numeric_dtype(attr) and len(attr):
            return (
                f"Series (minval={round(float(attr.min()), 4)}, "
                f"maxval={round(float(attr.max()), 4)}, "
                f"mean={round(float(attr.mean()), 4)}, len={len(attr)}, "
                f"dtype={attr.dtype})"
            )
        return f"Series (len={len(attr)}, dtype={attr.dtype})"

    def _is_dataframe(self, attr):
        dtypes = set(attr.dtypes.astype(str))
        dtype = dtypes.pop() if len(dtypes) == 1 else "object"
        return (
            f"DataFrame (n_rows={attr.shape[0]}, n_columns={attr.shape[1]},"
            f" dtypes={dtype})"
        )


class Boxspace(dict):
    """
    A container object that extends dictionaries by enabling attribute-like
    access to its items.

    Examples
    --------
    >>> bs = Boxspace(pkg='statnotes', objective='learn by example')
    >>> bs['pkg']
    'statnotes'
    >>> bs.objective
    'learn by example'

    Notes
    -----
    Key names that conflict with the dictionary's method names are only
    reachable through item access.
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError:
            raise AttributeError(
                f"'{self.__class__.__name__}' object has no attribute '{key}'")

    def __setattr__(self, key, value):
        self[key] = value

    def __dir__(self):
        return list(self.keys())

    def __setstate__(self, state):
        pass
