# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Provides compatibility utilities for different versions of scikit-learn.

The tutorials validate their public parameters with scikit-learn's own
parameter-validation machinery. Its signature moved between releases, so
the wrappers here adapt to the installed version.
"""
import inspect

from sklearn.exceptions import NotFittedError
from sklearn.utils._param_validation import validate_params as sklearn_validate_params
from sklearn.utils._param_validation import Interval as sklearn_Interval
from sklearn.utils._param_validation import StrOptions
from sklearn.utils._param_validation import InvalidParameterError
from sklearn.utils.validation import check_is_fitted

__all__ = [
    "Interval",
    "StrOptions",
    "InvalidParameterError",
    "NotFittedError",
    "check_is_fitted",
    "validate_params",
]


class Interval:
    """
    Compatibility wrapper for scikit-learn's `Interval` class to handle
    versions that do not include the `inclusive` argument.

    Examples
    --------
    >>> from numbers import Integral
    >>> from statnotes.compat.sklearn import Interval
    >>> interval = Interval(Integral, 1, None, closed="left")
    """

    def __new__(cls, *args, **kwargs):
        signature = inspect.signature(sklearn_Interval.__init__)
        if 'inclusive' not in signature.parameters:
            kwargs.pop('inclusive', None)
        return sklearn_Interval(*args, **kwargs)


def validate_params(params, *args, prefer_skip_nested_validation=True, **kwargs):
    """
    Compatibility wrapper for scikit-learn's `validate_params` decorator.

    Parameters
    ----------
    params : dict
        Mapping of parameter names to their list of constraints, as
        accepted by scikit-learn.
    prefer_skip_nested_validation : bool, default=True
        Forwarded only when the installed scikit-learn accepts it.

    Returns
    -------
    callable
        The decorator produced by scikit-learn.

    Examples
    --------
    >>> from numbers import Integral
    >>> from statnotes.compat.sklearn import validate_params, Interval
    >>> @validate_params({"k": [Interval(Integral, 1, None, closed="left")]})
    ... def f(k):
    ...     return k
    >>> f(3)
    3
    """
    sig = inspect.signature(sklearn_validate_params)
    if 'prefer_skip_nested_validation' in sig.parameters:
        kwargs['prefer_skip_nested_validation'] = prefer_skip_nested_validation
    return sklearn_validate_params(params, *args, **kwargs)
