# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""String helpers shared by the result containers and formatters."""

import re
import numpy as np

__all__ = ["to_snake_case", "to_camel_case", "format_value"]


def to_snake_case(name):
    """
    Converts a string to snake_case using regex.

    Parameters
    ----------
    name : str
        The string to convert to snake_case.

    Returns
    -------
    str
        The snake_case version of the input string.
    """
    name = str(name)
    name = re.sub(r'(?<!^)(?=[A-Z])', '_', name).lower()  # CamelCase to snake_case
    name = re.sub(r'\W+', '_', name)  # Replace non-word characters with '_'
    name = re.sub(r'_+', '_', name)  # Replace multiple '_' with single '_'
    return name.strip('_')


def to_camel_case(text):
    """
    Converts a string with spaces, dashes or underscores to CamelCase.

    Examples
    --------
    >>> to_camel_case("metric results")
    'MetricResults'
    >>> to_camel_case("Bunch")
    'Bunch'
    """
    parts = re.split(r'[\s_\-]+', str(text).strip())
    return ''.join(p[:1].upper() + p[1:] for p in parts if p)


def format_value(value, precision=4):
    """
    Format a numeric value to a string, rounding floats to four decimal
    places and converting integers directly to strings.

    Examples
    --------
    >>> format_value(123)
    '123'
    >>> format_value(123.45678)
    '123.4568'
    """
    if isinstance(value, (bool, np.bool_)):
        return str(value)
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    if isinstance(value, (float, np.floating)):
        return f"{round(float(value), precision)}"
    return str(value)
