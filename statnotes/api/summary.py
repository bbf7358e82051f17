# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Printable summary of a dictionary of results."""

import copy

from .util import to_snake_case, to_camel_case

__all__ = ["ResultSummary"]


class ResultSummary:
    """
    Initializes a ResultSummary object which can store, format, and display
    results in a structured format.

    Parameters
    ----------
    name : str, optional
        The name of the result set, which will be displayed as the title
        of the output. Defaults to "Result".
    pad_keys : str, optional
        If set to "auto", keys in the result dictionary will be left-padded
        to align with the longest key.
    max_char : int, optional
        The maximum number of characters that a value can have before being
        truncated. Defaults to ``100``.

    Examples
    --------
    >>> from statnotes.api.summary import ResultSummary
    >>> summary = ResultSummary(name="chi square test", pad_keys="auto")
    >>> summary = summary.add_results({"statistic": 138.29, "dof": 9})
    >>> print(summary)
    ChiSquareTest(
      {
           statistic : 138.29
           dof       : 9
      }
    )
    """

    def __init__(self, name=None, pad_keys=None, max_char=None):
        self.name = name or "Result"
        self.pad_keys = pad_keys
        self.max_char = max_char or 100
        self.results = {}

    def add_results(self, results):
        """
        Adds results to the summary and dynamically creates attributes for
        each key in the results dictionary, converting keys to snake_case.

        Raises
        ------
        TypeError
            If the results parameter is not a dictionary.
        """
        if not isinstance(results, dict):
            raise TypeError("results must be a dictionary")

        self.results = copy.deepcopy(results)
        for name in list(self.results.keys()):
            setattr(self, to_snake_case(name), self.results[name])

        return self

    def __str__(self):
        result_title = to_camel_case(self.name) + '(\n  {'
        key_padding = (
            max(len(key) for key in self.results) if (
                self.pad_keys == "auto" and self.results) else 0
        )
        formatted_results = []
        for key, value in self.results.items():
            value_str = str(value)
            if len(value_str) > self.max_char:
                value_str = value_str[:self.max_char] + "..."
            formatted_results.append(
                f"       {key.ljust(key_padding)} : {value_str}")

        return result_title + "\n" + "\n".join(formatted_results) + "\n  }\n)"

    def __repr__(self):
        name = to_camel_case(self.name)
        return (
            f"<{name} with {len(self.results)} entries."
            " Use print() to see detailed contents.>"
        ) if self.results else f"<Empty {name}>"
