# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Framed printing of evaluation metrics."""

from .structures import Bunch
from .util import to_camel_case

__all__ = ["MetricFormatter"]


class MetricFormatter(Bunch):
    """
    A subclass of Bunch designed for formatting and displaying model
    performance metrics in a visually appealing manner.

    Parameters
    ----------
    title : str, optional
        The title to display at the top of the formatted output. If
        provided, it is centered and the metrics are framed with lines.
    descriptor : str, optional
        A label describing the context of the metrics, converted to
        CamelCase and used in the empty representation.
    **kwargs : dict, optional
        Metric names and their values.

    Examples
    --------
    >>> from statnotes.api.formatter import MetricFormatter
    >>> metrics = MetricFormatter(title='Model Performance', accuracy=0.95,
    ...                           kappa=0.92)
    >>> print(metrics)
    =================
    Model Performance
    =================
    accuracy : 0.95
    kappa    : 0.92
    =================

    Notes
    -----
    The framing lines adapt to the longest line so that the output stays
    balanced regardless of the metric names.
    """

    def __init__(self, title="Metric Results", descriptor=None, **kwargs):
        super().__init__(**kwargs)
        self.title = title
        self.descriptor = to_camel_case(descriptor or "Bunch")

    def metrics(self):
        """Return the metric values as a plain dictionary."""
        return {
            k: v for k, v in self.__dict__.items()
            if k not in ('title', 'descriptor')
        }

    def __str__(self):
        values = self.metrics()
        if not values:
            return f"<Empty {self.descriptor}>"

        keys = sorted(values)
        max_key_length = max(len(key) for key in keys)

        formatted_attrs = [
            f"{key:{max_key_length}} : {self._format_iterable(values[key])}"
            for key in keys
        ]
        max_line_length = max(len(line) for line in formatted_attrs)
        content_str = "\n".join(formatted_attrs)

        if self.title:
            title_length = max(max_line_length, len(self.title))
            title_str = f"{self.title:^{title_length}}".rstrip()
            header_footer_line = "=" * title_length
            return (
                f"{header_footer_line}\n{title_str}\n{header_footer_line}\n"
                f"{content_str}\n{header_footer_line}"
            )

        header_footer_line = "=" * max_line_length
        return f"{header_footer_line}\n{content_str}\n{header_footer_line}"

    def __repr__(self):
        return (
            f"<{self.descriptor} with {len(self.metrics())} metrics."
            " Use print() to see detailed contents.>"
        )
