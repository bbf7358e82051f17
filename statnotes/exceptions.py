# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""List of `statnotes` exceptions for warning users."""


class DatasetError(Exception):
    """
    Exception raised for inconsistencies in the dataset provided.

    This exception is raised when a requested bundled sample does not exist
    or when a frame does not have the shape a tutorial step expects.
    """
    pass


class HeaderError(Exception):
    """
    Exception raised when headers or required columns are missing in the data.
    """
    pass


class ConfigError(Exception):
    """
    Exception raised for errors in configuration setup or execution.
    """
    pass


class FileHandlingError(Exception):
    """
    Exception raised for errors encountered during file manipulation.

    This exception occurs if a file has an extension that no reader
    handles, or if there are other problems encountered when opening,
    reading, or writing files.
    """
    pass


class FormulaError(Exception):
    """
    Exception raised when a model formula cannot be parsed into a response
    and its predictors.
    """
    pass


class PlotError(Exception):
    """
    Exception raised when a plot cannot be generated successfully.
    """
    pass


class EstimatorError(Exception):
    """
    Exception raised when an incorrect estimator name is provided.
    """
    pass


class TutorialNotFoundError(KeyError):
    """
    Exception raised when a tutorial document name is not registered.
    """

    def __str__(self):
        # KeyError quotes its message; keep it readable.
        return str(self.args[0]) if self.args else ''
