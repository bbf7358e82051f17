# -*- coding: utf-8 -*-
# License: BSD-3-Clause
# Author: LKouadio <etanoyau@gmail.com>

"""Provides the logging setup shared by every module of the statnotes
package.

The module initializes the logging configuration at import time to ensure
consistent logging across all tutorial documents.
"""

import os
import logging
from ._statnoteslog import statnoteslog

__all__ = ['initialize_logging']

# Determine the directory where __init__.py resides
PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

# Define the default logging configuration file path
DEFAULT_LOG_CONFIG = os.path.join(PACKAGE_DIR, '_snlog.yml')


def initialize_logging(
    config_file: str = DEFAULT_LOG_CONFIG,
    use_default_logger: bool = True,
    verbose: bool = False
) -> None:
    """
    Initializes the logging configuration for the statnotes package.

    This function configures logging based on a YAML configuration file
    located within the package directory. If the configuration file is not
    found or an error occurs during loading, it falls back to a default
    logger setup.

    Parameters
    ----------
    config_file : str, optional
        Path to the logging configuration YAML file. Defaults to
        `_snlog.yml` located in the package directory. The
        ``STATNOTES_LOG_CONFIG`` environment variable overrides it.

    use_default_logger : bool, optional
        Whether to use the default logger configuration if the specified
        `config_file` is not found or fails to load. Defaults to `True`.

    verbose : bool, optional
        If `True`, prints additional information during the logging setup.

    Raises
    ------
    FileNotFoundError
        If the specified `config_file` does not exist and
        `use_default_logger` is set to `False`.
    """
    config_file = os.environ.get("STATNOTES_LOG_CONFIG", config_file)
    try:
        statnoteslog.load_configuration(
            config_path=config_file,
            use_default_logger=use_default_logger,
            verbose=verbose
        )
    except FileNotFoundError:
        if not use_default_logger:
            raise
        logging.warning(
            f"Logging configuration file not found: {config_file}. "
            "Falling back to default logger."
        )
        statnoteslog.set_default_logger()
    except Exception as e:
        if not use_default_logger:
            raise
        logging.error(
            f"Failed to load logging configuration from {config_file}: {e}. "
            "Falling back to default logger."
        )
        statnoteslog.set_default_logger()
