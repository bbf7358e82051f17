# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>

"""
Track the execution of tutorial documents and handle all statnotes logging.

This module provides the logging utility class `statnoteslog` used to
configure and manage logging across the `statnotes` package. Configuration
is read from a YAML file (``_snlog.yml``) and handed to
:func:`logging.config.dictConfig`; INI files are accepted as well.
"""

import os
import yaml
import logging
import logging.config
from typing import Optional

__all__ = ["statnoteslog"]


class statnoteslog:
    """
    A class to configure logging for the `statnotes` package, facilitating
    the tracking of tutorial runs and library calls within the system.
    """

    @staticmethod
    def load_configuration(
        config_path: Optional[str] = None,
        use_default_logger: bool = True,
        verbose: bool = False
    ) -> None:
        """
        Configures logging based on a specified configuration file.

        Parameters
        ----------
        config_path : str, optional
            Path to the configuration file. Supports `.yaml`, `.yml` and
            `.ini` formats. If `None`, uses basic logging configuration or a
            default logger setup, depending on `use_default_logger`.

        use_default_logger : bool, optional
            Whether to use the default logger configuration if no
            `config_path` is provided. Defaults to `True`.

        verbose : bool, optional
            If `True`, prints additional information during configuration.
            Defaults to `False`.

        Raises
        ------
        FileNotFoundError
            If the specified configuration file does not exist.
        """
        if not config_path:
            if use_default_logger:
                statnoteslog.set_default_logger()
            else:
                logging.basicConfig()
            return

        if verbose:
            print(f"Configuring logging with: {config_path}")

        if config_path.endswith((".yaml", ".yml")):
            statnoteslog._configure_from_yaml(config_path, verbose)
        elif config_path.endswith(".ini"):
            logging.config.fileConfig(config_path, disable_existing_loggers=False)
        else:
            logging.warning(
                f"Unsupported logging configuration format: {config_path}"
            )

    @staticmethod
    def _configure_from_yaml(yaml_path: str, verbose: bool = False) -> None:
        """
        Configures logging from a YAML file.

        Raises
        ------
        FileNotFoundError
            If the YAML configuration file does not exist.

        yaml.YAMLError
            If there is an error parsing the YAML file.
        """
        full_path = os.path.abspath(yaml_path)
        if not os.path.exists(full_path):
            logging.error(f"The YAML config file {full_path} does not exist.")
            raise FileNotFoundError(
                f"The YAML config file {full_path} does not exist.")

        if verbose:
            print(f"Loading YAML config from {full_path}")

        try:
            with open(full_path, "rt", encoding="utf8") as f:
                config = yaml.safe_load(f.read())
            logging.config.dictConfig(config)
        except yaml.YAMLError as e:
            logging.error(f"Error parsing YAML config file: {e}")
            raise

    @staticmethod
    def set_default_logger() -> None:
        """
        Sets up a default logger configuration for basic logging needs.

        Messages with level WARNING and above are printed to the console
        with a simple format.
        """
        logging.basicConfig(
            level=logging.WARNING,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    @staticmethod
    def get_statnotes_logger(logger_name: str = '') -> logging.Logger:
        """
        Retrieves a logger with a specified name.

        Parameters
        ----------
        logger_name : str, optional
            The name of the logger. If empty, returns the root logger.

        Returns
        -------
        logging.Logger
            The logger instance with the specified name.
        """
        return logging.getLogger(logger_name)

    @staticmethod
    def set_logger_output(
        log_filename: str = "statnotes.log",
        date_format: str = '%Y-%m-%d %H:%M:%S',
        file_mode: str = "w",
        format_: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level: int = logging.DEBUG
    ) -> logging.Handler:
        """
        Sends the `statnotes` log records to a file.

        Parameters
        ----------
        log_filename : str, optional
            The name of the log file. Defaults to `"statnotes.log"`.

        date_format : str, optional
            The date format used in log messages.

        file_mode : str, optional
            The mode for opening the log file (`'a'` for append, `'w'` for
            overwrite). Defaults to `'w'`.

        format_ : str, optional
            The format of the log messages.

        level : int, optional
            The logging level. Defaults to `logging.DEBUG`.

        Returns
        -------
        logging.Handler
            The file handler attached to the ``statnotes`` logger, so that
            callers can detach it later.
        """
        handler = logging.FileHandler(log_filename, mode=file_mode)
        handler.setLevel(level)
        formatter = logging.Formatter(format_, datefmt=date_format)
        handler.setFormatter(formatter)

        logger = statnoteslog.get_statnotes_logger("statnotes")
        logger.setLevel(level)
        if not any(
            isinstance(h, logging.FileHandler)
            and getattr(h, "baseFilename", None) == handler.baseFilename
            for h in logger.handlers
        ):
            logger.addHandler(handler)

        return handler
