"""This module sets up log output of the userstore package for the CLI."""

from __future__ import annotations

import logging

from .constants import APP_NAME


__all__ = ["LOG_FMT", "setup_logging", "teardown_logging"]

LOG_FMT = logging.Formatter(
    fmt="%(asctime)s %(name)s %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def setup_logging(level: int = logging.DEBUG) -> logging.Handler:
    """
    Sends log records of all userstore modules to stderr.

    :param level: Minimum level of records to print.
    :returns: The attached handler. Pass it to :func:`teardown_logging` when done.
    """
    package_logger = logging.getLogger(APP_NAME)
    package_logger.setLevel(min(package_logger.getEffectiveLevel(), level))

    handler = logging.StreamHandler()
    handler.setFormatter(LOG_FMT)
    handler.setLevel(level)
    package_logger.addHandler(handler)

    return handler


def teardown_logging(handler: logging.Handler) -> None:
    """Detaches and closes a handler returned by :func:`setup_logging`."""
    logging.getLogger(APP_NAME).removeHandler(handler)
    handler.close()
