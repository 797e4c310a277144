"""Logging setup for the org2bb command line.

Only the ``org2bb`` package logger is configured. Handlers of the root logger
and of other packages belong to the embedding application and are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "org2bb"

# Marks handlers installed here so a later call replaces only those
_HANDLER_MARKER = "_org2bb_handler"


def _owned_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [handler for handler in logger.handlers if getattr(handler, _HANDLER_MARKER, False)]


def _install(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    setattr(handler, _HANDLER_MARKER, True)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure the ``org2bb`` logger for a command-line run.

    Handlers from a previous call are closed and replaced. Records stop at
    the package logger, so they are not printed twice when the root logger
    has handlers of its own.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g. ``"DEBUG"``). Unknown
        names fall back to INFO.
    log_file : str, optional
        Also append log records to this file. A file that cannot be opened
        is reported and skipped.
    trace_mode : bool, default False
        Prefix records with a timestamp, the level and the module logger name.

    Returns
    -------
    logging.Logger
        The ``org2bb`` package logger

    Examples
    --------
        >>> logger = configure_logging("DEBUG", trace_mode=True)
        >>> logger.name
        'org2bb'

    """
    level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in _owned_handlers(package_logger):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(level)
    package_logger.propagate = False

    if trace_mode:
        formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s", "%Y-%m-%d %H:%M:%S")
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    _install(package_logger, logging.StreamHandler(sys.stderr), level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            _install(package_logger, file_handler, level, formatter)
            package_logger.debug("Logging to file: %s", log_file)

    return package_logger
