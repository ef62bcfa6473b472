"""Logger configuration and convenience helpers."""

from __future__ import annotations

import logging
import sys

_DEFAULT_LOGGER_NAME = "pgnfacts"
_DEFAULT_LOG_LEVEL = logging.INFO
_DEFAULT_FORMATTER = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
_DEFAULT_HANDLER = logging.StreamHandler(sys.stdout)
_DEFAULT_HANDLER.setFormatter(_DEFAULT_FORMATTER)


def _configure_logger(logger: logging.Logger, level: int) -> None:
    """
    Configures a logger with the specified logging level and default handler.

    Child loggers of the package logger are left without handlers so that
    records propagate to the package logger, which owns the stdout handler.

    Parameters
    ----------
    logger : logging.Logger
        The logger instance to configure.
    level : int
        The logging level to set if the logger's level is not already set.

    Examples
    --------
    >>> import logging
    >>> from pgnfacts.utils.logger import _configure_logger
    >>> logger = logging.getLogger("pgnfacts")
    >>> _configure_logger(logger, logging.INFO)
    >>> logger.info("Importing games")
    """
    if logger.name.startswith(f"{_DEFAULT_LOGGER_NAME}."):
        _configure_logger(logging.getLogger(_DEFAULT_LOGGER_NAME), level)
        return
    if logger.level == logging.NOTSET:
        logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(_DEFAULT_HANDLER)
    logger.propagate = False


def get_logger(name: str | None = None, level: int = _DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Return a configured logger for the given name."""
    logger = logging.getLogger(name or _DEFAULT_LOGGER_NAME)
    _configure_logger(logger, level)
    return logger


def set_level(level: int, logger_names: list[str] | None = None) -> None:
    """Set the log level for one or more logger names."""
    names = logger_names or [_DEFAULT_LOGGER_NAME]
    for name in names:
        logging.getLogger(name).setLevel(level)
