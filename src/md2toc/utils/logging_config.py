"""Logging setup shared by the CLI and library modules."""

from __future__ import annotations

import logging
import sys

from md2toc.config import MD2TOC_LOG_LEVEL

_ROOT_LOGGER_NAME = "md2toc"
_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name``, namespaced under the package logger."""
    if name != _ROOT_LOGGER_NAME and not name.startswith(_ROOT_LOGGER_NAME + "."):
        name = f"{_ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling this more than once replaces the handler instead of stacking
    duplicates, so the CLI can be invoked repeatedly in one process (tests).

    Args:
        level: Logging level name or number. Defaults to ``MD2TOC_LOG_LEVEL``.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = MD2TOC_LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_md2toc_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    handler._md2toc_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
