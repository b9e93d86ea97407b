"""Logging setup shared by the index generator and the gasket-docs CLI."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_ROOT = "gasket_docs"
_CONSOLE_FORMAT = "[gasket-docs] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``gasket_docs`` or one of its children, e.g. ``gasket_docs.index``."""
    return logging.getLogger(f"{_ROOT}.{name}" if name else _ROOT)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route package logs to stderr and, when ``log_file`` is set, to that file.

    Calling this again replaces the handlers installed by the previous call.
    stdout stays free for the CLI's own report line.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_ROOT)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(sys.stderr), _CONSOLE_FORMAT, level)
    if log_file is not None:
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), _FILE_FORMAT, level)
    return logger


def _attach(logger: logging.Logger, handler: logging.Handler, fmt: str, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)


__all__ = ["configure_logging", "get_logger"]
