"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain namespaced loggers.
    - Switch between quiet and verbose (debug) output.

Notes/Edge cases:
    - Configuration is idempotent; repeated calls replace the level only.
    - The handler resolves ``sys.stderr`` on every record, so swapped or
      closed streams from earlier runs are never written to.
    - Messages go to ``stderr`` so that ``stdout`` stays reserved for results.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

ROOT_LOGGER = "pdfpipe"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_HANDLER_ATTR = "_pdfpipe_handler"


class StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is at emit time."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self) -> TextIO:  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value: object) -> None:
        pass


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below the ``pdfpipe`` namespace."""

    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    ``verbose`` selects ``DEBUG``; otherwise only warnings and errors are shown.
    """

    logger = logging.getLogger(ROOT_LOGGER)
    handler = next((h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)), None)
    if handler is None:
        handler = StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger


__all__ = ["ROOT_LOGGER", "StderrHandler", "get_logger", "configure_logging"]
