"""Logging setup for the ``pkgfront`` logger hierarchy.

Diagnostics meant for the user go through the console helpers in
:mod:`pkgfront.cli.console`; logging carries developer detail only and is
silent at the default ``WARNING`` level except for viewer failures.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT: str = "%(name)s: %(levelname)s: %(message)s"
ROOT_LOGGER_NAME: str = "pkgfront"


class _StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler that always writes to the *current* ``sys.stderr``."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stderr
        super().emit(record)


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the ``pkgfront`` logger.

    Calling this more than once only updates the level.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
