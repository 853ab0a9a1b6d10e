"""
Application-facing logging hook for the knitshaper namespace.

The library itself never configures logging: modules only create loggers
with logging.getLogger(__name__), and the package attaches a NullHandler so
nothing is printed unless the host asks for it. A host application (a form
UI, a script, a notebook) calls setup_logging() once at startup to see the
shapers' DEBUG case tracing.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "knitshaper"

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"


def setup_logging(
    level: int | str = logging.INFO,
    log_file: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Attach handlers to the ``knitshaper`` logger, replacing any set up earlier.

    Args:
        level: Level number or name (``"DEBUG"``, ``"INFO"``, ...).
        log_file: Optional path; records are also written there.
        stream: Console stream, stdout when omitted.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
