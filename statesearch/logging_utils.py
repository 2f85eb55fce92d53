# statesearch/logging_utils.py
from __future__ import annotations

import logging
from typing import Optional

from . import config

LOGGER_NAME = "statesearch"


class _UnconfiguredRoot(logging.Filter):
    """Pass records only while the application has no root handlers of its own."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not logging.getLogger().handlers


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return the package logger, or a child of it (statesearch.<name>).

    The first call attaches a console handler to the package logger. It stands
    down once the application configures the root logger, so records are
    printed once, by the application's handlers. The package level is only set
    when STATESEARCH_LOG_LEVEL is given; otherwise it follows the root logger.
    """
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        ))
        handler.addFilter(_UnconfiguredRoot())
        root.addHandler(handler)
        if config.LOG_LEVEL:
            root.setLevel(getattr(logging, config.LOG_LEVEL, logging.WARNING))

    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return root
