"""Minimal logging setup.

All project loggers live under the `propsource` namespace. Only the
namespace root gets a stderr handler; child loggers propagate to it, so a
single `get_logger(level=...)` call from the entrypoint controls them all.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "propsource"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _is_console_handler(handler: logging.Handler) -> bool:
    # FileHandler and capture handlers subclass StreamHandler; only ours counts
    return type(handler) is logging.StreamHandler


def _configure(logger: logging.Logger) -> None:
    logger.propagate = False
    if logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
    if not any(_is_console_handler(h) for h in logger.handlers):
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
        logger.addHandler(handler)


def get_logger(name: str = ROOT_LOGGER_NAME, level: Optional[str] = None) -> logging.Logger:
    """Create (or return) a configured logger.

    Args:
        name: Logger name. Names under `propsource.` share the root handler.
        level: Optional log level string (e.g. "INFO"). If omitted, keeps existing.

    Returns:
        Configured logger writing to stderr.
    """

    logger = logging.getLogger(name)

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        _configure(logging.getLogger(ROOT_LOGGER_NAME))
    else:
        _configure(logger)

    if level is not None:
        logger.setLevel(level.upper())

    return logger
