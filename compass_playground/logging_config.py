"""Package logger setup for hosts and the command line tool.

Log records go to stderr by default so stdout stays free for command output.
"""
from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union

PACKAGE_LOGGER = "compass_playground"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(level: Union[int, str]) -> int:
    """Return the numeric level for ``level``; names are case-insensitive."""
    if isinstance(level, int):
        return level
    name = str(level).strip().upper()
    if name not in LEVEL_NAMES:
        raise ValueError(f"Unknown log level '{level}' (expected one of {', '.join(LEVEL_NAMES)})")
    return getattr(logging, name)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Attach fresh handlers to the ``compass_playground`` logger and return it.

    Handlers from an earlier call are closed and replaced. ``stream`` defaults
    to ``sys.stderr``; ``log_file`` adds a UTF-8 file handler.
    """
    numeric = resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: list = [logging.StreamHandler(stream if stream is not None else sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(numeric)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging at %s", logging.getLevelName(numeric))
    return logger


__all__ = ["LEVEL_NAMES", "PACKAGE_LOGGER", "resolve_level", "setup_logging"]
