"""Logging for the ``prcomment`` package logger.

The commenter logs each API step at DEBUG and the final create or update
at INFO; the GitHub adapter logs every request at DEBUG. setup_logging
applies ``logging.level`` / ``logging.format`` from config (or env
LOGGING_LEVEL, LOGGING_FORMAT) to the ``prcomment`` logger only, leaving
the root logger to the application.
"""

import logging

from prcomment.config import LoggingConfig

PACKAGE_LOGGER = "prcomment"

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class _PRCommentHandler(logging.StreamHandler):
    """Stream handler installed by setup_logging (replaced on each call)."""


def _resolve_level(level: str) -> int:
    """Map level name to logging constant; unknown names give INFO."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


def setup_logging(config: LoggingConfig) -> logging.Logger:
    """Configure the ``prcomment`` logger from config and return it.

    Installs one stderr handler with ``config.format``. Calling again
    replaces that handler instead of adding another one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, _PRCommentHandler):
            logger.removeHandler(handler)
    handler = _PRCommentHandler()
    handler.setFormatter(logging.Formatter(config.format or DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_resolve_level(config.level))
    return logger
