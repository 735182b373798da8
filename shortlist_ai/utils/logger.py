"""Logging configuration for the CV shortlisting engine."""

import logging
import sys
from typing import Optional

from shortlist_ai.config import LOG_LEVEL


class _StderrHandler(logging.StreamHandler):
    """Writes to the current sys.stderr; stdout stays free for command output."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a configured logger instance."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = _StderrHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.setLevel(LOG_LEVEL)
    if level is not None:
        logger.setLevel(level)
    return logger
