"""Logging setup for the playmap CLI."""

import logging
import sys

LOGGER_NAME = "playmap"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the package logger.

    Log records go to stderr so they never mix with command output on stdout.
    Calling this more than once only updates the level.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        The configured ``playmap`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
