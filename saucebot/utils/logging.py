"""Loguru sink setup."""

import sys

from loguru import logger

from saucebot.config.schema import LoggingConfig


def setup_logging(config: LoggingConfig) -> None:
    """Log to stderr and, when configured, append to a log file."""
    logger.remove()
    logger.add(sys.stderr, level=config.level)
    if config.file:
        logger.add(config.file, level=config.level, encoding="utf-8")
