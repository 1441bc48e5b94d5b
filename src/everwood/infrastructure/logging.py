"""Logging configuration for Everwood."""

import logging
import sys

from everwood.application.config.schema import LoggingConfig

PACKAGE_LOGGER = "everwood"


def setup_logging(config: LoggingConfig) -> None:
    """Configure the package logger from configuration.

    Replaces any handlers from a previous call and stops propagation to the
    root logger.
    """
    handler = logging.StreamHandler(sys.stderr)

    if config.format == "json":
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"module": "%(name)s", "message": "%(message)s"}'
        )
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(config.level)
    for old_handler in logger.handlers[:]:
        old_handler.close()
        logger.removeHandler(old_handler)
    logger.addHandler(handler)
    logger.propagate = False
