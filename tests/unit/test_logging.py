"""Unit tests for package logging setup."""

import logging

from everwood.application.config import LoggingConfig
from everwood.infrastructure.logging import PACKAGE_LOGGER, setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_level(self) -> None:
        setup_logging(LoggingConfig(level="DEBUG"))
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG

    def test_replaces_handlers(self) -> None:
        setup_logging(LoggingConfig())
        setup_logging(LoggingConfig(format="json"))
        logger = logging.getLogger(PACKAGE_LOGGER)
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_json_format(self) -> None:
        setup_logging(LoggingConfig(format="json"))
        handler = logging.getLogger(PACKAGE_LOGGER).handlers[0]
        record = logging.LogRecord("everwood.test", logging.INFO, "", 0, "hello", None, None)
        assert '"message": "hello"' in handler.format(record)
