"""
Tests for prefixed logging configuration
"""

import logging
import re

from pyquake3.utils.logging_config import (
    ModuleLogger, ModulePrefixFormatter, configure_logging, reset_logging
)


class TestModuleLogger:
    """Test logger prefixes and handler setup"""

    def test_prefix_for_known_modules(self):
        assert ModuleLogger.prefix_for("pyquake3.connection.builder") == "[BUILDER]"
        assert ModuleLogger.prefix_for("pyquake3.protocol.status_decoder") == "[DECODER]"
        assert ModuleLogger.prefix_for("pyquake3.cli") == "[CLI]"

    def test_prefix_for_unknown_module(self):
        assert ModuleLogger.prefix_for("somewhere.else") == "[PYQUAKE3]"

    def test_formatter_adds_prefix(self):
        formatter = ModulePrefixFormatter("[CHANNEL]")
        record = logging.LogRecord("pyquake3.connection.query_channel", logging.INFO,
                                   __file__, 1, "Opened", None, None)
        assert "[CHANNEL] INFO - Opened" in formatter.format(record)

    def test_formatter_layout(self):
        """Records render as clock time, prefix, level and message"""
        formatter = ModulePrefixFormatter("[DECODER]")
        record = logging.LogRecord("pyquake3.protocol.status_decoder", logging.DEBUG,
                                   __file__, 1, "Skipping %r", ("x",), None)
        assert re.fullmatch(r"\d\d:\d\d:\d\d - \[DECODER\] DEBUG - Skipping 'x'",
                            formatter.format(record))

    def test_configure_logging(self):
        loggers = configure_logging(logging.DEBUG)

        assert len(loggers) == len(ModuleLogger.MODULE_PREFIXES)
        for logger in loggers:
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 1
            assert not logger.propagate

    def test_configure_twice_keeps_one_handler(self):
        configure_logging()
        loggers = configure_logging(logging.WARNING)
        assert all(len(logger.handlers) == 1 for logger in loggers)
        assert all(logger.level == logging.WARNING for logger in loggers)

    def test_reset_logging(self):
        configure_logging()
        reset_logging()

        logger = logging.getLogger("pyquake3.cli")
        assert logger.handlers == []
        assert logger.propagate
