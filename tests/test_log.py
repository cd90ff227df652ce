"""Tests for logging setup."""

import logging
import sys

from skytone.log import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_logger_name_and_level(self):
        logger = setup_logging("DEBUG")
        assert logger.name == "skytone"
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 2

    def test_streams_split_by_level(self):
        logger = setup_logging("DEBUG")
        stdout_handler, stderr_handler = logger.handlers
        assert stdout_handler.stream is sys.stdout
        assert stderr_handler.stream is sys.stderr

        info = logging.LogRecord("skytone", logging.INFO, __file__, 1, "hi", None, None)
        warning = logging.LogRecord("skytone", logging.WARNING, __file__, 1, "uh", None, None)
        assert stdout_handler.filter(info)
        assert not stdout_handler.filter(warning)
        assert stderr_handler.level == logging.WARNING

    def test_module_loggers_are_children(self):
        setup_logging()
        child = logging.getLogger("skytone.pipeline")
        assert child.parent is logging.getLogger("skytone")
