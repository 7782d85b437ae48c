"""
Tests for coderswap_mcp/logging_utils.py - Standardized logging configuration.

Tiny module, but free coverage.
"""

import pytest
import logging
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from coderswap_mcp.logging_utils import ROOT_LOGGER_NAME, get_logger, configure_logging


@pytest.fixture
def package_logger():
    """Restore the package logger after a test configures it."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


class TestGetLogger:

    def test_returns_logger(self):
        logger = get_logger("test_module")
        assert isinstance(logger, logging.Logger)

    def test_logger_name(self):
        logger = get_logger("my.module.name")
        assert logger.name == "my.module.name"

    def test_same_name_same_logger(self):
        a = get_logger("same_name")
        b = get_logger("same_name")
        assert a is b


class TestConfigureLogging:

    def test_idempotent(self, package_logger):
        """Calling configure_logging multiple times adds one handler."""
        configure_logging()
        configure_logging()
        configure_logging()
        marked = [h for h in package_logger.handlers if getattr(h, "_coderswap_handler", False)]
        assert len(marked) == 1

    def test_writes_to_stderr(self, package_logger):
        root = configure_logging()
        handler = next(h for h in root.handlers if getattr(h, "_coderswap_handler", False))
        assert handler.stream is sys.stderr
        assert root.propagate is False

    def test_verbose_toggles_level(self, package_logger):
        assert configure_logging(verbose=True).level == logging.DEBUG
        assert configure_logging(verbose=False).level == logging.INFO
