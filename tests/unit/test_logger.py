"""Tests for the logger helpers."""

from __future__ import annotations

import logging

import pytest

from eventemitter import EventEmitter
from eventemitter.lib.logger import PaddedLevelFormatter, configure_logger


@pytest.fixture
def package_logger():
    """Restore the package logger after a test configures it."""
    logger = logging.getLogger("eventemitter")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_padded_level_formatter_pads_level():
    """Test that level names are padded to a fixed width."""
    formatter = PaddedLevelFormatter("%(levelname)s|%(message)s")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)

    assert formatter.format(record) == "INFO    |hello"


def test_padded_level_formatter_leaves_record_untouched():
    """Test that padding does not leak into other handlers' output."""
    formatter = PaddedLevelFormatter("%(levelname)s", width=10)
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "hello", None, None)

    assert formatter.format(record) == "WARNING   "
    assert record.levelname == "WARNING"


def test_configure_logger_console_only(package_logger):
    """Test that without a log file only a stream handler is installed."""
    logger = configure_logger(logging.INFO)

    assert logger is package_logger
    assert logger.level == logging.INFO
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]


def test_configure_logger_writes_emitter_activity(tmp_path, package_logger):
    """Test that emitter debug output reaches the log file."""
    log_file = tmp_path / "logs" / "events.log"
    configure_logger(logging.DEBUG, log_file=log_file)

    EventEmitter().on("ready", lambda: None)
    for handler in package_logger.handlers:
        handler.flush()

    contents = log_file.read_text(encoding="utf-8")
    assert "DEBUG" in contents
    assert "eventemitter.lib.events" in contents
    assert "to event 'ready'" in contents


def test_configure_logger_replaces_handlers(package_logger):
    """Test that calling configure_logger twice does not stack handlers."""
    configure_logger(logging.DEBUG)
    configure_logger(logging.DEBUG)

    assert len(package_logger.handlers) == 1
