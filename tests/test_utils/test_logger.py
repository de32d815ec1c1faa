"""
Unit tests for logging helpers.
"""
import logging

import pytest

from volume_engine.utils.logger import get_logger, log_performance, setup_logging


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield root_logger
    root_logger.handlers = handlers
    root_logger.setLevel(level)


def test_setup_logging_replaces_handlers(restore_root_logger):
    restore_root_logger.addHandler(logging.NullHandler())

    setup_logging(logging.DEBUG)

    assert len(restore_root_logger.handlers) == 1
    handler = restore_root_logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.level == logging.DEBUG
    assert restore_root_logger.level == logging.DEBUG


def test_get_logger_uses_module_name():
    assert get_logger("volume_engine.dsp.gain").name == "volume_engine.dsp.gain"


def test_log_performance_logs_timing(caplog):
    @log_performance
    def double(x):
        return x * 2

    with caplog.at_level(logging.DEBUG):
        assert double(21) == 42
    assert "double completed in" in caplog.text


def test_log_performance_reraises(caplog):
    @log_performance
    def broken():
        raise ValueError("bad gain")

    with pytest.raises(ValueError):
        broken()
    assert "broken failed after" in caplog.text
    assert "bad gain" in caplog.text
