"""Test the centralized logging functionality."""

import logging
from io import StringIO

import pytest

from dinicflow.logging import (
    ROOT_LOGGER_NAME,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()
    setup_root_logger()


def test_centralized_logging():
    """Test that centralized logging works properly."""
    set_global_log_level(logging.INFO)
    logger = get_logger("dinicflow.test")

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    try:
        logger.info("Test info message")
        assert "Test info message" in log_capture.getvalue()

        log_capture.seek(0)
        log_capture.truncate(0)
        logger.debug("Test debug message")
        assert "Test debug message" not in log_capture.getvalue()

        enable_debug_logging()
        logger.debug("Test debug message after enable")
        assert "Test debug message after enable" in log_capture.getvalue()

        disable_debug_logging()
        assert logging.getLogger("dinicflow").level == logging.INFO
    finally:
        logger.removeHandler(handler)


def test_logger_naming():
    logger = get_logger("dinicflow.solver.test")
    assert logger.name == "dinicflow.solver.test"


def test_multiple_loggers():
    logger1 = get_logger("dinicflow.module1")
    logger2 = get_logger("dinicflow.module2")
    assert logger1 is not logger2

    set_global_log_level(logging.WARNING)
    assert logging.getLogger("dinicflow").level == logging.WARNING
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING


def test_reset_allows_reconfiguration():
    root = logging.getLogger(ROOT_LOGGER_NAME)
    assert root.handlers == []

    capture = StringIO()
    setup_root_logger(
        level=logging.WARNING,
        format_string="%(levelname)s:%(message)s",
        handler=logging.StreamHandler(capture),
    )
    # A second call keeps the first configuration
    setup_root_logger(level=logging.DEBUG)

    logger = get_logger("dinicflow.reconfigured")
    logger.info("hidden")
    logger.warning("shown")
    assert capture.getvalue() == "WARNING:shown\n"
    assert len(root.handlers) == 1

    reset_logging()
    assert root.handlers == []
    assert root.level == logging.NOTSET
