"""
Test Suite for Logging Management Module.

Tests logger configuration, file output and reconfiguration behavior.
"""

import logging
from unittest.mock import patch

import pytest

from dncnn.core.constants import LOGGER_NAME
from dncnn.core.logger import Logger, LogStyle


# LOGGER: INITIALIZATION
@pytest.mark.unit
def test_logger_init_console_only():
    """Logger has a single console handler when no log_dir is given."""
    logger = Logger(name="dncnn_test_console", log_dir=None)

    assert logger.log_to_file is False
    assert len(logger.get_logger().handlers) == 1


@pytest.mark.unit
def test_logger_init_with_file(tmp_path):
    """Logger adds a rotating file handler when log_dir is provided."""
    log_dir = tmp_path / "logs"

    logger = Logger(name="dncnn_test_file", log_dir=log_dir)

    assert logger.log_to_file is True
    assert log_dir.exists()
    assert len(logger.get_logger().handlers) == 2
    assert Logger.get_log_file().parent == log_dir


@pytest.mark.unit
def test_logger_default_name():
    assert Logger().name == LOGGER_NAME


@pytest.mark.unit
def test_logger_no_duplicate_handlers():
    """Repeated construction without log_dir does not stack handlers."""
    Logger(name="dncnn_test_dup")
    Logger(name="dncnn_test_dup")

    assert len(logging.getLogger("dncnn_test_dup").handlers) == 1


# LOGGER: SETUP
@pytest.mark.unit
def test_setup_level_from_string():
    log = Logger.setup(name="dncnn_test_level", level="WARNING")

    assert log.level == logging.WARNING


@pytest.mark.unit
def test_setup_debug_env_override():
    with patch.dict("os.environ", {"DEBUG": "1"}):
        log = Logger.setup(name="dncnn_test_debug", level="ERROR")

    assert log.level == logging.DEBUG


@pytest.mark.unit
def test_setup_writes_to_file(tmp_path):
    log = Logger.setup(name=LOGGER_NAME, log_dir=tmp_path)
    log.info("network assembled")
    for handler in log.handlers:
        handler.flush()

    assert "network assembled" in Logger.get_log_file().read_text(encoding="utf-8")


# STYLES
@pytest.mark.unit
def test_log_phase_header(caplog):
    log = logging.getLogger("dncnn_test_header")
    with caplog.at_level("INFO", logger="dncnn_test_header"):
        LogStyle.log_phase_header(log, "DNCNN BUILD")

    assert LogStyle.HEAVY in caplog.text
    assert "DNCNN BUILD" in caplog.text
