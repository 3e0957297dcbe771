"""
Shared pytest configuration.

Registers the ``unit`` marker and restores the package logger after each
test, since ``Logger.setup`` disables propagation and would otherwise hide
records from ``caplog`` in later tests.
"""

import logging

import pytest

from dncnn.core import LOGGER_NAME, Logger


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast, isolated unit test")


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    log = logging.getLogger(LOGGER_NAME)
    for handler in log.handlers[:]:
        handler.close()
        log.removeHandler(handler)
    log.propagate = True
    log.setLevel(logging.NOTSET)
    Logger._configured_names.clear()
    Logger._active_log_file = None
