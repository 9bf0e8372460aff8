"""Workspace-level pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True, scope="function")
def isolate_package_logger():
    """Automatically preserve and restore the ``mw_lib`` logger for each test.

    setup_logging() reconfigures the package logger (level, handlers,
    propagation). Restoring it keeps caplog-based assertions in later tests
    independent of execution order.
    """
    package_logger = logging.getLogger("mw_lib")
    saved_level = package_logger.level
    saved_handlers = list(package_logger.handlers)
    saved_propagate = package_logger.propagate
    saved_disabled = package_logger.disabled

    yield

    package_logger.setLevel(saved_level)
    package_logger.handlers[:] = saved_handlers
    package_logger.propagate = saved_propagate
    package_logger.disabled = saved_disabled
