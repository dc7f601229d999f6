"""
Global test configuration and fixtures
"""

import logging

import pytest
import structlog

from rankgraph.common.observability import setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Reconfigure logging per test (CLI tests swap stderr)."""
    setup_logging(level="WARNING", format="console")
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


# Pytest hooks
def pytest_configure(config):
    """Register markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (medium speed)")
    config.addinivalue_line("markers", "slow: Slow tests (>5s)")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test path."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
