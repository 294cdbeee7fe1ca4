"""Pytest configuration and shared fixtures."""
import logging

import pytest

from eventbus.events import EventBus
from eventbus.logging_config import configure_logging


def pytest_configure(config):
    """Configure pytest markers and quiet structured logging."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    configure_logging(level="WARNING", colors=False)


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def calls():
    """Shared call log for handlers under test."""
    return []


@pytest.fixture(autouse=True)
def _drop_test_log_handlers():
    # configure_logging binds handlers to the stream captured by the running test
    root = logging.getLogger()
    before = list(root.handlers)
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
