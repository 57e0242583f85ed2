"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import logging

import pytest

from kvs.dispatcher import Dispatcher
from kvs.engine.store import KvStore
from kvs.protocol.parser import CommandParser


# ============================================================================
# KvStore Fixtures
# ============================================================================

@pytest.fixture
def store() -> KvStore:
    """Create a fresh, empty KvStore instance."""
    return KvStore()


@pytest.fixture
def populated_store() -> KvStore:
    """Create a KvStore holding a few keys."""
    store = KvStore()
    store.set("foo", "bar")
    store.set("user:1", "alice")
    store.set("empty", "")
    return store


# ============================================================================
# Command Fixtures
# ============================================================================

@pytest.fixture
def parser() -> CommandParser:
    """Create a CommandParser instance."""
    return CommandParser()


@pytest.fixture
def dispatcher(store: KvStore) -> Dispatcher:
    """Create a Dispatcher over the shared empty store fixture."""
    return Dispatcher(store)


# ============================================================================
# Logging Fixtures
# ============================================================================

@pytest.fixture
def restore_logging():
    """Drop the stderr handlers main() installs and restore the root level."""
    root = logging.getLogger()
    level = root.level

    yield root

    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
