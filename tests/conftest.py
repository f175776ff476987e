"""Test configuration for pytest."""

import logging
import os

import pytest

from memberwise import ComparerRegistry


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Keep memberwise loggers quiet unless a test raises the level itself."""
    os.environ.setdefault("MEMBERWISE_LOG_LEVEL", "WARNING")
    logging.getLogger("memberwise").setLevel(logging.WARNING)


@pytest.fixture
def registry():
    """A fresh registry with default settings, isolated from the process default."""
    return ComparerRegistry()
