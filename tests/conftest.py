"""
Pytest configuration and global fixtures.

This module provides shared fixtures used across all tests.
"""

import logging
from collections.abc import Generator

import pytest
import structlog

from openiban.utils.config import get_settings
from tests.fixtures import GERMAN_IBAN


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Give every test freshly loaded settings."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults after a test configures logging."""
    yield
    structlog.reset_defaults()
    for handler in logging.getLogger().handlers[:]:
        logging.getLogger().removeHandler(handler)


@pytest.fixture
def german_iban() -> str:
    """A valid German IBAN (bank code 37040044, account 0532013000)."""
    return GERMAN_IBAN
