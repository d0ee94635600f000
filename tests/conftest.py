"""Pytest configuration and fixtures."""

import os

import pytest

from exposure_engine.core.config import get_settings


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["EXPOSURE_ENGINE_ENV"] = "test"
    os.environ.pop("ANTHROPIC_API_KEY", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
