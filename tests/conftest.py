"""Pytest configuration and shared fixtures."""

import os
from typing import Iterator

import pytest

from gemurl.config import reset_config
from gemurl.metrics import reset_metrics_collector


@pytest.fixture(autouse=True)
def reset_config_fixture() -> Iterator[None]:
    """Reset config singleton between tests for isolation."""
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def reset_metrics_fixture() -> Iterator[None]:
    """Start every test with an empty metrics collector."""
    reset_metrics_collector()
    yield
    reset_metrics_collector()


@pytest.fixture
def set_env_vars():
    """Fixture to temporarily set environment variables."""

    def _set_env_vars(**kwargs: str) -> None:
        for key, value in kwargs.items():
            os.environ[key] = value

    yield _set_env_vars

    # Cleanup: remove all GEMURL_ env vars
    keys_to_remove = [key for key in os.environ if key.startswith("GEMURL_")]
    for key in keys_to_remove:
        del os.environ[key]


@pytest.fixture
def gemini_base() -> str:
    """A typical page URL to resolve links against."""
    return "gemini://example.org/docs/guide/index.gmi?lang=en"
