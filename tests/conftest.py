"""Shared fixtures for shellarg tests."""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop any sinks a test configured and silence the library again."""
    yield
    logger.remove()
    logger.disable("shellarg")
