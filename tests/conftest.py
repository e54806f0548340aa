"""Global test configuration and fixtures."""

from typing import Iterator, List

import pytest
from loguru import logger

from fifo_semaphore.config import configure_settings


@pytest.fixture(autouse=True)
def reset_settings() -> Iterator[None]:
    """Restore default semaphore settings around every test."""
    configure_settings()
    yield
    configure_settings()


@pytest.fixture
def log_messages() -> Iterator[List]:
    """Capture loguru messages emitted during a test."""
    messages: List = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
