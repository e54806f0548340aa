"""FIFO counting semaphore for asyncio."""

from fifo_semaphore.observability import configure_logging
from fifo_semaphore.semaphore import (
    ChainedLock,
    InMemorySemaphore,
    InvalidPermitsError,
    Semaphore,
    SemaphoreError,
)

__version__ = "0.1.0"

__all__ = [
    "Semaphore",
    "InMemorySemaphore",
    "ChainedLock",
    "SemaphoreError",
    "InvalidPermitsError",
    "configure_logging",
]
