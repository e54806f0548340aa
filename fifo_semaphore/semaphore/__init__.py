"""Semaphore package."""

from fifo_semaphore.semaphore.base import Semaphore
from fifo_semaphore.semaphore.exceptions import InvalidPermitsError, SemaphoreError
from fifo_semaphore.semaphore.lock import ChainedLock
from fifo_semaphore.semaphore.memory import InMemorySemaphore

__all__ = [
    "Semaphore",
    "InMemorySemaphore",
    "ChainedLock",
    "SemaphoreError",
    "InvalidPermitsError",
]
