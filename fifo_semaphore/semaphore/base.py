"""Base interface for semaphore implementations."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type


class Semaphore(ABC):
    """Abstract base class for counting semaphore implementations.

    Subclasses provide the permit bookkeeping; the async context manager
    protocol is defined here in terms of :meth:`acquire` and :meth:`release`.

    Example:
        ```python
        async with semaphore:
            # At most ``semaphore.max_permits`` tasks run this block at once
            await use_resource()
        ```
    """

    @abstractmethod
    async def acquire(self) -> None:
        """Acquire one permit, waiting in arrival order until one is available."""

    @abstractmethod
    async def release(self) -> None:
        """Return one permit, handing it to the longest waiting acquire if any."""

    @property
    @abstractmethod
    def permits(self) -> int:
        """Get the number of currently available permits.

        Returns:
            int: Number of available permits.
        """

    @property
    @abstractmethod
    def max_permits(self) -> int:
        """Get the fixed capacity of the semaphore.

        Returns:
            int: Maximum number of permits.
        """

    def locked(self) -> bool:
        """Return True if an acquire would have to wait."""
        return self.permits == 0

    async def __aenter__(self) -> "Semaphore":
        await self.acquire()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.release()
