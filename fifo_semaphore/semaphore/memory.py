"""In-memory FIFO semaphore implementation."""

import asyncio
from collections import deque
from typing import Deque, Optional

from fifo_semaphore.config import get_settings
from fifo_semaphore.observability.logger_adaptor import get_logger
from fifo_semaphore.semaphore.base import Semaphore
from fifo_semaphore.semaphore.exceptions import InvalidPermitsError
from fifo_semaphore.semaphore.lock import ChainedLock

logger = get_logger(__name__)


class InMemorySemaphore(Semaphore):
    """Counting semaphore for tasks sharing one event loop.

    At most ``max_permits`` permits are held at any time. Acquires that find
    no free permit are queued and served strictly in arrival order: a released
    permit always goes to the longest waiting acquire before it is ever added
    back to the counter, so ``permits`` stays at 0 while anyone is queued.

    All reads and writes of the counter and the queue happen under an internal
    :class:`ChainedLock`.

    Example:
        ```python
        semaphore = InMemorySemaphore(2, debug=True, name="db-pool")

        await semaphore.acquire()
        try:
            # Use the resource
            pass
        finally:
            await semaphore.release()

        # or equivalently
        async with semaphore:
            pass
        ```
    """

    def __init__(
        self,
        permits: int,
        debug: Optional[bool] = None,
        name: Optional[str] = None,
    ) -> None:
        """Initialize the semaphore.

        Args:
            permits: Capacity of the semaphore. Zero is allowed, in which case
                every acquire waits for a release.
            debug: Emit a diagnostic trace of every state transition. Defaults
                to the ``FIFO_SEMAPHORE_DEBUG`` setting.
            name: Label used in the diagnostic trace. Defaults to the
                ``FIFO_SEMAPHORE_NAME`` setting.

        Raises:
            InvalidPermitsError: If permits is negative or not an integer.
        """
        if isinstance(permits, bool) or not isinstance(permits, int) or permits < 0:
            error = InvalidPermitsError(permits)
            logger.error(str(error))
            raise error

        settings = get_settings()
        self._permits = permits
        self._max_permits = permits
        self._waiters: Deque[asyncio.Future] = deque()
        self._lock = ChainedLock()
        self.debug = settings.debug if debug is None else debug
        self.name = settings.name if name is None else name

        if self.debug:
            logger.info(
                f"Semaphore initialized with maxPermits: {self._max_permits} "
                f"for \"{self.name}\""
            )

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} name={self.name!r} "
            f"permits={self._permits}/{self._max_permits} waiting={self.waiting}>"
        )

    @property
    def permits(self) -> int:
        return self._permits

    @property
    def max_permits(self) -> int:
        return self._max_permits

    @property
    def waiting(self) -> int:
        """Number of acquires currently queued for a permit."""
        return sum(1 for waiter in self._waiters if not waiter.done())

    async def acquire(self) -> None:
        """Acquire a permit.

        If a permit is available it is taken immediately. Otherwise the call
        joins the end of the wait queue and returns once a release hands it
        a permit. There is no timeout.

        If the calling task is cancelled while queued, it leaves the queue
        without consuming a permit. If a permit had already been handed to it,
        that permit is passed on before the cancellation propagates.
        """
        async with self._lock:
            self._trace(f"Attempting to acquire a permit. Current permits: {self._permits}")

            if self._permits > 0:
                self._permits -= 1
                self._trace(f"Permit acquired. Remaining permits: {self._permits}")
                return

            waiter = asyncio.get_running_loop().create_future()
            self._waiters.append(waiter)
            self._trace("No permits available. Queuing the request.")

        # Wait outside the critical section
        try:
            await waiter
        except asyncio.CancelledError:
            if waiter.cancelled():
                await asyncio.shield(self._discard(waiter))
            elif waiter.done():
                # a permit was already handed over, pass it on
                await asyncio.shield(self.release())
            raise

        self._trace("Permit acquired from queue.")

    async def release(self) -> None:
        """Release a permit.

        The permit goes to the longest waiting acquire if there is one,
        otherwise the counter is incremented. Releasing more permits than the
        capacity leaves the state unchanged and only logs a warning in debug
        mode.
        """
        async with self._lock:
            self._trace("Releasing a permit.")

            while self._waiters:
                waiter = self._waiters.popleft()
                if waiter.done():
                    # cancelled while queued
                    continue
                self._trace("Resolving a queued acquire request.")
                waiter.set_result(None)
                return

            if self._permits < self._max_permits:
                self._permits += 1
                self._trace(f"Permit released. Available permits: {self._permits}")
            elif self.debug:
                logger.warning(
                    f"{self.name} Semaphore: Attempted to release more permits "
                    f"than the maximum ({self._max_permits})."
                )

    async def _discard(self, waiter: asyncio.Future) -> None:
        async with self._lock:
            try:
                self._waiters.remove(waiter)
            except ValueError:
                # already skipped by a release
                pass

    def _trace(self, message: str) -> None:
        if self.debug:
            logger.info(f"{self.name} Semaphore: {message}")
