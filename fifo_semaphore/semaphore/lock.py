"""FIFO async mutex built from a chain of futures."""

import asyncio
from functools import partial
from types import TracebackType
from typing import Callable, Optional, Type


class ChainedLock:
    """Async mutex that admits holders strictly in the order they asked.

    Every call to :meth:`acquire` links a new gate future after the current
    tail of the chain and waits for its predecessor's gate to open. Releasing
    opens the holder's own gate, which admits exactly the next entry.

    Whoever holds the lock must release it or every later entry waits forever,
    so prefer ``async with lock:`` which releases on every exit path.

    Example:
        ```python
        lock = ChainedLock()
        async with lock:
            counter += 1
        ```
    """

    def __init__(self) -> None:
        self._tail: Optional[asyncio.Future] = None
        self._release_held: Optional[Callable[[], None]] = None

    def locked(self) -> bool:
        """Return True if some entry currently holds or waits for the lock."""
        return self._tail is not None

    async def acquire(self) -> Callable[[], None]:
        """Wait for all earlier entries to finish and take the lock.

        Returns:
            Callable[[], None]: One-shot function that releases the lock.
            Calling it more than once has no further effect.
        """
        gate = asyncio.get_running_loop().create_future()
        previous = self._tail
        self._tail = gate

        if previous is not None and not previous.done():
            try:
                # shield so our cancellation can't cancel the predecessor's gate
                await asyncio.shield(previous)
            except asyncio.CancelledError:
                # pass our place in the chain on once the predecessor is done
                previous.add_done_callback(lambda _: self._open(gate))
                raise

        return partial(self._open, gate)

    def _open(self, gate: asyncio.Future) -> None:
        if not gate.done():
            gate.set_result(None)
        if self._tail is gate:
            self._tail = None

    async def __aenter__(self) -> None:
        # only one holder at a time, so a single slot is enough
        self._release_held = await self.acquire()

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        release, self._release_held = self._release_held, None
        if release is not None:
            release()
