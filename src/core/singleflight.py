"""Per-key de-duplication of concurrent async calls."""

import asyncio
from typing import Awaitable, Callable, Dict, TypeVar

T = TypeVar("T")


class SingleFlight:
    """
    Collapses concurrent calls that share a key into one execution.

    The first caller for a key starts the coroutine as a task; every caller,
    the first included, awaits that task through ``asyncio.shield``. A caller
    being cancelled therefore never cancels the shared work or the other
    callers waiting on it. Nothing is cached once the call completes.

    Usage:
        flights = SingleFlight()
        score = await flights.do(wallet, lambda: oracle.fetch_score(wallet))
    """

    def __init__(self):
        self._calls: Dict[str, asyncio.Task] = {}

    def is_in_flight(self, key: str) -> bool:
        """Check whether a call for ``key`` is currently running."""
        task = self._calls.get(key)
        return task is not None and not task.done()

    async def do(self, key: str, fn: Callable[[], Awaitable[T]]) -> T:
        """
        Run ``fn`` unless a call for ``key`` is already in flight.

        Args:
            key: De-duplication key
            fn: Zero-argument coroutine factory

        Returns:
            The result of the single shared execution
        """
        task = self._calls.get(key)
        if task is None or task.done():
            task = asyncio.ensure_future(fn())
            self._calls[key] = task
            task.add_done_callback(lambda done: self._forget(key, done))

        return await asyncio.shield(task)

    def _forget(self, key: str, task: asyncio.Task) -> None:
        if self._calls.get(key) is task:
            del self._calls[key]
        # Mark the error retrieved even when every caller was cancelled.
        if not task.cancelled():
            task.exception()
