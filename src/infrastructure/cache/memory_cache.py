"""In-process implementation of HotCache."""

import time
from typing import Callable, Dict, Optional, Tuple

from src.domain.interfaces import HotCache


class InMemoryHotCache(HotCache):
    """
    Dictionary-backed hot cache for single-process deployments and tests.

    Entries are expired lazily: ``get`` checks the stored deadline against
    the clock and drops the entry once it has passed.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[str, Tuple[dict, float]] = {}

    async def get(self, key: str) -> Optional[dict]:
        entry = self._entries.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None

        return value

    async def set(self, key: str, value: dict, ttl_seconds: int) -> None:
        self._entries[key] = (value, self._clock() + ttl_seconds)

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def __len__(self) -> int:
        return len(self._entries)
