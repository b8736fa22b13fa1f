"""Hot cache interface."""

from abc import ABC, abstractmethod
from typing import Optional


class HotCache(ABC):
    """
    Abstract key/value cache with per-entry expiry.

    Implementations must never return an entry past its TTL.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[dict]:
        """
        Retrieve a cached value.

        Args:
            key: Namespaced cache key

        Returns:
            The stored value, or None if absent or expired
        """
        ...

    @abstractmethod
    async def set(self, key: str, value: dict, ttl_seconds: int) -> None:
        """
        Store a value that expires after ``ttl_seconds``.

        Args:
            key: Namespaced cache key
            value: JSON-serializable value
            ttl_seconds: Time to live in seconds
        """
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a value if present."""
        ...
