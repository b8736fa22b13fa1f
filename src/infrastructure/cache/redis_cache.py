"""Redis implementation of HotCache."""

import json
from typing import Optional

import redis.asyncio as aioredis
import structlog

from src.core.config import settings
from src.domain.interfaces import HotCache

logger = structlog.get_logger(__name__)


class RedisHotCache(HotCache):
    """
    Redis-backed hot cache.

    Values are stored as JSON with a native Redis expiry, so expired
    entries are never returned.
    """

    def __init__(self, client: aioredis.Redis):
        self._client = client

    @classmethod
    def from_url(cls, url: str | None = None) -> "RedisHotCache":
        """Create a cache with a pooled client for ``url``."""
        client = aioredis.from_url(
            url or settings.redis_url,
            decode_responses=True,
            socket_timeout=5.0,
            socket_connect_timeout=5.0,
            health_check_interval=30,
        )
        return cls(client)

    async def get(self, key: str) -> Optional[dict]:
        data = await self._client.get(key)
        if not data:
            return None
        return json.loads(data)

    async def set(self, key: str, value: dict, ttl_seconds: int) -> None:
        await self._client.set(key, json.dumps(value), ex=ttl_seconds)

    async def delete(self, key: str) -> None:
        await self._client.delete(key)

    async def close(self) -> None:
        """Release the connection pool."""
        await self._client.aclose()
        logger.info("redis_hot_cache_closed")
