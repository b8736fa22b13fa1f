"""Process-wide hot cache lifecycle."""

import structlog

from src.core.config import settings
from src.domain.interfaces import HotCache

from .memory_cache import InMemoryHotCache
from .redis_cache import RedisHotCache

logger = structlog.get_logger(__name__)


class HotCacheManager:
    """
    Owns the shared hot cache client.

    Uses Redis when a URL is configured, otherwise an in-process cache.
    """

    def __init__(self):
        self._cache: HotCache | None = None

    def init(self, redis_url: str | None = None) -> None:
        url = redis_url if redis_url is not None else settings.redis_url

        if url:
            self._cache = RedisHotCache.from_url(url)
            logger.info("hot_cache_initialized", backend="redis")
        else:
            self._cache = InMemoryHotCache()
            logger.info("hot_cache_initialized", backend="memory")

    @property
    def backend(self) -> str:
        return "redis" if isinstance(self._cache, RedisHotCache) else "memory"

    @property
    def cache(self) -> HotCache:
        if self._cache is None:
            self.init()
        return self._cache

    async def close(self) -> None:
        if isinstance(self._cache, RedisHotCache):
            await self._cache.close()
        self._cache = None


hot_cache_manager = HotCacheManager()
