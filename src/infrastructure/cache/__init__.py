"""Hot cache implementations."""

from .memory_cache import InMemoryHotCache
from .redis_cache import RedisHotCache
from .manager import HotCacheManager, hot_cache_manager

__all__ = [
    "InMemoryHotCache",
    "RedisHotCache",
    "HotCacheManager",
    "hot_cache_manager",
]
