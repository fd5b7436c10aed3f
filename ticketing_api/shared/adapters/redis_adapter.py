"""
Redis adapter - Cache-aside storage for read-heavy lookups.

Provides:
- get / set (with TTL) / delete on opaque string keys
- CacheLookup results that tell a hit from a miss from a failure

Failure Policy:
===============
Redis is never on the critical path. Any RedisError is logged and
reported as CacheStatus.ERROR (reads) or False (writes); callers treat
an error exactly like a miss and go to the database.

    lookup = await cache.get("event:get:12")
    if lookup.hit:
        return EventResponse.model_validate_json(lookup.value)
    ...load from repository...
    await cache.set("event:get:12", response.model_dump_json())
"""

import functools
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from redis import asyncio as aioredis
from redis.exceptions import RedisError

from ticketing_api.config.settings import settings
from ticketing_api.shared.core.logging import get_logger

logger = get_logger("ticketing.cache")


class CacheStatus(str, Enum):
    """Outcome of a cache read."""

    HIT = "hit"
    MISS = "miss"
    ERROR = "error"


@dataclass(frozen=True)
class CacheLookup:
    """Result of RedisCache.get(). `value` is set only on a hit."""

    status: CacheStatus
    value: Optional[str] = None

    @property
    def hit(self) -> bool:
        return self.status is CacheStatus.HIT


class RedisCache:
    """
    Async adapter for Redis caching.

    The client is created lazily, so constructing the adapter never
    opens a connection.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        default_ttl: Optional[int] = None,
        enabled: Optional[bool] = None,
    ):
        """
        Initialize Redis cache.

        Args:
            url: Redis URL (redis://host:port/db)
            default_ttl: TTL in seconds when set() is called without one
            enabled: When False every read is a miss and writes are skipped
        """
        self.url = url or settings.REDIS_URL
        self.default_ttl = default_ttl if default_ttl is not None else settings.CACHE_TTL_SECONDS
        self.enabled = settings.CACHE_ENABLED if enabled is None else enabled
        self._client: Optional[aioredis.Redis] = None

    @property
    def client(self) -> aioredis.Redis:
        """Lazy-loaded Redis client."""
        if self._client is None:
            self._client = aioredis.from_url(self.url, decode_responses=True)
        return self._client

    async def get(self, key: str) -> CacheLookup:
        """
        Read a value from cache.

        Args:
            key: Cache key

        Returns:
            CacheLookup with HIT and the value, MISS, or ERROR
        """
        if not self.enabled:
            return CacheLookup(CacheStatus.MISS)
        try:
            value = await self.client.get(key)
        except RedisError as e:
            logger.warning("Cache get failed", key=key, error=str(e))
            return CacheLookup(CacheStatus.ERROR)
        if value is None:
            return CacheLookup(CacheStatus.MISS)
        return CacheLookup(CacheStatus.HIT, value)

    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> bool:
        """
        Store a value with a TTL.

        Returns:
            True if stored, False if disabled or Redis failed
        """
        if not self.enabled:
            return False
        try:
            await self.client.set(key, value, ex=ttl or self.default_ttl)
            return True
        except RedisError as e:
            logger.warning("Cache set failed", key=key, error=str(e))
            return False

    async def delete(self, key: str) -> bool:
        """
        Remove a key.

        Returns:
            True if a key was removed
        """
        if not self.enabled:
            return False
        try:
            return bool(await self.client.delete(key))
        except RedisError as e:
            logger.warning("Cache delete failed", key=key, error=str(e))
            return False

    async def ping(self) -> bool:
        """Check Redis connectivity."""
        try:
            return bool(await self.client.ping())
        except RedisError:
            return False

    async def close(self) -> None:
        """Close the connection pool, if one was opened."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None


@functools.lru_cache(maxsize=1)
def get_cache() -> RedisCache:
    """Get or create the RedisCache singleton."""
    return RedisCache()
