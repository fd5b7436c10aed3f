"""
Cache-Aside Reads

    lookup = cache.get(key)
        HIT          → model_validate_json(value)
        MISS / ERROR / unreadable → loader() → cache.set(key, model_dump_json(), ttl) → result

The loader runs against the database only on a miss. A failed set() has
already been logged by the cache adapter and does not affect the result.

Writes call invalidate(): the keys are deleted at once and again after the
request transaction commits, so a reader that cached the pre-commit row in
between does not outlive the write.
"""

from typing import Awaitable, Callable, Optional, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing_api.shared.adapters.redis_adapter import RedisCache
from ticketing_api.shared.core.logging import get_logger
from ticketing_api.shared.db.session import run_after_commit

logger = get_logger("ticketing.cache")

SchemaT = TypeVar("SchemaT", bound=BaseModel)


async def read_through(
    cache: RedisCache,
    key: str,
    schema: type[SchemaT],
    loader: Callable[[], Awaitable[SchemaT]],
    ttl: Optional[int] = None,
) -> SchemaT:
    """
    Return the cached value for `key`, or load, cache and return it.

    Args:
        cache: Cache adapter
        key: Cache key
        schema: Pydantic model the cached JSON deserializes into
        loader: Coroutine factory that reads from the database
        ttl: Seconds to keep the value (adapter default when None)
    """
    lookup = await cache.get(key)
    if lookup.hit:
        try:
            value = schema.model_validate_json(lookup.value)
        except ValidationError:
            logger.warning("Unreadable cache entry, reloading", key=key)
        else:
            logger.debug("Cache hit", key=key)
            return value
    else:
        logger.debug("Cache miss", key=key, status=lookup.status.value)

    result = await loader()
    await cache.set(key, result.model_dump_json(), ttl)
    return result


async def invalidate(session: AsyncSession, cache: RedisCache, *keys: str) -> None:
    """Delete `keys` now and once more after `session` commits."""

    async def drop() -> None:
        for key in keys:
            await cache.delete(key)

    await drop()
    run_after_commit(session, drop)
