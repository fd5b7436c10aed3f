"""
Cache Dependency

Tests override get_cache_adapter with an in-memory double.
"""

from typing import Annotated

from fastapi import Depends

from ticketing_api.shared.adapters.redis_adapter import RedisCache, get_cache


async def get_cache_adapter() -> RedisCache:
    """Process-wide RedisCache."""
    return get_cache()


Cache = Annotated[RedisCache, Depends(get_cache_adapter)]
