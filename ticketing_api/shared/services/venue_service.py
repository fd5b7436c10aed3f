"""
Venue Service

Venue catalog management with cache-aside reads.

Caching:
========
    get_venue(12)        → key "venue:get:12"
    list_venues(opts)    → key "venue:list:<digest of opts>"

update_venue / delete_venue drop the "venue:get:<id>" key, before and again
after commit. delete_venue also drops "event:get:<id>" for every event the
cascade removes. Cached listings are left to expire on their TTL.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ticketing_api.shared.adapters.redis_adapter import RedisCache, get_cache
from ticketing_api.shared.core.logging import get_logger
from ticketing_api.shared.repositories.event_repository import EventRepository
from ticketing_api.shared.repositories.venue_repository import VenueRepository
from ticketing_api.shared.schemas.common import PaginatedResponse, PagingMeta
from ticketing_api.shared.schemas.query_options import VenueQueryOptions
from ticketing_api.shared.schemas.venue import VenueCreate, VenueResponse, VenueUpdate
from ticketing_api.shared.services.cache_aside import invalidate, read_through
from ticketing_api.shared.services.event_service import event_cache_key
from ticketing_api.shared.utils.constants import VENUE_CACHE_PREFIX

logger = get_logger("ticketing.venues")


def venue_cache_key(venue_id: int) -> str:
    return f"{VENUE_CACHE_PREFIX}:get:{venue_id}"


class VenueService:
    """
    Service for venue business logic.

    Attributes:
        session: Database session
        repo: VenueRepository instance
        cache: Cache adapter for reads
    """

    def __init__(self, session: AsyncSession, cache: Optional[RedisCache] = None) -> None:
        self.session = session
        self.repo = VenueRepository(session)
        self.event_repo = EventRepository(session)
        self.cache = cache or get_cache()

    async def create_venue(self, data: VenueCreate) -> VenueResponse:
        venue = await self.repo.create(**data.model_dump())
        logger.info("Venue created", venue_id=venue.id)
        return VenueResponse.model_validate(venue)

    async def update_venue(self, venue_id: int, data: VenueUpdate) -> VenueResponse:
        """Raises VenueNotFoundError when the venue doesn't exist."""
        venue = await self.repo.update(venue_id, **data.model_dump(exclude_unset=True))
        await invalidate(self.session, self.cache, venue_cache_key(venue_id))
        logger.info("Venue updated", venue_id=venue_id)
        return VenueResponse.model_validate(venue)

    async def delete_venue(self, venue_id: int) -> None:
        """
        Delete a venue together with its events.

        Raises:
            VenueNotFoundError: Venue doesn't exist
        """
        event_ids = await self.event_repo.ids_for_venue(venue_id)
        await self.repo.delete(venue_id)
        await invalidate(
            self.session,
            self.cache,
            venue_cache_key(venue_id),
            *(event_cache_key(event_id) for event_id in event_ids),
        )
        logger.info("Venue deleted", venue_id=venue_id, events_removed=len(event_ids))

    async def get_venue(self, venue_id: int) -> VenueResponse:
        """Cached single-venue read. Raises VenueNotFoundError."""

        async def load() -> VenueResponse:
            return VenueResponse.model_validate(await self.repo.get_by_id(venue_id))

        return await read_through(self.cache, venue_cache_key(venue_id), VenueResponse, load)

    async def list_venues(self, options: VenueQueryOptions) -> PaginatedResponse[VenueResponse]:
        """Cached paginated listing. A filter matching nothing yields an empty page."""

        async def load() -> PaginatedResponse[VenueResponse]:
            venues, total = await self.repo.get_paginated(options)
            return PaginatedResponse[VenueResponse](
                data=[VenueResponse.model_validate(venue) for venue in venues],
                paging=PagingMeta.create(page=options.page, size=options.size, total=total),
            )

        return await read_through(
            self.cache,
            options.cache_key(f"{VENUE_CACHE_PREFIX}:list"),
            PaginatedResponse[VenueResponse],
            load,
        )
