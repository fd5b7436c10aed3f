"""
Event Service

Event catalog management with cache-aside reads.

Caching:
========
    get_event(12)        → key "event:get:12"
    list_events(opts)    → key "event:list:<digest of opts>"

update_event / delete_event drop the "event:get:<id>" key, before and again
after commit. Cached listings are left to expire on their TTL.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ticketing_api.shared.adapters.redis_adapter import RedisCache, get_cache
from ticketing_api.shared.core.logging import get_logger
from ticketing_api.shared.repositories.event_repository import EventRepository
from ticketing_api.shared.repositories.venue_repository import VenueRepository
from ticketing_api.shared.schemas.common import PaginatedResponse, PagingMeta

from ticketing_api.shared.schemas.event import EventCreate, EventResponse, EventUpdate
from ticketing_api.shared.schemas.query_options import EventQueryOptions
from ticketing_api.shared.services.cache_aside import invalidate, read_through
from ticketing_api.shared.utils.constants import EVENT_CACHE_PREFIX

logger = get_logger("ticketing.events")


def event_cache_key(event_id: int) -> str:
    return f"{EVENT_CACHE_PREFIX}:get:{event_id}"


class EventService:
    """
    Service for event business logic.

    Attributes:
        session: Database session
        repo: EventRepository instance
        cache: Cache adapter for reads
    """

    def __init__(self, session: AsyncSession, cache: Optional[RedisCache] = None) -> None:
        self.session = session
        self.repo = EventRepository(session)
        self.venue_repo = VenueRepository(session)
        self.cache = cache or get_cache()

    async def create_event(self, data: EventCreate) -> EventResponse:
        """
        Create an event at an existing venue.

        Raises:
            VenueNotFoundError: venue_id doesn't exist
        """
        await self.venue_repo.get_by_id(data.venue_id)
        event = await self.repo.create(**data.model_dump())
        logger.info("Event created", event_id=event.id, venue_id=event.venue_id)
        return EventResponse.model_validate(event)

    async def update_event(self, event_id: int, data: EventUpdate) -> EventResponse:
        """
        Partially update an event and drop its cached copy.

        Raises:
            EventNotFoundError: Event doesn't exist
            VenueNotFoundError: A new venue_id doesn't exist
        """
        changes = data.model_dump(exclude_unset=True)
        if changes.get("venue_id") is not None:
            await self.venue_repo.get_by_id(changes["venue_id"])
        event = await self.repo.update(event_id, **changes)
        await invalidate(self.session, self.cache, event_cache_key(event_id))
        logger.info("Event updated", event_id=event_id)
        return EventResponse.model_validate(event)

    async def delete_event(self, event_id: int) -> None:
        """Raises EventNotFoundError when the event doesn't exist."""
        await self.repo.delete(event_id)
        await invalidate(self.session, self.cache, event_cache_key(event_id))
        logger.info("Event deleted", event_id=event_id)

    async def get_event(self, event_id: int) -> EventResponse:
        """Cached single-event read. Raises EventNotFoundError."""

        async def load() -> EventResponse:
            return EventResponse.model_validate(await self.repo.get_by_id(event_id))

        return await read_through(self.cache, event_cache_key(event_id), EventResponse, load)

    async def list_events(self, options: EventQueryOptions) -> PaginatedResponse[EventResponse]:
        """Cached paginated listing. A filter matching nothing yields an empty page."""

        async def load() -> PaginatedResponse[EventResponse]:
            events, total = await self.repo.get_paginated(options)
            return PaginatedResponse[EventResponse](
                data=[EventResponse.model_validate(event) for event in events],
                paging=PagingMeta.create(page=options.page, size=options.size, total=total),
            )

        return await read_through(
            self.cache,
            options.cache_key(f"{EVENT_CACHE_PREFIX}:list"),
            PaginatedResponse[EventResponse],
            load,
        )
