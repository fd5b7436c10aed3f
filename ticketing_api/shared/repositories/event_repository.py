"""
Event Repository

Event lookups and the static filter/sort table for GET /events.

Filterable:
===========
    id, venue_id, time   → exact match
    name, description    → case-insensitive substring
    date                 → same calendar day (time of day ignored)

Sortable:
=========
    id, name, description, date, time, venue_id, created_at
    (plus the camelCase alias venueId)
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing_api.shared.core.exceptions import EventNotFoundError
from ticketing_api.shared.models.event import Event
from ticketing_api.shared.repositories.base import BaseRepository
from ticketing_api.shared.repositories.query_builder import FilterField, FilterKind, QuerySpec


EVENT_QUERY_SPEC = QuerySpec(
    filters={
        "id": FilterField(Event.id),
        "name": FilterField(Event.name, FilterKind.CONTAINS),
        "description": FilterField(Event.description, FilterKind.CONTAINS),
        "date": FilterField(Event.date, FilterKind.DATE),
        "time": FilterField(Event.time),
        "venue_id": FilterField(Event.venue_id),
    },
    sortable={
        "id": Event.id,
        "name": Event.name,
        "description": Event.description,
        "date": Event.date,
        "time": Event.time,
        "venue_id": Event.venue_id,
        "venueId": Event.venue_id,
        "created_at": Event.created_at,
    },
    default_order=(Event.created_at.desc(), Event.id.desc()),
    tiebreaker=Event.id,
)


class EventRepository(BaseRepository[Event]):
    """Repository for Event database operations."""

    query_spec = EVENT_QUERY_SPEC
    not_found_error = EventNotFoundError

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Event, session)

    async def ids_for_venue(self, venue_id: int) -> list[int]:
        """Ids of every event held at a venue."""
        result = await self.session.execute(select(Event.id).where(Event.venue_id == venue_id))
        return list(result.scalars().all())
