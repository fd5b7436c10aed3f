"""
Venue Repository

Venue lookups and the static filter/sort table for GET /venues.

Filterable:
===========
    id, capacity, zip          → exact match
    name, address, city, state → case-insensitive substring
"""

from sqlalchemy.ext.asyncio import AsyncSession

from ticketing_api.shared.core.exceptions import VenueNotFoundError
from ticketing_api.shared.models.venue import Venue
from ticketing_api.shared.repositories.base import BaseRepository
from ticketing_api.shared.repositories.query_builder import FilterField, FilterKind, QuerySpec


VENUE_QUERY_SPEC = QuerySpec(
    filters={
        "id": FilterField(Venue.id),
        "name": FilterField(Venue.name, FilterKind.CONTAINS),
        "address": FilterField(Venue.address, FilterKind.CONTAINS),
        "capacity": FilterField(Venue.capacity),
        "city": FilterField(Venue.city, FilterKind.CONTAINS),
        "state": FilterField(Venue.state, FilterKind.CONTAINS),
        "zip": FilterField(Venue.zip),
    },
    sortable={
        "id": Venue.id,
        "name": Venue.name,
        "address": Venue.address,
        "capacity": Venue.capacity,
        "city": Venue.city,
        "state": Venue.state,
        "zip": Venue.zip,
        "created_at": Venue.created_at,
    },
    default_order=(Venue.created_at.desc(), Venue.id.desc()),
    tiebreaker=Venue.id,
)


class VenueRepository(BaseRepository[Venue]):
    """Repository for Venue database operations."""

    query_spec = VENUE_QUERY_SPEC
    not_found_error = VenueNotFoundError

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Venue, session)
