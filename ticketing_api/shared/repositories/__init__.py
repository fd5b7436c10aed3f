"""
Repository Pattern Implementations

Repositories encapsulate database queries behind a small async API.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]      ← CRUD + get_paginated()
         │
         ├── UserRepository        ← email / reset-token lookups
         ├── VenueRepository       ← VENUE_QUERY_SPEC
         ├── EventRepository       ← EVENT_QUERY_SPEC
         ├── TicketRepository      ← seat counting, order assignment
         └── OrderRepository       ← orders loaded with their tickets

Usage Example:
==============
    from ticketing_api.shared.repositories import EventRepository
    from ticketing_api.shared.schemas.query_options import EventQueryOptions

    events, total = await EventRepository(db).get_paginated(
        EventQueryOptions(venue_id=3, sort="date", order="asc")
    )
"""

from ticketing_api.shared.repositories.base import BaseRepository
from ticketing_api.shared.repositories.query_builder import (
    FilterField,
    FilterKind,
    QuerySpec,
    build_query,
)
from ticketing_api.shared.repositories.user_repository import UserRepository
from ticketing_api.shared.repositories.venue_repository import VenueRepository
from ticketing_api.shared.repositories.event_repository import EventRepository
from ticketing_api.shared.repositories.ticket_repository import TicketRepository
from ticketing_api.shared.repositories.order_repository import OrderRepository

__all__ = [
    # Base class and query building
    "BaseRepository",
    "FilterField",
    "FilterKind",
    "QuerySpec",
    "build_query",
    # Entity-specific repositories
    "UserRepository",
    "VenueRepository",
    "EventRepository",
    "TicketRepository",
    "OrderRepository",
]
