"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories,
the cache and other collaborators.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ RedisCache (venue/event reads)
                ↘ EmailSender (password reset)

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Return response schemas, never ORM objects
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- UserService: Registration, login, tokens, profile, password reset
- VenueService / EventService: Catalog CRUD with cache-aside reads
- TicketService: Bulk issuance and ticket maintenance
- OrderService: Purchase, payment and cancellation

Usage:
======
    from ticketing_api.shared.services import VenueService

    service = VenueService(db, cache)
    page = await service.list_venues(VenueQueryOptions(city="austin"))
"""

from ticketing_api.shared.services.user_service import UserService
from ticketing_api.shared.services.venue_service import VenueService
from ticketing_api.shared.services.event_service import EventService
from ticketing_api.shared.services.ticket_service import TicketService
from ticketing_api.shared.services.order_service import OrderService

__all__ = [
    "UserService",
    "VenueService",
    "EventService",
    "TicketService",
    "OrderService",
]
