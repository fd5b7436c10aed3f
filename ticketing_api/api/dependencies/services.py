"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per-request, which is fine because:
- Services only hold the request's db session (plus shared adapters)
- Each request gets its own db session
- No shared state between requests

Usage:
======
    from ticketing_api.api.dependencies.services import get_venue_service

    @router.get("/{venue_id}")
    async def get_venue(venue_id: int, service: VenueService = Depends(get_venue_service)):
        return ApiResponse(data=await service.get_venue(venue_id))
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing_api.api.dependencies.cache import get_cache_adapter
from ticketing_api.api.dependencies.database import get_db
from ticketing_api.shared.adapters.email_adapter import LoggingEmailSender, get_email_sender
from ticketing_api.shared.adapters.redis_adapter import RedisCache
from ticketing_api.shared.services.event_service import EventService
from ticketing_api.shared.services.order_service import OrderService
from ticketing_api.shared.services.ticket_service import TicketService
from ticketing_api.shared.services.user_service import UserService
from ticketing_api.shared.services.venue_service import VenueService


async def get_email_sender_dependency() -> LoggingEmailSender:
    return get_email_sender()


async def get_user_service(
    db: AsyncSession = Depends(get_db),
    email_sender: LoggingEmailSender = Depends(get_email_sender_dependency),
) -> UserService:
    """
    Dependency to get UserService instance.

    Creates a new service instance per request with the request's db session.
    """
    return UserService(db, email_sender)


async def get_venue_service(
    db: AsyncSession = Depends(get_db),
    cache: RedisCache = Depends(get_cache_adapter),
) -> VenueService:
    return VenueService(db, cache)


async def get_event_service(
    db: AsyncSession = Depends(get_db),
    cache: RedisCache = Depends(get_cache_adapter),
) -> EventService:
    return EventService(db, cache)


async def get_ticket_service(
    db: AsyncSession = Depends(get_db),
) -> TicketService:
    return TicketService(db)


async def get_order_service(
    db: AsyncSession = Depends(get_db),
) -> OrderService:
    return OrderService(db)
