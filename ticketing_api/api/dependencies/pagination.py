"""
Listing Query Dependencies

Turn query strings into per-entity QueryOptions.

    GET /events?name=jazz&date=2026-05-01&page=2&size=20&sort=date&order=asc
        → EventQueryOptions(name="jazz", date=date(2026, 5, 1), page=2, size=20,
                            sort="date", order="asc")

page and size are not range-checked here: QueryOptions normalizes
out-of-range values (page=0 → 1, size=-3 → 10, size=10**6 → 100) instead
of rejecting them.
"""

import datetime as dt
from typing import Annotated, Optional
from uuid import UUID

from fastapi import Query

from ticketing_api.shared.models.enums import OrderStatus, TicketType
from ticketing_api.shared.schemas.query_options import (
    EventQueryOptions,
    OrderQueryOptions,
    TicketQueryOptions,
    VenueQueryOptions,
)
from ticketing_api.shared.utils.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE


Page = Annotated[int, Query(description="Page number (1-indexed)")]
Size = Annotated[int, Query(description="Items per page")]
Sort = Annotated[Optional[str], Query(description="Field to sort by")]
Order = Annotated[Optional[str], Query(description="asc or desc")]


async def get_venue_query(
    id: Optional[int] = None,
    name: Optional[str] = None,
    address: Optional[str] = None,
    capacity: Optional[int] = None,
    city: Optional[str] = None,
    state: Optional[str] = None,
    zip: Optional[str] = None,
    page: Page = DEFAULT_PAGE,
    size: Size = DEFAULT_PAGE_SIZE,
    sort: Sort = None,
    order: Order = None,
) -> VenueQueryOptions:
    """Query options for GET /venues."""
    return VenueQueryOptions(
        id=id, name=name, address=address, capacity=capacity, city=city, state=state, zip=zip,
        page=page, size=size, sort=sort, order=order,
    )


async def get_event_query(
    id: Optional[int] = None,
    name: Optional[str] = None,
    description: Optional[str] = None,
    date: Optional[dt.date] = None,
    time: Optional[dt.time] = None,
    venue_id: Optional[int] = None,
    page: Page = DEFAULT_PAGE,
    size: Size = DEFAULT_PAGE_SIZE,
    sort: Sort = None,
    order: Order = None,
) -> EventQueryOptions:
    """Query options for GET /events."""
    return EventQueryOptions(
        id=id, name=name, description=description, date=date, time=time, venue_id=venue_id,
        page=page, size=size, sort=sort, order=order,
    )


async def get_ticket_query(
    id: Optional[str] = None,
    event_id: Optional[int] = None,
    order_id: Optional[int] = None,
    price: Optional[float] = None,
    type: Optional[TicketType] = None,
    seat_number: Annotated[Optional[list[str]], Query(description="Repeatable")] = None,
    page: Page = DEFAULT_PAGE,
    size: Size = DEFAULT_PAGE_SIZE,
    sort: Sort = None,
    order: Order = None,
) -> TicketQueryOptions:
    """Query options for GET /tickets. `seat_number` may be given several times."""
    return TicketQueryOptions(
        id=id, event_id=event_id, order_id=order_id, price=price, type=type,
        seat_numbers=seat_number,
        page=page, size=size, sort=sort, order=order,
    )


async def get_order_query(
    id: Optional[int] = None,
    user_id: Optional[UUID] = None,
    status: Optional[OrderStatus] = None,
    date: Optional[dt.date] = None,
    page: Page = DEFAULT_PAGE,
    size: Size = DEFAULT_PAGE_SIZE,
    sort: Sort = None,
    order: Order = None,
) -> OrderQueryOptions:
    """Query options for GET /orders. user_id is ignored for buyers."""
    return OrderQueryOptions(
        id=id, user_id=user_id, status=status, date=date,
        page=page, size=size, sort=sort, order=order,
    )
