"""
Ticket Service

Bulk ticket issuance and ticket maintenance.

Seat Numbering:
===============
Seats are numbered per event and type, continuing after the seats that
already exist:

    event 4 has V-1..V-10
    create(event_id=4, type="vip", count=3)  → V-11, V-12, V-13
    create(event_id=4, type="regular", count=2) → R-1, R-2

(event_id, seat_number) is unique, so two requests numbering the same
seats concurrently leave one of them with a ConflictError.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing_api.shared.core.exceptions import ConflictError, ValidationError
from ticketing_api.shared.core.logging import get_logger
from ticketing_api.shared.repositories.event_repository import EventRepository
from ticketing_api.shared.repositories.order_repository import OrderRepository
from ticketing_api.shared.repositories.ticket_repository import TicketRepository
from ticketing_api.shared.schemas.common import PaginatedResponse, PagingMeta
from ticketing_api.shared.schemas.query_options import TicketQueryOptions
from ticketing_api.shared.schemas.ticket import TicketCreate, TicketResponse, TicketUpdate
from ticketing_api.shared.utils.constants import MAX_TICKETS_PER_REQUEST

logger = get_logger("ticketing.tickets")


class TicketService:
    """
    Service for ticket business logic.

    Attributes:
        session: Database session
        repo: TicketRepository instance
        event_repo: Used to check the event exists
        order_repo: Used to check a reassigned order exists
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = TicketRepository(session)
        self.event_repo = EventRepository(session)
        self.order_repo = OrderRepository(session)

    async def create_tickets(self, data: TicketCreate) -> list[TicketResponse]:
        """
        Issue `count` tickets of one type for an event.

        Args:
            data: event_id, price, type, count

        Returns:
            The new tickets, in seat order

        Raises:
            ValidationError: count outside 1..MAX_TICKETS_PER_REQUEST
            EventNotFoundError: event_id doesn't exist
            ConflictError: Another request issued the same seats first
        """
        if not 1 <= data.count <= MAX_TICKETS_PER_REQUEST:
            raise ValidationError(
                f"count must be between 1 and {MAX_TICKETS_PER_REQUEST}",
                details={"count": data.count},
            )
        await self.event_repo.get_by_id(data.event_id)

        issued = await self.repo.count_by_event_and_type(data.event_id, data.type)
        prefix = data.type.seat_prefix
        try:
            tickets = await self.repo.create_many([
                {
                    "event_id": data.event_id,
                    "price": data.price,
                    "type": data.type,
                    "seat_number": f"{prefix}-{issued + n}",
                }
                for n in range(1, data.count + 1)
            ])
        except IntegrityError:
            raise ConflictError(
                "Seat numbers already issued for this event",
                details={"event_id": data.event_id, "type": data.type.value},
            )

        logger.info(
            "Tickets issued",
            event_id=data.event_id,
            type=data.type.value,
            count=len(tickets),
            first_seat=tickets[0].seat_number,
        )
        return [TicketResponse.model_validate(ticket) for ticket in tickets]

    async def update_ticket(self, ticket_id: str, data: TicketUpdate) -> TicketResponse:
        """
        Partially update a ticket.

        Raises:
            TicketNotFoundError: Ticket doesn't exist
            EventNotFoundError / OrderNotFoundError: A referenced id doesn't exist
            ConflictError: The seat is already taken at that event
        """
        changes = data.model_dump(exclude_unset=True)
        if changes.get("event_id") is not None:
            await self.event_repo.get_by_id(changes["event_id"])
        if changes.get("order_id") is not None:
            await self.order_repo.get_by_id(changes["order_id"])

        try:
            ticket = await self.repo.update(ticket_id, **changes)
        except IntegrityError:
            raise ConflictError(
                "Seat number already issued for this event",
                details={"seat_number": changes.get("seat_number")},
            )
        logger.info("Ticket updated", ticket_id=ticket_id)
        return TicketResponse.model_validate(ticket)

    async def get_ticket(self, ticket_id: str) -> TicketResponse:
        return TicketResponse.model_validate(await self.repo.get_by_id(ticket_id))

    async def list_tickets(self, options: TicketQueryOptions) -> PaginatedResponse[TicketResponse]:
        tickets, total = await self.repo.get_paginated(options)
        return PaginatedResponse[TicketResponse](
            data=[TicketResponse.model_validate(ticket) for ticket in tickets],
            paging=PagingMeta.create(page=options.page, size=options.size, total=total),
        )
