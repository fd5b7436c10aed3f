"""
Ticket Repository

Ticket lookups, seat counting and order assignment.

Common Operations:
==================
- count_by_event_and_type() → next seat number for bulk issuance
- lock_by_ids()             → load tickets FOR UPDATE before claiming them
- assign_to_order()         → claim tickets for an order
- release_order()           → give a cancelled order's tickets back

Sortable fields accept both snake_case and the camelCase aliases clients
already send (eventId, orderId, orderID, seatNumber).
"""

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing_api.shared.core.exceptions import TicketNotFoundError
from ticketing_api.shared.models.enums import TicketType
from ticketing_api.shared.models.ticket import Ticket
from ticketing_api.shared.repositories.base import BaseRepository
from ticketing_api.shared.repositories.query_builder import FilterField, FilterKind, QuerySpec


TICKET_QUERY_SPEC = QuerySpec(
    filters={
        "id": FilterField(Ticket.id),
        "event_id": FilterField(Ticket.event_id),
        "order_id": FilterField(Ticket.order_id),
        "price": FilterField(Ticket.price),
        "type": FilterField(Ticket.type),
        "seat_numbers": FilterField(Ticket.seat_number, FilterKind.IN),
    },
    sortable={
        "id": Ticket.id,
        "event_id": Ticket.event_id,
        "eventId": Ticket.event_id,
        "order_id": Ticket.order_id,
        "orderId": Ticket.order_id,
        "orderID": Ticket.order_id,
        "price": Ticket.price,
        "type": Ticket.type,
        "seat_number": Ticket.seat_number,
        "seatNumber": Ticket.seat_number,
        "created_at": Ticket.created_at,
    },
    default_order=(Ticket.created_at.desc(), Ticket.id.desc()),
    tiebreaker=Ticket.id,
)


class TicketRepository(BaseRepository[Ticket]):
    """Repository for Ticket database operations."""

    query_spec = TICKET_QUERY_SPEC
    not_found_error = TicketNotFoundError

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Ticket, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # SEATING
    # ═══════════════════════════════════════════════════════════════════════════

    async def count_by_event_and_type(self, event_id: int, ticket_type: TicketType) -> int:
        """
        Number of tickets already issued for an event and type.

        SQL Generated:
            SELECT count(*) FROM tickets WHERE event_id = 4 AND type = 'vip'
        """
        result = await self.session.execute(
            select(func.count())
            .select_from(Ticket)
            .where(Ticket.event_id == event_id, Ticket.type == ticket_type)
        )
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # ORDER ASSIGNMENT
    # ═══════════════════════════════════════════════════════════════════════════

    async def lock_by_ids(self, ids: Sequence[str]) -> list[Ticket]:
        """
        Load tickets and row-lock them until the transaction ends.

        Two concurrent orders for the same seat serialize here, so the
        second one sees order_id already set.

        SQL Generated:
            SELECT * FROM tickets WHERE id IN (...) FOR UPDATE
        """
        if not ids:
            return []
        result = await self.session.execute(
            select(Ticket)
            .where(Ticket.id.in_(list(ids)))
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def assign_to_order(self, tickets: Sequence[Ticket], order_id: int) -> None:
        """Point every given ticket at `order_id`."""
        for ticket in tickets:
            ticket.order_id = order_id
        await self.session.flush()

    async def release_order(self, order_id: int) -> int:
        """
        Detach all tickets from an order so they can be bought again.

        Returns:
            Number of tickets released

        SQL Generated:
            SELECT * FROM tickets WHERE order_id = 7
            UPDATE tickets SET order_id = NULL WHERE id = ...
        """
        result = await self.session.execute(select(Ticket).where(Ticket.order_id == order_id))
        tickets = list(result.scalars().all())
        for ticket in tickets:
            ticket.order_id = None
        await self.session.flush()
        return len(tickets)
