"""
Order Service

Ticket purchase flow.

Order Lifecycle:
================
    create ──► PENDING ──pay──► PAID
                  │
                  └──cancel──► CANCELLED  (tickets released)

Any other transition raises InvalidStatusTransitionError (409).

Visibility:
===========
Buyers only ever see their own orders: another buyer's order id answers
404 exactly like a missing one, and listings are forced to user_id=self.
Admins see everything.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ticketing_api.shared.core.exceptions import (
    ConflictError,
    InvalidStatusTransitionError,
    OrderNotFoundError,
    TicketNotFoundError,
)
from ticketing_api.shared.core.logging import get_logger
from ticketing_api.shared.models.enums import OrderStatus
from ticketing_api.shared.models.order import Order
from ticketing_api.shared.repositories.order_repository import OrderRepository
from ticketing_api.shared.repositories.ticket_repository import TicketRepository
from ticketing_api.shared.schemas.common import PaginatedResponse, PagingMeta
from ticketing_api.shared.schemas.order import OrderCreate, OrderResponse
from ticketing_api.shared.schemas.query_options import OrderQueryOptions

logger = get_logger("ticketing.orders")


class OrderService:
    """
    Service for order business logic.

    Attributes:
        session: Database session
        repo: OrderRepository instance
        ticket_repo: TicketRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = OrderRepository(session)
        self.ticket_repo = TicketRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_order(self, user_id: UUID, data: OrderCreate) -> OrderResponse:
        """
        Claim available tickets for a buyer.

        Args:
            user_id: Buyer
            data: Ticket ids to buy (duplicates ignored)

        Returns:
            The pending order with its tickets

        Raises:
            TicketNotFoundError: A ticket id doesn't exist
            ConflictError: A ticket already belongs to an order
        """
        ticket_ids = list(dict.fromkeys(data.ticket_ids))
        tickets = await self.ticket_repo.lock_by_ids(ticket_ids)

        found = {ticket.id for ticket in tickets}
        missing = [ticket_id for ticket_id in ticket_ids if ticket_id not in found]
        if missing:
            raise TicketNotFoundError(missing[0])

        taken = sorted(ticket.id for ticket in tickets if not ticket.is_available)
        if taken:
            raise ConflictError("Tickets are no longer available", details={"ticket_ids": taken})

        order = await self.repo.create(
            user_id=user_id,
            total_price=sum(ticket.price for ticket in tickets),
            status=OrderStatus.PENDING,
        )
        await self.ticket_repo.assign_to_order(tickets, order.id)

        logger.info(
            "Order created",
            order_id=order.id,
            user_id=str(user_id),
            tickets=len(tickets),
            total_price=order.total_price,
        )
        return OrderResponse.model_validate(await self.repo.get_by_id(order.id))

    # ═══════════════════════════════════════════════════════════════════════════
    # READ
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_order(self, order_id: int, user_id: UUID, is_admin: bool = False) -> OrderResponse:
        return OrderResponse.model_validate(await self._get_visible(order_id, user_id, is_admin))

    async def list_orders(
        self,
        options: OrderQueryOptions,
        user_id: UUID,
        is_admin: bool = False,
    ) -> PaginatedResponse[OrderResponse]:
        """Paginated orders; a buyer's user_id filter is always themselves."""
        if not is_admin:
            options = options.model_copy(update={"user_id": user_id})

        orders, total = await self.repo.get_paginated(options)
        return PaginatedResponse[OrderResponse](
            data=[OrderResponse.model_validate(order) for order in orders],
            paging=PagingMeta.create(page=options.page, size=options.size, total=total),
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # STATUS TRANSITIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def pay_order(self, order_id: int, user_id: UUID, is_admin: bool = False) -> OrderResponse:
        """
        Mark a pending order as paid.

        Raises:
            OrderNotFoundError: Missing or not visible to the caller
            InvalidStatusTransitionError: Order isn't pending
        """
        order = await self._get_visible(order_id, user_id, is_admin)
        await self._transition(order, OrderStatus.PAID)
        return OrderResponse.model_validate(await self.repo.get_by_id(order_id))

    async def cancel_order(self, order_id: int, user_id: UUID, is_admin: bool = False) -> OrderResponse:
        """
        Cancel a pending order and put its tickets back on sale.

        Raises:
            OrderNotFoundError: Missing or not visible to the caller
            InvalidStatusTransitionError: Order isn't pending
        """
        order = await self._get_visible(order_id, user_id, is_admin)
        await self._transition(order, OrderStatus.CANCELLED)
        released = await self.ticket_repo.release_order(order_id)
        logger.info("Order tickets released", order_id=order_id, tickets=released)
        return OrderResponse.model_validate(await self.repo.get_by_id(order_id))

    async def _get_visible(self, order_id: int, user_id: UUID, is_admin: bool) -> Order:
        order = await self.repo.get_by_id(order_id)
        if not is_admin and order.user_id != user_id:
            raise OrderNotFoundError(order_id)
        return order

    async def _transition(self, order: Order, target: OrderStatus) -> None:
        if not order.status.can_transition_to(target):
            raise InvalidStatusTransitionError(order.status.value, target.value)
        order.status = target
        await self.session.flush()
        logger.info("Order status changed", order_id=order.id, status=target.value)
