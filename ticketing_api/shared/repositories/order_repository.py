"""
Order Repository

Orders are always loaded together with their tickets, since every order
response lists them.
"""

from typing import Any, Optional

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ticketing_api.shared.core.exceptions import OrderNotFoundError
from ticketing_api.shared.models.order import Order
from ticketing_api.shared.repositories.base import BaseRepository
from ticketing_api.shared.repositories.query_builder import FilterField, FilterKind, QuerySpec


ORDER_QUERY_SPEC = QuerySpec(
    filters={
        "id": FilterField(Order.id),
        "user_id": FilterField(Order.user_id),
        "status": FilterField(Order.status),
        "date": FilterField(Order.date, FilterKind.DATE),
    },
    sortable={
        "id": Order.id,
        "user_id": Order.user_id,
        "userId": Order.user_id,
        "date": Order.date,
        "total_price": Order.total_price,
        "totalPrice": Order.total_price,
        "status": Order.status,
        "created_at": Order.created_at,
    },
    default_order=(Order.created_at.desc(), Order.id.desc()),
    tiebreaker=Order.id,
)


class OrderRepository(BaseRepository[Order]):
    """Repository for Order database operations."""

    query_spec = ORDER_QUERY_SPEC
    not_found_error = OrderNotFoundError

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Order, session)

    def base_query(self) -> Select:
        return select(Order).options(selectinload(Order.tickets))

    async def get(self, record_id: Any) -> Optional[Order]:
        """
        Get an order with its tickets freshly loaded.

        populate_existing makes the ticket list reflect assignments made
        earlier in the same session.
        """
        result = await self.session.execute(
            self.base_query()
            .where(Order.id == record_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
