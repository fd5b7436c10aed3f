"""
Order Schemas
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from ticketing_api.shared.models.enums import OrderStatus
from ticketing_api.shared.schemas.common import BaseSchema
from ticketing_api.shared.schemas.ticket import TicketResponse


class OrderCreate(BaseModel):
    """Claim a set of available tickets."""

    ticket_ids: list[str] = Field(min_length=1)


class OrderResponse(BaseSchema):
    id: int
    user_id: UUID
    date: datetime
    total_price: float
    status: OrderStatus
    tickets: list[TicketResponse] = []
