"""
Ticket Schemas

Tickets are issued in bulk: one TicketCreate produces `count` seats.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from ticketing_api.shared.models.enums import TicketType
from ticketing_api.shared.schemas.common import BaseSchema
from ticketing_api.shared.utils.constants import MAX_TICKETS_PER_REQUEST


class TicketCreate(BaseModel):
    """
    Bulk issuance request.

    Example:
        {"event_id": 4, "price": 150.0, "type": "VIP", "count": 20}
    """

    event_id: int = Field(ge=1)
    price: float = Field(gt=0)
    type: TicketType
    count: int = Field(ge=1, le=MAX_TICKETS_PER_REQUEST)

    @field_validator("type", mode="before")
    @classmethod
    def _lowercase_type(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


class TicketUpdate(BaseModel):
    """Partial update; omitted fields keep their value."""

    event_id: Optional[int] = Field(default=None, ge=1)
    order_id: Optional[int] = Field(default=None, ge=1)
    price: Optional[float] = Field(default=None, gt=0)
    type: Optional[TicketType] = None
    seat_number: Optional[str] = Field(default=None, min_length=1, max_length=20)

    @field_validator("type", mode="before")
    @classmethod
    def _lowercase_type(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


class TicketResponse(BaseSchema):
    id: str
    event_id: int
    order_id: Optional[int] = None
    price: float
    type: TicketType
    seat_number: str
