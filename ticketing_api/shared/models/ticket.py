"""
Ticket Entity Model

One seat for one event. A ticket without an order is available; once an
order claims it, `order_id` is set until that order is cancelled.

Model Hierarchy:
================
    Event ──┐
            ├── Ticket
    Order ──┘  (order_id nullable)
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ticketing_api.shared.models.base import Base, TimestampMixin, str_enum
from ticketing_api.shared.models.enums import TicketType


if TYPE_CHECKING:
    from ticketing_api.shared.models.event import Event
    from ticketing_api.shared.models.order import Order


class Ticket(Base, TimestampMixin):
    """
    Ticket model.

    Attributes:
        id: UUID string identifier
        event_id: Event this ticket admits to
        order_id: Order holding the ticket, NULL while available
        price: Ticket price
        type: vip or regular
        seat_number: e.g. "V-3", "R-120", unique within the event
    """

    __tablename__ = "tickets"
    __table_args__ = (
        UniqueConstraint("event_id", "seat_number", name="uq_tickets_event_seat"),
    )

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    event_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    order_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("orders.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    price: Mapped[float] = mapped_column(Float, nullable=False)
    type: Mapped[TicketType] = mapped_column(str_enum(TicketType), nullable=False)
    seat_number: Mapped[str] = mapped_column(String(20), nullable=False)

    event: Mapped["Event"] = relationship("Event", back_populates="tickets")
    order: Mapped[Optional["Order"]] = relationship("Order", back_populates="tickets")

    @property
    def is_available(self) -> bool:
        return self.order_id is None

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Ticket(id={self.id}, event_id={self.event_id}, seat={self.seat_number})>"
