"""
Order Entity Model

A buyer's claim on one or more tickets.

Model Hierarchy:
================
    User
       └── Order
              └── tickets (Ticket[])

Status lifecycle lives on OrderStatus (see enums.py).
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING
import uuid

from sqlalchemy import DateTime, Float, ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ticketing_api.shared.models.base import Base, TimestampMixin, str_enum
from ticketing_api.shared.models.enums import OrderStatus


if TYPE_CHECKING:
    from ticketing_api.shared.models.user import User
    from ticketing_api.shared.models.ticket import Ticket


class Order(Base, TimestampMixin):
    """
    Order model.

    Attributes:
        id: Auto-increment identifier
        user_id: Buyer
        date: When the order was placed
        total_price: Sum of the claimed tickets' prices
        status: pending, paid or cancelled
    """

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    total_price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    status: Mapped[OrderStatus] = mapped_column(
        str_enum(OrderStatus),
        nullable=False,
        default=OrderStatus.PENDING,
        index=True,
    )

    user: Mapped["User"] = relationship("User", back_populates="orders")

    tickets: Mapped[list["Ticket"]] = relationship("Ticket", back_populates="order")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Order(id={self.id}, user_id={self.user_id}, status={self.status})>"
