"""
Venue Entity Model

A place where events happen.

Model Hierarchy:
================
    Venue
       └── events (Event[])
"""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ticketing_api.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from ticketing_api.shared.models.event import Event


class Venue(Base, TimestampMixin):
    """
    Venue model.

    Attributes:
        id: Auto-increment identifier
        name: Venue name
        address: Street address
        capacity: Maximum attendees
        city, state, zip: Location
    """

    __tablename__ = "venues"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str] = mapped_column(String(100), nullable=False)
    zip: Mapped[str] = mapped_column(String(20), nullable=False)

    events: Mapped[list["Event"]] = relationship(
        "Event",
        back_populates="venue",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Venue(id={self.id}, name={self.name})>"
