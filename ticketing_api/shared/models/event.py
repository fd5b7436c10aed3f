"""
Event Entity Model

A scheduled happening at a venue that tickets are issued for.

Model Hierarchy:
================
    Venue
       └── Event
              └── tickets (Ticket[])

`date` is a full timestamp; date-only filters compare its date portion.
`time` is the advertised start time of day, filtered by equality.
"""

import datetime as dt
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ticketing_api.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from ticketing_api.shared.models.venue import Venue
    from ticketing_api.shared.models.ticket import Ticket


class Event(Base, TimestampMixin):
    """
    Event model.

    Attributes:
        id: Auto-increment identifier
        name: Event title
        description: Free text
        date: When the event takes place
        time: Start time of day
        venue_id: Hosting venue
    """

    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    date: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    time: Mapped[dt.time] = mapped_column(Time, nullable=False)

    venue_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("venues.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    venue: Mapped["Venue"] = relationship("Venue", back_populates="events")

    tickets: Mapped[list["Ticket"]] = relationship(
        "Ticket",
        back_populates="event",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Event(id={self.id}, name={self.name}, venue_id={self.venue_id})>"
