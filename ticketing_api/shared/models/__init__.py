"""
SQLAlchemy Models

Model Hierarchy:
================
    User
       └── orders (Order[])
              └── tickets (Ticket[])

    Venue
       └── events (Event[])
              └── tickets (Ticket[])

Models Overview:
================
- Base / TimestampMixin: declarative base, created_at / updated_at
- User: Registered account (admin or buyer)
- Venue: Place hosting events
- Event: Scheduled happening at a venue
- Ticket: One seat for an event, optionally claimed by an order
- Order: A buyer's claim on tickets

Usage:
======
    from ticketing_api.shared.models import Event, Venue

    event = await repo.get_by_id(event_id)
"""

from ticketing_api.shared.models.base import Base, TimestampMixin
from ticketing_api.shared.models.enums import (
    UserRole,
    UserStatus,
    TicketType,
    OrderStatus,
)
from ticketing_api.shared.models.user import User
from ticketing_api.shared.models.venue import Venue
from ticketing_api.shared.models.event import Event
from ticketing_api.shared.models.ticket import Ticket
from ticketing_api.shared.models.order import Order

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "UserRole",
    "UserStatus",
    "TicketType",
    "OrderStatus",
    # Models
    "User",
    "Venue",
    "Event",
    "Ticket",
    "Order",
]
