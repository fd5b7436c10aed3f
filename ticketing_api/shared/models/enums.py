"""
Enums used across the application.
"""

from enum import Enum


class UserRole(str, Enum):
    """What a user is allowed to do."""

    ADMIN = "admin"
    BUYER = "buyer"


class UserStatus(str, Enum):
    """Account state."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class TicketType(str, Enum):
    """
    Ticket class.

    Requests accept either case ("VIP", "vip"); values are stored lowercase.
    """

    VIP = "vip"
    REGULAR = "regular"

    @classmethod
    def _missing_(cls, value: object):
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    @property
    def seat_prefix(self) -> str:
        """Prefix used when numbering seats, e.g. V-1, R-12."""
        return "V" if self is TicketType.VIP else "R"


class OrderStatus(str, Enum):
    """
    Order lifecycle state.

    pending ──► paid
       │
       └──────► cancelled
    """

    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"

    def can_transition_to(self, target: "OrderStatus") -> bool:
        """Check whether the lifecycle allows moving to `target`."""
        return self is OrderStatus.PENDING and target in (OrderStatus.PAID, OrderStatus.CANCELLED)
