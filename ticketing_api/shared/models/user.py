"""
User Entity Model

Represents a registered account: either a buyer placing orders or an
admin managing the catalog.

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ name             │ "Ana Lim"                                                 │
│ email            │ "ana@example.com"                                         │
│ password_hash    │ "$2b$12$..."                                              │
│ role             │ "buyer"                                                   │
│ status           │ "active"                                                  │
│ reset_token      │ NULL                                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ticketing_api.shared.models.base import Base, TimestampMixin, str_enum
from ticketing_api.shared.models.enums import UserRole, UserStatus


if TYPE_CHECKING:
    from ticketing_api.shared.models.order import Order


class User(Base, TimestampMixin):
    """
    User model.

    Attributes:
        id: Unique identifier (UUID v4)
        name: Display name
        email: Login email (unique, indexed)
        password_hash: Bcrypt hashed password
        role: admin or buyer
        status: active or inactive
        reset_token: Outstanding password-reset token, if any

    Relationships:
        orders: Orders placed by this user
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(Text, nullable=False)

    role: Mapped[UserRole] = mapped_column(
        str_enum(UserRole),
        nullable=False,
        default=UserRole.BUYER,
    )

    status: Mapped[UserStatus] = mapped_column(
        str_enum(UserStatus),
        nullable=False,
        default=UserStatus.ACTIVE,
    )

    reset_token: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    orders: Mapped[list["Order"]] = relationship(
        "Order",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
