"""
User Repository

Database operations specific to the User model.

Common Operations:
==================
- get_by_email()   → Find user by email address
- email_exists()   → Check if email is already registered
- get_by_reset_token() → Find the user a password-reset token was issued to

Emails are stored lowercased, so lookups lowercase their input too.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing_api.shared.core.exceptions import UserNotFoundError
from ticketing_api.shared.models.user import User
from ticketing_api.shared.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User database operations."""

    not_found_error = UserNotFoundError

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            email: Email address to search for (any case)

        Returns:
            User if found, None otherwise

        SQL Generated:
            SELECT * FROM users WHERE email = 'user@example.com'
        """
        result = await self.session.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        """
        Check if email already exists.

        Example:
            if await repo.email_exists("new@example.com"):
                raise DuplicateResourceError("Email already registered")
        """
        user = await self.get_by_email(email)
        return user is not None

    async def get_by_reset_token(self, token: str) -> Optional[User]:
        """Get the user whose pending reset token equals `token`."""
        result = await self.session.execute(select(User).where(User.reset_token == token))
        return result.scalar_one_or_none()
