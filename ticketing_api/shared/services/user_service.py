"""
User Service

Business logic for registration, authentication and profile management.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- External services (email)
- Domain logic

Token Flow:
===========
    register ─► user (no tokens; client logs in next)
    login    ─► access + refresh
    refresh  ─► new access + refresh (refresh token required)
    forgot   ─► reset token stored on the user and emailed
    reset    ─► password replaced, stored reset token cleared

Usage:
======
    from ticketing_api.shared.services.user_service import UserService

    service = UserService(db)
    auth = await service.login(UserLogin(email="a@b.co", password="secret123"))
"""

from datetime import timedelta
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing_api.config.settings import settings
from ticketing_api.shared.adapters.email_adapter import EmailSender, get_email_sender
from ticketing_api.shared.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DuplicateResourceError,
)
from ticketing_api.shared.core.logging import get_logger
from ticketing_api.shared.models.enums import UserStatus
from ticketing_api.shared.models.user import User
from ticketing_api.shared.repositories.user_repository import UserRepository
from ticketing_api.shared.schemas.user import (
    AuthResponse,
    TokenResponse,
    UserCreate,
    UserLogin,
    UserResponse,
    UserUpdate,
)
from ticketing_api.shared.utils.constants import (
    ACCESS_TOKEN_TYPE,
    REFRESH_TOKEN_TYPE,
    RESET_TOKEN_TYPE,
)
from ticketing_api.shared.utils.security import SecurityUtils

logger = get_logger("ticketing.users")


class UserService:
    """
    Service for user and authentication business logic.

    Attributes:
        session: Database session
        repo: UserRepository instance
        email_sender: Where password-reset mail goes
    """

    def __init__(self, session: AsyncSession, email_sender: Optional[EmailSender] = None) -> None:
        self.session = session
        self.repo = UserRepository(session)
        self.email_sender = email_sender or get_email_sender()

    # ═══════════════════════════════════════════════════════════════════════════
    # REGISTRATION & LOGIN
    # ═══════════════════════════════════════════════════════════════════════════

    async def register(self, data: UserCreate) -> UserResponse:
        """
        Register a new buyer account.

        Raises:
            DuplicateResourceError: If email already registered
        """
        email = data.email.lower()
        if await self.repo.email_exists(email):
            raise DuplicateResourceError("Email already registered")

        try:
            user = await self.repo.create(
                name=data.name,
                email=email,
                password_hash=SecurityUtils.hash_password(data.password),
            )
        except IntegrityError:
            # a concurrent registration took the email after the check
            raise DuplicateResourceError("Email already registered")
        logger.info("User registered", user_id=str(user.id))
        return UserResponse.model_validate(user)

    async def login(self, data: UserLogin) -> AuthResponse:
        """
        Authenticate user and issue a token pair.

        Raises:
            AuthenticationError: If credentials are invalid
            AuthorizationError: If the account is inactive
        """
        user = await self.repo.get_by_email(data.email)
        if not user or not SecurityUtils.verify_password(data.password, user.password_hash):
            raise AuthenticationError("Invalid email or password")
        if user.status != UserStatus.ACTIVE:
            raise AuthorizationError("Account is inactive")

        tokens = self._issue_tokens(user)
        logger.info("User logged in", user_id=str(user.id))
        return AuthResponse(user=UserResponse.model_validate(user), **tokens.model_dump())

    async def refresh(self, refresh_token: str) -> TokenResponse:
        """
        Exchange a refresh token for a new token pair.

        Raises:
            AuthenticationError: Token invalid, expired, not a refresh token,
                or its user no longer exists
        """
        try:
            payload = SecurityUtils.decode_token(
                refresh_token,
                settings.SECRET_KEY,
                expected_type=REFRESH_TOKEN_TYPE,
                algorithm=settings.JWT_ALGORITHM,
            )
            user_id = UUID(payload["user_id"])
        except (ValueError, KeyError) as e:
            raise AuthenticationError(str(e))

        user = await self.repo.get(user_id)
        if user is None:
            raise AuthenticationError("User no longer exists")
        return self._issue_tokens(user)

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_profile(self, user_id: UUID) -> UserResponse:
        """Raises UserNotFoundError when the account is gone."""
        return UserResponse.model_validate(await self.repo.get_by_id(user_id))

    async def update_profile(self, user_id: UUID, data: UserUpdate) -> UserResponse:
        """
        Update name, email and/or password.

        Raises:
            UserNotFoundError: Account is gone
            DuplicateResourceError: New email belongs to someone else
        """
        user = await self.repo.get_by_id(user_id)
        changes: dict = {"name": data.name}

        if data.email is not None and data.email.lower() != user.email:
            email = data.email.lower()
            if await self.repo.email_exists(email):
                raise DuplicateResourceError("Email already registered")
            changes["email"] = email
        if data.password is not None:
            changes["password_hash"] = SecurityUtils.hash_password(data.password)

        try:
            user = await self.repo.update(user_id, **changes)
        except IntegrityError:
            raise DuplicateResourceError("Email already registered")
        logger.info(
            "User profile updated",
            user_id=str(user_id),
            fields=sorted(field for field, value in changes.items() if value is not None),
        )
        return UserResponse.model_validate(user)

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORD RESET
    # ═══════════════════════════════════════════════════════════════════════════

    async def request_password_reset(self, email: str) -> None:
        """
        Issue a reset token and email it.

        Unknown emails return silently so the endpoint can't be used to
        discover accounts.
        """
        user = await self.repo.get_by_email(email)
        if user is None:
            logger.info("Password reset requested for unknown email")
            return

        token = SecurityUtils.create_token(
            data={"user_id": str(user.id), "email": user.email},
            secret_key=settings.SECRET_KEY,
            token_type=RESET_TOKEN_TYPE,
            expires_delta=timedelta(minutes=settings.RESET_TOKEN_EXPIRE_MINUTES),
            algorithm=settings.JWT_ALGORITHM,
        )
        await self.repo.update(user.id, reset_token=token)
        await self.email_sender.send_password_reset(user.email, token)

    async def reset_password(self, token: str, new_password: str) -> None:
        """
        Set a new password using a reset token. The token works once.

        Raises:
            AuthenticationError: Token invalid, expired, or already used
        """
        try:
            SecurityUtils.decode_token(
                token,
                settings.SECRET_KEY,
                expected_type=RESET_TOKEN_TYPE,
                algorithm=settings.JWT_ALGORITHM,
            )
        except ValueError as e:
            raise AuthenticationError(str(e))

        user = await self.repo.get_by_reset_token(token)
        if user is None:
            raise AuthenticationError("Reset token has already been used")

        user.password_hash = SecurityUtils.hash_password(new_password)
        user.reset_token = None
        await self.session.flush()
        logger.info("Password reset", user_id=str(user.id))

    # ═══════════════════════════════════════════════════════════════════════════
    # TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    def _issue_tokens(self, user: User) -> TokenResponse:
        claims = {"user_id": str(user.id), "email": user.email, "role": user.role.value}
        access_token = SecurityUtils.create_token(
            data=claims,
            secret_key=settings.SECRET_KEY,
            token_type=ACCESS_TOKEN_TYPE,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            algorithm=settings.JWT_ALGORITHM,
        )
        refresh_token = SecurityUtils.create_token(
            data=claims,
            secret_key=settings.SECRET_KEY,
            token_type=REFRESH_TOKEN_TYPE,
            expires_delta=timedelta(minutes=settings.REFRESH_TOKEN_EXPIRE_MINUTES),
            algorithm=settings.JWT_ALGORITHM,
        )
        return TokenResponse(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        )
