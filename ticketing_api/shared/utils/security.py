"""
Security Utilities

Password hashing and JWT token management.

Password Hashing:
=================
Uses bcrypt (via passlib) with automatic salt generation.

JWT Tokens:
===========
Uses PyJWT. Every token carries a `type` claim so one kind of token can't
be replayed as another:

    access   → Authorization: Bearer on API calls
    refresh  → POST /users/refresh to get a new pair
    reset    → POST /users/reset-password (single use, also stored on the user)

Usage:
======
    from ticketing_api.shared.utils.security import SecurityUtils

    hashed = SecurityUtils.hash_password("password123")
    SecurityUtils.verify_password("password123", hashed)  # True

    token = SecurityUtils.create_token(
        data={"user_id": "123", "email": "a@b.co", "role": "buyer"},
        secret_key=settings.SECRET_KEY,
        token_type="access",
        expires_delta=timedelta(minutes=60),
    )
    payload = SecurityUtils.decode_token(token, settings.SECRET_KEY, expected_type="access")
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext

from ticketing_api.shared.utils.constants import ACCESS_TOKEN_TYPE


# Password hashing configuration
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
)


class SecurityUtils:
    """
    Security utilities for authentication.

    Provides:
    - Password hashing with bcrypt
    - Typed JWT creation and validation
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORD HASHING
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Bcrypt hash string (includes salt)
        """
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """
        Verify password against bcrypt hash.

        Returns:
            True if password matches, False otherwise
        """
        return pwd_context.verify(plain_password, hashed_password)

    # ═══════════════════════════════════════════════════════════════════════════
    # JWT TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_token(
        data: dict,
        secret_key: str,
        token_type: str = ACCESS_TOKEN_TYPE,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create a signed JWT.

        Args:
            data: Payload claims (user_id, email, role)
            secret_key: Secret key for signing
            token_type: access, refresh or reset
            expires_delta: Lifetime (default: 60 minutes)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        now = datetime.now(timezone.utc)
        to_encode = data.copy()
        to_encode.update({
            "type": token_type,
            "exp": now + (expires_delta or timedelta(minutes=60)),
            "iat": now,
        })
        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_token(
        token: str,
        secret_key: str,
        expected_type: Optional[str] = None,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify a JWT.

        Args:
            token: JWT token string
            secret_key: Secret key used for signing
            expected_type: Reject tokens whose `type` claim differs
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Decoded token payload

        Raises:
            ValueError: If the token is expired, invalid or of the wrong type

        Example:
            try:
                payload = SecurityUtils.decode_token(token, settings.SECRET_KEY, "refresh")
            except ValueError as e:
                raise AuthenticationError(str(e))
        """
        try:
            payload = jwt.decode(token, secret_key, algorithms=[algorithm])
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")

        if expected_type is not None and payload.get("type") != expected_type:
            raise ValueError(f"Invalid token: expected a {expected_type} token")
        return payload
