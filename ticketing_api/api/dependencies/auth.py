"""
Authentication Dependencies

FastAPI dependencies for user authentication and authorization.

Dependency Hierarchy:
=====================
    get_current_user_token()  ← Extract and validate the access JWT
           │
           ▼
    get_current_user()        ← Normalize claims to {user_id, email, role}
           │
           ▼
    require_admin()           ← 403 unless role == admin

Type Aliases:
=============
    CurrentUser - Any authenticated user
    AdminUser   - Authenticated admin

Usage:
======
    @router.post("/venues")
    async def create_venue(data: VenueCreate, admin: AdminUser): ...

    @router.get("/orders")
    async def list_orders(current_user: CurrentUser):
        current_user["user_id"]   # UUID
        current_user["is_admin"]  # bool
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ticketing_api.config.settings import settings
from ticketing_api.shared.core.exceptions import AuthenticationError, AuthorizationError
from ticketing_api.shared.core.logging import log_context
from ticketing_api.shared.models.enums import UserRole
from ticketing_api.shared.utils.constants import ACCESS_TOKEN_TYPE
from ticketing_api.shared.utils.security import SecurityUtils


# Missing headers are reported by get_current_user_token as a 401
security = HTTPBearer(auto_error=False)


async def get_current_user_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> dict:
    """
    Extract and validate the access token from the Authorization header.

    Raises:
        AuthenticationError: If token is missing, invalid, expired, or
            not an access token
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    try:
        return SecurityUtils.decode_token(
            credentials.credentials,
            settings.SECRET_KEY,
            expected_type=ACCESS_TOKEN_TYPE,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def get_current_user(
    token: Annotated[dict, Depends(get_current_user_token)],
) -> dict:
    """
    Current authenticated user from token claims.

    Returns:
        {"user_id": UUID, "email": str, "role": UserRole, "is_admin": bool}

    Raises:
        AuthenticationError: If claims are missing or malformed
    """
    try:
        user_id = UUID(token["user_id"])
        role = UserRole(token.get("role", UserRole.BUYER.value))
    except (KeyError, TypeError, ValueError) as e:
        raise AuthenticationError("Invalid token payload") from e

    log_context(user_id=str(user_id))

    return {
        "user_id": user_id,
        "email": token.get("email"),
        "role": role,
        "is_admin": role == UserRole.ADMIN,
    }


async def require_admin(
    current_user: Annotated[dict, Depends(get_current_user)],
) -> dict:
    """
    Raises:
        AuthorizationError: If the user isn't an admin
    """
    if not current_user["is_admin"]:
        raise AuthorizationError("Admin role required")
    return current_user


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

# Authenticated user (most common dependency)
CurrentUser = Annotated[dict, Depends(get_current_user)]

# Catalog mutations
AdminUser = Annotated[dict, Depends(require_admin)]
