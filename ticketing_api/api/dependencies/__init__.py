"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Cache: get_cache_adapter(), Cache
- Authentication: get_current_user(), require_admin(), CurrentUser, AdminUser
- Listing queries: get_<entity>_query()
- Services: get_<entity>_service()

Type Aliases:
=============
    # Instead of this:
    async def handler(user: dict = Depends(require_admin)):

    # Write this:
    async def handler(user: AdminUser):
"""

from ticketing_api.api.dependencies.database import (
    get_db,
    DbSession,
)
from ticketing_api.api.dependencies.cache import (
    get_cache_adapter,
    Cache,
)
from ticketing_api.api.dependencies.auth import (
    get_current_user,
    get_current_user_token,
    require_admin,
    CurrentUser,
    AdminUser,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Cache
    "get_cache_adapter",
    "Cache",
    # Authentication
    "get_current_user",
    "get_current_user_token",
    "require_admin",
    "CurrentUser",
    "AdminUser",
]
