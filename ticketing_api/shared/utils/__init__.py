"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing and JWT management
- constants: Application constants

Usage:
======
    from ticketing_api.shared.utils.security import SecurityUtils
    from ticketing_api.shared.utils.constants import DEFAULT_PAGE_SIZE
"""

from ticketing_api.shared.utils.security import SecurityUtils
from ticketing_api.shared.utils.constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE,
    MAX_PAGE_SIZE,
    SORT_DIRECTIONS,
    MAX_TICKETS_PER_REQUEST,
    ACCESS_TOKEN_TYPE,
    REFRESH_TOKEN_TYPE,
    RESET_TOKEN_TYPE,
)

__all__ = [
    "SecurityUtils",
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE",
    "MAX_PAGE_SIZE",
    "SORT_DIRECTIONS",
    "MAX_TICKETS_PER_REQUEST",
    "ACCESS_TOKEN_TYPE",
    "REFRESH_TOKEN_TYPE",
    "RESET_TOKEN_TYPE",
]
