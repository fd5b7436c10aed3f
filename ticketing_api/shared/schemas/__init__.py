"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Response envelopes, paging metadata, errors, health
- query_options: Per-entity filter/sort/pagination bags for listings
- user: Registration, login, tokens, profile
- venue / event / ticket / order: Catalog and purchase payloads

Usage:
======
    from ticketing_api.shared.schemas import ApiResponse, VenueCreate, VenueResponse
    from ticketing_api.shared.schemas.query_options import VenueQueryOptions
"""

from ticketing_api.shared.schemas.common import (
    BaseSchema,
    ApiResponse,
    PaginatedResponse,
    PagingMeta,
    ErrorDetail,
    ErrorResponse,
    MessageResponse,
    HealthResponse,
)
from ticketing_api.shared.schemas.query_options import (
    QueryOptions,
    VenueQueryOptions,
    EventQueryOptions,
    TicketQueryOptions,
    OrderQueryOptions,
)
from ticketing_api.shared.schemas.user import (
    UserCreate,
    UserLogin,
    UserUpdate,
    RefreshTokenRequest,
    ForgotPasswordRequest,
    ResetPasswordRequest,
    UserResponse,
    TokenResponse,
    AuthResponse,
)
from ticketing_api.shared.schemas.venue import VenueCreate, VenueUpdate, VenueResponse
from ticketing_api.shared.schemas.event import EventCreate, EventUpdate, EventResponse
from ticketing_api.shared.schemas.ticket import TicketCreate, TicketUpdate, TicketResponse
from ticketing_api.shared.schemas.order import OrderCreate, OrderResponse

__all__ = [
    # Common
    "BaseSchema",
    "ApiResponse",
    "PaginatedResponse",
    "PagingMeta",
    "ErrorDetail",
    "ErrorResponse",
    "MessageResponse",
    "HealthResponse",
    # Query options
    "QueryOptions",
    "VenueQueryOptions",
    "EventQueryOptions",
    "TicketQueryOptions",
    "OrderQueryOptions",
    # User
    "UserCreate",
    "UserLogin",
    "UserUpdate",
    "RefreshTokenRequest",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "UserResponse",
    "TokenResponse",
    "AuthResponse",
    # Catalog and orders
    "VenueCreate",
    "VenueUpdate",
    "VenueResponse",
    "EventCreate",
    "EventUpdate",
    "EventResponse",
    "TicketCreate",
    "TicketUpdate",
    "TicketResponse",
    "OrderCreate",
    "OrderResponse",
]
