"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Response Envelope:
==================
Every endpoint answers with the same outer shape:

    {"data": {...}, "errors": null}

Listings add paging metadata:

    {
        "data": [...],
        "paging": {"page": 2, "size": 10, "total_item": 25, "total_page": 3},
        "errors": null
    }

Failures carry no data:

    {"data": null, "errors": {"code": "NOT_FOUND", "message": "...", "details": null}}

Usage:
======
    from ticketing_api.shared.schemas.common import ApiResponse, PaginatedResponse, PagingMeta

    return ApiResponse[VenueResponse](data=venue)
    return PaginatedResponse[VenueResponse](
        data=venues,
        paging=PagingMeta.create(page=1, size=10, total=100),
    )
"""

from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ticketing_api.config.settings import settings


# Generic type for enveloped responses
DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All response schemas should inherit from this class.
    Provides:
    - from_attributes: Allow creating from ORM models
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# ERRORS
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


# ═══════════════════════════════════════════════════════════════════════════════
# ENVELOPES
# ═══════════════════════════════════════════════════════════════════════════════


class PagingMeta(BaseModel):
    """Paging metadata attached to listing responses."""

    page: int = Field(description="Current page number")
    size: int = Field(description="Items per page")
    total_item: int = Field(description="Rows matching the filters")
    total_page: int = Field(description="Number of pages at this size")

    @classmethod
    def create(cls, page: int, size: int, total: int) -> "PagingMeta":
        """
        Build paging metadata, deriving total_page.

        Example:
            PagingMeta.create(page=2, size=10, total=25).total_page  # 3
        """
        total_page = (total + size - 1) // size if size > 0 else 0
        return cls(page=page, size=size, total_item=total, total_page=total_page)


class ApiResponse(BaseModel, Generic[DataT]):
    """Single-object envelope."""

    data: Optional[DataT] = None
    errors: Optional[ErrorDetail] = None


class PaginatedResponse(BaseModel, Generic[DataT]):
    """
    Listing envelope.

    Services build and cache this as a whole, so a cache hit returns the
    page and its paging metadata together.
    """

    data: list[DataT]
    paging: PagingMeta
    errors: Optional[ErrorDetail] = None


class ErrorResponse(BaseModel):
    """Envelope returned by the exception handlers."""

    data: None = None
    errors: ErrorDetail


class MessageResponse(BaseModel):
    """Simple message payload for success confirmations."""

    message: str


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = settings.APP_NAME
    version: str = settings.APP_VERSION
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
