"""
Query Options

Per-entity parameter bags for listing endpoints: optional filters plus
page / size / sort / order.

Normalization:
==============
- page < 1  → 1
- size < 1  → 10
- page > MAX_PAGE → MAX_PAGE, size > MAX_PAGE_SIZE → MAX_PAGE_SIZE, so
  OFFSET and LIMIT always fit a BIGINT
- sort / order are kept verbatim here; the query builder checks them
  against the entity's allow-list and falls back to created_at DESC.

Lifecycle:
==========
    query string ──► XxxQueryOptions ──► repository.get_paginated() ──► discarded

Usage:
======
    opts = EventQueryOptions(name="jazz", page=0, size=-5)
    opts.page, opts.size          # (1, 10)
    opts.filters()                # {"name": "jazz"}
    opts.cache_key("event:list")  # "event:list:3f1c..."
"""

import datetime as dt
import hashlib
import json
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from ticketing_api.shared.models.enums import OrderStatus, TicketType
from ticketing_api.shared.utils.constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE,
    MAX_PAGE_SIZE,
)


PAGINATION_FIELDS = frozenset({"page", "size", "sort", "order"})


def normalize_pagination(page: Optional[int], size: Optional[int]) -> tuple[int, int]:
    """
    Clamp page and size into usable ranges.

    Example:
        normalize_pagination(0, 0)       # (1, 10)
        normalize_pagination(3, 25)      # (3, 25)
        normalize_pagination(3, 10**20)  # (3, 100)
    """
    if page is None or page < 1:
        page = DEFAULT_PAGE
    if size is None or size < 1:
        size = DEFAULT_PAGE_SIZE
    return min(page, MAX_PAGE), min(size, MAX_PAGE_SIZE)


class QueryOptions(BaseModel):
    """
    Base for every entity's query options.

    Subclasses only declare filter fields; everything that isn't
    pagination or sorting is treated as a filter.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    page: int = DEFAULT_PAGE
    size: int = DEFAULT_PAGE_SIZE
    sort: Optional[str] = None
    order: Optional[str] = None

    @field_validator("page")
    @classmethod
    def _normalize_page(cls, value: int) -> int:
        return normalize_pagination(value, DEFAULT_PAGE_SIZE)[0]

    @field_validator("size")
    @classmethod
    def _normalize_size(cls, value: int) -> int:
        return normalize_pagination(DEFAULT_PAGE, value)[1]

    @property
    def offset(self) -> int:
        """Rows to skip for the current page."""
        return (self.page - 1) * self.size

    def filters(self) -> dict[str, Any]:
        """Filter fields that were actually supplied."""
        return self.model_dump(exclude=set(PAGINATION_FIELDS), exclude_none=True)

    def cache_key(self, prefix: str) -> str:
        """
        Deterministic cache key for this exact combination of options.

        Two option objects with the same values always produce the same key,
        regardless of the order the query parameters arrived in.
        """
        payload = json.dumps(self.model_dump(mode="json"), sort_keys=True, separators=(",", ":"))
        digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()[:32]
        return f"{prefix}:{digest}"


class VenueQueryOptions(QueryOptions):
    """Filters for GET /venues."""

    id: Optional[int] = None
    name: Optional[str] = None
    address: Optional[str] = None
    capacity: Optional[int] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None


class EventQueryOptions(QueryOptions):
    """Filters for GET /events. `date` matches the calendar day only."""

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    date: Optional[dt.date] = None
    time: Optional[dt.time] = None
    venue_id: Optional[int] = None


class TicketQueryOptions(QueryOptions):
    """Filters for GET /tickets."""

    id: Optional[str] = None
    event_id: Optional[int] = None
    order_id: Optional[int] = None
    price: Optional[float] = None
    type: Optional[TicketType] = None
    seat_numbers: Optional[list[str]] = None


class OrderQueryOptions(QueryOptions):
    """Filters for GET /orders. Buyers always get user_id forced to themselves."""

    id: Optional[int] = None
    user_id: Optional[UUID] = None
    status: Optional[OrderStatus] = None
    date: Optional[dt.date] = None
