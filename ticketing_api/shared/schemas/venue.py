"""
Venue Schemas
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ticketing_api.shared.schemas.common import BaseSchema


class VenueCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    address: str = Field(min_length=1, max_length=255)
    capacity: int = Field(ge=1)
    city: str = Field(min_length=1, max_length=100)
    state: str = Field(min_length=1, max_length=100)
    zip: str = Field(min_length=1, max_length=20)


class VenueUpdate(BaseModel):
    """Partial update; omitted fields keep their value."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    address: Optional[str] = Field(default=None, min_length=1, max_length=255)
    capacity: Optional[int] = Field(default=None, ge=1)
    city: Optional[str] = Field(default=None, min_length=1, max_length=100)
    state: Optional[str] = Field(default=None, min_length=1, max_length=100)
    zip: Optional[str] = Field(default=None, min_length=1, max_length=20)


class VenueResponse(BaseSchema):
    id: int
    name: str
    address: str
    capacity: int
    city: str
    state: str
    zip: str
    created_at: datetime
    updated_at: datetime
