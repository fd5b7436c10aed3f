"""
Event Schemas

`date` is the event's calendar date/time; `time` is the door time kept
separately, as clients send it.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from ticketing_api.shared.schemas.common import BaseSchema


class EventCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    date: dt.datetime
    time: dt.time
    venue_id: int = Field(ge=1)


class EventUpdate(BaseModel):
    """Partial update; omitted fields keep their value."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    date: Optional[dt.datetime] = None
    time: Optional[dt.time] = None
    venue_id: Optional[int] = Field(default=None, ge=1)


class EventResponse(BaseSchema):
    id: int
    name: str
    description: Optional[str] = None
    date: dt.datetime
    time: dt.time
    venue_id: int
    created_at: dt.datetime
    updated_at: dt.datetime
