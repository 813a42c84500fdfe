"""
Day-of timeline schemas
"""

from typing import Optional

from pydantic import field_validator

from app.schemas.common import CamelModel, PartialUpdate, RequiredText, reject_null


class TimelineEventCreate(CamelModel):
    title: RequiredText
    description: Optional[str] = None
    start_time: RequiredText  # free text, e.g. "14:30" or "2:30 PM"
    end_time: RequiredText
    location: Optional[str] = None
    event_type: RequiredText  # ceremony, reception, photo, ...


class TimelineEventUpdate(PartialUpdate):
    title: Optional[RequiredText] = None
    description: Optional[str] = None
    start_time: Optional[RequiredText] = None
    end_time: Optional[RequiredText] = None
    location: Optional[str] = None
    event_type: Optional[RequiredText] = None

    @field_validator("title", "start_time", "end_time", "event_type", mode="before")
    @classmethod
    def _not_null(cls, value):
        return reject_null(value)


class TimelineEventResponse(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    start_time: str
    end_time: str
    location: Optional[str] = None
    event_type: str
