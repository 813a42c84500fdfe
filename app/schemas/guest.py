"""
Guest-related Pydantic schemas
"""

from typing import Literal, Optional

from pydantic import EmailStr, PositiveInt, field_validator

from app.schemas.common import CamelModel, PartialUpdate, RequiredText, blank_to_none, reject_null

RsvpStatus = Literal["pending", "confirmed", "declined"]


class GuestCreate(CamelModel):
    """Schema for creating a guest"""
    name: RequiredText
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    rsvp_status: RsvpStatus = "pending"
    plus_one: bool = False
    dietary_restrictions: Optional[str] = None
    table_assignment: Optional[PositiveInt] = None  # a seating table number
    notes: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def _blank_email(cls, value):
        return blank_to_none(value)


class GuestUpdate(PartialUpdate):
    """Schema for updating a guest; {"tableAssignment": null} unassigns"""
    name: Optional[RequiredText] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    rsvp_status: Optional[RsvpStatus] = None
    plus_one: Optional[bool] = None
    dietary_restrictions: Optional[str] = None
    table_assignment: Optional[PositiveInt] = None
    notes: Optional[str] = None

    @field_validator("name", "rsvp_status", "plus_one", mode="before")
    @classmethod
    def _not_null(cls, value):
        return reject_null(value)

    @field_validator("email", mode="before")
    @classmethod
    def _blank_email(cls, value):
        return blank_to_none(value)


class GuestResponse(CamelModel):
    """Guest response schema"""
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    rsvp_status: str
    plus_one: bool
    dietary_restrictions: Optional[str] = None
    table_assignment: Optional[int] = None
    notes: Optional[str] = None
