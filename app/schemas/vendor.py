"""
Vendor directory schemas
"""

from decimal import Decimal
from typing import Optional

from pydantic import EmailStr, field_validator

from app.schemas.common import (
    CamelModel,
    Money,
    PartialUpdate,
    RequiredText,
    blank_to_none,
    check_website,
    reject_null,
)


class VendorCreate(CamelModel):
    name: RequiredText
    category: RequiredText
    contact_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    website: Optional[str] = None
    address: Optional[str] = None
    contract_amount: Optional[Money] = None
    is_booked: bool = False
    notes: Optional[str] = None

    @field_validator("email", "website", "contract_amount", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)

    @field_validator("website")
    @classmethod
    def _valid_website(cls, value):
        return check_website(value)


class VendorUpdate(PartialUpdate):
    name: Optional[RequiredText] = None
    category: Optional[RequiredText] = None
    contact_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    website: Optional[str] = None
    address: Optional[str] = None
    contract_amount: Optional[Money] = None
    is_booked: Optional[bool] = None
    notes: Optional[str] = None

    @field_validator("name", "category", "is_booked", mode="before")
    @classmethod
    def _not_null(cls, value):
        return reject_null(value)

    @field_validator("email", "website", "contract_amount", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)

    @field_validator("website")
    @classmethod
    def _valid_website(cls, value):
        return check_website(value)


class VendorResponse(CamelModel):
    id: int
    name: str
    category: str
    contact_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    contract_amount: Optional[Decimal] = None
    is_booked: bool
    notes: Optional[str] = None
