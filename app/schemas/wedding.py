"""
Wedding details schemas
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import field_validator

from app.schemas.common import CamelModel, Money, PartialUpdate, RequiredText, reject_null


class WeddingDetailsUpdate(PartialUpdate):
    """Every field is optional; the singleton is never created through the API"""
    bride_name: Optional[RequiredText] = None
    groom_name: Optional[RequiredText] = None
    wedding_date: Optional[date] = None
    venue: Optional[RequiredText] = None
    total_budget: Optional[Money] = None

    @field_validator("bride_name", "groom_name", "wedding_date", "venue", "total_budget", mode="before")
    @classmethod
    def _not_null(cls, value):
        return reject_null(value)


class WeddingDetailsResponse(CamelModel):
    id: int
    bride_name: str
    groom_name: str
    wedding_date: date
    venue: str
    total_budget: Decimal
