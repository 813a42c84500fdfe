"""
Budget item schemas
"""

from decimal import Decimal
from typing import Optional

from pydantic import field_validator

from app.schemas.common import CamelModel, Money, PartialUpdate, RequiredText, reject_null


class BudgetItemCreate(CamelModel):
    category: RequiredText
    description: RequiredText
    budget_amount: Money
    actual_amount: Money = Decimal("0.00")
    is_paid: bool = False
    notes: Optional[str] = None


class BudgetItemUpdate(PartialUpdate):
    category: Optional[RequiredText] = None
    description: Optional[RequiredText] = None
    budget_amount: Optional[Money] = None
    actual_amount: Optional[Money] = None
    is_paid: Optional[bool] = None
    notes: Optional[str] = None

    @field_validator("category", "description", "budget_amount", "actual_amount", "is_paid", mode="before")
    @classmethod
    def _not_null(cls, value):
        return reject_null(value)


class BudgetItemResponse(CamelModel):
    id: int
    category: str
    description: str
    budget_amount: Decimal
    actual_amount: Decimal
    is_paid: bool
    notes: Optional[str] = None
