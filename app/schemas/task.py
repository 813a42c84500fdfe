"""
Planning task schemas
"""

from datetime import date
from typing import Literal, Optional

from pydantic import field_validator

from app.schemas.common import CamelModel, PartialUpdate, RequiredText, blank_to_none, reject_null

TaskPriority = Literal["low", "medium", "high"]


class TaskCreate(CamelModel):
    title: RequiredText
    description: Optional[str] = None
    is_completed: bool = False
    due_date: Optional[date] = None
    priority: TaskPriority = "medium"
    category: Optional[str] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def _blank_due_date(cls, value):
        return blank_to_none(value)


class TaskUpdate(PartialUpdate):
    title: Optional[RequiredText] = None
    description: Optional[str] = None
    is_completed: Optional[bool] = None
    due_date: Optional[date] = None
    priority: Optional[TaskPriority] = None
    category: Optional[str] = None

    @field_validator("title", "is_completed", "priority", mode="before")
    @classmethod
    def _not_null(cls, value):
        return reject_null(value)

    @field_validator("due_date", mode="before")
    @classmethod
    def _blank_due_date(cls, value):
        return blank_to_none(value)


class TaskResponse(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    is_completed: bool
    due_date: Optional[date] = None
    priority: str
    category: Optional[str] = None
