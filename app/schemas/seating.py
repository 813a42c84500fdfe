"""
Seating table schemas
"""

from typing import Literal, Optional

from pydantic import PositiveInt, field_validator

from app.schemas.common import CamelModel, PartialUpdate, reject_null

TableShape = Literal["round", "rectangular"]


class SeatingTableCreate(CamelModel):
    table_number: PositiveInt
    capacity: PositiveInt
    position_x: int = 0  # canvas pixels, bounded by the layout editor
    position_y: int = 0
    shape: TableShape = "round"


class SeatingTableUpdate(PartialUpdate):
    table_number: Optional[PositiveInt] = None
    capacity: Optional[PositiveInt] = None
    position_x: Optional[int] = None
    position_y: Optional[int] = None
    shape: Optional[TableShape] = None

    @field_validator("table_number", "capacity", "position_x", "position_y", "shape", mode="before")
    @classmethod
    def _not_null(cls, value):
        return reject_null(value)


class SeatingTableResponse(CamelModel):
    id: int
    table_number: int
    capacity: int
    position_x: int
    position_y: int
    shape: str
