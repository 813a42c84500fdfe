"""
Derived-view schemas for dashboards and the seating overview
"""

from decimal import Decimal
from typing import Dict, List, Optional

from app.schemas.common import CamelModel
from app.schemas.timeline import TimelineEventResponse
from app.schemas.wedding import WeddingDetailsResponse


class GuestStats(CamelModel):
    total: int
    confirmed: int
    pending: int
    declined: int
    plus_ones: int
    rsvp_rate: float  # percent confirmed


class BudgetCategory(CamelModel):
    category: str
    item_count: int
    budgeted: Decimal
    actual: Decimal
    remaining: Decimal
    percent_used: float


class BudgetSummary(CamelModel):
    total_budgeted: Decimal
    total_actual: Decimal
    remaining: Decimal
    percent_used: float
    over_budget: bool
    paid_count: int
    unpaid_count: int
    categories: List[BudgetCategory]
    planned_total: Optional[Decimal] = None  # WeddingDetails.totalBudget
    unallocated: Optional[Decimal] = None  # planned_total - total_budgeted


class TaskStats(CamelModel):
    total: int
    completed: int
    completion_rate: float
    open_by_priority: Dict[str, int]


class VendorStats(CamelModel):
    total: int
    booked: int
    booking_rate: float
    total_contracted: Decimal
    by_category: Dict[str, int]


class Countdown(CamelModel):
    days: int = 0
    hours: int = 0
    minutes: int = 0


class SeatedGuest(CamelModel):
    id: int
    name: str
    rsvp_status: str
    plus_one: bool


class TableOccupancy(CamelModel):
    table_id: int
    table_number: int
    capacity: int
    shape: str
    position_x: int
    position_y: int
    occupied: int
    available: int  # seats left at this table number (pooled across shared numbers), negative when over-assigned
    guests: List[SeatedGuest]


class SeatingOverview(CamelModel):
    tables: List[TableOccupancy]
    total_tables: int
    total_capacity: int
    assigned_guests: int
    confirmed_guests: int
    unassigned: List[SeatedGuest]
    dangling: List[SeatedGuest]  # assigned to a table number no table carries
    overbooked_tables: List[int]


class DashboardOverview(CamelModel):
    wedding: WeddingDetailsResponse
    countdown: Countdown
    guests: GuestStats
    budget: BudgetSummary
    tasks: TaskStats
    vendors: VendorStats
    timeline: List[TimelineEventResponse]  # ordered by start time
