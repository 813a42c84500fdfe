"""
Pydantic schemas package
"""

from .common import *
from .guest import *
from .budget import *
from .timeline import *
from .task import *
from .vendor import *
from .seating import *
from .wedding import *
from .dashboard import *

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "FieldViolation",
    "RsvpStatus",
    "GuestCreate",
    "GuestUpdate",
    "GuestResponse",
    "BudgetItemCreate",
    "BudgetItemUpdate",
    "BudgetItemResponse",
    "TimelineEventCreate",
    "TimelineEventUpdate",
    "TimelineEventResponse",
    "TaskPriority",
    "TaskCreate",
    "TaskUpdate",
    "TaskResponse",
    "VendorCreate",
    "VendorUpdate",
    "VendorResponse",
    "TableShape",
    "SeatingTableCreate",
    "SeatingTableUpdate",
    "SeatingTableResponse",
    "WeddingDetailsUpdate",
    "WeddingDetailsResponse",
    "GuestStats",
    "BudgetSummary",
    "TaskStats",
    "VendorStats",
    "Countdown",
    "SeatingOverview",
    "DashboardOverview",
]
