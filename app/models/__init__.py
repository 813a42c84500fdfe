"""
Database models package
"""

from .guest import Guest
from .budget_item import BudgetItem
from .timeline_event import TimelineEvent
from .task import Task
from .vendor import Vendor
from .seating_table import SeatingTable
from .wedding_details import WeddingDetails
from .id_sequence import IdSequence

__all__ = [
    "Guest",
    "BudgetItem",
    "TimelineEvent",
    "Task",
    "Vendor",
    "SeatingTable",
    "WeddingDetails",
    "IdSequence",
]
