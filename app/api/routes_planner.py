"""
CRUD routes for the planner collections
"""

from app.api.crud import build_crud_router
from app.schemas import (
    BudgetItemCreate,
    BudgetItemResponse,
    BudgetItemUpdate,
    GuestCreate,
    GuestResponse,
    GuestUpdate,
    SeatingTableCreate,
    SeatingTableResponse,
    SeatingTableUpdate,
    TaskCreate,
    TaskResponse,
    TaskUpdate,
    TimelineEventCreate,
    TimelineEventResponse,
    TimelineEventUpdate,
    VendorCreate,
    VendorResponse,
    VendorUpdate,
)
from app.services.seating_service import SeatingService


def check_guest_create(storage, fields):
    return SeatingService.validate_guest_assignment(
        fields.get("table_assignment"),
        storage.seating_tables.list(),
        storage.guests.list(),
    )


def check_guest_update(storage, guest, changes):
    if "table_assignment" not in changes or changes["table_assignment"] == guest.get("table_assignment"):
        return []
    return SeatingService.validate_guest_assignment(
        changes["table_assignment"],
        storage.seating_tables.list(),
        storage.guests.list(),
        exclude_guest_id=guest["id"],
    )


def check_table_update(storage, table, changes):
    return SeatingService.validate_table_update(
        table, changes, storage.seating_tables.list(), storage.guests.list()
    )


def release_table_guests(storage, table):
    released = SeatingService.release_table(storage, table)
    return lambda: SeatingService.restore_table(storage, table, released)


guests_router = build_crud_router(
    "guests", "Guest", "guests",
    GuestCreate, GuestUpdate, GuestResponse,
    check_create=check_guest_create,
    check_update=check_guest_update,
)

budget_router = build_crud_router(
    "budget_items", "Budget item", "budget items",
    BudgetItemCreate, BudgetItemUpdate, BudgetItemResponse,
)

timeline_router = build_crud_router(
    "timeline_events", "Timeline event", "timeline events",
    TimelineEventCreate, TimelineEventUpdate, TimelineEventResponse,
)

tasks_router = build_crud_router(
    "tasks", "Task", "tasks",
    TaskCreate, TaskUpdate, TaskResponse,
)

vendors_router = build_crud_router(
    "vendors", "Vendor", "vendors",
    VendorCreate, VendorUpdate, VendorResponse,
)

seating_router = build_crud_router(
    "seating_tables", "Seating table", "seating tables",
    SeatingTableCreate, SeatingTableUpdate, SeatingTableResponse,
    check_update=check_table_update,
    before_delete=release_table_guests,
)
