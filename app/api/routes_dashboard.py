"""
Read-only derived views: dashboard cards, budget breakdown, seating occupancy
"""

from typing import List

from fastapi import APIRouter, Depends

from app.schemas.dashboard import (
    BudgetSummary,
    Countdown,
    DashboardOverview,
    GuestStats,
    SeatingOverview,
    TaskStats,
    VendorStats,
)
from app.schemas.timeline import TimelineEventResponse
from app.services.dashboard_service import DashboardService
from app.services.repositories import get_storage
from app.services.seating_service import SeatingService

router = APIRouter()

@router.get("", response_model=DashboardOverview)
async def get_dashboard(storage=Depends(get_storage)):
    """Everything the planner's home page shows"""
    return DashboardService.overview(storage)

@router.get("/guests", response_model=GuestStats)
async def get_guest_stats(storage=Depends(get_storage)):
    return DashboardService.guest_stats(storage.guests.list())

@router.get("/budget", response_model=BudgetSummary)
async def get_budget_summary(storage=Depends(get_storage)):
    """Totals, per-category breakdown and the gap to the planned total budget"""
    wedding = storage.wedding_details.get()
    return DashboardService.budget_summary(storage.budget_items.list(), wedding.get("total_budget"))

@router.get("/tasks", response_model=TaskStats)
async def get_task_stats(storage=Depends(get_storage)):
    return DashboardService.task_stats(storage.tasks.list())

@router.get("/vendors", response_model=VendorStats)
async def get_vendor_stats(storage=Depends(get_storage)):
    return DashboardService.vendor_stats(storage.vendors.list())

@router.get("/countdown", response_model=Countdown)
async def get_countdown(storage=Depends(get_storage)):
    return DashboardService.countdown(storage.wedding_details.get().get("wedding_date"))

@router.get("/seating", response_model=SeatingOverview)
async def get_seating_overview(storage=Depends(get_storage)):
    """Occupancy per table, unassigned guests and assignments to missing tables"""
    return SeatingService.get_seating_overview(storage.seating_tables.list(), storage.guests.list())

@router.get("/timeline", response_model=List[TimelineEventResponse])
async def get_sorted_timeline(storage=Depends(get_storage)):
    """Day-of timeline ordered by start time"""
    return DashboardService.sorted_timeline(storage.timeline_events.list())
