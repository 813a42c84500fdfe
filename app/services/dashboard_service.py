"""
Dashboard statistics computed from the current snapshot of each collection.

Nothing here is cached; every call recomputes from the records it is given.
"""

from collections import OrderedDict
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from app.schemas.dashboard import (
    BudgetCategory,
    BudgetSummary,
    Countdown,
    DashboardOverview,
    GuestStats,
    TaskStats,
    VendorStats,
)
from app.schemas.timeline import TimelineEventResponse
from app.schemas.wedding import WeddingDetailsResponse

Record = Dict[str, Any]

TIME_FORMATS = ("%H:%M", "%H:%M:%S", "%I:%M %p", "%I:%M%p", "%I %p", "%I%p")


def percent(part, whole) -> float:
    """part/whole as a percentage with one decimal place; 0 when whole is 0"""
    if not whole:
        return 0.0
    return round(float(part) / float(whole) * 100, 1)


def parse_time_of_day(value: str) -> Optional[time]:
    text = (value or "").strip().upper()
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    return None


class DashboardService:
    """Aggregates behind the planner's dashboard cards"""

    @staticmethod
    def guest_stats(guests: List[Record]) -> GuestStats:
        counts = {"pending": 0, "confirmed": 0, "declined": 0}
        for guest in guests:
            status = guest.get("rsvp_status")
            if status in counts:
                counts[status] += 1

        return GuestStats(
            total=len(guests),
            confirmed=counts["confirmed"],
            pending=counts["pending"],
            declined=counts["declined"],
            plus_ones=sum(1 for guest in guests if guest.get("plus_one")),
            rsvp_rate=percent(counts["confirmed"], len(guests)),
        )

    @staticmethod
    def budget_summary(items: List[Record], planned_total: Optional[Decimal] = None) -> BudgetSummary:
        total_budgeted = sum((Decimal(item["budget_amount"]) for item in items), Decimal("0"))
        total_actual = sum((Decimal(item.get("actual_amount") or 0) for item in items), Decimal("0"))

        grouped: "OrderedDict[str, List[Record]]" = OrderedDict()
        for item in items:
            grouped.setdefault(item["category"], []).append(item)

        categories = []
        for category, category_items in grouped.items():
            budgeted = sum((Decimal(item["budget_amount"]) for item in category_items), Decimal("0"))
            actual = sum((Decimal(item.get("actual_amount") or 0) for item in category_items), Decimal("0"))
            categories.append(BudgetCategory(
                category=category,
                item_count=len(category_items),
                budgeted=budgeted,
                actual=actual,
                remaining=budgeted - actual,
                percent_used=percent(actual, budgeted),
            ))

        paid_count = sum(1 for item in items if item.get("is_paid"))
        return BudgetSummary(
            total_budgeted=total_budgeted,
            total_actual=total_actual,
            remaining=total_budgeted - total_actual,
            percent_used=percent(total_actual, total_budgeted),
            over_budget=total_actual > total_budgeted,
            paid_count=paid_count,
            unpaid_count=len(items) - paid_count,
            categories=categories,
            planned_total=planned_total,
            unallocated=planned_total - total_budgeted if planned_total is not None else None,
        )

    @staticmethod
    def task_stats(tasks: List[Record]) -> TaskStats:
        completed = sum(1 for task in tasks if task.get("is_completed"))
        open_by_priority = {"high": 0, "medium": 0, "low": 0}
        for task in tasks:
            if not task.get("is_completed") and task.get("priority") in open_by_priority:
                open_by_priority[task["priority"]] += 1

        return TaskStats(
            total=len(tasks),
            completed=completed,
            completion_rate=percent(completed, len(tasks)),
            open_by_priority=open_by_priority,
        )

    @staticmethod
    def vendor_stats(vendors: List[Record]) -> VendorStats:
        booked = [vendor for vendor in vendors if vendor.get("is_booked")]
        by_category: Dict[str, int] = {}
        for vendor in vendors:
            by_category[vendor["category"]] = by_category.get(vendor["category"], 0) + 1

        return VendorStats(
            total=len(vendors),
            booked=len(booked),
            booking_rate=percent(len(booked), len(vendors)),
            # unbooked quotes do not count, and a booking without an amount counts as 0
            total_contracted=sum((Decimal(vendor.get("contract_amount") or 0) for vendor in booked), Decimal("0")),
            by_category=by_category,
        )

    @staticmethod
    def countdown(wedding_date: Union[date, str, None], now: Optional[datetime] = None) -> Countdown:
        """Whole days, hours and minutes until midnight of the wedding day"""
        if not wedding_date:
            return Countdown()
        if isinstance(wedding_date, str):
            wedding_date = date.fromisoformat(wedding_date)

        now = now or datetime.now()
        remaining = datetime.combine(wedding_date, time.min) - now
        if remaining.total_seconds() <= 0:
            return Countdown()

        return Countdown(
            days=remaining.days,
            hours=remaining.seconds // 3600,
            minutes=(remaining.seconds % 3600) // 60,
        )

    @staticmethod
    def sorted_timeline(events: List[Record]) -> List[Record]:
        """Order by start time; times that do not parse keep their order at the end"""
        def sort_key(indexed):
            index, event = indexed
            start = parse_time_of_day(event.get("start_time"))
            return (0, start, index) if start is not None else (1, time.min, index)

        return [event for _, event in sorted(enumerate(events), key=sort_key)]

    @staticmethod
    def overview(storage, now: Optional[datetime] = None) -> DashboardOverview:
        wedding = storage.wedding_details.get()
        return DashboardOverview(
            wedding=WeddingDetailsResponse.model_validate(wedding),
            countdown=DashboardService.countdown(wedding.get("wedding_date"), now),
            guests=DashboardService.guest_stats(storage.guests.list()),
            budget=DashboardService.budget_summary(storage.budget_items.list(), wedding.get("total_budget")),
            tasks=DashboardService.task_stats(storage.tasks.list()),
            vendors=DashboardService.vendor_stats(storage.vendors.list()),
            timeline=[
                TimelineEventResponse.model_validate(event)
                for event in DashboardService.sorted_timeline(storage.timeline_events.list())
            ],
        )
