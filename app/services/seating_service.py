"""
Seating arrangement and validation service
"""

import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional

from app.schemas.dashboard import SeatedGuest, SeatingOverview, TableOccupancy

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

class SeatingService:
    """Guests reference tables by table number; these helpers keep the two in step"""

    @staticmethod
    def get_table_guests(table_number: int, guests: List[Record]) -> List[Record]:
        """Guests whose assignment points at a table number, in guest-list order"""
        return [guest for guest in guests if guest.get("table_assignment") == table_number]

    @staticmethod
    def get_seating_overview(tables: List[Record], guests: List[Record]) -> SeatingOverview:
        """Occupancy per table plus the unassigned and dangling guests"""
        seated_by_number: Dict[int, List[Record]] = defaultdict(list)
        unassigned = []
        for guest in guests:
            number = guest.get("table_assignment")
            if number is None:
                unassigned.append(guest)
            else:
                seated_by_number[number].append(guest)

        # tables sharing a number share their seats
        capacity_by_number: Dict[int, int] = defaultdict(int)
        for table in tables:
            capacity_by_number[table["table_number"]] += table["capacity"]

        occupancy = []
        overbooked = set()
        for table in tables:
            seated = seated_by_number.get(table["table_number"], [])
            available = capacity_by_number[table["table_number"]] - len(seated)
            if available < 0:
                overbooked.add(table["table_number"])
            occupancy.append(TableOccupancy(
                table_id=table["id"],
                table_number=table["table_number"],
                capacity=table["capacity"],
                shape=table["shape"],
                position_x=table["position_x"],
                position_y=table["position_y"],
                occupied=len(seated),
                available=available,
                guests=[SeatedGuest.model_validate(guest) for guest in seated],
            ))

        known_numbers = {table["table_number"] for table in tables}
        dangling = [
            guest
            for number, seated in seated_by_number.items()
            if number not in known_numbers
            for guest in seated
        ]

        return SeatingOverview(
            tables=occupancy,
            total_tables=len(tables),
            total_capacity=sum(table["capacity"] for table in tables),
            assigned_guests=len(guests) - len(unassigned),
            confirmed_guests=sum(1 for guest in guests if guest.get("rsvp_status") == "confirmed"),
            unassigned=[SeatedGuest.model_validate(guest) for guest in unassigned],
            dangling=[SeatedGuest.model_validate(guest) for guest in dangling],
            overbooked_tables=sorted(overbooked),
        )

    @staticmethod
    def pooled_capacity(table_number: int, tables: List[Record], exclude_table_id: Optional[int] = None) -> int:
        """Tables sharing a number share their seats"""
        return sum(
            table["capacity"]
            for table in tables
            if table["table_number"] == table_number and table["id"] != exclude_table_id
        )

    @staticmethod
    def count_seated(table_number: int, guests: List[Record], exclude_guest_id: Optional[int] = None) -> int:
        return sum(
            1
            for guest in guests
            if guest.get("table_assignment") == table_number and guest["id"] != exclude_guest_id
        )

    @staticmethod
    def validate_guest_assignment(
        table_number: Optional[int],
        tables: List[Record],
        guests: List[Record],
        exclude_guest_id: Optional[int] = None,
    ) -> List[str]:
        """Check that a table number exists and still has a free seat"""
        if table_number is None:
            return []

        if not any(table["table_number"] == table_number for table in tables):
            return [f"Table {table_number} does not exist"]

        capacity = SeatingService.pooled_capacity(table_number, tables)
        seated = SeatingService.count_seated(table_number, guests, exclude_guest_id)
        if seated >= capacity:
            return [f"Table {table_number} is full ({seated}/{capacity} seats taken)"]
        return []

    @staticmethod
    def validate_table_update(
        table: Record,
        changes: Record,
        tables: List[Record],
        guests: List[Record],
    ) -> List[str]:
        """Reject renumbering an occupied table or shrinking one below its occupancy"""
        current_number = table["table_number"]
        new_number = changes.get("table_number", current_number)
        new_capacity = changes.get("capacity", table["capacity"])
        if new_number == current_number and new_capacity >= table["capacity"]:
            # moving, reshaping or adding seats strands nobody
            return []

        # seats left at the current number once the change is applied
        remaining = SeatingService.pooled_capacity(current_number, tables, exclude_table_id=table["id"])
        if new_number == current_number:
            remaining += new_capacity
        seated = SeatingService.count_seated(current_number, guests)
        if seated <= remaining:
            return []

        if new_number != current_number and not remaining:
            return [f"Table {current_number} still has {seated} guests assigned; reassign them before renumbering"]
        return [f"Table {current_number} would hold {seated} guests but only seat {remaining}"]

    @staticmethod
    def release_table(storage, table: Record) -> List[int]:
        """Unassign the guests a table's removal would strand; returns their ids"""
        number = table["table_number"]
        remaining = storage.seating_tables.list()
        if any(other["table_number"] == number for other in remaining if other["id"] != table["id"]):
            return []

        released = [guest["id"] for guest in SeatingService.get_table_guests(number, storage.guests.list())]
        if released:
            storage.guests.update_many(released, {"table_assignment": None})
            logger.info(f"Unassigned {len(released)} guests from table {number}")
        return released

    @staticmethod
    def restore_table(storage, table: Record, guest_ids: List[int]) -> None:
        """Put released guests back at their table after a failed delete"""
        if guest_ids:
            storage.guests.update_many(guest_ids, {"table_assignment": table["table_number"]})
            logger.warning(f"Restored {len(guest_ids)} guests to table {table['table_number']}")
