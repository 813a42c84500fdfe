"""
Tests for seating service functionality
"""

import pytest

from app.services.seating_service import SeatingService

def make_table(table_id, table_number, capacity=8, shape="round"):
    return {
        "id": table_id,
        "table_number": table_number,
        "capacity": capacity,
        "shape": shape,
        "position_x": 0,
        "position_y": 0,
    }

def make_guest(guest_id, table_assignment=None, rsvp_status="confirmed"):
    return {
        "id": guest_id,
        "name": f"Guest {guest_id}",
        "rsvp_status": rsvp_status,
        "plus_one": False,
        "table_assignment": table_assignment,
    }

@pytest.fixture
def reception():
    """Two tables of eight: table 1 has three guests, table 2 is full"""
    tables = [make_table(1, 1), make_table(2, 2)]
    guests = (
        [make_guest(10 + i, table_assignment=1) for i in range(3)]
        + [make_guest(20 + i, table_assignment=2) for i in range(8)]
        + [make_guest(30, rsvp_status="pending"), make_guest(31, table_assignment=7)]
    )
    return tables, guests

def test_get_table_guests(reception):
    tables, guests = reception

    seated = SeatingService.get_table_guests(1, guests)

    assert [guest["id"] for guest in seated] == [10, 11, 12]
    assert SeatingService.get_table_guests(5, guests) == []

def test_seating_overview_occupancy(reception):
    tables, guests = reception

    overview = SeatingService.get_seating_overview(tables, guests)

    first, second = overview.tables
    assert (first.occupied, first.available) == (3, 5)
    assert (second.occupied, second.available) == (8, 0)
    assert [guest.id for guest in first.guests] == [10, 11, 12]
    assert overview.total_tables == 2
    assert overview.total_capacity == 16
    assert overview.assigned_guests == 12
    assert overview.confirmed_guests == 12
    assert overview.overbooked_tables == []

def test_seating_overview_unassigned_and_dangling(reception):
    tables, guests = reception

    overview = SeatingService.get_seating_overview(tables, guests)

    assert [guest.id for guest in overview.unassigned] == [30]
    # table 7 was never created
    assert [guest.id for guest in overview.dangling] == [31]

def test_seating_overview_reports_overbooked_tables():
    tables = [make_table(1, 4, capacity=2)]
    guests = [make_guest(10 + i, table_assignment=4) for i in range(3)]

    overview = SeatingService.get_seating_overview(tables, guests)

    assert overview.tables[0].available == -1
    assert overview.overbooked_tables == [4]

def test_seating_overview_empty():
    overview = SeatingService.get_seating_overview([], [])

    assert overview.tables == []
    assert overview.total_capacity == 0
    assert overview.unassigned == []

def test_validate_guest_assignment(reception):
    tables, guests = reception

    assert SeatingService.validate_guest_assignment(None, tables, guests) == []
    assert SeatingService.validate_guest_assignment(1, tables, guests) == []
    assert SeatingService.validate_guest_assignment(7, tables, guests) == ["Table 7 does not exist"]
    assert SeatingService.validate_guest_assignment(2, tables, guests) == ["Table 2 is full (8/8 seats taken)"]

def test_validate_guest_assignment_ignores_the_guest_being_moved(reception):
    tables, guests = reception

    # guest 20 already sits at the full table 2
    assert SeatingService.validate_guest_assignment(2, tables, guests, exclude_guest_id=20) == []

def test_tables_sharing_a_number_pool_capacity():
    tables = [make_table(1, 5, capacity=2), make_table(2, 5, capacity=2)]
    guests = [make_guest(10 + i, table_assignment=5) for i in range(3)]

    assert SeatingService.pooled_capacity(5, tables) == 4
    assert SeatingService.validate_guest_assignment(5, tables, guests) == []

    guests.append(make_guest(20, table_assignment=5))
    assert SeatingService.validate_guest_assignment(5, tables, guests) == ["Table 5 is full (4/4 seats taken)"]

def test_validate_table_update_capacity(reception):
    tables, guests = reception

    assert SeatingService.validate_table_update(tables[0], {"capacity": 3}, tables, guests) == []
    assert SeatingService.validate_table_update(tables[0], {"capacity": 2}, tables, guests) == [
        "Table 1 would hold 3 guests but only seat 2"
    ]

def test_validate_table_update_renumbering(reception):
    tables, guests = reception

    errors = SeatingService.validate_table_update(tables[0], {"table_number": 9}, tables, guests)
    assert errors == ["Table 1 still has 3 guests assigned; reassign them before renumbering"]

    # moving onto the number guests are already dangling on is fine when it fits
    empty = make_table(3, 3)
    assert SeatingService.validate_table_update(empty, {"table_number": 7}, tables + [empty], guests) == []

def test_validate_table_update_position_only(reception):
    tables, guests = reception

    assert SeatingService.validate_table_update(tables[1], {"position_x": 120, "position_y": 40}, tables, guests) == []

def test_validate_table_update_moves_an_overbooked_table():
    """Position and capacity increases never strand a guest, even at an over-full number"""
    tables = [make_table(1, 1, capacity=2)]
    guests = [make_guest(10 + i, table_assignment=1) for i in range(4)]

    assert SeatingService.validate_table_update(tables[0], {"position_x": 120, "position_y": 40}, tables, guests) == []
    assert SeatingService.validate_table_update(tables[0], {"shape": "rectangular"}, tables, guests) == []
    assert SeatingService.validate_table_update(tables[0], {"capacity": 3}, tables, guests) == []

def test_validate_table_update_uses_pooled_seats():
    tables = [make_table(1, 1, capacity=2), make_table(2, 1, capacity=2)]
    guests = [make_guest(10 + i, table_assignment=1) for i in range(3)]

    assert SeatingService.validate_table_update(tables[0], {"capacity": 1}, tables, guests) == []
    assert SeatingService.validate_table_update(tables[0], {"table_number": 2}, tables, guests) == [
        "Table 1 would hold 3 guests but only seat 2"
    ]

    guests.pop()
    assert SeatingService.validate_table_update(tables[0], {"table_number": 2}, tables, guests) == []

def test_seating_overview_pools_shared_numbers():
    """Two tables under one number share their seats"""
    tables = [make_table(1, 1, capacity=2), make_table(2, 1, capacity=2)]
    guests = [make_guest(10 + i, table_assignment=1) for i in range(4)]

    overview = SeatingService.get_seating_overview(tables, guests)

    assert [(table.occupied, table.available) for table in overview.tables] == [(4, 0), (4, 0)]
    assert overview.overbooked_tables == []

    guests.append(make_guest(20, table_assignment=1))
    overview = SeatingService.get_seating_overview(tables, guests)

    assert [table.available for table in overview.tables] == [-1, -1]
    assert overview.overbooked_tables == [1]

def test_release_table_unassigns_guests(storage):
    table = storage.seating_tables.create({"table_number": 4, "capacity": 8})
    seated = [storage.guests.create({"name": name, "table_assignment": 4}) for name in ("Amina", "Omar")]
    elsewhere = storage.guests.create({"name": "Leila", "table_assignment": 5})

    released = SeatingService.release_table(storage, table)

    assert released == [guest["id"] for guest in seated]
    assert all(storage.guests.get(guest["id"])["table_assignment"] is None for guest in seated)
    assert storage.guests.get(elsewhere["id"])["table_assignment"] == 5

def test_restore_table_reassigns_released_guests(storage):
    table = storage.seating_tables.create({"table_number": 4, "capacity": 8})
    guest = storage.guests.create({"name": "Amina", "table_assignment": 4})
    released = SeatingService.release_table(storage, table)

    SeatingService.restore_table(storage, table, released)

    assert storage.guests.get(guest["id"])["table_assignment"] == 4

def test_release_table_keeps_guests_when_number_still_in_use(storage):
    first = storage.seating_tables.create({"table_number": 4, "capacity": 8})
    storage.seating_tables.create({"table_number": 4, "capacity": 4})
    guest = storage.guests.create({"name": "Amina", "table_assignment": 4})

    assert SeatingService.release_table(storage, first) == []
    assert storage.guests.get(guest["id"])["table_assignment"] == 4
