"""
Tests for Excel validation functionality
"""

import io
from decimal import Decimal

import pandas as pd

from app.services.excel_service import ExcelService

def create_test_excel(data):
    """Helper function to create Excel bytes from data"""
    df = pd.DataFrame(data)
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
        df.to_excel(writer, index=False)
    return buffer.getvalue()

def read_excel(content):
    return pd.read_excel(io.BytesIO(content))

def test_validate_excel_structure_valid():
    """Test Excel structure validation with valid columns"""
    df = pd.DataFrame({'Name': ['Amina Khan'], 'RSVP Status': ['confirmed']})

    is_valid, errors = ExcelService.validate_excel_structure(df)

    assert is_valid
    assert errors == []

def test_validate_excel_structure_case_insensitive():
    """Header matching ignores case and padding"""
    df = pd.DataFrame({'  NAME ': ['Amina Khan']})

    is_valid, errors = ExcelService.validate_excel_structure(df)

    assert is_valid

def test_validate_excel_structure_missing_columns():
    """Test Excel structure validation with missing required columns"""
    df = pd.DataFrame({'Email': ['amina.khan@gmail.com']})

    is_valid, errors = ExcelService.validate_excel_structure(df)

    assert not is_valid
    assert errors == ["Missing required columns: name"]

def test_parse_guest_upload_valid():
    """Test parsing a well-formed guest list"""
    content = create_test_excel({
        'Name': ['Amina Khan', 'Omar Khan'],
        'Email': ['amina.khan@gmail.com', None],
        'Phone': [5550101, None],
        'RSVP Status': ['Confirmed', None],
        'Plus One': ['Yes', 'no'],
        'Table': [3, None],
    })

    success, errors, guests = ExcelService.parse_guest_upload(content)

    assert success
    assert errors == []
    amina, omar = guests
    assert amina.name == "Amina Khan"
    assert amina.email == "amina.khan@gmail.com"
    assert amina.phone == "5550101"
    assert amina.rsvp_status == "confirmed"
    assert amina.plus_one is True
    assert amina.table_assignment == 3
    assert omar.rsvp_status == "pending"
    assert omar.plus_one is False
    assert omar.table_assignment is None

def test_parse_guest_upload_skips_empty_rows():
    content = create_test_excel({
        'Name': ['Amina Khan', None, 'Omar Khan'],
        'Notes': [None, None, 'Groom\'s cousin'],
    })

    success, errors, guests = ExcelService.parse_guest_upload(content)

    assert success
    assert [guest.name for guest in guests] == ["Amina Khan", "Omar Khan"]
    assert guests[1].notes == "Groom's cousin"

def test_parse_guest_upload_reports_every_bad_row():
    """One bad row rejects the file, and each problem names its row"""
    content = create_test_excel({
        'Name': ['Amina Khan', None, 'Omar Khan'],
        'Email': [None, 'leila@gmail.com', 'not-an-email'],
        'RSVP Status': ['maybe', None, 'pending'],
    })

    success, errors, guests = ExcelService.parse_guest_upload(content)

    assert not success
    assert guests == []
    assert len(errors) == 3
    assert errors[0].startswith("Row 2: ") and "rsvp" in errors[0].lower()
    assert errors[1].startswith("Row 3: name:")
    assert errors[2].startswith("Row 4: email:")

def test_parse_guest_upload_missing_name_column():
    content = create_test_excel({'Email': ['amina.khan@gmail.com']})

    success, errors, guests = ExcelService.parse_guest_upload(content)

    assert not success
    assert errors == ["Missing required columns: name"]

def test_parse_guest_upload_not_a_workbook():
    success, errors, guests = ExcelService.parse_guest_upload(b"name,email\nAmina,amina@gmail.com\n")

    assert not success
    assert errors[0].startswith("Error reading Excel file")

def test_guest_template_lists_import_columns():
    df = read_excel(ExcelService.create_guest_template())

    assert list(df.columns) == [
        'Name', 'Email', 'Phone', 'RSVP Status', 'Plus One', 'Dietary Restrictions', 'Table', 'Notes'
    ]
    assert len(df) == 2

def test_guest_template_is_importable():
    """The sample rows in the template pass validation"""
    success, errors, guests = ExcelService.parse_guest_upload(ExcelService.create_guest_template())

    assert success, errors
    assert guests[1].table_assignment == 1
    assert guests[1].plus_one is True

def test_export_guests():
    content = ExcelService.export_guests([
        {
            "id": 2, "name": "Amina Khan", "email": None, "phone": "555-0101", "rsvp_status": "confirmed",
            "plus_one": True, "dietary_restrictions": "vegetarian", "table_assignment": 3, "notes": None,
        },
    ])

    df = read_excel(content)
    assert df.loc[0, 'Name'] == "Amina Khan"
    assert df.loc[0, 'RSVP Status'] == "confirmed"
    assert df.loc[0, 'Plus One'] == "Yes"
    assert df.loc[0, 'Table'] == 3

def test_exported_guest_list_can_be_reimported():
    content = ExcelService.export_guests([
        {"id": 2, "name": "Amina Khan", "rsvp_status": "declined", "plus_one": False, "table_assignment": None},
    ])

    success, errors, guests = ExcelService.parse_guest_upload(content)

    assert success
    assert guests[0].rsvp_status == "declined"

def test_export_budget():
    content = ExcelService.export_budget([
        {
            "id": 5, "category": "Venue", "description": "Hall rental", "budget_amount": Decimal("5000.00"),
            "actual_amount": Decimal("5200.50"), "is_paid": True, "notes": None,
        },
    ])

    df = read_excel(content)
    assert list(df.columns) == ['Category', 'Description', 'Budget Amount', 'Actual Amount', 'Paid', 'Notes']
    assert df.loc[0, 'Actual Amount'] == 5200.5
    assert df.loc[0, 'Paid'] == "Yes"
