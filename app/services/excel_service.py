"""
Excel processing service for guest list import and planner exports
"""

import io
from typing import Any, Dict, List, Tuple

import pandas as pd
from pydantic import ValidationError

from app.schemas.guest import GuestCreate

class ExcelService:
    """Service for handling Excel operations"""

    # header -> guest field
    GUEST_COLUMNS = {
        'name': 'name',
        'email': 'email',
        'phone': 'phone',
        'rsvp status': 'rsvp_status',
        'plus one': 'plus_one',
        'dietary restrictions': 'dietary_restrictions',
        'table': 'table_assignment',
        'notes': 'notes',
    }
    REQUIRED_COLUMNS = ['name']
    TRUE_VALUES = {'yes', 'y', 'true', '1', 'x'}

    @staticmethod
    def _to_bytes(df: pd.DataFrame, sheet_name: str) -> bytes:
        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
            df.to_excel(writer, index=False, sheet_name=sheet_name)
        return buffer.getvalue()

    @staticmethod
    def create_guest_template() -> bytes:
        """Create Excel template with the importable guest columns"""
        df = pd.DataFrame(columns=[
            'Name', 'Email', 'Phone', 'RSVP Status', 'Plus One', 'Dietary Restrictions', 'Table', 'Notes'
        ])

        # Add sample data for guidance
        sample_data = [
            ['Sample Guest 1', 'guest1@gmail.com', '', 'pending', 'No', '', '', ''],
            ['Sample Guest 2', '', '555-0100', 'confirmed', 'Yes', 'vegetarian', 1, 'Bride\'s college friend'],
        ]

        for row in sample_data:
            df.loc[len(df)] = row

        return ExcelService._to_bytes(df, 'Guest List')

    @staticmethod
    def validate_excel_structure(df: pd.DataFrame) -> Tuple[bool, List[str]]:
        """Validate Excel file structure"""
        errors = []

        # Normalize column names for case-insensitive comparison
        normalized_columns = [str(col).lower().strip() for col in df.columns]

        missing_columns = [col for col in ExcelService.REQUIRED_COLUMNS if col not in normalized_columns]
        if missing_columns:
            errors.append(f"Missing required columns: {', '.join(missing_columns)}")

        return len(errors) == 0, errors

    @staticmethod
    def _cell(value: Any) -> Any:
        if pd.isna(value):
            return None
        if hasattr(value, 'item'):
            # numpy scalar
            value = value.item()
        if isinstance(value, str):
            value = value.strip()
            return value or None
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @staticmethod
    def row_to_payload(row: pd.Series, column_mapping: Dict[str, str]) -> Dict[str, Any]:
        """Turn a spreadsheet row into a guest create payload"""
        payload = {}
        for column, field in column_mapping.items():
            value = ExcelService._cell(row[column])
            if value is None:
                continue
            if field == 'plus_one':
                value = str(value).lower() in ExcelService.TRUE_VALUES
            elif field == 'rsvp_status':
                value = str(value).lower()
            elif field != 'table_assignment':
                # phone numbers and the like come back from pandas as numbers
                value = str(value)
            payload[field] = value
        return payload

    @staticmethod
    def parse_guest_upload(file_content: bytes) -> Tuple[bool, List[str], List[GuestCreate]]:
        """Read and validate every row; returns (ok, errors, guests)"""
        try:
            df = pd.read_excel(io.BytesIO(file_content))
        except Exception as e:
            return False, [f"Error reading Excel file: {str(e)}"], []

        valid_structure, structure_errors = ExcelService.validate_excel_structure(df)
        if not valid_structure:
            return False, structure_errors, []

        column_mapping = {}
        for col in df.columns:
            field = ExcelService.GUEST_COLUMNS.get(str(col).lower().strip())
            if field:
                column_mapping[col] = field

        errors = []
        guests = []
        for index, row in df.iterrows():
            payload = ExcelService.row_to_payload(row, column_mapping)
            # Skip empty rows
            if not payload:
                continue

            line = index + 2  # header is line 1
            try:
                guests.append(GuestCreate.model_validate(payload))
            except ValidationError as e:
                for error in e.errors():
                    field = ".".join(str(part) for part in error["loc"])
                    errors.append(f"Row {line}: {field}: {error['msg']}")

        if errors:
            return False, errors, []
        return True, [], guests

    @staticmethod
    def export_guests(guests: List[Dict[str, Any]]) -> bytes:
        """Export the guest list to Excel"""
        data = [
            {
                'Name': guest['name'],
                'Email': guest.get('email'),
                'Phone': guest.get('phone'),
                'RSVP Status': guest['rsvp_status'],
                'Plus One': 'Yes' if guest.get('plus_one') else 'No',
                'Dietary Restrictions': guest.get('dietary_restrictions'),
                'Table': guest.get('table_assignment'),
                'Notes': guest.get('notes'),
            }
            for guest in guests
        ]
        df = pd.DataFrame(data, columns=[
            'Name', 'Email', 'Phone', 'RSVP Status', 'Plus One', 'Dietary Restrictions', 'Table', 'Notes'
        ])
        return ExcelService._to_bytes(df, 'Guest List')

    @staticmethod
    def export_budget(items: List[Dict[str, Any]]) -> bytes:
        """Export budget items to Excel"""
        data = [
            {
                'Category': item['category'],
                'Description': item['description'],
                'Budget Amount': float(item['budget_amount']),
                'Actual Amount': float(item.get('actual_amount') or 0),
                'Paid': 'Yes' if item.get('is_paid') else 'No',
                'Notes': item.get('notes'),
            }
            for item in items
        ]
        df = pd.DataFrame(data, columns=[
            'Category', 'Description', 'Budget Amount', 'Actual Amount', 'Paid', 'Notes'
        ])
        return ExcelService._to_bytes(df, 'Budget')
