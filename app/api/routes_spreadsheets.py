"""
Excel export of the guest list and budget, and bulk guest import
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import Response

from app.api.crud import seating_enforced
from app.core.config import settings
from app.schemas.guest import GuestResponse
from app.services.excel_service import ExcelService
from app.services.repositories import StoreError, get_storage
from app.services.seating_service import SeatingService
from app.utils.responses import error_response, seating_conflict, store_failure

logger = logging.getLogger(__name__)

router = APIRouter()

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

def _xlsx(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )

@router.get("/export/guests.xlsx")
async def export_guests(storage=Depends(get_storage)):
    """Export the current guest list to Excel"""
    return _xlsx(ExcelService.export_guests(storage.guests.list()), "guest_list.xlsx")

@router.get("/export/budget.xlsx")
async def export_budget(storage=Depends(get_storage)):
    """Export budget items to Excel"""
    return _xlsx(ExcelService.export_budget(storage.budget_items.list()), "budget.xlsx")

@router.get("/export/guests-template.xlsx")
async def download_guest_template():
    """Download the guest import template"""
    return _xlsx(ExcelService.create_guest_template(), "guest_import_template.xlsx")

def _seating_conflicts(payloads, tables, seated):
    conflicts = []
    for offset, payload in enumerate(payloads):
        # rows already accepted count toward capacity under a placeholder id
        row_errors = SeatingService.validate_guest_assignment(payload["table_assignment"], tables, seated)
        conflicts.extend(f"Guest '{payload['name']}': {error}" for error in row_errors)
        seated.append({**payload, "id": -(offset + 1)})
    return conflicts

@router.post("/import/guests", response_model=List[GuestResponse], status_code=status.HTTP_201_CREATED)
async def import_guests(
    file: UploadFile = File(...),
    storage=Depends(get_storage),
    enforce: bool = Depends(seating_enforced)
):
    """Create guests from an uploaded workbook; any invalid row rejects the whole file"""
    # Validate file type; openpyxl reads .xlsx only
    if not file.filename or not file.filename.lower().endswith('.xlsx'):
        return error_response(
            message="Invalid file format. Please upload an Excel workbook (.xlsx)",
            status_code=400
        )

    file_content = await file.read()
    if len(file_content) > settings.MAX_UPLOAD_SIZE:
        return error_response(
            message=f"File too large. Maximum size is {settings.MAX_UPLOAD_SIZE // (1024 * 1024)}MB",
            status_code=400
        )

    success, errors, guests = ExcelService.parse_guest_upload(file_content)
    if not success:
        logger.info(f"Rejected guest import {file.filename}: {len(errors)} problem(s)")
        return error_response(
            message="Excel file validation failed",
            errors=errors,
            status_code=400
        )

    payloads = [guest.model_dump() for guest in guests]

    try:
        if enforce:
            conflicts = _seating_conflicts(payloads, storage.seating_tables.list(), storage.guests.list())
            if conflicts:
                return seating_conflict(conflicts)
        created = storage.guests.create_many(payloads)
    except StoreError:
        logger.exception(f"Failed to import guests from {file.filename}")
        return store_failure("import guests")
    logger.info(f"Imported {len(created)} guests from {file.filename}")
    return created
