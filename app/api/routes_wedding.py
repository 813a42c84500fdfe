"""
Wedding details routes (singleton: read and partial update only)
"""

import logging

from fastapi import APIRouter, Depends

from app.schemas.common import ErrorResponse
from app.schemas.wedding import WeddingDetailsResponse, WeddingDetailsUpdate
from app.services.repositories import StoreError, get_storage
from app.utils.responses import store_failure

logger = logging.getLogger(__name__)

router = APIRouter(responses={500: {"model": ErrorResponse, "description": "Storage failure"}})

@router.get("", response_model=WeddingDetailsResponse)
async def get_wedding_details(storage=Depends(get_storage)):
    """The one wedding this planner is for"""
    try:
        return storage.wedding_details.get()
    except StoreError:
        logger.exception("Failed to fetch wedding details")
        return store_failure("fetch wedding details")

@router.put("", response_model=WeddingDetailsResponse,
            responses={400: {"model": ErrorResponse, "description": "Invalid payload"}})
async def update_wedding_details(
    payload: WeddingDetailsUpdate,
    storage=Depends(get_storage)
):
    """Merge the supplied fields into the wedding details"""
    changes = payload.changes()
    try:
        details = storage.wedding_details.update(changes)
    except StoreError:
        logger.exception("Failed to update wedding details")
        return store_failure("update wedding details")
    logger.info(f"Updated wedding details: {sorted(changes)}")
    return details
