"""
Uniform list / get / create / update / delete routes for a planner collection
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Type

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel

from app.schemas.common import ErrorResponse, MessageResponse
from app.services.repositories import StoreError, get_storage
from app.utils.responses import not_found_error, seating_conflict, store_failure

logger = logging.getLogger(__name__)

Record = Dict[str, Any]
CreateCheck = Callable[[Any, Record], List[str]]
UpdateCheck = Callable[[Any, Record, Record], List[str]]
# runs before the delete and returns a callable that undoes it should the delete fail
DeleteHook = Callable[[Any, Record], Optional[Callable[[], Any]]]

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid payload"},
    404: {"model": ErrorResponse, "description": "Unknown id"},
    500: {"model": ErrorResponse, "description": "Storage failure"},
}


def seating_enforced(request: Request) -> bool:
    """FastAPI dependency: whether seating integrity is checked on writes"""
    return bool(getattr(request.app.state, "enforce_seating_integrity", False))


def build_crud_router(
    collection: str,
    label: str,
    plural: str,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
    check_create: Optional[CreateCheck] = None,
    check_update: Optional[UpdateCheck] = None,
    before_delete: Optional[DeleteHook] = None,
) -> APIRouter:
    """Build the five routes for one collection.

    The check_* hooks return seating violations (409). before_delete prepares
    related records and hands back an undo for a delete that then fails. All
    three only run while seating integrity is enforced.
    """
    router = APIRouter(responses=ERROR_RESPONSES)
    noun = label.lower()

    @router.get("", response_model=List[response_schema])
    async def list_records(storage=Depends(get_storage)):
        try:
            return getattr(storage, collection).list()
        except StoreError:
            logger.exception(f"Failed to fetch {plural}")
            return store_failure(f"fetch {plural}")

    @router.get("/{record_id}", response_model=response_schema)
    async def get_record(record_id: int, storage=Depends(get_storage)):
        try:
            record = getattr(storage, collection).get(record_id)
        except StoreError:
            logger.exception(f"Failed to fetch {noun} {record_id}")
            return store_failure(f"fetch {noun}")
        if record is None:
            not_found_error(label)
        return record

    @router.post("", response_model=response_schema, status_code=status.HTTP_201_CREATED,
                 responses={409: {"model": ErrorResponse, "description": "Seating conflict"}})
    async def create_record(
        payload: create_schema,
        storage=Depends(get_storage),
        enforce: bool = Depends(seating_enforced),
    ):
        fields = payload.model_dump()
        try:
            if enforce and check_create:
                errors = check_create(storage, fields)
                if errors:
                    return seating_conflict(errors)
            record = getattr(storage, collection).create(fields)
        except StoreError:
            logger.exception(f"Failed to create {noun}")
            return store_failure(f"create {noun}")
        logger.info(f"Created {noun} {record['id']}")
        return record

    @router.put("/{record_id}", response_model=response_schema,
                responses={409: {"model": ErrorResponse, "description": "Seating conflict"}})
    async def update_record(
        record_id: int,
        payload: update_schema,
        storage=Depends(get_storage),
        enforce: bool = Depends(seating_enforced),
    ):
        changes = payload.changes()
        records = getattr(storage, collection)
        try:
            if enforce and check_update:
                existing = records.get(record_id)
                if existing is None:
                    not_found_error(label)
                errors = check_update(storage, existing, changes)
                if errors:
                    return seating_conflict(errors)
            record = records.update(record_id, changes)
        except StoreError:
            logger.exception(f"Failed to update {noun} {record_id}")
            return store_failure(f"update {noun}")
        if record is None:
            not_found_error(label)
        logger.info(f"Updated {noun} {record_id}: {sorted(changes)}")
        return record

    @router.delete("/{record_id}", response_model=MessageResponse)
    async def delete_record(
        record_id: int,
        storage=Depends(get_storage),
        enforce: bool = Depends(seating_enforced),
    ):
        records = getattr(storage, collection)
        try:
            undo = None
            if enforce and before_delete:
                existing = records.get(record_id)
                if existing is None:
                    not_found_error(label)
                undo = before_delete(storage, existing)
            try:
                deleted = records.delete(record_id)
            except StoreError:
                if undo:
                    undo()
                raise
            if not deleted and undo:
                undo()
        except StoreError:
            logger.exception(f"Failed to delete {noun} {record_id}")
            return store_failure(f"delete {noun}")
        if not deleted:
            not_found_error(label)
        logger.info(f"Deleted {noun} {record_id}")
        return {"message": f"{label} deleted successfully"}

    return router
