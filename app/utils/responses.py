"""
Standardized response utilities
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.schemas.common import ErrorResponse, FieldViolation

logger = logging.getLogger(__name__)

# first path segment under /api -> noun used in "Invalid <noun> data"
RESOURCE_LABELS = {
    "guests": "guest",
    "budget": "budget",
    "timeline": "event",
    "tasks": "task",
    "vendors": "vendor",
    "seating": "table",
    "wedding-details": "wedding details",
}

def error_response(
    message: str,
    errors: Optional[List[Any]] = None,
    status_code: int = 400
) -> JSONResponse:
    """Create standardized error response"""
    response = ErrorResponse(
        message=message,
        errors=errors
    )
    return JSONResponse(
        content=response.model_dump(exclude_none=True),
        status_code=status_code
    )

def not_found_error(resource: str = "Resource"):
    """Create not found error"""
    logger.debug(f"{resource} not found")
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{resource} not found"
    )

def seating_conflict(errors: List[str]) -> JSONResponse:
    """Seating assignment rejected because it breaks table integrity"""
    return error_response(
        message="Seating assignment rejected",
        errors=errors,
        status_code=status.HTTP_409_CONFLICT
    )

def store_failure(action: str) -> JSONResponse:
    """Generic message for a failed storage call; details stay in the log"""
    return error_response(
        message=f"Failed to {action}",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )

def field_violations(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into one entry per violated field"""
    violations = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        violations.append(FieldViolation(
            field=".".join(loc) or "body",
            message=error.get("msg", "Invalid value"),
            type=error.get("type"),
        ).model_dump())
    return violations

def resource_label(path: str) -> str:
    parts = [part for part in path.split("/") if part]
    if len(parts) >= 2 and parts[0] == "api":
        return RESOURCE_LABELS.get(parts[1], "request")
    return "request"

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    violations = field_violations(exc.errors())
    logger.info(f"Rejected {request.method} {request.url.path}: {len(violations)} invalid field(s)")
    return error_response(
        message=f"Invalid {resource_label(request.url.path)} data",
        errors=violations,
        status_code=status.HTTP_400_BAD_REQUEST
    )

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(
        content=ErrorResponse(message=message).model_dump(exclude_none=True),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None)
    )

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Storage failure during {request.method} {request.url.path}: {exc}")
    return error_response(
        message="Internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
