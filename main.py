"""
Wedding Planner - FastAPI Backend
Main application entry point
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.core.config import settings
from app.api import routes_dashboard, routes_planner, routes_spreadsheets, routes_wedding
from app.services.repositories import StoreError, create_storage
from app.utils.responses import register_exception_handlers, store_error_handler

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    logger.info(f"Serving planner data from {app.state.storage.backend} storage")
    yield
    logger.info("Application shutdown")

def create_app(storage=None, enforce_seating_integrity: Optional[bool] = None) -> FastAPI:
    """Build the application around an explicit storage; tests pass a fresh one each time"""
    app = FastAPI(
        title="Wedding Planner",
        description="Guest list, RSVP, budget, timeline, vendor and seating chart planning API",
        version="1.0.0",
        lifespan=lifespan
    )

    app.state.storage = storage if storage is not None else create_storage(settings)
    app.state.enforce_seating_integrity = (
        settings.ENFORCE_SEATING_INTEGRITY if enforce_seating_integrity is None else enforce_seating_integrity
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.add_exception_handler(StoreError, store_error_handler)

    # Include routers
    app.include_router(routes_planner.guests_router, prefix="/api/guests", tags=["guests"])
    app.include_router(routes_planner.budget_router, prefix="/api/budget", tags=["budget"])
    app.include_router(routes_planner.timeline_router, prefix="/api/timeline", tags=["timeline"])
    app.include_router(routes_planner.tasks_router, prefix="/api/tasks", tags=["tasks"])
    app.include_router(routes_planner.vendors_router, prefix="/api/vendors", tags=["vendors"])
    app.include_router(routes_planner.seating_router, prefix="/api/seating", tags=["seating"])
    app.include_router(routes_wedding.router, prefix="/api/wedding-details", tags=["wedding"])
    app.include_router(routes_dashboard.router, prefix="/api/dashboard", tags=["dashboard"])
    app.include_router(routes_spreadsheets.router, prefix="/api", tags=["spreadsheets"])

    @app.get("/health")
    async def health_check(request: Request):
        """Health check endpoint"""
        return {"status": "ok", "storage": request.app.state.storage.backend}

    return app

app = create_app()

# Note: Run this ASGI app directly with Uvicorn or Hypercorn. For Gunicorn,
# use `uvicorn.workers.UvicornWorker` instead of wrapping the app.

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="127.0.0.1",
        port=8000,
        reload=True
    )
