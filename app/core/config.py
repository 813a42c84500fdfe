"""
Configuration settings for the application
"""

import os
from datetime import date
from decimal import Decimal
from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""

    # Storage
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "memory")  # memory, sql
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./wedding_planner.db")

    # Seating
    ENFORCE_SEATING_INTEGRITY: bool = os.getenv("ENFORCE_SEATING_INTEGRITY", "false").lower() in ("1", "true", "yes")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    ALLOW_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5000",
        "http://localhost:5173",
        "http://localhost:8000",
    ]

    # File limits
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10MB

    # Wedding details seeded at startup
    DEFAULT_BRIDE_NAME: str = "Sarah"
    DEFAULT_GROOM_NAME: str = "Michael"
    DEFAULT_WEDDING_DATE: date = date(2024, 6, 15)
    DEFAULT_VENUE: str = "Rosewood Manor"
    DEFAULT_TOTAL_BUDGET: Decimal = Decimal("40000.00")

    class Config:
        env_file = ".env"

settings = Settings()
