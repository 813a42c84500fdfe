"""
Shared fixtures: a fresh in-memory planner and an API client around it
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.services.repositories import MemoryStorage, wedding_seed
from main import create_app

@pytest.fixture
def storage():
    """Empty planner holding only the seeded wedding details"""
    return MemoryStorage(wedding_seed(settings))

@pytest.fixture
def client(storage):
    """API client with seating integrity left to the default (off)"""
    with TestClient(create_app(storage=storage, enforce_seating_integrity=False)) as test_client:
        yield test_client

@pytest.fixture
def strict_client(storage):
    """API client that rejects assignments to missing or full tables"""
    with TestClient(create_app(storage=storage, enforce_seating_integrity=True)) as test_client:
        yield test_client
