"""
Animal API: Test Configuration (conftest.py)
============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── store: Empty InMemoryAnimalStore
    ├── seeded_store: Store holding the lion/eagle/snake seed records
    ├── sample_animal_data: JSON body for the panda record
    └── test_client: HTTPX AsyncClient bound to a fresh app over `store`
"""

import os

# Set before any application import reads settings
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_ON_STARTUP"] = "true"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from animal_api.services.memory_store import InMemoryAnimalStore
from animal_api.services.seed import seed_store


@pytest.fixture
def store():
    """A fresh, empty store. Each test gets its own."""
    return InMemoryAnimalStore()


@pytest.fixture
def seeded_store(store):
    """The `store` fixture after startup seeding (ids 1, 2, 3)."""
    seed_store(store)
    return store


@pytest.fixture
def sample_animal_data():
    """POST body for a record that is not part of the seed data."""
    return {"id": 101, "name": "panda", "class": "mammal", "legs": 4}


@pytest_asyncio.fixture
async def test_client(store):
    """
    Async HTTP client talking to a fresh app that serves `store`.

    ASGITransport does not run the lifespan, so nothing is seeded: tests that
    need records either use `seeded_store` or create them through the API.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/v1/animals")
    """
    from animal_api.main import create_app

    app = create_app(store=store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
