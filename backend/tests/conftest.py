"""
Pytest Configuration and Shared Fixtures

This module contains shared test fixtures and configuration for all test modules.
"""

import os
from datetime import UTC, datetime
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DB_CREATE_TABLES"] = "false"

from parking_control.db.database import Base, get_db  # noqa: E402
from parking_control.main import app  # noqa: E402
from parking_control.models import ParkingSpot  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_db():
    """
    Create a test database session factory backed by in-memory SQLite.

    This fixture:
    - Uses a StaticPool so every session shares the same in-memory database
    - Creates all tables before the test
    - Provides a session factory that creates independent sessions
    - Drops all tables and disposes of the engine after the test
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False
    )

    yield async_session_factory

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_db):
    """A single session for service and repository tests."""
    async with test_db() as session:
        yield session


@pytest_asyncio.fixture
async def client(test_db):
    """Create test client wired to the test database."""
    async def override_get_db():
        async with test_db() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture()
def parking_spot_payload():
    """Valid parking spot payload as sent by API clients."""
    return {
        "parkingSpotNumber": "A-101",
        "licensePlateCar": "ABC1234",
        "brandCar": "Volkswagen",
        "modelCar": "Gol",
        "colorCar": "Black",
        "responsibleName": "Maria Silva",
        "apartment": "101",
        "block": "A"
    }


@pytest.fixture()
def make_payload(parking_spot_payload):
    """Build distinct payloads: spot n gets its own number, plate and apartment."""
    def _make(n: int, **overrides):
        payload = {
            **parking_spot_payload,
            "parkingSpotNumber": f"S-{n:03d}",
            "licensePlateCar": f"PLT{n:04d}",
            "apartment": str(100 + n),
        }
        payload.update(overrides)
        return payload
    return _make


@pytest_asyncio.fixture
async def created_parking_spot(client, parking_spot_payload):
    """Create a parking spot through the API and return its JSON body."""
    response = await client.post("/parking-spot", json=parking_spot_payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture()
def make_spot():
    """Build ParkingSpot entities directly, bypassing the service."""
    def _make(n: int, **overrides) -> ParkingSpot:
        values = {
            "id": uuid4(),
            "parking_spot_number": f"S-{n:03d}",
            "license_plate_car": f"PLT{n:04d}",
            "brand_car": "Honda",
            "model_car": "Civic",
            "color_car": "Silver",
            "registration_date": datetime.now(UTC),
            "responsible_name": "Ana Costa",
            "apartment": str(100 + n),
            "block": "C",
        }
        values.update(overrides)
        return ParkingSpot(**values)
    return _make
