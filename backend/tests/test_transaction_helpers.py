"""Tests for transaction helper utilities."""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from parking_control.models import ParkingSpot
from parking_control.utils.transaction_helpers import safe_transaction


@pytest.mark.asyncio
async def test_safe_transaction_commits_on_success(test_db, make_spot):
    """Test that safe_transaction commits on success."""
    async with test_db() as db:
        async with safe_transaction(db):
            spot = make_spot(1)
            db.add(spot)

    async with test_db() as other:
        result = await other.execute(select(ParkingSpot).where(ParkingSpot.id == spot.id))
        assert result.scalar_one_or_none() is not None


@pytest.mark.asyncio
async def test_safe_transaction_rolls_back_on_error(test_db, make_spot):
    """Test that safe_transaction rolls back on exception."""
    async with test_db() as db:
        with pytest.raises(ValueError, match="Test error"):
            async with safe_transaction(db):
                db.add(make_spot(1))
                await db.flush()
                raise ValueError("Test error")

        result = await db.execute(select(ParkingSpot))
        assert result.scalars().all() == []


@pytest.mark.asyncio
async def test_safe_transaction_reraises_integrity_error(test_db, make_spot):
    """Test that constraint violations roll back and propagate unchanged."""
    async with test_db() as db:
        async with safe_transaction(db):
            db.add(make_spot(1))

        with pytest.raises(IntegrityError):
            async with safe_transaction(db):
                db.add(make_spot(2, license_plate_car="PLT0001"))

        result = await db.execute(select(ParkingSpot))
        assert len(result.scalars().all()) == 1
