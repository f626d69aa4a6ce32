"""Parking Spot Repository.

Data access layer for ParkingSpot entities.
Separates data access logic from business logic (Repository Pattern).
"""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import and_, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.parking_spot import ParkingSpot
from .base import ParkingSpotStore


class ParkingSpotRepository(ParkingSpotStore):
    """SQLAlchemy repository for ParkingSpot data access operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, parking_spot: ParkingSpot) -> ParkingSpot:
        """Create a new parking spot.

        Args:
            parking_spot: ParkingSpot entity to create

        Returns:
            Created parking spot
        """
        self.db.add(parking_spot)
        await self.db.flush()
        return parking_spot

    async def find_by_id(self, parking_spot_id: UUID) -> ParkingSpot | None:
        """Find parking spot by ID.

        Args:
            parking_spot_id: Parking spot UUID

        Returns:
            ParkingSpot if found, None otherwise
        """
        return await self.db.get(ParkingSpot, parking_spot_id)

    async def find_page(
        self,
        page: int,
        size: int,
        sort: str,
        descending: bool = False
    ) -> tuple[list[ParkingSpot], int]:
        """List parking spots ordered by a column, one page at a time.

        Args:
            page: Page index (0-based)
            size: Number of items per page
            sort: ParkingSpot column name to order by
            descending: Reverse the ordering

        Returns:
            Tuple of (list of parking spots, total count)
        """
        total_result = await self.db.execute(
            select(func.count()).select_from(ParkingSpot)
        )
        total = total_result.scalar()

        column = getattr(ParkingSpot, sort)
        order = [column.desc() if descending else column.asc()]
        # id breaks ties so pages never overlap
        if sort != 'id':
            order.append(ParkingSpot.id.asc())

        query = (
            select(ParkingSpot)
            .order_by(*order)
            .offset(page * size)
            .limit(size)
        )
        result = await self.db.execute(query)

        return list(result.scalars().all()), total

    async def exists_by_license_plate_car(self, license_plate_car: str) -> bool:
        return await self._exists(ParkingSpot.license_plate_car == license_plate_car)

    async def exists_by_parking_spot_number(self, parking_spot_number: str) -> bool:
        return await self._exists(ParkingSpot.parking_spot_number == parking_spot_number)

    async def exists_by_apartment_and_block(self, apartment: str, block: str) -> bool:
        return await self._exists(
            and_(
                ParkingSpot.apartment == apartment,
                ParkingSpot.block == block
            )
        )

    async def update(self, parking_spot: ParkingSpot) -> ParkingSpot:
        """Update an existing parking spot.

        Args:
            parking_spot: ParkingSpot entity with pending changes

        Returns:
            Updated parking spot
        """
        await self.db.flush()
        return parking_spot

    async def delete(self, parking_spot: ParkingSpot) -> None:
        """Delete a parking spot.

        Args:
            parking_spot: ParkingSpot entity to delete
        """
        await self.db.delete(parking_spot)
        await self.db.flush()

    async def _exists(self, condition) -> bool:
        result = await self.db.execute(select(exists().where(condition)))
        return bool(result.scalar())
