"""Storage interface for parking spots.

The service depends on this interface rather than on SQLAlchemy, so any
store implementing these operations can back it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from ..models.parking_spot import ParkingSpot


class ParkingSpotStore(ABC):
    """Abstract parking spot storage."""

    @abstractmethod
    async def create(self, parking_spot: ParkingSpot) -> ParkingSpot:
        """Insert a new parking spot."""

    @abstractmethod
    async def find_by_id(self, parking_spot_id: UUID) -> ParkingSpot | None:
        """Point lookup by id."""

    @abstractmethod
    async def find_page(
        self,
        page: int,
        size: int,
        sort: str,
        descending: bool = False
    ) -> tuple[list[ParkingSpot], int]:
        """Return one page of parking spots and the total count."""

    @abstractmethod
    async def exists_by_license_plate_car(self, license_plate_car: str) -> bool:
        ...

    @abstractmethod
    async def exists_by_parking_spot_number(self, parking_spot_number: str) -> bool:
        ...

    @abstractmethod
    async def exists_by_apartment_and_block(self, apartment: str, block: str) -> bool:
        ...

    @abstractmethod
    async def update(self, parking_spot: ParkingSpot) -> ParkingSpot:
        """Persist changes made to a loaded parking spot."""

    @abstractmethod
    async def delete(self, parking_spot: ParkingSpot) -> None:
        """Remove a parking spot."""
