"""FastAPI Dependencies.

Builds the service layer for each request from the request's database session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.database import get_db
from ..services.parking_spot_service import ParkingSpotService


async def get_parking_spot_service(
    db: AsyncSession = Depends(get_db)
) -> ParkingSpotService:
    """Dependency that provides a ParkingSpotService bound to the request session.

    Usage:
        @router.get("/parking-spot/{id}")
        async def get_one(
            service: ParkingSpotService = Depends(get_parking_spot_service)
        ):
            ...
    """
    return ParkingSpotService(db)
