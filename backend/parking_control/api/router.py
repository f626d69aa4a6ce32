"""API Router.

Aggregates all endpoints.
"""

from fastapi import APIRouter

from ..core.constants import ApiEndpoints
from .endpoints import parking_spots

api_router = APIRouter()

api_router.include_router(
    parking_spots.router,
    prefix=ApiEndpoints.PARKING_SPOT,
    tags=["Parking Spots"]
)
