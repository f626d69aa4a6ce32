"""Repository Layer.

Data access layer following Repository Pattern.
Separates data access logic from business logic.
"""

from .base import ParkingSpotStore
from .parking_spot_repository import ParkingSpotRepository

__all__ = ['ParkingSpotRepository', 'ParkingSpotStore']
