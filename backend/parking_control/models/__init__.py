"""Models package.

Export all models for easy importing
"""

from .parking_spot import ParkingSpot

__all__ = [
    "ParkingSpot",
]
