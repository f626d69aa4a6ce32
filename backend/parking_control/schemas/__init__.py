"""API schemas."""

from .parking_spot import (
    ErrorResponse,
    FieldError,
    ParkingSpotInput,
    ParkingSpotPage,
    ParkingSpotResponse,
    SuccessResponse,
)

__all__ = [
    "ErrorResponse",
    "FieldError",
    "ParkingSpotInput",
    "ParkingSpotPage",
    "ParkingSpotResponse",
    "SuccessResponse",
]
