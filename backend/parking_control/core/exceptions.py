"""Custom Exceptions for Parking Spot Operations.

This module defines the exception classes raised by the domain layer. Each
class carries the HTTP status code the API surfaces it with, so the exception
handlers in ``core.error_handlers`` need no per-class branching.

- ValidationError: malformed input that pydantic could not reject (400)
- ConflictError: a uniqueness invariant would be violated (409)
- NotFoundError: the requested id does not resolve (404)

Storage failures (SQLAlchemy errors other than unique violations) are not
wrapped; they propagate as-is and surface as a generic 500.
"""

from fastapi import status

from .constants import ErrorMessages


class ParkingControlError(Exception):
    """Base exception for all domain errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    title: str = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ParkingControlError):
    """Input failed validation.

    Attributes:
        fields: List of ``{"field": ..., "message": ...}`` dicts
    """

    status_code = status.HTTP_400_BAD_REQUEST
    title = ErrorMessages.VALIDATION_FAILED

    def __init__(self, message: str, fields: list[dict[str, str]] | None = None):
        super().__init__(message)
        self.fields = fields or []


class ConflictError(ParkingControlError):
    """A uniqueness invariant would be violated."""

    status_code = status.HTTP_409_CONFLICT
    title = "Conflict"


class ParkingSpotConflictError(ConflictError):
    """A parking spot collides with an existing one.

    Attributes:
        field: Name of the violated invariant (``license_plate_car``,
            ``parking_spot_number`` or ``apartment_block``)
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class NotFoundError(ParkingControlError):
    """The requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    title = "Not Found"


class ParkingSpotNotFoundError(NotFoundError):
    """Parking spot not found in database."""

    def __init__(self, message: str = ErrorMessages.PARKING_SPOT_NOT_FOUND):
        super().__init__(message)
