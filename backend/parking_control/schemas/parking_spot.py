"""Pydantic Schemas for API Request/Response Validation.

These schemas handle validation and serialization for the API. Fields are
snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from math import ceil
from uuid import UUID

from pydantic import BaseModel, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from ..core.constants import ErrorMessages, FieldLimits
from ..utils.formatting import format_utc_datetime


class CamelModel(BaseModel):
    """Base schema exposing camelCase aliases while accepting snake_case too."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class ParkingSpotInput(CamelModel):
    """Schema for creating or replacing a parking spot.

    ``id`` and ``registrationDate`` are server-owned: if a client sends them
    they are ignored.
    """
    parking_spot_number: str = Field(
        ..., max_length=FieldLimits.PARKING_SPOT_NUMBER_MAX_LENGTH
    )
    license_plate_car: str = Field(
        ..., max_length=FieldLimits.LICENSE_PLATE_CAR_MAX_LENGTH
    )
    brand_car: str = Field(..., max_length=FieldLimits.BRAND_CAR_MAX_LENGTH)
    model_car: str = Field(..., max_length=FieldLimits.MODEL_CAR_MAX_LENGTH)
    color_car: str = Field(..., max_length=FieldLimits.COLOR_CAR_MAX_LENGTH)
    responsible_name: str = Field(
        ..., max_length=FieldLimits.RESPONSIBLE_NAME_MAX_LENGTH
    )
    apartment: str = Field(..., max_length=FieldLimits.APARTMENT_MAX_LENGTH)
    block: str = Field(..., max_length=FieldLimits.BLOCK_MAX_LENGTH)

    class Config:
        str_strip_whitespace = True

    @field_validator('*')
    @classmethod
    def validate_not_blank(cls, v):
        """Reject empty or whitespace-only values."""
        if not v:
            raise ValueError(ErrorMessages.FIELD_BLANK)
        return v


class ParkingSpotResponse(CamelModel):
    """Schema for parking spot responses."""
    id: UUID
    parking_spot_number: str
    license_plate_car: str
    brand_car: str
    model_car: str
    color_car: str
    registration_date: datetime
    responsible_name: str
    apartment: str
    block: str

    @field_serializer('registration_date')
    def serialize_registration_date(self, value: datetime) -> str:
        return format_utc_datetime(value)


class ParkingSpotPage(CamelModel):
    """Schema for a page of parking spots (zero-based page index)."""
    content: list[ParkingSpotResponse]
    total_elements: int
    total_pages: int
    number: int
    size: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool

    @classmethod
    def from_results(cls, items: list, total: int, page: int, size: int) -> "ParkingSpotPage":
        """Build a page envelope from a query result and its total count."""
        total_pages = ceil(total / size) if size else 0
        return cls(
            content=[ParkingSpotResponse.model_validate(item) for item in items],
            total_elements=total,
            total_pages=total_pages,
            number=page,
            size=size,
            number_of_elements=len(items),
            first=page == 0,
            last=page >= total_pages - 1,
            empty=not items,
        )


class FieldError(BaseModel):
    """A single field validation failure."""
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Standard error response schema."""
    error: str
    detail: str | None = None
    request_id: str | None = None
    fields: list[FieldError] | None = None


class SuccessResponse(BaseModel):
    """Standard success response schema."""
    message: str
