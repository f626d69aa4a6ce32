"""Parking Spot Endpoints.

RESTful API endpoints for parking spots.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from ...core.constants import Pagination, SuccessMessages
from ...schemas.parking_spot import (
    ErrorResponse,
    ParkingSpotInput,
    ParkingSpotPage,
    ParkingSpotResponse,
    SuccessResponse,
)
from ...services.parking_spot_service import ParkingSpotService
from ..dependencies import get_parking_spot_service

router = APIRouter()

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Parking spot not found"}}
INVALID_INPUT_RESPONSE = {422: {"model": ErrorResponse, "description": "Invalid input"}}
CONFLICT_RESPONSE = {
    409: {"model": ErrorResponse, "description": "License plate, spot number or apartment/block already in use"}
}


@router.post(
    "",
    response_model=ParkingSpotResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a parking spot",
    responses={**CONFLICT_RESPONSE, **INVALID_INPUT_RESPONSE},
    openapi_extra={
        "examples": {
            "parking_spot": {
                "summary": "Parking spot example",
                "value": {
                    "parkingSpotNumber": "A-101",
                    "licensePlateCar": "ABC1234",
                    "brandCar": "Volkswagen",
                    "modelCar": "Gol",
                    "colorCar": "Black",
                    "responsibleName": "Maria Silva",
                    "apartment": "101",
                    "block": "A"
                }
            }
        }
    }
)
async def save_parking_spot(
    parking_spot: ParkingSpotInput,
    service: ParkingSpotService = Depends(get_parking_spot_service)
):
    """Register a parking spot.

    Rejected with 409 when the license plate, the spot number or the
    apartment/block pair is already registered. The id and the registration
    date (UTC) are assigned by the server.
    """
    return await service.create_parking_spot(parking_spot)


@router.get(
    "",
    response_model=ParkingSpotPage,
    summary="List parking spots",
    responses={400: {"model": ErrorResponse, "description": "Unknown sort field or direction"}}
)
async def get_all_parking_spots(
    page: int = Query(
        Pagination.DEFAULT_PAGE,
        ge=0,
        le=Pagination.MAX_PAGE,
        description="Page index (0-based)"
    ),
    size: int = Query(
        Pagination.DEFAULT_PAGE_SIZE,
        ge=Pagination.MIN_PAGE_SIZE,
        le=Pagination.MAX_PAGE_SIZE,
        description="Items per page"
    ),
    sort: str = Query(
        Pagination.DEFAULT_SORT,
        description="Field to sort by; 'field,desc' is also accepted"
    ),
    direction: str = Query(
        Pagination.DEFAULT_DIRECTION,
        description="ASC or DESC"
    ),
    service: ParkingSpotService = Depends(get_parking_spot_service)
):
    """List parking spots one page at a time, ordered by id ascending by default."""
    parking_spots, total = await service.list_parking_spots(
        page=page,
        size=size,
        sort=sort,
        direction=direction
    )
    return ParkingSpotPage.from_results(parking_spots, total, page, size)


@router.get(
    "/{parking_spot_id}",
    response_model=ParkingSpotResponse,
    summary="Get a parking spot",
    responses=NOT_FOUND_RESPONSE
)
async def get_one_parking_spot(
    parking_spot_id: UUID,
    service: ParkingSpotService = Depends(get_parking_spot_service)
):
    return await service.get_parking_spot(parking_spot_id)


@router.delete(
    "/{parking_spot_id}",
    response_model=SuccessResponse,
    summary="Delete a parking spot",
    responses=NOT_FOUND_RESPONSE
)
async def delete_parking_spot(
    parking_spot_id: UUID,
    service: ParkingSpotService = Depends(get_parking_spot_service)
):
    await service.delete_parking_spot(parking_spot_id)
    return SuccessResponse(message=SuccessMessages.PARKING_SPOT_DELETED)


@router.put(
    "/{parking_spot_id}",
    response_model=ParkingSpotResponse,
    summary="Update a parking spot",
    responses={**NOT_FOUND_RESPONSE, **CONFLICT_RESPONSE, **INVALID_INPUT_RESPONSE}
)
async def update_parking_spot(
    parking_spot_id: UUID,
    parking_spot: ParkingSpotInput,
    service: ParkingSpotService = Depends(get_parking_spot_service)
):
    """Replace a parking spot's fields.

    The id and the registration date are kept from the stored record,
    whatever the payload says.
    """
    return await service.update_parking_spot(parking_spot_id, parking_spot)
