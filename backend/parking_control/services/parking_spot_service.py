"""Parking Spot Service Layer.

Handles business logic for parking spots.
Separates business logic from API controllers (clean architecture).
Uses Repository Pattern for data access.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.constants import ErrorMessages, Pagination, UniqueConstraints
from ..core.exceptions import (
    ParkingSpotConflictError,
    ParkingSpotNotFoundError,
    ValidationError,
)
from ..core.logging import get_logger
from ..core.metrics import (
    parking_spots_created_total,
    parking_spots_deleted_total,
    parking_spots_updated_total,
    record_conflict,
)
from ..models.parking_spot import ParkingSpot
from ..repositories.base import ParkingSpotStore
from ..repositories.parking_spot_repository import ParkingSpotRepository
from ..schemas.parking_spot import ParkingSpotInput
from ..utils.converters import to_snake_case
from ..utils.formatting import utc_now
from ..utils.transaction_helpers import safe_transaction

logger = get_logger(__name__)

SORTABLE_FIELDS = tuple(ParkingSpot.__table__.columns.keys())

# PostgreSQL names the violated constraint; SQLite lists its columns
SQLITE_UNIQUE_FAILURE = 'UNIQUE constraint failed'

# (field, message, constraint name, SQLite column list)
_CONSTRAINT_VIOLATIONS = (
    (
        'license_plate_car',
        ErrorMessages.LICENSE_PLATE_CAR_IN_USE,
        UniqueConstraints.LICENSE_PLATE_CAR,
        'parking_spots.license_plate_car',
    ),
    (
        'parking_spot_number',
        ErrorMessages.PARKING_SPOT_NUMBER_IN_USE,
        UniqueConstraints.PARKING_SPOT_NUMBER,
        'parking_spots.parking_spot_number',
    ),
    (
        'apartment_block',
        ErrorMessages.APARTMENT_BLOCK_IN_USE,
        UniqueConstraints.APARTMENT_BLOCK,
        'parking_spots.apartment, parking_spots.block',
    ),
)


def resolve_sort(sort: str | None, direction: str | None) -> tuple[str, bool]:
    """Translate client sort parameters into a column name and a descending flag.

    ``sort`` accepts the JSON field name (``parkingSpotNumber``) or the
    column name (``parking_spot_number``), optionally followed by
    ``,asc``/``,desc``, which then takes precedence over ``direction``.

    Raises:
        ValidationError: If the field or direction is unknown
    """
    sort = (sort or Pagination.DEFAULT_SORT).strip()
    direction = (direction or Pagination.DEFAULT_DIRECTION).strip()

    if ',' in sort:
        sort, direction = (part.strip() for part in sort.split(',', 1))

    column = to_snake_case(sort)
    if column not in SORTABLE_FIELDS:
        raise ValidationError(
            ErrorMessages.SORT_FIELD_INVALID.format(
                field=sort, allowed=', '.join(SORTABLE_FIELDS)
            ),
            fields=[{'field': 'sort', 'message': f"unknown field '{sort}'"}]
        )

    direction = direction.upper()
    if direction not in Pagination.DIRECTIONS:
        raise ValidationError(
            ErrorMessages.SORT_DIRECTION_INVALID.format(direction=direction),
            fields=[{'field': 'direction', 'message': f"unknown direction '{direction}'"}]
        )

    return column, direction == 'DESC'


def conflict_from_integrity_error(error: IntegrityError) -> ParkingSpotConflictError | None:
    """Map a unique-constraint violation to the conflict for the violated field.

    Returns:
        The matching conflict, or None if the error is not a known
        uniqueness violation
    """
    error_text = str(error.orig) if error.orig is not None else str(error)
    sqlite_unique = SQLITE_UNIQUE_FAILURE in error_text

    for field, message, constraint, sqlite_columns in _CONSTRAINT_VIOLATIONS:
        if constraint in error_text or (sqlite_unique and sqlite_columns in error_text):
            return ParkingSpotConflictError(message, field=field)

    return None


class ParkingSpotService:
    """Service for managing parking spots."""

    def __init__(
        self,
        db: AsyncSession,
        repository: ParkingSpotStore | None = None
    ):
        self.db = db
        self.repository = repository or ParkingSpotRepository(db)

    async def exists_by_license_plate_car(self, license_plate_car: str) -> bool:
        return await self.repository.exists_by_license_plate_car(license_plate_car)

    async def exists_by_parking_spot_number(self, parking_spot_number: str) -> bool:
        return await self.repository.exists_by_parking_spot_number(parking_spot_number)

    async def exists_by_apartment_and_block(self, apartment: str, block: str) -> bool:
        return await self.repository.exists_by_apartment_and_block(apartment, block)

    async def ensure_unique(self, data: ParkingSpotInput) -> None:
        """Check the three uniqueness invariants, first violation wins.

        The database constraints remain the guarantee under concurrency;
        these checks exist to report which invariant was violated.

        Raises:
            ParkingSpotConflictError: If any invariant would be violated
        """
        if await self.exists_by_license_plate_car(data.license_plate_car):
            self._conflict('license_plate_car', ErrorMessages.LICENSE_PLATE_CAR_IN_USE)

        if await self.exists_by_parking_spot_number(data.parking_spot_number):
            self._conflict('parking_spot_number', ErrorMessages.PARKING_SPOT_NUMBER_IN_USE)

        if await self.exists_by_apartment_and_block(data.apartment, data.block):
            self._conflict('apartment_block', ErrorMessages.APARTMENT_BLOCK_IN_USE)

    async def create_parking_spot(self, data: ParkingSpotInput) -> ParkingSpot:
        """Register a new parking spot.

        This method:
        1. Checks license plate, spot number and apartment/block uniqueness
        2. Assigns a new id and stamps the registration date (UTC)
        3. Inserts the record in a single transaction

        Args:
            data: Validated parking spot input

        Returns:
            Created parking spot

        Raises:
            ParkingSpotConflictError: If a uniqueness invariant is violated
        """
        await self.ensure_unique(data)

        parking_spot = ParkingSpot(
            id=uuid4(),
            registration_date=utc_now(),
            **data.model_dump()
        )

        await self._write(self.repository.create(parking_spot))

        parking_spots_created_total.inc()
        logger.info(
            "Parking spot created",
            extra={
                'parking_spot_id': str(parking_spot.id),
                'parking_spot_number': parking_spot.parking_spot_number
            }
        )
        return parking_spot

    async def list_parking_spots(
        self,
        page: int = Pagination.DEFAULT_PAGE,
        size: int = Pagination.DEFAULT_PAGE_SIZE,
        sort: str | None = None,
        direction: str | None = None
    ) -> tuple[list[ParkingSpot], int]:
        """List parking spots with pagination and sorting.

        Args:
            page: Page index (0-based)
            size: Number of items per page
            sort: Field to order by (default ``id``)
            direction: ``ASC`` or ``DESC`` (default ``ASC``)

        Returns:
            Tuple of (list of parking spots, total count)
        """
        column, descending = resolve_sort(sort, direction)
        return await self.repository.find_page(page, size, column, descending)

    async def find_parking_spot(self, parking_spot_id: UUID) -> ParkingSpot | None:
        return await self.repository.find_by_id(parking_spot_id)

    async def get_parking_spot(self, parking_spot_id: UUID) -> ParkingSpot:
        """Get a parking spot by ID.

        Raises:
            ParkingSpotNotFoundError: If no parking spot has this id
        """
        parking_spot = await self.find_parking_spot(parking_spot_id)
        if parking_spot is None:
            raise ParkingSpotNotFoundError()
        return parking_spot

    async def update_parking_spot(
        self,
        parking_spot_id: UUID,
        data: ParkingSpotInput
    ) -> ParkingSpot:
        """Overwrite every field except id and registration date.

        Args:
            parking_spot_id: Parking spot UUID
            data: Validated replacement values

        Returns:
            Updated parking spot

        Raises:
            ParkingSpotNotFoundError: If no parking spot has this id
            ParkingSpotConflictError: If the new values collide with another record
        """
        parking_spot = await self.get_parking_spot(parking_spot_id)
        registration_date = parking_spot.registration_date

        for field, value in data.model_dump().items():
            setattr(parking_spot, field, value)

        await self._write(self.repository.update(parking_spot))

        parking_spots_updated_total.inc()
        logger.info(
            "Parking spot updated",
            extra={
                'parking_spot_id': str(parking_spot_id),
                'registration_date': str(registration_date)
            }
        )
        return parking_spot

    async def delete_parking_spot(self, parking_spot_id: UUID) -> None:
        """Delete a parking spot.

        Raises:
            ParkingSpotNotFoundError: If no parking spot has this id
        """
        parking_spot = await self.get_parking_spot(parking_spot_id)

        await self._write(self.repository.delete(parking_spot))

        parking_spots_deleted_total.inc()
        logger.info(
            "Parking spot deleted",
            extra={'parking_spot_id': str(parking_spot_id)}
        )

    async def _write(self, operation):
        """Run a repository write in its own transaction."""
        try:
            async with safe_transaction(self.db):
                return await operation
        except IntegrityError as e:
            conflict = conflict_from_integrity_error(e)
            if conflict is None:
                raise
            self._conflict(conflict.field, conflict.message, from_constraint=True)

    def _conflict(self, field: str, message: str, from_constraint: bool = False):
        record_conflict(field)
        logger.warning(
            "Parking spot uniqueness conflict",
            extra={'field': field, 'database_constraint': from_constraint}
        )
        raise ParkingSpotConflictError(message, field=field)
