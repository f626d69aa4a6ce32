"""SQLAlchemy Model for Parking Spots."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, String, UniqueConstraint, Uuid

from ..core.constants import FieldLimits, UniqueConstraints
from ..db.database import Base


class ParkingSpot(Base):
    """Parking spot registered to a car, a responsible person and an apartment."""

    __tablename__ = "parking_spots"

    # Unique constraints back the service-level existence checks, which
    # cannot see concurrent inserts
    __table_args__ = (
        UniqueConstraint('parking_spot_number', name=UniqueConstraints.PARKING_SPOT_NUMBER),
        UniqueConstraint('license_plate_car', name=UniqueConstraints.LICENSE_PLATE_CAR),
        UniqueConstraint('apartment', 'block', name=UniqueConstraints.APARTMENT_BLOCK),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    parking_spot_number = Column(
        String(FieldLimits.PARKING_SPOT_NUMBER_MAX_LENGTH),
        nullable=False
    )
    license_plate_car = Column(
        String(FieldLimits.LICENSE_PLATE_CAR_MAX_LENGTH),
        nullable=False
    )
    brand_car = Column(String(FieldLimits.BRAND_CAR_MAX_LENGTH), nullable=False)
    model_car = Column(String(FieldLimits.MODEL_CAR_MAX_LENGTH), nullable=False)
    color_car = Column(String(FieldLimits.COLOR_CAR_MAX_LENGTH), nullable=False)
    registration_date = Column(DateTime(timezone=True), nullable=False)
    responsible_name = Column(
        String(FieldLimits.RESPONSIBLE_NAME_MAX_LENGTH),
        nullable=False
    )
    apartment = Column(String(FieldLimits.APARTMENT_MAX_LENGTH), nullable=False)
    block = Column(String(FieldLimits.BLOCK_MAX_LENGTH), nullable=False)

    def __repr__(self):
        return (
            f"<ParkingSpot(id={self.id}, number={self.parking_spot_number}, "
            f"plate={self.license_plate_car}, apartment={self.apartment}, block={self.block})>"
        )
