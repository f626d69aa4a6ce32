"""Tests for request/response schemas and error formatting."""

from datetime import UTC, datetime, timedelta, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from parking_control.core.error_handlers import collect_field_errors
from parking_control.schemas.parking_spot import (
    ParkingSpotInput,
    ParkingSpotPage,
    ParkingSpotResponse,
)


@pytest.fixture()
def spot_values():
    return {
        "id": uuid4(),
        "parking_spot_number": "A-101",
        "license_plate_car": "ABC1234",
        "brand_car": "Ford",
        "model_car": "Ka",
        "color_car": "Gray",
        "registration_date": datetime(2024, 3, 5, 14, 7, 9, tzinfo=UTC),
        "responsible_name": "Carla Dias",
        "apartment": "12",
        "block": "B",
    }


class TestParkingSpotInput:
    """Tests for ParkingSpotInput validation"""

    def test_accepts_camel_case(self):
        data = ParkingSpotInput.model_validate({
            "parkingSpotNumber": "A-1",
            "licensePlateCar": "AAA1111",
            "brandCar": "Ford",
            "modelCar": "Ka",
            "colorCar": "Gray",
            "responsibleName": "Carla",
            "apartment": "1",
            "block": "B",
        })

        assert data.parking_spot_number == "A-1"
        assert set(data.model_dump()) == {
            "parking_spot_number", "license_plate_car", "brand_car", "model_car",
            "color_car", "responsible_name", "apartment", "block",
        }

    def test_rejects_blank_with_every_field_reported(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            ParkingSpotInput.model_validate({"parkingSpotNumber": " "})

        fields = {error.field for error in collect_field_errors(exc_info.value.errors())}
        assert fields == {
            "parkingSpotNumber", "licensePlateCar", "brandCar", "modelCar",
            "colorCar", "responsibleName", "apartment", "block",
        }

    def test_whitespace_only_value_is_blank(self, parking_spot_payload):
        with pytest.raises(PydanticValidationError) as exc_info:
            ParkingSpotInput.model_validate({**parking_spot_payload, "block": "\t  "})

        errors = collect_field_errors(exc_info.value.errors())
        assert [(error.field, error.message) for error in errors] == [("block", "must not be blank")]

    def test_values_are_trimmed_once(self, parking_spot_payload):
        data = ParkingSpotInput.model_validate({**parking_spot_payload, "apartment": "  12 B  "})

        assert data.apartment == "12 B"


class TestParkingSpotResponse:
    """Tests for ParkingSpotResponse serialization"""

    def test_json_shape(self, spot_values):
        data = ParkingSpotResponse(**spot_values).model_dump(by_alias=True, mode="json")

        assert set(data) == {
            "id", "parkingSpotNumber", "licensePlateCar", "brandCar", "modelCar",
            "colorCar", "responsibleName", "apartment", "block", "registrationDate",
        }
        assert data["registrationDate"] == "2024-03-05T14:07:09Z"

    def test_registration_date_converted_to_utc(self, spot_values):
        spot_values["registration_date"] = datetime(
            2024, 3, 5, 11, 7, 9, tzinfo=timezone(timedelta(hours=-3))
        )

        data = ParkingSpotResponse(**spot_values).model_dump(by_alias=True)

        assert data["registrationDate"] == "2024-03-05T14:07:09Z"


class TestParkingSpotPage:
    """Tests for the page envelope"""

    def test_from_results(self, spot_values):
        page = ParkingSpotPage.from_results([ParkingSpotResponse(**spot_values)], 21, 2, 10)

        assert page.total_pages == 3
        assert page.number_of_elements == 1
        assert page.first is False
        assert page.last is True
        assert page.empty is False

    def test_camel_case_keys(self):
        data = ParkingSpotPage.from_results([], 0, 0, 10).model_dump(by_alias=True)

        assert data["totalElements"] == 0
        assert data["numberOfElements"] == 0
        assert data["empty"] is True


def test_collect_field_errors_strips_location_and_prefix():
    errors = [
        {"loc": ("body", "block"), "msg": "Value error, must not be blank"},
        {"loc": ("query", "size"), "msg": "Input should be less than or equal to 100"},
        {"loc": ("body",), "msg": "Field required"},
    ]

    fields = collect_field_errors(errors)

    assert [(f.field, f.message) for f in fields] == [
        ("block", "must not be blank"),
        ("size", "Input should be less than or equal to 100"),
        ("body", "Field required"),
    ]
