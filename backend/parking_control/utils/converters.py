"""Conversion utilities."""

import re

_UUID_PATTERN = r'[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'


def normalize_path(path: str) -> str:
    """Normalize API path by replacing UUIDs and IDs with placeholders.

    Useful for metrics and logging to avoid high cardinality.

    Examples:
        >>> normalize_path("/parking-spot/a1b2c3d4-e5f6-7890-abcd-ef1234567890")
        "/parking-spot/{id}"
        >>> normalize_path("/parking-spot/123")
        "/parking-spot/{id}"
    """
    if not path:
        return path

    path = re.sub(_UUID_PATTERN, '{id}', path, flags=re.IGNORECASE)

    return re.sub(r'/\d+(?=/|$)', '/{id}', path)


def to_snake_case(name: str) -> str:
    """Convert a camelCase name to snake_case.

    Examples:
        >>> to_snake_case("licensePlateCar")
        "license_plate_car"
        >>> to_snake_case("block")
        "block"
    """
    return re.sub(r'(?<!^)(?=[A-Z])', '_', name).lower()
