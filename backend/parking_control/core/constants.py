"""Application Constants.

Centralized constants used throughout the application.
This file contains all hardcoded values that should be maintained in one place.
"""

# ============================================================================
# PARKING SPOT FIELD CONSTANTS
# ============================================================================

class FieldLimits:
    """Maximum lengths for parking spot fields (mirrors the column sizes)."""
    PARKING_SPOT_NUMBER_MAX_LENGTH = 10
    LICENSE_PLATE_CAR_MAX_LENGTH = 7
    BRAND_CAR_MAX_LENGTH = 70
    MODEL_CAR_MAX_LENGTH = 70
    COLOR_CAR_MAX_LENGTH = 70
    RESPONSIBLE_NAME_MAX_LENGTH = 130
    APARTMENT_MAX_LENGTH = 30
    BLOCK_MAX_LENGTH = 30


class UniqueConstraints:
    """Database unique constraint names for the parking_spots table."""
    PARKING_SPOT_NUMBER = "uq_parking_spots_parking_spot_number"
    LICENSE_PLATE_CAR = "uq_parking_spots_license_plate_car"
    APARTMENT_BLOCK = "uq_parking_spots_apartment_block"


# ============================================================================
# PAGINATION CONSTANTS
# ============================================================================

class Pagination:
    """Pagination defaults (zero-based page index)."""
    DEFAULT_PAGE = 0
    # keeps page * size well inside a 64-bit OFFSET
    MAX_PAGE = 10_000_000
    DEFAULT_PAGE_SIZE = 10
    MIN_PAGE_SIZE = 1
    MAX_PAGE_SIZE = 100
    DEFAULT_SORT = "id"
    DEFAULT_DIRECTION = "ASC"
    DIRECTIONS = ("ASC", "DESC")


# ============================================================================
# DATE FORMAT CONSTANTS
# ============================================================================

class DateFormats:
    """Date formats used at the serialization boundary."""
    UTC_DATETIME = "%Y-%m-%dT%H:%M:%SZ"


# ============================================================================
# DATABASE CONSTANTS
# ============================================================================

class DatabaseLimits:
    """Database connection settings."""
    POOL_SIZE = 10
    MAX_OVERFLOW = 20


# ============================================================================
# ERROR MESSAGES
# ============================================================================

class ErrorMessages:
    """Standard error messages."""
    INTERNAL_SERVER_ERROR = "Internal server error"
    VALIDATION_FAILED = "Validation failed"
    PARKING_SPOT_NOT_FOUND = "Parking Spot not found."
    LICENSE_PLATE_CAR_IN_USE = "Conflict: License Plate Car is already in use!"
    PARKING_SPOT_NUMBER_IN_USE = "Conflict: Parking Spot is already in use!"
    APARTMENT_BLOCK_IN_USE = "Conflict: Parking Spot already registered for this apartment/block!"
    PARKING_SPOT_CONFLICT = "Conflict: Parking Spot violates a uniqueness constraint."
    FIELD_BLANK = "must not be blank"
    SORT_FIELD_INVALID = "Unknown sort field '{field}'. Allowed: {allowed}"
    SORT_DIRECTION_INVALID = "Unknown sort direction '{direction}'. Allowed: ASC, DESC"


# ============================================================================
# SUCCESS MESSAGES
# ============================================================================

class SuccessMessages:
    """Standard success messages."""
    PARKING_SPOT_DELETED = "Parking Spot deleted successfully."


# ============================================================================
# HTTP HEADERS
# ============================================================================

class HttpHeaders:
    """HTTP header names."""
    REQUEST_ID = "X-Request-ID"
    PROCESS_TIME = "X-Process-Time"
    CONTENT_TYPE = "Content-Type"
    ACCEPT = "Accept"


# ============================================================================
# API ENDPOINTS
# ============================================================================

class ApiEndpoints:
    """API endpoint paths."""
    DOCS = "/docs"
    REDOC = "/redoc"
    OPENAPI = "/openapi.json"
    HEALTH = "/health"
    ROOT = "/"
    PARKING_SPOT = "/parking-spot"


class HttpStatusCodes:
    """HTTP status codes used outside of FastAPI's ``status`` module."""
    INTERNAL_SERVER_ERROR = 500


# ============================================================================
# CORS CONSTANTS
# ============================================================================

class Cors:
    """Cross-origin defaults."""
    ALLOW_ALL_ORIGINS = ["*"]
    MAX_AGE_SECONDS = 3600
    ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]


# ============================================================================
# METRICS CONSTANTS
# ============================================================================

class Metrics:
    """Prometheus metrics settings."""
    ENDPOINT_PATH = "/metrics"
