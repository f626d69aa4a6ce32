"""Utility functions organized by domain.

For convenience, the helpers are re-exported here.
However, prefer importing from specific modules for better clarity:
    from parking_control.utils.formatting import format_utc_datetime
    from parking_control.utils.generators import generate_request_id
"""

# Converters
from .converters import normalize_path, to_snake_case

# Formatting
from .formatting import format_datetime, format_utc_datetime, utc_now

# Generators
from .generators import generate_request_id

__all__ = [
    # Converters
    "normalize_path",
    "to_snake_case",
    # Formatting
    "format_datetime",
    "format_utc_datetime",
    "utc_now",
    # Generators
    "generate_request_id",
]
