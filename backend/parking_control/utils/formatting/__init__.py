"""Formatting utilities."""

from .datetime import format_datetime, format_utc_datetime, utc_now

__all__ = [
    "format_datetime",
    "format_utc_datetime",
    "utc_now",
]
