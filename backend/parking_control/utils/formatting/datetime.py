"""DateTime formatting utilities."""

from datetime import UTC, datetime

from ...core.constants import DateFormats


def format_datetime(dt: datetime, format_str: str = "%Y-%m-%d %H:%M:%S") -> str:
    """Format datetime to string.

    Args:
        dt: Datetime object to format
        format_str: Format string (default: ISO-like format)

    Returns:
        Formatted datetime string

    Examples:
        >>> format_datetime(datetime(2024, 1, 15, 10, 30, 0))
        "2024-01-15 10:30:00"
        >>> format_datetime(datetime(2024, 1, 15), "%Y-%m-%d")
        "2024-01-15"
    """
    if not dt:
        return ""
    return dt.strftime(format_str)


def format_utc_datetime(dt: datetime) -> str:
    """Format a timestamp as ``yyyy-MM-ddTHH:mm:ssZ`` in UTC.

    Aware datetimes are converted to UTC first. Naive datetimes are taken
    to be UTC already, which is how SQLite hands back stored values.

    Examples:
        >>> format_utc_datetime(datetime(2024, 1, 15, 10, 30, 5, tzinfo=UTC))
        "2024-01-15T10:30:05Z"
    """
    if not dt:
        return ""
    if dt.tzinfo is not None:
        dt = dt.astimezone(UTC)
    return format_datetime(dt, DateFormats.UTC_DATETIME)


def utc_now() -> datetime:
    """Current time in UTC, truncated to whole seconds."""
    return datetime.now(UTC).replace(microsecond=0)
