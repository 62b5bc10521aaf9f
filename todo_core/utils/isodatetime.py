"""ISO 8601 datetime/date conversion utilities.

This module centralizes all transformations between Python datetime/date objects
and ISO 8601 strings. All date/time operations should use these functions
to ensure consistency and make usage clear across the codebase.
"""

from datetime import datetime, date, UTC


def to_timestamp(dt: datetime) -> str:
    """Convert datetime to ISO 8601 UTC timestamp string."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).isoformat().replace("+00:00", "Z")


def to_datetime(timestamp: str) -> datetime:
    """Convert ISO 8601 UTC timestamp string to datetime."""
    return datetime.fromisoformat(timestamp.replace('Z', '+00:00'))


def utcnow() -> datetime:
    """Get current time as an aware UTC datetime."""
    return datetime.now(UTC)


def now_unix() -> int:
    """Get current time as integer seconds since the epoch."""
    return int(utcnow().timestamp())


def parse_date(value: str) -> date:
    """Parse a calendar date from an ISO 8601 date or datetime string.

    Datetimes are reduced to their date component.

    Raises:
        ValueError: If value is not a valid ISO 8601 date or datetime
    """
    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        return to_datetime(value).date()
