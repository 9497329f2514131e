"""
Time Utilities

Coinbase returns candle times as seconds since epoch and accepts range
boundaries as ISO-8601 strings. The helpers in this module normalize both
into timezone-aware UTC datetime objects.
"""

from datetime import datetime, timezone
from typing import Union

from dateutil import parser as dateparser


def to_utc_datetime(timestamp: Union[int, float]) -> datetime:
    """
    Convert a timestamp (seconds or milliseconds) to UTC datetime.

    Detection Logic:
        - If timestamp > 1e12 (1 trillion): Assumed to be milliseconds
        - Otherwise: Assumed to be seconds

    Args:
        timestamp: Unix timestamp in seconds or milliseconds

    Returns:
        datetime: Timezone-aware datetime object in UTC

    Raises:
        ValueError: If timestamp is negative or invalid

    Examples:
        >>> to_utc_datetime(1704110400)
        datetime.datetime(2024, 1, 1, 12, 0, tzinfo=datetime.timezone.utc)

        >>> to_utc_datetime(1704110400000)
        datetime.datetime(2024, 1, 1, 12, 0, tzinfo=datetime.timezone.utc)
    """
    if timestamp < 0:
        raise ValueError(f"Timestamp cannot be negative: {timestamp}")

    if timestamp > 1e12:
        timestamp = timestamp / 1000.0

    try:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OSError, OverflowError, ValueError) as e:
        raise ValueError(f"Invalid timestamp: {timestamp}. Error: {e}")


def parse_iso8601(value: str) -> datetime:
    """
    Parse an ISO-8601 string into a UTC datetime.

    Naive values are assumed to be UTC.

    Raises:
        ValueError: If the string is not ISO-8601

    Example:
        >>> parse_iso8601("2024-01-01T12:00:00Z")
        datetime.datetime(2024, 1, 1, 12, 0, tzinfo=tzutc())
    """
    try:
        dt = dateparser.isoparse(value)
    except (TypeError, OverflowError) as e:
        raise ValueError(f"Invalid ISO-8601 timestamp: {value!r}. Error: {e}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def is_iso8601(value: str) -> bool:
    """True if value parses as an ISO-8601 timestamp."""
    try:
        parse_iso8601(value)
    except ValueError:
        return False
    return True
