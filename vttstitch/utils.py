"""
Timestamp utilities for VTTStitch.

VTT timestamps are handled as plain millisecond counts within a single day,
so no calendar or timezone logic is involved anywhere.
"""

import re

from .exceptions import InvalidOffsetError, MalformedTimestampError, TimestampOverflowError

MILLISECONDS_PER_DAY = 24 * 60 * 60 * 1000

TIMESTAMP_RE = re.compile(r"^(\d{2}):([0-5]\d):([0-5]\d)\.(\d{3})$")


def timestamp_to_milliseconds(timestamp: str) -> int:
    """
    Convert HH:MM:SS.mmm format to milliseconds since 00:00:00.000.

    Args:
        timestamp: Timestamp string in HH:MM:SS.mmm format

    Returns:
        Time in whole milliseconds

    Raises:
        MalformedTimestampError: If the string is not a valid time of day

    Example:
        >>> timestamp_to_milliseconds("00:01:30.500")
        90500
    """
    match = TIMESTAMP_RE.match(timestamp)
    if not match:
        raise MalformedTimestampError(f"Invalid timestamp: {timestamp!r}")

    h, m, s, ms = (int(part) for part in match.groups())
    if h >= 24:
        raise MalformedTimestampError(f"Timestamp beyond 24 hours: {timestamp!r}")
    return ((h * 60 + m) * 60 + s) * 1000 + ms


def milliseconds_to_timestamp(milliseconds: int) -> str:
    """
    Convert milliseconds to HH:MM:SS.mmm format.

    Args:
        milliseconds: Time in milliseconds, 0 <= value < 24 hours

    Returns:
        Timestamp string in HH:MM:SS.mmm format

    Example:
        >>> milliseconds_to_timestamp(90500)
        '00:01:30.500'
    """
    if not 0 <= milliseconds < MILLISECONDS_PER_DAY:
        raise TimestampOverflowError(f"Time out of single-day range: {milliseconds}ms")

    seconds, ms = divmod(milliseconds, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{ms:03d}"


def shift_timestamp(timestamp: str, offset_ms: float) -> str:
    """
    Move a timestamp forward by offset_ms milliseconds.

    Fractional offsets are truncated to whole milliseconds. A result at or
    past midnight is rejected instead of wrapping to the next day.

    Args:
        timestamp: Timestamp string in HH:MM:SS.mmm format
        offset_ms: Milliseconds to add, must not be negative

    Returns:
        Shifted timestamp string

    Raises:
        InvalidOffsetError: If offset_ms is negative
        TimestampOverflowError: If the result crosses 24:00:00.000

    Example:
        >>> shift_timestamp("00:00:59.500", 600)
        '00:01:00.100'
    """
    if offset_ms < 0:
        raise InvalidOffsetError(f"Negative offset: {offset_ms}")

    shifted = timestamp_to_milliseconds(timestamp) + int(offset_ms)
    if shifted >= MILLISECONDS_PER_DAY:
        raise TimestampOverflowError(
            f"Shifting {timestamp} by {int(offset_ms)}ms crosses midnight"
        )
    return milliseconds_to_timestamp(shifted)


def compare_timestamps(a: str, b: str) -> int:
    """Return a negative number, zero or a positive number as a is before, equal to or after b."""
    return timestamp_to_milliseconds(a) - timestamp_to_milliseconds(b)


def timestamp_sort_key(timestamp: str) -> int:
    """Sort key ordering timestamps chronologically."""
    return timestamp_to_milliseconds(timestamp)
