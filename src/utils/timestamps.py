"""Timestamp helpers.

Timestamps are handled as timezone-aware UTC datetimes and stored as ISO-8601
strings. Naive datetimes are taken to be UTC.
"""

from datetime import datetime
from typing import Optional, Union

import pytz


def now_utc() -> datetime:
    return datetime.now(pytz.utc)


def ensure_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime."""
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return pytz.utc.localize(value)
    return value.astimezone(pytz.utc)


def to_iso(value: datetime) -> str:
    return ensure_utc(value).isoformat()


def from_iso(value: str) -> datetime:
    return ensure_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))


def parse_timestamp(value: Union[datetime, str, None]) -> Optional[datetime]:
    """Parse a client-supplied timestamp.

    Args:
        value: A datetime or an ISO-8601 string.

    Returns:
        The aware UTC datetime, or None if the value is missing, cannot be
        parsed, or falls outside the representable range once moved to UTC.
    """
    try:
        if isinstance(value, datetime):
            return ensure_utc(value)
        if isinstance(value, str) and value.strip():
            return from_iso(value.strip())
    except (ValueError, OverflowError):
        return None
    return None
