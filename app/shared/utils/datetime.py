"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC. SQLite
hands back naive datetimes, so normalize with ensure_utc at the
repository boundary before comparing against utc_now().
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of datetime.now() (naive, local time) or
    datetime.utcnow() (naive, deprecated in Python 3.12).
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)
