"""Timezone utilities.

All aggregate timestamps are stored as timezone-aware UTC datetimes.
"""

from datetime import UTC, datetime


def now_utc() -> datetime:
    """Get current datetime in UTC timezone.

    Returns:
        Current datetime with UTC timezone.
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Normalize a datetime to UTC.

    Args:
        dt: Datetime object (timezone-aware or naive) or None.

    Returns:
        Datetime in UTC or None if input is None. Naive datetimes are
        assumed to already be in UTC (SQLite drops tzinfo on round trip).
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
