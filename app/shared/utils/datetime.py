"""
UTC datetime helpers.

Timestamps read back from SQLite are naive; normalize them at the
repository boundary so API responses always carry an offset.
"""

from datetime import UTC, datetime


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - None stays None
    - Naive values are taken as UTC
    - Aware values are converted to UTC

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
