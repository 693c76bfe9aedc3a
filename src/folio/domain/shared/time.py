"""Timestamps. Everything the domain stores is an aware UTC datetime."""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize a timestamp read back from the database.

    SQLite drops the offset of ``DateTime(timezone=True)`` columns, so naive
    values are taken to be UTC. Aware values are converted to UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
