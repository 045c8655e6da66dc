from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime.

    Naive values are read as local wall-clock time, which is what
    ``datetime.now()`` produces.
    """
    return value.astimezone(timezone.utc)


def to_iso(value: Optional[datetime]) -> str:
    """Serialize as UTC ISO-8601 so stored strings sort chronologically."""
    return as_utc(value or utcnow()).isoformat(timespec="microseconds")
