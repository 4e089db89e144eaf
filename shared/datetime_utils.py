"""
Date/time helpers — framework-agnostic.
"""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Return *value* as an aware UTC datetime.

    MongoDB hands back naive datetimes unless the client is created with
    ``tz_aware=True``; naive values are assumed to be UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def is_expired(expires_at: datetime, now: datetime | None = None) -> bool:
    """Return True once *now* is strictly past *expires_at*."""
    return (now or utcnow()) > as_utc(expires_at)
