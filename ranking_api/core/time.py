"""Time helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def isoformat_utc(value: datetime) -> str:
    """Render a stored timestamp as ISO-8601 UTC with a ``Z`` suffix."""

    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat() + "Z"


__all__ = ["isoformat_utc", "utcnow"]
