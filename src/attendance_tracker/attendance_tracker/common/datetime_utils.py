from __future__ import annotations

from datetime import datetime
from typing import Any, Optional


def now_local() -> datetime:
    """Current local time (naive), the default service clock."""
    return datetime.now()


def to_iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def parse_iso(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp as written by the store (None passes through)."""

    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        v = value.strip()
        if v.endswith("Z"):
            v = v[:-1] + "+00:00"
        return datetime.fromisoformat(v)
    raise TypeError(f"Unsupported timestamp value type: {type(value)!r}")


def align_tz(value: datetime, reference: datetime) -> tuple[datetime, datetime]:
    """Make an aware/naive pair comparable by converting to local time."""

    if value.tzinfo is not None and reference.tzinfo is None:
        return value.astimezone().replace(tzinfo=None), reference
    if value.tzinfo is None and reference.tzinfo is not None:
        return value, reference.astimezone().replace(tzinfo=None)
    return value, reference


def is_in_future(value: datetime, now: datetime) -> bool:
    value, now = align_tz(value, now)
    return value > now


def to_local_naive(value: datetime) -> datetime:
    """Aware timestamps become naive local time, so mixed records sort together."""

    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
