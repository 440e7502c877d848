"""
utils/time_utils.py

Purpose: Timestamp helpers

- Store-friendly ISO timestamps
- Millisecond epoch values for generated identifiers
"""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_now_iso(now: Optional[datetime] = None) -> str:
    """
    Returns an ISO-8601 UTC timestamp with millisecond precision and a Z suffix,
    e.g. 2024-05-01T10:15:30.123Z
    """
    now = now or utc_now()
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def epoch_millis(now: Optional[datetime] = None) -> int:
    """
    Milliseconds since the Unix epoch.
    """
    now = now or utc_now()
    return int(now.timestamp() * 1000)
