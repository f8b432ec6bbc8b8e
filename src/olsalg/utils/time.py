"""Time-related helpers."""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

OSLO = ZoneInfo("Europe/Oslo")


def oslo_now() -> datetime:
    """Return a timezone-aware timestamp in Europe/Oslo."""

    return datetime.now(OSLO)


def ensure_oslo(value: datetime) -> datetime:
    """Normalize a datetime to Europe/Oslo.

    Naive values are taken to already be Oslo wall-clock time.
    """

    if value.tzinfo is None:
        return value.replace(tzinfo=OSLO)
    return value.astimezone(OSLO)
