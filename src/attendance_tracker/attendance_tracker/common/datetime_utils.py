from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DATE_PREFIX_LENGTH


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_iso(value: datetime) -> str:
    """Serialize a timestamp the way it is stored in the database."""
    return value.isoformat(timespec="microseconds")


def day_of(value: str) -> date:
    """Calendar day of a stored timestamp string."""
    return date.fromisoformat(value[:DATE_PREFIX_LENGTH])
