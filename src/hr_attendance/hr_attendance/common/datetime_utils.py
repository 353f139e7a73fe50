from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.constants import CLOCK_PLACEHOLDER


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value)


def to_iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def format_clock(value: Optional[datetime]) -> str:
    return value.strftime("%H:%M") if value else CLOCK_PLACEHOLDER


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
