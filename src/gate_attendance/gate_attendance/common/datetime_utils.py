from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Iterator, Optional
from zoneinfo import ZoneInfo

from ..core.constants import ISO_DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def try_parse_iso_date(value: Optional[str]) -> Optional[date]:
    """Lenient variant for sheet cells and query strings.

    Only the first ten characters are read, so ``2024-01-05T08:00`` and
    ``2024-01-05 08:00`` both resolve to the day.
    """
    if not value:
        return None
    try:
        return parse_iso_date(str(value).strip()[:10])
    except ValueError:
        return None


def parse_clock(value: str) -> time:
    """Parse ``HH:MM`` (or ``HH:MM:SS``) into a time of day."""
    parts = value.strip().split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid clock value: {value!r}")
    seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
    return time(hour=int(parts[0]), minute=int(parts[1]), second=seconds)


def load_zone(name: str) -> tzinfo:
    return ZoneInfo(name)


def now_in(zone: tzinfo) -> datetime:
    """Current time in the configured zone.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(zone)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every calendar day from start to end, both inclusive."""
    if start > end:
        return
    current = start
    while True:
        yield current
        if current == end:
            return
        current += timedelta(days=1)
