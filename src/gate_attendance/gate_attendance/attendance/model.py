from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, tzinfo
from typing import Optional

from ..common.datetime_utils import parse_clock
from ..core.constants import ISO_DATE_FORMAT, LATE_MARKERS
from ..core.enums import ScanStatus


@dataclass(frozen=True)
class SectionThreshold:
    """Time of day after which a check-in in the section counts as late."""

    hour: int
    minute: int

    @classmethod
    def parse(cls, value: str) -> "SectionThreshold":
        clock = parse_clock(value)
        return cls(hour=clock.hour, minute=clock.minute)

    def cutoff_on(self, day: date, zone: Optional[tzinfo]) -> datetime:
        return datetime.combine(day, time(self.hour, self.minute), tzinfo=zone)


def is_late_note(note: Optional[str]) -> bool:
    return bool(note) and any(marker in note for marker in LATE_MARKERS)


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one row of the append-only attendance log.

    ``work_date``/``status`` are ``None`` for rows that could not be parsed;
    such rows stay in the log but never match a date or status filter.
    """

    staff_id: str
    staff_name: str
    section: str
    work_date: Optional[date]
    time: str
    status: Optional[ScanStatus]
    note: str = ""

    @property
    def is_late(self) -> bool:
        return self.status == ScanStatus.CHECK_IN and is_late_note(self.note)

    @property
    def date_str(self) -> str:
        return self.work_date.strftime(ISO_DATE_FORMAT) if self.work_date else ""

    def to_row(self) -> list[str]:
        return [
            self.staff_id,
            self.staff_name,
            self.section,
            self.date_str,
            self.time,
            self.status.value if self.status else "",
            self.note,
        ]
