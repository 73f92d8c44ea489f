from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Iterable, Sequence

from ..attendance.model import AttendanceEvent
from ..core.enums import ScanStatus
from ..staff.model import StaffRecord


@dataclass
class DailyStats:
    present: int = 0
    late: int = 0
    permit: int = 0
    early: int = 0
    absent: int = 0
    total: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def compute_dashboard(
    roster: Iterable[StaffRecord],
    events: Iterable[AttendanceEvent],
    today: date,
    sections: Sequence[str],
) -> dict[str, DailyStats]:
    """Per-section counts for one day.

    Staff on permit or early departure are not present, but they are
    accounted for: they are taken out of the absent pool as well.
    Roster entries and events whose section is not one of ``sections``
    (a blank section included) are not counted anywhere.
    """
    stats = {section: DailyStats() for section in sections}

    for staff in roster:
        section_stats = stats.get(staff.section.upper())
        if section_stats is not None:
            section_stats.total += 1

    attended_today: set[tuple[str, str]] = set()
    for event in events:
        if event.work_date != today:
            continue
        section = event.section.upper()
        section_stats = stats.get(section)
        if section_stats is None:
            continue

        attended_today.add((section, event.staff_id))

        if event.status == ScanStatus.CHECK_IN:
            section_stats.present += 1
            if event.is_late:
                section_stats.late += 1
        elif event.status == ScanStatus.PERMIT:
            section_stats.permit += 1
        elif event.status == ScanStatus.EARLY_DEPARTURE:
            section_stats.early += 1

    for section, section_stats in stats.items():
        attended = sum(1 for sec, _ in attended_today if sec == section)
        section_stats.absent = max(0, section_stats.total - (attended + section_stats.permit + section_stats.early))

    return stats
