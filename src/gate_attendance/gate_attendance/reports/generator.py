"""Date-range reports built from the roster and the attendance log.

Every report kind except ``absent`` groups matching events by staff member in
order of first appearance and summarizes the distinct dates. ``absent`` walks
the roster instead and lists the days without a check-in.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Optional, Sequence

from ..attendance.model import AttendanceEvent
from ..common.date_summary import summarize_dates
from ..common.datetime_utils import iter_days
from ..core.constants import ALL_SECTIONS, DEFAULT_SECTION, ISO_DATE_FORMAT, NO_DATA
from ..core.enums import ReportType, ScanStatus
from ..staff.model import StaffRecord
from .model import ReportRow

EventFilter = Callable[[AttendanceEvent], bool]

# report type -> (event filter, label, note prefix)
_GROUPED_REPORTS: dict[ReportType, tuple[EventFilter, str, str]] = {
    ReportType.PRESENT: (lambda e: e.status == ScanStatus.CHECK_IN, "attendance", "attended on"),
    ReportType.LATE: (lambda e: e.is_late, "late", "late on"),
    ReportType.PERMIT: (lambda e: e.status == ScanStatus.PERMIT, "permit", "permit on"),
    ReportType.EARLY: (lambda e: e.status == ScanStatus.EARLY_DEPARTURE, "early-departure", "left early on"),
}

ABSENT_LABEL = "absent"
ABSENT_NOTE_PREFIX = "absent on"


def _report_section(value: str) -> str:
    # Rows without a section are reported under the default one.
    return (value or DEFAULT_SECTION).upper()


def _in_section(value: str, section: str) -> bool:
    return section == ALL_SECTIONS or _report_section(value) == section


def _grouped_rows(events: Iterable[AttendanceEvent], *, label: str, note_prefix: str) -> list[ReportRow]:
    grouped: dict[str, tuple[AttendanceEvent, set[date]]] = {}
    for event in events:
        entry = grouped.get(event.staff_id)
        if entry is None:
            entry = (event, set())
            grouped[event.staff_id] = entry
        entry[1].add(event.work_date)

    rows = []
    for first, days in grouped.values():
        rows.append(
            ReportRow(
                staff_id=first.staff_id,
                name=first.staff_name,
                section=_report_section(first.section),
                date=max(days).strftime(ISO_DATE_FORMAT),
                time=first.time,
                type=label,
                notes=f"{note_prefix} {summarize_dates(days)}",
            )
        )
    return rows


def _absent_rows(
    roster: Iterable[StaffRecord],
    events: Iterable[AttendanceEvent],
    *,
    start: date,
    end: date,
    section: str,
) -> list[ReportRow]:
    all_days = list(iter_days(start, end))

    attended_by: dict[str, set[date]] = {}
    for event in events:
        if event.status == ScanStatus.CHECK_IN:
            attended_by.setdefault(event.staff_id, set()).add(event.work_date)

    rows = []
    for staff in roster:
        if not _in_section(staff.section, section):
            continue
        attended = attended_by.get(staff.staff_id, set())
        absent_days = [d for d in all_days if d not in attended]
        if not absent_days:
            continue
        rows.append(
            ReportRow(
                staff_id=staff.staff_id,
                name=staff.name,
                section=_report_section(staff.section),
                date=absent_days[-1].strftime(ISO_DATE_FORMAT),
                time=NO_DATA,
                type=ABSENT_LABEL,
                notes=f"{ABSENT_NOTE_PREFIX} {summarize_dates(absent_days)}",
            )
        )
    return rows


def generate_report(
    report_type: Optional[ReportType],
    section: str,
    start: date,
    end: date,
    roster: Sequence[StaffRecord],
    events: Sequence[AttendanceEvent],
) -> list[ReportRow]:
    """Build one report; an unknown (``None``) type yields no rows."""
    if report_type is None:
        return []

    section = (section or ALL_SECTIONS).strip()
    section = ALL_SECTIONS if section.lower() == ALL_SECTIONS else section.upper()

    in_range = [
        e
        for e in events
        if e.work_date is not None and start <= e.work_date <= end and _in_section(e.section, section)
    ]

    if report_type == ReportType.ABSENT:
        return _absent_rows(roster, in_range, start=start, end=end, section=section)

    event_filter, label, note_prefix = _GROUPED_REPORTS[report_type]
    return _grouped_rows((e for e in in_range if event_filter(e)), label=label, note_prefix=note_prefix)
