from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Optional

from ..attendance.repository import EventLogRepository
from ..common.datetime_utils import now_in, try_parse_iso_date
from ..common.logging_setup import get_logger
from ..core.constants import ALL_SECTIONS, MAX_REPORT_DAYS
from ..core.enums import ReportType
from ..staff.repository import RosterRepository
from .generator import generate_report
from .model import ReportRow

logger = get_logger("reports")


@dataclass(frozen=True)
class ReportQuery:
    report_type: Optional[ReportType]
    section: str
    start: date
    end: date


class ReportService:
    """Use case: HR report over a date range.

    Query parameters are never rejected: missing or malformed values fall
    back to defaults (``present``, all sections, today). A window longer than
    ``max_days`` is cut down to its last ``max_days`` days.
    """

    def __init__(
        self,
        roster: RosterRepository,
        events: EventLogRepository,
        *,
        zone: tzinfo,
        max_days: int = MAX_REPORT_DAYS,
    ):
        self._roster = roster
        self._events = events
        self._zone = zone
        self._max_days = max(1, max_days)

    def build_query(
        self,
        *,
        report_type: Optional[str] = None,
        section: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        now: datetime | None = None,
    ) -> ReportQuery:
        today = (now or now_in(self._zone)).date()
        start = try_parse_iso_date(start_date) or today
        end = try_parse_iso_date(end_date) or today
        if (end - start).days >= self._max_days:
            clamped = end - timedelta(days=self._max_days - 1)
            logger.warning("Report window %s..%s exceeds %d days; using %s..%s", start, end, self._max_days, clamped, end)
            start = clamped

        return ReportQuery(
            report_type=ReportType.parse(report_type),
            section=(section or "").strip() or ALL_SECTIONS,
            start=start,
            end=end,
        )

    def build_report(self, query: ReportQuery) -> list[ReportRow]:
        if query.report_type is None:
            return []
        roster = self._roster.list_staff()
        events = self._events.list_events()
        return generate_report(query.report_type, query.section, query.start, query.end, roster, events)
