from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Sequence

from ..attendance.repository import EventLogRepository
from ..common.datetime_utils import now_in
from ..staff.repository import RosterRepository
from .aggregator import DailyStats, compute_dashboard


class DashboardService:
    """Use case: today's per-section counters, always read fresh from the store."""

    def __init__(
        self,
        roster: RosterRepository,
        events: EventLogRepository,
        *,
        zone: tzinfo,
        sections: Sequence[str],
    ):
        self._roster = roster
        self._events = events
        self._zone = zone
        self._sections = tuple(sections)

    def today_stats(self, *, now: datetime | None = None) -> dict[str, DailyStats]:
        now = now or now_in(self._zone)
        staff = self._roster.list_staff()
        events = self._events.list_events()
        return compute_dashboard(staff, events, now.date(), self._sections)
