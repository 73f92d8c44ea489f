from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Optional

from ..common.datetime_utils import now_in
from ..common.logging_setup import get_logger
from ..core.constants import CLOCK_TIME_FORMAT
from ..core.enums import ScanPolicy, ScanStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..staff.directory import StaffDirectory
from ..staff.model import StaffRecord
from .classifier import ScanClassifier
from .model import AttendanceEvent
from .repository import EventLogRepository

logger = get_logger("scan")


@dataclass(frozen=True)
class ScanResult:
    staff: StaffRecord
    event: AttendanceEvent

    def to_dict(self) -> dict:
        return {
            "ok": True,
            "staff": self.staff.to_dict(),
            "date": self.event.date_str,
            "time": self.event.time,
            "status": self.event.status.value if self.event.status else "",
            "note": self.event.note,
        }


class ScanService:
    """Use case: a barcode is read at the gate."""

    def __init__(
        self,
        directory: StaffDirectory,
        events: EventLogRepository,
        classifier: ScanClassifier,
        *,
        zone: tzinfo,
    ):
        self._directory = directory
        self._events = events
        self._classifier = classifier
        self._zone = zone

    @staticmethod
    def parse_mode(mode: Optional[str]) -> ScanStatus:
        if mode is None or not mode.strip():
            return ScanStatus.CHECK_IN
        status = ScanStatus.parse(mode)
        if status is None:
            raise ValidationError(f"Unknown scan mode: {mode}")
        return status

    def _last_status_today(self, staff_id: str, today: date) -> Optional[ScanStatus]:
        last = None
        for event in self._events.list_events():
            if event.staff_id == staff_id and event.work_date == today:
                last = event.status
        return last

    def scan(self, barcode: str, mode: Optional[str] = None, *, now: datetime | None = None) -> ScanResult:
        # Auto-toggle ignores the requested mode.
        if self._classifier.policy == ScanPolicy.EXPLICIT:
            requested = self.parse_mode(mode)
        else:
            requested = ScanStatus.CHECK_IN
        now = now or now_in(self._zone)
        today = now.date()

        staff = self._directory.find_by_barcode(barcode)
        if not staff:
            raise NotFoundError("Employee not found")

        last_status = None
        if self._classifier.policy == ScanPolicy.AUTO_TOGGLE:
            last_status = self._last_status_today(staff.staff_id, today)

        decision = self._classifier.classify(staff, requested, now, last_status_today=last_status)
        event = AttendanceEvent(
            staff_id=staff.staff_id,
            staff_name=staff.name,
            section=staff.section,
            work_date=today,
            time=now.strftime(CLOCK_TIME_FORMAT),
            status=decision.status,
            note=decision.note,
        )
        self._events.append_event(event)

        logger.info("Scan %s -> staff %s %s %s", barcode, staff.staff_id, event.status.value, event.note or "")
        return ScanResult(staff=staff, event=event)
