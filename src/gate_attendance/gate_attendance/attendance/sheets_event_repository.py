from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import try_parse_iso_date
from ..core.constants import EVENT_LOG_APPEND_RANGE, EVENT_LOG_RANGE
from ..core.enums import ScanStatus
from ..sheets.client import SheetsClient, cell
from ..staff.model import normalize_section
from .model import AttendanceEvent
from .repository import EventLogRepository


class SheetsEventLogRepository(EventLogRepository):
    """Log rows: ``[staff_id, name, section, date, time, status, note]``."""

    def __init__(
        self,
        client: SheetsClient,
        *,
        read_range: str = EVENT_LOG_RANGE,
        append_range: str = EVENT_LOG_APPEND_RANGE,
    ):
        self._client = client
        self._read_range = read_range
        self._append_range = append_range

    def list_events(self) -> Sequence[AttendanceEvent]:
        rows = self._client.read_range(self._read_range)
        return [
            AttendanceEvent(
                staff_id=cell(r, 0),
                staff_name=cell(r, 1),
                section=normalize_section(cell(r, 2)),
                work_date=try_parse_iso_date(cell(r, 3)),
                time=cell(r, 4),
                status=ScanStatus.parse(cell(r, 5)),
                note=cell(r, 6),
            )
            for r in rows
            if cell(r, 0)
        ]

    def append_event(self, event: AttendanceEvent) -> None:
        self._client.append_row(self._append_range, event.to_row())
