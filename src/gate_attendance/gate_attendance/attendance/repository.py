from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceEvent


class EventLogRepository(Protocol):
    """Append-only attendance log, read back in insertion order."""

    def list_events(self) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def append_event(self, event: AttendanceEvent) -> None:
        raise NotImplementedError
