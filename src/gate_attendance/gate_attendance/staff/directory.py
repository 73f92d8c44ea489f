from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..common.logging_setup import get_logger
from .model import StaffRecord
from .repository import RosterRepository

logger = get_logger("staff")


@dataclass(frozen=True)
class _Snapshot:
    records: tuple[StaffRecord, ...] = ()
    by_barcode: Mapping[str, StaffRecord] = field(default_factory=dict)


class StaffDirectory:
    """Roster cached in memory and indexed by barcode.

    The table is only loaded lazily on first use (or on an explicit
    ``reload``); roster edits made afterwards are not seen until the next
    reload. Each reload builds a complete snapshot and swaps it in with one
    assignment, so a reader never sees a half-built table.
    """

    def __init__(self, roster: RosterRepository):
        self._roster = roster
        self._snapshot = _Snapshot()

    def reload(self) -> int:
        records = tuple(self._roster.list_staff())
        index: dict[str, StaffRecord] = {}
        for record in records:
            code = record.barcode.strip()
            if not code:
                continue
            if code in index:
                logger.warning("Duplicate barcode %s (staff %s); keeping staff %s", code, record.staff_id, index[code].staff_id)
                continue
            index[code] = record

        self._snapshot = _Snapshot(records=records, by_barcode=index)
        logger.info("Loaded %d staff records", len(records))
        return len(records)

    def records(self) -> tuple[StaffRecord, ...]:
        return self._snapshot.records

    def find_by_barcode(self, code: str) -> Optional[StaffRecord]:
        snapshot = self._snapshot
        if not snapshot.records:
            self.reload()
            snapshot = self._snapshot
        return snapshot.by_barcode.get((code or "").strip())
