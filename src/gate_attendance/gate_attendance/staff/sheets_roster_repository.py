from __future__ import annotations

from typing import Sequence

from ..core.constants import ROSTER_RANGE
from ..sheets.client import SheetsClient, cell
from .model import StaffRecord, normalize_section
from .repository import RosterRepository


class SheetsRosterRepository(RosterRepository):
    """Roster rows: ``[id, name, position, barcode, section]``."""

    def __init__(self, client: SheetsClient, *, range_name: str = ROSTER_RANGE):
        self._client = client
        self._range = range_name

    def list_staff(self) -> Sequence[StaffRecord]:
        rows = self._client.read_range(self._range)
        return [
            StaffRecord(
                staff_id=cell(r, 0),
                name=cell(r, 1),
                position=cell(r, 2),
                barcode=cell(r, 3),
                section=normalize_section(cell(r, 4)),
            )
            for r in rows
            if any(cell(r, i) for i in range(5))
        ]
