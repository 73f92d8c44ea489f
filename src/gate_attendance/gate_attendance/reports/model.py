from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportRow:
    """Read-model for report screens and CSV exports."""

    staff_id: str
    name: str
    section: str
    date: str
    time: str
    type: str
    notes: str

    def to_dict(self) -> dict:
        return {
            "id": self.staff_id,
            "name": self.name,
            "section": self.section,
            "date": self.date,
            "time": self.time,
            "type": self.type,
            "notes": self.notes,
        }


REPORT_FIELDS = ["id", "name", "section", "date", "time", "type", "notes"]
