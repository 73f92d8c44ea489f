from __future__ import annotations

from dataclasses import asdict, dataclass

from ..core.constants import DEFAULT_SECTION


@dataclass(frozen=True)
class StaffRecord:
    """Domain entity: one roster row.

    Note: Plain data object; loading lives in the repositories.
    """

    staff_id: str
    name: str
    position: str
    barcode: str
    section: str = DEFAULT_SECTION

    def to_dict(self) -> dict:
        data = asdict(self)
        data["id"] = data.pop("staff_id")
        return data


def normalize_section(value) -> str:
    """Upper-cased section code; a blank cell stays blank."""
    return str(value or "").strip().upper()
