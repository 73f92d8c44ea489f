from __future__ import annotations

from enum import Enum
from typing import Optional

from .constants import LEGACY_STATUS_LABELS


class Role(str, Enum):
    """Roles handed back by login; the front end routes on them."""

    ADMIN = "admin"
    HR = "hr"
    GATE = "gate"


class ScanStatus(str, Enum):
    """Status written to the attendance log for one scan."""

    CHECK_IN = "check-in"
    CHECK_OUT = "check-out"
    PERMIT = "permit"
    EARLY_DEPARTURE = "early-departure"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ScanStatus"]:
        """Map a stored or requested label to a status, ``None`` if unknown."""
        if not value:
            return None
        label = value.strip()
        label = LEGACY_STATUS_LABELS.get(label, label).lower()
        for status in cls:
            if status.value == label:
                return status
        return None


class ReportType(str, Enum):
    PRESENT = "present"
    LATE = "late"
    PERMIT = "permit"
    EARLY = "early"
    ABSENT = "absent"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ReportType"]:
        if not value:
            return cls.PRESENT
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class ScanPolicy(str, Enum):
    """How the recorded status is chosen for a scan.

    EXPLICIT records the mode the gate operator selected. AUTO_TOGGLE ignores
    it and flips to check-out when the last event of the day was a check-in.
    """

    EXPLICIT = "explicit"
    AUTO_TOGGLE = "auto-toggle"
