from __future__ import annotations

from datetime import datetime

from ...core.constants import LATE_NOTE
from ...core.enums import ScanStatus
from ..model import SectionThreshold
from .base import ScanStrategy, StatusDecision


class CheckInStrategy(ScanStrategy):
    """Check-in; late only when strictly after the section cutoff."""

    def decide(self, *, now: datetime, threshold: SectionThreshold) -> StatusDecision:
        cutoff = threshold.cutoff_on(now.date(), now.tzinfo)
        if now > cutoff:
            return StatusDecision(status=ScanStatus.CHECK_IN, note=LATE_NOTE)
        return StatusDecision(status=ScanStatus.CHECK_IN)
