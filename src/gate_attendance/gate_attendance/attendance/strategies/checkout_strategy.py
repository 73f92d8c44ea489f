from __future__ import annotations

from datetime import datetime

from ...core.enums import ScanStatus
from ..model import SectionThreshold
from .base import ScanStrategy, StatusDecision


class CheckOutStrategy(ScanStrategy):
    """Normal check-out, no annotation."""

    def decide(self, *, now: datetime, threshold: SectionThreshold) -> StatusDecision:
        return StatusDecision(status=ScanStatus.CHECK_OUT)
