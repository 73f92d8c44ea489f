from __future__ import annotations

from datetime import datetime

from ...core.constants import EARLY_DEPARTURE_NOTE
from ...core.enums import ScanStatus
from ..model import SectionThreshold
from .base import ScanStrategy, StatusDecision


class EarlyDepartureStrategy(ScanStrategy):
    def decide(self, *, now: datetime, threshold: SectionThreshold) -> StatusDecision:
        return StatusDecision(status=ScanStatus.EARLY_DEPARTURE, note=EARLY_DEPARTURE_NOTE)
