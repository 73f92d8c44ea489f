from __future__ import annotations

from datetime import datetime

from ...core.constants import PERMIT_NOTE
from ...core.enums import ScanStatus
from ..model import SectionThreshold
from .base import ScanStrategy, StatusDecision


class PermitStrategy(ScanStrategy):
    """Official permit (leave during the day)."""

    def decide(self, *, now: datetime, threshold: SectionThreshold) -> StatusDecision:
        return StatusDecision(status=ScanStatus.PERMIT, note=PERMIT_NOTE)
