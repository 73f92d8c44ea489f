from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import ScanPolicy, ScanStatus
from .strategies.base import ScanStrategy
from .strategies.checkin_strategy import CheckInStrategy
from .strategies.checkout_strategy import CheckOutStrategy
from .strategies.early_departure_strategy import EarlyDepartureStrategy
from .strategies.permit_strategy import PermitStrategy


@dataclass
class ScanStrategyFactory:
    """Factory Pattern: choose the status to record and the strategy for it."""

    def resolve_status(
        self,
        requested: ScanStatus,
        *,
        policy: ScanPolicy,
        last_status_today: Optional[ScanStatus],
    ) -> ScanStatus:
        if policy == ScanPolicy.AUTO_TOGGLE:
            if last_status_today == ScanStatus.CHECK_IN:
                return ScanStatus.CHECK_OUT
            return ScanStatus.CHECK_IN
        return requested

    def for_status(self, status: ScanStatus) -> ScanStrategy:
        if status == ScanStatus.CHECK_IN:
            return CheckInStrategy()
        if status == ScanStatus.PERMIT:
            return PermitStrategy()
        if status == ScanStatus.EARLY_DEPARTURE:
            return EarlyDepartureStrategy()
        return CheckOutStrategy()
