from __future__ import annotations

from datetime import datetime
from typing import Mapping, Optional

from ..core.constants import DEFAULT_SECTION, DEFAULT_SECTION_THRESHOLDS
from ..core.enums import ScanPolicy, ScanStatus
from ..staff.model import StaffRecord
from .factory import ScanStrategyFactory
from .model import SectionThreshold
from .strategies.base import StatusDecision


class ScanClassifier:
    """Derive the recorded status and note for one scan.

    Pure: no store access. ``last_status_today`` is only consulted under the
    auto-toggle policy.
    """

    def __init__(
        self,
        thresholds: Mapping[str, SectionThreshold],
        *,
        policy: ScanPolicy = ScanPolicy.EXPLICIT,
        strategy_factory: ScanStrategyFactory | None = None,
    ):
        self._thresholds = {k.upper(): v for k, v in thresholds.items()}
        self._policy = policy
        self._factory = strategy_factory or ScanStrategyFactory()

    @property
    def policy(self) -> ScanPolicy:
        return self._policy

    @property
    def sections(self) -> tuple[str, ...]:
        return tuple(self._thresholds)

    def threshold_for(self, section: str) -> SectionThreshold:
        threshold = self._thresholds.get((section or "").upper()) or self._thresholds.get(DEFAULT_SECTION)
        if threshold is None:
            threshold = SectionThreshold.parse(DEFAULT_SECTION_THRESHOLDS[DEFAULT_SECTION])
        return threshold

    def classify(
        self,
        staff: StaffRecord,
        mode: ScanStatus,
        now: datetime,
        *,
        last_status_today: Optional[ScanStatus] = None,
    ) -> StatusDecision:
        status = self._factory.resolve_status(mode, policy=self._policy, last_status_today=last_status_today)
        strategy = self._factory.for_status(status)
        return strategy.decide(now=now, threshold=self.threshold_for(staff.section))
