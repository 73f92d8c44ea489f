from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from ...core.enums import ScanStatus
from ..model import SectionThreshold


@dataclass(frozen=True)
class StatusDecision:
    status: ScanStatus
    note: str = ""


class ScanStrategy(ABC):
    """Strategy Pattern: encapsulate how a scan of one status is annotated."""

    @abstractmethod
    def decide(self, *, now: datetime, threshold: SectionThreshold) -> StatusDecision:
        raise NotImplementedError
