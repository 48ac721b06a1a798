from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a per-day status."""

    @abstractmethod
    def decide(self, *, record: Optional[AttendanceRecord], minutes_late: int, minutes_early: int) -> StatusDecision:
        raise NotImplementedError
