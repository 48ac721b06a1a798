from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord
from .base import AttendanceStrategy, StatusDecision


class PresentStrategy(AttendanceStrategy):
    """On-time check-in, normal check-out."""

    def decide(self, *, record: Optional[AttendanceRecord], minutes_late: int, minutes_early: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)
