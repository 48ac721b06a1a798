from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord
from .base import AttendanceStrategy, StatusDecision


class EarlyLeaveStrategy(AttendanceStrategy):
    """On-time check-in, checked out before the expected end."""

    def decide(self, *, record: Optional[AttendanceRecord], minutes_late: int, minutes_early: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.EARLY_LEAVE)
