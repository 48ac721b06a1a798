from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .model import AttendanceRecord
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import AttendanceStrategy
from .strategies.early_strategy import EarlyLeaveStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import PresentStrategy

BACKEND_ABSENT = "absent"


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: first match wins (Absent, Late, Early Leave, Present)."""

    def for_day(self, *, record: Optional[AttendanceRecord], minutes_late: int, minutes_early: int) -> AttendanceStrategy:
        if record is None or record.check_in is None:
            return AbsentStrategy()
        if (record.status or "").strip().lower() == BACKEND_ABSENT:
            return AbsentStrategy()
        if minutes_late > 0:
            return LateStrategy()
        if minutes_early > 0:
            return EarlyLeaveStrategy()
        return PresentStrategy()
