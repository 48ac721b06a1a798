from __future__ import annotations

from datetime import datetime, time
from typing import Optional

from .base import PunctualityCalculator


def _wall_clock(value: datetime) -> datetime:
    # Timestamps are compared as recorded, no timezone conversion.
    return value.replace(tzinfo=None)


class StandardPunctualityCalculator(PunctualityCalculator):
    """Standard rule: whole minutes against the expected schedule, never below 0."""

    def minutes_late(self, check_in: Optional[datetime], expected_start: time) -> int:
        if not check_in:
            return 0
        actual = _wall_clock(check_in)
        expected = datetime.combine(actual.date(), expected_start)
        return max(int((actual - expected).total_seconds() // 60), 0)

    def minutes_early(self, check_out: Optional[datetime], expected_end: time) -> int:
        if not check_out:
            return 0
        actual = _wall_clock(check_out)
        expected = datetime.combine(actual.date(), expected_end)
        return max(int((expected - actual).total_seconds() // 60), 0)

    def working_hours(self, check_in: Optional[datetime], check_out: Optional[datetime]) -> float:
        if not check_in or not check_out:
            return 0.0
        seconds = (_wall_clock(check_out) - _wall_clock(check_in)).total_seconds()
        return max(0.0, round(seconds / 3600, 2))
