from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, time
from typing import Optional


class PunctualityCalculator(ABC):
    """Calculator interface (Strategy Pattern for punctuality metrics)."""

    @abstractmethod
    def minutes_late(self, check_in: Optional[datetime], expected_start: time) -> int:
        raise NotImplementedError

    @abstractmethod
    def minutes_early(self, check_out: Optional[datetime], expected_end: time) -> int:
        raise NotImplementedError

    @abstractmethod
    def working_hours(self, check_in: Optional[datetime], check_out: Optional[datetime]) -> float:
        raise NotImplementedError
