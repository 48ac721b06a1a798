from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import date, time
from pathlib import Path
from typing import Optional, Protocol, Sequence

from ..core.constants import DEFAULT_EXPECTED_END, DEFAULT_EXPECTED_START
from ..core.exceptions import DataSourceError
from .model import AttendanceRecord, Employee
from .payload import employees_from_payload, records_from_payload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceSnapshot:
    """Employees and records taken from one read of the data source."""

    employees: list[Employee] = field(default_factory=list)
    records: list[AttendanceRecord] = field(default_factory=list)


def _in_window(records: Sequence[AttendanceRecord], start_date: date, end_date: date) -> list[AttendanceRecord]:
    return [r for r in records if start_date <= r.work_date <= end_date]


class AttendanceRepository(Protocol):
    def list_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def list_records(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def load_snapshot(self, *, start_date: date, end_date: date) -> AttendanceSnapshot:
        return AttendanceSnapshot(
            employees=list(self.list_employees()),
            records=list(self.list_records(start_date=start_date, end_date=end_date)),
        )


class JsonFileAttendanceRepository(AttendanceRepository):
    """Reads a backend export: ``{"employees": [...], "attendance": [...]}``.

    Note: The file is re-read for every report so a refreshed export is picked
    up; one report never mixes two versions of the file.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        default_start: time = DEFAULT_EXPECTED_START,
        default_end: time = DEFAULT_EXPECTED_END,
    ):
        self._path = Path(path)
        self._default_start = default_start
        self._default_end = default_end

    def _load(self) -> dict:
        try:
            with self._path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            raise DataSourceError(f"Failed to load attendance data from {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise DataSourceError(f"Unexpected attendance data layout in {self._path}")
        return data

    def _employees(self, data: dict) -> list[Employee]:
        return employees_from_payload(
            data.get("employees") or [],
            default_start=self._default_start,
            default_end=self._default_end,
        )

    def list_employees(self) -> Sequence[Employee]:
        return self._employees(self._load())

    def list_records(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        return _in_window(records_from_payload(self._load().get("attendance") or []), start_date, end_date)

    def load_snapshot(self, *, start_date: date, end_date: date) -> AttendanceSnapshot:
        data = self._load()
        return AttendanceSnapshot(
            employees=self._employees(data),
            records=_in_window(records_from_payload(data.get("attendance") or []), start_date, end_date),
        )


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, employees: Optional[Sequence[Employee]] = None, records: Optional[Sequence[AttendanceRecord]] = None):
        self._employees = list(employees or [])
        self._records = list(records or [])

    def list_employees(self) -> Sequence[Employee]:
        return list(self._employees)

    def list_records(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        return _in_window(self._records, start_date, end_date)
