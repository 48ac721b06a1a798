from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence, Union

from ..common.datetime_utils import coerce_date
from ..core.constants import MISSING_RANGE_WARNING
from ..core.enums import Department
from .model import AttendanceRecord, Employee

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportFilters:
    """Report window (inclusive) plus optional employee/department narrowing."""

    date_from: Union[date, str, None]
    date_to: Union[date, str, None]
    employee_id: Optional[str] = None
    department: Optional[str] = None


@dataclass(frozen=True)
class ReportWindow:
    start: date
    end: date

    @property
    def total_days(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass(frozen=True)
class FilterResult:
    records: list[AttendanceRecord] = field(default_factory=list)
    employees: list[Employee] = field(default_factory=list)
    window: Optional[ReportWindow] = None
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.window is not None


def resolve_window(filters: ReportFilters) -> tuple[Optional[ReportWindow], Optional[str]]:
    if not filters.date_from or not filters.date_to:
        return None, MISSING_RANGE_WARNING
    try:
        start = coerce_date(filters.date_from)
        end = coerce_date(filters.date_to)
    except ValueError:
        return None, "Invalid date format. Use YYYY-MM-DD"
    if start > end:
        return None, "dateFrom must not be after dateTo"
    return ReportWindow(start=start, end=end), None


def _department_matches(employee: Employee, department: Optional[str]) -> bool:
    if not department:
        return True
    wanted = Department.parse(department)
    have = Department.parse(employee.department)
    if wanted is not None and have is not None:
        return wanted == have
    return employee.department == department


def filter_records(
    records: Sequence[AttendanceRecord],
    filters: ReportFilters,
    employees: Sequence[Employee],
) -> FilterResult:
    """Narrow raw records to the window and the optional employee/department filters.

    Missing or invalid bounds produce an empty result with a warning.
    """
    window, warning = resolve_window(filters)
    if window is None:
        logger.warning("Attendance report filter rejected: %s", warning)
        return FilterResult(warnings=[warning])

    selected = [
        e
        for e in employees
        if (not filters.employee_id or e.matches(str(filters.employee_id)))
        and _department_matches(e, filters.department)
    ]
    selected_ids = {e.employee_id for e in selected}

    kept = [r for r in records if window.contains(r.work_date) and r.employee_id in selected_ids]
    return FilterResult(records=kept, employees=selected, window=window)
