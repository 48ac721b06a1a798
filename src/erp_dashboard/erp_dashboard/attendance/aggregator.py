from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import format_clock, is_weekend, iter_days
from ..core.constants import DATE_FORMAT
from ..core.enums import AttendanceStatus
from .calculator.base import PunctualityCalculator
from .calculator.standard_calculator import StandardPunctualityCalculator
from .factory import AttendanceStrategyFactory
from .filters import FilterResult, ReportFilters, filter_records
from .model import AttendanceRecord, Employee, ReportRow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportResult:
    rows: list[ReportRow] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class AttendanceAggregator:
    """Turns filtered attendance records into per-employee/per-day report rows.

    Every employee in scope gets exactly one row per counted day of the window.
    Days without a record are Absent. Absence totals are computed per employee
    across the whole window and repeated on each of that employee's rows.
    """

    def __init__(
        self,
        *,
        calculator: Optional[PunctualityCalculator] = None,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
        exclude_weekends: bool = False,
    ):
        self._calculator = calculator or StandardPunctualityCalculator()
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._exclude_weekends = bool(exclude_weekends)

    def build_report(
        self,
        records: Sequence[AttendanceRecord],
        filters: ReportFilters,
        employees: Sequence[Employee],
    ) -> ReportResult:
        filtered = filter_records(records, filters, employees)
        if not filtered.ok:
            return ReportResult(warnings=list(filtered.warnings))
        return self.aggregate(filtered)

    def aggregate(self, filtered: FilterResult) -> ReportResult:
        window = filtered.window
        warnings: list[str] = list(filtered.warnings)

        by_key: dict[tuple[str, date], AttendanceRecord] = {}
        for r in filtered.records:
            key = (r.employee_id, r.work_date)
            if key in by_key:
                warnings.append(f"Duplicate attendance record for {r.employee_id} on {r.work_date:%Y-%m-%d} ignored")
                continue
            by_key[key] = r

        counted_days = [d for d in iter_days(window.start, window.end) if not (self._exclude_weekends and is_weekend(d))]
        counted = set(counted_days)
        total_days = len(counted_days)

        keyed_rows: list[tuple[date, int, ReportRow]] = []
        for position, employee in enumerate(filtered.employees):
            days = counted | {d for (eid, d) in by_key if eid == employee.employee_id}
            drafts = [(day, self._day_row(employee, day, by_key.get((employee.employee_id, day)), warnings)) for day in sorted(days)]

            absent_days = sum(1 for day, draft in drafts if day in counted and draft["status"] == AttendanceStatus.ABSENT)
            percentage = _absence_percentage(absent_days, total_days)

            for day, draft in drafts:
                row = ReportRow(**draft, total_absent_days=absent_days, absence_percentage=percentage)
                keyed_rows.append((day, position, row))

        keyed_rows.sort(key=lambda item: (item[0], item[1]))
        return ReportResult(rows=[row for _, _, row in keyed_rows], warnings=warnings)

    def _day_row(self, employee: Employee, day: date, record: Optional[AttendanceRecord], warnings: list[str]) -> dict:
        check_in = record.check_in if record else None
        check_out = record.check_out if record else None

        try:
            minutes_late = self._calculator.minutes_late(check_in, employee.expected_start_time)
            minutes_early = self._calculator.minutes_early(check_out, employee.expected_end_time)
            hours = self._calculator.working_hours(check_in, check_out)
            check_in_s = format_clock(check_in)
            check_out_s = format_clock(check_out)
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning("Bad attendance record for %s on %s: %s", employee.employee_id, day, e)
            warnings.append(f"Unreadable check-in/check-out for {employee.display_id} on {day:%Y-%m-%d}")
            minutes_late = minutes_early = 0
            hours = 0.0
            check_in_s = check_out_s = format_clock(None)

        strategy = self._factory.for_day(record=record, minutes_late=minutes_late, minutes_early=minutes_early)
        status = strategy.decide(record=record, minutes_late=minutes_late, minutes_early=minutes_early).status
        if status == AttendanceStatus.ABSENT:
            minutes_late = minutes_early = 0
            hours = 0.0
            check_in_s = check_out_s = format_clock(None)
        elif status == AttendanceStatus.LATE:
            # Late days report no early departure.
            minutes_early = 0

        return {
            "employee_name": employee.name,
            "employee_id": employee.display_id,
            "date": day.strftime(DATE_FORMAT),
            "check_in": check_in_s,
            "check_out": check_out_s,
            "status": status,
            "total_working_hours": hours,
            "expected_start_time": format_clock(employee.expected_start_time),
            "actual_check_in": check_in_s,
            "minutes_late": minutes_late,
            "expected_end_time": format_clock(employee.expected_end_time),
            "actual_check_out": check_out_s,
            "minutes_early": minutes_early,
        }


def _absence_percentage(absent_days: int, total_days: int) -> float:
    if total_days <= 0:
        return 0.0
    return min(max(round(absent_days / total_days * 100, 2), 0.0), 100.0)


def build_report(
    records: Sequence[AttendanceRecord],
    filters: ReportFilters,
    schedules: Sequence[Employee],
    *,
    exclude_weekends: bool = False,
) -> list[ReportRow]:
    """Convenience entry point: filtered, aggregated rows for one report window."""
    return AttendanceAggregator(exclude_weekends=exclude_weekends).build_report(records, filters, schedules).rows
