from __future__ import annotations

from datetime import date

from src.erp_dashboard.erp_dashboard.attendance.filters import ReportFilters, filter_records
from src.erp_dashboard.erp_dashboard.attendance.model import AttendanceRecord, Employee


EMPLOYEES = [
    Employee(employee_id="e1", user_id="u1", name="Alice", department="HR", code="EMP0001"),
    Employee(employee_id="e2", user_id="u2", name="Bob", department="Sales", code="EMP0002"),
]

RECORDS = [
    AttendanceRecord(employee_id="e2", work_date=date(2024, 6, 2)),
    AttendanceRecord(employee_id="e1", work_date=date(2024, 6, 1)),
    AttendanceRecord(employee_id="e1", work_date=date(2024, 5, 31)),
    AttendanceRecord(employee_id="e1", work_date=date(2024, 6, 30)),
    AttendanceRecord(employee_id="ghost", work_date=date(2024, 6, 3)),
]


def test_window_is_inclusive_and_order_preserved():
    result = filter_records(RECORDS, ReportFilters(date_from=date(2024, 6, 1), date_to=date(2024, 6, 30)), EMPLOYEES)

    assert result.ok
    assert [(r.employee_id, r.work_date.day) for r in result.records] == [("e2", 2), ("e1", 1), ("e1", 30)]
    assert result.window.total_days == 30


def test_employee_filter_accepts_id_code_or_user_id():
    for key in ("e1", "EMP0001", "u1"):
        result = filter_records(RECORDS, ReportFilters("2024-06-01", "2024-06-30", employee_id=key), EMPLOYEES)
        assert [e.name for e in result.employees] == ["Alice"]
        assert {r.employee_id for r in result.records} == {"e1"}


def test_department_filter():
    result = filter_records(RECORDS, ReportFilters("2024-06-01", "2024-06-30", department="Sales"), EMPLOYEES)

    assert [e.name for e in result.employees] == ["Bob"]
    assert [r.employee_id for r in result.records] == ["e2"]


def test_missing_bounds_return_empty_with_warning():
    result = filter_records(RECORDS, ReportFilters(date_from="2024-06-01", date_to=None), EMPLOYEES)

    assert not result.ok
    assert result.records == []
    assert result.warnings == ["Date range (dateFrom and dateTo) is required"]


def test_invalid_and_inverted_bounds_return_warning():
    bad = filter_records(RECORDS, ReportFilters(date_from="06/01/2024", date_to="2024-06-30"), EMPLOYEES)
    inverted = filter_records(RECORDS, ReportFilters(date_from="2024-06-30", date_to="2024-06-01"), EMPLOYEES)

    assert bad.records == [] and bad.warnings
    assert inverted.records == [] and inverted.warnings
