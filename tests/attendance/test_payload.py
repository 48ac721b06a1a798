from __future__ import annotations

import json
from datetime import date, datetime, time, timezone

import pytest

from src.erp_dashboard.erp_dashboard.attendance.payload import (
    employee_from_payload,
    employees_from_payload,
    records_from_payload,
)
from src.erp_dashboard.erp_dashboard.attendance.repository import JsonFileAttendanceRepository
from src.erp_dashboard.erp_dashboard.core.exceptions import DataSourceError


def test_employee_from_populated_payload():
    employee = employee_from_payload(
        {
            "_id": "64f0c0ffee",
            "employeeId": "EMP0003",
            "department": "Sales",
            "user": {"_id": "u3", "name": "Carol", "department": "Sales"},
        }
    )

    assert employee.employee_id == "64f0c0ffee"
    assert employee.user_id == "u3"
    assert employee.name == "Carol"
    assert employee.display_id == "EMP0003"
    assert employee.expected_start_time == time(9, 0)
    assert employee.expected_end_time == time(17, 0)


def test_employee_schedule_override():
    employee = employee_from_payload(
        {"_id": "e1", "user": "u1", "name": "Dan", "expectedStartTime": "08:30", "expectedEndTime": "04:30 PM"}
    )

    assert employee.user_id == "u1"
    assert employee.expected_start_time == time(8, 30)
    assert employee.expected_end_time == time(16, 30)


def test_malformed_employees_are_skipped():
    employees = employees_from_payload([{"department": "HR"}, {"_id": "ok", "user": {"name": "Eve"}}])

    assert [e.employee_id for e in employees] == ["ok"]


def test_records_from_payload():
    records = records_from_payload(
        [
            {
                "employee": {"_id": "e1", "employeeId": "EMP0001"},
                "date": "2024-06-03T00:00:00.000Z",
                "checkIn": "2024-06-03T09:15:00.000Z",
                "checkOut": None,
                "status": "present",
            },
            {"employeeId": "e2", "date": "2024-06-03", "checkIn": "yesterday-ish", "checkOut": "2024-06-03T17:00:00"},
            {"date": "2024-06-03"},
        ]
    )

    assert len(records) == 2
    first, second = records
    assert first.employee_id == "e1"
    assert first.work_date == date(2024, 6, 3)
    assert first.check_in == datetime(2024, 6, 3, 9, 15, tzinfo=timezone.utc)
    assert first.check_out is None
    # malformed check-in degrades to missing instead of dropping the record
    assert second.check_in is None
    assert second.check_out == datetime(2024, 6, 3, 17, 0)


def test_json_repository_reads_export(tmp_path):
    path = tmp_path / "attendance.json"
    path.write_text(
        json.dumps(
            {
                "employees": [{"_id": "e1", "employeeId": "EMP0001", "department": "HR", "user": {"name": "Alice"}}],
                "attendance": [
                    {"employee": "e1", "date": "2024-06-03", "checkIn": "2024-06-03T09:00:00"},
                    {"employee": "e1", "date": "2024-07-01", "checkIn": "2024-07-01T09:00:00"},
                ],
            }
        ),
        encoding="utf-8",
    )
    repo = JsonFileAttendanceRepository(path)

    assert [e.name for e in repo.list_employees()] == ["Alice"]
    records = repo.list_records(start_date=date(2024, 6, 1), end_date=date(2024, 6, 30))
    assert [r.work_date for r in records] == [date(2024, 6, 3)]


def test_json_repository_failure_is_data_source_error(tmp_path):
    repo = JsonFileAttendanceRepository(tmp_path / "missing.json")

    with pytest.raises(DataSourceError):
        repo.list_employees()


def test_snapshot_reads_export_once(tmp_path, monkeypatch):
    path = tmp_path / "attendance.json"
    path.write_text(
        json.dumps(
            {
                "employees": [{"_id": "e1", "employeeId": "EMP0001", "department": "HR", "user": {"name": "Alice"}}],
                "attendance": [
                    {"employee": "e1", "date": "2024-06-03", "checkIn": "2024-06-03T09:00:00"},
                    {"employee": "e1", "date": "2024-07-01", "checkIn": "2024-07-01T09:00:00"},
                ],
            }
        ),
        encoding="utf-8",
    )
    repo = JsonFileAttendanceRepository(path)
    load = repo._load
    reads = []

    def counting_load():
        reads.append(1)
        return load()

    monkeypatch.setattr(repo, "_load", counting_load)

    snapshot = repo.load_snapshot(start_date=date(2024, 6, 1), end_date=date(2024, 6, 30))

    assert len(reads) == 1
    assert [e.name for e in snapshot.employees] == ["Alice"]
    assert [r.work_date for r in snapshot.records] == [date(2024, 6, 3)]
