from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.constants import DEFAULT_EXPECTED_END, DEFAULT_EXPECTED_START
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee plus the expected daily schedule.

    ``code`` is the business id shown on reports (e.g. EMP0001).
    """

    employee_id: str
    user_id: Optional[str]
    name: str
    department: Optional[str]
    code: Optional[str] = None
    expected_start_time: time = DEFAULT_EXPECTED_START
    expected_end_time: time = DEFAULT_EXPECTED_END

    @property
    def display_id(self) -> str:
        return self.code or self.employee_id

    def matches(self, key: str) -> bool:
        """Match by record id, business code or owning user id."""
        return key in {self.employee_id, self.code, self.user_id}


@dataclass(frozen=True)
class AttendanceRecord:
    """Raw attendance record as fetched from the backend.

    ``status`` is the backend's own flag; only ``absent`` changes the outcome.
    """

    employee_id: str
    work_date: date
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class ReportRow:
    """One employee/day line of the punctuality report."""

    employee_name: str
    employee_id: str
    date: str
    check_in: str
    check_out: str
    status: AttendanceStatus
    total_working_hours: float
    expected_start_time: str
    actual_check_in: str
    minutes_late: int
    expected_end_time: str
    actual_check_out: str
    minutes_early: int
    total_absent_days: int
    absence_percentage: float

    def to_dict(self) -> dict:
        """Camel-cased shape the dashboard views consume."""
        return {
            "employeeName": self.employee_name,
            "employeeId": self.employee_id,
            "date": self.date,
            "checkIn": self.check_in,
            "checkOut": self.check_out,
            "status": self.status.value,
            "totalWorkingHours": self.total_working_hours,
            "expectedStartTime": self.expected_start_time,
            "actualCheckIn": self.actual_check_in,
            "minutesLate": self.minutes_late,
            "expectedEndTime": self.expected_end_time,
            "actualCheckOut": self.actual_check_out,
            "minutesEarly": self.minutes_early,
            "totalAbsentDays": self.total_absent_days,
            "absencePercentage": self.absence_percentage,
        }
