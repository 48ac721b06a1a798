"""Map backend JSON payloads onto attendance domain objects.

The backend returns plain records, e.g. employees as
``{"_id", "employeeId", "department", "user": {"_id", "name", "department"}}``
and attendance as ``{"employee"|"employeeId", "date", "checkIn", "checkOut", "status"}``.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..common.datetime_utils import coerce_date, parse_timestamp, parse_wall_clock
from ..core.constants import DEFAULT_EXPECTED_END, DEFAULT_EXPECTED_START
from .model import AttendanceRecord, Employee

logger = logging.getLogger(__name__)


def _ref_id(value) -> Optional[str]:
    """Populated references arrive as objects, unpopulated ones as bare ids."""
    if isinstance(value, dict):
        value = value.get("_id") or value.get("id")
    return str(value) if value else None


def _safe_timestamp(value, *, field_name: str, context: str):
    try:
        return parse_timestamp(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring malformed %s %r for %s", field_name, value, context)
        return None


def employee_from_payload(data: dict, *, default_start=DEFAULT_EXPECTED_START, default_end=DEFAULT_EXPECTED_END) -> Employee:
    user = data.get("user") if isinstance(data.get("user"), dict) else {}
    start = data.get("expectedStartTime")
    end = data.get("expectedEndTime")
    return Employee(
        employee_id=str(data["_id"]),
        user_id=_ref_id(data.get("user")),
        name=str(user.get("name") or data.get("name") or ""),
        department=data.get("department") or user.get("department"),
        code=data.get("employeeId"),
        expected_start_time=parse_wall_clock(start) if start else default_start,
        expected_end_time=parse_wall_clock(end) if end else default_end,
    )


def record_from_payload(data: dict) -> AttendanceRecord:
    employee_id = _ref_id(data.get("employee")) or _ref_id(data.get("employeeId"))
    if not employee_id:
        raise ValueError("attendance record without employee reference")
    work_date = coerce_date(data.get("date"))
    if work_date is None:
        raise ValueError("attendance record without date")

    context = f"{employee_id} on {work_date}"
    return AttendanceRecord(
        employee_id=employee_id,
        work_date=work_date,
        check_in=_safe_timestamp(data.get("checkIn"), field_name="checkIn", context=context),
        check_out=_safe_timestamp(data.get("checkOut"), field_name="checkOut", context=context),
        status=data.get("status"),
    )


def employees_from_payload(items: Iterable[dict], **defaults) -> list[Employee]:
    out = []
    for item in items:
        try:
            out.append(employee_from_payload(item, **defaults))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping malformed employee payload %r: %s", item, e)
    return out


def records_from_payload(items: Iterable[dict]) -> list[AttendanceRecord]:
    out = []
    for item in items:
        try:
            out.append(record_from_payload(item))
        except (TypeError, ValueError) as e:
            logger.warning("Skipping malformed attendance payload %r: %s", item, e)
    return out
