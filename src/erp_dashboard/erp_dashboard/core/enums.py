from __future__ import annotations

from enum import Enum
from typing import Optional


class _ParseMixin:
    @classmethod
    def parse(cls, value) -> Optional["_ParseMixin"]:
        """Return the member for ``value`` or None when it is unknown."""
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        if isinstance(value, Enum):
            value = value.value
        try:
            return cls(str(value).strip())
        except ValueError:
            return None


class Role(_ParseMixin, str, Enum):
    """User role used for access control."""

    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class Department(_ParseMixin, str, Enum):
    HR = "HR"
    SALES = "Sales"
    PURCHASING = "Purchasing"
    INVENTORY = "Inventory"
    MANUFACTURING = "Manufacturing"
    CRM = "CRM"
    SCM = "SCM"
    FINANCE = "Finance"


class Module(_ParseMixin, str, Enum):
    """Dashboard area a route belongs to."""

    DASHBOARD = "dashboard"
    HR = "hr"
    SALES = "sales"
    PURCHASING = "purchasing"
    INVENTORY = "inventory"
    MANUFACTURING = "manufacturing"
    CRM = "crm"
    SCM = "scm"
    FINANCE = "finance"

    @classmethod
    def for_department(cls, department: Department) -> "Module":
        return cls(department.value.lower())


class AccessState(str, Enum):
    PENDING = "PENDING"
    ALLOWED = "ALLOWED"
    DENIED_REDIRECT = "DENIED_REDIRECT"


class AttendanceStatus(str, Enum):
    """Per-day status shown in the punctuality report."""

    PRESENT = "Present"
    LATE = "Late"
    EARLY_LEAVE = "Early Leave"
    ABSENT = "Absent"
