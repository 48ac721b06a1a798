from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..core.enums import Department, Module, Role
from .model import User

MODULE_NAMES: dict[Module, str] = {
    Module.DASHBOARD: "Dashboard",
    Module.HR: "Human Resources",
    Module.SALES: "Sales",
    Module.PURCHASING: "Purchasing",
    Module.INVENTORY: "Inventory",
    Module.MANUFACTURING: "Manufacturing",
    Module.CRM: "Customer Relations",
    Module.SCM: "Supply Chain",
    Module.FINANCE: "Finance",
}


def _department_modules() -> dict[Department, frozenset[Module]]:
    return {d: frozenset({Module.for_department(d)}) for d in Department}


@dataclass(frozen=True)
class PermissionPolicy:
    """Static (role, department) -> module table.

    Passed explicitly into the decision engine so tests can swap policies.
    Anything not listed here is denied.
    """

    admin_roles: frozenset[Role] = frozenset({Role.ADMIN})
    department_modules: Mapping[Department, frozenset[Module]] = field(default_factory=_department_modules)

    def is_module_allowed(self, role, user_department, requested_module) -> bool:
        module = Module.parse(requested_module)
        if module is None:
            return False

        if Role.parse(role) in self.admin_roles:
            return True

        department = Department.parse(user_department)
        if department is None:
            return False
        return module in self.department_modules.get(department, frozenset())

    def allowed_modules(self, user: Optional[User]) -> list[Module]:
        if user is None:
            return []
        return [m for m in Module if self.is_module_allowed(user.role, user.department, m)]

    def can_view_all_attendance_records(self, user: Optional[User]) -> bool:
        """Admins and the HR department see every employee; others only their own department."""
        if user is None:
            return False
        return Role.parse(user.role) in self.admin_roles or Department.parse(user.department) == Department.HR


DEFAULT_POLICY = PermissionPolicy()
