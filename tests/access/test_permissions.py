from __future__ import annotations

import pytest

from src.erp_dashboard.erp_dashboard.access.model import User
from src.erp_dashboard.erp_dashboard.access.permissions import DEFAULT_POLICY, PermissionPolicy
from src.erp_dashboard.erp_dashboard.core.enums import Department, Module, Role


@pytest.mark.parametrize("module", list(Module))
def test_admin_allowed_everywhere(module):
    assert DEFAULT_POLICY.is_module_allowed(Role.ADMIN, None, module)
    assert DEFAULT_POLICY.is_module_allowed("admin", "Sales", module.value)


@pytest.mark.parametrize("role", [Role.EMPLOYEE, Role.MANAGER])
@pytest.mark.parametrize("department", list(Department))
def test_non_admin_allowed_only_own_department(role, department):
    for module in Module:
        expected = module == Module.for_department(department)
        assert DEFAULT_POLICY.is_module_allowed(role, department, module) is expected


def test_unknown_values_are_denied():
    assert not DEFAULT_POLICY.is_module_allowed("employee", "Legal", "legal")
    assert not DEFAULT_POLICY.is_module_allowed("employee", "HR", "payroll")
    assert not DEFAULT_POLICY.is_module_allowed("employee", None, "hr")
    assert not DEFAULT_POLICY.is_module_allowed("superuser", "HR", "dashboard")
    assert not DEFAULT_POLICY.is_module_allowed(None, None, None)


def test_allowed_modules_for_user():
    admin = User(user_id="1", role=Role.ADMIN, department=None)
    clerk = User(user_id="2", role=Role.EMPLOYEE, department=Department.FINANCE)

    assert DEFAULT_POLICY.allowed_modules(admin) == list(Module)
    assert DEFAULT_POLICY.allowed_modules(clerk) == [Module.FINANCE]
    assert DEFAULT_POLICY.allowed_modules(None) == []


def test_can_view_all_attendance_records():
    assert DEFAULT_POLICY.can_view_all_attendance_records(User(user_id="1", role="admin", department="Sales"))
    assert DEFAULT_POLICY.can_view_all_attendance_records(User(user_id="2", role="employee", department="HR"))
    assert not DEFAULT_POLICY.can_view_all_attendance_records(User(user_id="3", role="manager", department="Sales"))
    assert not DEFAULT_POLICY.can_view_all_attendance_records(None)


def test_policy_can_be_substituted():
    # Sales staff may also open the CRM dashboard under this policy
    policy = PermissionPolicy(
        department_modules={
            Department.SALES: frozenset({Module.SALES, Module.CRM}),
        }
    )

    assert policy.is_module_allowed(Role.EMPLOYEE, Department.SALES, Module.CRM)
    assert not policy.is_module_allowed(Role.EMPLOYEE, Department.HR, Module.HR)
