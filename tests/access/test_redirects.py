from __future__ import annotations

import pytest

from src.erp_dashboard.erp_dashboard.access.model import User
from src.erp_dashboard.erp_dashboard.access.permissions import PermissionPolicy
from src.erp_dashboard.erp_dashboard.access.redirects import (
    DEPARTMENT_HOME_ROUTES,
    RedirectResolver,
    module_for_path,
    validate_consistency,
)
from src.erp_dashboard.erp_dashboard.core.enums import Department, Module
from src.erp_dashboard.erp_dashboard.core.exceptions import ConfigurationError


def test_every_department_has_a_home_route():
    assert set(DEPARTMENT_HOME_ROUTES) == set(Department)


def test_resolve_fallback_table():
    resolver = RedirectResolver()

    assert resolver.resolve_fallback(User(user_id="1", role="employee", department="HR")) == "/app/hr/employees"
    assert resolver.resolve_fallback(User(user_id="1", role="manager", department="Finance")) == "/app/finance/transactions"
    assert resolver.resolve_fallback(User(user_id="1", role="admin", department="Finance")) == "/app/dashboard"


def test_missing_department_uses_default():
    resolver = RedirectResolver(default_path="/welcome")

    assert resolver.resolve_fallback(User(user_id="1", role="employee", department=None)) == "/welcome"
    assert resolver.resolve_fallback(User(user_id="1", role="employee", department="Legal"), "/x") == "/x"


def test_module_for_path():
    assert module_for_path("/app/hr/employees") == Module.HR
    assert module_for_path("/app/dashboard") == Module.DASHBOARD
    assert module_for_path("/login") is None
    assert module_for_path("/app/unknown/page") is None


def test_default_tables_are_consistent():
    validate_consistency(PermissionPolicy(), RedirectResolver())


def test_mismatched_home_route_is_a_configuration_error():
    routes = dict(DEPARTMENT_HOME_ROUTES)
    routes[Department.SALES] = "/app/finance/transactions"

    with pytest.raises(ConfigurationError):
        validate_consistency(PermissionPolicy(), RedirectResolver(home_routes=routes))


@pytest.mark.parametrize("default_path", ["/app/dashboard", "/app/hr", "/app/unknown"])
def test_gated_default_path_is_a_configuration_error(default_path):
    with pytest.raises(ConfigurationError):
        validate_consistency(PermissionPolicy(), RedirectResolver(default_path=default_path))


@pytest.mark.parametrize("default_path", ["/app", "/login", "/welcome"])
def test_ungated_default_path_is_accepted(default_path):
    validate_consistency(PermissionPolicy(), RedirectResolver(default_path=default_path))
