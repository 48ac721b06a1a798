from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..core.constants import DEFAULT_FALLBACK_PATH, ROOT_DASHBOARD_PATH
from ..core.enums import Department, Module
from ..core.exceptions import ConfigurationError
from .model import User
from .permissions import PermissionPolicy

logger = logging.getLogger(__name__)

DEPARTMENT_HOME_ROUTES: dict[Department, str] = {
    Department.HR: "/app/hr/employees",
    Department.SALES: "/app/sales/orders",
    Department.PURCHASING: "/app/purchasing/orders",
    Department.INVENTORY: "/app/inventory/products",
    Department.MANUFACTURING: "/app/manufacturing/orders",
    Department.CRM: "/app/crm/customers",
    Department.SCM: "/app/scm/suppliers",
    Department.FINANCE: "/app/finance/transactions",
}


def module_for_path(path: str) -> Optional[Module]:
    """``/app/<module>/...`` -> Module; the bare root dashboard maps to ``dashboard``."""
    parts = [p for p in path.split("/") if p]
    if len(parts) < 2 or parts[0] != "app":
        return None
    return Module.parse(parts[1])


@dataclass(frozen=True)
class RedirectResolver:
    """Picks where a user goes after failing the access check."""

    home_routes: Mapping[Department, str] = field(default_factory=lambda: dict(DEPARTMENT_HOME_ROUTES))
    root_path: str = ROOT_DASHBOARD_PATH
    default_path: str = DEFAULT_FALLBACK_PATH

    def resolve_fallback(self, user: User, default_path: Optional[str] = None) -> str:
        if user.is_admin:
            return self.root_path

        department = Department.parse(user.department)
        path = self.home_routes.get(department) if department else None
        if path:
            return path

        fallback = default_path or self.default_path
        logger.debug("No home route for department %r, using %s", user.department, fallback)
        return fallback


def is_module_gated(path: str) -> bool:
    """True for ``/app/<segment>/...`` paths, which the module guard checks."""
    parts = [p for p in path.split("/") if p]
    return len(parts) >= 2 and parts[0] == "app"


def validate_consistency(policy: PermissionPolicy, resolver: RedirectResolver) -> None:
    """Every department home route must be a route that department may view.

    The default path is used for users without a known department, so it must
    either be ungated or open to a non-admin user with no department.
    """
    problems = []
    for department, path in resolver.home_routes.items():
        module = module_for_path(path)
        if module is None or not policy.is_module_allowed(None, department, module):
            problems.append(f"{department.value} -> {path}")

    if is_module_gated(resolver.default_path):
        module = module_for_path(resolver.default_path)
        if module is None or not policy.is_module_allowed(None, None, module):
            problems.append(f"default -> {resolver.default_path}")

    if problems:
        raise ConfigurationError("Home routes not permitted for their department: " + ", ".join(problems))
