from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AccessState, Department, Role


@dataclass(frozen=True)
class User:
    """Authenticated user as supplied by the session.

    Note: ``role``/``department`` stay as given when they are unknown values,
    the permission model denies them instead of failing here.
    """

    user_id: str
    role: Optional[Role | str]
    department: Optional[Department | str]
    name: str = ""

    @classmethod
    def from_mapping(cls, data: dict) -> "User":
        role = data.get("role")
        department = data.get("department")
        return cls(
            user_id=str(data.get("user_id") or data.get("_id") or data.get("id") or ""),
            role=Role.parse(role) or role,
            department=Department.parse(department) or department,
            name=str(data.get("name") or ""),
        )

    @property
    def is_admin(self) -> bool:
        return Role.parse(self.role) == Role.ADMIN


@dataclass(frozen=True)
class SessionContext:
    """What the authentication subsystem exposes: ``user`` is None when signed out."""

    user: Optional[User]
    loading: bool = False


@dataclass(frozen=True)
class AccessDecision:
    state: AccessState
    redirect_path: Optional[str] = None

    @property
    def allowed(self) -> bool:
        return self.state == AccessState.ALLOWED

    @property
    def pending(self) -> bool:
        return self.state == AccessState.PENDING

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "allowed": self.allowed,
            "redirectPath": self.redirect_path,
        }
