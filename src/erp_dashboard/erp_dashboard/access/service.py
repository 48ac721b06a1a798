from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import LOGIN_PATH
from ..core.enums import AccessState
from .model import AccessDecision, SessionContext, User
from .permissions import DEFAULT_POLICY, PermissionPolicy
from .redirects import RedirectResolver

logger = logging.getLogger(__name__)


class AccessDecisionEngine:
    """Use case: decide whether a protected dashboard route may render.

    PENDING is the only non-terminal outcome; every call is a fresh evaluation.
    """

    def __init__(
        self,
        policy: Optional[PermissionPolicy] = None,
        resolver: Optional[RedirectResolver] = None,
        *,
        login_path: str = LOGIN_PATH,
    ):
        self._policy = policy or DEFAULT_POLICY
        self._resolver = resolver or RedirectResolver()
        self._login_path = login_path

    @property
    def policy(self) -> PermissionPolicy:
        return self._policy

    def can_access(self, user: Optional[User], module) -> bool:
        if user is None:
            return False
        return self._policy.is_module_allowed(user.role, user.department, module)

    def resolve_fallback(self, user: User, default_path: Optional[str] = None) -> str:
        return self._resolver.resolve_fallback(user, default_path)

    def decide_landing(self, session: SessionContext) -> AccessDecision:
        """The ungated landing page only needs a signed-in user."""
        if session.loading:
            return AccessDecision(state=AccessState.PENDING)
        if session.user is None:
            return AccessDecision(state=AccessState.DENIED_REDIRECT, redirect_path=self._login_path)
        return AccessDecision(state=AccessState.ALLOWED)

    def decide(self, session: SessionContext, module, *, fallback_path: Optional[str] = None) -> AccessDecision:
        landing = self.decide_landing(session)
        if not landing.allowed:
            return landing

        user = session.user
        if self.can_access(user, module):
            return AccessDecision(state=AccessState.ALLOWED)

        target = self.resolve_fallback(user, fallback_path)
        logger.info("Access to module %r denied for user %s, redirecting to %s", module, user.user_id, target)
        return AccessDecision(state=AccessState.DENIED_REDIRECT, redirect_path=target)
