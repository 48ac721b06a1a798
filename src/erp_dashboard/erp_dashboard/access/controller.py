from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, redirect, session

from ..container import Container
from ..core.enums import AccessState, Module
from .model import AccessDecision, SessionContext, User
from .permissions import MODULE_NAMES
from .service import AccessDecisionEngine


def current_session() -> SessionContext:
    """Build the session context from what the auth subsystem stored in the Flask session."""
    if session.get("auth_pending"):
        return SessionContext(user=None, loading=True)
    if "user_id" not in session:
        return SessionContext(user=None)
    return SessionContext(
        user=User.from_mapping(
            {
                "user_id": session.get("user_id"),
                "role": session.get("role"),
                "department": session.get("department"),
                "name": session.get("name"),
            }
        )
    )


def decision_response(decision: AccessDecision):
    """Turn a non-allowed decision into the HTTP answer; None means render the view."""
    if decision.state == AccessState.PENDING:
        return jsonify({"success": False, **decision.to_dict(), "message": "Session is still loading"}), 202
    if decision.state == AccessState.DENIED_REDIRECT:
        return redirect(decision.redirect_path, code=303)
    return None


def module_required(engine: AccessDecisionEngine, module):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            response = decision_response(engine.decide(current_session(), module))
            if response is not None:
                return response
            return view(*args, **kwargs)

        return wrapper

    return decorator


def register(app: Flask, container: Container) -> None:
    engine = container.access_engine

    @app.route("/api/access/<module>", methods=["GET"], endpoint="api_access")
    def api_access(module: str):
        decision = engine.decide(current_session(), module)
        return jsonify({"success": True, "module": module, **decision.to_dict()})

    @app.route("/app", methods=["GET"], endpoint="app_landing")
    def app_landing():
        ctx = current_session()
        response = decision_response(engine.decide_landing(ctx))
        if response is not None:
            return response

        return jsonify(
            {
                "success": True,
                "name": ctx.user.name,
                "allowedModules": [m.value for m in container.policy.allowed_modules(ctx.user)],
            }
        )

    @app.route("/app/<module>", methods=["GET"], endpoint="module_home")
    def module_home(module: str):
        ctx = current_session()
        response = decision_response(engine.decide(ctx, module))
        if response is not None:
            return response

        parsed = Module.parse(module)
        return jsonify(
            {
                "success": True,
                "module": parsed.value,
                "name": MODULE_NAMES.get(parsed, parsed.value),
                "allowedModules": [m.value for m in container.policy.allowed_modules(ctx.user)],
            }
        )
