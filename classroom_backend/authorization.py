"""Hook for gating mutating routes.

No scheme is built in. Deployments set ``app.config["AUTHORIZER"]`` to a
callable ``(action, request) -> bool``; the default allows everything.
"""
from functools import wraps

from flask import current_app, request

from classroom_backend.errors import AuthorizationError


def allow_all(action, req):
    return True


def requires_authorization(action):
    """Decorator to run the configured authorizer before a route."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            authorizer = current_app.config.get("AUTHORIZER") or allow_all
            if not authorizer(action, request):
                raise AuthorizationError("Not authorized")
            return f(*args, **kwargs)
        return decorated_function
    return decorator
