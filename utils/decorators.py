from __future__ import annotations
from functools import wraps
from flask import current_app, g, request

from utils.exceptions import InvalidCredential

AUTH_GATE_EXTENSION = "chirpy.auth_gate"
SESSIONS_EXTENSION = "chirpy.sessions"


def auth_gate():
    return current_app.extensions[AUTH_GATE_EXTENSION]


def session_manager():
    return current_app.extensions[SESSIONS_EXTENSION]


def jwt_required():
    """Require a valid access token; the caller's id lands in g.current_user_id."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            g.current_user_id = auth_gate().authenticate(request)
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def api_key_required():
    """Require the webhook caller's 'Authorization: ApiKey <key>' header."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if not auth_gate().check_api_key(request.headers):
                raise InvalidCredential("Invalid API key")
            return fn(*args, **kwargs)

        return wrapper

    return decorator
