"""Role/session gate: accounts, sessions and per-request context."""

from src.auth.context import SessionContext
from src.auth.dependencies import get_language, get_session_context, require_admin
from src.auth.service import AuthService, SignInResult

__all__ = [
    "AuthService",
    "SessionContext",
    "SignInResult",
    "get_language",
    "get_session_context",
    "require_admin",
]
