"""FastAPI dependencies for the role/session gate.

Every route that needs a signed-in caller depends on
``get_session_context``; administrative routes depend on ``require_admin``.
Both raise portal errors which the app turns into 401 / 403 responses.
"""

from fastapi import Depends, Query, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.auth.context import SessionContext
from src.auth.service import AuthService
from src.errors import AuthenticationError, PermissionDeniedError
from src.i18n.localize import parse_language
from src.models.base import Language

bearer = HTTPBearer(auto_error=False)


def get_auth_service(request: Request) -> AuthService:
    """Get AuthService from app state."""
    return request.app.state.auth_service


def _client_details(request: Request) -> tuple[str | None, str | None]:
    host = request.client.host if request.client else None
    return host, request.headers.get("user-agent")


async def get_session_context(
    request: Request,
    lang: str | None = Query(default=None, description="Language override"),
    credentials: HTTPAuthorizationCredentials | None = Security(bearer),
    auth_service: AuthService = Depends(get_auth_service),
) -> SessionContext:
    """Load the caller's session. A ``lang`` query parameter wins."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(
            "Missing bearer token",
            message_key="common.loginRequired",
        )
    ip_address, user_agent = _client_details(request)
    ctx = await auth_service.load_context(
        credentials.credentials,
        ip_address=ip_address,
        user_agent=user_agent,
    )
    ctx.language = parse_language(lang, default=ctx.language)
    request.state.language = ctx.language
    return ctx


async def require_admin(
    ctx: SessionContext = Depends(get_session_context),
) -> SessionContext:
    """Allow committee members and the chairman only."""
    if not ctx.is_admin:
        raise PermissionDeniedError(
            f"User {ctx.user_id} is not an administrator",
            message_key="admin.noPermission",
        )
    return ctx


async def get_language(
    request: Request,
    lang: str | None = Query(default=None, description="Language override"),
    credentials: HTTPAuthorizationCredentials | None = Security(bearer),
    auth_service: AuthService = Depends(get_auth_service),
) -> Language:
    """Effective language for routes that do not require a session."""
    language = auth_service.default_language
    if credentials is not None and credentials.credentials:
        try:
            ctx = await auth_service.load_context(credentials.credentials)
            language = ctx.language
        except AuthenticationError:
            pass
    language = parse_language(lang, default=language)
    request.state.language = language
    return language
