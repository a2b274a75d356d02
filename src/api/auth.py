"""Authentication endpoints: registration, verification and sessions."""

from datetime import datetime
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel

from src.api.views import MutationResult
from src.auth.context import SessionContext
from src.auth.dependencies import get_auth_service, get_language, get_session_context
from src.auth.service import AuthService
from src.i18n.localize import translate
from src.models.base import Language
from src.services.schemas import (
    LanguageInput,
    SignInInput,
    SignUpInput,
    VerifyEmailInput,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/auth", tags=["auth"])


class AccountView(BaseModel):
    """A newly registered or verified account."""

    user_id: UUID
    email: str
    email_verified: bool


class SignInResponse(BaseModel):
    """Bearer token for subsequent requests."""

    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    language: Language
    message: str


class MeResponse(BaseModel):
    """Who the caller is."""

    user_id: UUID
    email: str
    full_name: str
    roles: list[str]
    primary_role: str
    role_label: str
    is_admin: bool
    language: Language


@router.post(
    "/sign-up",
    response_model=MutationResult[AccountView],
    status_code=status.HTTP_201_CREATED,
)
async def sign_up(
    body: SignUpInput,
    language: Language = Depends(get_language),
    auth_service: AuthService = Depends(get_auth_service),
) -> MutationResult[AccountView]:
    """Register a staff account. Verification may be required before sign-in."""
    user = await auth_service.sign_up(body.email, body.password, body.full_name)
    return MutationResult[AccountView](
        message=translate("auth.registerSuccess", language),
        data=AccountView(
            user_id=user.id,
            email=user.email,
            email_verified=user.email_verified,
        ),
    )


@router.post("/verify", response_model=MutationResult[AccountView])
async def verify_email(
    body: VerifyEmailInput,
    language: Language = Depends(get_language),
    auth_service: AuthService = Depends(get_auth_service),
) -> MutationResult[AccountView]:
    """Complete e-mail verification with the issued token."""
    user = await auth_service.verify_email(body.token)
    return MutationResult[AccountView](
        message=translate("auth.verifySuccess", language),
        data=AccountView(
            user_id=user.id,
            email=user.email,
            email_verified=user.email_verified,
        ),
    )


@router.post("/sign-in", response_model=SignInResponse)
async def sign_in(
    body: SignInInput,
    request: Request,
    language: Language = Depends(get_language),
    auth_service: AuthService = Depends(get_auth_service),
) -> SignInResponse:
    """Exchange credentials for a bearer token."""
    result = await auth_service.sign_in(
        body.email,
        body.password,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    ctx = await auth_service.load_context(result.token)
    if request.query_params.get("lang"):
        ctx.language = language
    return SignInResponse(
        access_token=result.token,
        expires_at=result.session.expires_at,
        language=ctx.language,
        message=translate("auth.loginSuccess", ctx.language),
    )


@router.post("/sign-out", response_model=MutationResult[None])
async def sign_out(
    ctx: SessionContext = Depends(get_session_context),
    auth_service: AuthService = Depends(get_auth_service),
) -> MutationResult[None]:
    """End the current session."""
    await auth_service.sign_out(ctx)
    return MutationResult[None](message=translate("auth.logoutSuccess", ctx.language))


@router.get("/me", response_model=MeResponse)
async def me(ctx: SessionContext = Depends(get_session_context)) -> MeResponse:
    """The signed-in user with roles and language."""
    return MeResponse(
        user_id=ctx.user_id,
        email=ctx.email,
        full_name=ctx.display_name,
        roles=sorted(role.value for role in ctx.roles),
        primary_role=ctx.primary_role.value,
        role_label=translate(f"role.{ctx.primary_role.value}", ctx.language),
        is_admin=ctx.is_admin,
        language=ctx.language,
    )


@router.put("/session/language", response_model=MutationResult[None])
async def set_session_language(
    body: LanguageInput,
    ctx: SessionContext = Depends(get_session_context),
    auth_service: AuthService = Depends(get_auth_service),
) -> MutationResult[None]:
    """Switch the language of this session only."""
    await auth_service.set_session_language(ctx, body.language)
    logger.info("session_language_changed", user_id=str(ctx.user_id))
    return MutationResult[None](
        message=translate("profile.languageUpdateSuccess", body.language)
    )
