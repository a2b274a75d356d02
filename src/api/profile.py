"""Profile API endpoints for the signed-in user."""

from fastapi import APIRouter, Depends, Request

from src.api.views import MutationResult, ProfileView
from src.auth.context import SessionContext
from src.auth.dependencies import get_session_context
from src.i18n.localize import translate
from src.services.profile_service import ProfileService
from src.services.schemas import LanguageInput, ProfileInput

router = APIRouter(prefix="/profile", tags=["profile"])


def get_profile_service(request: Request) -> ProfileService:
    """Dependency to get ProfileService from app state."""
    return request.app.state.profile_service


@router.get("", response_model=ProfileView)
async def get_profile(
    ctx: SessionContext = Depends(get_session_context),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileView:
    """The caller's profile."""
    return ProfileView.build(await service.get_profile(ctx))


@router.put("", response_model=MutationResult[ProfileView])
async def update_profile(
    body: ProfileInput,
    ctx: SessionContext = Depends(get_session_context),
    service: ProfileService = Depends(get_profile_service),
) -> MutationResult[ProfileView]:
    """Save name, e-mail, phone, department and position."""
    profile = await service.update_profile(ctx, body)
    return MutationResult[ProfileView](
        message=translate("profile.updateSuccess", ctx.language),
        data=ProfileView.build(profile),
    )


@router.put("/language", response_model=MutationResult[ProfileView])
async def set_language(
    body: LanguageInput,
    ctx: SessionContext = Depends(get_session_context),
    service: ProfileService = Depends(get_profile_service),
) -> MutationResult[ProfileView]:
    """Persist the preferred language; the current session switches too."""
    profile = await service.set_preferred_language(ctx, body.language)
    return MutationResult[ProfileView](
        message=translate("profile.languageUpdateSuccess", body.language),
        data=ProfileView.build(profile),
    )
