"""Public landing endpoint."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.auth.dependencies import get_language
from src.config import settings
from src.i18n.localize import translate
from src.models.base import Language

router = APIRouter(tags=["landing"])


class LandingResponse(BaseModel):
    """What an anonymous visitor sees."""

    app_name: str
    title: str
    subtitle: str
    organization: str
    login_label: str
    language: Language


@router.get("/", response_model=LandingResponse)
async def landing(language: Language = Depends(get_language)) -> LandingResponse:
    """Portal title and sign-in prompt in the requested language."""
    return LandingResponse(
        app_name=settings.app_name,
        title=translate("landing.title", language),
        subtitle=translate("landing.subtitle", language),
        organization=translate("header.organization", language),
        login_label=translate("nav.login", language),
        language=language,
    )
