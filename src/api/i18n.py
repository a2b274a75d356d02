"""Translation table endpoint for the client."""

from fastapi import APIRouter, HTTPException

from src.i18n.translations import TRANSLATIONS
from src.models.base import Language

router = APIRouter(prefix="/i18n", tags=["i18n"])


@router.get("/{language}", response_model=dict[str, str])
async def get_translations(language: str) -> dict[str, str]:
    """The whole label table for one language."""
    try:
        return TRANSLATIONS[Language(language)]
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown language: {language}")
