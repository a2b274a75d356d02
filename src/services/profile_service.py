"""The caller's own profile and language preference."""

import structlog

from src.auth.context import SessionContext
from src.events.bus import EventBus
from src.models.base import Language
from src.models.profile import Profile
from src.repositories.account_repo import SessionRepository
from src.repositories.profile_repo import ProfileRepository
from src.services.audit import Auditor
from src.services.schemas import ProfileInput

logger = structlog.get_logger()


class ProfileService:
    """Reads and edits the signed-in user's profile."""

    def __init__(
        self,
        profiles: ProfileRepository,
        sessions: SessionRepository,
        event_bus: EventBus,
    ):
        self._profiles = profiles
        self._sessions = sessions
        self._audit = Auditor(event_bus, "profiles")

    async def get_profile(self, ctx: SessionContext) -> Profile:
        """The caller's profile."""
        return await self._profiles.require_by_user_id(ctx.user_id)

    async def update_profile(self, ctx: SessionContext, data: ProfileInput) -> Profile:
        """Save the profile form."""
        before = await self._profiles.require_by_user_id(ctx.user_id)
        after = await self._profiles.update(before.id, data.model_dump())
        ctx.profile = after
        await self._audit.updated(ctx, before, after)
        logger.info("profile_updated", user_id=str(ctx.user_id))
        return after

    async def set_preferred_language(
        self,
        ctx: SessionContext,
        language: Language,
    ) -> Profile:
        """Persist the language preference and switch the current session."""
        before = await self._profiles.require_by_user_id(ctx.user_id)
        after = await self._profiles.update(
            before.id,
            {"preferred_language": language},
        )
        await self._sessions.set_language(ctx.session_id, language)
        ctx.profile = after
        ctx.language = language
        await self._audit.updated(ctx, before, after)
        logger.info(
            "language_changed",
            user_id=str(ctx.user_id),
            language=language.value,
        )
        return after
