"""Announcements published to staff."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

import structlog

from src.auth.context import SessionContext
from src.config import settings
from src.events.bus import EventBus
from src.listing.schemas import AnnouncementStats
from src.listing.views import active_announcements, announcement_stats
from src.models.announcement import Announcement
from src.models.base import Language, utc_now
from src.repositories.announcement_repo import AnnouncementRepository
from src.services.audit import Auditor
from src.services.schemas import AnnouncementInput

logger = structlog.get_logger()


@dataclass
class AnnouncementListing:
    """Active announcements plus stats over all fetched rows."""

    announcements: list[Announcement]
    stats: AnnouncementStats


class AnnouncementService:
    """CRUD over announcements. Expired rows stay stored but are not listed."""

    def __init__(
        self,
        announcements: AnnouncementRepository,
        event_bus: EventBus,
        list_cap: int | None = None,
    ):
        self._announcements = announcements
        self._audit = Auditor(event_bus, "announcements")
        self.list_cap = list_cap or settings.list_cap

    async def list_active(
        self,
        search: str | None = None,
        category: str | None = None,
        language: Language = Language.MS,
        now: datetime | None = None,
    ) -> list[Announcement]:
        """Unexpired announcements, pinned first, then newest."""
        rows = await self._fetch()
        return active_announcements(rows, search, category, language, now)

    async def list_announcements(
        self,
        search: str | None = None,
        category: str | None = None,
        language: Language = Language.MS,
        now: datetime | None = None,
    ) -> AnnouncementListing:
        """Active announcements plus stats over every fetched row."""
        rows = await self._fetch()
        return AnnouncementListing(
            announcements=active_announcements(rows, search, category, language, now),
            stats=announcement_stats(rows, now),
        )

    async def _fetch(self) -> list[Announcement]:
        return await self._announcements.select(
            order_by="created_at",
            descending=True,
            limit=self.list_cap,
        )

    async def get_announcement(self, announcement_id: UUID) -> Announcement:
        """Fetch one announcement."""
        return await self._announcements.require(announcement_id)

    async def create_announcement(
        self,
        ctx: SessionContext,
        data: AnnouncementInput,
    ) -> Announcement:
        """Publish a new announcement (now, unless a time is given)."""
        values = data.model_dump()
        values["published_at"] = values["published_at"] or utc_now()
        announcement = Announcement(**values, created_by=ctx.user_id)
        await self._announcements.insert(announcement)
        await self._audit.created(ctx, announcement)
        logger.info("announcement_created", announcement_id=str(announcement.id))
        return announcement

    async def update_announcement(
        self,
        ctx: SessionContext,
        announcement_id: UUID,
        data: AnnouncementInput,
    ) -> Announcement:
        """Rewrite the announcement form fields."""
        before = await self._announcements.require(announcement_id)
        values = data.model_dump()
        values["published_at"] = values["published_at"] or before.published_at
        after = await self._announcements.update(announcement_id, values)
        await self._audit.updated(ctx, before, after)
        logger.info("announcement_updated", announcement_id=str(announcement_id))
        return after

    async def delete_announcement(
        self,
        ctx: SessionContext,
        announcement_id: UUID,
    ) -> None:
        """Permanently delete an announcement."""
        before = await self._announcements.require(announcement_id)
        await self._announcements.delete(announcement_id)
        await self._audit.deleted(ctx, before)
        logger.info("announcement_deleted", announcement_id=str(announcement_id))
