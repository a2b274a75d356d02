"""Meeting scheduling, editing and minutes attachment."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

import structlog

from src.auth.context import SessionContext
from src.config import settings
from src.events.bus import EventBus
from src.listing.views import filter_meetings, split_meetings
from src.models.decision import Decision
from src.models.meeting import Meeting
from src.repositories.meeting_repo import DecisionRepository, MeetingRepository
from src.services.audit import Auditor
from src.services.schemas import MeetingInput
from src.storage.minutes_storage import MinutesStorage, minutes_object_path

logger = structlog.get_logger()


@dataclass
class MeetingListing:
    """Meetings split around the current time."""

    upcoming: list[Meeting]
    past: list[Meeting]


class MeetingService:
    """CRUD over meetings plus the minutes document reference."""

    def __init__(
        self,
        meetings: MeetingRepository,
        decisions: DecisionRepository,
        storage: MinutesStorage,
        event_bus: EventBus,
        list_cap: int | None = None,
    ):
        self._meetings = meetings
        self._decisions = decisions
        self._storage = storage
        self._audit = Auditor(event_bus, "meetings")
        self.list_cap = list_cap or settings.list_cap

    async def list_meetings(
        self,
        search: str | None = None,
        now: datetime | None = None,
    ) -> MeetingListing:
        """Fetch once (capped), search, then split into upcoming and past."""
        rows = await self._meetings.select(
            order_by="meeting_date",
            descending=True,
            limit=self.list_cap,
        )
        upcoming, past = split_meetings(filter_meetings(rows, search), now)
        return MeetingListing(upcoming=upcoming, past=past)

    async def get_meeting(self, meeting_id: UUID) -> tuple[Meeting, list[Decision]]:
        """A meeting with the decisions taken in it."""
        meeting = await self._meetings.require(meeting_id)
        decisions = await self._decisions.list_for_meeting(meeting_id)
        return meeting, decisions

    async def create_meeting(self, ctx: SessionContext, data: MeetingInput) -> Meeting:
        """Schedule a new meeting."""
        meeting = Meeting(**data.model_dump(), created_by=ctx.user_id)
        await self._meetings.insert(meeting)
        await self._audit.created(ctx, meeting)
        logger.info("meeting_created", meeting_id=str(meeting.id))
        return meeting

    async def update_meeting(
        self,
        ctx: SessionContext,
        meeting_id: UUID,
        data: MeetingInput,
    ) -> Meeting:
        """Rewrite the meeting form fields. Any status may be set."""
        before = await self._meetings.require(meeting_id)
        after = await self._meetings.update(meeting_id, data.model_dump())
        await self._audit.updated(ctx, before, after)
        logger.info("meeting_updated", meeting_id=str(meeting_id))
        return after

    async def delete_meeting(self, ctx: SessionContext, meeting_id: UUID) -> None:
        """Permanently delete a meeting and its linked decisions."""
        before = await self._meetings.require(meeting_id)
        await self._meetings.delete(meeting_id)
        await self._audit.deleted(ctx, before)
        logger.info("meeting_deleted", meeting_id=str(meeting_id))

    def check_upload_size(self, size: int) -> None:
        """Reject an upload above the size ceiling before reading it."""
        self._storage.check_size(size)

    async def attach_minutes(
        self,
        ctx: SessionContext,
        meeting_id: UUID,
        filename: str | None,
        content: bytes,
    ) -> Meeting:
        """Upload a minutes document, then store its public URL on the meeting.

        The size check runs before anything is written. Upload and row
        update are two separate calls; a failed update leaves the file
        stored without a reference.
        """
        self._storage.check_size(len(content))
        before = await self._meetings.require(meeting_id)
        path = minutes_object_path(str(meeting_id), filename)
        await self._storage.upload(path, content)
        after = await self._meetings.set_minutes_url(
            meeting_id,
            self._storage.public_url(path),
        )
        await self._audit.updated(ctx, before, after)
        logger.info("minutes_attached", meeting_id=str(meeting_id), path=path)
        return after

    async def clear_minutes(self, ctx: SessionContext, meeting_id: UUID) -> Meeting:
        """Drop the minutes reference. The stored file is kept."""
        before = await self._meetings.require(meeting_id)
        after = await self._meetings.set_minutes_url(meeting_id, None)
        await self._audit.updated(ctx, before, after)
        logger.info("minutes_cleared", meeting_id=str(meeting_id))
        return after
