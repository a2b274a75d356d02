"""Decision tracking."""

from datetime import date
from uuid import UUID

import structlog

from src.auth.context import SessionContext
from src.config import settings
from src.events.bus import EventBus
from src.listing.views import filter_decisions
from src.models.decision import Decision
from src.repositories.meeting_repo import DecisionRepository, MeetingRepository
from src.services.audit import Auditor
from src.services.schemas import DecisionInput

logger = structlog.get_logger()


class DecisionService:
    """CRUD over decisions. Overdue is derived on display, never stored."""

    def __init__(
        self,
        decisions: DecisionRepository,
        meetings: MeetingRepository,
        event_bus: EventBus,
        list_cap: int | None = None,
    ):
        self._decisions = decisions
        self._meetings = meetings
        self._audit = Auditor(event_bus, "decisions")
        self.list_cap = list_cap or settings.list_cap

    async def list_decisions(
        self,
        search: str | None = None,
        status: str | None = None,
        meeting_id: UUID | None = None,
        today: date | None = None,
    ) -> list[Decision]:
        """Newest decisions first, narrowed by search and display status."""
        rows = await self._decisions.select(
            order_by="created_at",
            descending=True,
            limit=self.list_cap,
        )
        return filter_decisions(rows, search, status, meeting_id, today)

    async def get_decision(self, decision_id: UUID) -> Decision:
        """Fetch one decision."""
        return await self._decisions.require(decision_id)

    async def _check_meeting(self, meeting_id: UUID | None) -> None:
        if meeting_id is not None:
            await self._meetings.require(meeting_id)

    async def create_decision(
        self,
        ctx: SessionContext,
        data: DecisionInput,
    ) -> Decision:
        """Record a new decision."""
        await self._check_meeting(data.meeting_id)
        decision = Decision(**data.model_dump(), created_by=ctx.user_id)
        await self._decisions.insert(decision)
        await self._audit.created(ctx, decision)
        logger.info("decision_created", decision_id=str(decision.id))
        return decision

    async def update_decision(
        self,
        ctx: SessionContext,
        decision_id: UUID,
        data: DecisionInput,
    ) -> Decision:
        """Rewrite the decision form fields. Any status may be set."""
        before = await self._decisions.require(decision_id)
        await self._check_meeting(data.meeting_id)
        after = await self._decisions.update(decision_id, data.model_dump())
        await self._audit.updated(ctx, before, after)
        logger.info(
            "decision_updated",
            decision_id=str(decision_id),
            status=after.status.value,
        )
        return after

    async def delete_decision(self, ctx: SessionContext, decision_id: UUID) -> None:
        """Permanently delete a decision."""
        before = await self._decisions.require(decision_id)
        await self._decisions.delete(decision_id)
        await self._audit.deleted(ctx, before)
        logger.info("decision_deleted", decision_id=str(decision_id))
