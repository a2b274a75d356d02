"""Repositories for meetings and the decisions taken in them."""

import logging
from uuid import UUID

from src.db.turso import TursoClient
from src.models.decision import Decision
from src.models.meeting import Meeting
from src.repositories.base import TableRepository

logger = logging.getLogger(__name__)

_ENTITY_COLUMNS = ("id", "created_at", "updated_at")


class DecisionRepository(TableRepository[Decision]):
    """Council decisions."""

    table = "decisions"
    model = Decision
    columns = (
        *_ENTITY_COLUMNS,
        "decision_number",
        "title",
        "title_en",
        "description",
        "description_en",
        "responsible_party",
        "due_date",
        "status",
        "meeting_id",
        "created_by",
    )

    async def list_for_meeting(self, meeting_id: UUID | str) -> list[Decision]:
        """Decisions taken in one meeting, newest first."""
        return await self.select(
            {"meeting_id": meeting_id},
            order_by="created_at",
            descending=True,
        )

    async def delete_for_meeting(self, meeting_id: UUID | str) -> int:
        """Delete every decision linked to a meeting. Returns rows removed."""
        result = await self._db.execute(
            "DELETE FROM decisions WHERE meeting_id = ?",
            [str(meeting_id)],
        )
        return result.rows_affected


class MeetingRepository(TableRepository[Meeting]):
    """Council meetings. Deleting a meeting deletes its decisions too."""

    table = "meetings"
    model = Meeting
    columns = (
        *_ENTITY_COLUMNS,
        "title",
        "title_en",
        "description",
        "description_en",
        "meeting_date",
        "location",
        "status",
        "minutes_url",
        "created_by",
    )

    def __init__(
        self,
        db_client: TursoClient,
        decisions: DecisionRepository | None = None,
    ):
        """Initialize repository with database client.

        Args:
            db_client: TursoClient instance for database operations
            decisions: Decision repository used for the delete cascade
        """
        super().__init__(db_client)
        self._decisions = decisions or DecisionRepository(db_client)

    async def delete(self, entity_id: UUID | str) -> None:
        """Delete a meeting and the decisions linked to it."""
        await self.require(entity_id)
        removed = await self._decisions.delete_for_meeting(entity_id)
        await super().delete(entity_id)
        logger.info(f"Deleted meeting {entity_id} and {removed} linked decision(s)")

    async def set_minutes_url(
        self,
        meeting_id: UUID | str,
        minutes_url: str | None,
    ) -> Meeting:
        """Attach (or clear, with None) the minutes document reference."""
        return await self.update(meeting_id, {"minutes_url": minutes_url})
