"""Repository for complaints and suggestions."""

from uuid import UUID

from src.models.complaint import (
    REFERENCE_PREFIXES,
    Complaint,
    ComplaintStatus,
    ComplaintType,
    format_reference_number,
)
from src.repositories.base import TableRepository


class ComplaintRepository(TableRepository[Complaint]):
    """Complaints and suggestions with generated reference numbers."""

    table = "complaints"
    model = Complaint
    columns = (
        "id",
        "created_at",
        "updated_at",
        "reference_number",
        "type",
        "category",
        "subject",
        "description",
        "priority",
        "status",
        "resolution",
        "resolved_at",
        "submitted_by",
        "assigned_to",
    )

    async def next_reference_number(
        self,
        complaint_type: ComplaintType,
        year: int,
    ) -> str:
        """Reserve the next reference number for a type and year.

        Sequences are counted per prefix and year in ``reference_counters``,
        so ``ADU-2026-0001`` and ``CAD-2026-0001`` can coexist.
        """
        prefix = REFERENCE_PREFIXES[complaint_type]
        row = await self._db.fetch_one(
            """INSERT INTO reference_counters (prefix, year, last_value)
               VALUES (?, ?, 1)
               ON CONFLICT (prefix, year)
               DO UPDATE SET last_value = last_value + 1
               RETURNING last_value""",
            [prefix, year],
        )
        return format_reference_number(prefix, year, row["last_value"])

    async def list_for_submitter(
        self,
        user_id: UUID | str,
        limit: int | None = None,
    ) -> list[Complaint]:
        """A user's own submissions, newest first."""
        return await self.select(
            {"submitted_by": user_id},
            order_by="created_at",
            descending=True,
            limit=limit,
        )

    async def count_by_status(self, status: ComplaintStatus) -> int:
        """Count complaints in one status."""
        return await self.count({"status": status})
