"""Complaint and suggestion intake and handling."""

from dataclasses import dataclass
from uuid import UUID

import structlog

from src.auth.context import SessionContext
from src.config import settings
from src.errors import (
    InvalidTransitionError,
    NotFoundError,
    PermissionDeniedError,
    ValidationFailedError,
)
from src.events.bus import EventBus
from src.listing.schemas import ComplaintStats
from src.listing.views import complaint_stats, filter_complaints
from src.models.base import local_today, utc_now
from src.models.complaint import TERMINAL_STATUSES, Complaint, ComplaintStatus
from src.repositories.complaint_repo import ComplaintRepository
from src.services.audit import Auditor
from src.services.schemas import ComplaintInput, ComplaintStatusInput

logger = structlog.get_logger()


@dataclass
class ComplaintListing:
    """Filtered complaints plus stats over everything the caller can see."""

    complaints: list[Complaint]
    stats: ComplaintStats


class ComplaintService:
    """Submission, visibility and status transitions of complaints.

    Staff see only what they submitted; committee and chairman see all.
    A complaint that is resolved or rejected takes no further action.
    """

    def __init__(
        self,
        complaints: ComplaintRepository,
        event_bus: EventBus,
        list_cap: int | None = None,
    ):
        self._complaints = complaints
        self._audit = Auditor(event_bus, "complaints")
        self.list_cap = list_cap or settings.list_cap

    async def visible_complaints(
        self,
        ctx: SessionContext,
        limit: int | None = None,
    ) -> list[Complaint]:
        """Newest complaints the caller may see."""
        limit = limit or self.list_cap
        if ctx.is_admin:
            return await self._complaints.select(
                order_by="created_at",
                descending=True,
                limit=limit,
            )
        return await self._complaints.list_for_submitter(ctx.user_id, limit=limit)

    async def list_complaints(
        self,
        ctx: SessionContext,
        search: str | None = None,
        status: str | None = None,
        complaint_type: str | None = None,
    ) -> ComplaintListing:
        """Visible complaints narrowed by search, status and type."""
        rows = await self.visible_complaints(ctx)
        return ComplaintListing(
            complaints=filter_complaints(rows, search, status, complaint_type),
            stats=complaint_stats(rows),
        )

    async def get_complaint(self, ctx: SessionContext, complaint_id: UUID) -> Complaint:
        """Fetch one complaint the caller may see.

        Raises:
            NotFoundError: Unknown id, or another user's complaint for staff
        """
        complaint = await self._complaints.require(complaint_id)
        if not ctx.is_admin and complaint.submitted_by != ctx.user_id:
            msg = f"Complaint {complaint_id} not found"
            raise NotFoundError(msg)
        return complaint

    async def submit(self, ctx: SessionContext, data: ComplaintInput) -> Complaint:
        """File a complaint or suggestion with a fresh reference number."""
        reference = await self._complaints.next_reference_number(
            data.type,
            local_today().year,
        )
        complaint = Complaint(
            **data.model_dump(),
            reference_number=reference,
            status=ComplaintStatus.PENDING,
            submitted_by=ctx.user_id,
        )
        await self._complaints.insert(complaint)
        await self._audit.created(ctx, complaint)
        logger.info(
            "complaint_submitted",
            complaint_id=str(complaint.id),
            reference=reference,
            type=complaint.type.value,
        )
        return complaint

    async def update_status(
        self,
        ctx: SessionContext,
        complaint_id: UUID,
        data: ComplaintStatusInput,
    ) -> Complaint:
        """Move a complaint to a new status in a single update.

        Resolution text and the resolved timestamp are written together
        with a terminal status.

        Raises:
            InvalidTransitionError: The complaint is already closed
            ValidationFailedError: Terminal status without resolution text
        """
        before = await self._complaints.require(complaint_id)
        if before.is_terminal:
            raise InvalidTransitionError(
                f"Complaint {before.reference_number} is already {before.status.value}",
                message_key="complaints.alreadyClosed",
            )

        changes: dict = {"status": data.status}
        if data.assigned_to is not None:
            changes["assigned_to"] = data.assigned_to
        if data.status in TERMINAL_STATUSES:
            if not data.resolution:
                raise ValidationFailedError(
                    "Resolution is required to close a complaint",
                    message_key="complaints.resolutionRequired",
                )
            changes["resolution"] = data.resolution
            changes["resolved_at"] = utc_now()
        elif data.resolution:
            changes["resolution"] = data.resolution

        after = await self._complaints.update(complaint_id, changes)
        await self._audit.updated(ctx, before, after)
        logger.info(
            "complaint_status_changed",
            complaint_id=str(complaint_id),
            old_status=before.status.value,
            new_status=after.status.value,
        )
        return after

    async def delete_complaint(self, ctx: SessionContext, complaint_id: UUID) -> None:
        """Permanently delete a complaint (administrators only)."""
        if not ctx.is_admin:
            raise PermissionDeniedError(
                "Only administrators may delete complaints",
                message_key="admin.noPermission",
            )
        before = await self._complaints.require(complaint_id)
        await self._complaints.delete(complaint_id)
        await self._audit.deleted(ctx, before)
        logger.info("complaint_deleted", complaint_id=str(complaint_id))
