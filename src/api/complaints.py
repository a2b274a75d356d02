"""Complaints and suggestions API endpoints.

Any signed-in user may submit; staff see only their own submissions while
committee members and the chairman see and handle all of them.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from pydantic import BaseModel

from src.api.views import ComplaintView, ListResponse, MutationResult
from src.auth.context import SessionContext
from src.auth.dependencies import get_session_context, require_admin
from src.i18n.localize import translate
from src.listing.schemas import ComplaintStats
from src.services.complaint_service import ComplaintService
from src.services.schemas import ComplaintInput, ComplaintStatusInput

router = APIRouter(prefix="/complaints", tags=["complaints"])


class ComplaintsResponse(ListResponse[ComplaintView]):
    """Complaint list with counts over everything the caller can see."""

    stats: ComplaintStats


def get_complaint_service(request: Request) -> ComplaintService:
    """Dependency to get ComplaintService from app state."""
    return request.app.state.complaint_service


@router.get("", response_model=ComplaintsResponse)
async def list_complaints(
    search: str | None = Query(default=None),
    status_filter: str | None = Query(default=None, alias="status"),
    complaint_type: str | None = Query(default=None, alias="type"),
    ctx: SessionContext = Depends(get_session_context),
    service: ComplaintService = Depends(get_complaint_service),
) -> ComplaintsResponse:
    """List visible complaints, filtered by search, status and type."""
    listing = await service.list_complaints(ctx, search, status_filter, complaint_type)
    items = [ComplaintView.build(c, ctx.language) for c in listing.complaints]
    page = ListResponse[ComplaintView].of(items, ctx.language)
    return ComplaintsResponse(**page.model_dump(), stats=listing.stats)


@router.get("/{complaint_id}", response_model=ComplaintView)
async def get_complaint(
    complaint_id: UUID,
    ctx: SessionContext = Depends(get_session_context),
    service: ComplaintService = Depends(get_complaint_service),
) -> ComplaintView:
    """A single complaint visible to the caller."""
    complaint = await service.get_complaint(ctx, complaint_id)
    return ComplaintView.build(complaint, ctx.language)


@router.post(
    "",
    response_model=MutationResult[ComplaintView],
    status_code=status.HTTP_201_CREATED,
)
async def submit_complaint(
    body: ComplaintInput,
    ctx: SessionContext = Depends(get_session_context),
    service: ComplaintService = Depends(get_complaint_service),
) -> MutationResult[ComplaintView]:
    """Submit a complaint or suggestion. A reference number is generated."""
    complaint = await service.submit(ctx, body)
    return MutationResult[ComplaintView](
        message=translate("complaints.submitSuccess", ctx.language),
        data=ComplaintView.build(complaint, ctx.language),
    )


@router.put("/{complaint_id}/status", response_model=MutationResult[ComplaintView])
async def update_complaint_status(
    complaint_id: UUID,
    body: ComplaintStatusInput,
    ctx: SessionContext = Depends(require_admin),
    service: ComplaintService = Depends(get_complaint_service),
) -> MutationResult[ComplaintView]:
    """Move a complaint along (committee/chairman).

    Resolving or rejecting requires resolution text; closed complaints
    answer 409.
    """
    complaint = await service.update_status(ctx, complaint_id, body)
    return MutationResult[ComplaintView](
        message=translate("complaints.statusUpdated", ctx.language),
        data=ComplaintView.build(complaint, ctx.language),
    )


@router.delete("/{complaint_id}", response_model=MutationResult[None])
async def delete_complaint(
    complaint_id: UUID,
    ctx: SessionContext = Depends(require_admin),
    service: ComplaintService = Depends(get_complaint_service),
) -> MutationResult[None]:
    """Delete a complaint (committee/chairman)."""
    await service.delete_complaint(ctx, complaint_id)
    return MutationResult[None](
        message=translate("complaints.deleteSuccess", ctx.language)
    )
