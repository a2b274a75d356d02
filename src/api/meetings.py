"""Meetings API endpoints: schedule, edit and attach minutes."""

from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, Query, Request, UploadFile, status
from pydantic import BaseModel

from src.api.views import (
    DecisionView,
    ListResponse,
    MeetingDetailView,
    MeetingView,
    MutationResult,
)
from src.auth.context import SessionContext
from src.auth.dependencies import get_session_context, require_admin
from src.i18n.localize import translate
from src.services.meeting_service import MeetingService
from src.services.schemas import MeetingInput

logger = structlog.get_logger()

router = APIRouter(prefix="/meetings", tags=["meetings"])


class MeetingsResponse(BaseModel):
    """Meetings split into upcoming and past, latest date first."""

    upcoming: ListResponse[MeetingView]
    past: ListResponse[MeetingView]


def get_meeting_service(request: Request) -> MeetingService:
    """Dependency to get MeetingService from app state."""
    return request.app.state.meeting_service


@router.get("", response_model=MeetingsResponse)
async def list_meetings(
    search: str | None = Query(default=None),
    ctx: SessionContext = Depends(get_session_context),
    service: MeetingService = Depends(get_meeting_service),
) -> MeetingsResponse:
    """List meetings split around the current time."""
    listing = await service.list_meetings(search)
    lang = ctx.language
    return MeetingsResponse(
        upcoming=ListResponse[MeetingView].of(
            [MeetingView.build(m, lang) for m in listing.upcoming], lang
        ),
        past=ListResponse[MeetingView].of(
            [MeetingView.build(m, lang) for m in listing.past], lang
        ),
    )


@router.get("/{meeting_id}", response_model=MeetingDetailView)
async def get_meeting(
    meeting_id: UUID,
    ctx: SessionContext = Depends(get_session_context),
    service: MeetingService = Depends(get_meeting_service),
) -> MeetingDetailView:
    """A meeting with the decisions taken in it."""
    meeting, decisions = await service.get_meeting(meeting_id)
    lang = ctx.language
    return MeetingDetailView(
        meeting=MeetingView.build(meeting, lang),
        decisions=ListResponse[DecisionView].of(
            [DecisionView.build(d, lang) for d in decisions], lang
        ),
    )


@router.post(
    "",
    response_model=MutationResult[MeetingView],
    status_code=status.HTTP_201_CREATED,
)
async def create_meeting(
    body: MeetingInput,
    ctx: SessionContext = Depends(require_admin),
    service: MeetingService = Depends(get_meeting_service),
) -> MutationResult[MeetingView]:
    """Schedule a meeting (committee/chairman)."""
    meeting = await service.create_meeting(ctx, body)
    return MutationResult[MeetingView](
        message=translate("meetings.createSuccess", ctx.language),
        data=MeetingView.build(meeting, ctx.language),
    )


@router.put("/{meeting_id}", response_model=MutationResult[MeetingView])
async def update_meeting(
    meeting_id: UUID,
    body: MeetingInput,
    ctx: SessionContext = Depends(require_admin),
    service: MeetingService = Depends(get_meeting_service),
) -> MutationResult[MeetingView]:
    """Edit a meeting (committee/chairman)."""
    meeting = await service.update_meeting(ctx, meeting_id, body)
    return MutationResult[MeetingView](
        message=translate("meetings.updateSuccess", ctx.language),
        data=MeetingView.build(meeting, ctx.language),
    )


@router.delete("/{meeting_id}", response_model=MutationResult[None])
async def delete_meeting(
    meeting_id: UUID,
    ctx: SessionContext = Depends(require_admin),
    service: MeetingService = Depends(get_meeting_service),
) -> MutationResult[None]:
    """Delete a meeting and its decisions (committee/chairman)."""
    await service.delete_meeting(ctx, meeting_id)
    return MutationResult[None](
        message=translate("meetings.deleteSuccess", ctx.language)
    )


@router.post("/{meeting_id}/minutes", response_model=MutationResult[MeetingView])
async def upload_minutes(
    meeting_id: UUID,
    file: UploadFile,
    ctx: SessionContext = Depends(require_admin),
    service: MeetingService = Depends(get_meeting_service),
) -> MutationResult[MeetingView]:
    """Attach the minutes document, replacing any previous reference.

    Raises:
        FileTooLargeError: The document is above the size ceiling (413)
    """
    if file.size is not None:
        service.check_upload_size(file.size)
    content = await file.read()
    meeting = await service.attach_minutes(ctx, meeting_id, file.filename, content)
    return MutationResult[MeetingView](
        message=translate("meetings.uploadSuccess", ctx.language),
        data=MeetingView.build(meeting, ctx.language),
    )


@router.delete("/{meeting_id}/minutes", response_model=MutationResult[MeetingView])
async def clear_minutes(
    meeting_id: UUID,
    ctx: SessionContext = Depends(require_admin),
    service: MeetingService = Depends(get_meeting_service),
) -> MutationResult[MeetingView]:
    """Remove the minutes reference. The stored file is kept."""
    meeting = await service.clear_minutes(ctx, meeting_id)
    return MutationResult[MeetingView](
        message=translate("meetings.minutesRemoved", ctx.language),
        data=MeetingView.build(meeting, ctx.language),
    )
