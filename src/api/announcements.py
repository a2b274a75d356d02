"""Announcements API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from src.api.views import AnnouncementView, ListResponse, MutationResult
from src.auth.context import SessionContext
from src.auth.dependencies import get_session_context, require_admin
from src.i18n.localize import translate
from src.listing.schemas import AnnouncementStats
from src.services.announcement_service import AnnouncementService
from src.services.schemas import AnnouncementInput

router = APIRouter(prefix="/announcements", tags=["announcements"])


class AnnouncementsResponse(ListResponse[AnnouncementView]):
    """Announcement list with counts for the summary cards."""

    stats: AnnouncementStats


def get_announcement_service(request: Request) -> AnnouncementService:
    """Dependency to get AnnouncementService from app state."""
    return request.app.state.announcement_service


@router.get("", response_model=AnnouncementsResponse)
async def list_announcements(
    search: str | None = Query(default=None),
    category: str | None = Query(default=None),
    ctx: SessionContext = Depends(get_session_context),
    service: AnnouncementService = Depends(get_announcement_service),
) -> AnnouncementsResponse:
    """Active announcements, pinned first. Search uses the display language."""
    listing = await service.list_announcements(search, category, ctx.language)
    items = [AnnouncementView.build(a, ctx.language) for a in listing.announcements]
    page = ListResponse[AnnouncementView].of(items, ctx.language)
    return AnnouncementsResponse(**page.model_dump(), stats=listing.stats)


@router.get("/{announcement_id}", response_model=AnnouncementView)
async def get_announcement(
    announcement_id: UUID,
    ctx: SessionContext = Depends(get_session_context),
    service: AnnouncementService = Depends(get_announcement_service),
) -> AnnouncementView:
    """A single announcement."""
    announcement = await service.get_announcement(announcement_id)
    return AnnouncementView.build(announcement, ctx.language)


@router.post(
    "",
    response_model=MutationResult[AnnouncementView],
    status_code=status.HTTP_201_CREATED,
)
async def create_announcement(
    body: AnnouncementInput,
    ctx: SessionContext = Depends(require_admin),
    service: AnnouncementService = Depends(get_announcement_service),
) -> MutationResult[AnnouncementView]:
    """Publish an announcement (committee/chairman)."""
    announcement = await service.create_announcement(ctx, body)
    return MutationResult[AnnouncementView](
        message=translate("announcements.createSuccess", ctx.language),
        data=AnnouncementView.build(announcement, ctx.language),
    )


@router.put("/{announcement_id}", response_model=MutationResult[AnnouncementView])
async def update_announcement(
    announcement_id: UUID,
    body: AnnouncementInput,
    ctx: SessionContext = Depends(require_admin),
    service: AnnouncementService = Depends(get_announcement_service),
) -> MutationResult[AnnouncementView]:
    """Edit an announcement (committee/chairman)."""
    announcement = await service.update_announcement(ctx, announcement_id, body)
    return MutationResult[AnnouncementView](
        message=translate("announcements.updateSuccess", ctx.language),
        data=AnnouncementView.build(announcement, ctx.language),
    )


@router.delete("/{announcement_id}", response_model=MutationResult[None])
async def delete_announcement(
    announcement_id: UUID,
    ctx: SessionContext = Depends(require_admin),
    service: AnnouncementService = Depends(get_announcement_service),
) -> MutationResult[None]:
    """Delete an announcement (committee/chairman)."""
    await service.delete_announcement(ctx, announcement_id)
    return MutationResult[None](
        message=translate("announcements.deleteSuccess", ctx.language)
    )
