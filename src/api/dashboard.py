"""Dashboard endpoint."""

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from src.api.views import AnnouncementView, ComplaintView, ListResponse
from src.auth.context import SessionContext
from src.auth.dependencies import get_session_context
from src.i18n.localize import translate
from src.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


class SummaryCard(BaseModel):
    """One number on the dashboard."""

    key: str
    label: str
    value: int


class DashboardResponse(BaseModel):
    """Welcome line, summary cards and recent activity."""

    greeting: str
    welcome: str
    cards: list[SummaryCard]
    recent_announcements: ListResponse[AnnouncementView]
    recent_complaints: ListResponse[ComplaintView]


def get_dashboard_service(request: Request) -> DashboardService:
    """Dependency to get DashboardService from app state."""
    return request.app.state.dashboard_service


@router.get("", response_model=DashboardResponse)
async def dashboard(
    ctx: SessionContext = Depends(get_session_context),
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardResponse:
    """Summary counts, the newest announcements and recent complaints."""
    summary = await service.summary(ctx)
    lang = ctx.language
    counts = {
        "totalStaff": summary.total_staff,
        "pendingComplaints": summary.pending_complaints,
        "upcomingMeetings": summary.upcoming_meetings,
        "totalDecisions": summary.total_decisions,
    }
    return DashboardResponse(
        greeting=f"{translate('dashboard.greeting', lang)}, {ctx.display_name}",
        welcome=translate("dashboard.welcome", lang),
        cards=[
            SummaryCard(key=key, label=translate(f"dashboard.{key}", lang), value=value)
            for key, value in counts.items()
        ],
        recent_announcements=ListResponse[AnnouncementView].of(
            [AnnouncementView.build(a, lang) for a in summary.recent_announcements],
            lang,
        ),
        recent_complaints=ListResponse[ComplaintView].of(
            [ComplaintView.build(c, lang) for c in summary.recent_complaints],
            lang,
        ),
    )
