"""Dashboard aggregator: summary counts and recent activity."""

import asyncio
from dataclasses import dataclass, field

import structlog

from src.auth.context import SessionContext
from src.models.announcement import Announcement
from src.models.complaint import Complaint, ComplaintStatus
from src.models.meeting import MeetingStatus
from src.repositories.complaint_repo import ComplaintRepository
from src.repositories.meeting_repo import DecisionRepository, MeetingRepository
from src.repositories.profile_repo import ProfileRepository
from src.services.announcement_service import AnnouncementService
from src.services.complaint_service import ComplaintService

logger = structlog.get_logger()

RECENT_ANNOUNCEMENTS = 3
RECENT_COMPLAINTS = 5


@dataclass
class DashboardSummary:
    """Everything the dashboard shows, fetched in one round."""

    total_staff: int = 0
    pending_complaints: int = 0
    upcoming_meetings: int = 0
    total_decisions: int = 0
    recent_announcements: list[Announcement] = field(default_factory=list)
    recent_complaints: list[Complaint] = field(default_factory=list)


class DashboardService:
    """Runs the independent dashboard queries concurrently."""

    def __init__(
        self,
        profiles: ProfileRepository,
        meetings: MeetingRepository,
        decisions: DecisionRepository,
        complaints: ComplaintRepository,
        announcement_service: AnnouncementService,
        complaint_service: ComplaintService,
    ):
        self._profiles = profiles
        self._meetings = meetings
        self._decisions = decisions
        self._complaints = complaints
        self._announcement_service = announcement_service
        self._complaint_service = complaint_service

    async def summary(self, ctx: SessionContext) -> DashboardSummary:
        """Counts plus the newest announcements and visible complaints."""
        (
            total_staff,
            pending_complaints,
            upcoming_meetings,
            total_decisions,
            announcements,
            complaints,
        ) = await asyncio.gather(
            self._profiles.count(),
            self._complaints.count_by_status(ComplaintStatus.PENDING),
            self._meetings.count({"status": MeetingStatus.SCHEDULED}),
            self._decisions.count(),
            self._announcement_service.list_active(language=ctx.language),
            self._complaint_service.visible_complaints(ctx, limit=RECENT_COMPLAINTS),
        )
        logger.debug("dashboard_loaded", user_id=str(ctx.user_id))
        return DashboardSummary(
            total_staff=total_staff,
            pending_complaints=pending_complaints,
            upcoming_meetings=upcoming_meetings,
            total_decisions=total_decisions,
            recent_announcements=announcements[:RECENT_ANNOUNCEMENTS],
            recent_complaints=complaints,
        )
