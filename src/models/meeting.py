"""Meeting model for scheduled MBJ council meetings."""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import Field

from src.models.base import BaseEntity, UTCDatetime, utc_now


class MeetingStatus(str, Enum):
    """Lifecycle of a meeting. Any status may be set by an admin."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Meeting(BaseEntity):
    """A council meeting.

    Meetings carry bilingual title/description, a date and location, and
    optionally a reference to the uploaded minutes document. Decisions
    link back to a meeting through ``Decision.meeting_id``.
    """

    title: str = Field(min_length=1, max_length=500, description="Title (BM)")
    title_en: str | None = Field(default=None, max_length=500)
    description: str | None = None
    description_en: str | None = None
    meeting_date: UTCDatetime = Field(description="When the meeting takes place")
    location: str | None = Field(default=None, max_length=300)
    status: MeetingStatus = MeetingStatus.SCHEDULED
    minutes_url: str | None = Field(
        default=None,
        description="Public URL of the uploaded minutes document",
    )
    created_by: UUID | None = None

    def is_upcoming(self, now: datetime | None = None) -> bool:
        """A meeting is upcoming until its date has passed."""
        return self.meeting_date >= (now or utc_now())

    @property
    def has_minutes(self) -> bool:
        """Check if a minutes document is attached."""
        return bool(self.minutes_url)
