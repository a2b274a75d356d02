"""Announcement model."""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import Field

from src.models.base import BaseEntity, Priority, UTCDatetime, utc_now


class AnnouncementCategory(str, Enum):
    """Category of an announcement."""

    GENERAL = "general"
    URGENT = "urgent"
    EVENT = "event"
    POLICY = "policy"
    WELFARE = "welfare"
    HR = "hr"


class Announcement(BaseEntity):
    """An announcement published to all staff.

    Expired announcements stay stored but are left out of listings.
    """

    title: str = Field(min_length=1, max_length=200, description="Title (BM)")
    title_en: str | None = Field(default=None, max_length=200)
    content: str = Field(min_length=1, max_length=5000, description="Content (BM)")
    content_en: str | None = Field(default=None, max_length=5000)
    category: AnnouncementCategory = AnnouncementCategory.GENERAL
    priority: Priority = Priority.NORMAL
    is_pinned: bool = False
    published_at: UTCDatetime | None = None
    expires_at: UTCDatetime | None = None
    created_by: UUID | None = None

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the expiry timestamp has passed."""
        if self.expires_at is None:
            return False
        return self.expires_at < (now or utc_now())
