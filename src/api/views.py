"""Localized response models.

Rows are returned with their stored fields (for edit forms) plus display
fields resolved for the request language: bilingual text, status and
category labels, formatted dates. Fallback to the Malay text happens here.
"""

from datetime import date, datetime
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, Field

from src.i18n.localize import (
    format_date,
    format_datetime,
    resolve_localized_text,
    status_label,
    translate,
)
from src.listing.filters import empty_message
from src.listing.schemas import UserRow
from src.models.announcement import Announcement
from src.models.audit import AuditLogEntry
from src.models.base import Language
from src.models.complaint import Complaint
from src.models.decision import Decision
from src.models.meeting import Meeting
from src.models.profile import Profile

T = TypeVar("T")


class ListResponse(BaseModel, Generic[T]):
    """A filtered list with its empty-state placeholder."""

    items: list[T] = Field(default_factory=list)
    total: int = 0
    empty_message: str | None = Field(
        default=None,
        description="Localized 'no data' text when the list is empty",
    )

    @classmethod
    def of(cls, items: list[T], language: Language) -> "ListResponse[T]":
        """Wrap items, adding the placeholder when there are none."""
        return cls(
            items=items,
            total=len(items),
            empty_message=empty_message(items, language),
        )


class MutationResult(BaseModel, Generic[T]):
    """Outcome of a create/update/delete with the toast message."""

    message: str
    data: T | None = None


class MeetingView(BaseModel):
    """A meeting as displayed."""

    id: UUID
    title: str
    title_en: str | None
    description: str | None
    description_en: str | None
    meeting_date: datetime
    location: str | None
    status: str
    minutes_url: str | None
    created_by: UUID | None
    display_title: str
    display_description: str
    status_label: str
    date_display: str
    has_minutes: bool
    is_upcoming: bool

    @classmethod
    def build(
        cls,
        meeting: Meeting,
        language: Language,
        now: datetime | None = None,
    ) -> "MeetingView":
        return cls(
            **meeting.model_dump(
                include={
                    "id",
                    "title",
                    "title_en",
                    "description",
                    "description_en",
                    "meeting_date",
                    "location",
                    "minutes_url",
                    "created_by",
                }
            ),
            status=meeting.status.value,
            display_title=resolve_localized_text(
                meeting.title, meeting.title_en, language
            ),
            display_description=resolve_localized_text(
                meeting.description, meeting.description_en, language
            ),
            status_label=status_label("meetings", meeting.status.value, language),
            date_display=format_datetime(meeting.meeting_date, language),
            has_minutes=meeting.has_minutes,
            is_upcoming=meeting.is_upcoming(now),
        )


class DecisionView(BaseModel):
    """A decision as displayed, with overdue derived for today."""

    id: UUID
    decision_number: str
    title: str
    title_en: str | None
    description: str
    description_en: str | None
    responsible_party: str | None
    due_date: date | None
    status: str
    meeting_id: UUID | None
    display_title: str
    display_description: str
    display_status: str
    status_label: str
    due_date_display: str
    is_overdue: bool

    @classmethod
    def build(
        cls,
        decision: Decision,
        language: Language,
        today: date | None = None,
    ) -> "DecisionView":
        shown = decision.display_status(today).value
        return cls(
            **decision.model_dump(
                include={
                    "id",
                    "decision_number",
                    "title",
                    "title_en",
                    "description",
                    "description_en",
                    "responsible_party",
                    "due_date",
                    "meeting_id",
                }
            ),
            status=decision.status.value,
            display_title=resolve_localized_text(
                decision.title, decision.title_en, language
            ),
            display_description=resolve_localized_text(
                decision.description, decision.description_en, language
            ),
            display_status=shown,
            status_label=status_label("decisions", shown, language),
            due_date_display=format_date(decision.due_date, language),
            is_overdue=decision.is_overdue(today),
        )


class MeetingDetailView(BaseModel):
    """A meeting with its decisions."""

    meeting: MeetingView
    decisions: ListResponse[DecisionView]


class ComplaintView(BaseModel):
    """A complaint or suggestion as displayed."""

    id: UUID
    reference_number: str
    type: str
    category: str
    subject: str
    description: str
    priority: str
    status: str
    resolution: str | None
    resolved_at: datetime | None
    submitted_by: UUID | None
    assigned_to: UUID | None
    created_at: datetime
    type_label: str
    category_label: str
    priority_label: str
    status_label: str
    created_display: str
    resolved_display: str
    is_terminal: bool

    @classmethod
    def build(cls, complaint: Complaint, language: Language) -> "ComplaintView":
        return cls(
            **complaint.model_dump(
                include={
                    "id",
                    "reference_number",
                    "subject",
                    "description",
                    "resolution",
                    "resolved_at",
                    "submitted_by",
                    "assigned_to",
                    "created_at",
                }
            ),
            type=complaint.type.value,
            category=complaint.category.value,
            priority=complaint.priority.value,
            status=complaint.status.value,
            type_label=translate(f"complaints.{complaint.type.value}", language),
            category_label=translate(f"category.{complaint.category.value}", language),
            priority_label=translate(f"priority.{complaint.priority.value}", language),
            status_label=status_label("complaints", complaint.status.value, language),
            created_display=format_datetime(complaint.created_at, language),
            resolved_display=format_datetime(complaint.resolved_at, language),
            is_terminal=complaint.is_terminal,
        )


class AnnouncementView(BaseModel):
    """An announcement as displayed."""

    id: UUID
    title: str
    title_en: str | None
    content: str
    content_en: str | None
    category: str
    priority: str
    is_pinned: bool
    published_at: datetime | None
    expires_at: datetime | None
    created_at: datetime
    created_by: UUID | None
    display_title: str
    display_content: str
    category_label: str
    priority_label: str
    published_display: str
    expires_display: str

    @classmethod
    def build(
        cls,
        announcement: Announcement,
        language: Language,
    ) -> "AnnouncementView":
        return cls(
            **announcement.model_dump(
                include={
                    "id",
                    "title",
                    "title_en",
                    "content",
                    "content_en",
                    "is_pinned",
                    "published_at",
                    "expires_at",
                    "created_at",
                    "created_by",
                }
            ),
            category=announcement.category.value,
            priority=announcement.priority.value,
            display_title=resolve_localized_text(
                announcement.title, announcement.title_en, language
            ),
            display_content=resolve_localized_text(
                announcement.content, announcement.content_en, language
            ),
            category_label=translate(
                f"announcements.{announcement.category.value}", language
            ),
            priority_label=translate(
                f"priority.{announcement.priority.value}", language
            ),
            published_display=format_date(
                announcement.published_at or announcement.created_at, language
            ),
            expires_display=format_date(announcement.expires_at, language),
        )


class ProfileView(BaseModel):
    """The caller's profile."""

    id: UUID
    user_id: UUID
    full_name: str
    email: str
    phone: str | None
    department: str | None
    position: str | None
    avatar_url: str | None
    preferred_language: Language

    @classmethod
    def build(cls, profile: Profile) -> "ProfileView":
        return cls(**profile.model_dump(exclude={"created_at", "updated_at"}))


class UserRowView(UserRow):
    """A user-list row with its role label."""

    role_label: str

    @classmethod
    def build(cls, row: UserRow, language: Language) -> "UserRowView":
        return cls(
            **row.model_dump(),
            role_label=translate(f"role.{row.role.value}", language),
        )


class AuditEntryView(BaseModel):
    """An audit log row as displayed."""

    id: UUID
    user_id: UUID | None
    action: str
    entity_type: str
    entity_id: str | None
    old_values: dict | None
    new_values: dict | None
    ip_address: str | None
    user_agent: str | None
    created_at: datetime
    action_label: str
    entity_label: str
    created_display: str

    @classmethod
    def build(cls, entry: AuditLogEntry, language: Language) -> "AuditEntryView":
        return cls(
            **entry.model_dump(exclude={"action"}),
            action=entry.action.value,
            action_label=translate(f"audit.{entry.action.value}", language),
            entity_label=translate(f"entity.{entry.entity_type}", language),
            created_display=format_datetime(entry.created_at, language),
        )
