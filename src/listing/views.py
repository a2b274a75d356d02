"""List views: search, filter, sort and split rows for display."""

from collections import Counter
from datetime import date, datetime
from uuid import UUID

from src.i18n.localize import resolve_localized_text
from src.listing.filters import matches_filter, matches_search
from src.listing.schemas import (
    AnnouncementStats,
    ComplaintStats,
    RoleStats,
    UserRow,
)
from src.models.announcement import Announcement, AnnouncementCategory
from src.models.audit import AuditLogEntry
from src.models.base import Language, Priority, to_display_zone, utc_now
from src.models.complaint import Complaint, ComplaintStatus, ComplaintType
from src.models.decision import Decision
from src.models.meeting import Meeting
from src.models.profile import AppRole


def active_announcements(
    announcements: list[Announcement],
    search: str | None = None,
    category: str | None = None,
    language: Language = Language.MS,
    now: datetime | None = None,
) -> list[Announcement]:
    """Announcements to show: unexpired, pinned first, then newest.

    The search runs over the title in the display language.
    """
    now = now or utc_now()
    visible = [
        a
        for a in announcements
        if not a.is_expired(now)
        and matches_filter(a.category, category)
        and matches_search(
            search, resolve_localized_text(a.title, a.title_en, language)
        )
    ]
    # Two stable sorts: newest first, then pinned ahead of unpinned
    visible.sort(key=lambda a: a.created_at, reverse=True)
    visible.sort(key=lambda a: not a.is_pinned)
    return visible


def announcement_stats(
    announcements: list[Announcement],
    now: datetime | None = None,
) -> AnnouncementStats:
    """Counts over every fetched announcement, expired ones included.

    "This month" is the current calendar month in the display zone.
    """
    current = to_display_zone(now or utc_now())

    def created_this_month(a: Announcement) -> bool:
        created = to_display_zone(a.created_at)
        return (created.year, created.month) == (current.year, current.month)

    return AnnouncementStats(
        total=len(announcements),
        pinned=sum(1 for a in announcements if a.is_pinned),
        urgent=sum(
            1
            for a in announcements
            if a.priority == Priority.URGENT
            or a.category == AnnouncementCategory.URGENT
        ),
        this_month=sum(1 for a in announcements if created_this_month(a)),
    )


def filter_meetings(
    meetings: list[Meeting],
    search: str | None = None,
) -> list[Meeting]:
    """Meetings matching the search, latest meeting date first."""
    matching = [
        m for m in meetings if matches_search(search, m.title, m.title_en, m.location)
    ]
    return sorted(matching, key=lambda m: m.meeting_date, reverse=True)


def split_meetings(
    meetings: list[Meeting],
    now: datetime | None = None,
) -> tuple[list[Meeting], list[Meeting]]:
    """Split into (upcoming, past) by comparing the date with ``now``.

    Nothing is stored: the same row moves from upcoming to past purely
    because time has passed.
    """
    now = now or utc_now()
    upcoming = [m for m in meetings if m.is_upcoming(now)]
    past = [m for m in meetings if not m.is_upcoming(now)]
    return upcoming, past


def filter_decisions(
    decisions: list[Decision],
    search: str | None = None,
    status: str | None = None,
    meeting_id: UUID | str | None = None,
    today: date | None = None,
) -> list[Decision]:
    """Decisions matching search, display status and meeting."""
    return [
        d
        for d in decisions
        if matches_search(
            search, d.title, d.title_en, d.decision_number, d.responsible_party
        )
        and matches_filter(d.display_status(today), status)
        and (meeting_id is None or str(d.meeting_id) == str(meeting_id))
    ]


def filter_complaints(
    complaints: list[Complaint],
    search: str | None = None,
    status: str | None = None,
    complaint_type: str | None = None,
) -> list[Complaint]:
    """Complaints matching search (subject, reference), status and type."""
    return [
        c
        for c in complaints
        if matches_search(search, c.subject, c.reference_number)
        and matches_filter(c.status, status)
        and matches_filter(c.type, complaint_type)
    ]


def complaint_stats(complaints: list[Complaint]) -> ComplaintStats:
    """Totals per type and per status, zero-filled."""
    by_type = Counter(c.type.value for c in complaints)
    by_status = Counter(c.status.value for c in complaints)
    return ComplaintStats(
        total=len(complaints),
        by_type={t.value: by_type.get(t.value, 0) for t in ComplaintType},
        by_status={s.value: by_status.get(s.value, 0) for s in ComplaintStatus},
    )


def filter_users(
    users: list[UserRow],
    search: str | None = None,
    role: str | None = None,
) -> list[UserRow]:
    """Users matching search (name, e-mail, department) and primary role."""
    return [
        u
        for u in users
        if matches_search(search, u.full_name, u.email, u.department)
        and matches_filter(u.role, role)
    ]


def role_stats(users: list[UserRow]) -> RoleStats:
    """Totals per primary role, zero-filled."""
    by_role = Counter(u.role.value for u in users)
    return RoleStats(
        total=len(users),
        by_role={r.value: by_role.get(r.value, 0) for r in AppRole},
    )


def filter_audit_log(
    entries: list[AuditLogEntry],
    search: str | None = None,
    entity_type: str | None = None,
) -> list[AuditLogEntry]:
    """Audit rows matching search (action, entity type) and entity type."""
    return [
        e
        for e in entries
        if matches_search(search, e.action.value, e.entity_type)
        and matches_filter(e.entity_type, entity_type)
    ]


def entity_types(entries: list[AuditLogEntry]) -> list[str]:
    """Distinct entity types present, for the filter dropdown."""
    return sorted({e.entity_type for e in entries})
