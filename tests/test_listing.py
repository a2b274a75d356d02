"""Tests for list views: search, filters, ordering and stats."""

from datetime import UTC, date, datetime, timedelta
from uuid import uuid4

from src.listing import (
    active_announcements,
    announcement_stats,
    complaint_stats,
    empty_message,
    entity_types,
    filter_audit_log,
    filter_complaints,
    filter_decisions,
    filter_meetings,
    filter_users,
    matches_filter,
    matches_search,
    role_stats,
    split_meetings,
)
from src.listing.schemas import UserRow
from src.models.announcement import Announcement, AnnouncementCategory
from src.models.audit import AuditAction, AuditLogEntry
from src.models.base import Language, Priority
from src.models.complaint import (
    Complaint,
    ComplaintCategory,
    ComplaintStatus,
    ComplaintType,
)
from src.models.decision import Decision, DecisionStatus
from src.models.meeting import Meeting
from src.models.profile import AppRole

NOW = datetime(2026, 6, 1, 12, tzinfo=UTC)


def _announcement(title: str, minutes_ago: int, **kwargs) -> Announcement:
    return Announcement(
        title=title,
        content="Kandungan pengumuman.",
        created_at=NOW - timedelta(minutes=minutes_ago),
        **kwargs,
    )


def _complaint(ref: str, **kwargs) -> Complaint:
    defaults = {
        "type": ComplaintType.COMPLAINT,
        "category": ComplaintCategory.FACILITIES,
        "subject": "Penghawa dingin rosak",
        "description": "Penghawa dingin bilik mesyuarat rosak.",
    }
    defaults.update(kwargs)
    return Complaint(reference_number=ref, **defaults)


def _user(name: str, role: AppRole, department: str | None = None) -> UserRow:
    return UserRow(
        user_id=uuid4(),
        profile_id=uuid4(),
        full_name=name,
        email=f"{name.split()[0].lower()}@jpj.gov.my",
        department=department,
        role=role,
    )


class TestPredicates:
    """Tests for the shared search and filter predicates."""

    def test_blank_search_matches_everything(self):
        """Blank or missing queries do not filter."""
        assert matches_search(None, "abc")
        assert matches_search("   ", None)

    def test_search_is_case_insensitive(self):
        """Substring search ignores case."""
        assert matches_search("LIF", "Lif rosak")
        assert not matches_search("tandas", "Lif rosak", None)

    def test_all_means_no_filter(self):
        """'all' and None both disable a filter."""
        assert matches_filter(ComplaintStatus.PENDING, "all")
        assert matches_filter(ComplaintStatus.PENDING, None)
        assert matches_filter(ComplaintStatus.PENDING, "pending")
        assert not matches_filter(ComplaintStatus.PENDING, "resolved")

    def test_empty_message(self):
        """Empty lists get a localized placeholder."""
        assert empty_message([], Language.MS) == "Tiada data"
        assert empty_message([], "en") == "No data"
        assert empty_message([1], Language.EN) is None


class TestAnnouncements:
    """Tests for the announcement list."""

    def test_expired_hidden(self):
        """Expired announcements are left out."""
        items = [
            _announcement("Notis lama", 10, expires_at=NOW - timedelta(seconds=1)),
            _announcement("Notis baru", 5),
        ]
        result = active_announcements(items, now=NOW)
        assert [a.title for a in result] == ["Notis baru"]

    def test_pinned_first_then_newest(self):
        """Pinned rows lead; each group is newest first."""
        items = [
            _announcement("Lama", 30),
            _announcement("Disemat lama", 20, is_pinned=True),
            _announcement("Baru", 1),
            _announcement("Disemat baru", 10, is_pinned=True),
        ]
        result = active_announcements(items, now=NOW)
        assert [a.title for a in result] == [
            "Disemat baru",
            "Disemat lama",
            "Baru",
            "Lama",
        ]

    def test_search_uses_display_language(self):
        """English readers search English titles when present."""
        items = [
            _announcement("Hari Sukan", 5, title_en="Sports Day"),
            _announcement("Mesyuarat", 6),
        ]
        assert len(active_announcements(items, search="sports", now=NOW)) == 0
        result = active_announcements(
            items, search="sports", language=Language.EN, now=NOW
        )
        assert [a.title for a in result] == ["Hari Sukan"]

    def test_category_filter(self):
        """Category narrows the list."""
        items = [
            _announcement("Segera", 5, category=AnnouncementCategory.URGENT),
            _announcement("Umum", 6),
        ]
        result = active_announcements(items, category="urgent", now=NOW)
        assert [a.title for a in result] == ["Segera"]

    def test_stats(self):
        """Stats count every row; the month follows Malaysian time."""
        items = [
            _announcement("Segera", 5, priority=Priority.URGENT),
            _announcement(
                "Kecemasan",
                10,
                category=AnnouncementCategory.URGENT,
                is_pinned=True,
            ),
            # 04:00 on 1 June in Kuala Lumpur, still May in UTC
            _announcement("Awal pagi", 16 * 60),
            _announcement(
                "Bulan lepas",
                21 * 60,
                expires_at=NOW - timedelta(minutes=1),
            ),
        ]
        stats = announcement_stats(items, now=NOW)
        assert stats.total == 4
        assert stats.pinned == 1
        assert stats.urgent == 2
        assert stats.this_month == 3


class TestMeetings:
    """Tests for meeting lists."""

    def test_split_by_clock(self):
        """The same meeting moves from upcoming to past as time passes."""
        meeting = Meeting(title="Mesyuarat", meeting_date=NOW + timedelta(hours=1))

        upcoming, past = split_meetings([meeting], NOW)
        assert upcoming == [meeting] and past == []

        upcoming, past = split_meetings([meeting], NOW + timedelta(days=1))
        assert upcoming == [] and past == [meeting]

    def test_search_and_order(self):
        """Search covers titles and location; latest date first."""
        meetings = [
            Meeting(title="Mesyuarat 1", meeting_date=NOW, location="Bilik Gerakan"),
            Meeting(title="Mesyuarat 2", meeting_date=NOW + timedelta(days=3)),
            Meeting(
                title="Taklimat",
                title_en="Briefing",
                meeting_date=NOW + timedelta(days=1),
            ),
        ]
        assert [m.title for m in filter_meetings(meetings)] == [
            "Mesyuarat 2",
            "Taklimat",
            "Mesyuarat 1",
        ]
        assert [m.title for m in filter_meetings(meetings, "gerakan")] == [
            "Mesyuarat 1"
        ]
        assert [m.title for m in filter_meetings(meetings, "brief")] == ["Taklimat"]


class TestDecisions:
    """Tests for decision lists."""

    def test_overdue_filter_uses_display_status(self):
        """Filtering by overdue selects derived, not stored, status."""
        today = date(2026, 6, 1)
        late = Decision(
            decision_number="K/1",
            title="Lewat",
            description="d",
            due_date=today - timedelta(days=1),
        )
        on_time = Decision(
            decision_number="K/2",
            title="Tepat",
            description="d",
            due_date=today + timedelta(days=1),
        )
        done = Decision(
            decision_number="K/3",
            title="Siap",
            description="d",
            due_date=today - timedelta(days=5),
            status=DecisionStatus.COMPLETED,
        )
        rows = [late, on_time, done]

        assert filter_decisions(rows, status="overdue", today=today) == [late]
        assert filter_decisions(rows, status="pending", today=today) == [on_time]
        assert filter_decisions(rows, status="completed", today=today) == [done]

    def test_search_and_meeting_filter(self):
        """Search covers number and responsible party; meeting narrows."""
        meeting_id = uuid4()
        a = Decision(
            decision_number="MBJ/2026/07",
            title="Tambah parkir",
            description="d",
            responsible_party="Unit Pentadbiran",
            meeting_id=meeting_id,
        )
        b = Decision(decision_number="MBJ/2026/08", title="Cat", description="d")

        assert filter_decisions([a, b], search="pentadbiran") == [a]
        assert filter_decisions([a, b], search="2026/08") == [b]
        assert filter_decisions([a, b], meeting_id=str(meeting_id)) == [a]


class TestComplaints:
    """Tests for complaint lists and stats."""

    def test_filters(self):
        """Search by reference, filter by status and type."""
        rows = [
            _complaint("ADU-2026-0001"),
            _complaint(
                "CAD-2026-0001",
                type=ComplaintType.SUGGESTION,
                status=ComplaintStatus.RESOLVED,
            ),
        ]
        assert len(filter_complaints(rows, search="cad-2026")) == 1
        assert len(filter_complaints(rows, status="resolved")) == 1
        assert len(filter_complaints(rows, complaint_type="complaint")) == 1
        assert len(filter_complaints(rows, status="all", complaint_type="all")) == 2

    def test_stats_zero_filled(self):
        """Every type and status appears in the stats."""
        stats = complaint_stats([_complaint("ADU-2026-0001")])
        assert stats.total == 1
        assert stats.by_type == {"complaint": 1, "suggestion": 0}
        assert stats.by_status == {
            "pending": 1,
            "in_progress": 0,
            "resolved": 0,
            "rejected": 0,
        }


class TestUsers:
    """Tests for the admin user list."""

    def test_filter_and_stats(self):
        """Users filter by name, department and role; stats count roles."""
        users = [
            _user("Aminah Yusof", AppRole.STAFF, "Penguatkuasa"),
            _user("Rahim Said", AppRole.CHAIRMAN),
            _user("Lim Mei Ling", AppRole.STAFF),
        ]
        assert len(filter_users(users, search="penguat")) == 1
        assert len(filter_users(users, role="staff")) == 2

        stats = role_stats(users)
        assert stats.total == 3
        assert stats.by_role == {"staff": 2, "committee": 0, "chairman": 1}


class TestAuditLog:
    """Tests for the audit log view."""

    def test_filter_and_entity_types(self):
        """Entries filter by entity type and search action."""
        entries = [
            AuditLogEntry(action=AuditAction.CREATE, entity_type="meetings"),
            AuditLogEntry(action=AuditAction.LOGIN, entity_type="sessions"),
            AuditLogEntry(action=AuditAction.DELETE, entity_type="meetings"),
        ]
        assert entity_types(entries) == ["meetings", "sessions"]
        assert len(filter_audit_log(entries, entity_type="meetings")) == 2
        assert len(filter_audit_log(entries, search="login")) == 1
