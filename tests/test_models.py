"""Tests for domain models."""

from datetime import UTC, date, datetime, timedelta, timezone
from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from src.models.account import Session
from src.models.announcement import Announcement
from src.models.base import BaseEntity
from src.models.complaint import (
    Complaint,
    ComplaintCategory,
    ComplaintStatus,
    ComplaintType,
    format_reference_number,
)
from src.models.decision import Decision, DecisionDisplayStatus, DecisionStatus
from src.models.meeting import Meeting
from src.models.profile import AppRole, is_admin_role_set, primary_role


class TestBaseEntity:
    """Tests for BaseEntity."""

    def test_auto_generates_uuid(self):
        """BaseEntity should auto-generate a UUID."""

        class TestEntity(BaseEntity):
            pass

        entity = TestEntity()
        assert isinstance(entity.id, UUID)

    def test_auto_generates_timestamps(self):
        """BaseEntity should auto-generate created_at and updated_at."""

        class TestEntity(BaseEntity):
            pass

        before = datetime.now(UTC)
        entity = TestEntity()
        after = datetime.now(UTC)

        assert before <= entity.created_at <= after
        assert before <= entity.updated_at <= after


class TestMeeting:
    """Tests for Meeting model."""

    def test_naive_date_is_treated_as_utc(self):
        """Naive meeting dates are stored as UTC."""
        meeting = Meeting(title="Mesyuarat Agung", meeting_date=datetime(2026, 3, 1, 9))
        assert meeting.meeting_date.tzinfo is not None
        assert meeting.meeting_date.utcoffset() == timedelta(0)

    def test_offset_date_is_converted_to_utc(self):
        """Dates with an offset are converted, not relabelled."""
        local = datetime(2026, 3, 1, 9, tzinfo=timezone(timedelta(hours=8)))
        meeting = Meeting(title="Mesyuarat Agung", meeting_date=local)
        assert meeting.meeting_date.hour == 1

    def test_upcoming_until_date_passes(self):
        """A meeting stays upcoming until its date is in the past."""
        now = datetime(2026, 3, 1, 9, tzinfo=UTC)
        meeting = Meeting(title="Mesyuarat", meeting_date=now + timedelta(hours=1))

        assert meeting.is_upcoming(now)
        assert not meeting.is_upcoming(now + timedelta(hours=2))

    def test_has_minutes(self):
        """has_minutes reflects the minutes URL."""
        meeting = Meeting(title="Mesyuarat", meeting_date=datetime.now(UTC))
        assert not meeting.has_minutes
        meeting.minutes_url = "/storage/meeting-minutes/a/1.pdf"
        assert meeting.has_minutes

    def test_empty_title_rejected(self):
        """Titles are required."""
        with pytest.raises(ValidationError):
            Meeting(title="", meeting_date=datetime.now(UTC))


class TestDecision:
    """Tests for derived decision status."""

    def _decision(self, **kwargs) -> Decision:
        return Decision(
            decision_number="KPT/2026/01",
            title="Naik taraf surau",
            description="Surau blok B dinaik taraf.",
            **kwargs,
        )

    def test_overdue_when_past_due_and_not_completed(self):
        """Past due date and not completed means overdue."""
        decision = self._decision(due_date=date(2026, 1, 1))
        today = date(2026, 1, 2)

        assert decision.is_overdue(today)
        assert decision.display_status(today) == DecisionDisplayStatus.OVERDUE

    def test_completed_is_never_overdue(self):
        """Completed decisions are not overdue."""
        decision = self._decision(
            due_date=date(2026, 1, 1),
            status=DecisionStatus.COMPLETED,
        )
        assert not decision.is_overdue(date(2027, 1, 1))
        assert decision.display_status(date(2027, 1, 1)) == (
            DecisionDisplayStatus.COMPLETED
        )

    def test_due_today_is_not_overdue(self):
        """The due date itself is still on time."""
        decision = self._decision(due_date=date(2026, 1, 1))
        assert not decision.is_overdue(date(2026, 1, 1))

    def test_no_due_date_keeps_stored_status(self):
        """Without a due date the stored status is displayed."""
        decision = self._decision(status=DecisionStatus.IN_PROGRESS)
        assert decision.display_status() == DecisionDisplayStatus.IN_PROGRESS

    def test_overdue_cannot_be_stored(self):
        """overdue is not a valid stored status."""
        with pytest.raises(ValidationError):
            self._decision(status="overdue")


class TestComplaint:
    """Tests for Complaint model."""

    def test_reference_number_format(self):
        """Sequences are zero padded to four digits."""
        assert format_reference_number("ADU", 2026, 7) == "ADU-2026-0007"
        assert format_reference_number("CAD", 2026, 12345) == "CAD-2026-12345"

    def test_terminal_statuses(self):
        """Resolved and rejected are terminal."""
        complaint = Complaint(
            reference_number="ADU-2026-0001",
            type=ComplaintType.COMPLAINT,
            category=ComplaintCategory.FACILITIES,
            subject="Lif rosak",
            description="Lif blok A rosak sejak minggu lepas.",
        )
        assert complaint.status == ComplaintStatus.PENDING
        assert not complaint.is_terminal

        complaint.status = ComplaintStatus.REJECTED
        assert complaint.is_terminal


class TestAnnouncement:
    """Tests for announcement expiry."""

    def test_expiry(self):
        """An announcement expires once expires_at has passed."""
        now = datetime(2026, 5, 1, tzinfo=UTC)
        announcement = Announcement(
            title="Notis",
            content="Notis penutupan pejabat.",
            expires_at=now - timedelta(minutes=1),
        )
        assert announcement.is_expired(now)

    def test_no_expiry(self):
        """Announcements without an expiry never expire."""
        announcement = Announcement(title="Notis", content="Notis umum.")
        assert not announcement.is_expired()


class TestRoles:
    """Tests for role helpers."""

    def test_primary_role_is_highest(self):
        """The highest role wins."""
        assert primary_role({AppRole.STAFF, AppRole.CHAIRMAN}) == AppRole.CHAIRMAN
        assert primary_role([AppRole.COMMITTEE, AppRole.STAFF]) == AppRole.COMMITTEE

    def test_primary_role_defaults_to_staff(self):
        """A user without role rows is staff."""
        assert primary_role(set()) == AppRole.STAFF

    def test_admin_role_set(self):
        """Committee and chairman are administrative."""
        assert is_admin_role_set({AppRole.COMMITTEE})
        assert is_admin_role_set({AppRole.STAFF, AppRole.CHAIRMAN})
        assert not is_admin_role_set({AppRole.STAFF})


class TestSession:
    """Tests for sign-in sessions."""

    def test_open_sets_expiry(self):
        """Sessions expire ttl_hours after opening."""
        session = Session.open(uuid4(), "abc", ttl_hours=12)
        assert session.expires_at - session.created_at == timedelta(hours=12)
        assert not session.is_expired()

    def test_expired_at_boundary(self):
        """A session is expired at exactly its expiry time."""
        session = Session.open(uuid4(), "abc", ttl_hours=1)
        assert session.is_expired(session.expires_at)
