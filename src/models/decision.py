"""Decision model for council decisions and their follow-up."""

from datetime import date
from enum import Enum
from uuid import UUID

from pydantic import Field

from src.models.base import BaseEntity, local_today


class DecisionStatus(str, Enum):
    """Stored status of a decision."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class DecisionDisplayStatus(str, Enum):
    """Status as rendered. ``overdue`` only ever exists here."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    OVERDUE = "overdue"


class Decision(BaseEntity):
    """A decision taken by the council.

    Decisions are followed up until completed:
    - A responsible party carries it out
    - A due date sets the deadline
    - Overdue is derived from the due date, never stored
    """

    decision_number: str = Field(min_length=1, max_length=50)
    title: str = Field(min_length=1, max_length=500, description="Title (BM)")
    title_en: str | None = Field(default=None, max_length=500)
    description: str = Field(min_length=1, description="Description (BM)")
    description_en: str | None = None
    responsible_party: str | None = Field(default=None, max_length=200)
    due_date: date | None = None
    status: DecisionStatus = DecisionStatus.PENDING
    meeting_id: UUID | None = Field(
        default=None,
        description="Meeting this decision was taken in (optional)",
    )
    created_by: UUID | None = None

    def is_overdue(self, today: date | None = None) -> bool:
        """Check if decision is past due date and not completed."""
        if self.due_date is None:
            return False
        if self.status == DecisionStatus.COMPLETED:
            return False
        return self.due_date < (today or local_today())

    def display_status(self, today: date | None = None) -> DecisionDisplayStatus:
        """Status to render, with overdue derived at call time."""
        if self.is_overdue(today):
            return DecisionDisplayStatus.OVERDUE
        return DecisionDisplayStatus(self.status.value)
