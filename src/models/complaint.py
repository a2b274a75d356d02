"""Complaint and suggestion model."""

from enum import Enum
from uuid import UUID

from pydantic import Field

from src.models.base import BaseEntity, Priority, UTCDatetime


class ComplaintType(str, Enum):
    """Whether the submission is a complaint or a suggestion."""

    COMPLAINT = "complaint"
    SUGGESTION = "suggestion"


class ComplaintCategory(str, Enum):
    """Subject area of a complaint or suggestion."""

    WELFARE = "welfare"
    FACILITIES = "facilities"
    HR = "hr"
    FINANCE = "finance"
    SAFETY = "safety"
    OTHERS = "others"


class ComplaintStatus(str, Enum):
    """Handling status of a complaint."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    REJECTED = "rejected"


TERMINAL_STATUSES = frozenset({ComplaintStatus.RESOLVED, ComplaintStatus.REJECTED})

# Reference number prefixes: ADU(an) for complaints, CAD(angan) for suggestions
REFERENCE_PREFIXES: dict[ComplaintType, str] = {
    ComplaintType.COMPLAINT: "ADU",
    ComplaintType.SUGGESTION: "CAD",
}


def format_reference_number(prefix: str, year: int, sequence: int) -> str:
    """Build a reference number such as ``CAD-2026-0007``."""
    return f"{prefix}-{year}-{sequence:04d}"


class Complaint(BaseEntity):
    """A complaint or suggestion submitted by a staff member.

    The resolution text and resolved timestamp are only set when the
    complaint reaches a terminal status.
    """

    reference_number: str = Field(min_length=1, max_length=30)
    type: ComplaintType
    category: ComplaintCategory
    subject: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=5000)
    priority: Priority = Priority.NORMAL
    status: ComplaintStatus = ComplaintStatus.PENDING
    resolution: str | None = None
    resolved_at: UTCDatetime | None = None
    submitted_by: UUID | None = None
    assigned_to: UUID | None = None

    @property
    def is_terminal(self) -> bool:
        """Resolved and rejected complaints take no further action."""
        return self.status in TERMINAL_STATUSES
