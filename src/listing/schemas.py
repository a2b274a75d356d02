"""Row and summary schemas for list views."""

from uuid import UUID

from pydantic import BaseModel, Field

from src.models.profile import AppRole


class UserRow(BaseModel):
    """One row of the admin user list: a profile joined with its role."""

    user_id: UUID
    profile_id: UUID
    full_name: str
    email: str
    department: str | None = None
    position: str | None = None
    role: AppRole = Field(description="Primary (highest) role held")
    role_id: UUID | None = Field(
        default=None,
        description="Role row that a role change rewrites",
    )
    can_change_role: bool = Field(
        default=True,
        description="False on the caller's own row",
    )


class ComplaintStats(BaseModel):
    """Complaint counts for the summary cards."""

    total: int = 0
    by_type: dict[str, int] = Field(default_factory=dict)
    by_status: dict[str, int] = Field(default_factory=dict)


class RoleStats(BaseModel):
    """User counts per primary role for the admin panel."""

    total: int = 0
    by_role: dict[str, int] = Field(default_factory=dict)


class AnnouncementStats(BaseModel):
    """Announcement counts for the summary cards."""

    total: int = 0
    pinned: int = 0
    urgent: int = Field(default=0, description="Urgent priority or category")
    this_month: int = Field(default=0, description="Created this calendar month")
