"""Profile and role assignment models."""

from enum import Enum
from uuid import UUID

from pydantic import EmailStr, Field

from src.models.base import BaseEntity, Language


class AppRole(str, Enum):
    """Portal roles, lowest to highest."""

    STAFF = "staff"
    COMMITTEE = "committee"
    CHAIRMAN = "chairman"


# Higher number wins when a user holds several roles
ROLE_PRECEDENCE: dict[AppRole, int] = {
    AppRole.STAFF: 0,
    AppRole.COMMITTEE: 1,
    AppRole.CHAIRMAN: 2,
}

ADMIN_ROLES = frozenset({AppRole.COMMITTEE, AppRole.CHAIRMAN})


def is_admin_role_set(roles: list[AppRole] | set[AppRole]) -> bool:
    """A role set is administrative if it holds committee or chairman."""
    return any(role in ADMIN_ROLES for role in roles)


def primary_role(roles: list[AppRole] | set[AppRole]) -> AppRole:
    """Highest role held; staff when the set is empty."""
    if not roles:
        return AppRole.STAFF
    return max(roles, key=lambda role: ROLE_PRECEDENCE[role])


class Profile(BaseEntity):
    """Personal details attached one-to-one to an auth identity."""

    user_id: UUID = Field(description="Auth identity this profile belongs to")
    full_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=20)
    department: str | None = Field(default=None, max_length=100)
    position: str | None = Field(default=None, max_length=100)
    avatar_url: str | None = None
    preferred_language: Language = Language.MS


class UserRole(BaseEntity):
    """A single (user, role) assignment. A user may hold several."""

    user_id: UUID
    role: AppRole = AppRole.STAFF
