"""Per-request session context."""

from dataclasses import dataclass, field
from uuid import UUID

from src.models.base import Language
from src.models.profile import AppRole, Profile, is_admin_role_set, primary_role


@dataclass
class SessionContext:
    """Who is calling, with which roles and in which language.

    Built once per request by ``AuthService.load_context`` and passed
    explicitly to services. Nothing about the signed-in user is kept in
    module or application state.
    """

    user_id: UUID
    email: str
    session_id: UUID
    profile: Profile | None = None
    roles: set[AppRole] = field(default_factory=set)
    language: Language = Language.MS
    ip_address: str | None = None
    user_agent: str | None = None

    @property
    def is_admin(self) -> bool:
        """Committee members and the chairman are administrators."""
        return is_admin_role_set(self.roles)

    @property
    def primary_role(self) -> AppRole:
        """Highest role held."""
        return primary_role(self.roles)

    @property
    def display_name(self) -> str:
        """Profile name, or the e-mail when no profile exists."""
        if self.profile and self.profile.full_name:
            return self.profile.full_name
        return self.email

    def audit_fields(self) -> dict:
        """Actor and client details stamped on audit events."""
        return {
            "actor_id": self.user_id,
            "ip_address": self.ip_address,
            "user_agent": self.user_agent,
        }
