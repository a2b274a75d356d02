"""Repositories for profiles and role assignments."""

from uuid import UUID

from src.errors import NotFoundError
from src.models.profile import AppRole, Profile, UserRole
from src.repositories.base import TableRepository


class ProfileRepository(TableRepository[Profile]):
    """Profiles, one per auth identity."""

    table = "profiles"
    model = Profile
    columns = (
        "id",
        "user_id",
        "full_name",
        "email",
        "phone",
        "department",
        "position",
        "avatar_url",
        "preferred_language",
        "created_at",
        "updated_at",
    )

    async def get_by_user_id(self, user_id: UUID | str) -> Profile | None:
        """Fetch the profile of an auth identity."""
        rows = await self.select({"user_id": user_id}, limit=1)
        return rows[0] if rows else None

    async def require_by_user_id(self, user_id: UUID | str) -> Profile:
        """Fetch the profile of an auth identity or raise NotFoundError."""
        profile = await self.get_by_user_id(user_id)
        if profile is None:
            msg = f"Profile for user {user_id} not found"
            raise NotFoundError(msg)
        return profile


class RoleRepository(TableRepository[UserRole]):
    """Role assignments. The table has no ``updated_at`` column."""

    table = "user_roles"
    model = UserRole
    columns = ("id", "user_id", "role", "created_at")

    async def roles_for_user(self, user_id: UUID | str) -> list[UserRole]:
        """All role rows of one user, oldest first."""
        return await self.select({"user_id": user_id}, order_by="created_at")

    async def role_set(self, user_id: UUID | str) -> set[AppRole]:
        """The set of roles a user holds."""
        return {row.role for row in await self.roles_for_user(user_id)}
