"""Administration: user/role management and the audit log view."""

from dataclasses import dataclass
from uuid import UUID

import structlog

from src.auth.context import SessionContext
from src.config import settings
from src.errors import PermissionDeniedError, ValidationFailedError
from src.events.bus import EventBus
from src.events.store import AuditLogStore
from src.listing.schemas import RoleStats, UserRow
from src.listing.views import entity_types, filter_audit_log, filter_users, role_stats
from src.models.audit import AuditLogEntry
from src.models.profile import (
    ROLE_PRECEDENCE,
    AppRole,
    Profile,
    UserRole,
    primary_role,
)
from src.repositories.profile_repo import ProfileRepository, RoleRepository
from src.services.audit import Auditor

logger = structlog.get_logger()

AUDIT_LOG_LIMIT = 100


def _user_row(
    ctx: SessionContext,
    profile: Profile,
    assigned: list[UserRole],
) -> UserRow:
    role = primary_role({r.role for r in assigned})
    return UserRow(
        user_id=profile.user_id,
        profile_id=profile.id,
        full_name=profile.full_name,
        email=profile.email,
        department=profile.department,
        position=profile.position,
        role=role,
        role_id=next((r.id for r in assigned if r.role == role), None),
        can_change_role=profile.user_id != ctx.user_id,
    )


@dataclass
class UserListing:
    """Filtered user rows and role totals over all users."""

    users: list[UserRow]
    stats: RoleStats


@dataclass
class AuditListing:
    """Filtered audit rows and the entity types available to filter on."""

    entries: list[AuditLogEntry]
    entity_types: list[str]


class AdminService:
    """Operations behind the admin panel. Callers must be administrators."""

    def __init__(
        self,
        profiles: ProfileRepository,
        roles: RoleRepository,
        audit_store: AuditLogStore,
        event_bus: EventBus,
        list_cap: int | None = None,
    ):
        self._profiles = profiles
        self._roles = roles
        self._audit_store = audit_store
        self._audit = Auditor(event_bus, "user_roles")
        self.list_cap = list_cap or settings.list_cap

    async def _user_rows(self, ctx: SessionContext) -> list[UserRow]:
        profiles = await self._profiles.select(
            order_by="created_at",
            descending=True,
            limit=self.list_cap,
        )
        roles_by_user: dict[UUID, list[UserRole]] = {}
        for role_row in await self._roles.select():
            roles_by_user.setdefault(role_row.user_id, []).append(role_row)

        return [
            _user_row(ctx, profile, roles_by_user.get(profile.user_id, []))
            for profile in profiles
        ]

    async def list_users(
        self,
        ctx: SessionContext,
        search: str | None = None,
        role: str | None = None,
    ) -> UserListing:
        """Profiles joined with their primary role, narrowed by search and role."""
        rows = await self._user_rows(ctx)
        return UserListing(
            users=filter_users(rows, search, role),
            stats=role_stats(rows),
        )

    async def change_role(
        self,
        ctx: SessionContext,
        user_id: UUID,
        role: AppRole,
        confirm: bool,
    ) -> UserRole:
        """Replace a user's primary role.

        Raises:
            ValidationFailedError: The change was not confirmed
            PermissionDeniedError: Callers may not change their own role
            NotFoundError: No such user
        """
        if not confirm:
            raise ValidationFailedError(
                "Role change must be confirmed",
                message_key="admin.confirmRequired",
            )
        if user_id == ctx.user_id:
            raise PermissionDeniedError(
                "Cannot change own role",
                message_key="admin.ownRole",
            )

        assigned = await self._roles.roles_for_user(user_id)
        if not assigned:
            await self._profiles.require_by_user_id(user_id)
            new_row = UserRole(user_id=user_id, role=role)
            await self._roles.insert(new_row)
            await self._audit.created(ctx, new_row)
            logger.info("role_assigned", user_id=str(user_id), role=role.value)
            return new_row

        current = primary_role({r.role for r in assigned})
        current_row = next(r for r in assigned if r.role == current)
        existing = next((r for r in assigned if r.role == role), None)

        if existing is not None:
            # Role already held: drop every higher row so it becomes primary
            for row in assigned:
                if ROLE_PRECEDENCE[row.role] > ROLE_PRECEDENCE[role]:
                    await self._roles.delete(row.id)
                    await self._audit.deleted(ctx, row)
            result = existing
        else:
            result = await self._roles.update(current_row.id, {"role": role})
            await self._audit.updated(ctx, current_row, result)

        logger.info(
            "role_changed",
            user_id=str(user_id),
            old_role=current.value,
            new_role=role.value,
            changed_by=str(ctx.user_id),
        )
        return result

    async def get_user(self, ctx: SessionContext, user_id: UUID) -> UserRow:
        """A single row of the user list."""
        profile = await self._profiles.require_by_user_id(user_id)
        return _user_row(ctx, profile, await self._roles.roles_for_user(user_id))

    async def list_audit_log(
        self,
        search: str | None = None,
        entity_type: str | None = None,
    ) -> AuditListing:
        """Newest audit rows, narrowed by search and entity type."""
        entries = await self._audit_store.list_recent(AUDIT_LOG_LIMIT)
        return AuditListing(
            entries=filter_audit_log(entries, search, entity_type),
            entity_types=entity_types(entries),
        )
