"""Admin panel endpoints: users, roles and the audit log.

Every route here requires the committee or chairman role.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from src.api.views import AuditEntryView, ListResponse, MutationResult, UserRowView
from src.auth.context import SessionContext
from src.auth.dependencies import require_admin
from src.i18n.localize import translate
from src.listing.schemas import RoleStats
from src.services.admin_service import AdminService
from src.services.schemas import RoleChangeInput

router = APIRouter(prefix="/admin", tags=["admin"])


class UsersResponse(ListResponse[UserRowView]):
    """User list with totals per role."""

    stats: RoleStats


class AuditLogResponse(ListResponse[AuditEntryView]):
    """Audit rows with the entity types available to filter on."""

    entity_types: list[str]


def get_admin_service(request: Request) -> AdminService:
    """Dependency to get AdminService from app state."""
    return request.app.state.admin_service


@router.get("/users", response_model=UsersResponse)
async def list_users(
    search: str | None = Query(default=None),
    role: str | None = Query(default=None),
    ctx: SessionContext = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> UsersResponse:
    """Users with their primary role. The caller's own row cannot be changed."""
    listing = await service.list_users(ctx, search, role)
    items = [UserRowView.build(u, ctx.language) for u in listing.users]
    page = ListResponse[UserRowView].of(items, ctx.language)
    return UsersResponse(**page.model_dump(), stats=listing.stats)


@router.put("/users/{user_id}/role", response_model=MutationResult[UserRowView])
async def change_role(
    user_id: UUID,
    body: RoleChangeInput,
    ctx: SessionContext = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> MutationResult[UserRowView]:
    """Change another user's role. Requires ``confirm: true``."""
    await service.change_role(ctx, user_id, body.role, body.confirm)
    row = await service.get_user(ctx, user_id)
    return MutationResult[UserRowView](
        message=translate("admin.roleUpdated", ctx.language),
        data=UserRowView.build(row, ctx.language),
    )


@router.get("/audit-logs", response_model=AuditLogResponse)
async def list_audit_logs(
    search: str | None = Query(default=None),
    entity_type: str | None = Query(default=None),
    ctx: SessionContext = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> AuditLogResponse:
    """Newest audit rows (up to 100)."""
    listing = await service.list_audit_log(search, entity_type)
    items = [AuditEntryView.build(e, ctx.language) for e in listing.entries]
    page = ListResponse[AuditEntryView].of(items, ctx.language)
    return AuditLogResponse(**page.model_dump(), entity_types=listing.entity_types)
