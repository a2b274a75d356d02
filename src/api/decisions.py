"""Decisions API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from src.api.views import DecisionView, ListResponse, MutationResult
from src.auth.context import SessionContext
from src.auth.dependencies import get_session_context, require_admin
from src.i18n.localize import translate
from src.services.decision_service import DecisionService
from src.services.schemas import DecisionInput

router = APIRouter(prefix="/decisions", tags=["decisions"])


def get_decision_service(request: Request) -> DecisionService:
    """Dependency to get DecisionService from app state."""
    return request.app.state.decision_service


@router.get("", response_model=ListResponse[DecisionView])
async def list_decisions(
    search: str | None = Query(default=None),
    status_filter: str | None = Query(
        default=None,
        alias="status",
        description="pending, in_progress, completed, overdue or all",
    ),
    meeting_id: UUID | None = Query(default=None),
    ctx: SessionContext = Depends(get_session_context),
    service: DecisionService = Depends(get_decision_service),
) -> ListResponse[DecisionView]:
    """List decisions; the status filter applies to the displayed status."""
    decisions = await service.list_decisions(search, status_filter, meeting_id)
    return ListResponse[DecisionView].of(
        [DecisionView.build(d, ctx.language) for d in decisions], ctx.language
    )


@router.get("/{decision_id}", response_model=DecisionView)
async def get_decision(
    decision_id: UUID,
    ctx: SessionContext = Depends(get_session_context),
    service: DecisionService = Depends(get_decision_service),
) -> DecisionView:
    """A single decision."""
    return DecisionView.build(await service.get_decision(decision_id), ctx.language)


@router.post(
    "",
    response_model=MutationResult[DecisionView],
    status_code=status.HTTP_201_CREATED,
)
async def create_decision(
    body: DecisionInput,
    ctx: SessionContext = Depends(require_admin),
    service: DecisionService = Depends(get_decision_service),
) -> MutationResult[DecisionView]:
    """Record a decision (committee/chairman)."""
    decision = await service.create_decision(ctx, body)
    return MutationResult[DecisionView](
        message=translate("decisions.createSuccess", ctx.language),
        data=DecisionView.build(decision, ctx.language),
    )


@router.put("/{decision_id}", response_model=MutationResult[DecisionView])
async def update_decision(
    decision_id: UUID,
    body: DecisionInput,
    ctx: SessionContext = Depends(require_admin),
    service: DecisionService = Depends(get_decision_service),
) -> MutationResult[DecisionView]:
    """Edit a decision, including its status (committee/chairman)."""
    decision = await service.update_decision(ctx, decision_id, body)
    return MutationResult[DecisionView](
        message=translate("decisions.updateSuccess", ctx.language),
        data=DecisionView.build(decision, ctx.language),
    )


@router.delete("/{decision_id}", response_model=MutationResult[None])
async def delete_decision(
    decision_id: UUID,
    ctx: SessionContext = Depends(require_admin),
    service: DecisionService = Depends(get_decision_service),
) -> MutationResult[None]:
    """Delete a decision (committee/chairman)."""
    await service.delete_decision(ctx, decision_id)
    return MutationResult[None](
        message=translate("decisions.deleteSuccess", ctx.language)
    )
