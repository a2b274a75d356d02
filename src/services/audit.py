"""Audit helpers shared by the services."""

from typing import Any

from pydantic import BaseModel

from src.auth.context import SessionContext
from src.events.base import AuditEvent
from src.events.bus import EventBus
from src.events.types import EntityCreated, EntityDeleted, EntityUpdated


def snapshot(entity: BaseModel | None) -> dict[str, Any] | None:
    """JSON-safe copy of a row for the audit trail."""
    if entity is None:
        return None
    return entity.model_dump(mode="json")


class Auditor:
    """Publishes create/update/delete events stamped with the caller."""

    def __init__(self, event_bus: EventBus, entity_type: str):
        self._bus = event_bus
        self.entity_type = entity_type

    async def _publish(
        self,
        event_cls: type[AuditEvent],
        ctx: SessionContext,
        entity_id: Any,
        old: BaseModel | None = None,
        new: BaseModel | None = None,
    ) -> None:
        await self._bus.publish_and_store(
            event_cls(
                entity_type=self.entity_type,
                entity_id=str(entity_id),
                old_values=snapshot(old),
                new_values=snapshot(new),
                **ctx.audit_fields(),
            )
        )

    async def created(self, ctx: SessionContext, entity: BaseModel) -> None:
        """Record an insert."""
        await self._publish(EntityCreated, ctx, entity.id, new=entity)

    async def updated(
        self,
        ctx: SessionContext,
        before: BaseModel,
        after: BaseModel,
    ) -> None:
        """Record an update with before/after values."""
        await self._publish(EntityUpdated, ctx, after.id, old=before, new=after)

    async def deleted(self, ctx: SessionContext, entity: BaseModel) -> None:
        """Record a delete."""
        await self._publish(EntityDeleted, ctx, entity.id, old=entity)
