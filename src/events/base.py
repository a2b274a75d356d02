"""Base Event class for all domain events."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from src.models.audit import AuditAction, AuditLogEntry


class Event(BaseModel):
    """Base class for all domain events.

    Events are immutable records of things that happened.

    Attributes:
        event_id: Unique identifier for this event instance
        timestamp: When the event occurred
        actor_id: User who caused the event (None for system actions)
        metadata: Additional context about the event
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier",
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the event occurred",
    )
    actor_id: UUID | None = Field(
        default=None,
        description="User who caused the event",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event context",
    )

    @property
    def event_type(self) -> str:
        """Return the event type name (class name)."""
        return self.__class__.__name__


class AuditEvent(Event):
    """An event that leaves a row in the audit trail.

    Subclasses fix ``action``; the audit store turns every published
    ``AuditEvent`` into an ``AuditLogEntry``.
    """

    action: AuditAction
    entity_type: str = Field(description="Table name of the affected entity")
    entity_id: str | None = Field(default=None, description="Affected row id")
    old_values: dict[str, Any] | None = None
    new_values: dict[str, Any] | None = None
    ip_address: str | None = None
    user_agent: str | None = None

    def to_audit_entry(self) -> AuditLogEntry:
        """Convert to the audit log row written by the store."""
        return AuditLogEntry(
            id=self.event_id,
            user_id=self.actor_id,
            action=self.action,
            entity_type=self.entity_type,
            entity_id=self.entity_id,
            old_values=self.old_values,
            new_values=self.new_values,
            ip_address=self.ip_address,
            user_agent=self.user_agent,
            created_at=self.timestamp,
        )
