"""Event infrastructure for the MBJ Digital Portal.

Provides:
- Event / AuditEvent: Base classes for domain events
- EventBus: In-process publisher that feeds the audit trail
- AuditLogStore: Append-only audit trail persistence
"""

from src.events.base import AuditEvent, Event
from src.events.bus import EventBus
from src.events.store import AuditLogStore
from src.events.types import (
    EntityCreated,
    EntityDeleted,
    EntityUpdated,
    UserSignedIn,
    UserSignedOut,
)

__all__ = [
    # Base
    "Event",
    "AuditEvent",
    # Infrastructure
    "EventBus",
    "AuditLogStore",
    # Event types
    "EntityCreated",
    "EntityUpdated",
    "EntityDeleted",
    "UserSignedIn",
    "UserSignedOut",
]
