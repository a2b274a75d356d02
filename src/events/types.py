"""Typed event definitions for domain events.

These events represent things that happen in the portal:
- EntityCreated / EntityUpdated / EntityDeleted: Row mutations
- UserSignedIn / UserSignedOut: Session changes
"""

from src.events.base import AuditEvent
from src.models.audit import AuditAction


class EntityCreated(AuditEvent):
    """Emitted after a row is inserted."""

    action: AuditAction = AuditAction.CREATE


class EntityUpdated(AuditEvent):
    """Emitted after a row is updated."""

    action: AuditAction = AuditAction.UPDATE


class EntityDeleted(AuditEvent):
    """Emitted after a row is permanently deleted."""

    action: AuditAction = AuditAction.DELETE


class UserSignedIn(AuditEvent):
    """Emitted when a session is opened."""

    action: AuditAction = AuditAction.LOGIN
    entity_type: str = "sessions"


class UserSignedOut(AuditEvent):
    """Emitted when a session is torn down."""

    action: AuditAction = AuditAction.LOGOUT
    entity_type: str = "sessions"
