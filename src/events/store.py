"""Append-only audit trail backed by the ``audit_logs`` table.

The audit store persists every ``AuditEvent`` for:
- Accountability (who changed what, and when)
- The admin panel's audit log view
- Debugging

Rows are never updated or deleted.
"""

import json
import logging
from typing import Any

from src.db.turso import TursoClient
from src.events.base import AuditEvent, Event
from src.models.audit import AuditLogEntry

logger = logging.getLogger(__name__)


def _dump(values: dict[str, Any] | None) -> str | None:
    if values is None:
        return None
    return json.dumps(values, default=str)


def _load(raw: str | None) -> dict[str, Any] | None:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        logger.warning("Unreadable audit values, returning None")
        return None


class AuditLogStore:
    """Append-only audit store using Turso/libSQL.

    Features:
    - Append-only (never update/delete)
    - Newest-first retrieval with a row cap
    """

    def __init__(self, client: TursoClient):
        """Initialize audit store.

        Args:
            client: Database client for persistence
        """
        self.client = client

    async def append(self, event: Event) -> None:
        """Append an event to the audit trail.

        Events that are not ``AuditEvent`` instances carry nothing to
        audit and are skipped.
        """
        if not isinstance(event, AuditEvent):
            logger.debug(f"Skipping non-audit event {event.event_type}")
            return

        entry = event.to_audit_entry()
        await self.client.execute(
            """INSERT INTO audit_logs
               (id, user_id, action, entity_type, entity_id,
                old_values, new_values, ip_address, user_agent, created_at)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            [
                str(entry.id),
                str(entry.user_id) if entry.user_id else None,
                entry.action.value,
                entry.entity_type,
                entry.entity_id,
                _dump(entry.old_values),
                _dump(entry.new_values),
                entry.ip_address,
                entry.user_agent,
                entry.created_at.isoformat(),
            ],
        )
        logger.debug(
            f"Audited {entry.action.value} on {entry.entity_type} ({entry.entity_id})"
        )

    def _to_entry(self, row: dict[str, Any]) -> AuditLogEntry:
        return AuditLogEntry.model_validate(
            {
                **row,
                "old_values": _load(row.get("old_values")),
                "new_values": _load(row.get("new_values")),
            }
        )

    async def list_recent(self, limit: int = 100) -> list[AuditLogEntry]:
        """Newest audit rows first, capped at ``limit``."""
        rows = await self.client.fetch_all(
            """SELECT * FROM audit_logs
               ORDER BY created_at DESC
               LIMIT ?""",
            [limit],
        )
        return [self._to_entry(row) for row in rows]
