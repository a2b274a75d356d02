"""Async event bus that records domain events in the audit trail.

Services publish events here instead of writing audit rows themselves,
so the audit store is the single place that knows the row format.
"""

import logging

from src.events.base import Event
from src.events.store import AuditLogStore

logger = logging.getLogger(__name__)


class EventBus:
    """In-process event publisher backed by the audit trail."""

    def __init__(self, store: AuditLogStore | None = None):
        """Initialize event bus.

        Args:
            store: Optional AuditLogStore for persistence
        """
        self._store = store

    async def publish(self, event: Event, persist: bool = False) -> None:
        """Publish an event.

        Args:
            event: The event to publish
            persist: Whether to write the event to the audit trail
        """
        logger.debug(f"Publishing {event.event_type}")
        if persist and self._store:
            try:
                await self._store.append(event)
            except Exception as e:
                logger.error(f"Failed to persist event: {e}")
                raise

    async def publish_and_store(self, event: Event) -> None:
        """Publish event and persist to the audit trail."""
        await self.publish(event, persist=True)
