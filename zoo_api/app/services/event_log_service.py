"""
Domain event log.

Services publish notable actions (an animal admitted or moved, a
feeding completed) through ``EventLogService.publish``.  Events are
appended to the store's ``EventLog`` and written to the application log
so they can be followed without querying the API.  Administrators can
read them back with filters and pagination via ``list_events``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from zoo_api.app.core.store import ZooStore
from zoo_api.app.models import DomainEvent


class EventLogService:
    """Service for publishing and querying domain events."""

    def __init__(self, store: ZooStore) -> None:
        self.store = store

    def publish(self, name: str, payload: Optional[Dict[str, Any]] = None) -> DomainEvent:
        """Record a new domain event.

        Parameters
        ----------
        name : str
            Short event name, e.g. ``"animal_moved"``.
        payload : Optional[dict]
            Structured data describing the event.  Identifiers should be
            passed as strings so the payload stays JSON friendly.
        """
        logger = logging.getLogger(__name__)
        event = DomainEvent(name=name, payload=payload or {})
        self.store.events.append(event)
        logger.info("Event %s: %s", name, event.payload)
        return event

    async def list_events(
        self,
        name: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[DomainEvent]:
        """Return published events, newest first, optionally filtered by name."""
        events = self.store.events.list()
        if name:
            events = [event for event in events if event.name == name]
        events.reverse()
        return events[offset:offset + limit]
