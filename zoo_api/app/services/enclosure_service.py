"""
Business logic for enclosures.

Enclosures are created empty; animals are admitted through
``AnimalService`` and moved through ``AnimalTransferService``.  An
enclosure that still houses animals cannot be deleted.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from zoo_api.app.core.store import ZooStore
from zoo_api.app.models import Enclosure, EnclosureType, NotFoundError, new_id
from zoo_api.app.schemas.enclosure import EnclosureCreate
from zoo_api.app.services.event_log_service import EventLogService


class EnclosureService:
    """Service for managing enclosures."""

    def __init__(self, store: ZooStore) -> None:
        self.store = store
        self.events = EventLogService(store)

    async def create_enclosure(self, data: EnclosureCreate) -> Enclosure:
        logger = logging.getLogger(__name__)
        enclosure = Enclosure(new_id(), data.type, data.area_m2, data.capacity)
        self.store.enclosures.add(enclosure)
        self.store.enclosures.save()
        logger.info("Created enclosure %s (%s, capacity %s)", enclosure.id, enclosure.type.value, enclosure.capacity)
        return enclosure

    async def list_enclosures(
        self,
        enclosure_type: Optional[EnclosureType] = None,
        available_only: bool = False,
    ) -> List[Enclosure]:
        """List enclosures, optionally only those of one type or with free places."""
        if available_only:
            return self.store.enclosures.find_available(enclosure_type)
        return [
            enclosure
            for enclosure in self.store.enclosures.list()
            if enclosure_type is None or enclosure.type == enclosure_type
        ]

    async def get_enclosure(self, enclosure_id: uuid.UUID) -> Enclosure:
        enclosure = self.store.enclosures.get(enclosure_id)
        if enclosure is None:
            raise NotFoundError("Enclosure", enclosure_id)
        return enclosure

    async def delete_enclosure(self, enclosure_id: uuid.UUID) -> None:
        """Delete an empty enclosure.

        Raises ``ValueError`` if animals still live there; they must be
        transferred out first.
        """
        logger = logging.getLogger(__name__)
        enclosure = await self.get_enclosure(enclosure_id)
        with enclosure.lock:
            if enclosure.animals:
                raise ValueError(f"Enclosure {enclosure_id} still houses {len(enclosure.animals)} animal(s)")
            self.store.enclosures.delete(enclosure_id)
        self.store.enclosures.save()
        logger.info("Deleted enclosure %s", enclosure_id)

    async def clean_enclosure(self, enclosure_id: uuid.UUID) -> Enclosure:
        enclosure = await self.get_enclosure(enclosure_id)
        enclosure.clean()
        self.events.publish("enclosure_cleaned", {"enclosure_id": str(enclosure_id)})
        return enclosure
