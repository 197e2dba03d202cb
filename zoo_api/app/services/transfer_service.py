"""
Animal transfer between enclosures.

This is the only place where an animal's ``enclosure_id`` and the
enclosures' resident sets change together.  The animal's lock is taken
first, so its current enclosure cannot change while the transfer runs.
Then both enclosures' locks are taken in a fixed order (by identifier),
so two transfers touching the same pair of enclosures cannot deadlock
and no other caller observes the animal in both or neither enclosure.
Every check (animal still registered, target still registered, target
not full) happens while all three locks are held.
"""

from __future__ import annotations

import logging
import uuid
from contextlib import ExitStack
from typing import List, Optional

from zoo_api.app.core.store import ZooStore
from zoo_api.app.models import Animal, CapacityExceeded, Enclosure, NotFoundError
from zoo_api.app.services.event_log_service import EventLogService


class AnimalTransferService:
    """Moves animals between enclosures while keeping both sides in sync."""

    def __init__(self, store: ZooStore) -> None:
        self.store = store
        self.events = EventLogService(store)

    async def transfer(self, animal_id: uuid.UUID, target_enclosure_id: uuid.UUID) -> Animal:
        """Move an animal into ``target_enclosure_id``.

        Raises
        ------
        NotFoundError
            If the animal or the target enclosure does not exist, also when
            either is deleted while the transfer waits for its locks.
        CapacityExceeded
            If the target enclosure is full.  Neither enclosure nor the
            animal is modified in that case.
        """
        logger = logging.getLogger(__name__)
        animal = self.store.animals.get(animal_id)
        if animal is None:
            raise NotFoundError("Animal", animal_id)
        target = self.store.enclosures.get(target_enclosure_id)
        if target is None:
            raise NotFoundError("Enclosure", target_enclosure_id)

        with animal.lock:
            if self.store.animals.get(animal_id) is not animal:
                raise NotFoundError("Animal", animal_id)
            source_id = animal.enclosure_id
            if source_id == target.id:
                return animal
            source = self.store.enclosures.get(source_id) if source_id is not None else None

            with ExitStack() as stack:
                for enclosure in self._lock_order(source, target):
                    stack.enter_context(enclosure.lock)
                if self.store.enclosures.get(target.id) is not target:
                    raise NotFoundError("Enclosure", target_enclosure_id)
                if not target.can_add():
                    logger.warning(
                        "Transfer of %s into %s rejected: enclosure is full", animal_id, target.id
                    )
                    raise CapacityExceeded(target.id, target.capacity)
                if source is not None:
                    source.remove_animal(animal)
                target.add_animal(animal)
                animal.move_to(target.id)

        self.store.save()
        logger.info("Moved animal %s from %s to %s", animal_id, source_id, target.id)
        self.events.publish(
            "animal_moved",
            {
                "animal_id": str(animal_id),
                "from_enclosure_id": str(source_id) if source_id is not None else None,
                "to_enclosure_id": str(target.id),
            },
        )
        return animal

    @staticmethod
    def _lock_order(*enclosures: Optional[Enclosure]) -> List[Enclosure]:
        present = {e.id: e for e in enclosures if e is not None}
        return sorted(present.values(), key=lambda e: str(e.id))
