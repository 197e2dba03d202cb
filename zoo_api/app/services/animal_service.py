"""
Business logic for animals.

An animal created with an ``enclosure_id`` is admitted into that
enclosure in the same call: the enclosure's capacity is checked and its
resident set updated while its lock is held, and the animal is only
stored once admission succeeded.  If the enclosure is full the
``CapacityExceeded`` error propagates to the caller and nothing is
stored.

Deleting an animal removes it from its enclosure and drops its feeding
schedules, so no dangling identifiers remain in the store.  Deletion
holds the animal lock before the enclosure lock, the same order the
transfer service uses, and reads ``enclosure_id`` only under it.
Admission re-checks under the enclosure lock that the enclosure has not
been deleted meanwhile.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from zoo_api.app.core.store import ZooStore
from zoo_api.app.models import Animal, AnimalStatus, CapacityExceeded, NotFoundError, new_id
from zoo_api.app.schemas.animal import AnimalCreate
from zoo_api.app.services.event_log_service import EventLogService


class AnimalService:
    """Service for managing animals and their health and feeding state."""

    def __init__(self, store: ZooStore) -> None:
        self.store = store
        self.events = EventLogService(store)

    async def create_animal(self, data: AnimalCreate) -> Animal:
        logger = logging.getLogger(__name__)
        animal = Animal(
            id=new_id(),
            species=data.species,
            name=data.name,
            birth_date=data.birth_date,
            gender=data.gender,
            favorite_food=data.favorite_food,
            status=data.status,
        )
        if data.enclosure_id is None:
            self.store.animals.add(animal)
            self.store.animals.save()
            logger.info("Created animal %s (%s) without enclosure", animal.id, animal.name)
            return animal

        enclosure = self.store.enclosures.get(data.enclosure_id)
        if enclosure is None:
            raise NotFoundError("Enclosure", data.enclosure_id)
        with enclosure.lock:
            if self.store.enclosures.get(enclosure.id) is not enclosure:
                raise NotFoundError("Enclosure", data.enclosure_id)
            try:
                enclosure.add_animal(animal)
            except CapacityExceeded:
                logger.warning("Cannot admit %s: enclosure %s is full", animal.name, enclosure.id)
                raise
            animal.move_to(enclosure.id)
            self.store.animals.add(animal)
        self.store.animals.save()
        self.store.enclosures.save()
        logger.info("Created animal %s (%s) in enclosure %s", animal.id, animal.name, enclosure.id)
        self.events.publish(
            "animal_admitted",
            {"animal_id": str(animal.id), "enclosure_id": str(enclosure.id)},
        )
        return animal

    async def list_animals(
        self,
        species: Optional[str] = None,
        status: Optional[AnimalStatus] = None,
    ) -> List[Animal]:
        """List animals, optionally filtered by species (case-insensitive) and status."""
        animals = self.store.animals.list()
        if species:
            animals = [a for a in animals if a.species.lower() == species.lower()]
        if status is not None:
            animals = [a for a in animals if a.status == status]
        return animals

    async def get_animal(self, animal_id: uuid.UUID) -> Animal:
        animal = self.store.animals.get(animal_id)
        if animal is None:
            raise NotFoundError("Animal", animal_id)
        return animal

    async def delete_animal(self, animal_id: uuid.UUID) -> None:
        logger = logging.getLogger(__name__)
        animal = await self.get_animal(animal_id)
        with animal.lock:
            if self.store.animals.get(animal_id) is not animal:
                raise NotFoundError("Animal", animal_id)
            enclosure = (
                self.store.enclosures.get(animal.enclosure_id) if animal.enclosure_id is not None else None
            )
            if enclosure is not None:
                with enclosure.lock:
                    enclosure.remove_animal(animal)
            animal.move_to(None)
            self.store.animals.delete(animal_id)
        for feeding in self.store.feedings.for_animal(animal_id):
            self.store.feedings.delete(feeding.id)
        self.store.save()
        logger.info("Deleted animal %s", animal_id)

    async def feed_animal(self, animal_id: uuid.UUID) -> Animal:
        animal = await self.get_animal(animal_id)
        animal.feed()
        logging.getLogger(__name__).info("Fed animal %s (%s times)", animal_id, animal.fed_count)
        return animal

    async def heal_animal(self, animal_id: uuid.UUID) -> Animal:
        animal = await self.get_animal(animal_id)
        animal.heal()
        self.events.publish("animal_healed", {"animal_id": str(animal_id)})
        return animal

    async def mark_sick(self, animal_id: uuid.UUID) -> Animal:
        animal = await self.get_animal(animal_id)
        animal.mark_sick()
        self.events.publish("animal_sick", {"animal_id": str(animal_id)})
        return animal
