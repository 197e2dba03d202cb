"""
In-memory storage and demo data seed.

This module provides the repositories used by the services, a
``ZooStore`` bundling them, ``seed_demo_data`` which fills a fresh
store on application start, and the ``get_store`` dependency for
FastAPI routes.  Everything lives in process memory; to switch to a
durable backend you would implement the same ``get``/``add``/``list``/
``delete``/``save`` operations against a database without touching the
entities.

There is no global store.  ``create_app`` builds one and attaches it to
``app.state``; ``get_store`` reads it back from the request.
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections import deque
from datetime import date, datetime, time, timedelta
from typing import Deque, Dict, Generic, List, Optional, TypeVar

from fastapi import Request

from zoo_api.app.models import (
    Animal,
    DomainEvent,
    Enclosure,
    EnclosureType,
    FeedingSchedule,
    Gender,
    new_id,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Dictionary-backed repository keyed by ``entity.id``.

    Iteration order follows insertion order so listings are stable.
    """

    entity_name = "entity"

    def __init__(self) -> None:
        self._items: Dict[uuid.UUID, T] = {}
        self._lock = threading.Lock()

    def get(self, entity_id: uuid.UUID) -> Optional[T]:
        with self._lock:
            return self._items.get(entity_id)

    def add(self, entity: T) -> None:
        with self._lock:
            if entity.id in self._items:
                raise ValueError(f"{self.entity_name.capitalize()} {entity.id} already exists")
            self._items[entity.id] = entity
        logger.debug("Added %s %s", self.entity_name, entity.id)

    def list(self) -> List[T]:
        with self._lock:
            return list(self._items.values())

    def delete(self, entity_id: uuid.UUID) -> bool:
        with self._lock:
            removed = self._items.pop(entity_id, None)
        return removed is not None

    def save(self) -> None:
        """Commit pending changes.  Entities are stored by reference, so
        there is nothing to flush for the in-memory backend."""
        logger.debug("Saved %s repository (%d items)", self.entity_name, len(self))

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class AnimalRepository(InMemoryRepository[Animal]):
    entity_name = "animal"


class EnclosureRepository(InMemoryRepository[Enclosure]):
    entity_name = "enclosure"

    def find_available(self, enclosure_type: Optional[EnclosureType] = None) -> List[Enclosure]:
        """Return enclosures with at least one free place, optionally of one type."""
        return [
            enclosure
            for enclosure in self.list()
            if enclosure.can_add() and (enclosure_type is None or enclosure.type == enclosure_type)
        ]


class FeedingScheduleRepository(InMemoryRepository[FeedingSchedule]):
    entity_name = "feeding schedule"

    def for_animal(self, animal_id: uuid.UUID) -> List[FeedingSchedule]:
        return [feeding for feeding in self.list() if feeding.animal_id == animal_id]


class EventLog:
    """Append-only log of published domain events.

    Holds at most ``max_events`` entries; once full, the oldest event is
    dropped for every new one.
    """

    def __init__(self, max_events: int = 10000) -> None:
        if max_events <= 0:
            raise ValueError("max_events must be positive")
        self.max_events = max_events
        self._events: Deque[DomainEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: DomainEvent) -> None:
        with self._lock:
            self._events.append(event)

    def list(self) -> List[DomainEvent]:
        with self._lock:
            return list(self._events)

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)


class ZooStore:
    """Bundle of repositories shared by the services of one application."""

    def __init__(self, max_events: int = 10000) -> None:
        self.animals = AnimalRepository()
        self.enclosures = EnclosureRepository()
        self.feedings = FeedingScheduleRepository()
        self.events = EventLog(max_events)

    def save(self) -> None:
        self.animals.save()
        self.enclosures.save()
        self.feedings.save()


def seed_demo_data(store: ZooStore) -> None:
    """Populate ``store`` with a carnivore enclosure holding one lion.

    The seed is skipped if the store already holds enclosures so that
    repeated startups do not duplicate data.
    """
    if len(store.enclosures):
        logger.debug("Store already populated; skipping demo seed")
        return

    enclosure = Enclosure(new_id(), EnclosureType.CARNIVORE, 100, 2)
    store.enclosures.add(enclosure)

    lion = Animal(
        id=new_id(),
        species="Lion",
        name="Simba",
        birth_date=date(2021, 6, 1),
        gender=Gender.MALE,
        favorite_food="Meat",
        enclosure_id=enclosure.id,
    )
    enclosure.add_animal(lion)
    store.animals.add(lion)

    tomorrow = date.today() + timedelta(days=1)
    store.feedings.add(
        FeedingSchedule(
            id=new_id(),
            animal_id=lion.id,
            feeding_time=datetime.combine(tomorrow, time(9, 0)),
            food_type="Meat",
        )
    )
    store.save()
    logger.info("Seeded demo data: enclosure %s with %s", enclosure.id, lion.name)


def get_store(request: Request) -> ZooStore:
    """FastAPI dependency returning the store attached to the application."""
    return request.app.state.store
