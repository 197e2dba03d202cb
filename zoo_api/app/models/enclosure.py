"""
Enclosure entity.

An enclosure is one physical containment unit.  It stores the
identifiers of its resident animals (not the animals themselves) and
guards the capacity invariant::

    len(enclosure.animals) <= enclosure.capacity

The check and the mutation in ``add_animal`` run under a per-instance
lock, so concurrent callers cannot both observe a free place and
jointly overfill the enclosure.  The lock is re-entrant and exposed via
``lock`` so that a coordinating service (see ``AnimalTransferService``)
can hold it across several calls.

The enclosure never updates an animal's ``enclosure_id``; keeping both
sides in agreement is the job of the transfer service.
"""

from __future__ import annotations

import threading
import uuid
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Tuple

from .errors import CapacityExceeded

if TYPE_CHECKING:
    from .animal import Animal


class EnclosureType(str, Enum):
    CARNIVORE = "carnivore"
    HERBIVORE = "herbivore"
    AVIARY = "aviary"
    AQUARIUM = "aquarium"


class Enclosure:
    """A containment unit with a bounded set of resident animals."""

    def __init__(self, id: uuid.UUID, type: EnclosureType, area_m2: float, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError("Capacity must be an integer")
        if capacity <= 0:
            raise ValueError("Capacity must be positive")
        if area_m2 <= 0:
            raise ValueError("Area must be positive")
        self._id = id
        self._type = EnclosureType(type)
        self._area_m2 = float(area_m2)
        self._capacity = capacity
        self._animals: List[uuid.UUID] = []
        self._lock = threading.RLock()

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def type(self) -> EnclosureType:
        return self._type

    @property
    def area_m2(self) -> float:
        return self._area_m2

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def animals(self) -> Tuple[uuid.UUID, ...]:
        """Resident animal identifiers in insertion order (read-only snapshot)."""
        with self._lock:
            return tuple(self._animals)

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    @property
    def free_places(self) -> int:
        with self._lock:
            return self._capacity - len(self._animals)

    def can_add(self) -> bool:
        """Return ``True`` if another animal fits into the enclosure."""
        with self._lock:
            return len(self._animals) < self._capacity

    def contains(self, animal_id: uuid.UUID) -> bool:
        with self._lock:
            return animal_id in self._animals

    def add_animal(self, animal: "Animal") -> None:
        """Register ``animal`` as a resident.

        Raises
        ------
        CapacityExceeded
            If the enclosure is already full.  The resident set is left
            untouched in that case.
        """
        with self._lock:
            if not self.can_add():
                raise CapacityExceeded(self._id, self._capacity)
            if animal.id in self._animals:
                return
            self._animals.append(animal.id)

    def remove_animal(self, animal: "Animal") -> None:
        """Remove ``animal`` from the residents; absent animals are ignored."""
        with self._lock:
            if animal.id in self._animals:
                self._animals.remove(animal.id)

    def clean(self) -> None:
        """Clean the enclosure.  Currently has no effect on its state."""

    def to_dict(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "id": self._id,
                "type": self._type,
                "area_m2": self._area_m2,
                "capacity": self._capacity,
                "animals": list(self._animals),
                "free_places": self._capacity - len(self._animals),
            }

    def __repr__(self) -> str:
        return (
            f"Enclosure(id={self._id!s}, type={self._type.value}, "
            f"residents={len(self._animals)}/{self._capacity})"
        )
