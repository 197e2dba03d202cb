"""
Animal entity.

An animal knows which enclosure it lives in through ``enclosure_id``.
That is a back-reference used for lookups only; the animal does not own
or control the enclosure.  Changing it with ``move_to`` does not touch
the enclosure's resident set, so callers should go through
``AnimalTransferService`` instead of calling it directly.

Each animal carries a re-entrant ``lock``.  Services that read and then
change ``enclosure_id`` hold it for the whole step, and take it before
any enclosure lock.
"""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class AnimalStatus(str, Enum):
    HEALTHY = "healthy"
    SICK = "sick"


@dataclass(eq=False)
class Animal:
    id: uuid.UUID
    species: str
    name: str
    birth_date: date
    gender: Gender
    favorite_food: str
    status: AnimalStatus = AnimalStatus.HEALTHY
    enclosure_id: Optional[uuid.UUID] = None
    fed_count: int = 0
    last_fed_at: Optional[datetime] = None
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.species or not self.name:
            raise ValueError("Species and name are required")
        self.gender = Gender(self.gender)
        self.status = AnimalStatus(self.status)

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def feed(self, at: Optional[datetime] = None) -> None:
        self.fed_count += 1
        self.last_fed_at = at or datetime.utcnow()

    def heal(self) -> None:
        self.status = AnimalStatus.HEALTHY

    def mark_sick(self) -> None:
        self.status = AnimalStatus.SICK

    def move_to(self, enclosure_id: Optional[uuid.UUID]) -> None:
        self.enclosure_id = enclosure_id

    @property
    def is_healthy(self) -> bool:
        return self.status is AnimalStatus.HEALTHY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "species": self.species,
            "name": self.name,
            "birth_date": self.birth_date,
            "gender": self.gender,
            "favorite_food": self.favorite_food,
            "status": self.status,
            "enclosure_id": self.enclosure_id,
            "fed_count": self.fed_count,
            "last_fed_at": self.last_fed_at,
        }
