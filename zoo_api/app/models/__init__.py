"""
Domain entities for the zoo.

Entities hold identity and enforce their own invariants.  They are kept
separate from the Pydantic schemas in ``schemas`` so that the API
representation can evolve without touching the domain rules, and from
the repositories in ``core.store`` so that storage can be swapped.
"""

from .animal import Animal, AnimalStatus, Gender
from .enclosure import Enclosure, EnclosureType
from .errors import CapacityExceeded, NotFoundError, ZooError
from .events import DomainEvent
from .feeding import FeedingSchedule
from .ids import new_id

__all__ = [
    "Animal",
    "AnimalStatus",
    "CapacityExceeded",
    "DomainEvent",
    "Enclosure",
    "EnclosureType",
    "FeedingSchedule",
    "Gender",
    "NotFoundError",
    "ZooError",
    "new_id",
]
