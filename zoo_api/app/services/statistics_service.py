"""
Service layer for statistics and reporting.

Provides a read-only overview of the zoo: animal counts by health
status, enclosure counts and free capacity, overall occupancy and the
number of pending feedings.
"""

from __future__ import annotations

from typing import Any, Dict

from zoo_api.app.core.store import ZooStore
from zoo_api.app.models import AnimalStatus, EnclosureType


class ZooStatisticsService:
    """Service providing aggregated metrics across the zoo."""

    def __init__(self, store: ZooStore) -> None:
        self.store = store

    async def overview(self) -> Dict[str, Any]:
        """Return a dictionary with high-level zoo metrics.

        ``occupancy_ratio`` is the number of housed animals divided by the
        total capacity of all enclosures, or ``0.0`` when there are none.
        """
        animals = self.store.animals.list()
        enclosures = self.store.enclosures.list()
        sick = sum(1 for a in animals if a.status == AnimalStatus.SICK)
        total_capacity = sum(e.capacity for e in enclosures)
        housed = sum(len(e.animals) for e in enclosures)
        by_type = {t.value: 0 for t in EnclosureType}
        for enclosure in enclosures:
            by_type[enclosure.type.value] += len(enclosure.animals)
        pending = sum(1 for f in self.store.feedings.list() if not f.is_done)
        return {
            "animals_total": len(animals),
            "animals_healthy": len(animals) - sick,
            "animals_sick": sick,
            "enclosures_total": len(enclosures),
            "enclosures_available": sum(1 for e in enclosures if e.can_add()),
            "total_capacity": total_capacity,
            "occupancy_ratio": round(housed / total_capacity, 4) if total_capacity else 0.0,
            "animals_by_enclosure_type": by_type,
            "feedings_pending": pending,
        }
