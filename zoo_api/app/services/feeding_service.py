"""
Business logic for feeding schedules.

A feeding is planned for an existing animal at a given time.  Marking it
done feeds the animal and publishes a ``feeding_time`` event; a
completed feeding can neither be completed again nor rescheduled.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import List, Optional

from zoo_api.app.core.store import ZooStore
from zoo_api.app.models import FeedingSchedule, NotFoundError, new_id
from zoo_api.app.schemas.feeding import FeedingCreate
from zoo_api.app.services.event_log_service import EventLogService


class FeedingOrganizationService:
    """Service for planning and completing feedings."""

    def __init__(self, store: ZooStore) -> None:
        self.store = store
        self.events = EventLogService(store)

    async def add_feeding(self, data: FeedingCreate) -> FeedingSchedule:
        logger = logging.getLogger(__name__)
        if self.store.animals.get(data.animal_id) is None:
            raise NotFoundError("Animal", data.animal_id)
        feeding = FeedingSchedule(
            id=new_id(),
            animal_id=data.animal_id,
            feeding_time=data.feeding_time,
            food_type=data.food_type,
        )
        self.store.feedings.add(feeding)
        self.store.feedings.save()
        logger.info("Planned feeding %s for animal %s at %s", feeding.id, data.animal_id, data.feeding_time)
        return feeding

    async def list_feedings(
        self,
        animal_id: Optional[uuid.UUID] = None,
        pending_only: bool = False,
    ) -> List[FeedingSchedule]:
        """Return feedings ordered by feeding time."""
        if animal_id is not None:
            feedings = self.store.feedings.for_animal(animal_id)
        else:
            feedings = self.store.feedings.list()
        if pending_only:
            feedings = [f for f in feedings if not f.is_done]
        return sorted(feedings, key=lambda f: f.feeding_time)

    async def get_feeding(self, feeding_id: uuid.UUID) -> FeedingSchedule:
        feeding = self.store.feedings.get(feeding_id)
        if feeding is None:
            raise NotFoundError("Feeding", feeding_id)
        return feeding

    async def mark_done(self, feeding_id: uuid.UUID) -> FeedingSchedule:
        """Complete a feeding and record it on the animal."""
        logger = logging.getLogger(__name__)
        feeding = await self.get_feeding(feeding_id)
        animal = self.store.animals.get(feeding.animal_id)
        if animal is None:
            raise NotFoundError("Animal", feeding.animal_id)
        feeding.mark_done()
        animal.feed()
        self.store.feedings.save()
        logger.info("Feeding %s done for animal %s", feeding_id, animal.id)
        self.events.publish(
            "feeding_time",
            {
                "feeding_id": str(feeding_id),
                "animal_id": str(animal.id),
                "food_type": feeding.food_type,
            },
        )
        return feeding

    async def reschedule(self, feeding_id: uuid.UUID, new_time: datetime) -> FeedingSchedule:
        feeding = await self.get_feeding(feeding_id)
        feeding.reschedule(new_time)
        self.store.feedings.save()
        logging.getLogger(__name__).info("Rescheduled feeding %s to %s", feeding_id, new_time)
        return feeding

    async def delete_feeding(self, feeding_id: uuid.UUID) -> None:
        if not self.store.feedings.delete(feeding_id):
            raise NotFoundError("Feeding", feeding_id)
        self.store.feedings.save()
        logging.getLogger(__name__).info("Deleted feeding %s", feeding_id)
