"""Feeding schedule entity: one planned feeding of one animal."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict


@dataclass(eq=False)
class FeedingSchedule:
    id: uuid.UUID
    animal_id: uuid.UUID
    feeding_time: datetime
    food_type: str
    is_done: bool = False

    def mark_done(self) -> None:
        if self.is_done:
            raise ValueError("Feeding has already been completed")
        self.is_done = True

    def reschedule(self, new_time: datetime) -> None:
        if self.is_done:
            raise ValueError("A completed feeding cannot be rescheduled")
        self.feeding_time = new_time

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "animal_id": self.animal_id,
            "feeding_time": self.feeding_time,
            "food_type": self.food_type,
            "is_done": self.is_done,
        }
