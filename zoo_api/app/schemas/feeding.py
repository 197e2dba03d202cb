"""Pydantic schemas for feeding schedules."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class FeedingCreate(BaseModel):
    """Schema for planning a feeding."""

    animal_id: UUID = Field(..., description="ID of the animal to feed")
    feeding_time: datetime = Field(..., examples=["2025-09-01T09:00:00"])
    food_type: str = Field(..., min_length=1, examples=["Meat"])


class FeedingReschedule(BaseModel):
    """Schema for moving a pending feeding to another time."""

    feeding_time: datetime = Field(..., examples=["2025-09-01T12:00:00"])


class FeedingRead(BaseModel):
    id: UUID
    animal_id: UUID
    feeding_time: datetime
    food_type: str
    is_done: bool

    model_config = {
        "from_attributes": True,
    }
