"""
Pydantic models for animal data.

An animal may be admitted straight into an enclosure by passing
``enclosure_id`` on creation.  Moving an animal afterwards goes through
the dedicated transfer endpoint, which is why ``enclosure_id`` is not
part of any update schema.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from zoo_api.app.models import AnimalStatus, Gender


class AnimalBase(BaseModel):
    species: str = Field(..., min_length=1, examples=["Lion"])
    name: str = Field(..., min_length=1, examples=["Simba"])
    birth_date: date = Field(..., examples=["2021-06-01"])
    gender: Gender = Field(..., examples=["male"])
    favorite_food: str = Field(..., min_length=1, examples=["Meat"])
    status: AnimalStatus = Field(AnimalStatus.HEALTHY, examples=["healthy"])


class AnimalCreate(AnimalBase):
    """Schema for creating an animal, optionally inside an enclosure."""

    enclosure_id: Optional[UUID] = Field(None, description="Enclosure to admit the animal into")


class AnimalRead(AnimalBase):
    id: UUID
    enclosure_id: Optional[UUID] = None
    fed_count: int = 0
    last_fed_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }


class AnimalTransfer(BaseModel):
    """Schema for moving an animal into another enclosure."""

    enclosure_id: UUID = Field(..., description="ID of the target enclosure")
