"""
Pydantic models for enclosure data.

``EnclosureCreate`` validates that area and capacity are positive
before the entity is constructed; ``EnclosureRead`` mirrors
``Enclosure.to_dict`` and includes the resident animal identifiers.
"""

from typing import List
from uuid import UUID

from pydantic import BaseModel, Field

from zoo_api.app.models import EnclosureType


class EnclosureBase(BaseModel):
    type: EnclosureType = Field(..., examples=["carnivore"])
    area_m2: float = Field(..., gt=0, examples=[100.0], description="Usable area in square meters")
    capacity: int = Field(..., gt=0, examples=[2], description="Maximum number of resident animals")


class EnclosureCreate(EnclosureBase):
    """Schema for creating an enclosure."""
    pass


class EnclosureRead(EnclosureBase):
    """Schema for reading an enclosure from the API."""

    id: UUID
    animals: List[UUID] = Field(default_factory=list)
    free_places: int

    model_config = {
        "from_attributes": True,
    }
