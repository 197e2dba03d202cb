"""Pydantic schema for the zoo statistics overview."""

from typing import Dict

from pydantic import BaseModel


class ZooStatistics(BaseModel):
    animals_total: int
    animals_healthy: int
    animals_sick: int
    enclosures_total: int
    enclosures_available: int
    total_capacity: int
    occupancy_ratio: float
    animals_by_enclosure_type: Dict[str, int]
    feedings_pending: int
