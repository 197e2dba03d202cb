"""
Top-level router for version 1 of the API.

This router aggregates domain-specific routers under a unified prefix.
When new domains are introduced, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import animals, enclosures, events, feedings, statistics

router = APIRouter()

router.include_router(enclosures.router, prefix="/enclosures", tags=["enclosures"])
router.include_router(animals.router, prefix="/animals", tags=["animals"])
router.include_router(feedings.router, prefix="/feedings", tags=["feedings"])
router.include_router(statistics.router, prefix="/statistics", tags=["statistics"])
router.include_router(events.router, prefix="/events", tags=["events"])
