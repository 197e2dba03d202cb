"""Statistics endpoint for API v1."""

from fastapi import APIRouter, Depends

from zoo_api.app.core.store import ZooStore, get_store
from zoo_api.app.schemas.statistics import ZooStatistics
from zoo_api.app.services.statistics_service import ZooStatisticsService

router = APIRouter()


@router.get("/", response_model=ZooStatistics)
async def get_overview(store: ZooStore = Depends(get_store)) -> ZooStatistics:
    """Return animal, enclosure and feeding counts for the whole zoo."""
    data = await ZooStatisticsService(store).overview()
    return ZooStatistics(**data)
