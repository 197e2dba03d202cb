"""
Domain event endpoint for API v1.

Returns the events published by the services (animal admitted, moved,
healed, feeding completed, ...), newest first.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from zoo_api.app.core.store import ZooStore, get_store
from zoo_api.app.schemas.event import DomainEventRead
from zoo_api.app.services.event_log_service import EventLogService

router = APIRouter()


@router.get("/", response_model=List[DomainEventRead])
async def list_events(
    name: Optional[str] = Query(None, description="Only events with this name"),
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    store: ZooStore = Depends(get_store),
) -> List[DomainEventRead]:
    events = await EventLogService(store).list_events(name=name, limit=limit, offset=offset)
    return [DomainEventRead.model_validate(e.to_dict()) for e in events]
