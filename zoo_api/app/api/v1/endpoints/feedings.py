"""
Feeding schedule endpoints for API v1.

Feedings are planned for existing animals, listed in chronological
order and completed with ``POST /feedings/{feeding_id}/done``.
Completing or rescheduling an already completed feeding returns
HTTP 400.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from zoo_api.app.core.store import ZooStore, get_store
from zoo_api.app.models import FeedingSchedule, NotFoundError
from zoo_api.app.schemas.feeding import FeedingCreate, FeedingRead, FeedingReschedule
from zoo_api.app.services.feeding_service import FeedingOrganizationService

router = APIRouter()


def get_feeding_service(store: ZooStore = Depends(get_store)) -> FeedingOrganizationService:
    return FeedingOrganizationService(store)


def _to_read(feeding: FeedingSchedule) -> FeedingRead:
    return FeedingRead.model_validate(feeding.to_dict())


@router.get("/", response_model=List[FeedingRead])
async def list_feedings(
    animal_id: Optional[UUID] = Query(None, description="Only feedings of this animal"),
    pending_only: bool = Query(False, description="Hide completed feedings"),
    service: FeedingOrganizationService = Depends(get_feeding_service),
) -> List[FeedingRead]:
    feedings = await service.list_feedings(animal_id=animal_id, pending_only=pending_only)
    return [_to_read(f) for f in feedings]


@router.post("/", response_model=FeedingRead, status_code=status.HTTP_201_CREATED)
async def create_feeding(
    feeding_in: FeedingCreate,
    service: FeedingOrganizationService = Depends(get_feeding_service),
) -> FeedingRead:
    try:
        feeding = await service.add_feeding(feeding_in)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_read(feeding)


@router.get("/{feeding_id}", response_model=FeedingRead)
async def get_feeding(
    feeding_id: UUID = Path(..., description="ID of the feeding"),
    service: FeedingOrganizationService = Depends(get_feeding_service),
) -> FeedingRead:
    try:
        feeding = await service.get_feeding(feeding_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_read(feeding)


@router.put("/{feeding_id}", response_model=FeedingRead)
async def reschedule_feeding(
    update: FeedingReschedule,
    feeding_id: UUID = Path(..., description="ID of the feeding"),
    service: FeedingOrganizationService = Depends(get_feeding_service),
) -> FeedingRead:
    try:
        feeding = await service.reschedule(feeding_id, update.feeding_time)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _to_read(feeding)


@router.post("/{feeding_id}/done", response_model=FeedingRead)
async def complete_feeding(
    feeding_id: UUID = Path(..., description="ID of the feeding"),
    service: FeedingOrganizationService = Depends(get_feeding_service),
) -> FeedingRead:
    try:
        feeding = await service.mark_done(feeding_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _to_read(feeding)


@router.delete("/{feeding_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_feeding(
    feeding_id: UUID = Path(..., description="ID of the feeding"),
    service: FeedingOrganizationService = Depends(get_feeding_service),
) -> None:
    try:
        await service.delete_feeding(feeding_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return None
