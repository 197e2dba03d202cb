"""
Enclosure endpoints for API v1.

These routes create, list, inspect, clean and delete enclosures.
Animals are admitted via the animal endpoints and moved with
``POST /animals/{animal_id}/transfer``.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from zoo_api.app.core.store import ZooStore, get_store
from zoo_api.app.models import Enclosure, EnclosureType, NotFoundError
from zoo_api.app.schemas.enclosure import EnclosureCreate, EnclosureRead
from zoo_api.app.services.enclosure_service import EnclosureService

router = APIRouter()


def get_enclosure_service(store: ZooStore = Depends(get_store)) -> EnclosureService:
    return EnclosureService(store)


def _to_read(enclosure: Enclosure) -> EnclosureRead:
    return EnclosureRead.model_validate(enclosure.to_dict())


@router.get("/", response_model=List[EnclosureRead])
async def list_enclosures(
    type: Optional[EnclosureType] = Query(None, description="Only enclosures of this type"),
    available_only: bool = Query(False, description="Only enclosures with at least one free place"),
    service: EnclosureService = Depends(get_enclosure_service),
) -> List[EnclosureRead]:
    enclosures = await service.list_enclosures(enclosure_type=type, available_only=available_only)
    return [_to_read(e) for e in enclosures]


@router.post("/", response_model=EnclosureRead, status_code=status.HTTP_201_CREATED)
async def create_enclosure(
    enclosure_in: EnclosureCreate,
    service: EnclosureService = Depends(get_enclosure_service),
) -> EnclosureRead:
    """Create an empty enclosure.  Area and capacity must be positive."""
    try:
        enclosure = await service.create_enclosure(enclosure_in)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _to_read(enclosure)


@router.get("/{enclosure_id}", response_model=EnclosureRead)
async def get_enclosure(
    enclosure_id: UUID = Path(..., description="ID of the enclosure"),
    service: EnclosureService = Depends(get_enclosure_service),
) -> EnclosureRead:
    try:
        enclosure = await service.get_enclosure(enclosure_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_read(enclosure)


@router.post("/{enclosure_id}/clean", response_model=EnclosureRead)
async def clean_enclosure(
    enclosure_id: UUID = Path(..., description="ID of the enclosure"),
    service: EnclosureService = Depends(get_enclosure_service),
) -> EnclosureRead:
    try:
        enclosure = await service.clean_enclosure(enclosure_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_read(enclosure)


@router.delete("/{enclosure_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_enclosure(
    enclosure_id: UUID = Path(..., description="ID of the enclosure"),
    service: EnclosureService = Depends(get_enclosure_service),
) -> None:
    """Delete an enclosure.  Returns HTTP 400 while animals still live there."""
    try:
        await service.delete_enclosure(enclosure_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return None
