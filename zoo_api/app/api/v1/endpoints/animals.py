"""
Animal endpoints for API v1.

Besides CRUD these routes expose the animal's health actions, manual
feeding and the transfer into another enclosure.  A full target
enclosure yields HTTP 409 and leaves every entity unchanged.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from zoo_api.app.core.store import ZooStore, get_store
from zoo_api.app.models import Animal, AnimalStatus, CapacityExceeded, NotFoundError
from zoo_api.app.schemas.animal import AnimalCreate, AnimalRead, AnimalTransfer
from zoo_api.app.services.animal_service import AnimalService
from zoo_api.app.services.transfer_service import AnimalTransferService

router = APIRouter()


def get_animal_service(store: ZooStore = Depends(get_store)) -> AnimalService:
    return AnimalService(store)


def get_transfer_service(store: ZooStore = Depends(get_store)) -> AnimalTransferService:
    return AnimalTransferService(store)


def _to_read(animal: Animal) -> AnimalRead:
    return AnimalRead.model_validate(animal.to_dict())


@router.get("/", response_model=List[AnimalRead])
async def list_animals(
    species: Optional[str] = Query(None, description="Filter by species (case-insensitive)"),
    status_filter: Optional[AnimalStatus] = Query(None, alias="status"),
    service: AnimalService = Depends(get_animal_service),
) -> List[AnimalRead]:
    animals = await service.list_animals(species=species, status=status_filter)
    return [_to_read(a) for a in animals]


@router.post("/", response_model=AnimalRead, status_code=status.HTTP_201_CREATED)
async def create_animal(
    animal_in: AnimalCreate,
    service: AnimalService = Depends(get_animal_service),
) -> AnimalRead:
    """Create an animal, admitting it into ``enclosure_id`` when given.

    Returns HTTP 404 if the enclosure does not exist and HTTP 409 if it
    is full.
    """
    try:
        animal = await service.create_animal(animal_in)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except CapacityExceeded as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _to_read(animal)


@router.get("/{animal_id}", response_model=AnimalRead)
async def get_animal(
    animal_id: UUID = Path(..., description="ID of the animal"),
    service: AnimalService = Depends(get_animal_service),
) -> AnimalRead:
    try:
        animal = await service.get_animal(animal_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_read(animal)


@router.delete("/{animal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_animal(
    animal_id: UUID = Path(..., description="ID of the animal"),
    service: AnimalService = Depends(get_animal_service),
) -> None:
    try:
        await service.delete_animal(animal_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return None


@router.post("/{animal_id}/feed", response_model=AnimalRead)
async def feed_animal(
    animal_id: UUID = Path(..., description="ID of the animal"),
    service: AnimalService = Depends(get_animal_service),
) -> AnimalRead:
    try:
        animal = await service.feed_animal(animal_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_read(animal)


@router.post("/{animal_id}/heal", response_model=AnimalRead)
async def heal_animal(
    animal_id: UUID = Path(..., description="ID of the animal"),
    service: AnimalService = Depends(get_animal_service),
) -> AnimalRead:
    try:
        animal = await service.heal_animal(animal_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_read(animal)


@router.post("/{animal_id}/sick", response_model=AnimalRead)
async def mark_animal_sick(
    animal_id: UUID = Path(..., description="ID of the animal"),
    service: AnimalService = Depends(get_animal_service),
) -> AnimalRead:
    try:
        animal = await service.mark_sick(animal_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_read(animal)


@router.post("/{animal_id}/transfer", response_model=AnimalRead)
async def transfer_animal(
    transfer_in: AnimalTransfer,
    animal_id: UUID = Path(..., description="ID of the animal"),
    service: AnimalTransferService = Depends(get_transfer_service),
) -> AnimalRead:
    """Move the animal into another enclosure."""
    try:
        animal = await service.transfer(animal_id, transfer_in.enclosure_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except CapacityExceeded as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return _to_read(animal)
