"""
Sector endpoints for API v1.

Deleting a sector also deletes every class that belongs to it.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from catalog_api.app.api.dependencies import get_class_service, get_sector_service, http_error
from catalog_api.app.core.exceptions import CatalogError
from catalog_api.app.schemas.sector import SectorCreate, SectorRead, SectorUpdate
from catalog_api.app.schemas.school_class import ClassRead
from catalog_api.app.services.class_service import ClassService
from catalog_api.app.services.sector_service import SectorService

router = APIRouter()


@router.get("/", response_model=List[SectorRead])
def list_sectors(service: SectorService = Depends(get_sector_service)) -> List[SectorRead]:
    try:
        return service.get_all_sectors()
    except CatalogError as e:
        raise http_error(e) from e


@router.get("/{sector_id}", response_model=SectorRead)
def get_sector(sector_id: int, service: SectorService = Depends(get_sector_service)) -> SectorRead:
    """Retrieve a single sector by its ID.  Returns 404 if it does not exist."""
    try:
        return service.get_sector_by_id(sector_id)
    except CatalogError as e:
        raise http_error(e) from e


@router.get("/{sector_id}/classes", response_model=List[ClassRead])
def list_sector_classes(
    sector_id: int,
    service: ClassService = Depends(get_class_service),
) -> List[ClassRead]:
    """List the classes of a sector.

    An unknown sector has no classes, so this returns an empty list
    instead of 404.
    """
    try:
        return service.get_classes_by_sector(sector_id)
    except CatalogError as e:
        raise http_error(e) from e


@router.post("/", response_model=SectorRead, status_code=status.HTTP_201_CREATED)
def create_sector(
    sector_in: SectorCreate,
    service: SectorService = Depends(get_sector_service),
) -> SectorRead:
    try:
        return service.create_sector(sector_in.name)
    except CatalogError as e:
        raise http_error(e) from e


@router.put("/{sector_id}", response_model=SectorRead)
def update_sector(
    sector_id: int,
    sector_in: SectorUpdate,
    service: SectorService = Depends(get_sector_service),
) -> SectorRead:
    try:
        return service.update_sector(sector_id, sector_in.name)
    except CatalogError as e:
        raise http_error(e) from e


@router.delete("/{sector_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sector(sector_id: int, service: SectorService = Depends(get_sector_service)) -> None:
    """Delete a sector and, in the same transaction, all of its classes."""
    try:
        service.delete_sector(sector_id)
    except CatalogError as e:
        raise http_error(e) from e
    return None
