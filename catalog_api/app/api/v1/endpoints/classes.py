"""
Class endpoints for API v1.

Creating or moving a class to a sector that does not exist is answered
with HTTP 409 and nothing is written.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from catalog_api.app.api.dependencies import get_class_service, http_error
from catalog_api.app.core.exceptions import CatalogError
from catalog_api.app.schemas.school_class import ClassCreate, ClassRead, ClassUpdate
from catalog_api.app.services.class_service import ClassService

router = APIRouter()


@router.get("/", response_model=List[ClassRead])
def list_classes(service: ClassService = Depends(get_class_service)) -> List[ClassRead]:
    try:
        return service.get_all_classes()
    except CatalogError as e:
        raise http_error(e) from e


@router.get("/{class_id}", response_model=ClassRead)
def get_class(class_id: int, service: ClassService = Depends(get_class_service)) -> ClassRead:
    try:
        return service.get_class_by_id(class_id)
    except CatalogError as e:
        raise http_error(e) from e


@router.post("/", response_model=ClassRead, status_code=status.HTTP_201_CREATED)
def create_class(
    class_in: ClassCreate,
    service: ClassService = Depends(get_class_service),
) -> ClassRead:
    """Create a class.  The referenced sector must already exist."""
    try:
        return service.create_class(class_in.class_name, class_in.description, class_in.sector_id)
    except CatalogError as e:
        raise http_error(e) from e


@router.put("/{class_id}", response_model=ClassRead)
def update_class(
    class_id: int,
    class_in: ClassUpdate,
    service: ClassService = Depends(get_class_service),
) -> ClassRead:
    """Update a class.

    Omitting ``sector_id`` keeps the class in its current sector.
    """
    try:
        return service.update_class(
            class_id,
            class_in.class_name,
            class_in.description,
            class_in.sector_id,
        )
    except CatalogError as e:
        raise http_error(e) from e


@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_class(class_id: int, service: ClassService = Depends(get_class_service)) -> None:
    try:
        service.delete_class(class_id)
    except CatalogError as e:
        raise http_error(e) from e
    return None
