"""
FastAPI dependencies and error translation shared by the endpoints.

Services are built per request on top of a gateway pointing at the
configured database.  Tests swap the gateway out through
``app.dependency_overrides[get_gateway]``.
"""

import logging

from fastapi import Depends, HTTPException, status

from catalog_api.app.core.exceptions import (
    CatalogError,
    InvalidReferenceError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from catalog_api.app.repositories import SQLiteStorageGateway, StorageGateway
from catalog_api.app.services.class_service import ClassService
from catalog_api.app.services.sector_service import SectorService

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InvalidReferenceError: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_gateway() -> StorageGateway:
    return SQLiteStorageGateway()


def get_sector_service(gateway: StorageGateway = Depends(get_gateway)) -> SectorService:
    return SectorService(gateway)


def get_class_service(gateway: StorageGateway = Depends(get_gateway)) -> ClassService:
    return ClassService(gateway)


def http_error(exc: CatalogError) -> HTTPException:
    """Translate a catalog error into an ``HTTPException``.

    The detail keeps the entity, id and field so clients can tell which
    part of the request was rejected.
    """
    code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Storage failure: %s", exc.message, exc_info=exc)
        message = "Internal storage error"
    else:
        message = exc.message
    detail = {"message": message}
    if exc.entity is not None:
        detail["entity"] = exc.entity
    if exc.entity_id is not None:
        detail["id"] = exc.entity_id
    if exc.field is not None:
        detail["field"] = exc.field
    return HTTPException(status_code=code, detail=detail)
