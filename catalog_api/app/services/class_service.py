"""
Business logic for classes.

Every class must point at an existing sector.  The sector lookup and
the write it guards run in the same write transaction, and writers are
serialised by the gateway, so a sector cannot disappear between the
check and the insert or update.  Validation always precedes the write.
"""

import logging
from typing import List, Optional

from catalog_api.app.core.exceptions import (
    InvalidReferenceError,
    NotFoundError,
    ValidationError,
)
from catalog_api.app.mappers import ClassMapper
from catalog_api.app.repositories import CatalogRepository, StorageGateway
from catalog_api.app.schemas.school_class import ClassRead

logger = logging.getLogger(__name__)


class ClassService:
    """Service for managing classes and their sector reference."""

    def __init__(self, gateway: StorageGateway, mapper: Optional[ClassMapper] = None):
        self.gateway = gateway
        self.mapper = mapper or ClassMapper()

    @staticmethod
    def _clean_name(class_name: Optional[str]) -> str:
        if class_name is None or not class_name.strip():
            raise ValidationError("Class", "class_name", "Class name must not be blank")
        return class_name.strip()

    @staticmethod
    def _ensure_sector(repo: CatalogRepository, sector_id: Optional[int]) -> int:
        if sector_id is None or repo.find_sector(sector_id) is None:
            logger.warning("Rejected class write: sector %s does not exist", sector_id)
            raise InvalidReferenceError("Class", "sector_id", sector_id)
        return sector_id

    def get_class_by_id(self, class_id: int) -> ClassRead:
        with self.gateway.transaction() as repo:
            record = repo.find_class(class_id)
        if record is None:
            raise NotFoundError("Class", class_id)
        return self.mapper.to_schema(record)

    def get_all_classes(self) -> List[ClassRead]:
        with self.gateway.transaction() as repo:
            records = repo.find_all_classes()
        return [self.mapper.to_schema(record) for record in records]

    def get_classes_by_sector(self, sector_id: int) -> List[ClassRead]:
        """Return the classes of a sector.

        An unknown sector yields an empty list rather than an error.
        """
        with self.gateway.transaction() as repo:
            records = repo.find_classes_by_sector(sector_id)
        return [self.mapper.to_schema(record) for record in records]

    def create_class(
        self,
        class_name: Optional[str],
        description: Optional[str],
        sector_id: Optional[int],
    ) -> ClassRead:
        """Create a class in an existing sector.

        Raises ``ValidationError`` for a blank name and
        ``InvalidReferenceError`` when the sector does not exist.  The
        stored name has surrounding whitespace removed.
        """
        class_name = self._clean_name(class_name)
        with self.gateway.transaction(write=True) as repo:
            sector_id = self._ensure_sector(repo, sector_id)
            record = repo.save_class(
                self.mapper.to_record(
                    ClassRead(class_name=class_name, description=description, sector_id=sector_id)
                )
            )
        logger.info("Created class %s in sector %s", record.id, record.sector_id)
        return self.mapper.to_schema(record)

    def update_class(
        self,
        class_id: int,
        class_name: Optional[str],
        description: Optional[str],
        sector_id: Optional[int] = None,
    ) -> ClassRead:
        """Update a class in place.

        Name and description are always replaced.  The sector is only
        looked up when ``sector_id`` is given and differs from the
        current one; ``None`` keeps the class in its current sector.
        """
        with self.gateway.transaction(write=True) as repo:
            current = repo.find_class(class_id)
            if current is None:
                raise NotFoundError("Class", class_id)
            class_name = self._clean_name(class_name)
            target_sector = current.sector_id
            if sector_id is not None and sector_id != current.sector_id:
                target_sector = self._ensure_sector(repo, sector_id)
            changes = ClassRead(
                id=class_id,
                class_name=class_name,
                description=description,
                sector_id=target_sector,
            )
            record = repo.save_class(self.mapper.to_record(changes))
        if target_sector != current.sector_id:
            logger.info("Moved class %s from sector %s to %s", class_id, current.sector_id, target_sector)
        logger.info("Updated class %s", class_id)
        return self.mapper.to_schema(record)

    def delete_class(self, class_id: int) -> None:
        with self.gateway.transaction(write=True) as repo:
            if not repo.delete_class(class_id):
                raise NotFoundError("Class", class_id)
        logger.info("Deleted class %s", class_id)
