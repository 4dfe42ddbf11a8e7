"""
Business logic for sectors.

``SectorService`` owns the sector lifecycle, including the cascade
that removes every class of a sector before the sector itself.  Each
public method runs in exactly one gateway transaction, so a failure at
any step leaves the database as it was before the call.
"""

import logging
from typing import List, Optional

from catalog_api.app.core.exceptions import NotFoundError, ValidationError
from catalog_api.app.mappers import SectorMapper
from catalog_api.app.repositories import StorageGateway
from catalog_api.app.schemas.sector import SectorRead

logger = logging.getLogger(__name__)


def _require_name(name: Optional[str]) -> str:
    if name is None or not name.strip():
        raise ValidationError("Sector", "name", "Sector name must not be blank")
    return name


class SectorService:
    """Service for managing sectors."""

    def __init__(self, gateway: StorageGateway, mapper: Optional[SectorMapper] = None):
        self.gateway = gateway
        self.mapper = mapper or SectorMapper()

    def get_sector_by_id(self, sector_id: int) -> SectorRead:
        """Return a sector or raise ``NotFoundError``."""
        with self.gateway.transaction() as repo:
            record = repo.find_sector(sector_id)
        if record is None:
            raise NotFoundError("Sector", sector_id)
        return self.mapper.to_schema(record)

    def get_all_sectors(self) -> List[SectorRead]:
        with self.gateway.transaction() as repo:
            records = repo.find_all_sectors()
        return [self.mapper.to_schema(record) for record in records]

    def create_sector(self, name: Optional[str]) -> SectorRead:
        """Store a new sector and return it with its assigned id.

        Sector names are not required to be unique.
        """
        name = _require_name(name)
        with self.gateway.transaction(write=True) as repo:
            record = repo.save_sector(self.mapper.to_record(SectorRead(name=name)))
        logger.info("Created sector %s", record.id)
        return self.mapper.to_schema(record)

    def update_sector(self, sector_id: int, new_name: Optional[str]) -> SectorRead:
        """Replace the name of an existing sector.  The id never changes."""
        with self.gateway.transaction(write=True) as repo:
            if repo.find_sector(sector_id) is None:
                raise NotFoundError("Sector", sector_id)
            new_name = _require_name(new_name)
            record = repo.save_sector(self.mapper.to_record(SectorRead(id=sector_id, name=new_name)))
        logger.info("Updated sector %s", sector_id)
        return self.mapper.to_schema(record)

    def delete_sector(self, sector_id: int) -> int:
        """Delete a sector together with all of its classes.

        Children are enumerated and removed before the parent, all in
        one write transaction; if any delete fails nothing is removed.
        Returns the number of classes deleted by the cascade.
        """
        with self.gateway.transaction(write=True) as repo:
            if repo.find_sector(sector_id) is None:
                raise NotFoundError("Sector", sector_id)
            removed = 0
            if repo.class_exists_with_sector(sector_id):
                for child in repo.find_classes_by_sector(sector_id):
                    if repo.delete_class(child.id):
                        removed += 1
            if not repo.delete_sector(sector_id):
                raise NotFoundError("Sector", sector_id)
        logger.info("Deleted sector %s with %s class(es)", sector_id, removed)
        return removed
