"""
Storage gateway interfaces.

``CatalogRepository`` is the per-transaction data access contract for
sectors and classes.  No method changes more than one row; keeping
several writes consistent is the service layer's job, which it does by
running them through a single ``StorageGateway.transaction``.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import List, Optional

from catalog_api.app.models import ClassRecord, SectorRecord


class CatalogRepository(ABC):
    """Data access operations bound to one open transaction."""

    @abstractmethod
    def find_sector(self, sector_id: int) -> Optional[SectorRecord]:
        """
        Find a sector by its ID.

        Args:
            sector_id: Sector identifier

        Returns:
            Sector record if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all_sectors(self) -> List[SectorRecord]:
        """Return every sector ordered by id."""
        pass

    @abstractmethod
    def save_sector(self, sector: SectorRecord) -> SectorRecord:
        """
        Insert or update a sector.

        Args:
            sector: Record to store.  A record without an id is inserted
                and receives a storage-assigned id.

        Returns:
            The stored record with its id set

        Raises:
            NotFoundError: if ``sector.id`` is set but no such row exists
        """
        pass

    @abstractmethod
    def delete_sector(self, sector_id: int) -> bool:
        """
        Delete a sector row.

        Returns:
            True if the sector was found and deleted, False otherwise
        """
        pass

    @abstractmethod
    def find_class(self, class_id: int) -> Optional[ClassRecord]:
        """Find a class by its ID, or None."""
        pass

    @abstractmethod
    def find_all_classes(self) -> List[ClassRecord]:
        """Return every class ordered by id."""
        pass

    @abstractmethod
    def find_classes_by_sector(self, sector_id: int) -> List[ClassRecord]:
        """Return the classes that reference ``sector_id``."""
        pass

    @abstractmethod
    def save_class(self, school_class: ClassRecord) -> ClassRecord:
        """Insert or update a class.  Same contract as ``save_sector``."""
        pass

    @abstractmethod
    def delete_class(self, class_id: int) -> bool:
        """Delete a class row.  True if a row was removed."""
        pass

    @abstractmethod
    def class_exists_with_sector(self, sector_id: int) -> bool:
        """Check whether at least one class references ``sector_id``."""
        pass


class StorageGateway(ABC):
    """Factory of transactional ``CatalogRepository`` scopes."""

    @abstractmethod
    def transaction(self, write: bool = False) -> AbstractContextManager[CatalogRepository]:
        """
        Open a transactional scope.

        Everything done through the yielded repository is committed
        when the block exits normally and rolled back when it raises.

        Args:
            write: True if the block will modify data.  Write scopes are
                serialised against each other.
        """
        pass
