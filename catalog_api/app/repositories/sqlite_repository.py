"""
SQLite implementation of the storage gateway.

All queries use parameterized statements.  Ids are generated by the
database (``AUTOINCREMENT``), so an id is never handed out twice even
after the row that held it has been deleted.
"""

import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional

from catalog_api.app.core import db
from catalog_api.app.core.db import PathLike
from catalog_api.app.core.exceptions import NotFoundError
from catalog_api.app.models import ClassRecord, SectorRecord

from .base import CatalogRepository, StorageGateway

# SQLite INTEGER is a signed 64-bit value; larger ids cannot be stored.
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


def _storable(record_id: Optional[int]) -> bool:
    return record_id is not None and MIN_ID <= record_id <= MAX_ID


class SQLiteCatalogRepository(CatalogRepository):
    """Catalog queries executed on one connection with an open transaction."""

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn

    # Sectors

    def find_sector(self, sector_id: int) -> Optional[SectorRecord]:
        if not _storable(sector_id):
            return None
        row = self._conn.execute(
            "SELECT id, name FROM sectors WHERE id = ?",
            (sector_id,),
        ).fetchone()
        return SectorRecord.from_row(row) if row else None

    def find_all_sectors(self) -> List[SectorRecord]:
        rows = self._conn.execute("SELECT id, name FROM sectors ORDER BY id").fetchall()
        return [SectorRecord.from_row(row) for row in rows]

    def save_sector(self, sector: SectorRecord) -> SectorRecord:
        if sector.id is None:
            cursor = self._conn.execute(
                "INSERT INTO sectors (name) VALUES (?)",
                (sector.name,),
            )
            return SectorRecord(id=cursor.lastrowid, name=sector.name)
        if not _storable(sector.id):
            raise NotFoundError("Sector", sector.id)
        cursor = self._conn.execute(
            "UPDATE sectors SET name = ? WHERE id = ?",
            (sector.name, sector.id),
        )
        if cursor.rowcount == 0:
            raise NotFoundError("Sector", sector.id)
        return SectorRecord(id=sector.id, name=sector.name)

    def delete_sector(self, sector_id: int) -> bool:
        if not _storable(sector_id):
            return False
        cursor = self._conn.execute("DELETE FROM sectors WHERE id = ?", (sector_id,))
        return cursor.rowcount > 0

    # Classes

    def find_class(self, class_id: int) -> Optional[ClassRecord]:
        if not _storable(class_id):
            return None
        row = self._conn.execute(
            "SELECT id, class_name, description, sector_id FROM classes WHERE id = ?",
            (class_id,),
        ).fetchone()
        return ClassRecord.from_row(row) if row else None

    def find_all_classes(self) -> List[ClassRecord]:
        rows = self._conn.execute(
            "SELECT id, class_name, description, sector_id FROM classes ORDER BY id"
        ).fetchall()
        return [ClassRecord.from_row(row) for row in rows]

    def find_classes_by_sector(self, sector_id: int) -> List[ClassRecord]:
        if not _storable(sector_id):
            return []
        rows = self._conn.execute(
            "SELECT id, class_name, description, sector_id FROM classes WHERE sector_id = ? ORDER BY id",
            (sector_id,),
        ).fetchall()
        return [ClassRecord.from_row(row) for row in rows]

    def save_class(self, school_class: ClassRecord) -> ClassRecord:
        params = (school_class.class_name, school_class.description, school_class.sector_id)
        if school_class.id is None:
            cursor = self._conn.execute(
                "INSERT INTO classes (class_name, description, sector_id) VALUES (?, ?, ?)",
                params,
            )
            class_id = cursor.lastrowid
        else:
            if not _storable(school_class.id):
                raise NotFoundError("Class", school_class.id)
            cursor = self._conn.execute(
                "UPDATE classes SET class_name = ?, description = ?, sector_id = ? WHERE id = ?",
                params + (school_class.id,),
            )
            if cursor.rowcount == 0:
                raise NotFoundError("Class", school_class.id)
            class_id = school_class.id
        return ClassRecord(
            id=class_id,
            class_name=school_class.class_name,
            description=school_class.description,
            sector_id=school_class.sector_id,
        )

    def delete_class(self, class_id: int) -> bool:
        if not _storable(class_id):
            return False
        cursor = self._conn.execute("DELETE FROM classes WHERE id = ?", (class_id,))
        return cursor.rowcount > 0

    def class_exists_with_sector(self, sector_id: int) -> bool:
        if not _storable(sector_id):
            return False
        row = self._conn.execute(
            "SELECT 1 FROM classes WHERE sector_id = ? LIMIT 1",
            (sector_id,),
        ).fetchone()
        return row is not None


class SQLiteStorageGateway(StorageGateway):
    """Opens a fresh connection and transaction for every scope.

    Nothing is cached between scopes, so each read reflects the state of
    the database file at the time it runs.
    """

    def __init__(self, path: Optional[PathLike] = None):
        self.path = path

    @contextmanager
    def transaction(self, write: bool = False) -> Iterator[CatalogRepository]:
        with db.transaction(self.path, write=write) as conn:
            yield SQLiteCatalogRepository(conn)
