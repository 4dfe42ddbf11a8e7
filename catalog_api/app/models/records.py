import sqlite3
from dataclasses import dataclass
from typing import Optional


@dataclass
class SectorRecord:
    """Row of the ``sectors`` table.  ``id`` is ``None`` until inserted."""

    name: str
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "SectorRecord":
        return cls(id=row["id"], name=row["name"])


@dataclass
class ClassRecord:
    """Row of the ``classes`` table.  ``id`` is ``None`` until inserted."""

    class_name: str
    sector_id: int
    description: Optional[str] = None
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "ClassRecord":
        return cls(
            id=row["id"],
            class_name=row["class_name"],
            description=row["description"],
            sector_id=row["sector_id"],
        )
