"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), running a unit of work inside an explicit
transaction (``transaction``) and applying migrations on application
start (``init_db``).  It uses SQLite as an embedded relational store;
to switch to another DBMS you would replace the connection logic and
adapt SQL syntax accordingly.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from .config import settings
from .exceptions import StorageError

PathLike = Union[str, os.PathLike]

logger = logging.getLogger(__name__)

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: sectors and their classes
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS sectors (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS classes (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            class_name TEXT NOT NULL,
            description TEXT,
            sector_id INTEGER NOT NULL,
            FOREIGN KEY(sector_id) REFERENCES sectors(id)
        );

        CREATE INDEX IF NOT EXISTS idx_classes_sector_id ON classes(sector_id);
        """,
    ),
]


def get_database_path(path: Optional[PathLike] = None) -> str:
    """Compute the path to the SQLite database file.

    An explicit ``path`` wins over ``settings.database_url``.  Absolute
    paths are used directly; relative ones are resolved against the
    project root.
    """
    db_url = os.fspath(path) if path is not None else settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # catalog_api/
    return str((base_dir / db_url).resolve())


def get_connection(path: Optional[PathLike] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection is opened in autocommit mode (``isolation_level=None``)
    so that transaction boundaries are always explicit, rows are
    returned as ``sqlite3.Row`` and foreign key enforcement is switched
    on.  ``settings.database_timeout`` bounds how long a statement waits
    on a lock held by another connection.
    """
    db_path = get_database_path(path)
    try:
        conn = sqlite3.connect(
            db_path,
            timeout=settings.database_timeout,
            isolation_level=None,
        )
    except sqlite3.Error as exc:
        raise StorageError(f"Cannot open database {db_path}: {exc}") from exc
    conn.row_factory = sqlite3.Row
    try:
        # Foreign keys are off by default in SQLite and must be enabled per connection.
        conn.execute("PRAGMA foreign_keys = ON")
    except sqlite3.Error as exc:
        conn.close()
        raise StorageError(f"Cannot configure database {db_path}: {exc}") from exc
    return conn


@contextmanager
def transaction(path: Optional[PathLike] = None, write: bool = False) -> Iterator[sqlite3.Connection]:
    """Run a block inside one transaction on a fresh connection.

    Write transactions start with ``BEGIN IMMEDIATE`` which takes the
    reserved lock up front, so concurrent writers are serialised and a
    check performed inside the block still holds when the block writes.
    The transaction is committed on normal exit and rolled back when
    the block raises.  ``sqlite3.Error`` and values SQLite cannot bind
    (``OverflowError`` for integers beyond 64 bits) are re-raised as
    ``StorageError``.
    """
    conn = get_connection(path)
    try:
        conn.execute("BEGIN IMMEDIATE" if write else "BEGIN")
        try:
            yield conn
        except BaseException:
            conn.rollback()
            raise
        conn.commit()
    except (sqlite3.Error, OverflowError) as exc:
        raise StorageError(f"Database error: {exc}") from exc
    finally:
        conn.close()


def init_db(path: Optional[PathLike] = None, seed: Optional[bool] = None) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  Each migration runs in its own transaction together
    with its version bump.  If you add a migration, append it with an
    incremented version number.

    When ``seed`` (default ``settings.seed_demo_data``) is true and the
    catalog has no sectors, the sample catalog is inserted.
    """
    if seed is None:
        seed = settings.seed_demo_data

    conn = get_connection(path)
    try:
        conn.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
        row = conn.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                conn.executescript(
                    "BEGIN;\n"
                    f"{sql}\n"
                    f"INSERT INTO migrations (version) VALUES ({int(version)});\n"
                    "COMMIT;"
                )
                logger.info("Applied migration %s", version)
                current_version = version
    except sqlite3.Error as exc:
        raise StorageError(f"Migration failed: {exc}") from exc
    finally:
        conn.close()

    if seed:
        seed_demo_data(path)


def seed_demo_data(path: Optional[PathLike] = None) -> bool:
    """Insert the sample sector and classes into an empty catalog.

    Returns ``True`` if data was inserted, ``False`` if the catalog
    already contained sectors.
    """
    with transaction(path, write=True) as conn:
        if conn.execute("SELECT 1 FROM sectors LIMIT 1").fetchone():
            return False
        cursor = conn.execute("INSERT INTO sectors (name) VALUES (?)", ("Informatique",))
        sector_id = cursor.lastrowid
        conn.executemany(
            "INSERT INTO classes (class_name, description, sector_id) VALUES (?, ?, ?)",
            [("Classe A", None, sector_id), ("Classe B", None, sector_id)],
        )
    logger.info("Seeded demo catalog with sector %s", sector_id)
    return True
