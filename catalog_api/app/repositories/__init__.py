from .base import CatalogRepository, StorageGateway
from .sqlite_repository import SQLiteCatalogRepository, SQLiteStorageGateway

__all__ = [
    "CatalogRepository",
    "StorageGateway",
    "SQLiteCatalogRepository",
    "SQLiteStorageGateway",
]
