"""
Error kinds raised by the catalog services and storage layer.

Every error carries the entity kind, the offending id and, where it
applies, the field name so that request handlers can render a precise
failure response without parsing messages.
"""

from __future__ import annotations

from typing import Optional


class CatalogError(Exception):
    """Base class for all catalog errors."""

    def __init__(
        self,
        message: str,
        entity: Optional[str] = None,
        entity_id: Optional[int] = None,
        field: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.entity = entity
        self.entity_id = entity_id
        self.field = field


class NotFoundError(CatalogError):
    """Raised when the requested id does not exist in storage."""

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} {entity_id} not found", entity=entity, entity_id=entity_id)


class ValidationError(CatalogError):
    """Raised when a caller-supplied field violates a required-field rule."""

    def __init__(self, entity: str, field: str, message: str) -> None:
        super().__init__(message, entity=entity, field=field)


class InvalidReferenceError(CatalogError):
    """Raised when a foreign key does not resolve to an existing record."""

    def __init__(self, entity: str, field: str, referenced_id: int) -> None:
        super().__init__(
            f"{entity}.{field} references missing id {referenced_id}",
            entity=entity,
            entity_id=referenced_id,
            field=field,
        )


class StorageError(CatalogError):
    """Raised when the underlying database fails for non-business reasons."""


__all__ = [
    "CatalogError",
    "NotFoundError",
    "ValidationError",
    "InvalidReferenceError",
    "StorageError",
]
