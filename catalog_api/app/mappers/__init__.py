"""
Conversion between persisted records and API schemas.

Mappers only copy fields.  They never validate business rules and have
no side effects, so a record mapped to a schema and back is equal to
the original.
"""

from .class_mapper import ClassMapper
from .sector_mapper import SectorMapper

__all__ = ["SectorMapper", "ClassMapper"]
