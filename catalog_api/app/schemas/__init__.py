"""
Pydantic schema definitions for API payloads.

Schemas are separated from the persisted records in ``models`` to
decouple the API representation from storage.
"""

from .sector import SectorCreate, SectorRead, SectorUpdate
from .school_class import ClassCreate, ClassRead, ClassUpdate

__all__ = [
    "SectorCreate",
    "SectorRead",
    "SectorUpdate",
    "ClassCreate",
    "ClassRead",
    "ClassUpdate",
]
