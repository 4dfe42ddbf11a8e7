"""
Persisted record types.

Records mirror table rows one to one and carry no behaviour.  They are
kept separate from the Pydantic schemas so that the storage layer does
not depend on the API representation.
"""

from .records import ClassRecord, SectorRecord

__all__ = ["SectorRecord", "ClassRecord"]
