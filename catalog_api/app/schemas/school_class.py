"""
Pydantic models for class data.

A class always belongs to one sector, referenced by ``sector_id``.
Whether that sector exists is checked by ``ClassService`` inside the
same transaction as the write, not by these schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ClassBase(BaseModel):
    class_name: str = Field(..., examples=["Classe A"])
    description: Optional[str] = Field(None, examples=["Introduction"])
    sector_id: int = Field(..., examples=[1])


class ClassCreate(ClassBase):
    """Schema for creating a class."""
    pass


class ClassUpdate(BaseModel):
    """Schema for updating a class.

    ``class_name`` and ``description`` are always replaced.  When
    ``sector_id`` is omitted the class stays in its current sector.
    """

    class_name: str
    description: Optional[str] = None
    sector_id: Optional[int] = None


class ClassRead(ClassBase):
    """Schema for reading a class from the API."""

    id: Optional[int] = None

    model_config = {
        "from_attributes": True,
    }
