"""
Pydantic models for sector data.

``SectorRead`` is the value exchanged with clients; its ``id`` is
optional so the same model can describe a sector that has not been
stored yet.  Blank names are rejected by the service layer rather than
here so that every caller gets the same validation error.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SectorBase(BaseModel):
    name: str = Field(..., examples=["Informatique"])


class SectorCreate(SectorBase):
    """Schema for creating a sector."""
    pass


class SectorUpdate(SectorBase):
    """Schema for renaming a sector.  The id comes from the path."""
    pass


class SectorRead(SectorBase):
    """Schema for reading a sector from the API."""

    id: Optional[int] = None

    model_config = {
        "from_attributes": True,
    }
