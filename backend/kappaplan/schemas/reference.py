"""
Reference list Pydantic schemas (customers, types, parts, tests).
"""

from pydantic import AliasChoices, BaseModel, Field
from typing import Optional


class ReferenceItemBase(BaseModel):
    """Base reference item schema."""
    name: str = Field(..., min_length=1, max_length=255)


class ReferenceItemCreate(ReferenceItemBase):
    """Schema for creating or upserting a reference item."""
    id: str = Field(..., min_length=1, max_length=64)
    created_at: Optional[int] = Field(
        None, validation_alias=AliasChoices("created_at", "createdAt")
    )


class ReferenceItemUpdate(ReferenceItemBase):
    """Schema for renaming a reference item."""
    pass


class ReferenceItemResponse(ReferenceItemBase):
    """Schema for reference item response."""
    id: str
    created_at: int

    class Config:
        from_attributes = True
