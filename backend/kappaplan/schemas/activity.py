"""
Comment and activity log Pydantic schemas.
"""

from pydantic import Field, AliasChoices
from typing import Optional

from kappaplan.schemas.common import CamelModel


class CommentBase(CamelModel):
    """Base comment schema."""
    project_id: str = Field(..., min_length=1, max_length=64)
    week: str = Field(..., min_length=1, max_length=16)
    text: str = ""


class CommentCreate(CommentBase):
    """Schema for creating or upserting a comment."""
    id: str = Field(..., min_length=1, max_length=64)
    created_at: Optional[int] = Field(
        None, validation_alias=AliasChoices("createdAt", "created_at")
    )


class CommentResponse(CommentBase):
    """Schema for comment response."""
    id: str
    created_at: int


class LogBase(CamelModel):
    """Base activity log schema."""
    user_id: Optional[str] = Field(None, max_length=64)
    user_name: Optional[str] = Field(None, max_length=100)
    action: str = Field(..., min_length=1, max_length=50)
    entity_type: Optional[str] = Field(None, max_length=50)
    entity_name: Optional[str] = Field(None, max_length=255)
    details: Optional[str] = None


class LogCreate(LogBase):
    """Schema for writing a log entry."""
    id: str = Field(..., min_length=1, max_length=64)
    timestamp: Optional[int] = None


class LogResponse(LogBase):
    """Schema for log entry response."""
    id: str
    timestamp: int
