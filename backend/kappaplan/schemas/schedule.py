"""
Schedule Pydantic schemas: shift assignments, templates and extra tasks.
"""

from pydantic import Field, AliasChoices, field_validator
from typing import Any, Dict, Optional

from kappaplan.models.schedule import AssignmentScope
from kappaplan.schemas.common import CamelModel
from kappaplan.utils.week_keys import parse_week_key


def _check_week(value: Optional[str]) -> Optional[str]:
    if value is not None:
        parse_week_key(value)
    return value


class AssignmentBase(CamelModel):
    """Base schedule assignment schema."""
    employee_id: str = Field(..., min_length=1, max_length=64)
    project_id: str = Field(..., min_length=1, max_length=80)
    test_id: Optional[str] = Field(None, max_length=64)
    part_id: Optional[str] = Field(None, max_length=64)
    week: str
    shift: int = Field(1, ge=1, le=3)
    scope: AssignmentScope = AssignmentScope.PROJECT
    note: Optional[str] = None

    @field_validator("week")
    @classmethod
    def validate_week(cls, value: str) -> str:
        return _check_week(value)


class AssignmentCreate(AssignmentBase):
    """Schema for creating or upserting a shift assignment."""
    id: str = Field(..., min_length=1, max_length=64)
    created_at: Optional[int] = Field(
        None, validation_alias=AliasChoices("createdAt", "created_at")
    )
    updated_at: Optional[int] = Field(
        None, validation_alias=AliasChoices("updatedAt", "updated_at")
    )


class AssignmentResponse(AssignmentBase):
    """Schema for shift assignment response."""
    id: str
    created_at: int
    updated_at: Optional[int] = None


class TemplateBase(CamelModel):
    """Base schedule template schema."""
    name: str = Field(..., min_length=1, max_length=255)
    data: Dict[str, Any] = Field(default_factory=dict)


class TemplateCreate(TemplateBase):
    """Schema for creating or upserting a template."""
    id: str = Field(..., min_length=1, max_length=64)
    created_at: Optional[int] = Field(
        None, validation_alias=AliasChoices("createdAt", "created_at")
    )


class TemplateResponse(TemplateBase):
    """Schema for template response."""
    id: str
    created_at: int


class ExtraTaskBase(CamelModel):
    """Base extra task schema."""
    name: str = Field(..., min_length=1, max_length=255)
    week: str
    time_per_unit: float = Field(15, ge=0)
    units: int = Field(1, ge=0)
    comment: Optional[str] = None

    @field_validator("week")
    @classmethod
    def validate_week(cls, value: str) -> str:
        return _check_week(value)


class ExtraTaskCreate(ExtraTaskBase):
    """Schema for creating or upserting an extra task."""
    id: str = Field(..., min_length=1, max_length=64)
    created_at: Optional[int] = Field(
        None, alias="created_at", validation_alias=AliasChoices("created_at", "createdAt")
    )


class ExtraTaskUpdate(CamelModel):
    """Schema for updating an extra task (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    week: Optional[str] = None
    time_per_unit: Optional[float] = Field(None, ge=0)
    units: Optional[int] = Field(None, ge=0)
    comment: Optional[str] = None

    @field_validator("week")
    @classmethod
    def validate_week(cls, value: Optional[str]) -> Optional[str]:
        return _check_week(value)


class ExtraTaskResponse(ExtraTaskBase):
    """Schema for extra task response; keeps the snake_case ``created_at``."""
    id: str
    created_at: int = Field(..., alias="created_at")
