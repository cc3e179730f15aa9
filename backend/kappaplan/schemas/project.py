"""
Project Pydantic schemas for request/response validation.

Projects keep the snake_case field names of the planning front end, apart
from ``timePerUnit`` and the camelCase week flags.
"""

from pydantic import AliasChoices, BaseModel, Field, field_validator
from typing import Any, Dict, Optional


class WeekData(BaseModel):
    """Actual/target quantities and flags of one project week."""
    ist: int = 0
    soll: int = 0
    stoppage: bool = False
    production_lack: bool = Field(False, alias="productionLack")
    comment: Optional[str] = None

    class Config:
        populate_by_name = True
        from_attributes = True


class WeekUpdate(BaseModel):
    """Schema for patching one week record."""
    ist: int = 0
    soll: int = 0
    stoppage: Optional[bool] = None
    production_lack: Optional[bool] = Field(None, alias="productionLack")
    comment: Optional[str] = None

    class Config:
        populate_by_name = True


def _time_per_unit_field(default: Any = 0) -> Any:
    return Field(
        default,
        ge=0,
        validation_alias=AliasChoices("timePerUnit", "time_per_unit"),
        serialization_alias="timePerUnit",
    )


class ProjectBase(BaseModel):
    """Base project schema with common fields."""
    customer_id: str = Field(..., validation_alias=AliasChoices("customer_id", "customerId"))
    type_id: str = Field(..., validation_alias=AliasChoices("type_id", "typeId"))
    part_id: str = Field(..., validation_alias=AliasChoices("part_id", "partId"))
    test_id: str = Field(..., validation_alias=AliasChoices("test_id", "testId"))
    time_per_unit: float = _time_per_unit_field()
    hidden: bool = False


class ProjectCreate(ProjectBase):
    """Schema for creating or upserting a project."""
    id: str = Field(..., min_length=1, max_length=64)
    created_at: Optional[int] = Field(None, validation_alias=AliasChoices("created_at", "createdAt"))
    updated_at: Optional[int] = Field(None, validation_alias=AliasChoices("updated_at", "updatedAt"))
    weeks: Optional[Dict[str, WeekData]] = None


class ProjectUpdate(BaseModel):
    """Schema for updating a project (all fields optional)."""
    customer_id: Optional[str] = Field(None, validation_alias=AliasChoices("customer_id", "customerId"))
    type_id: Optional[str] = Field(None, validation_alias=AliasChoices("type_id", "typeId"))
    part_id: Optional[str] = Field(None, validation_alias=AliasChoices("part_id", "partId"))
    test_id: Optional[str] = Field(None, validation_alias=AliasChoices("test_id", "testId"))
    time_per_unit: Optional[float] = _time_per_unit_field(None)
    hidden: Optional[bool] = None
    updated_at: Optional[int] = Field(None, validation_alias=AliasChoices("updated_at", "updatedAt"))
    weeks: Optional[Dict[str, WeekData]] = None


class ProjectResponse(ProjectBase):
    """Schema for project response with its week map."""
    id: str
    created_at: int
    updated_at: int
    weeks: Dict[str, WeekData] = {}

    class Config:
        from_attributes = True

    @field_validator("weeks", mode="before")
    @classmethod
    def weeks_by_key(cls, value: Any) -> Any:
        """Index loaded week rows by their week key."""
        if value is None:
            return {}
        if isinstance(value, dict):
            return value
        return {row.week: WeekData.model_validate(row) for row in value}
