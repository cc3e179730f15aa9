"""
Absence Pydantic schemas: types, limits, absences and holidays.
"""

from pydantic import Field, model_validator
from typing import List, Optional
from datetime import date

from kappaplan.models.absence import AbsenceStatus
from kappaplan.schemas.common import CamelModel


class AbsenceTypeBase(CamelModel):
    """Base absence type schema."""
    name: str = Field(..., min_length=1, max_length=255)
    icon: Optional[str] = Field(None, max_length=20)
    color: Optional[str] = Field(None, max_length=20)
    default_days: float = Field(0, ge=0)
    is_paid: bool = True
    requires_approval: bool = True
    is_active: bool = True
    sort_order: int = 99


class AbsenceTypeCreate(AbsenceTypeBase):
    """Schema for creating or upserting an absence type."""
    id: str = Field(..., min_length=1, max_length=64)


class AbsenceTypeUpdate(CamelModel):
    """Schema for updating an absence type (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    icon: Optional[str] = Field(None, max_length=20)
    color: Optional[str] = Field(None, max_length=20)
    default_days: Optional[float] = Field(None, ge=0)
    is_paid: Optional[bool] = None
    requires_approval: Optional[bool] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None


class AbsenceTypeResponse(AbsenceTypeBase):
    """Schema for absence type response."""
    id: str


class AbsenceLimitBase(CamelModel):
    """Base absence limit schema."""
    employee_id: str = Field(..., min_length=1, max_length=64)
    absence_type_id: str = Field(..., min_length=1, max_length=64)
    year: int = Field(..., ge=1900, le=9999)
    total_days: float = Field(0, ge=0)
    used_days: float = 0


class AbsenceLimitCreate(AbsenceLimitBase):
    """Schema for upserting a limit keyed by employee, type and year."""
    id: Optional[str] = Field(None, max_length=160)


class AbsenceLimitResponse(AbsenceLimitBase):
    """Schema for absence limit response."""
    id: str


class BulkLimitItem(CamelModel):
    """Entitlement of one absence type in a bulk update."""
    absence_type_id: str = Field(..., min_length=1, max_length=64)
    total_days: float = Field(..., ge=0)


class BulkLimitsRequest(CamelModel):
    """Set the entitlements of one employee for one year."""
    employee_id: str = Field(..., min_length=1, max_length=64)
    year: int = Field(..., ge=1900, le=9999)
    limits: List[BulkLimitItem] = []


class AbsenceBase(CamelModel):
    """Base absence schema."""
    employee_id: str = Field(..., min_length=1, max_length=64)
    absence_type_id: str = Field(..., min_length=1, max_length=64)
    start_date: date
    end_date: date
    work_days: Optional[float] = Field(None, ge=0)
    status: AbsenceStatus = AbsenceStatus.APPROVED
    note: Optional[str] = None

    @model_validator(mode='after')
    def validate_dates(self) -> 'AbsenceBase':
        """Validate that the absence does not end before it starts."""
        if self.end_date < self.start_date:
            raise ValueError('End date must not be before start date')
        return self


class AbsenceCreate(AbsenceBase):
    """Schema for creating an absence; ``workDays`` is computed when omitted."""
    id: str = Field(..., min_length=1, max_length=64)
    created_at: Optional[int] = None
    approved_at: Optional[int] = None
    approved_by: Optional[str] = Field(None, max_length=100)


class AbsenceUpdate(AbsenceBase):
    """Schema for updating an absence."""
    approved_at: Optional[int] = None
    approved_by: Optional[str] = Field(None, max_length=100)


class AbsenceResponse(AbsenceBase):
    """Schema for absence response."""
    id: str
    work_days: float
    created_at: Optional[int] = None
    approved_at: Optional[int] = None
    approved_by: Optional[str] = None


class AbsenceDetailResponse(AbsenceResponse):
    """Absence joined with its type and employee for list views."""
    type_name: Optional[str] = None
    type_icon: Optional[str] = None
    type_color: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class HolidayCreate(CamelModel):
    """Schema for storing a holiday; one per date."""
    date: date
    name: str = Field(..., min_length=1, max_length=255)
    is_movable: bool = False


class HolidayResponse(HolidayCreate):
    """Schema for holiday response."""
    id: str
