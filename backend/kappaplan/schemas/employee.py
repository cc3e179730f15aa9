"""
Employee Pydantic schemas for request/response validation.
"""

from pydantic import Field, AliasChoices
from typing import Optional

from kappaplan.models.employee import EmployeeStatus, EmployeeRole
from kappaplan.schemas.common import CamelModel


class EmployeeBase(CamelModel):
    """Base employee schema with common fields."""
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    color: Optional[str] = Field(None, max_length=20)
    status: EmployeeStatus = EmployeeStatus.AVAILABLE
    suggested_shift: Optional[int] = Field(None, ge=1, le=3)
    shift_system: int = Field(2, ge=1, le=3)
    role: EmployeeRole = EmployeeRole.WORKER
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    department: Optional[str] = Field(None, max_length=100)


class EmployeeCreate(EmployeeBase):
    """Schema for creating or upserting an employee."""
    id: str = Field(..., min_length=1, max_length=64)
    created_at: Optional[int] = Field(
        None, validation_alias=AliasChoices("createdAt", "created_at")
    )


class EmployeeUpdate(CamelModel):
    """Schema for updating an employee (all fields optional)."""
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    color: Optional[str] = Field(None, max_length=20)
    status: Optional[EmployeeStatus] = None
    suggested_shift: Optional[int] = Field(None, ge=1, le=3)
    shift_system: Optional[int] = Field(None, ge=1, le=3)
    role: Optional[EmployeeRole] = None
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    department: Optional[str] = Field(None, max_length=100)


class EmployeeResponse(EmployeeBase):
    """Schema for employee response."""
    id: str
    created_at: int


class EmployeeDetailsBase(CamelModel):
    """Extended HR fields of an employee."""
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    birth_date: Optional[str] = Field(None, max_length=10)
    hire_date: Optional[str] = Field(None, max_length=10)
    department: Optional[str] = Field(None, max_length=100)
    position: Optional[str] = Field(None, max_length=100)
    contract_type: Optional[str] = Field(None, max_length=50)
    working_hours: float = Field(40, ge=0)
    notes: Optional[str] = None


class EmployeeDetailsUpdate(EmployeeDetailsBase):
    """Schema for upserting employee details."""
    pass


class EmployeeDetailsResponse(EmployeeDetailsBase):
    """Schema for employee details response."""
    employee_id: str


class QualificationBase(CamelModel):
    """Base qualification schema."""
    employee_id: str = Field(..., min_length=1, max_length=64)
    test_id: str = Field(..., min_length=1, max_length=64)
    level: int = Field(1, ge=1, le=5)
    certified_at: Optional[str] = Field(None, max_length=10)
    expires_at: Optional[str] = Field(None, max_length=10)


class QualificationCreate(QualificationBase):
    """Schema for upserting a qualification keyed by employee and test."""
    id: Optional[str] = Field(None, max_length=140)


class QualificationResponse(QualificationBase):
    """Schema for qualification response."""
    id: str
    test_name: Optional[str] = None
