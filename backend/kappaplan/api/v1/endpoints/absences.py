"""
Absence API endpoints: absence types, limits, absences and holidays.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.db.session import get_db
from kappaplan.controllers.absence_controller import AbsenceController
from kappaplan.schemas.common import SuccessResponse
from kappaplan.schemas.absence import (
    AbsenceTypeCreate,
    AbsenceTypeUpdate,
    AbsenceTypeResponse,
    AbsenceLimitCreate,
    AbsenceLimitResponse,
    BulkLimitsRequest,
    AbsenceCreate,
    AbsenceUpdate,
    AbsenceResponse,
    AbsenceDetailResponse,
    HolidayCreate,
    HolidayResponse,
)

types_router = APIRouter()
limits_router = APIRouter()
router = APIRouter()
holidays_router = APIRouter()


@types_router.get("", response_model=List[AbsenceTypeResponse])
async def list_active_types(
    db: AsyncSession = Depends(get_db),
) -> List[AbsenceTypeResponse]:
    """List active absence types by sort order."""
    controller = AbsenceController(db)
    return await controller.list_types()


@types_router.get("/all", response_model=List[AbsenceTypeResponse])
async def list_all_types(
    db: AsyncSession = Depends(get_db),
) -> List[AbsenceTypeResponse]:
    """List every absence type, including inactive ones."""
    controller = AbsenceController(db)
    return await controller.list_types(include_inactive=True)


@types_router.post("", response_model=AbsenceTypeResponse, status_code=status.HTTP_201_CREATED)
async def upsert_type(
    type_data: AbsenceTypeCreate,
    db: AsyncSession = Depends(get_db),
) -> AbsenceTypeResponse:
    controller = AbsenceController(db)
    return await controller.upsert_type(type_data)


@types_router.put("/{type_id}", response_model=SuccessResponse)
async def update_type(
    type_id: str,
    type_data: AbsenceTypeUpdate,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    controller = AbsenceController(db)
    await controller.update_type(type_id, type_data)
    return SuccessResponse()


@limits_router.get("", response_model=List[AbsenceLimitResponse])
async def list_limits(
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    year: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> List[AbsenceLimitResponse]:
    """List absence limits with optional employee and year filters."""
    controller = AbsenceController(db)
    return await controller.list_limits(employee_id, year)


@limits_router.post("", response_model=AbsenceLimitResponse, status_code=status.HTTP_201_CREATED)
async def upsert_limit(
    limit_data: AbsenceLimitCreate,
    db: AsyncSession = Depends(get_db),
) -> AbsenceLimitResponse:
    """Create or update the limit of an employee, absence type and year."""
    controller = AbsenceController(db)
    return await controller.upsert_limit(limit_data)


@limits_router.post("/bulk", response_model=SuccessResponse)
async def bulk_set_limits(
    request: BulkLimitsRequest,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    """Set the total days of several absence types for one employee and year."""
    controller = AbsenceController(db)
    await controller.bulk_set_limits(request)
    return SuccessResponse()


@router.get("", response_model=List[AbsenceDetailResponse])
async def list_absences(
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    year: Optional[int] = Query(None),
    month: Optional[int] = Query(None, ge=1, le=12),
    absence_status: Optional[str] = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
) -> List[AbsenceDetailResponse]:
    """List absences, newest start date first."""
    controller = AbsenceController(db)
    return await controller.list_absences(
        employee_id=employee_id,
        year=year,
        month=month,
        status=absence_status,
    )


@router.post("", response_model=AbsenceResponse, status_code=status.HTTP_201_CREATED)
async def create_absence(
    absence_data: AbsenceCreate,
    db: AsyncSession = Depends(get_db),
) -> AbsenceResponse:
    """Record an absence and book its work days against the limit."""
    controller = AbsenceController(db)
    return await controller.create_absence(absence_data)


@router.put("/{absence_id}", response_model=SuccessResponse)
async def update_absence(
    absence_id: str,
    absence_data: AbsenceUpdate,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    controller = AbsenceController(db)
    await controller.update_absence(absence_id, absence_data)
    return SuccessResponse()


@router.delete("/{absence_id}", response_model=SuccessResponse)
async def delete_absence(
    absence_id: str,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    controller = AbsenceController(db)
    await controller.delete_absence(absence_id)
    return SuccessResponse()


@holidays_router.get("", response_model=List[HolidayResponse])
async def list_holidays(
    year: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> List[HolidayResponse]:
    controller = AbsenceController(db)
    return await controller.list_holidays(year)


@holidays_router.post("", response_model=HolidayResponse, status_code=status.HTTP_201_CREATED)
async def upsert_holiday(
    holiday_data: HolidayCreate,
    db: AsyncSession = Depends(get_db),
) -> HolidayResponse:
    """Insert or replace the holiday of a date."""
    controller = AbsenceController(db)
    return await controller.upsert_holiday(holiday_data)


@holidays_router.delete("/{holiday_date}", response_model=SuccessResponse)
async def delete_holiday(
    holiday_date: str,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    controller = AbsenceController(db)
    await controller.delete_holiday(holiday_date)
    return SuccessResponse()
