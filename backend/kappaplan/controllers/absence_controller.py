"""
Absence controller: types, limits, absences and holidays.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.controllers.base_controller import BaseController
from kappaplan.services.absence_service import AbsenceService
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


class AbsenceController(BaseController):
    """Controller for absence management."""

    def __init__(self, session: AsyncSession):
        self.absence_service = AbsenceService(session)

    async def list_types(self, include_inactive: bool = False) -> List[AbsenceTypeResponse]:
        return await self.absence_service.list_types(include_inactive)

    async def upsert_type(self, type_data: AbsenceTypeCreate) -> AbsenceTypeResponse:
        return await self.absence_service.upsert_type(type_data)

    async def update_type(self, type_id: str, type_data: AbsenceTypeUpdate) -> None:
        await self.absence_service.update_type(type_id, type_data)

    async def list_limits(
        self,
        employee_id: Optional[str] = None,
        year: Optional[int] = None,
    ) -> List[AbsenceLimitResponse]:
        return await self.absence_service.list_limits(employee_id, year)

    async def upsert_limit(self, limit_data: AbsenceLimitCreate) -> AbsenceLimitResponse:
        return await self.absence_service.upsert_limit(limit_data)

    async def bulk_set_limits(self, request: BulkLimitsRequest) -> int:
        return await self.absence_service.bulk_set_limits(request)

    async def list_absences(
        self,
        employee_id: Optional[str] = None,
        year: Optional[int] = None,
        month: Optional[int] = None,
        status: Optional[str] = None,
    ) -> List[AbsenceDetailResponse]:
        """List absences with optional filters."""
        return await self.absence_service.list_absences(
            employee_id=employee_id,
            year=year,
            month=month,
            status=status,
        )

    async def create_absence(self, absence_data: AbsenceCreate) -> AbsenceResponse:
        return await self.absence_service.create_absence(absence_data)

    async def update_absence(self, absence_id: str, absence_data: AbsenceUpdate) -> None:
        await self.absence_service.update_absence(absence_id, absence_data)

    async def delete_absence(self, absence_id: str) -> bool:
        return await self.absence_service.delete_absence(absence_id)

    async def list_holidays(self, year: Optional[int] = None) -> List[HolidayResponse]:
        return await self.absence_service.list_holidays(year)

    async def upsert_holiday(self, holiday_data: HolidayCreate) -> HolidayResponse:
        return await self.absence_service.upsert_holiday(holiday_data)

    async def delete_holiday(self, holiday_date: str) -> bool:
        return await self.absence_service.delete_holiday(holiday_date)
