"""
Absence service: absence type catalogue, yearly limits, absences and
public holidays.

Every absence write also moves the ``used_days`` counter of the matching
limit (employee, absence type, year of the start date) inside the same
transaction.
"""

from datetime import date
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.services.base_service import BaseService
from kappaplan.db.repositories.absence_repository import (
    AbsenceTypeRepository,
    AbsenceLimitRepository,
    AbsenceRepository,
    HolidayRepository,
)
from kappaplan.models.absence import Absence
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
from kappaplan.utils.timestamps import now_ms
from kappaplan.utils.work_days import count_work_days
from kappaplan.core.logging import get_logger

logger = get_logger(__name__)


def limit_id(employee_id: str, absence_type_id: str, year: int) -> str:
    """Default id of an absence limit."""
    return f"{employee_id}-{absence_type_id}-{year}"


class AbsenceService(BaseService):
    """Service for absence management."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.type_repo = AbsenceTypeRepository(session)
        self.limit_repo = AbsenceLimitRepository(session)
        self.absence_repo = AbsenceRepository(session)
        self.holiday_repo = HolidayRepository(session)

    # Absence types

    async def list_types(self, include_inactive: bool = False) -> List[AbsenceTypeResponse]:
        """List absence types in sort order; active ones unless asked otherwise."""
        if include_inactive:
            types = await self.type_repo.list()
        else:
            types = await self.type_repo.list_active()
        return [AbsenceTypeResponse.model_validate(absence_type) for absence_type in types]

    async def upsert_type(self, type_data: AbsenceTypeCreate) -> AbsenceTypeResponse:
        """Create or overwrite an absence type."""
        values = type_data.model_dump(exclude={"id"})
        absence_type = await self.type_repo.upsert(
            type_data.id, create_values=values, update_values=values
        )
        await self.commit()
        return AbsenceTypeResponse.model_validate(absence_type)

    async def update_type(self, type_id: str, type_data: AbsenceTypeUpdate) -> None:
        """Update the supplied fields of an absence type."""
        await self.type_repo.update(type_id, **type_data.model_dump(exclude_unset=True))
        await self.commit()

    # Limits

    async def list_limits(
        self,
        employee_id: Optional[str] = None,
        year: Optional[int] = None,
    ) -> List[AbsenceLimitResponse]:
        """List limits, optionally of one employee and/or year."""
        limits = await self.limit_repo.list(employee_id=employee_id, year=year)
        return [AbsenceLimitResponse.model_validate(limit) for limit in limits]

    async def upsert_limit(self, limit_data: AbsenceLimitCreate) -> AbsenceLimitResponse:
        """Set total and used days of the limit keyed by employee, type and year."""
        existing = await self.limit_repo.get_by_key(
            limit_data.employee_id, limit_data.absence_type_id, limit_data.year
        )
        values = {"total_days": limit_data.total_days, "used_days": limit_data.used_days}
        if existing:
            limit = await self.limit_repo.update(existing.id, **values)
        else:
            limit = await self.limit_repo.create(
                id=limit_data.id
                or limit_id(limit_data.employee_id, limit_data.absence_type_id, limit_data.year),
                employee_id=limit_data.employee_id,
                absence_type_id=limit_data.absence_type_id,
                year=limit_data.year,
                **values,
            )
        await self.commit()
        return AbsenceLimitResponse.model_validate(limit)

    async def bulk_set_limits(self, request: BulkLimitsRequest) -> int:
        """
        Set the entitlements of one employee for a year. Used days of
        existing limits are kept; new limits start at zero.
        """
        for item in request.limits:
            existing = await self.limit_repo.get_by_key(
                request.employee_id, item.absence_type_id, request.year
            )
            if existing:
                await self.limit_repo.update(existing.id, total_days=item.total_days)
            else:
                await self.limit_repo.create(
                    id=limit_id(request.employee_id, item.absence_type_id, request.year),
                    employee_id=request.employee_id,
                    absence_type_id=item.absence_type_id,
                    year=request.year,
                    total_days=item.total_days,
                    used_days=0,
                )
        await self.commit()
        return len(request.limits)

    # Absences

    async def list_absences(
        self,
        employee_id: Optional[str] = None,
        year: Optional[int] = None,
        month: Optional[int] = None,
        status: Optional[str] = None,
    ) -> List[AbsenceDetailResponse]:
        """List absences with type and employee names, newest start date first."""
        rows = await self.absence_repo.list_detailed(
            employee_id=employee_id, year=year, month=month, status=status
        )
        return [
            AbsenceDetailResponse.model_validate(absence).model_copy(
                update={
                    "type_name": absence_type.name,
                    "type_icon": absence_type.icon,
                    "type_color": absence_type.color,
                    "first_name": employee.first_name,
                    "last_name": employee.last_name,
                }
            )
            for absence, absence_type, employee in rows
        ]

    async def compute_work_days(self, start: date, end: date) -> float:
        """Monday-Friday days in [start, end] that are not stored holidays."""
        holidays = await self.holiday_repo.list_dates_between(start, end)
        return float(count_work_days(start, end, holidays))

    async def _move_used_days(self, absence: Absence, sign: int) -> None:
        touched = await self.limit_repo.adjust_used_days(
            absence.employee_id,
            absence.absence_type_id,
            absence.start_date.year,
            sign * absence.work_days,
        )
        if not touched:
            logger.debug(
                "No absence limit to adjust",
                extra={
                    "employee_id": absence.employee_id,
                    "absence_type_id": absence.absence_type_id,
                    "year": absence.start_date.year,
                },
            )

    async def create_absence(self, absence_data: AbsenceCreate) -> AbsenceResponse:
        """
        Record an absence and add its work days to the matching limit.
        Posting an existing id updates that absence instead.
        """
        if await self.absence_repo.exists(absence_data.id):
            await self.update_absence(
                absence_data.id,
                AbsenceUpdate(**absence_data.model_dump(exclude={"id", "created_at"})),
            )
            absence = await self.absence_repo.get(absence_data.id)
            return AbsenceResponse.model_validate(absence)

        values = absence_data.model_dump(exclude={"work_days", "created_at"})
        work_days = absence_data.work_days
        if work_days is None:
            work_days = await self.compute_work_days(absence_data.start_date, absence_data.end_date)

        absence = await self.absence_repo.create(
            **values,
            work_days=work_days,
            created_at=self.timestamp_or_now(absence_data.created_at),
        )
        await self._move_used_days(absence, +1)
        await self.commit()
        return AbsenceResponse.model_validate(absence)

    async def update_absence(self, absence_id: str, absence_data: AbsenceUpdate) -> None:
        """
        Update an absence. The old contribution to its limit is withdrawn and
        the new one applied, so a change of work days N -> M moves the counter
        by M - N. A missing id is ignored.
        """
        old = await self.absence_repo.get(absence_id)
        if not old:
            return

        await self._move_used_days(old, -1)

        values = absence_data.model_dump(exclude_unset=True)
        if absence_data.work_days is None:
            values["work_days"] = await self.compute_work_days(
                absence_data.start_date, absence_data.end_date
            )
        if absence_data.status == "approved" and old.status != "approved" and not old.approved_at:
            values.setdefault("approved_at", now_ms())

        updated = await self.absence_repo.update(absence_id, **values)
        await self._move_used_days(updated, +1)
        await self.commit()

    async def delete_absence(self, absence_id: str) -> bool:
        """Delete an absence and give its work days back to the limit."""
        absence = await self.absence_repo.get(absence_id)
        if not absence:
            return False

        await self._move_used_days(absence, -1)
        deleted = await self.absence_repo.delete(absence_id)
        await self.commit()
        return deleted

    # Holidays

    async def list_holidays(self, year: Optional[int] = None) -> List[HolidayResponse]:
        """List holidays by date, optionally of one year."""
        holidays = await self.holiday_repo.list_by_year(year)
        return [HolidayResponse.model_validate(holiday) for holiday in holidays]

    async def upsert_holiday(self, holiday_data: HolidayCreate) -> HolidayResponse:
        """Store the holiday of a date, replacing any previous one."""
        values = {"name": holiday_data.name, "is_movable": holiday_data.is_movable}
        holiday = await self.holiday_repo.upsert(
            holiday_data.date.isoformat(),
            create_values={**values, "date": holiday_data.date},
            update_values=values,
        )
        await self.commit()
        return HolidayResponse.model_validate(holiday)

    async def delete_holiday(self, holiday_date: str) -> bool:
        """Delete the holiday of a date."""
        deleted = await self.holiday_repo.delete_by_date(holiday_date)
        await self.commit()
        return deleted
