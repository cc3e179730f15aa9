"""
Absence repositories: types, yearly limits, absence records and holidays.
"""

from datetime import date
from typing import Any, List, Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, extract, or_, and_

from kappaplan.db.repositories.base_repository import BaseRepository
from kappaplan.models.absence import AbsenceType, AbsenceLimit, Absence, Holiday
from kappaplan.models.employee import Employee


class AbsenceTypeRepository(BaseRepository[AbsenceType]):
    """Repository for the absence type catalogue."""

    order_by = ("sort_order", "name")

    def __init__(self, session: AsyncSession):
        super().__init__(AbsenceType, session)

    async def list_active(self) -> List[AbsenceType]:
        """List active absence types in sort order."""
        return await self.list(is_active=True)


class AbsenceLimitRepository(BaseRepository[AbsenceLimit]):
    """Repository for per-employee yearly absence limits."""

    order_by = ("employee_id", "year", "absence_type_id")

    def __init__(self, session: AsyncSession):
        super().__init__(AbsenceLimit, session)

    async def get_by_key(
        self,
        employee_id: str,
        absence_type_id: str,
        year: int,
    ) -> Optional[AbsenceLimit]:
        """Get the limit for an employee, absence type and year."""
        result = await self.session.execute(
            select(AbsenceLimit).where(
                AbsenceLimit.employee_id == employee_id,
                AbsenceLimit.absence_type_id == absence_type_id,
                AbsenceLimit.year == year,
            )
        )
        return result.scalar_one_or_none()

    async def adjust_used_days(
        self,
        employee_id: str,
        absence_type_id: str,
        year: int,
        delta: float,
    ) -> int:
        """
        Add ``delta`` to the used days of the matching limit.

        Returns:
            Number of limit rows touched (0 when no limit is defined)
        """
        result = await self.session.execute(
            update(AbsenceLimit)
            .where(
                AbsenceLimit.employee_id == employee_id,
                AbsenceLimit.absence_type_id == absence_type_id,
                AbsenceLimit.year == year,
            )
            .values(used_days=AbsenceLimit.used_days + delta)
            .execution_options(synchronize_session=False)
        )
        await self.session.flush()
        return result.rowcount


class AbsenceRepository(BaseRepository[Absence]):
    """Repository for absence records."""

    order_by = ("-start_date",)

    def __init__(self, session: AsyncSession):
        super().__init__(Absence, session)

    async def list_detailed(
        self,
        employee_id: Optional[str] = None,
        year: Optional[int] = None,
        month: Optional[int] = None,
        status: Optional[str] = None,
    ) -> List[Tuple[Absence, AbsenceType, Employee]]:
        """
        List absences joined with their type and employee.
        Year and month match when either end of the range falls into them.
        """
        query = (
            select(Absence, AbsenceType, Employee)
            .join(AbsenceType, Absence.absence_type_id == AbsenceType.id)
            .join(Employee, Absence.employee_id == Employee.id)
        )

        if employee_id:
            query = query.where(Absence.employee_id == employee_id)
        if year:
            query = query.where(
                or_(
                    extract("year", Absence.start_date) == year,
                    extract("year", Absence.end_date) == year,
                )
            )
        if month:
            query = query.where(
                or_(
                    extract("month", Absence.start_date) == month,
                    extract("month", Absence.end_date) == month,
                )
            )
        if status:
            query = query.where(Absence.status == status)

        query = query.order_by(Absence.start_date.desc())
        result = await self.session.execute(query)
        return [tuple(row) for row in result.all()]


class HolidayRepository(BaseRepository[Holiday]):
    """Repository for public holidays, ordered by date."""

    order_by = ("date",)

    def __init__(self, session: AsyncSession):
        super().__init__(Holiday, session)

    async def list_by_year(self, year: Optional[int] = None) -> List[Holiday]:
        """List holidays, optionally of a single year."""
        query = select(Holiday).order_by(Holiday.date)
        if year:
            query = query.where(extract("year", Holiday.date) == year)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_dates_between(self, start: date, end: date) -> List[date]:
        """Dates of holidays within [start, end]."""
        result = await self.session.execute(
            select(Holiday.date).where(and_(Holiday.date >= start, Holiday.date <= end))
        )
        return list(result.scalars().all())

    async def delete_by_date(self, day: Any) -> bool:
        """Delete the holiday on a date."""
        return await self.delete(str(day))
