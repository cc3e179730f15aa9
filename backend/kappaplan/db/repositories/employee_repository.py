"""
Employee repositories: employees, extended details and qualifications.
"""

from typing import List, Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from kappaplan.db.repositories.base_repository import BaseRepository
from kappaplan.models.employee import Employee, EmployeeDetails, EmployeeQualification
from kappaplan.models.reference import Test


class EmployeeRepository(BaseRepository[Employee]):
    """Repository for employee operations."""

    order_by = ("first_name", "last_name")

    def __init__(self, session: AsyncSession):
        super().__init__(Employee, session)


class EmployeeDetailsRepository(BaseRepository[EmployeeDetails]):
    """Repository for extended employee details, keyed by employee id."""

    id_attribute = "employee_id"
    order_by = ("employee_id",)

    def __init__(self, session: AsyncSession):
        super().__init__(EmployeeDetails, session)


class QualificationRepository(BaseRepository[EmployeeQualification]):
    """Repository for employee test qualifications."""

    order_by = ("employee_id", "test_id")

    def __init__(self, session: AsyncSession):
        super().__init__(EmployeeQualification, session)

    async def get_by_employee_and_test(
        self,
        employee_id: str,
        test_id: str,
    ) -> Optional[EmployeeQualification]:
        """Get the qualification of an employee for a test."""
        result = await self.session.execute(
            select(EmployeeQualification).where(
                EmployeeQualification.employee_id == employee_id,
                EmployeeQualification.test_id == test_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_with_test_names(
        self,
        employee_id: Optional[str] = None,
    ) -> List[Tuple[EmployeeQualification, str]]:
        """List qualifications joined with the name of their test."""
        query = (
            select(EmployeeQualification, Test.name)
            .join(Test, EmployeeQualification.test_id == Test.id)
            .order_by(EmployeeQualification.employee_id, Test.name)
        )
        if employee_id:
            query = query.where(EmployeeQualification.employee_id == employee_id)
        result = await self.session.execute(query)
        return [(qualification, test_name) for qualification, test_name in result.all()]
