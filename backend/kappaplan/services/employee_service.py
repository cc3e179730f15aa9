"""
Employee service: employees, extended details and qualifications.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.services.base_service import BaseService
from kappaplan.db.repositories.employee_repository import (
    EmployeeRepository,
    EmployeeDetailsRepository,
    QualificationRepository,
)
from kappaplan.schemas.employee import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeResponse,
    EmployeeDetailsUpdate,
    EmployeeDetailsResponse,
    QualificationCreate,
    QualificationResponse,
)


class EmployeeService(BaseService):
    """Service for employee operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.employee_repo = EmployeeRepository(session)
        self.details_repo = EmployeeDetailsRepository(session)
        self.qualification_repo = QualificationRepository(session)

    async def list_employees(self) -> List[EmployeeResponse]:
        """List employees ordered by first and last name."""
        employees = await self.employee_repo.list()
        return [EmployeeResponse.model_validate(employee) for employee in employees]

    async def get_employee(self, employee_id: str) -> Optional[EmployeeResponse]:
        """Get employee by ID."""
        employee = await self.employee_repo.get(employee_id)
        if not employee:
            return None
        return EmployeeResponse.model_validate(employee)

    async def upsert_employee(self, employee_data: EmployeeCreate) -> EmployeeResponse:
        """Create an employee, or update every field when the id exists."""
        values = employee_data.model_dump(exclude={"id", "created_at"})
        employee = await self.employee_repo.upsert(
            employee_data.id,
            create_values={**values, "created_at": self.timestamp_or_now(employee_data.created_at)},
            update_values=values,
        )
        await self.commit()
        return EmployeeResponse.model_validate(employee)

    async def update_employee(self, employee_id: str, employee_data: EmployeeUpdate) -> None:
        """Update the supplied fields of an employee."""
        update_dict = employee_data.model_dump(exclude_unset=True)
        await self.employee_repo.update(employee_id, **update_dict)
        await self.commit()

    async def delete_employee(self, employee_id: str) -> bool:
        """Delete an employee."""
        deleted = await self.employee_repo.delete(employee_id)
        await self.commit()
        return deleted

    async def get_details(self, employee_id: str) -> Optional[EmployeeDetailsResponse]:
        """Get the extended details of an employee."""
        details = await self.details_repo.get(employee_id)
        if not details:
            return None
        return EmployeeDetailsResponse.model_validate(details)

    async def upsert_details(self, employee_id: str, details_data: EmployeeDetailsUpdate) -> None:
        """Create or replace the extended details of an employee."""
        values = details_data.model_dump()
        await self.details_repo.upsert(employee_id, create_values=values, update_values=values)
        await self.commit()

    async def list_qualifications(
        self,
        employee_id: Optional[str] = None,
    ) -> List[QualificationResponse]:
        """List qualifications, optionally of one employee, with test names."""
        rows = await self.qualification_repo.list_with_test_names(employee_id)
        responses = []
        for qualification, test_name in rows:
            response = QualificationResponse.model_validate(qualification)
            response.test_name = test_name
            responses.append(response)
        return responses

    async def upsert_qualification(self, qualification_data: QualificationCreate) -> QualificationResponse:
        """Create or update the qualification of an employee for a test."""
        values = qualification_data.model_dump(include={"level", "certified_at", "expires_at"})
        existing = await self.qualification_repo.get_by_employee_and_test(
            qualification_data.employee_id,
            qualification_data.test_id,
        )
        if existing:
            qualification = await self.qualification_repo.update(existing.id, **values)
        else:
            qualification = await self.qualification_repo.create(
                id=qualification_data.id
                or f"{qualification_data.employee_id}-{qualification_data.test_id}",
                employee_id=qualification_data.employee_id,
                test_id=qualification_data.test_id,
                **values,
            )
        await self.commit()
        return QualificationResponse.model_validate(qualification)

    async def delete_qualification(self, qualification_id: str) -> bool:
        """Delete a qualification."""
        deleted = await self.qualification_repo.delete(qualification_id)
        await self.commit()
        return deleted
