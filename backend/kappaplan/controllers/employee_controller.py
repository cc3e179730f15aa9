"""
Employee controller: employees, details and qualifications.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.controllers.base_controller import BaseController
from kappaplan.services.employee_service import EmployeeService
from kappaplan.schemas.employee import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeResponse,
    EmployeeDetailsUpdate,
    EmployeeDetailsResponse,
    QualificationCreate,
    QualificationResponse,
)


class EmployeeController(BaseController):
    """Controller for employee operations."""

    def __init__(self, session: AsyncSession):
        self.employee_service = EmployeeService(session)

    async def list_employees(self) -> List[EmployeeResponse]:
        return await self.employee_service.list_employees()

    async def get_employee(self, employee_id: str) -> Optional[EmployeeResponse]:
        return await self.employee_service.get_employee(employee_id)

    async def upsert_employee(self, employee_data: EmployeeCreate) -> EmployeeResponse:
        return await self.employee_service.upsert_employee(employee_data)

    async def update_employee(self, employee_id: str, employee_data: EmployeeUpdate) -> None:
        await self.employee_service.update_employee(employee_id, employee_data)

    async def delete_employee(self, employee_id: str) -> bool:
        return await self.employee_service.delete_employee(employee_id)

    async def get_details(self, employee_id: str) -> Optional[EmployeeDetailsResponse]:
        return await self.employee_service.get_details(employee_id)

    async def upsert_details(self, employee_id: str, details_data: EmployeeDetailsUpdate) -> None:
        await self.employee_service.upsert_details(employee_id, details_data)

    async def list_qualifications(self, employee_id: Optional[str] = None) -> List[QualificationResponse]:
        return await self.employee_service.list_qualifications(employee_id)

    async def upsert_qualification(self, qualification_data: QualificationCreate) -> QualificationResponse:
        return await self.employee_service.upsert_qualification(qualification_data)

    async def delete_qualification(self, qualification_id: str) -> bool:
        return await self.employee_service.delete_qualification(qualification_id)
