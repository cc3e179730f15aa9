"""
Employee API endpoints: employees, employee details and qualifications.
"""

from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.db.session import get_db
from kappaplan.controllers.employee_controller import EmployeeController
from kappaplan.schemas.common import SuccessResponse
from kappaplan.schemas.employee import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeResponse,
    EmployeeDetailsUpdate,
    QualificationCreate,
    QualificationResponse,
)

router = APIRouter()
details_router = APIRouter()
qualifications_router = APIRouter()


@router.get("", response_model=List[EmployeeResponse])
async def list_employees(
    db: AsyncSession = Depends(get_db),
) -> List[EmployeeResponse]:
    """List employees by first and last name."""
    controller = EmployeeController(db)
    return await controller.list_employees()


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: str,
    db: AsyncSession = Depends(get_db),
) -> EmployeeResponse:
    """Get employee by ID."""
    controller = EmployeeController(db)
    employee = await controller.get_employee(employee_id)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found",
        )
    return employee


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def upsert_employee(
    employee_data: EmployeeCreate,
    db: AsyncSession = Depends(get_db),
) -> EmployeeResponse:
    """Create or update an employee."""
    controller = EmployeeController(db)
    return await controller.upsert_employee(employee_data)


@router.put("/{employee_id}", response_model=SuccessResponse)
async def update_employee(
    employee_id: str,
    employee_data: EmployeeUpdate,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    """Update an employee."""
    controller = EmployeeController(db)
    await controller.update_employee(employee_id, employee_data)
    return SuccessResponse()


@router.delete("/{employee_id}", response_model=SuccessResponse)
async def delete_employee(
    employee_id: str,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    """Delete an employee."""
    controller = EmployeeController(db)
    await controller.delete_employee(employee_id)
    return SuccessResponse()


@details_router.get("/{employee_id}")
async def get_employee_details(
    employee_id: str,
    db: AsyncSession = Depends(get_db),
) -> Dict[str, Any]:
    """Get the details record of an employee, or an empty object."""
    controller = EmployeeController(db)
    details = await controller.get_details(employee_id)
    if not details:
        return {}
    return details.model_dump(mode="json", by_alias=True)


@details_router.put("/{employee_id}", response_model=SuccessResponse)
async def upsert_employee_details(
    employee_id: str,
    details_data: EmployeeDetailsUpdate,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    """Create or replace the details record of an employee."""
    controller = EmployeeController(db)
    await controller.upsert_details(employee_id, details_data)
    return SuccessResponse()


@qualifications_router.get("", response_model=List[QualificationResponse])
async def list_qualifications(
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    db: AsyncSession = Depends(get_db),
) -> List[QualificationResponse]:
    """List qualifications with their test names."""
    controller = EmployeeController(db)
    return await controller.list_qualifications(employee_id)


@qualifications_router.post("", response_model=QualificationResponse, status_code=status.HTTP_201_CREATED)
async def upsert_qualification(
    qualification_data: QualificationCreate,
    db: AsyncSession = Depends(get_db),
) -> QualificationResponse:
    """Create or update the qualification of an employee for a test."""
    controller = EmployeeController(db)
    return await controller.upsert_qualification(qualification_data)


@qualifications_router.delete("/{qualification_id}", response_model=SuccessResponse)
async def delete_qualification(
    qualification_id: str,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    controller = EmployeeController(db)
    await controller.delete_qualification(qualification_id)
    return SuccessResponse()
