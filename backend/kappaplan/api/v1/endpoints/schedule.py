"""
Schedule API endpoints: shift assignments, templates and extra tasks.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.db.session import get_db
from kappaplan.controllers.schedule_controller import ScheduleController
from kappaplan.schemas.common import SuccessResponse
from kappaplan.schemas.schedule import (
    AssignmentCreate,
    AssignmentResponse,
    TemplateCreate,
    TemplateResponse,
    ExtraTaskCreate,
    ExtraTaskUpdate,
    ExtraTaskResponse,
)

assignments_router = APIRouter()
templates_router = APIRouter()
extra_tasks_router = APIRouter()


@assignments_router.get("", response_model=List[AssignmentResponse])
async def list_assignments(
    week: Optional[str] = Query(None),
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    db: AsyncSession = Depends(get_db),
) -> List[AssignmentResponse]:
    """List assignments ordered by week and shift."""
    controller = ScheduleController(db)
    return await controller.list_assignments(week=week, employee_id=employee_id)


@assignments_router.post("", response_model=AssignmentResponse, status_code=status.HTTP_201_CREATED)
async def upsert_assignment(
    assignment_data: AssignmentCreate,
    db: AsyncSession = Depends(get_db),
) -> AssignmentResponse:
    """Create or update a shift assignment."""
    controller = ScheduleController(db)
    return await controller.upsert_assignment(assignment_data)


@assignments_router.delete("/{assignment_id}", response_model=SuccessResponse)
async def delete_assignment(
    assignment_id: str,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    controller = ScheduleController(db)
    await controller.delete_assignment(assignment_id)
    return SuccessResponse()


@templates_router.get("", response_model=List[TemplateResponse])
async def list_templates(
    db: AsyncSession = Depends(get_db),
) -> List[TemplateResponse]:
    """List schedule templates, newest first."""
    controller = ScheduleController(db)
    return await controller.list_templates()


@templates_router.post("", response_model=TemplateResponse, status_code=status.HTTP_201_CREATED)
async def upsert_template(
    template_data: TemplateCreate,
    db: AsyncSession = Depends(get_db),
) -> TemplateResponse:
    controller = ScheduleController(db)
    return await controller.upsert_template(template_data)


@templates_router.delete("/{template_id}", response_model=SuccessResponse)
async def delete_template(
    template_id: str,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    controller = ScheduleController(db)
    await controller.delete_template(template_id)
    return SuccessResponse()


@extra_tasks_router.get("", response_model=List[ExtraTaskResponse])
async def list_extra_tasks(
    week: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> List[ExtraTaskResponse]:
    """List extra tasks, optionally for one week."""
    controller = ScheduleController(db)
    return await controller.list_extra_tasks(week)


@extra_tasks_router.post("", response_model=ExtraTaskResponse, status_code=status.HTTP_201_CREATED)
async def upsert_extra_task(
    task_data: ExtraTaskCreate,
    db: AsyncSession = Depends(get_db),
) -> ExtraTaskResponse:
    """Create or update an extra task."""
    controller = ScheduleController(db)
    return await controller.upsert_extra_task(task_data)


@extra_tasks_router.put("/{task_id}", response_model=SuccessResponse)
async def update_extra_task(
    task_id: str,
    task_data: ExtraTaskUpdate,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    controller = ScheduleController(db)
    await controller.update_extra_task(task_id, task_data)
    return SuccessResponse()


@extra_tasks_router.delete("/{task_id}", response_model=SuccessResponse)
async def delete_extra_task(
    task_id: str,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    """Delete an extra task together with its shift assignments."""
    controller = ScheduleController(db)
    await controller.delete_extra_task(task_id)
    return SuccessResponse()
