"""
Schedule controller: shift assignments, templates and extra tasks.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.controllers.base_controller import BaseController
from kappaplan.services.schedule_service import ScheduleService
from kappaplan.schemas.schedule import (
    AssignmentCreate,
    AssignmentResponse,
    TemplateCreate,
    TemplateResponse,
    ExtraTaskCreate,
    ExtraTaskUpdate,
    ExtraTaskResponse,
)


class ScheduleController(BaseController):
    """Controller for shift planning."""

    def __init__(self, session: AsyncSession):
        self.schedule_service = ScheduleService(session)

    async def list_assignments(
        self,
        week: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> List[AssignmentResponse]:
        """List assignments with optional week and employee filters."""
        return await self.schedule_service.list_assignments(week=week, employee_id=employee_id)

    async def upsert_assignment(self, assignment_data: AssignmentCreate) -> AssignmentResponse:
        return await self.schedule_service.upsert_assignment(assignment_data)

    async def delete_assignment(self, assignment_id: str) -> bool:
        return await self.schedule_service.delete_assignment(assignment_id)

    async def list_templates(self) -> List[TemplateResponse]:
        return await self.schedule_service.list_templates()

    async def upsert_template(self, template_data: TemplateCreate) -> TemplateResponse:
        return await self.schedule_service.upsert_template(template_data)

    async def delete_template(self, template_id: str) -> bool:
        return await self.schedule_service.delete_template(template_id)

    async def list_extra_tasks(self, week: Optional[str] = None) -> List[ExtraTaskResponse]:
        return await self.schedule_service.list_extra_tasks(week)

    async def upsert_extra_task(self, task_data: ExtraTaskCreate) -> ExtraTaskResponse:
        return await self.schedule_service.upsert_extra_task(task_data)

    async def update_extra_task(self, task_id: str, task_data: ExtraTaskUpdate) -> None:
        await self.schedule_service.update_extra_task(task_id, task_data)

    async def delete_extra_task(self, task_id: str) -> bool:
        """Delete an extra task and its assignments."""
        return await self.schedule_service.delete_extra_task(task_id)
