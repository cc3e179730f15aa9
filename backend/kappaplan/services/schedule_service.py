"""
Schedule service: shift assignments, templates and extra tasks.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.services.base_service import BaseService
from kappaplan.db.repositories.schedule_repository import (
    ScheduleAssignmentRepository,
    ScheduleTemplateRepository,
    ExtraTaskRepository,
)
from kappaplan.models.schedule import EXTRA_TASK_PREFIX
from kappaplan.schemas.schedule import (
    AssignmentCreate,
    AssignmentResponse,
    TemplateCreate,
    TemplateResponse,
    ExtraTaskCreate,
    ExtraTaskUpdate,
    ExtraTaskResponse,
)
from kappaplan.utils.timestamps import now_ms
from kappaplan.core.logging import get_logger

logger = get_logger(__name__)


class ScheduleService(BaseService):
    """Service for shift planning operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.assignment_repo = ScheduleAssignmentRepository(session)
        self.template_repo = ScheduleTemplateRepository(session)
        self.extra_task_repo = ExtraTaskRepository(session)

    async def list_assignments(
        self,
        week: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> List[AssignmentResponse]:
        """List assignments ordered by week and shift."""
        assignments = await self.assignment_repo.list(week=week, employee_id=employee_id)
        return [AssignmentResponse.model_validate(assignment) for assignment in assignments]

    async def upsert_assignment(self, assignment_data: AssignmentCreate) -> AssignmentResponse:
        """Create an assignment, or move an existing one."""
        values = assignment_data.model_dump(exclude={"id", "created_at", "updated_at"})
        now = now_ms()
        assignment = await self.assignment_repo.upsert(
            assignment_data.id,
            create_values={
                **values,
                "created_at": assignment_data.created_at or now,
                "updated_at": assignment_data.updated_at,
            },
            update_values={**values, "updated_at": now},
        )
        await self.commit()
        return AssignmentResponse.model_validate(assignment)

    async def delete_assignment(self, assignment_id: str) -> bool:
        """Delete an assignment."""
        deleted = await self.assignment_repo.delete(assignment_id)
        await self.commit()
        return deleted

    async def list_templates(self) -> List[TemplateResponse]:
        """List templates, newest first."""
        templates = await self.template_repo.list()
        return [TemplateResponse.model_validate(template) for template in templates]

    async def upsert_template(self, template_data: TemplateCreate) -> TemplateResponse:
        """Create or overwrite a template."""
        values = {"name": template_data.name, "data": template_data.data}
        template = await self.template_repo.upsert(
            template_data.id,
            create_values={**values, "created_at": self.timestamp_or_now(template_data.created_at)},
            update_values=values,
        )
        await self.commit()
        return TemplateResponse.model_validate(template)

    async def delete_template(self, template_id: str) -> bool:
        """Delete a template."""
        deleted = await self.template_repo.delete(template_id)
        await self.commit()
        return deleted

    async def list_extra_tasks(self, week: Optional[str] = None) -> List[ExtraTaskResponse]:
        """List extra tasks, optionally of one week."""
        tasks = await self.extra_task_repo.list(week=week)
        return [ExtraTaskResponse.model_validate(task) for task in tasks]

    async def upsert_extra_task(self, task_data: ExtraTaskCreate) -> ExtraTaskResponse:
        """Create an extra task, or update it when the id exists."""
        values = task_data.model_dump(exclude={"id", "created_at"})
        task = await self.extra_task_repo.upsert(
            task_data.id,
            create_values={**values, "created_at": self.timestamp_or_now(task_data.created_at)},
            update_values=values,
        )
        await self.commit()
        return ExtraTaskResponse.model_validate(task)

    async def update_extra_task(self, task_id: str, task_data: ExtraTaskUpdate) -> None:
        """Update the supplied fields of an extra task."""
        await self.extra_task_repo.update(task_id, **task_data.model_dump(exclude_unset=True))
        await self.commit()

    async def delete_extra_task(self, task_id: str) -> bool:
        """Delete an extra task and the assignments that point at it."""
        removed = await self.assignment_repo.delete_by_project(f"{EXTRA_TASK_PREFIX}{task_id}")
        deleted = await self.extra_task_repo.delete(task_id)
        await self.commit()

        if removed:
            logger.info(
                "Removed assignments of deleted extra task",
                extra={"task_id": task_id, "assignments": removed},
            )
        return deleted
