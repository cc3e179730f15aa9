"""
Schedule repositories: shift assignments, templates and extra tasks.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete

from kappaplan.db.repositories.base_repository import BaseRepository
from kappaplan.models.schedule import ScheduleAssignment, ScheduleTemplate, ExtraTask


class ScheduleAssignmentRepository(BaseRepository[ScheduleAssignment]):
    """Repository for shift assignments, ordered by week then shift."""

    order_by = ("week", "shift")

    def __init__(self, session: AsyncSession):
        super().__init__(ScheduleAssignment, session)

    async def delete_by_project(self, project_id: str) -> int:
        """Delete every assignment bound to a project id."""
        result = await self.session.execute(
            delete(ScheduleAssignment).where(ScheduleAssignment.project_id == project_id)
        )
        await self.session.flush()
        return result.rowcount


class ScheduleTemplateRepository(BaseRepository[ScheduleTemplate]):
    """Repository for schedule templates, newest first."""

    order_by = ("-created_at",)

    def __init__(self, session: AsyncSession):
        super().__init__(ScheduleTemplate, session)


class ExtraTaskRepository(BaseRepository[ExtraTask]):
    """Repository for extra tasks, ordered by week then creation."""

    order_by = ("week", "created_at")

    def __init__(self, session: AsyncSession):
        super().__init__(ExtraTask, session)
