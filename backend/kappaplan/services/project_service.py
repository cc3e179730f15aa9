"""
Project service with business logic for projects and their week records.
"""

from typing import Any, Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.services.base_service import BaseService
from kappaplan.db.repositories.project_repository import ProjectRepository
from kappaplan.schemas.project import (
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    WeekData,
    WeekUpdate,
)
from kappaplan.utils.timestamps import now_ms
from kappaplan.utils.week_keys import parse_week_key, format_week_key
from kappaplan.core.logging import get_logger

logger = get_logger(__name__)


def week_columns(week_data: WeekData) -> Dict[str, Any]:
    """Column values of a week record."""
    return week_data.model_dump(by_alias=False)


class ProjectService(BaseService):
    """Service for project operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.project_repo = ProjectRepository(session)

    async def list_projects(self) -> List[ProjectResponse]:
        """List projects, newest first, each with its week map."""
        projects = await self.project_repo.list()
        return [ProjectResponse.model_validate(project) for project in projects]

    async def get_project(self, project_id: str) -> Optional[ProjectResponse]:
        """Get project by ID."""
        project = await self.project_repo.get(project_id)
        if not project:
            return None
        return ProjectResponse.model_validate(project)

    async def upsert_project(self, project_data: ProjectCreate) -> ProjectResponse:
        """
        Create a project, or update it when the id already exists.
        A supplied ``weeks`` map replaces the stored week records.
        """
        now = now_ms()
        values = project_data.model_dump(
            include={"customer_id", "type_id", "part_id", "test_id", "time_per_unit", "hidden"},
        )
        await self.project_repo.upsert(
            project_data.id,
            create_values={
                **values,
                "created_at": project_data.created_at or now,
                "updated_at": project_data.updated_at or now,
            },
            update_values={**values, "updated_at": project_data.updated_at or now},
        )
        if project_data.weeks is not None:
            await self.project_repo.replace_weeks(
                project_data.id,
                {week: week_columns(data) for week, data in project_data.weeks.items()},
            )
        await self.commit()

        project = await self.project_repo.get(project_data.id)
        return ProjectResponse.model_validate(project)

    async def update_project(self, project_id: str, project_data: ProjectUpdate) -> None:
        """Update a project; a missing id is ignored."""
        if not await self.project_repo.exists(project_id):
            return

        update_dict = project_data.model_dump(exclude_unset=True, exclude={"weeks"})
        update_dict["updated_at"] = update_dict.get("updated_at") or now_ms()
        await self.project_repo.update(project_id, **update_dict)

        if project_data.weeks is not None:
            await self.project_repo.replace_weeks(
                project_id,
                {week: week_columns(data) for week, data in project_data.weeks.items()},
            )
        await self.commit()

    async def update_week(self, project_id: str, week: str, week_data: WeekUpdate) -> bool:
        """
        Upsert one week record of a project and bump its ``updated_at``.

        Returns:
            False when the project does not exist

        Raises:
            ValueError: if the week key is malformed
        """
        week = format_week_key(*parse_week_key(week))
        if not await self.project_repo.exists(project_id):
            return False

        values = week_data.model_dump(exclude_none=True, by_alias=False)
        await self.project_repo.upsert_week(project_id, week, **values)
        await self.project_repo.update(project_id, updated_at=now_ms())
        await self.commit()

        logger.debug("Project week updated", extra={"project_id": project_id, "week": week})
        return True

    async def delete_project(self, project_id: str) -> bool:
        """Delete a project together with its week records."""
        deleted = await self.project_repo.delete(project_id)
        await self.commit()
        return deleted
