"""
Project controller.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.controllers.base_controller import BaseController
from kappaplan.services.project_service import ProjectService
from kappaplan.schemas.project import ProjectCreate, ProjectUpdate, ProjectResponse, WeekUpdate


class ProjectController(BaseController):
    """Controller for project operations."""

    def __init__(self, session: AsyncSession):
        self.project_service = ProjectService(session)

    async def list_projects(self) -> List[ProjectResponse]:
        """List projects with their week maps."""
        return await self.project_service.list_projects()

    async def get_project(self, project_id: str) -> Optional[ProjectResponse]:
        """Get project by ID."""
        return await self.project_service.get_project(project_id)

    async def upsert_project(self, project_data: ProjectCreate) -> ProjectResponse:
        """Create or update a project."""
        return await self.project_service.upsert_project(project_data)

    async def update_project(self, project_id: str, project_data: ProjectUpdate) -> None:
        """Update a project."""
        await self.project_service.update_project(project_id, project_data)

    async def update_week(self, project_id: str, week: str, week_data: WeekUpdate) -> bool:
        """Upsert one week record."""
        return await self.project_service.update_week(project_id, week, week_data)

    async def delete_project(self, project_id: str) -> bool:
        """Delete a project."""
        return await self.project_service.delete_project(project_id)
