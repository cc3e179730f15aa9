"""
Project repository for database operations, including week records.
"""

from typing import Any, Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete
from sqlalchemy.orm import selectinload

from kappaplan.db.repositories.base_repository import BaseRepository
from kappaplan.models.project import Project, ProjectWeek


class ProjectRepository(BaseRepository[Project]):
    """Repository for project operations."""

    order_by = ("-created_at",)

    def __init__(self, session: AsyncSession):
        super().__init__(Project, session)

    async def get(self, id: str) -> Optional[Project]:
        """Get project by ID with fresh week records."""
        result = await self.session.execute(
            select(Project)
            .options(selectinload(Project.weeks))
            .where(Project.id == id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list(self, **filters) -> List[Project]:
        """List projects, newest first, with week records loaded."""
        query = select(Project).options(selectinload(Project.weeks))
        for key, value in filters.items():
            if value is not None and hasattr(Project, key):
                query = query.where(getattr(Project, key) == value)
        query = query.order_by(*self._ordering()).execution_options(populate_existing=True)
        result = await self.session.execute(query)
        return list(result.scalars().unique().all())

    async def delete(self, id: str) -> bool:
        """Delete a project together with its week records."""
        await self.delete_weeks(id)
        return await super().delete(id)

    async def delete_all(self) -> int:
        """Delete every project and every week record."""
        await self.session.execute(delete(ProjectWeek))
        return await super().delete_all()

    async def get_week(self, project_id: str, week: str) -> Optional[ProjectWeek]:
        """Get one week record of a project."""
        result = await self.session.execute(
            select(ProjectWeek).where(
                ProjectWeek.project_id == project_id,
                ProjectWeek.week == week,
            )
        )
        return result.scalar_one_or_none()

    async def list_weeks(self, project_id: Optional[str] = None) -> List[ProjectWeek]:
        """List week records, optionally of a single project."""
        query = select(ProjectWeek).order_by(ProjectWeek.project_id, ProjectWeek.week)
        if project_id is not None:
            query = query.where(ProjectWeek.project_id == project_id)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def upsert_week(self, project_id: str, week: str, **values: Any) -> ProjectWeek:
        """Update the week record if present, otherwise insert it."""
        existing = await self.get_week(project_id, week)
        if existing:
            await self.session.execute(
                update(ProjectWeek)
                .where(ProjectWeek.id == existing.id)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            await self.session.flush()
            await self.session.refresh(existing)
            return existing

        record = ProjectWeek(project_id=project_id, week=week, **values)
        self.session.add(record)
        await self.session.flush()
        return record

    async def delete_weeks(self, project_id: str) -> int:
        """Delete all week records of a project."""
        # ORM deletes keep the identity map free of rows that no longer exist
        weeks = await self.list_weeks(project_id)
        for week in weeks:
            await self.session.delete(week)
        await self.session.flush()
        return len(weeks)

    async def replace_weeks(self, project_id: str, weeks: Dict[str, Dict[str, Any]]) -> None:
        """Replace the week records of a project with the given week map."""
        await self.delete_weeks(project_id)
        self.session.add_all(
            ProjectWeek(project_id=project_id, week=week, **values)
            for week, values in weeks.items()
        )
        await self.session.flush()
