"""
Comment and activity log repositories.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from kappaplan.db.repositories.base_repository import BaseRepository
from kappaplan.models.activity import Comment, ActivityLog


class CommentRepository(BaseRepository[Comment]):
    """Repository for project comments, newest first."""

    order_by = ("-created_at",)

    def __init__(self, session: AsyncSession):
        super().__init__(Comment, session)


class ActivityLogRepository(BaseRepository[ActivityLog]):
    """Repository for activity log entries, newest first."""

    order_by = ("-timestamp",)

    def __init__(self, session: AsyncSession):
        super().__init__(ActivityLog, session)

    async def list_recent(self, limit: int) -> List[ActivityLog]:
        """The most recent ``limit`` log entries."""
        result = await self.session.execute(
            select(ActivityLog).order_by(ActivityLog.timestamp.desc()).limit(limit)
        )
        return list(result.scalars().all())
