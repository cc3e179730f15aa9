"""
Activity service: project comments and the activity log.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.services.base_service import BaseService
from kappaplan.db.repositories.activity_repository import CommentRepository, ActivityLogRepository
from kappaplan.schemas.activity import CommentCreate, CommentResponse, LogCreate, LogResponse
from kappaplan.core.config import settings
from kappaplan.core.logging import get_logger

logger = get_logger(__name__)


class ActivityService(BaseService):
    """Service for comments and activity log entries."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.comment_repo = CommentRepository(session)
        self.log_repo = ActivityLogRepository(session)

    async def list_comments(self) -> List[CommentResponse]:
        """List comments, newest first."""
        comments = await self.comment_repo.list()
        return [CommentResponse.model_validate(comment) for comment in comments]

    async def upsert_comment(self, comment_data: CommentCreate) -> CommentResponse:
        """Create a comment; an existing id only has its text replaced."""
        comment = await self.comment_repo.upsert(
            comment_data.id,
            create_values={
                "project_id": comment_data.project_id,
                "week": comment_data.week,
                "text": comment_data.text,
                "created_at": self.timestamp_or_now(comment_data.created_at),
            },
            update_values={"text": comment_data.text},
        )
        await self.commit()
        return CommentResponse.model_validate(comment)

    async def delete_comment(self, comment_id: str) -> bool:
        """Delete a comment."""
        deleted = await self.comment_repo.delete(comment_id)
        await self.commit()
        return deleted

    async def list_logs(self, limit: Optional[int] = None) -> List[LogResponse]:
        """The most recent log entries."""
        logs = await self.log_repo.list_recent(limit or settings.LOG_LIST_LIMIT)
        return [LogResponse.model_validate(entry) for entry in logs]

    async def create_log(self, log_data: LogCreate) -> LogResponse:
        """Append a log entry."""
        values = log_data.model_dump(exclude={"id", "timestamp"})
        values["timestamp"] = self.timestamp_or_now(log_data.timestamp)
        entry = await self.log_repo.upsert(log_data.id, create_values=values, update_values=values)
        await self.commit()
        return LogResponse.model_validate(entry)

    async def clear_logs(self) -> int:
        """Delete every log entry."""
        deleted = await self.log_repo.delete_all()
        await self.commit()
        logger.info("Activity log cleared", extra={"deleted": deleted})
        return deleted
