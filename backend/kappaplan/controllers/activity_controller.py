"""
Activity controller: comments, activity log, preferences and settings.
"""

import io
from typing import Any, Dict, List
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.controllers.base_controller import BaseController
from kappaplan.services.activity_service import ActivityService
from kappaplan.services.preference_service import PreferenceService
from kappaplan.services.excel_export_service import ExcelExportService
from kappaplan.schemas.activity import CommentCreate, CommentResponse, LogCreate, LogResponse
from kappaplan.schemas.preference import PreferenceEntry


class ActivityController(BaseController):
    """Controller for comments and the activity log."""

    def __init__(self, session: AsyncSession):
        self.activity_service = ActivityService(session)
        self.excel_service = ExcelExportService(session)

    async def list_comments(self) -> List[CommentResponse]:
        return await self.activity_service.list_comments()

    async def upsert_comment(self, comment_data: CommentCreate) -> CommentResponse:
        return await self.activity_service.upsert_comment(comment_data)

    async def delete_comment(self, comment_id: str) -> bool:
        return await self.activity_service.delete_comment(comment_id)

    async def list_logs(self) -> List[LogResponse]:
        return await self.activity_service.list_logs()

    async def create_log(self, log_data: LogCreate) -> LogResponse:
        return await self.activity_service.create_log(log_data)

    async def clear_logs(self) -> int:
        return await self.activity_service.clear_logs()

    async def export_logs_to_excel(self) -> io.BytesIO:
        return await self.excel_service.export_logs_to_excel()


class PreferenceController(BaseController):
    """Controller for preferences and app settings."""

    def __init__(self, session: AsyncSession):
        self.preference_service = PreferenceService(session)

    async def get_preferences(self) -> Dict[str, Any]:
        return await self.preference_service.get_preferences()

    async def get_preference(self, key: str) -> Any:
        return await self.preference_service.get_preference(key)

    async def set_preference(self, key: str, value: Any) -> PreferenceEntry:
        return await self.preference_service.set_preference(key, value)

    async def delete_preference(self, key: str) -> bool:
        return await self.preference_service.delete_preference(key)

    async def get_settings(self) -> Dict[str, Any]:
        return await self.preference_service.get_settings()

    async def replace_settings(self, value: Dict[str, Any]) -> Dict[str, Any]:
        return await self.preference_service.replace_settings(value)
