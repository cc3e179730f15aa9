"""
Data controller: export/import, clearing, backups and planning workbook.
"""

import io
from typing import Any, Dict, Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.controllers.base_controller import BaseController
from kappaplan.services.data_service import DataService
from kappaplan.services.backup_service import BackupService, DatabaseFileService
from kappaplan.services.excel_export_service import ExcelExportService
from kappaplan.schemas.data import (
    DataPayload,
    ImportResult,
    ClearResult,
    BackupResponse,
    BackupListResponse,
)


class DataController(BaseController):
    """Controller for bulk data operations."""

    def __init__(self, session: AsyncSession):
        self.data_service = DataService(session)
        self.backup_service = BackupService(session)
        self.excel_service = ExcelExportService(session)

    async def export_all(self) -> Dict[str, Any]:
        return await self.data_service.export_all()

    async def export_module(self, module: str) -> Dict[str, Any]:
        return await self.data_service.export_module(module)

    async def import_all(self, payload: DataPayload) -> ImportResult:
        return await self.data_service.import_all(payload)

    async def import_module(self, module: str, payload: DataPayload) -> ImportResult:
        return await self.data_service.import_module(module, payload)

    async def clear_planning(self) -> ClearResult:
        return await self.data_service.clear_planning()

    async def clear_table(self, table: str) -> ClearResult:
        return await self.data_service.clear_table(table)

    async def create_backup(self, path: Optional[str] = None) -> BackupResponse:
        return await self.backup_service.create_backup(path)

    def list_backups(self, path: Optional[str] = None) -> BackupListResponse:
        return self.backup_service.list_backups(path)

    async def restore_backup(
        self,
        filename: str,
        backup_path: Optional[str] = None,
    ) -> Optional[ImportResult]:
        """Import a backup file; None when it does not exist."""
        return await self.backup_service.restore_backup(filename, backup_path)

    async def export_planning_to_excel(self, year: int) -> io.BytesIO:
        return await self.excel_service.export_planning_to_excel(year)


class DatabaseFileController(BaseController):
    """Controller for the raw database file. Holds no session."""

    def __init__(self):
        self.database_file_service = DatabaseFileService()

    def read_database(self) -> Tuple[bytes, str]:
        return self.database_file_service.read_database()

    async def replace_database(self, content: bytes) -> int:
        """Swap in an uploaded SQLite file."""
        return await self.database_file_service.replace_database(content)
