"""
Backup service: JSON backups on disk and raw SQLite file transfer.
"""

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.services.base_service import BaseService
from kappaplan.services.data_service import DataService
from kappaplan.schemas.data import (
    BackupResponse,
    BackupInfo,
    BackupListResponse,
    DataPayload,
    ImportResult,
)
from kappaplan.db import session as db_session
from kappaplan.utils.timestamps import file_timestamp
from kappaplan.core.config import settings
from kappaplan.core.exceptions import AppException
from kappaplan.core.logging import get_logger

logger = get_logger(__name__)

BACKUP_PREFIX = "kappa-backup-"
BACKUP_SUFFIX = ".json"
SQLITE_HEADER = b"SQLite format 3\x00"


def backup_directory(path: Optional[str] = None) -> Path:
    """Directory holding backups: the given path or the configured one."""
    return Path(path or settings.BACKUP_DIR)


def is_backup_filename(filename: str) -> bool:
    """True for a plain ``kappa-backup-*.json`` file name without directories."""
    return (
        Path(filename).name == filename
        and filename.startswith(BACKUP_PREFIX)
        and filename.endswith(BACKUP_SUFFIX)
    )


class BackupService(BaseService):
    """Service for JSON backups of the whole database."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.data_service = DataService(session)

    async def create_backup(self, path: Optional[str] = None) -> BackupResponse:
        """Write a full export to a timestamped file in the backup directory."""
        data = await self.data_service.export_all()
        data["backupDate"] = data["exportDate"]

        target_dir = backup_directory(path)
        target_dir.mkdir(parents=True, exist_ok=True)

        filename = f"{BACKUP_PREFIX}{file_timestamp(milliseconds=True)}{BACKUP_SUFFIX}"
        full_path = target_dir / filename
        full_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

        size = full_path.stat().st_size
        logger.info("Backup written", extra={"backup_path": str(full_path), "size": size})
        return BackupResponse(
            filename=filename,
            path=str(full_path),
            size=size,
            date=data["backupDate"],
        )

    def list_backups(self, path: Optional[str] = None) -> BackupListResponse:
        """List backup files of a directory, newest first."""
        directory = backup_directory(path)
        if not directory.is_dir():
            return BackupListResponse(backups=[], path=str(directory))

        entries = []
        for entry in directory.iterdir():
            if not entry.is_file() or not is_backup_filename(entry.name):
                continue
            stats = entry.stat()
            entries.append((stats.st_mtime, entry.name, stats.st_size))

        entries.sort(key=lambda item: (item[0], item[1]), reverse=True)
        backups = [
            BackupInfo(
                filename=name,
                size=size,
                created=datetime.fromtimestamp(mtime, tz=timezone.utc).isoformat(),
            )
            for mtime, name, size in entries
        ]
        return BackupListResponse(backups=backups, path=str(directory))

    async def restore_backup(
        self,
        filename: str,
        backup_path: Optional[str] = None,
    ) -> Optional[ImportResult]:
        """
        Load a backup file and import it like a full import.

        Returns:
            Import result, or None if the file does not exist

        Raises:
            ValueError: if the name is not a backup file name or the content
                is not a valid export document
        """
        if not is_backup_filename(filename):
            raise ValueError(f"Invalid backup file name: {filename}")

        full_path = backup_directory(backup_path) / filename
        if not full_path.is_file():
            return None

        content = json.loads(full_path.read_text(encoding="utf-8"))
        payload = DataPayload.model_validate(content)
        result = await self.data_service.import_all(payload)

        logger.info("Backup restored", extra={"backup_path": str(full_path)})
        return result


class DatabaseFileService:
    """Transfers the raw SQLite database file."""

    def read_database(self) -> Tuple[bytes, str]:
        """
        Current database file contents and a timestamped download name.

        Raises:
            FileNotFoundError: if the database file does not exist yet
        """
        content = db_session.database_file().read_bytes()
        return content, f"kappa-database-{file_timestamp()}.db"

    async def replace_database(self, content: bytes) -> int:
        """
        Replace the database file with an uploaded one and reopen the engine.
        The stored data is only touched once the SQLite header has been checked.

        Raises:
            AppException: 400 if the content is not an SQLite database

        Returns:
            Size of the new database file in bytes
        """
        if content[:len(SQLITE_HEADER)] != SQLITE_HEADER:
            raise AppException(
                "Invalid SQLite database file",
                status_code=400,
                details={"size": len(content)},
            )

        target = db_session.database_file()
        target.parent.mkdir(parents=True, exist_ok=True)
        temp_path = target.with_name(f"{target.name}.upload")
        temp_path.write_bytes(content)

        await db_session.close_db()
        os.replace(temp_path, target)
        await db_session.init_db()

        logger.info("Database file replaced", extra={"size": len(content)})
        return len(content)
