"""
Data API endpoints: export, import, clearing, backups and database transfer.
"""

from datetime import date
from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, File, Query, HTTPException, UploadFile, status
from fastapi.responses import Response, StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.db.session import get_db
from kappaplan.controllers.data_controller import DataController, DatabaseFileController
from kappaplan.schemas.data import (
    DataPayload,
    ImportResult,
    ClearResult,
    BackupRequest,
    BackupResponse,
    BackupListResponse,
    RestoreRequest,
    UploadResponse,
)
from kappaplan.api.v1.endpoints.activity import XLSX_MEDIA_TYPE

router = APIRouter()


@router.get("/export")
async def export_all(
    db: AsyncSession = Depends(get_db),
) -> Dict[str, Any]:
    """Dump every table as one JSON document."""
    controller = DataController(db)
    return await controller.export_all()


@router.get("/export-excel")
async def export_planning_to_excel(
    year: Optional[int] = Query(None, ge=1900, le=9999),
    db: AsyncSession = Depends(get_db),
):
    """Download the planning of a year as an Excel workbook."""
    controller = DataController(db)
    year = year or date.today().year
    output = await controller.export_planning_to_excel(year)
    filename = f"kappa-planning-{year}.xlsx"
    return StreamingResponse(
        output,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/export/{module}")
async def export_module(
    module: str,
    db: AsyncSession = Depends(get_db),
) -> Dict[str, Any]:
    """Dump the tables of one module."""
    controller = DataController(db)
    try:
        return await controller.export_module(module)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post("/import", response_model=ImportResult)
async def import_all(
    payload: DataPayload,
    db: AsyncSession = Depends(get_db),
) -> ImportResult:
    """Replace every table whose section is present in the payload."""
    controller = DataController(db)
    return await controller.import_all(payload)


@router.post("/import/{module}", response_model=ImportResult)
async def import_module(
    module: str,
    payload: DataPayload,
    db: AsyncSession = Depends(get_db),
) -> ImportResult:
    """Clear the tables of one module and load the supplied rows."""
    controller = DataController(db)
    try:
        return await controller.import_module(module, payload)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/download-db")
async def download_database() -> Response:
    """Download the raw SQLite database file."""
    controller = DatabaseFileController()
    try:
        content, filename = controller.read_database()
    except FileNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Database file not found",
        )
    return Response(
        content=content,
        media_type="application/x-sqlite3",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/upload-db", response_model=UploadResponse)
async def upload_database(
    file: UploadFile = File(...),
) -> UploadResponse:
    """Replace the database with an uploaded SQLite file."""
    controller = DatabaseFileController()
    content = await file.read()
    size = await controller.replace_database(content)
    return UploadResponse(size=size)


@router.post("/backup", response_model=BackupResponse)
async def create_backup(
    request: Optional[BackupRequest] = None,
    db: AsyncSession = Depends(get_db),
) -> BackupResponse:
    """Write a JSON backup of the whole database."""
    controller = DataController(db)
    return await controller.create_backup(request.path if request else None)


@router.get("/backups", response_model=BackupListResponse)
async def list_backups(
    path: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> BackupListResponse:
    """List backup files, newest first."""
    controller = DataController(db)
    return controller.list_backups(path)


@router.post("/backup/restore", response_model=ImportResult)
async def restore_backup(
    request: RestoreRequest,
    db: AsyncSession = Depends(get_db),
) -> ImportResult:
    """Import a backup file."""
    controller = DataController(db)
    try:
        result = await controller.restore_backup(request.filename, request.backup_path)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Backup not found",
        )
    return result


@router.delete("/clear", response_model=ClearResult)
async def clear_planning(
    db: AsyncSession = Depends(get_db),
) -> ClearResult:
    """Clear projects, their weeks and the reference lists."""
    controller = DataController(db)
    return await controller.clear_planning()


@router.delete("/clear/{table}", response_model=ClearResult)
async def clear_table(
    table: str,
    db: AsyncSession = Depends(get_db),
) -> ClearResult:
    """Clear one allow-listed table."""
    controller = DataController(db)
    try:
        return await controller.clear_table(table)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
