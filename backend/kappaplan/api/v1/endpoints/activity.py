"""
Comment, activity log, preference and settings API endpoints.
"""

from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.db.session import get_db
from kappaplan.controllers.activity_controller import ActivityController, PreferenceController
from kappaplan.schemas.common import SuccessResponse
from kappaplan.schemas.activity import CommentCreate, CommentResponse, LogCreate, LogResponse
from kappaplan.schemas.preference import PreferenceEntry, PreferenceValue
from kappaplan.utils.timestamps import file_timestamp

comments_router = APIRouter()
logs_router = APIRouter()
preferences_router = APIRouter()
settings_router = APIRouter()

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@comments_router.get("", response_model=List[CommentResponse])
async def list_comments(
    db: AsyncSession = Depends(get_db),
) -> List[CommentResponse]:
    """List comments, newest first."""
    controller = ActivityController(db)
    return await controller.list_comments()


@comments_router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def upsert_comment(
    comment_data: CommentCreate,
    db: AsyncSession = Depends(get_db),
) -> CommentResponse:
    """Create a comment; an existing ID only changes its text."""
    controller = ActivityController(db)
    return await controller.upsert_comment(comment_data)


@comments_router.delete("/{comment_id}", response_model=SuccessResponse)
async def delete_comment(
    comment_id: str,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    controller = ActivityController(db)
    await controller.delete_comment(comment_id)
    return SuccessResponse()


@logs_router.get("", response_model=List[LogResponse])
async def list_logs(
    db: AsyncSession = Depends(get_db),
) -> List[LogResponse]:
    """List the latest activity log entries."""
    controller = ActivityController(db)
    return await controller.list_logs()


@logs_router.post("", response_model=LogResponse, status_code=status.HTTP_201_CREATED)
async def create_log(
    log_data: LogCreate,
    db: AsyncSession = Depends(get_db),
) -> LogResponse:
    controller = ActivityController(db)
    return await controller.create_log(log_data)


@logs_router.delete("/clear", response_model=SuccessResponse)
async def clear_logs(
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    """Delete every activity log entry."""
    controller = ActivityController(db)
    await controller.clear_logs()
    return SuccessResponse()


@logs_router.get("/export-excel")
async def export_logs_to_excel(
    db: AsyncSession = Depends(get_db),
):
    """Download the activity log as an Excel workbook."""
    controller = ActivityController(db)
    output = await controller.export_logs_to_excel()
    filename = f"kappa-logs-{file_timestamp()}.xlsx"
    return StreamingResponse(
        output,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@preferences_router.get("")
async def get_preferences(
    db: AsyncSession = Depends(get_db),
) -> Dict[str, Any]:
    """All preferences as a key to value map."""
    controller = PreferenceController(db)
    return await controller.get_preferences()


@preferences_router.get("/{key}")
async def get_preference(
    key: str,
    db: AsyncSession = Depends(get_db),
) -> Any:
    """Value of one preference, or null."""
    controller = PreferenceController(db)
    return await controller.get_preference(key)


@preferences_router.put("/{key}", response_model=PreferenceEntry)
async def set_preference(
    key: str,
    body: PreferenceValue,
    db: AsyncSession = Depends(get_db),
) -> PreferenceEntry:
    controller = PreferenceController(db)
    return await controller.set_preference(key, body.value)


@preferences_router.delete("/{key}", response_model=SuccessResponse)
async def delete_preference(
    key: str,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    controller = PreferenceController(db)
    await controller.delete_preference(key)
    return SuccessResponse()


@settings_router.get("")
async def get_settings(
    db: AsyncSession = Depends(get_db),
) -> Dict[str, Any]:
    """Stored application settings, or the defaults."""
    controller = PreferenceController(db)
    return await controller.get_settings()


@settings_router.put("", response_model=SuccessResponse)
async def replace_settings(
    value: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    """Replace the application settings document."""
    controller = PreferenceController(db)
    await controller.replace_settings(value)
    return SuccessResponse()
