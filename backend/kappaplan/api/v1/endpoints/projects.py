"""
Project API endpoints.
"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.db.session import get_db
from kappaplan.controllers.project_controller import ProjectController
from kappaplan.schemas.common import SuccessResponse
from kappaplan.schemas.project import (
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    WeekUpdate,
)

router = APIRouter()


@router.get("", response_model=List[ProjectResponse])
async def list_projects(
    db: AsyncSession = Depends(get_db),
) -> List[ProjectResponse]:
    """List projects, newest first, with their week maps."""
    controller = ProjectController(db)
    return await controller.list_projects()


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    db: AsyncSession = Depends(get_db),
) -> ProjectResponse:
    """Get project by ID."""
    controller = ProjectController(db)
    project = await controller.get_project(project_id)
    if not project:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found",
        )
    return project


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def upsert_project(
    project_data: ProjectCreate,
    db: AsyncSession = Depends(get_db),
) -> ProjectResponse:
    """Create a project, or update it when the ID already exists."""
    controller = ProjectController(db)
    return await controller.upsert_project(project_data)


@router.put("/{project_id}", response_model=SuccessResponse)
async def update_project(
    project_id: str,
    project_data: ProjectUpdate,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    """Update a project."""
    controller = ProjectController(db)
    await controller.update_project(project_id, project_data)
    return SuccessResponse()


@router.patch("/{project_id}/weeks/{week}", response_model=SuccessResponse)
async def update_week(
    project_id: str,
    week: str,
    week_data: WeekUpdate,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    """Upsert the quantities of one project week."""
    controller = ProjectController(db)
    try:
        updated = await controller.update_week(project_id, week, week_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found",
        )
    return SuccessResponse()


@router.delete("/{project_id}", response_model=SuccessResponse)
async def delete_project(
    project_id: str,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    """Delete a project and its week records."""
    controller = ProjectController(db)
    await controller.delete_project(project_id)
    return SuccessResponse()
