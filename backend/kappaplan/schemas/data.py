"""
Schemas for bulk export/import, backups and database transfer.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from kappaplan.schemas.common import CamelModel
from kappaplan.schemas.reference import ReferenceItemCreate
from kappaplan.schemas.project import ProjectCreate
from kappaplan.schemas.employee import (
    EmployeeCreate,
    EmployeeDetailsResponse,
    QualificationCreate,
)
from kappaplan.schemas.schedule import AssignmentCreate, TemplateCreate, ExtraTaskCreate
from kappaplan.schemas.absence import (
    AbsenceTypeCreate,
    AbsenceCreate,
    AbsenceLimitCreate,
    HolidayCreate,
)
from kappaplan.schemas.activity import CommentCreate, LogCreate
from kappaplan.schemas.preference import PreferenceEntry


class DataPayload(CamelModel):
    """
    Import document. Every section is optional; a section that is present
    replaces the rows of its tables.
    """
    customers: Optional[List[ReferenceItemCreate]] = None
    types: Optional[List[ReferenceItemCreate]] = None
    parts: Optional[List[ReferenceItemCreate]] = None
    tests: Optional[List[ReferenceItemCreate]] = None
    projects: Optional[List[ProjectCreate]] = None
    comments: Optional[List[CommentCreate]] = None
    employees: Optional[List[EmployeeCreate]] = None
    employee_details: Optional[List[EmployeeDetailsResponse]] = None
    qualifications: Optional[List[QualificationCreate]] = None
    schedule_assignments: Optional[List[AssignmentCreate]] = None
    templates: Optional[List[TemplateCreate]] = None
    extra_tasks: Optional[List[ExtraTaskCreate]] = None
    absence_types: Optional[List[AbsenceTypeCreate]] = None
    absences: Optional[List[AbsenceCreate]] = None
    absence_limits: Optional[List[AbsenceLimitCreate]] = None
    holidays: Optional[List[HolidayCreate]] = None
    logs: Optional[List[LogCreate]] = None
    preferences: Optional[List[PreferenceEntry]] = None
    settings: Optional[Dict[str, Any]] = None

    def present_sections(self) -> List[str]:
        """Names of the sections supplied in the payload."""
        return [name for name in self.model_fields_set if getattr(self, name) is not None]


class ImportResult(BaseModel):
    """Outcome of an import: rows written per section."""
    success: bool = True
    module: Optional[str] = None
    imported: Dict[str, int] = {}


class ClearResult(BaseModel):
    """Outcome of clearing tables."""
    success: bool = True
    table: Optional[str] = None
    deleted: Dict[str, int] = {}


class BackupRequest(BaseModel):
    """Optional target directory of a backup."""
    path: Optional[str] = None


class BackupResponse(BaseModel):
    """Written backup file."""
    success: bool = True
    filename: str
    path: str
    size: int
    date: str


class BackupInfo(BaseModel):
    """A backup file found on disk."""
    filename: str
    size: int
    created: str


class BackupListResponse(BaseModel):
    """Backups of a directory, newest first."""
    backups: List[BackupInfo] = []
    path: str


class RestoreRequest(BaseModel):
    """Backup file to load, optionally from another directory."""
    filename: str = Field(..., min_length=1)
    backup_path: Optional[str] = Field(None, alias="backupPath")

    class Config:
        populate_by_name = True


class UploadResponse(BaseModel):
    """Size of a replaced database file."""
    success: bool = True
    size: int
