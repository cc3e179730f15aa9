"""
Data service: full and per-module export/import and table clearing.

Exports reshape the normalized rows into the nested JSON document used by
the front end (projects carry their ``weeks`` map). Imports run inside the
request's single transaction, so a failing row rolls the whole import back.
"""

from typing import Any, Dict, List, Optional, Tuple, Type
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.services.base_service import BaseService
from kappaplan.db.base import Base
from kappaplan.db.repositories.base_repository import BaseRepository
from kappaplan.db.repositories.project_repository import ProjectRepository
from kappaplan.db.repositories.preference_repository import SettingsRepository
from kappaplan.models import (
    Customer,
    ProductType,
    Part,
    Test,
    Project,
    ProjectWeek,
    Comment,
    Employee,
    EmployeeDetails,
    EmployeeQualification,
    ScheduleAssignment,
    ScheduleTemplate,
    ExtraTask,
    AbsenceType,
    Absence,
    AbsenceLimit,
    Holiday,
    ActivityLog,
    UserPreference,
)
from kappaplan.models.preference import APP_SETTINGS_KEY
from kappaplan.schemas.data import DataPayload, ImportResult, ClearResult
from kappaplan.schemas.reference import ReferenceItemResponse
from kappaplan.schemas.project import ProjectResponse
from kappaplan.schemas.activity import CommentResponse, LogResponse
from kappaplan.schemas.employee import (
    EmployeeResponse,
    EmployeeDetailsResponse,
    QualificationResponse,
)
from kappaplan.schemas.schedule import AssignmentResponse, TemplateResponse, ExtraTaskResponse
from kappaplan.schemas.absence import (
    AbsenceTypeResponse,
    AbsenceResponse,
    AbsenceLimitResponse,
    HolidayResponse,
)
from kappaplan.schemas.preference import PreferenceEntry
from kappaplan.services.project_service import week_columns
from kappaplan.services.absence_service import limit_id
from kappaplan.utils.timestamps import now_ms, iso_now
from kappaplan.utils.work_days import count_work_days
from kappaplan.core.config import settings
from kappaplan.core.logging import get_logger

logger = get_logger(__name__)


# Section name -> (model, response schema); insertion order is import order
SECTIONS: Dict[str, Tuple[Type[Base], Type[BaseModel]]] = {
    "customers": (Customer, ReferenceItemResponse),
    "types": (ProductType, ReferenceItemResponse),
    "parts": (Part, ReferenceItemResponse),
    "tests": (Test, ReferenceItemResponse),
    "projects": (Project, ProjectResponse),
    "comments": (Comment, CommentResponse),
    "employees": (Employee, EmployeeResponse),
    "employee_details": (EmployeeDetails, EmployeeDetailsResponse),
    "qualifications": (EmployeeQualification, QualificationResponse),
    "schedule_assignments": (ScheduleAssignment, AssignmentResponse),
    "templates": (ScheduleTemplate, TemplateResponse),
    "extra_tasks": (ExtraTask, ExtraTaskResponse),
    "absence_types": (AbsenceType, AbsenceTypeResponse),
    "holidays": (Holiday, HolidayResponse),
    "absences": (Absence, AbsenceResponse),
    "absence_limits": (AbsenceLimit, AbsenceLimitResponse),
    "logs": (ActivityLog, LogResponse),
    "preferences": (UserPreference, PreferenceEntry),
}

MODULES: Dict[str, List[str]] = {
    "planning": ["customers", "types", "parts", "tests", "projects", "comments"],
    "employees": ["employees", "employee_details", "qualifications"],
    "schedule": ["schedule_assignments", "templates"],
    "absences": ["absence_types", "absences", "absence_limits", "holidays"],
    "customers": ["customers"],
    "types": ["types"],
    "parts": ["parts"],
    "tests": ["tests"],
    "projects": ["projects", "comments"],
}

PLANNING_TABLES = ["projects", "customers", "types", "parts", "tests"]

CLEARABLE_TABLES: Dict[str, Type[Base]] = {
    model.__tablename__: model
    for model in (
        Customer,
        ProductType,
        Part,
        Test,
        Project,
        ProjectWeek,
        Comment,
        ActivityLog,
        Employee,
        EmployeeDetails,
        EmployeeQualification,
        ScheduleAssignment,
        ScheduleTemplate,
        ExtraTask,
        AbsenceType,
        Absence,
        AbsenceLimit,
        Holiday,
    )
}

TIMESTAMP_COLUMNS = ("created_at", "timestamp")


def wire_name(section: str) -> str:
    """JSON key of a section, e.g. ``scheduleAssignments``."""
    return to_camel(section)


class DataService(BaseService):
    """Service for bulk data transfer."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.settings_repo = SettingsRepository(session)

    def _repository(self, section: str) -> BaseRepository:
        model, _ = SECTIONS[section]
        if model is Project:
            return ProjectRepository(self.session)
        return BaseRepository(model, self.session)

    # Export

    async def _export_section(self, section: str) -> List[Dict[str, Any]]:
        _, schema = SECTIONS[section]
        rows = await self._repository(section).list_all()
        return [schema.model_validate(row).model_dump(mode="json", by_alias=True) for row in rows]

    async def _stored_settings(self) -> Optional[Dict[str, Any]]:
        stored = await self.settings_repo.get(APP_SETTINGS_KEY)
        return stored.value if stored else None

    async def export_all(self) -> Dict[str, Any]:
        """Dump every table into one document."""
        data: Dict[str, Any] = {
            "exportDate": iso_now(),
            "version": settings.EXPORT_VERSION,
        }
        for section in SECTIONS:
            data[wire_name(section)] = await self._export_section(section)
        data["settings"] = await self._stored_settings()
        return data

    async def export_module(self, module: str) -> Dict[str, Any]:
        """
        Dump the tables of one module.

        Raises:
            ValueError: if the module is unknown
        """
        if module not in MODULES:
            raise ValueError(f"Unknown module: {module}")

        data: Dict[str, Any] = {}
        for section in MODULES[module]:
            data[wire_name(section)] = await self._export_section(section)
        data["exportDate"] = iso_now()
        data["version"] = settings.EXPORT_VERSION
        data["module"] = module
        return data

    # Import

    async def _clear_section(self, section: str) -> int:
        return await self._repository(section).delete_all()

    def _row_values(self, section: str, row: BaseModel) -> Dict[str, Any]:
        values = row.model_dump(exclude={"weeks"} if section == "projects" else None)
        for column in TIMESTAMP_COLUMNS:
            if column in values and values[column] is None:
                values[column] = now_ms()

        if section == "projects" and values.get("updated_at") is None:
            values["updated_at"] = values["created_at"]
        elif section == "qualifications" and not values.get("id"):
            values["id"] = f"{values['employee_id']}-{values['test_id']}"
        elif section == "absence_limits" and not values.get("id"):
            values["id"] = limit_id(values["employee_id"], values["absence_type_id"], values["year"])
        elif section == "holidays":
            values["id"] = values["date"].isoformat()
        return values

    async def _insert_section(self, section: str, rows: List[BaseModel]) -> int:
        values = [self._row_values(section, row) for row in rows]

        if section == "absences":
            holiday_repo = BaseRepository(Holiday, self.session)
            holidays = [holiday.date for holiday in await holiday_repo.list_all()]
            for row in values:
                if row["work_days"] is None:
                    row["work_days"] = float(count_work_days(row["start_date"], row["end_date"], holidays))

        count = await self._repository(section).bulk_create(values)

        if section == "projects":
            project_repo = ProjectRepository(self.session)
            for project in rows:
                if project.weeks:
                    await project_repo.replace_weeks(
                        project.id,
                        {week: week_columns(data) for week, data in project.weeks.items()},
                    )
        return count

    async def _write_settings(self, value: Dict[str, Any]) -> None:
        await self.settings_repo.upsert(
            APP_SETTINGS_KEY, create_values={"value": value}, update_values={"value": value}
        )

    async def import_all(self, payload: DataPayload) -> ImportResult:
        """
        Full reload: every section present in the payload replaces its table.
        Sections that are absent are left untouched.
        """
        present = set(payload.present_sections())
        imported: Dict[str, int] = {}

        for section in SECTIONS:
            if section not in present:
                continue
            await self._clear_section(section)
            imported[wire_name(section)] = await self._insert_section(section, getattr(payload, section))

        if payload.settings is not None:
            await self._write_settings(payload.settings)
            imported["settings"] = 1

        await self.commit()
        logger.info("Data imported", extra={"sections": imported})
        return ImportResult(imported=imported)

    async def import_module(self, module: str, payload: DataPayload) -> ImportResult:
        """
        Replace the tables of one module: every table of the module is
        cleared, then the supplied rows are inserted.

        Raises:
            ValueError: if the module is unknown
        """
        if module not in MODULES:
            raise ValueError(f"Unknown module: {module}")

        sections = MODULES[module]
        for section in reversed(sections):
            await self._clear_section(section)

        imported: Dict[str, int] = {}
        for section in sections:
            rows = getattr(payload, section) or []
            imported[wire_name(section)] = await self._insert_section(section, rows)

        await self.commit()
        logger.info("Module imported", extra={"data_module": module, "sections": imported})
        return ImportResult(module=module, imported=imported)

    # Clearing

    async def clear_planning(self) -> ClearResult:
        """Delete projects, their weeks and every reference list."""
        deleted = {table: await self._clear_section(table) for table in PLANNING_TABLES}
        await self.commit()
        logger.info("Planning data cleared", extra={"deleted": deleted})
        return ClearResult(deleted=deleted)

    async def clear_table(self, table: str) -> ClearResult:
        """
        Delete every row of one allow-listed table; clearing projects also
        clears their week records.

        Raises:
            ValueError: if the table is not clearable
        """
        model = CLEARABLE_TABLES.get(table)
        if model is None:
            raise ValueError(f"Invalid table name: {table}")

        if model is Project:
            deleted = await ProjectRepository(self.session).delete_all()
        else:
            deleted = await BaseRepository(model, self.session).delete_all()
        await self.commit()

        logger.info("Table cleared", extra={"table": table, "deleted": deleted})
        return ClearResult(table=table, deleted={table: deleted})
