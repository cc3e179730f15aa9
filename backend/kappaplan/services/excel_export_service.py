"""
Excel export service for the planning grid and the activity log.
"""

import io
from datetime import datetime, timezone
from typing import Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from kappaplan.db.repositories.project_repository import ProjectRepository
from kappaplan.db.repositories.reference_repository import ReferenceRepository
from kappaplan.db.repositories.activity_repository import CommentRepository, ActivityLogRepository
from kappaplan.models.project import Project
from kappaplan.models.reference import Customer, ProductType, Part, Test
from kappaplan.utils.week_keys import WEEKS_PER_YEAR, format_week_key, is_week_of_year, week_key_for_date
from kappaplan.core.logging import get_logger

logger = get_logger(__name__)

HEADER_FILL = PatternFill(start_color="0097AC", end_color="0097AC", fill_type="solid")
CURRENT_WEEK_FILL = PatternFill(start_color="007589", end_color="007589", fill_type="solid")
COMMENT_HEADER_FILL = PatternFill(start_color="333333", end_color="333333", fill_type="solid")
HEADER_FONT = Font(name="Arial", size=9, bold=True, color="FFFFFF")
THIN_SIDE = Side(style="thin", color="000000")
THIN_BORDER = Border(left=THIN_SIDE, right=THIN_SIDE, top=THIN_SIDE, bottom=THIN_SIDE)
FIXED_COLUMNS = ["Customer", "Type", "Part", "Test", "Status"]
PLANNING_HEADER_ROW = 4


def _format_ms(timestamp: Optional[int]) -> str:
    if not timestamp:
        return ""
    return datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def completion_status(total_ist: int, total_soll: int) -> str:
    """Completion of a project over the year, e.g. ``75%``; ``-`` without targets."""
    if total_soll == 0:
        return "-"
    return f"{round(total_ist / total_soll * 100)}%"


class ExcelExportService:
    """Service for exporting planning data and logs to Excel."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.project_repo = ProjectRepository(session)
        self.comment_repo = CommentRepository(session)
        self.log_repo = ActivityLogRepository(session)

    async def _names(self, model) -> Dict[str, str]:
        items = await ReferenceRepository(model, self.session).list()
        return {item.id: item.name for item in items}

    async def export_planning_to_excel(self, year: int) -> io.BytesIO:
        """
        Build the planning workbook of a year: one row per visible project with
        IST/SOLL columns for KW01..KW52, plus a sheet with that year's comments.
        """
        projects = [project for project in await self.project_repo.list() if not project.hidden]
        customers = await self._names(Customer)
        types = await self._names(ProductType)
        parts = await self._names(Part)
        tests = await self._names(Test)

        wb = Workbook()
        ws = wb.active
        ws.title = "Kappa Planning"

        total_columns = len(FIXED_COLUMNS) + 2 * WEEKS_PER_YEAR
        last_column = get_column_letter(total_columns)

        ws.merge_cells(f"A1:{last_column}1")
        ws["A1"] = f"Kappa Planning {year}"
        ws["A1"].font = Font(name="Arial", size=16, bold=True, color="FFFFFF")
        ws["A1"].fill = HEADER_FILL
        ws["A1"].alignment = Alignment(horizontal="center", vertical="center")
        ws.row_dimensions[1].height = 35

        ws.merge_cells(f"A2:{last_column}2")
        ws["A2"] = f"Export: {datetime.now(timezone.utc).date().isoformat()} | Year: {year}"
        ws["A2"].font = Font(name="Arial", size=10, italic=True, color="666666")
        ws["A2"].alignment = Alignment(horizontal="center", vertical="center")

        self._write_planning_headers(ws, year)
        self._write_planning_rows(ws, year, projects, customers, types, parts, tests)

        ws.freeze_panes = ws.cell(row=PLANNING_HEADER_ROW + 1, column=len(FIXED_COLUMNS) + 1)

        comments_ws = wb.create_sheet("Comments")
        await self._write_comments(comments_ws, year, projects, customers, parts, tests)

        output = io.BytesIO()
        wb.save(output)
        output.seek(0)

        logger.info("Planning workbook exported", extra={"year": year, "projects": len(projects)})
        return output

    def _write_planning_headers(self, ws, year: int) -> None:
        """Write the column header row with the current week highlighted."""
        current_week = week_key_for_date(datetime.now(timezone.utc).date())
        headers = list(FIXED_COLUMNS)
        for week in range(1, WEEKS_PER_YEAR + 1):
            headers.append(f"KW{week:02d} IST")
            headers.append(f"KW{week:02d} SOLL")

        for col, header in enumerate(headers, start=1):
            cell = ws.cell(row=PLANNING_HEADER_ROW, column=col, value=header)
            cell.font = HEADER_FONT
            cell.fill = HEADER_FILL
            cell.alignment = Alignment(horizontal="center", vertical="center", wrap_text=True)
            cell.border = THIN_BORDER

            if col > len(FIXED_COLUMNS):
                week = (col - len(FIXED_COLUMNS) - 1) // 2 + 1
                if format_week_key(year, week) == current_week:
                    cell.fill = CURRENT_WEEK_FILL

        widths = [18, 12, 18, 18, 10]
        for col, width in enumerate(widths, start=1):
            ws.column_dimensions[get_column_letter(col)].width = width
        for col in range(len(FIXED_COLUMNS) + 1, len(headers) + 1):
            ws.column_dimensions[get_column_letter(col)].width = 7
        ws.row_dimensions[PLANNING_HEADER_ROW].height = 30

    def _write_planning_rows(
        self,
        ws,
        year: int,
        projects: List[Project],
        customers: Dict[str, str],
        types: Dict[str, str],
        parts: Dict[str, str],
        tests: Dict[str, str],
    ) -> None:
        row = PLANNING_HEADER_ROW + 1
        for project in projects:
            weeks = {week.week: week for week in project.weeks}
            values: List[object] = [
                customers.get(project.customer_id, "-"),
                types.get(project.type_id, "-"),
                parts.get(project.part_id, "-"),
                tests.get(project.test_id, "-"),
                None,
            ]

            total_ist = total_soll = 0
            for week_number in range(1, WEEKS_PER_YEAR + 1):
                week = weeks.get(format_week_key(year, week_number))
                ist = week.ist if week else 0
                soll = week.soll if week else 0
                total_ist += ist
                total_soll += soll
                values.extend([ist, soll])
            values[4] = completion_status(total_ist, total_soll)

            for col, value in enumerate(values, start=1):
                cell = ws.cell(row=row, column=col, value=value)
                cell.font = Font(name="Arial", size=9)
                cell.border = THIN_BORDER
                if col > len(FIXED_COLUMNS):
                    cell.alignment = Alignment(horizontal="center")
            row += 1

    async def _write_comments(
        self,
        ws,
        year: int,
        projects: List[Project],
        customers: Dict[str, str],
        parts: Dict[str, str],
        tests: Dict[str, str],
    ) -> None:
        """Write the comments of the exported projects that belong to the year."""
        ws.merge_cells("A1:E1")
        ws["A1"] = f"Comments - Kappa Planning {year}"
        ws["A1"].font = Font(name="Arial", size=16, bold=True, color="FFFFFF")
        ws["A1"].fill = HEADER_FILL
        ws["A1"].alignment = Alignment(horizontal="center", vertical="center")

        for col, header in enumerate(["Project", "Test", "Week", "Comment", "Date"], start=1):
            cell = ws.cell(row=3, column=col, value=header)
            cell.font = Font(name="Arial", size=10, bold=True, color="FFFFFF")
            cell.fill = COMMENT_HEADER_FILL
            cell.alignment = Alignment(horizontal="center", vertical="center")
        for col, width in enumerate([18, 18, 12, 50, 18], start=1):
            ws.column_dimensions[get_column_letter(col)].width = width

        by_id = {project.id: project for project in projects}
        row = 4
        for comment in await self.comment_repo.list():
            project = by_id.get(comment.project_id)
            if project is None:
                continue
            if "-" in comment.week and not is_week_of_year(comment.week, year):
                continue

            ws.cell(row=row, column=1, value=(
                f"{customers.get(project.customer_id, '-')} / {parts.get(project.part_id, '-')}"
            ))
            ws.cell(row=row, column=2, value=tests.get(project.test_id, "-"))
            ws.cell(row=row, column=3, value=comment.week)
            text_cell = ws.cell(row=row, column=4, value=comment.text)
            text_cell.alignment = Alignment(wrap_text=True)
            ws.cell(row=row, column=5, value=_format_ms(comment.created_at)[:10])
            row += 1

    async def export_logs_to_excel(self) -> io.BytesIO:
        """Build a workbook with every activity log entry, newest first."""
        wb = Workbook()
        ws = wb.active
        ws.title = "Activity Logs"

        columns = [
            ("Timestamp", 20),
            ("User", 15),
            ("Action", 12),
            ("Entity Type", 12),
            ("Entity Name", 20),
            ("Details", 30),
        ]
        for col, (header, width) in enumerate(columns, start=1):
            cell = ws.cell(row=1, column=col, value=header)
            cell.font = Font(bold=True, color="FFFFFF")
            cell.fill = HEADER_FILL
            ws.column_dimensions[get_column_letter(col)].width = width

        for entry in await self.log_repo.list():
            ws.append([
                _format_ms(entry.timestamp),
                entry.user_name,
                entry.action,
                entry.entity_type,
                entry.entity_name,
                entry.details,
            ])

        output = io.BytesIO()
        wb.save(output)
        output.seek(0)
        return output
