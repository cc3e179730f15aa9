"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from kappaplan.models.reference import Customer, ProductType, Part, Test
from kappaplan.models.project import Project, ProjectWeek
from kappaplan.models.employee import Employee, EmployeeDetails, EmployeeQualification
from kappaplan.models.schedule import ScheduleAssignment, ScheduleTemplate, ExtraTask
from kappaplan.models.absence import AbsenceType, AbsenceLimit, Absence, Holiday
from kappaplan.models.activity import Comment, ActivityLog
from kappaplan.models.preference import UserPreference, AppSetting

__all__ = [
    "Customer",
    "ProductType",
    "Part",
    "Test",
    "Project",
    "ProjectWeek",
    "Employee",
    "EmployeeDetails",
    "EmployeeQualification",
    "ScheduleAssignment",
    "ScheduleTemplate",
    "ExtraTask",
    "AbsenceType",
    "AbsenceLimit",
    "Absence",
    "Holiday",
    "Comment",
    "ActivityLog",
    "UserPreference",
    "AppSetting",
]
