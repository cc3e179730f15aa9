"""
API router that aggregates all endpoint routers.
"""

from fastapi import APIRouter

from kappaplan.api.v1.endpoints import (
    health,
    reference,
    projects,
    employees,
    schedule,
    absences,
    activity,
    data,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])

# Planning
api_router.include_router(reference.customers_router, prefix="/customers", tags=["customers"])
api_router.include_router(reference.types_router, prefix="/types", tags=["types"])
api_router.include_router(reference.parts_router, prefix="/parts", tags=["parts"])
api_router.include_router(reference.tests_router, prefix="/tests", tags=["tests"])
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(activity.comments_router, prefix="/comments", tags=["comments"])

# Workforce
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])
api_router.include_router(employees.details_router, prefix="/employee-details", tags=["employees"])
api_router.include_router(employees.qualifications_router, prefix="/qualifications", tags=["employees"])
api_router.include_router(schedule.assignments_router, prefix="/schedule-assignments", tags=["schedule"])
api_router.include_router(schedule.templates_router, prefix="/templates", tags=["schedule"])
api_router.include_router(schedule.extra_tasks_router, prefix="/extra-tasks", tags=["schedule"])
api_router.include_router(absences.types_router, prefix="/absence-types", tags=["absences"])
api_router.include_router(absences.limits_router, prefix="/absence-limits", tags=["absences"])
api_router.include_router(absences.router, prefix="/absences", tags=["absences"])
api_router.include_router(absences.holidays_router, prefix="/holidays", tags=["absences"])

# Activity and settings
api_router.include_router(activity.logs_router, prefix="/logs", tags=["logs"])
api_router.include_router(activity.preferences_router, prefix="/preferences", tags=["preferences"])
api_router.include_router(activity.settings_router, prefix="/settings", tags=["settings"])

# Bulk data
api_router.include_router(data.router, prefix="/data", tags=["data"])
