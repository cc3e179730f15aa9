"""
Schedule models: shift assignments, reusable templates and extra tasks.
"""

from sqlalchemy import Column, String, Integer, BigInteger, Float, Text, JSON
import enum

from kappaplan.db.base import Base

EXTRA_TASK_PREFIX = "extra-"


class AssignmentScope(str, enum.Enum):
    """How much of a project an assignment covers."""
    PROJECT = "project"
    AUDIT = "audit"
    SPECIFIC = "specific"


class ScheduleAssignment(Base):
    """Binds an employee to a project (or extra task) for a week and shift."""

    __tablename__ = "schedule_assignments"

    id = Column(String(64), primary_key=True, index=True)
    employee_id = Column(String(64), nullable=False, index=True)
    project_id = Column(String(80), nullable=False, index=True)
    test_id = Column(String(64), nullable=True)
    part_id = Column(String(64), nullable=True)
    week = Column(String(16), nullable=False, index=True)
    shift = Column(Integer, nullable=False, default=1)
    scope = Column(String(20), nullable=False, default=AssignmentScope.PROJECT.value)
    note = Column(Text, nullable=True)
    created_at = Column(BigInteger, nullable=False)
    updated_at = Column(BigInteger, nullable=True)


class ScheduleTemplate(Base):
    """Saved schedule layout that can be re-applied to other weeks."""

    __tablename__ = "schedule_templates"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    data = Column(JSON, nullable=False, default=dict)
    created_at = Column(BigInteger, nullable=False)


class ExtraTask(Base):
    """Work not tied to a real project; assignments address it as ``extra-<id>``."""

    __tablename__ = "extra_tasks"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    week = Column(String(16), nullable=False, index=True)
    time_per_unit = Column(Float, nullable=False, default=15)
    units = Column(Integer, nullable=False, default=1)
    comment = Column(Text, nullable=True)
    created_at = Column(BigInteger, nullable=False)

    @property
    def assignment_project_id(self) -> str:
        return f"{EXTRA_TASK_PREFIX}{self.id}"
