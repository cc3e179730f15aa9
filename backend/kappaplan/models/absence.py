"""
Absence management models: type catalogue, yearly limits, absence records
and public holidays.
"""

from sqlalchemy import Column, String, Integer, BigInteger, Boolean, Float, Date, Text, UniqueConstraint
import enum

from kappaplan.db.base import Base


class AbsenceStatus(str, enum.Enum):
    """Absence approval status."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class AbsenceType(Base):
    """Catalogue entry such as vacation or sick leave."""

    __tablename__ = "absence_types"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    icon = Column(String(20), nullable=True)
    color = Column(String(20), nullable=True)
    default_days = Column(Float, nullable=False, default=0)
    is_paid = Column(Boolean, nullable=False, default=True)
    requires_approval = Column(Boolean, nullable=False, default=True)
    is_active = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=99)


class AbsenceLimit(Base):
    """Entitlement (total) and consumption (used) of an absence type per employee and year."""

    __tablename__ = "employee_absence_limits"
    __table_args__ = (
        UniqueConstraint("employee_id", "absence_type_id", "year", name="uq_absence_limits_employee_type_year"),
    )

    id = Column(String(160), primary_key=True)
    employee_id = Column(String(64), nullable=False, index=True)
    absence_type_id = Column(String(64), nullable=False)
    year = Column(Integer, nullable=False, index=True)
    total_days = Column(Float, nullable=False, default=0)
    used_days = Column(Float, nullable=False, default=0)


class Absence(Base):
    """An employee's absence over a date range."""

    __tablename__ = "absences"

    id = Column(String(64), primary_key=True)
    employee_id = Column(String(64), nullable=False, index=True)
    absence_type_id = Column(String(64), nullable=False)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False)
    work_days = Column(Float, nullable=False, default=1)
    status = Column(String(20), nullable=False, default=AbsenceStatus.APPROVED.value)
    note = Column(Text, nullable=True)
    created_at = Column(BigInteger, nullable=True)
    approved_at = Column(BigInteger, nullable=True)
    approved_by = Column(String(100), nullable=True)


class Holiday(Base):
    """Public holiday; the id is the ISO date."""

    __tablename__ = "holidays"

    id = Column(String(10), primary_key=True)
    date = Column(Date, nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False)
    is_movable = Column(Boolean, nullable=False, default=False)
