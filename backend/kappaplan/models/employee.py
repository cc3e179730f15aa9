"""
Employee models: core record, extended HR details and test qualifications.
"""

from sqlalchemy import Column, String, Integer, BigInteger, Float, Text, UniqueConstraint
import enum

from kappaplan.db.base import Base


class EmployeeStatus(str, enum.Enum):
    """Employee availability enumeration."""
    AVAILABLE = "available"
    VACATION = "vacation"
    SICK = "sick"
    UNAVAILABLE = "unavailable"


class EmployeeRole(str, enum.Enum):
    """Employee role enumeration."""
    WORKER = "worker"
    LEADER = "leader"
    ADMIN = "admin"


class Employee(Base):
    """Employee that can be assigned to project shifts."""

    __tablename__ = "employees"

    id = Column(String(64), primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    color = Column(String(20), nullable=True)
    status = Column(String(20), nullable=False, default=EmployeeStatus.AVAILABLE.value)
    suggested_shift = Column(Integer, nullable=True)
    shift_system = Column(Integer, nullable=False, default=2)
    role = Column(String(20), nullable=False, default=EmployeeRole.WORKER.value)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    department = Column(String(100), nullable=True)
    created_at = Column(BigInteger, nullable=False)


class EmployeeDetails(Base):
    """Extended HR fields, one row per employee."""

    __tablename__ = "employee_details"

    employee_id = Column(String(64), primary_key=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    birth_date = Column(String(10), nullable=True)
    hire_date = Column(String(10), nullable=True)
    department = Column(String(100), nullable=True)
    position = Column(String(100), nullable=True)
    contract_type = Column(String(50), nullable=True)
    working_hours = Column(Float, nullable=False, default=40)
    notes = Column(Text, nullable=True)


class EmployeeQualification(Base):
    """Certification of an employee for a test."""

    __tablename__ = "employee_qualifications"
    __table_args__ = (
        UniqueConstraint("employee_id", "test_id", name="uq_employee_qualifications_employee_test"),
    )

    id = Column(String(140), primary_key=True)
    employee_id = Column(String(64), nullable=False, index=True)
    test_id = Column(String(64), nullable=False)
    level = Column(Integer, nullable=False, default=1)
    certified_at = Column(String(10), nullable=True)
    expires_at = Column(String(10), nullable=True)
