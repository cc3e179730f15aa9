"""
Project model with sparse per-week actual/target records.
"""

from sqlalchemy import Column, String, Integer, BigInteger, Boolean, Float, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from kappaplan.db.base import Base


class Project(Base):
    """A tracked customer/type/part/test combination."""

    __tablename__ = "projects"

    id = Column(String(64), primary_key=True, index=True)
    customer_id = Column(String(64), nullable=False, index=True)
    type_id = Column(String(64), nullable=False, index=True)
    part_id = Column(String(64), nullable=False)
    test_id = Column(String(64), nullable=False, index=True)
    time_per_unit = Column(Float, nullable=False, default=0)  # minutes per unit
    hidden = Column(Boolean, nullable=False, default=False)
    created_at = Column(BigInteger, nullable=False)
    updated_at = Column(BigInteger, nullable=False)

    # Week rows are written through ProjectRepository only
    weeks = relationship(
        "ProjectWeek",
        viewonly=True,
        lazy="selectin",
        order_by="ProjectWeek.week",
    )


class ProjectWeek(Base):
    """Actual (ist) versus target (soll) quantities of a project in one week."""

    __tablename__ = "project_weeks"
    __table_args__ = (
        UniqueConstraint("project_id", "week", name="uq_project_weeks_project_week"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    week = Column(String(16), nullable=False, index=True)
    ist = Column(Integer, nullable=False, default=0)
    soll = Column(Integer, nullable=False, default=0)
    stoppage = Column(Boolean, nullable=False, default=False)
    production_lack = Column(Boolean, nullable=False, default=False)
    comment = Column(Text, nullable=True)
