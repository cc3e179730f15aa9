"""
Project comments and the user activity log.
"""

from sqlalchemy import Column, String, BigInteger, Text

from kappaplan.db.base import Base


class Comment(Base):
    """Free-text comment on a project week."""

    __tablename__ = "comments"

    id = Column(String(64), primary_key=True)
    project_id = Column(String(64), nullable=False, index=True)
    week = Column(String(16), nullable=False)
    text = Column(Text, nullable=False, default="")
    created_at = Column(BigInteger, nullable=False)


class ActivityLog(Base):
    """Audit trail entry written by the front end."""

    __tablename__ = "logs"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(64), nullable=True)
    user_name = Column(String(100), nullable=True)
    action = Column(String(50), nullable=False)
    entity_type = Column(String(50), nullable=True)
    entity_name = Column(String(255), nullable=True)
    details = Column(Text, nullable=True)
    timestamp = Column(BigInteger, nullable=False, index=True)
