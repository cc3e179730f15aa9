"""
Key-value rows for user preferences and application settings.
Values are stored as JSON.
"""

from sqlalchemy import Column, String, JSON

from kappaplan.db.base import Base

APP_SETTINGS_KEY = "app-settings"


class UserPreference(Base):
    """UI preference persisted server-side."""

    __tablename__ = "user_preferences"

    key = Column(String(100), primary_key=True)
    value = Column(JSON, nullable=True)


class AppSetting(Base):
    """Application-wide settings document."""

    __tablename__ = "settings"

    key = Column(String(100), primary_key=True)
    value = Column(JSON, nullable=False)
