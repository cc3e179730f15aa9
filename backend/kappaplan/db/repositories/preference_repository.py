"""
Key-value repositories for user preferences and application settings.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.db.repositories.base_repository import BaseRepository
from kappaplan.models.preference import UserPreference, AppSetting


class PreferenceRepository(BaseRepository[UserPreference]):
    """Repository for user preferences keyed by name."""

    id_attribute = "key"
    order_by = ("key",)

    def __init__(self, session: AsyncSession):
        super().__init__(UserPreference, session)


class SettingsRepository(BaseRepository[AppSetting]):
    """Repository for application settings documents."""

    id_attribute = "key"
    order_by = ("key",)

    def __init__(self, session: AsyncSession):
        super().__init__(AppSetting, session)
