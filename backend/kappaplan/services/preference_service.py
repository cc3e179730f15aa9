"""
Preference service: per-key UI preferences and the app settings document.
"""

from typing import Any, Dict
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.services.base_service import BaseService
from kappaplan.db.repositories.preference_repository import PreferenceRepository, SettingsRepository
from kappaplan.models.preference import APP_SETTINGS_KEY
from kappaplan.schemas.preference import DEFAULT_APP_SETTINGS, PreferenceEntry


class PreferenceService(BaseService):
    """Service for preferences and settings."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.preference_repo = PreferenceRepository(session)
        self.settings_repo = SettingsRepository(session)

    async def get_preferences(self) -> Dict[str, Any]:
        """All preferences as a key -> value map."""
        preferences = await self.preference_repo.list()
        return {preference.key: preference.value for preference in preferences}

    async def get_preference(self, key: str) -> Any:
        """Value of one preference, or None."""
        preference = await self.preference_repo.get(key)
        return preference.value if preference else None

    async def set_preference(self, key: str, value: Any) -> PreferenceEntry:
        """Store the value of a preference."""
        preference = await self.preference_repo.upsert(
            key, create_values={"value": value}, update_values={"value": value}
        )
        await self.commit()
        return PreferenceEntry.model_validate(preference)

    async def delete_preference(self, key: str) -> bool:
        """Forget a preference."""
        deleted = await self.preference_repo.delete(key)
        await self.commit()
        return deleted

    async def get_settings(self) -> Dict[str, Any]:
        """The stored settings document, or the defaults."""
        stored = await self.settings_repo.get(APP_SETTINGS_KEY)
        if stored is None:
            return dict(DEFAULT_APP_SETTINGS)
        return stored.value

    async def replace_settings(self, value: Dict[str, Any]) -> Dict[str, Any]:
        """Replace the settings document."""
        await self.settings_repo.upsert(
            APP_SETTINGS_KEY, create_values={"value": value}, update_values={"value": value}
        )
        await self.commit()
        return value
