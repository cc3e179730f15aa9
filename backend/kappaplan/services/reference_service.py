"""
Reference list service shared by customers, types, parts and tests.
"""

from typing import List, Optional, Type
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.services.base_service import BaseService
from kappaplan.db.repositories.reference_repository import ReferenceRepository
from kappaplan.models.reference import ReferenceItemMixin
from kappaplan.schemas.reference import (
    ReferenceItemCreate,
    ReferenceItemUpdate,
    ReferenceItemResponse,
)


class ReferenceService(BaseService):
    """Service for one reference list table."""

    def __init__(self, model: Type[ReferenceItemMixin], session: AsyncSession):
        super().__init__(session)
        self.repo = ReferenceRepository(model, session)

    async def list_items(self) -> List[ReferenceItemResponse]:
        """List items ordered by name."""
        items = await self.repo.list()
        return [ReferenceItemResponse.model_validate(item) for item in items]

    async def get_item(self, item_id: str) -> Optional[ReferenceItemResponse]:
        """Get item by ID."""
        item = await self.repo.get(item_id)
        if not item:
            return None
        return ReferenceItemResponse.model_validate(item)

    async def upsert_item(self, item_data: ReferenceItemCreate) -> ReferenceItemResponse:
        """Insert a new item; an existing id only has its name changed."""
        item = await self.repo.upsert(
            item_data.id,
            create_values={
                "name": item_data.name,
                "created_at": self.timestamp_or_now(item_data.created_at),
            },
            update_values={"name": item_data.name},
        )
        await self.commit()
        return ReferenceItemResponse.model_validate(item)

    async def update_item(self, item_id: str, item_data: ReferenceItemUpdate) -> None:
        """Rename an item. A missing id is ignored."""
        await self.repo.update(item_id, name=item_data.name)
        await self.commit()

    async def delete_item(self, item_id: str) -> bool:
        """Delete an item."""
        deleted = await self.repo.delete(item_id)
        await self.commit()
        return deleted
