"""
Reference list controller (customers, types, parts, tests).
"""

from typing import List, Optional, Type
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.controllers.base_controller import BaseController
from kappaplan.services.reference_service import ReferenceService
from kappaplan.models.reference import ReferenceItemMixin
from kappaplan.schemas.reference import (
    ReferenceItemCreate,
    ReferenceItemUpdate,
    ReferenceItemResponse,
)


class ReferenceController(BaseController):
    """Controller for one reference list."""

    def __init__(self, model: Type[ReferenceItemMixin], session: AsyncSession):
        self.reference_service = ReferenceService(model, session)

    async def list_items(self) -> List[ReferenceItemResponse]:
        return await self.reference_service.list_items()

    async def get_item(self, item_id: str) -> Optional[ReferenceItemResponse]:
        return await self.reference_service.get_item(item_id)

    async def upsert_item(self, item_data: ReferenceItemCreate) -> ReferenceItemResponse:
        return await self.reference_service.upsert_item(item_data)

    async def update_item(self, item_id: str, item_data: ReferenceItemUpdate) -> None:
        await self.reference_service.update_item(item_id, item_data)

    async def delete_item(self, item_id: str) -> bool:
        return await self.reference_service.delete_item(item_id)
