"""
Reference list API endpoints.
One router per list, built by a factory over the list's model.
"""

from typing import List, Type
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.db.session import get_db
from kappaplan.controllers.reference_controller import ReferenceController
from kappaplan.models.reference import ReferenceItemMixin, Customer, ProductType, Part, Test
from kappaplan.schemas.common import SuccessResponse
from kappaplan.schemas.reference import (
    ReferenceItemCreate,
    ReferenceItemUpdate,
    ReferenceItemResponse,
)


def create_reference_router(model: Type[ReferenceItemMixin], entity_name: str) -> APIRouter:
    """Build the CRUD router of one reference list."""
    router = APIRouter()
    not_found = f"{entity_name} not found"

    @router.get("", response_model=List[ReferenceItemResponse])
    async def list_items(
        db: AsyncSession = Depends(get_db),
    ) -> List[ReferenceItemResponse]:
        controller = ReferenceController(model, db)
        return await controller.list_items()

    @router.get("/{item_id}", response_model=ReferenceItemResponse)
    async def get_item(
        item_id: str,
        db: AsyncSession = Depends(get_db),
    ) -> ReferenceItemResponse:
        controller = ReferenceController(model, db)
        item = await controller.get_item(item_id)
        if not item:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=not_found,
            )
        return item

    @router.post("", response_model=ReferenceItemResponse, status_code=status.HTTP_201_CREATED)
    async def upsert_item(
        item_data: ReferenceItemCreate,
        db: AsyncSession = Depends(get_db),
    ) -> ReferenceItemResponse:
        controller = ReferenceController(model, db)
        return await controller.upsert_item(item_data)

    @router.put("/{item_id}", response_model=SuccessResponse)
    async def update_item(
        item_id: str,
        item_data: ReferenceItemUpdate,
        db: AsyncSession = Depends(get_db),
    ) -> SuccessResponse:
        controller = ReferenceController(model, db)
        await controller.update_item(item_id, item_data)
        return SuccessResponse()

    @router.delete("/{item_id}", response_model=SuccessResponse)
    async def delete_item(
        item_id: str,
        db: AsyncSession = Depends(get_db),
    ) -> SuccessResponse:
        controller = ReferenceController(model, db)
        await controller.delete_item(item_id)
        return SuccessResponse()

    return router


customers_router = create_reference_router(Customer, "Customer")
types_router = create_reference_router(ProductType, "Type")
parts_router = create_reference_router(Part, "Part")
tests_router = create_reference_router(Test, "Test")
