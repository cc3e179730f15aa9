"""
Repository shared by the reference list tables (customers, types, parts, tests).
"""

from typing import Type
from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.db.repositories.base_repository import BaseRepository
from kappaplan.models.reference import ReferenceItemMixin


class ReferenceRepository(BaseRepository):
    """Repository for a reference list table, ordered by name."""

    order_by = ("name",)

    def __init__(self, model: Type[ReferenceItemMixin], session: AsyncSession):
        super().__init__(model, session)
