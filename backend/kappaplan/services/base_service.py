"""
Base service class.
Services hold the business rules of one resource group and own the
transaction boundary: repositories only flush, services commit.
"""

from abc import ABC
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from kappaplan.utils.timestamps import now_ms


class BaseService(ABC):
    """Base service class for all database-backed services."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self) -> None:
        """Commit the unit of work started by this request."""
        await self.session.commit()

    @staticmethod
    def timestamp_or_now(value: Optional[int]) -> int:
        """Use a client supplied epoch-millisecond timestamp, or now."""
        return value if value is not None else now_ms()
