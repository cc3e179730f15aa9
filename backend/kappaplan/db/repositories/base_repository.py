"""
Base repository class with common CRUD operations.
Repositories handle database access using async SQLAlchemy sessions.
"""

from typing import Any, Dict, Generic, Iterable, TypeVar, Type, Optional, List, Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete

from kappaplan.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with common CRUD operations."""

    # Name of the primary key attribute
    id_attribute: str = "id"
    # Attribute names used to order list() results
    order_by: Sequence[str] = ()

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    @property
    def id_column(self):
        return getattr(self.model, self.id_attribute)

    def _ordering(self) -> list:
        ordering = []
        for name in self.order_by:
            if name.startswith("-"):
                ordering.append(getattr(self.model, name[1:]).desc())
            else:
                ordering.append(getattr(self.model, name))
        return ordering

    async def create(self, **kwargs) -> ModelType:
        """
        Create a new record.

        Args:
            **kwargs: Model attributes

        Returns:
            Created model instance
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def get(self, id: Any) -> Optional[ModelType]:
        """
        Get a record by primary key.

        Args:
            id: Record ID

        Returns:
            Model instance or None
        """
        result = await self.session.execute(
            select(self.model).where(self.id_column == id)
        )
        return result.scalar_one_or_none()

    async def exists(self, id: Any) -> bool:
        """Check whether a record with the given primary key exists."""
        result = await self.session.execute(
            select(self.id_column).where(self.id_column == id)
        )
        return result.first() is not None

    async def list(self, **filters) -> List[ModelType]:
        """
        List records in natural order, optionally filtered by equality.

        Args:
            **filters: Filter criteria; None values are ignored

        Returns:
            List of model instances
        """
        query = select(self.model)

        for key, value in filters.items():
            if value is not None and hasattr(self.model, key):
                query = query.where(getattr(self.model, key) == value)

        query = query.order_by(*self._ordering())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def update(self, id: Any, **kwargs) -> Optional[ModelType]:
        """
        Update a record. A missing id is a no-op.

        Args:
            id: Record ID
            **kwargs: Attributes to update

        Returns:
            Updated model instance or None
        """
        if kwargs:
            await self.session.execute(
                update(self.model)
                .where(self.id_column == id)
                .values(**kwargs)
                .execution_options(synchronize_session=False)
            )
            await self.session.flush()
        instance = await self.get(id)
        if instance is not None:
            await self.session.refresh(instance)
        return instance

    async def upsert(
        self,
        id: Any,
        create_values: Dict[str, Any],
        update_values: Dict[str, Any],
    ) -> ModelType:
        """
        Update the record if it exists, otherwise insert it.

        Args:
            id: Record ID
            create_values: Attributes used for a new record (without the id)
            update_values: Attributes changed on an existing record

        Returns:
            The stored model instance
        """
        if await self.exists(id):
            return await self.update(id, **update_values)
        return await self.create(**{self.id_attribute: id, **create_values})

    async def delete(self, id: Any) -> bool:
        """
        Delete a record.

        Args:
            id: Record ID

        Returns:
            True if deleted, False if not found
        """
        result = await self.session.execute(
            delete(self.model).where(self.id_column == id)
        )
        await self.session.flush()
        return result.rowcount > 0

    async def list_all(self) -> List[ModelType]:
        """All rows, unordered beyond the natural order."""
        return await self.list()

    async def delete_all(self) -> int:
        """Delete every row of the table. Returns the number of rows removed."""
        result = await self.session.execute(delete(self.model))
        await self.session.flush()
        return result.rowcount

    async def bulk_create(self, rows: Iterable[Dict[str, Any]]) -> int:
        """Insert many rows at once. Returns the number of rows added."""
        instances = [self.model(**row) for row in rows]
        self.session.add_all(instances)
        await self.session.flush()
        return len(instances)
