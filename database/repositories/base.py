"""
Base repository with common CRUD operations.

Provides a generic base class for the ledger repositories to reduce code duplication.
"""
from typing import TypeVar, Generic, Optional, List, Type
from abc import ABC

from sqlalchemy import delete, select, func
from sqlalchemy.ext.asyncio import AsyncSession

from database.base import Base

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(ABC, Generic[ModelType]):
    """
    Abstract base repository with common CRUD operations.

    Provides:
    - get_by_id: Get single entity by ID
    - get_all: Get all entities in chronological order
    - add: Stage a new entity and flush it to get its ID
    - update: Flush changes of an attached entity
    - delete: Delete entity by ID
    - count: Count all entities

    Every ledger table has ``date``, ``created_at`` and ``updated_at`` columns.

    Usage:
        class TripRepository(BaseRepository[Trip]):
            model_class = Trip
    """

    model_class: Type[ModelType]

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """
        Get entity by its primary key ID.

        Args:
            entity_id: Primary key ID

        Returns:
            Entity or None if not found
        """
        result = await self.session.execute(
            select(self.model_class).where(self.model_class.id == entity_id)
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> List[ModelType]:
        """
        Get all entities ordered by date (earliest first).

        Rows sharing a date keep insertion order.

        Returns:
            List of entities
        """
        query = select(self.model_class).order_by(
            self.model_class.date.asc(),
            self.model_class.id.asc(),
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def add(self, entity: ModelType) -> ModelType:
        """
        Add entity to session and flush so the ID is assigned.

        Args:
            entity: Entity to add

        Returns:
            The same entity, now with a primary key
        """
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def update(self, entity: ModelType) -> ModelType:
        """
        Update entity in database.

        Note: The entity must already be attached to the session.
        Changes are flushed but not committed.
        """
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity_id: int) -> bool:
        """
        Delete entity by ID.

        Args:
            entity_id: Primary key ID

        Returns:
            True if deleted, False if not found
        """
        result = await self.session.execute(
            delete(self.model_class).where(self.model_class.id == entity_id)
        )
        await self.session.flush()
        return (result.rowcount or 0) > 0

    async def count(self) -> int:
        """
        Count all entities.

        Returns:
            Total count of entities
        """
        result = await self.session.execute(
            select(func.count(self.model_class.id))
        )
        return result.scalar() or 0
