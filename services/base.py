"""
Base entity service with the validate-persist-map cycle shared by
expenses, refills and trips.
"""
import logging
from abc import ABC
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union

from sqlalchemy.ext.asyncio import AsyncSession

from core.dto.base import LedgerDTO
from core.entities import LedgerRecord
from core.exceptions import ResourceNotFoundError
from database.base import utcnow
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

RecordType = TypeVar("RecordType", bound=LedgerRecord)

Payload = Union[Mapping[str, Any], LedgerDTO]


class BaseEntityService(ABC, Generic[RecordType]):
    """
    Abstract base class for entity services.

    Subclasses declare their repository, record and DTO classes and may
    override the two hooks that turn a validated DTO into column values:
    ``_creation_fields`` and ``_update_fields``.
    """

    resource_name: str
    repository_class: Type[BaseRepository]
    record_class: Type[RecordType]
    create_dto: Type[LedgerDTO]
    update_dto: Type[LedgerDTO]

    def __init__(self, session: AsyncSession):
        """
        Initialize service with database session.

        Args:
            session: Async SQLAlchemy session for database operations
        """
        self.session = session
        self.repository = self.repository_class(session)

    def _creation_fields(self, dto: LedgerDTO) -> Dict[str, Any]:
        return dto.model_dump()

    def _update_fields(self, entity: Any, dto: LedgerDTO) -> Dict[str, Any]:
        return dto.changes()

    def _to_record(self, entity: Any) -> RecordType:
        return self.record_class.model_validate(entity)

    async def create(self, data: Payload) -> RecordType:
        """
        Validate input and insert a new row.

        Raises:
            ValidationError: If input fails validation (nothing is written)
        """
        dto = self.create_dto.parse(data)
        fields = self._creation_fields(dto)
        entity = await self.repository.create(**fields, created_at=utcnow())
        logger.info(f"Created {self.resource_name} #{entity.id}")
        return self._to_record(entity)

    async def list(self) -> List[RecordType]:
        """All rows ordered chronologically (earliest to latest)."""
        entities = await self.repository.get_all()
        return [self._to_record(entity) for entity in entities]

    async def get_by_id(self, entity_id: int) -> Optional[RecordType]:
        """Single row by ID, or None if not found."""
        entity = await self.repository.get_by_id(entity_id)
        if entity is None:
            return None
        return self._to_record(entity)

    async def update(self, entity_id: int, patch: Payload) -> RecordType:
        """
        Apply a partial update.

        Only fields present in ``patch`` are validated and written;
        ``updated_at`` is always refreshed and ``created_at`` never changes.

        Raises:
            ValidationError: If a supplied field is invalid
            ResourceNotFoundError: If no row has this ID
        """
        dto = self.update_dto.parse(patch)

        entity = await self.repository.get_by_id(entity_id)
        if entity is None:
            raise ResourceNotFoundError(self.resource_name, entity_id)

        changes = self._update_fields(entity, dto)
        for name, value in changes.items():
            setattr(entity, name, value)
        entity.updated_at = utcnow()

        entity = await self.repository.update(entity)
        logger.info(
            f"Updated {self.resource_name} #{entity_id}: {sorted(changes) or 'no fields'}"
        )
        return self._to_record(entity)

    async def delete(self, entity_id: int) -> bool:
        """
        Delete a row.

        Returns:
            True if deleted, False if not found
        """
        deleted = await self.repository.delete(entity_id)
        if deleted:
            logger.info(f"Deleted {self.resource_name} #{entity_id}")
        return deleted

    async def count(self) -> int:
        return await self.repository.count()
