# =============================================
# trainhub/repositories/base_repository.py
# =============================================
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func
from typing import Any, Generic, Iterable, List, Mapping, Optional, Sequence, Type, TypeVar
from uuid import UUID
import logging

from trainhub.config.database import Base, utcnow

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

class BaseRepository(Generic[ModelT]):
    """
    Statement helpers shared by every entity repository.

    Repositories never commit: the calling service owns the transaction so
    that multi-step writes (profile + user, cascades) land atomically.
    """

    model: Type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    # =============================================
    # READS
    # =============================================

    async def get_by_id(self, entity_id: UUID) -> Optional[ModelT]:
        """Get entity by ID"""
        stmt = select(self.model).where(self.model.id == entity_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def existing_ids(self, ids: Sequence[UUID], column=None) -> List[UUID]:
        """Ids from `ids` that have a row, matched on `column` (primary key by default)"""
        if not ids:
            return []
        column = column if column is not None else self.model.id
        stmt = select(column).where(column.in_(ids))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def missing_ids(self, ids: Sequence[UUID], column=None) -> List[UUID]:
        found = set(await self.existing_ids(ids, column))
        return [entity_id for entity_id in ids if entity_id not in found]

    async def count(self, *criteria) -> int:
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self.db.execute(stmt)
        return result.scalar_one()

    # =============================================
    # WRITES (flush only)
    # =============================================

    async def add(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        await self.db.flush()
        return entity

    async def add_all(self, entities: Iterable[ModelT]) -> None:
        self.db.add_all(list(entities))
        await self.db.flush()

    async def refresh(self, entity: ModelT) -> ModelT:
        """Reload columns and eager relationships of a persisted entity"""
        await self.db.refresh(entity)
        return entity

    async def update_fields(self, entity: ModelT, values: Mapping[str, Any]) -> ModelT:
        """Apply attribute values to a loaded entity"""
        for key, value in values.items():
            setattr(entity, key, value)
        await self.db.flush()
        return entity

    async def update_many(self, ids: Sequence[UUID], values: Mapping[str, Any], column=None) -> int:
        """Batch update; `column` selects the match column (primary key by default)"""
        if not ids or not values:
            return 0
        column = column if column is not None else self.model.id
        stmt = (
            update(self.model)
            .where(column.in_(ids))
            .values(**values, updated_at=utcnow())
            .execution_options(synchronize_session="fetch")
        )
        result = await self.db.execute(stmt)
        logger.debug(f"{self.model.__name__}: updated {result.rowcount} rows with {dict(values)}")
        return result.rowcount

    async def delete_many(self, ids: Sequence[UUID], column=None) -> int:
        if not ids:
            return 0
        column = column if column is not None else self.model.id
        stmt = delete(self.model).where(column.in_(ids)).execution_options(synchronize_session="fetch")
        result = await self.db.execute(stmt)
        logger.debug(f"{self.model.__name__}: deleted {result.rowcount} rows")
        return result.rowcount
