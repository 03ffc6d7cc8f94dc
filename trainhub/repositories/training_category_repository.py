# =============================================
# trainhub/repositories/training_category_repository.py
# =============================================
from sqlalchemy import select, func, or_
from typing import List, Optional, Sequence, Set
from uuid import UUID

from trainhub.database.models.training_category import TrainingCategory
from trainhub.repositories.base_repository import BaseRepository

class TrainingCategoryRepository(BaseRepository[TrainingCategory]):
    model = TrainingCategory

    async def get_by_name(self, name: str, exclude_id: Optional[UUID] = None) -> Optional[TrainingCategory]:
        """Get category by name (case-insensitive)"""
        stmt = select(TrainingCategory).where(func.lower(TrainingCategory.name) == name.lower())
        if exclude_id:
            stmt = stmt.where(TrainingCategory.id != exclude_id)
        result = await self.db.execute(stmt.limit(1))
        return result.scalar_one_or_none()

    async def existing_names(self, names: Sequence[str]) -> Set[str]:
        """Lowercased names from `names` that are already taken"""
        if not names:
            return set()
        lowered = [name.lower() for name in names]
        stmt = select(func.lower(TrainingCategory.name)).where(func.lower(TrainingCategory.name).in_(lowered))
        result = await self.db.execute(stmt)
        return set(result.scalars().all())

    async def search(self, search: Optional[str] = None, is_active: Optional[bool] = None) -> List[TrainingCategory]:
        stmt = select(TrainingCategory)
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(or_(
                func.lower(TrainingCategory.name).like(pattern),
                func.lower(TrainingCategory.description).like(pattern)
            ))
        if is_active is not None:
            stmt = stmt.where(TrainingCategory.is_active == is_active)
        result = await self.db.execute(stmt.order_by(TrainingCategory.created_at.desc()))
        return list(result.scalars().all())
