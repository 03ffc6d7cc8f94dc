# =============================================
# trainhub/repositories/stack_repository.py
# =============================================
from sqlalchemy import select, func, or_
from typing import List, Optional
from uuid import UUID

from trainhub.database.models.stack import Stack
from trainhub.repositories.base_repository import BaseRepository

class StackRepository(BaseRepository[Stack]):
    model = Stack

    async def get_by_name(self, name: str, exclude_id: Optional[UUID] = None) -> Optional[Stack]:
        """Get stack by name (case-insensitive)"""
        stmt = select(Stack).where(func.lower(Stack.name) == name.lower())
        if exclude_id:
            stmt = stmt.where(Stack.id != exclude_id)
        result = await self.db.execute(stmt.limit(1))
        return result.scalar_one_or_none()

    async def search(self, search: Optional[str] = None, is_active: Optional[bool] = None) -> List[Stack]:
        stmt = select(Stack)
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(or_(
                func.lower(Stack.name).like(pattern),
                func.lower(Stack.description).like(pattern)
            ))
        if is_active is not None:
            stmt = stmt.where(Stack.is_active == is_active)
        result = await self.db.execute(stmt.order_by(Stack.name.asc()))
        return list(result.scalars().all())
