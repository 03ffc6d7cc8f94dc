# =============================================
# trainhub/repositories/user_repository.py
# =============================================
from sqlalchemy import select, func, or_
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from trainhub.database.models.user import User
from trainhub.repositories.base_repository import BaseRepository
from trainhub.schemas.enums import UserRole

class UserRepository(BaseRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)"""
        stmt = select(User).where(func.lower(User.email) == email.strip().lower())
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def email_exists(self, email: str, exclude_user_id: Optional[UUID] = None) -> bool:
        """Check if email already exists"""
        stmt = select(User.id).where(func.lower(User.email) == email.strip().lower())
        if exclude_user_id:
            stmt = stmt.where(User.id != exclude_user_id)
        result = await self.db.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def get_all(self) -> List[User]:
        """Every user with profiles, newest first"""
        stmt = select(User).order_by(User.created_at.desc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_role(self, role: UserRole, search: Optional[str] = None) -> List[User]:
        stmt = select(User).where(User.role == role)
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(or_(
                func.lower(User.name).like(pattern),
                func.lower(User.email).like(pattern)
            ))
        result = await self.db.execute(stmt.order_by(User.created_at.desc()))
        return list(result.scalars().all())

    async def get_recent(self, roles: Sequence[UserRole], limit: int = 10) -> List[User]:
        stmt = (
            select(User)
            .where(User.role.in_(roles))
            .order_by(User.created_at.desc())
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def roles_for(self, user_ids: Sequence[UUID]) -> Dict[UUID, UserRole]:
        if not user_ids:
            return {}
        stmt = select(User.id, User.role).where(User.id.in_(user_ids))
        result = await self.db.execute(stmt)
        return {row.id: row.role for row in result.all()}

    async def count_by_role(self) -> Dict[UserRole, int]:
        stmt = select(User.role, func.count()).group_by(User.role)
        result = await self.db.execute(stmt)
        return {role: total for role, total in result.all()}
