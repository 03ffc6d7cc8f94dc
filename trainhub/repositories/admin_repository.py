# =============================================
# trainhub/repositories/admin_repository.py
# =============================================
from sqlalchemy import select
from typing import Optional
from uuid import UUID

from trainhub.database.models.admin_profile import AdminProfile
from trainhub.repositories.base_repository import BaseRepository

class AdminRepository(BaseRepository[AdminProfile]):
    model = AdminProfile

    async def get_by_user_id(self, user_id: UUID) -> Optional[AdminProfile]:
        stmt = select(AdminProfile).where(AdminProfile.user_id == user_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()
