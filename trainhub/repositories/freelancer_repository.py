# =============================================
# trainhub/repositories/freelancer_repository.py
# =============================================
from sqlalchemy import select, func, or_
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from trainhub.database.models.freelancer_profile import FreelancerProfile
from trainhub.database.models.user import User
from trainhub.repositories.base_repository import BaseRepository
from trainhub.schemas.enums import AvailabilityStatus
from trainhub.schemas.freelancer import FreelancerSearchFilters

class FreelancerRepository(BaseRepository[FreelancerProfile]):
    model = FreelancerProfile

    async def get_by_user_id(self, user_id: UUID) -> Optional[FreelancerProfile]:
        stmt = select(FreelancerProfile).where(FreelancerProfile.user_id == user_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    def _apply_filters(self, stmt, filters: Optional[FreelancerSearchFilters]):
        if not filters:
            return stmt

        if filters.search:
            pattern = f"%{filters.search.lower()}%"
            stmt = stmt.join(User, User.id == FreelancerProfile.user_id).where(or_(
                func.lower(User.name).like(pattern),
                func.lower(User.email).like(pattern),
                func.lower(FreelancerProfile.skills).like(pattern),
                func.lower(FreelancerProfile.location).like(pattern)
            ))

        if filters.trainer_type:
            stmt = stmt.where(FreelancerProfile.trainer_type == filters.trainer_type)

        if filters.availability:
            stmt = stmt.where(FreelancerProfile.availability == filters.availability)

        return stmt

    async def search(
        self,
        filters: Optional[FreelancerSearchFilters],
        skip: int = 0,
        limit: int = 10
    ) -> Tuple[List[FreelancerProfile], int]:
        stmt = self._apply_filters(select(FreelancerProfile), filters)
        stmt = stmt.order_by(FreelancerProfile.created_at.desc()).offset(skip).limit(limit)
        result = await self.db.execute(stmt)
        items = list(result.scalars().all())

        count_stmt = self._apply_filters(select(func.count(FreelancerProfile.id)).select_from(FreelancerProfile), filters)
        total = (await self.db.execute(count_stmt)).scalar_one()

        return items, total

    async def owner_user_ids(self, freelancer_ids: Sequence[UUID]) -> List[UUID]:
        if not freelancer_ids:
            return []
        stmt = select(FreelancerProfile.user_id).where(FreelancerProfile.id.in_(freelancer_ids))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def ids_for_users(self, user_ids: Sequence[UUID]) -> List[UUID]:
        if not user_ids:
            return []
        stmt = select(FreelancerProfile.id).where(FreelancerProfile.user_id.in_(user_ids))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count_unavailable(self) -> int:
        return await self.count(FreelancerProfile.availability == AvailabilityStatus.NOT_AVAILABLE)
