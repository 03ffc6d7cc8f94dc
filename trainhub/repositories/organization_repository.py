# =============================================
# trainhub/repositories/organization_repository.py
# =============================================
from sqlalchemy import select, func, or_
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from trainhub.database.models.organization_profile import OrganizationProfile
from trainhub.repositories.base_repository import BaseRepository
from trainhub.schemas.enums import VerificationStatus
from trainhub.schemas.organization import OrganizationSearchFilters

class OrganizationRepository(BaseRepository[OrganizationProfile]):
    model = OrganizationProfile

    async def get_by_user_id(self, user_id: UUID) -> Optional[OrganizationProfile]:
        stmt = select(OrganizationProfile).where(OrganizationProfile.user_id == user_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    def _apply_filters(self, stmt, filters: Optional[OrganizationSearchFilters]):
        if not filters:
            return stmt

        if filters.search:
            pattern = f"%{filters.search.lower()}%"
            stmt = stmt.where(or_(
                func.lower(OrganizationProfile.organization_name).like(pattern),
                func.lower(OrganizationProfile.website).like(pattern),
                func.lower(OrganizationProfile.company_location).like(pattern)
            ))

        if filters.verification_status:
            stmt = stmt.where(OrganizationProfile.verified_status == filters.verification_status)

        if filters.active_status:
            stmt = stmt.where(OrganizationProfile.active_status == filters.active_status)

        return stmt

    async def search(
        self,
        filters: Optional[OrganizationSearchFilters],
        skip: int = 0,
        limit: int = 10
    ) -> Tuple[List[OrganizationProfile], int]:
        """Filtered page, newest first, plus the total matching count"""
        stmt = self._apply_filters(select(OrganizationProfile), filters)
        stmt = stmt.order_by(OrganizationProfile.created_at.desc()).offset(skip).limit(limit)
        result = await self.db.execute(stmt)
        items = list(result.scalars().all())

        count_stmt = self._apply_filters(select(func.count(OrganizationProfile.id)), filters)
        total = (await self.db.execute(count_stmt)).scalar_one()

        return items, total

    async def owner_user_ids(self, organization_ids: Sequence[UUID]) -> List[UUID]:
        if not organization_ids:
            return []
        stmt = select(OrganizationProfile.user_id).where(OrganizationProfile.id.in_(organization_ids))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def ids_for_users(self, user_ids: Sequence[UUID]) -> List[UUID]:
        if not user_ids:
            return []
        stmt = select(OrganizationProfile.id).where(OrganizationProfile.user_id.in_(user_ids))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count_pending(self) -> int:
        return await self.count(OrganizationProfile.verified_status == VerificationStatus.PENDING)
