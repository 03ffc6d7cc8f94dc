# =============================================
# trainhub/repositories/maintainer_repository.py
# =============================================
from sqlalchemy import select, func
from typing import Dict, Optional, Sequence
from uuid import UUID

from trainhub.database.models.maintainer_profile import MaintainerProfile
from trainhub.database.models.training_feedback import TrainingFeedback
from trainhub.repositories.base_repository import BaseRepository

class MaintainerRepository(BaseRepository[MaintainerProfile]):
    model = MaintainerProfile

    async def get_by_user_id(self, user_id: UUID) -> Optional[MaintainerProfile]:
        stmt = select(MaintainerProfile).where(MaintainerProfile.user_id == user_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def update_by_user_ids(self, user_ids: Sequence[UUID], values) -> int:
        return await self.update_many(user_ids, values, column=MaintainerProfile.user_id)

    async def reviews_count(self, user_ids: Sequence[UUID]) -> Dict[UUID, int]:
        """Feedback rows authored per maintainer user"""
        if not user_ids:
            return {}
        stmt = (
            select(TrainingFeedback.reviewer_id, func.count(TrainingFeedback.id))
            .where(TrainingFeedback.reviewer_id.in_(user_ids))
            .group_by(TrainingFeedback.reviewer_id)
        )
        result = await self.db.execute(stmt)
        return {reviewer_id: total for reviewer_id, total in result.all()}
