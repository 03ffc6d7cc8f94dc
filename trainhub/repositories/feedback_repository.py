# =============================================
# trainhub/repositories/feedback_repository.py
# =============================================
from sqlalchemy import delete, or_, update
from typing import Sequence
from uuid import UUID

from trainhub.database.models.training_feedback import TrainingFeedback
from trainhub.repositories.base_repository import BaseRepository

class FeedbackRepository(BaseRepository[TrainingFeedback]):
    model = TrainingFeedback

    async def delete_for(
        self,
        organization_ids: Sequence[UUID] = (),
        training_ids: Sequence[UUID] = (),
        freelancer_ids: Sequence[UUID] = ()
    ) -> int:
        """Delete feedback attached to any of the given organizations, trainings or freelancers"""
        criteria = []
        if organization_ids:
            criteria.append(TrainingFeedback.organization_id.in_(organization_ids))
        if training_ids:
            criteria.append(TrainingFeedback.training_id.in_(training_ids))
        if freelancer_ids:
            criteria.append(TrainingFeedback.freelancer_id.in_(freelancer_ids))
        if not criteria:
            return 0

        stmt = delete(TrainingFeedback).where(or_(*criteria)).execution_options(synchronize_session="fetch")
        result = await self.db.execute(stmt)
        return result.rowcount

    async def detach_reviewers(self, user_ids: Sequence[UUID]) -> int:
        """Keep reviews written by deleted users, without the author"""
        if not user_ids:
            return 0
        stmt = (
            update(TrainingFeedback)
            .where(TrainingFeedback.reviewer_id.in_(user_ids))
            .values(reviewer_id=None)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.db.execute(stmt)
        return result.rowcount
