# =============================================
# trainhub/repositories/cascade_repository.py
# =============================================
"""
Ordered deletes for entities with dependents.

Dependents always go first and the owner last (feedback -> trainings ->
profile -> user) so foreign keys hold at every step. Nothing here commits;
callers run each cascade inside one transaction.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import update
from typing import Dict, List, Sequence
from uuid import UUID
import logging

from trainhub.core.exceptions import ConflictError
from trainhub.database.models.admin_profile import AdminProfile
from trainhub.database.models.maintainer_profile import MaintainerProfile
from trainhub.database.models.training import Training
from trainhub.repositories.admin_repository import AdminRepository
from trainhub.repositories.feedback_repository import FeedbackRepository
from trainhub.repositories.freelancer_repository import FreelancerRepository
from trainhub.repositories.maintainer_repository import MaintainerRepository
from trainhub.repositories.organization_repository import OrganizationRepository
from trainhub.repositories.training_repository import TrainingRepository
from trainhub.repositories.user_repository import UserRepository
from trainhub.schemas.enums import UserRole

logger = logging.getLogger(__name__)

class CascadeRepository:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.feedback_repo = FeedbackRepository(db)
        self.training_repo = TrainingRepository(db)
        self.organization_repo = OrganizationRepository(db)
        self.freelancer_repo = FreelancerRepository(db)
        self.maintainer_repo = MaintainerRepository(db)
        self.user_repo = UserRepository(db)
        self.admin_repo = AdminRepository(db)

    # =============================================
    # REFERENCE DATA GUARD
    # =============================================

    async def ensure_no_trainings(self, column, ids: Sequence[UUID], message: str) -> None:
        """Fail before any mutation when a training still points at one of `ids`"""
        referencing = await self.training_repo.count_referencing(column, ids)
        if referencing:
            raise ConflictError(message, details={"trainings": referencing})

    # =============================================
    # CASCADES
    # =============================================

    async def delete_trainings(self, training_ids: Sequence[UUID]) -> Dict[str, int]:
        """feedback -> trainings"""
        summary = {
            "feedback": await self.feedback_repo.delete_for(training_ids=training_ids),
            "trainings": await self.training_repo.delete_many(training_ids),
        }
        logger.info(f"Training cascade: {summary}")
        return summary

    async def delete_organizations(self, organization_ids: Sequence[UUID]) -> Dict[str, int]:
        """feedback -> trainings -> organization profiles -> users"""
        # owners are collected before their profiles disappear
        user_ids = await self.organization_repo.owner_user_ids(organization_ids)
        training_ids = await self.training_repo.ids_for_organizations(organization_ids)

        summary = {
            "feedback": await self.feedback_repo.delete_for(
                organization_ids=organization_ids, training_ids=training_ids
            ),
            "trainings": await self.training_repo.delete_many(
                organization_ids, column=Training.organization_id
            ),
            "profiles": await self.organization_repo.delete_many(organization_ids),
        }
        summary["reviews_detached"] = await self.feedback_repo.detach_reviewers(user_ids)
        summary["users"] = await self.user_repo.delete_many(user_ids)
        logger.info(f"Organization cascade: {summary}")
        return summary

    async def delete_freelancers(self, freelancer_ids: Sequence[UUID]) -> Dict[str, int]:
        """feedback -> unassign trainings -> freelancer profiles -> users"""
        user_ids = await self.freelancer_repo.owner_user_ids(freelancer_ids)

        summary = {"feedback": await self.feedback_repo.delete_for(freelancer_ids=freelancer_ids)}

        stmt = (
            update(Training)
            .where(Training.freelancer_id.in_(freelancer_ids))
            .values(freelancer_id=None)
            .execution_options(synchronize_session="fetch")
        )
        summary["trainings_unassigned"] = (await self.db.execute(stmt)).rowcount
        summary["profiles"] = await self.freelancer_repo.delete_many(freelancer_ids)
        summary["reviews_detached"] = await self.feedback_repo.detach_reviewers(user_ids)
        summary["users"] = await self.user_repo.delete_many(user_ids)
        logger.info(f"Freelancer cascade: {summary}")
        return summary

    async def delete_maintainers(self, user_ids: Sequence[UUID]) -> Dict[str, int]:
        """detach reviews -> maintainer profiles -> users"""
        summary = {
            "reviews_detached": await self.feedback_repo.detach_reviewers(user_ids),
            "profiles": await self.maintainer_repo.delete_many(user_ids, column=MaintainerProfile.user_id),
            "users": await self.user_repo.delete_many(user_ids),
        }
        logger.info(f"Maintainer cascade: {summary}")
        return summary

    async def delete_admins(self, user_ids: Sequence[UUID]) -> Dict[str, int]:
        """detach reviews -> admin profiles -> users"""
        summary = {
            "reviews_detached": await self.feedback_repo.detach_reviewers(user_ids),
            "profiles": await self.admin_repo.delete_many(user_ids, column=AdminProfile.user_id),
            "users": await self.user_repo.delete_many(user_ids),
        }
        logger.info(f"Admin cascade: {summary}")
        return summary

    async def delete_users(self, user_ids: Sequence[UUID]) -> Dict[str, int]:
        """Route every user to the cascade of its role, then drop any user left without a profile"""
        roles = await self.user_repo.roles_for(user_ids)
        by_role: Dict[UserRole, List[UUID]] = {}
        for user_id, role in roles.items():
            by_role.setdefault(role, []).append(user_id)

        if by_role.get(UserRole.ORGANIZATION):
            organization_ids = await self.organization_repo.ids_for_users(by_role[UserRole.ORGANIZATION])
            await self.delete_organizations(organization_ids)

        if by_role.get(UserRole.FREELANCER):
            freelancer_ids = await self.freelancer_repo.ids_for_users(by_role[UserRole.FREELANCER])
            await self.delete_freelancers(freelancer_ids)

        if by_role.get(UserRole.MAINTAINER):
            await self.delete_maintainers(by_role[UserRole.MAINTAINER])

        if by_role.get(UserRole.ADMIN):
            await self.delete_admins(by_role[UserRole.ADMIN])

        leftovers = list(roles)
        await self.feedback_repo.detach_reviewers(leftovers)
        await self.user_repo.delete_many(leftovers)

        return {"users": len(roles)}
