# =============================================
# trainhub/services/admin_service.py
# =============================================
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from trainhub.config.database import utcnow
from trainhub.core.exceptions import ValidationError
from trainhub.core.validators import is_valid_email_format
from trainhub.database.models.user import User
from trainhub.repositories.freelancer_repository import FreelancerRepository
from trainhub.repositories.organization_repository import OrganizationRepository
from trainhub.repositories.training_repository import TrainingRepository
from trainhub.repositories.user_repository import UserRepository
from trainhub.schemas.dashboard import (
    AdminProfileResponse,
    AdminProfileUpdate,
    DashboardStats,
    RecentActivity
)
from trainhub.schemas.enums import UserRole
from trainhub.schemas.user import UserResponse
from trainhub.services.base_service import BaseService

logger = logging.getLogger(__name__)

RECENT_ACTIVITY_LIMIT = 10

class AdminService(BaseService):
    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.user_repo = UserRepository(db)
        self.organization_repo = OrganizationRepository(db)
        self.freelancer_repo = FreelancerRepository(db)
        self.training_repo = TrainingRepository(db)

    # =============================================
    # DASHBOARD
    # =============================================

    async def get_dashboard_stats(self) -> DashboardStats:
        """
        Platform totals for the admin overview.

        Pending verifications counts organizations awaiting review plus
        freelancers marked not available.
        """
        by_role = await self.user_repo.count_by_role()
        pending = await self.organization_repo.count_pending() + await self.freelancer_repo.count_unavailable()

        recent = await self.user_repo.get_recent(
            [UserRole.FREELANCER, UserRole.ORGANIZATION], limit=RECENT_ACTIVITY_LIMIT
        )
        activities = [
            RecentActivity(
                id=user.id,
                type=user.role.value.lower(),
                action=f"New {user.role.value.lower()} registered",
                user_name=user.name or user.email,
                created_at=user.created_at
            )
            for user in recent
        ]

        return DashboardStats(
            total_users=sum(by_role.values()),
            total_organizations=by_role.get(UserRole.ORGANIZATION, 0),
            total_freelancers=by_role.get(UserRole.FREELANCER, 0),
            total_maintainers=by_role.get(UserRole.MAINTAINER, 0),
            total_trainings=await self.training_repo.count(),
            active_trainings=await self.training_repo.count_running(utcnow()),
            pending_verifications=pending,
            recent_activities=activities
        )

    # =============================================
    # OWN PROFILE
    # =============================================

    async def get_profile(self, user: User) -> UserResponse:
        return UserResponse.model_validate(user)

    async def update_profile(self, user: User, data: AdminProfileUpdate) -> AdminProfileResponse:
        values = {key: value for key, value in data.provided().items() if value}

        if "email" in values:
            if not is_valid_email_format(values["email"]):
                raise ValidationError("Please enter a valid email address", field="email")
            values["email"] = values["email"].lower()

        async with self.transaction(f"update admin profile {user.id}"):
            if "email" in values and await self.user_repo.email_exists(values["email"], exclude_user_id=user.id):
                raise ValidationError("Email already exists", field="email")
            await self.user_repo.update_fields(user, values)

        logger.info(f"Admin profile updated: {user.id}")
        return AdminProfileResponse(
            message="Profile updated successfully",
            data=UserResponse.model_validate(user)
        )
