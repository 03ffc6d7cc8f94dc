# =============================================
# trainhub/services/freelancer_service.py
# =============================================
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from trainhub.config.settings import get_settings
from trainhub.core.exceptions import NotFoundError, ValidationError
from trainhub.core.lifecycle import FREELANCER_BULK_POLICY
from trainhub.core.validators import serialize_skills
from trainhub.database.models.user import User
from trainhub.repositories.cascade_repository import CascadeRepository
from trainhub.repositories.freelancer_repository import FreelancerRepository
from trainhub.repositories.user_repository import UserRepository
from trainhub.schemas.base import BulkActionRequest, BulkActionResponse, MessageResponse, Pagination
from trainhub.schemas.freelancer import (
    FreelancerUpdate,
    FreelancerResponse,
    FreelancerListResponse,
    FreelancerSearchFilters
)
from trainhub.services.base_service import BaseService, as_uuid
from trainhub.services.bulk_action_service import BulkActionDispatcher

logger = logging.getLogger(__name__)
settings = get_settings()

USER_FIELDS = ("name", "phone")

class FreelancerService(BaseService):
    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.freelancer_repo = FreelancerRepository(db)
        self.user_repo = UserRepository(db)
        self.cascade = CascadeRepository(db)
        self.bulk = BulkActionDispatcher(db)

    async def list_freelancers(
        self,
        filters: FreelancerSearchFilters,
        page: int = 1,
        limit: int = 10
    ) -> FreelancerListResponse:
        page = max(page, 1)
        limit = min(max(limit, 1), settings.MAX_PAGE_SIZE)

        items, total = await self.freelancer_repo.search(filters, skip=(page - 1) * limit, limit=limit)
        return FreelancerListResponse(
            freelancers=[FreelancerResponse.model_validate(item) for item in items],
            pagination=Pagination.build(page, limit, total)
        )

    async def update_own_profile(self, user: User, data: FreelancerUpdate) -> FreelancerResponse:
        """Self-service update; blank or absent fields keep their stored value"""
        profile = await self.freelancer_repo.get_by_user_id(user.id)
        if not profile:
            raise NotFoundError("Freelancer profile not found")

        values = {key: value for key, value in data.provided().items() if value not in (None, "")}
        user_values = {key: values.pop(key) for key in USER_FIELDS if key in values}
        if "skills" in values:
            values["skills"] = serialize_skills(values["skills"])

        async with self.transaction(f"update freelancer {profile.id}"):
            await self.user_repo.update_fields(user, user_values)
            await self.freelancer_repo.update_fields(profile, values)

        logger.info(f"Freelancer profile updated by owner: {profile.id}")
        return FreelancerResponse.model_validate(profile)

    async def bulk_action(self, request: BulkActionRequest) -> BulkActionResponse:
        return await self.bulk.dispatch(
            FREELANCER_BULK_POLICY,
            request.resolve_ids("freelancerIds"),
            request.action,
            repository=self.freelancer_repo,
            on_delete=self.cascade.delete_freelancers
        )

    async def delete_freelancer(self, freelancer_id: Optional[str]) -> MessageResponse:
        if not freelancer_id:
            raise ValidationError("Freelancer ID is required", field="id")

        parsed = as_uuid(freelancer_id)
        profile = await self.freelancer_repo.get_by_id(parsed) if parsed else None
        if not profile:
            raise NotFoundError("Freelancer not found")

        async with self.transaction(f"delete freelancer {parsed}"):
            await self.cascade.delete_freelancers([parsed])

        logger.info(f"Freelancer deleted: {parsed}")
        return MessageResponse(message="Freelancer deleted successfully")
