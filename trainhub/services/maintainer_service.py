# =============================================
# trainhub/services/maintainer_service.py
# =============================================
from typing import Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from trainhub.config.settings import get_settings
from trainhub.core.exceptions import NotFoundError, ValidationError
from trainhub.core.lifecycle import MAINTAINER_BULK_POLICY, MAINTAINER_SINGLE_POLICY, UPDATE
from trainhub.core.security import get_password_hash
from trainhub.core.validators import is_valid_email_format, validate_password
from trainhub.database.models.maintainer_profile import MaintainerProfile
from trainhub.database.models.user import User
from trainhub.repositories.cascade_repository import CascadeRepository
from trainhub.repositories.maintainer_repository import MaintainerRepository
from trainhub.repositories.user_repository import UserRepository
from trainhub.schemas.base import BulkActionRequest, MessageResponse
from trainhub.schemas.enums import ActiveStatus, UserRole
from trainhub.schemas.maintainer import (
    MaintainerCreate,
    MaintainerUpdate,
    MaintainerResponse,
    MaintainerBulkResponse
)
from trainhub.services.base_service import BaseService, as_uuid
from trainhub.services.bulk_action_service import BulkActionDispatcher

logger = logging.getLogger(__name__)
settings = get_settings()

PAST_TENSE = {"activate": "activated", "deactivate": "deactivated", "delete": "deleted"}

class MaintainerService(BaseService):
    """Maintainers are addressed by their user id throughout"""

    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.user_repo = UserRepository(db)
        self.maintainer_repo = MaintainerRepository(db)
        self.cascade = CascadeRepository(db)
        self.bulk = BulkActionDispatcher(db)

    @staticmethod
    def _to_response(user: User, reviews: Dict = None) -> MaintainerResponse:
        profile = user.maintainer_profile
        return MaintainerResponse(
            id=user.id,
            profile_id=profile.id,
            email=user.email,
            name=user.name,
            phone=user.phone,
            status=profile.status,
            reviews_count=(reviews or {}).get(user.id, 0),
            created_at=user.created_at
        )

    async def _get_or_404(self, user_id) -> User:
        parsed = as_uuid(user_id)
        user = await self.user_repo.get_by_id(parsed) if parsed else None
        if not user or user.role != UserRole.MAINTAINER or not user.maintainer_profile:
            raise NotFoundError("Maintainer not found")
        return user

    # =============================================
    # READ
    # =============================================

    async def list_maintainers(self, search: Optional[str] = None) -> List[MaintainerResponse]:
        users = [
            user for user in await self.user_repo.get_by_role(UserRole.MAINTAINER, search=search)
            if user.maintainer_profile
        ]
        reviews = await self.maintainer_repo.reviews_count([user.id for user in users])
        return [self._to_response(user, reviews) for user in users]

    async def get_maintainer(self, user_id) -> MaintainerResponse:
        user = await self._get_or_404(user_id)
        reviews = await self.maintainer_repo.reviews_count([user.id])
        return self._to_response(user, reviews)

    # =============================================
    # CREATE / UPDATE
    # =============================================

    async def create_maintainer(self, data: MaintainerCreate) -> MaintainerResponse:
        if not data.email or not data.password:
            raise ValidationError("Email and password are required")

        if not is_valid_email_format(data.email):
            raise ValidationError("Please enter a valid email address", field="email")

        password_error = validate_password(data.password, settings.MIN_PASSWORD_LENGTH)
        if password_error:
            raise ValidationError(password_error, field="password")

        async with self.transaction("create maintainer"):
            if await self.user_repo.email_exists(data.email):
                raise ValidationError("User with this email already exists", field="email")

            user = await self.user_repo.add(User(
                email=data.email.lower(),
                password=get_password_hash(data.password),
                name=data.name,
                phone=data.phone,
                role=UserRole.MAINTAINER
            ))
            await self.maintainer_repo.add(MaintainerProfile(user=user, status=ActiveStatus.ACTIVE))

        await self.user_repo.refresh(user)
        logger.info(f"Maintainer created: {user.email}")
        return self._to_response(user)

    async def update_maintainer(self, user_id, data: MaintainerUpdate) -> MaintainerResponse:
        """`action` activate/deactivate toggles the status; otherwise name, email and phone are edited"""
        action = MAINTAINER_SINGLE_POLICY.require_action(data.action or UPDATE)
        user = await self._get_or_404(user_id)

        async with self.transaction(f"{action} maintainer {user.id}"):
            if action == UPDATE:
                values = {
                    key: value for key, value in data.provided().items()
                    if key != "action" and value
                }
                if "email" in values:
                    if not is_valid_email_format(values["email"]):
                        raise ValidationError("Please enter a valid email address", field="email")
                    if await self.user_repo.email_exists(values["email"], exclude_user_id=user.id):
                        raise ValidationError("Email already exists", field="email")
                    values["email"] = values["email"].lower()
                await self.user_repo.update_fields(user, values)
            else:
                await self.maintainer_repo.update_fields(
                    user.maintainer_profile, MAINTAINER_SINGLE_POLICY.changes_for(action)
                )

        logger.info(f"Maintainer {user.id}: {action} applied")
        return await self.get_maintainer(user.id)

    # =============================================
    # BULK / DELETE
    # =============================================

    async def bulk_action(self, request: BulkActionRequest) -> MaintainerBulkResponse:
        raw_ids = request.resolve_ids("maintainerIds")
        if isinstance(raw_ids, list) and raw_ids and not request.action:
            raise ValidationError("Action is required", field="action")

        result = await self.bulk.dispatch(
            MAINTAINER_BULK_POLICY,
            raw_ids,
            request.action,
            repository=self.maintainer_repo,
            on_delete=self.cascade.delete_maintainers,
            match_column=MaintainerProfile.user_id
        )
        return MaintainerBulkResponse(
            message=f"Successfully {PAST_TENSE[request.action]} {result.count} maintainers",
            count=result.count
        )

    async def delete_maintainer(self, user_id) -> MessageResponse:
        user = await self._get_or_404(user_id)
        parsed = user.id

        async with self.transaction(f"delete maintainer {parsed}"):
            await self.cascade.delete_maintainers([parsed])

        logger.info(f"Maintainer deleted: {parsed}")
        return MessageResponse(message="Maintainer deleted successfully")
