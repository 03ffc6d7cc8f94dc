# =============================================
# trainhub/services/user_service.py
# =============================================
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from trainhub.config.settings import get_settings
from trainhub.core.exceptions import NotFoundError, ValidationError
from trainhub.core.lifecycle import USER_BULK_POLICY, USER_TRANSITIONS
from trainhub.core.security import get_password_hash
from trainhub.core.validators import is_valid_email_format, validate_password
from trainhub.database.models.admin_profile import AdminProfile
from trainhub.database.models.freelancer_profile import FreelancerProfile
from trainhub.database.models.maintainer_profile import MaintainerProfile
from trainhub.database.models.organization_profile import OrganizationProfile
from trainhub.database.models.user import User
from trainhub.repositories.cascade_repository import CascadeRepository
from trainhub.repositories.freelancer_repository import FreelancerRepository
from trainhub.repositories.maintainer_repository import MaintainerRepository
from trainhub.repositories.organization_repository import OrganizationRepository
from trainhub.repositories.user_repository import UserRepository
from trainhub.schemas.base import BulkActionRequest, BulkActionResponse, MessageResponse
from trainhub.schemas.enums import TrainerType, UserRole
from trainhub.schemas.user import UserCreate, UserUpdate, UserDetail
from trainhub.services.base_service import BaseService, as_uuid
from trainhub.services.bulk_action_service import BulkActionDispatcher

logger = logging.getLogger(__name__)
settings = get_settings()

class UserService(BaseService):
    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.user_repo = UserRepository(db)
        self.organization_repo = OrganizationRepository(db)
        self.maintainer_repo = MaintainerRepository(db)
        self.freelancer_repo = FreelancerRepository(db)
        self.cascade = CascadeRepository(db)
        self.bulk = BulkActionDispatcher(db)

    async def _get_or_404(self, user_id) -> User:
        parsed = as_uuid(user_id)
        user = await self.user_repo.get_by_id(parsed) if parsed else None
        if not user:
            raise NotFoundError("User not found")
        return user

    # =============================================
    # READ
    # =============================================

    async def list_users(self) -> List[UserDetail]:
        """Every user with its role profile, newest first"""
        users = await self.user_repo.get_all()
        return [UserDetail.model_validate(user) for user in users]

    async def get_user(self, user_id) -> UserDetail:
        return UserDetail.model_validate(await self._get_or_404(user_id))

    # =============================================
    # CREATE
    # =============================================

    @staticmethod
    def _profile_for(user: User, data: UserCreate):
        """Empty profile matching the new user's role"""
        role = UserRole(data.role)
        if role == UserRole.FREELANCER:
            return FreelancerProfile(user=user, trainer_type=TrainerType.BOTH, skills="[]")
        if role == UserRole.ORGANIZATION:
            return OrganizationProfile(
                user=user,
                organization_name=data.name or "",
                contact_mail=data.email,
                company_location=""
            )
        if role == UserRole.MAINTAINER:
            return MaintainerProfile(user=user)
        return AdminProfile(user=user)

    async def create_user(self, data: UserCreate) -> UserDetail:
        """Create a user and the profile matching its role in one transaction"""
        if not data.email or not data.password or not data.role:
            raise ValidationError("Missing required fields")

        if data.role not in UserRole.__members__:
            raise ValidationError("Invalid role", field="role")

        if not is_valid_email_format(data.email):
            raise ValidationError("Please enter a valid email address", field="email")

        password_error = validate_password(data.password, settings.MIN_PASSWORD_LENGTH)
        if password_error:
            raise ValidationError(password_error, field="password")

        async with self.transaction("create user"):
            if await self.user_repo.email_exists(data.email):
                raise ValidationError("User already exists", field="email")

            user = await self.user_repo.add(User(
                email=data.email.lower(),
                password=get_password_hash(data.password),
                name=data.name,
                phone=data.phone,
                role=UserRole(data.role)
            ))
            self.db.add(self._profile_for(user, data))
            await self.db.flush()

        await self.user_repo.refresh(user)
        logger.info(f"User created: {user.email} ({user.role.value})")
        return UserDetail.model_validate(user)

    # =============================================
    # UPDATE
    # =============================================

    async def update_user(self, user_id, data: UserUpdate) -> UserDetail:
        """Blank or absent fields keep their stored value"""
        user = await self._get_or_404(user_id)
        values = {key: value for key, value in data.provided().items() if value}

        if "email" in values:
            if not is_valid_email_format(values["email"]):
                raise ValidationError("Please enter a valid email address", field="email")
            values["email"] = values["email"].lower()

        async with self.transaction(f"update user {user.id}"):
            if "email" in values and await self.user_repo.email_exists(values["email"], exclude_user_id=user.id):
                raise ValidationError("Email already exists", field="email")
            await self.user_repo.update_fields(user, values)

        logger.info(f"User updated: {user.id}")
        return UserDetail.model_validate(user)

    # =============================================
    # BULK / DELETE
    # =============================================

    async def _apply_profile_transition(self, user_ids: List[UUID], action: str) -> None:
        """Users carry no status; activate/deactivate land on each role profile"""
        changes = USER_TRANSITIONS[action]
        await self.organization_repo.update_many(
            user_ids, changes["organization"], column=OrganizationProfile.user_id
        )
        await self.maintainer_repo.update_by_user_ids(user_ids, changes["maintainer"])
        await self.freelancer_repo.update_many(
            user_ids, changes["freelancer"], column=FreelancerProfile.user_id
        )

    async def bulk_action(self, request: BulkActionRequest) -> BulkActionResponse:
        return await self.bulk.dispatch(
            USER_BULK_POLICY,
            request.resolve_ids("userIds"),
            request.action,
            repository=self.user_repo,
            on_delete=self.cascade.delete_users,
            on_update=self._apply_profile_transition
        )

    async def delete_user(self, user_id: Optional[str]) -> MessageResponse:
        if not user_id:
            raise ValidationError("User ID is required", field="id")

        user = await self._get_or_404(user_id)
        parsed = user.id

        async with self.transaction(f"delete user {parsed}"):
            await self.cascade.delete_users([parsed])

        logger.info(f"User deleted: {parsed}")
        return MessageResponse(message="User deleted successfully")
