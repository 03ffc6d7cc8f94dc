# =============================================
# trainhub/services/training_service.py
# =============================================
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from trainhub.config.settings import get_settings
from trainhub.core.exceptions import NotFoundError, UnauthorizedError, ValidationError
from trainhub.core.lifecycle import TRAINING_BULK_POLICY, TRAINING_SINGLE_POLICY, UPDATE
from trainhub.core.security import generate_password, get_password_hash
from trainhub.core.validators import serialize_skills
from trainhub.database.models.organization_profile import OrganizationProfile
from trainhub.database.models.training import Training
from trainhub.database.models.user import User
from trainhub.repositories.cascade_repository import CascadeRepository
from trainhub.repositories.organization_repository import OrganizationRepository
from trainhub.repositories.stack_repository import StackRepository
from trainhub.repositories.training_category_repository import TrainingCategoryRepository
from trainhub.repositories.training_location_repository import TrainingLocationRepository
from trainhub.repositories.training_repository import TrainingRepository
from trainhub.repositories.user_repository import UserRepository
from trainhub.schemas.base import BulkActionRequest, BulkActionResponse, MessageResponse, Pagination
from trainhub.schemas.enums import ActiveStatus, TrainingMode, UserRole, VerificationStatus
from trainhub.schemas.training import (
    TrainingCreate,
    TrainingUpdate,
    TrainingResponse,
    TrainingListResponse,
    TrainingSearchFilters
)
from trainhub.services.base_service import BaseService, as_uuid
from trainhub.services.bulk_action_service import BulkActionDispatcher

logger = logging.getLogger(__name__)
settings = get_settings()

PAYMENT_FIELDS = ("payment_term", "payment_amount")

def _aware(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value

class TrainingService(BaseService):
    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.training_repo = TrainingRepository(db)
        self.organization_repo = OrganizationRepository(db)
        self.user_repo = UserRepository(db)
        self.category_repo = TrainingCategoryRepository(db)
        self.location_repo = TrainingLocationRepository(db)
        self.stack_repo = StackRepository(db)
        self.cascade = CascadeRepository(db)
        self.bulk = BulkActionDispatcher(db)

    # =============================================
    # HELPERS
    # =============================================

    async def _own_profile(self, user: User) -> OrganizationProfile:
        profile = await self.organization_repo.get_by_user_id(user.id)
        if not profile:
            raise NotFoundError("Organization profile not found")
        return profile

    async def _references(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Load the category, location and stack named in `values`; 404 for any that is absent"""
        lookups = (
            ("category_id", "category", self.category_repo, "Category not found"),
            ("location_id", "location", self.location_repo, "Location not found"),
            ("stack_id", "stack", self.stack_repo, "Stack not found"),
        )
        related = {}
        for key, attribute, repo, message in lookups:
            if values.get(key) is None:
                continue
            entity = await repo.get_by_id(values[key])
            if not entity:
                raise NotFoundError(message)
            related[attribute] = entity
        return related

    @staticmethod
    def _check_schedule(start_date: Optional[datetime], end_date: Optional[datetime]) -> None:
        if start_date and end_date and _aware(end_date) < _aware(start_date):
            raise ValidationError("End date must be after start date", field="endDate")

    @staticmethod
    def _check_experience(minimum: Optional[int], maximum: Optional[int]) -> None:
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValidationError("Minimum experience cannot exceed maximum experience", field="experienceMin")

    async def _system_organization(self) -> OrganizationProfile:
        """Organization that owns trainings posted by admins, created on first use"""
        user = await self.user_repo.get_by_email(settings.SYSTEM_ORGANIZATION_EMAIL)
        if user and user.organization_profile:
            return user.organization_profile

        if not user:
            user = await self.user_repo.add(User(
                email=settings.SYSTEM_ORGANIZATION_EMAIL,
                name=settings.SYSTEM_ORGANIZATION_NAME,
                password=get_password_hash(generate_password()),
                role=UserRole.ORGANIZATION
            ))

        profile = await self.organization_repo.add(OrganizationProfile(
            user=user,
            organization_name=settings.SYSTEM_ORGANIZATION_NAME,
            contact_mail=settings.SYSTEM_ORGANIZATION_EMAIL,
            company_location="System",
            verified_status=VerificationStatus.VERIFIED,
            active_status=ActiveStatus.ACTIVE
        ))
        logger.info(f"System organization created: {profile.id}")
        return profile

    async def _organization_for(self, user: User, data: TrainingCreate) -> OrganizationProfile:
        if user.role == UserRole.ORGANIZATION:
            return await self._own_profile(user)

        if data.organization_id:
            profile = await self.organization_repo.get_by_id(data.organization_id)
            if not profile:
                raise NotFoundError("Organization not found")
            return profile

        return await self._system_organization()

    async def _get_or_404(self, training_id) -> Training:
        parsed = as_uuid(training_id)
        training = await self.training_repo.get_by_id(parsed) if parsed else None
        if not training:
            raise NotFoundError("Training not found")
        return training

    async def _editable(self, user: User, training_id) -> Training:
        """Admins edit any training; organizations only their own"""
        if user.role == UserRole.ADMIN:
            return await self._get_or_404(training_id)

        parsed = as_uuid(training_id)
        training = await self.training_repo.get_by_id(parsed) if parsed else None
        profile = await self.organization_repo.get_by_user_id(user.id)
        if not training or not profile or training.organization_id != profile.id:
            raise UnauthorizedError()
        return training

    # =============================================
    # READ
    # =============================================

    async def list_trainings(
        self,
        user: User,
        filters: TrainingSearchFilters,
        page: int = 1,
        limit: int = 10
    ) -> TrainingListResponse:
        """Paginated search; organization users only ever see their own trainings"""
        page = max(page, 1)
        limit = min(max(limit, 1), settings.MAX_PAGE_SIZE)

        if user.role == UserRole.ORGANIZATION:
            profile = await self._own_profile(user)
            filters = filters.model_copy(update={"organization_id": profile.id})

        items, total = await self.training_repo.search(filters, skip=(page - 1) * limit, limit=limit)
        return TrainingListResponse(
            trainings=[TrainingResponse.model_validate(item) for item in items],
            pagination=Pagination.build(page, limit, total)
        )

    async def get_training(self, training_id) -> TrainingResponse:
        return TrainingResponse.model_validate(await self._get_or_404(training_id))

    # =============================================
    # CREATE
    # =============================================

    async def create_training(self, user: User, data: TrainingCreate) -> TrainingResponse:
        if data.missing_fields():
            raise ValidationError("Missing required fields")
        self._check_schedule(data.start_date, data.end_date)
        self._check_experience(data.experience_min, data.experience_max)

        values = data.model_dump(exclude={"organization_id"})
        values["skills"] = serialize_skills(data.skills)
        values["mode"] = data.mode or TrainingMode.ONLINE
        if not data.has_payment:
            values.update({key: None for key in PAYMENT_FIELDS})

        async with self.transaction("create training"):
            values.update(await self._references(values))
            organization = await self._organization_for(user, data)
            training = await self.training_repo.add(Training(**values, organization=organization))

        await self.training_repo.refresh(training)
        logger.info(f"Training created: {training.title} (ID: {training.id}) for organization {organization.id}")
        return TrainingResponse.model_validate(training)

    # =============================================
    # UPDATE
    # =============================================

    async def update_training(self, user: User, training_id, data: TrainingUpdate) -> TrainingResponse:
        """Single transition (activate, deactivate, publish, unpublish) or field update"""
        action = TRAINING_SINGLE_POLICY.require_action(data.action or UPDATE)
        training = await self._editable(user, training_id)

        if action == UPDATE:
            values = data.training_fields()
            self._check_schedule(values.get("start_date", training.start_date), values.get("end_date", training.end_date))
            self._check_experience(
                values.get("experience_min", training.experience_min),
                values.get("experience_max", training.experience_max)
            )
            if "skills" in values:
                values["skills"] = serialize_skills(values["skills"])
            if values.get("has_payment") is False:
                values.update({key: None for key in PAYMENT_FIELDS})
        else:
            values = dict(TRAINING_SINGLE_POLICY.changes_for(action))

        async with self.transaction(f"{action} training {training.id}"):
            values.update(await self._references(values))
            await self.training_repo.update_fields(training, values)

        logger.info(f"Training {training.id}: {action} applied")
        return TrainingResponse.model_validate(training)

    # =============================================
    # BULK / DELETE
    # =============================================

    async def bulk_action(self, request: BulkActionRequest) -> BulkActionResponse:
        return await self.bulk.dispatch(
            TRAINING_BULK_POLICY,
            request.resolve_ids("trainingIds"),
            request.action,
            repository=self.training_repo,
            on_delete=self.cascade.delete_trainings
        )

    async def delete_training(self, user: User, training_id: Optional[str]) -> MessageResponse:
        if not training_id:
            raise ValidationError("Training ID is required", field="id")

        training = await self._editable(user, training_id)
        parsed = training.id

        async with self.transaction(f"delete training {parsed}"):
            await self.cascade.delete_trainings([parsed])

        logger.info(f"Training deleted: {parsed}")
        return MessageResponse(message="Training deleted successfully")
