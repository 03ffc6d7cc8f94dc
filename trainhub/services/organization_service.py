# =============================================
# trainhub/services/organization_service.py
# =============================================
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from trainhub.config.settings import get_settings
from trainhub.core.exceptions import NotFoundError, UnauthorizedError, ValidationError
from trainhub.core.lifecycle import (
    ORGANIZATION_BULK_POLICY, ORGANIZATION_REVIEW_POLICY, UPDATE
)
from trainhub.core.security import get_password_hash
from trainhub.core.validators import is_valid_email_format, validate_email_domain, validate_password
from trainhub.database.models.organization_profile import OrganizationProfile
from trainhub.database.models.training import Training
from trainhub.database.models.training_feedback import TrainingFeedback
from trainhub.database.models.user import User
from trainhub.repositories.cascade_repository import CascadeRepository
from trainhub.repositories.feedback_repository import FeedbackRepository
from trainhub.repositories.organization_repository import OrganizationRepository
from trainhub.repositories.training_repository import TrainingRepository
from trainhub.repositories.user_repository import UserRepository
from trainhub.schemas.base import BulkActionRequest, BulkActionResponse, MessageResponse, Pagination
from trainhub.schemas.enums import ActiveStatus, UserRole, VerificationStatus
from trainhub.schemas.organization import (
    OrganizationCreate,
    OrganizationUpdate,
    OrganizationResponse,
    OrganizationDetail,
    OrganizationListResponse,
    OrganizationSearchFilters
)
from trainhub.services.base_service import BaseService, as_uuid
from trainhub.services.bulk_action_service import BulkActionDispatcher

logger = logging.getLogger(__name__)
settings = get_settings()

MISSING_FIELDS_MESSAGE = (
    "Missing required fields: email, password, organizationName, contactMail, companyLocation"
)

class OrganizationService(BaseService):
    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.organization_repo = OrganizationRepository(db)
        self.user_repo = UserRepository(db)
        self.training_repo = TrainingRepository(db)
        self.feedback_repo = FeedbackRepository(db)
        self.cascade = CascadeRepository(db)
        self.bulk = BulkActionDispatcher(db)

    # =============================================
    # CREATE / REGISTER
    # =============================================

    def _validate_new_organization(self, data: OrganizationCreate, domain_first: bool) -> None:
        """
        Field checks for a new organization account.

        Self-registration checks the login email domain before anything
        else; the admin form reports missing fields first.
        """
        if domain_first:
            email_check = validate_email_domain(data.email)
            if not email_check.is_valid:
                raise ValidationError(email_check.error, field="email")

        if data.missing_fields():
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        if not domain_first:
            email_check = validate_email_domain(data.email)
            if not email_check.is_valid:
                raise ValidationError(email_check.error, field="email")

        password_error = validate_password(data.password, settings.MIN_PASSWORD_LENGTH)
        if password_error:
            raise ValidationError(password_error, field="password")

        if not is_valid_email_format(data.contact_mail):
            raise ValidationError("Please enter a valid contact email address", field="contactMail")

    async def create_organization(self, data: OrganizationCreate, self_registration: bool = False) -> OrganizationResponse:
        """Create the owner user and its organization profile in one transaction"""
        self._validate_new_organization(data, domain_first=self_registration)

        async with self.transaction("create organization"):
            if await self.user_repo.email_exists(data.email):
                raise ValidationError("Email already exists", field="email")

            user = await self.user_repo.add(User(
                email=data.email.lower(),
                password=get_password_hash(data.password),
                name=data.name or "",
                role=UserRole.ORGANIZATION
            ))
            profile = await self.organization_repo.add(OrganizationProfile(
                user=user,
                organization_name=data.organization_name,
                website=data.website or "",
                contact_mail=data.contact_mail,
                phone=data.phone or "",
                company_location=data.company_location,
                logo=(data.logo or "") if not self_registration else "",
                verified_status=VerificationStatus.PENDING,
                active_status=ActiveStatus.ACTIVE,
                ratings=0.0
            ))

        await self.organization_repo.refresh(profile)
        logger.info(f"Organization created: {profile.organization_name} (ID: {profile.id})")
        return OrganizationResponse.model_validate(profile)

    # =============================================
    # READ
    # =============================================

    async def list_organizations(
        self,
        filters: OrganizationSearchFilters,
        page: int = 1,
        limit: int = 10
    ) -> OrganizationListResponse:
        page = max(page, 1)
        limit = min(max(limit, 1), settings.MAX_PAGE_SIZE)

        items, total = await self.organization_repo.search(filters, skip=(page - 1) * limit, limit=limit)
        return OrganizationListResponse(
            organizations=[OrganizationResponse.model_validate(item) for item in items],
            pagination=Pagination.build(page, limit, total)
        )

    async def _get_or_404(self, organization_id) -> OrganizationProfile:
        parsed = as_uuid(organization_id)
        profile = await self.organization_repo.get_by_id(parsed) if parsed else None
        if not profile:
            raise NotFoundError("Organization not found")
        return profile

    async def get_organization(self, organization_id) -> OrganizationDetail:
        """Organization with training and feedback counts"""
        profile = await self._get_or_404(organization_id)

        detail = OrganizationDetail.model_validate(profile)
        detail.trainings_count = await self.training_repo.count(Training.organization_id == profile.id)
        detail.active_trainings_count = await self.training_repo.count(
            Training.organization_id == profile.id, Training.is_active.is_(True)
        )
        detail.feedback_count = await self.feedback_repo.count(TrainingFeedback.organization_id == profile.id)
        return detail

    # =============================================
    # UPDATE
    # =============================================

    @staticmethod
    def _with_fallback(data: OrganizationUpdate) -> dict:
        """Blank or absent fields keep the stored value"""
        return {key: value for key, value in data.profile_fields().items() if value}

    async def update_own_organization(
        self,
        user: User,
        data: OrganizationUpdate,
        organization_id=None
    ) -> OrganizationResponse:
        """Self-service update by the owning organization user"""
        profile = await self.organization_repo.get_by_user_id(user.id)
        if not profile:
            raise NotFoundError("Organization profile not found")

        if organization_id is not None and as_uuid(organization_id) != profile.id:
            raise UnauthorizedError()

        if data.contact_mail and not is_valid_email_format(data.contact_mail):
            raise ValidationError("Please enter a valid contact email address", field="contactMail")

        async with self.transaction(f"update organization {profile.id}"):
            await self.organization_repo.update_fields(profile, self._with_fallback(data))

        logger.info(f"Organization profile updated by owner: {profile.id}")
        return OrganizationResponse.model_validate(profile)

    async def review_organization(self, organization_id, data: OrganizationUpdate) -> OrganizationResponse:
        """Admin single-entity transition: approve, reject, activate, deactivate or update"""
        action = ORGANIZATION_REVIEW_POLICY.require_action(data.action or UPDATE)
        profile = await self._get_or_404(organization_id)

        if action == UPDATE:
            values = self._with_fallback(data)
        else:
            values = ORGANIZATION_REVIEW_POLICY.changes_for(action)

        async with self.transaction(f"{action} organization {profile.id}"):
            await self.organization_repo.update_fields(profile, values)

        logger.info(f"Organization {profile.id}: {action} applied")
        return OrganizationResponse.model_validate(profile)

    # =============================================
    # BULK / DELETE
    # =============================================

    async def bulk_action(self, request: BulkActionRequest) -> BulkActionResponse:
        return await self.bulk.dispatch(
            ORGANIZATION_BULK_POLICY,
            request.resolve_ids("organizationIds"),
            request.action,
            repository=self.organization_repo,
            on_delete=self.cascade.delete_organizations
        )

    async def delete_organization(self, organization_id: Optional[str]) -> MessageResponse:
        if not organization_id:
            raise ValidationError("Organization ID is required", field="id")

        profile = await self._get_or_404(organization_id)
        profile_id = profile.id

        async with self.transaction(f"delete organization {profile_id}"):
            await self.cascade.delete_organizations([profile_id])

        logger.info(f"Organization deleted: {profile_id}")
        return MessageResponse(message="Organization deleted successfully")
