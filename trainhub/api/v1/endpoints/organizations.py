# =============================================
# trainhub/api/v1/endpoints/organizations.py
# =============================================
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from trainhub.config.database import get_db
from trainhub.core.auth import (
    get_current_user,
    require_admin,
    require_admin_or_maintainer,
    require_organization,
    require_roles
)
from trainhub.database.models.user import User
from trainhub.services.organization_service import OrganizationService
from trainhub.schemas.base import BulkActionRequest, BulkActionResponse, MessageResponse
from trainhub.schemas.enums import ActiveStatus, UserRole, VerificationStatus
from trainhub.schemas.organization import (
    OrganizationCreate,
    OrganizationUpdate,
    OrganizationResponse,
    OrganizationDetail,
    OrganizationListResponse,
    OrganizationRegisterResponse,
    OrganizationSearchFilters
)

# =============================================
# ROUTER INSTANCE
# =============================================
router = APIRouter()

# =============================================
# DEPENDENCIES
# =============================================
async def get_organization_service(db: AsyncSession = Depends(get_db)) -> OrganizationService:
    return OrganizationService(db)

# =============================================
# ORGANIZATION ROUTES
# =============================================

@router.get("", response_model=OrganizationListResponse)
async def list_organizations(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, description="Page size"),
    search: Optional[str] = Query(None, description="Matches name, website or location"),
    verification_status: Optional[VerificationStatus] = Query(None, alias="verificationStatus"),
    active_status: Optional[ActiveStatus] = Query(None, alias="activeStatus"),
    current_user: User = Depends(get_current_user),
    organization_service: OrganizationService = Depends(get_organization_service)
):
    """
    List organizations, newest first

    **Requires authentication**
    """
    filters = OrganizationSearchFilters(
        search=search,
        verification_status=verification_status,
        active_status=active_status
    )
    return await organization_service.list_organizations(filters, page=page, limit=limit)

@router.post("", response_model=OrganizationResponse, status_code=status.HTTP_201_CREATED)
async def create_organization(
    organization_data: OrganizationCreate,
    current_user: User = Depends(require_admin),
    organization_service: OrganizationService = Depends(get_organization_service)
):
    """
    Create an organization account (user + profile)

    **Requires ADMIN**
    """
    return await organization_service.create_organization(organization_data)

@router.post("/register", response_model=OrganizationRegisterResponse, status_code=status.HTTP_201_CREATED)
async def register_organization(
    organization_data: OrganizationCreate,
    organization_service: OrganizationService = Depends(get_organization_service)
):
    """
    Public self-registration. The organization starts PENDING until an
    admin or maintainer verifies it.
    """
    organization = await organization_service.create_organization(organization_data, self_registration=True)
    return OrganizationRegisterResponse(
        message="Organization registered successfully. Please wait for admin approval.",
        data=organization
    )

@router.put("", response_model=OrganizationResponse)
async def update_own_organization(
    organization_data: OrganizationUpdate,
    current_user: User = Depends(require_organization),
    organization_service: OrganizationService = Depends(get_organization_service)
):
    """Update the caller's own organization profile"""
    return await organization_service.update_own_organization(current_user, organization_data)

@router.patch("", response_model=BulkActionResponse)
async def bulk_organization_action(
    request: BulkActionRequest,
    current_user: User = Depends(require_admin_or_maintainer),
    organization_service: OrganizationService = Depends(get_organization_service)
):
    """
    Apply one action to many organizations

    - **organizationIds**: Organization ids (or **ids**)
    - **action**: activate, deactivate, verify, unverify or delete
    """
    return await organization_service.bulk_action(request)

@router.delete("", response_model=MessageResponse)
async def delete_organization(
    id: Optional[str] = Query(None, description="Organization id"),
    current_user: User = Depends(require_admin),
    organization_service: OrganizationService = Depends(get_organization_service)
):
    """Delete an organization with its trainings, feedback and owner account"""
    return await organization_service.delete_organization(id)

@router.get("/{organization_id}", response_model=OrganizationDetail)
async def get_organization(
    organization_id: str,
    current_user: User = Depends(require_admin),
    organization_service: OrganizationService = Depends(get_organization_service)
):
    """Get organization by ID with training and feedback counts"""
    return await organization_service.get_organization(organization_id)

@router.put("/{organization_id}", response_model=OrganizationResponse)
async def update_organization(
    organization_id: str,
    organization_data: OrganizationUpdate,
    current_user: User = Depends(require_roles(UserRole.ADMIN, UserRole.ORGANIZATION)),
    organization_service: OrganizationService = Depends(get_organization_service)
):
    """
    Update an organization

    Organizations may only edit their own profile. Admins send an
    **action** (approve, reject, activate, deactivate, update).
    """
    if current_user.role == UserRole.ORGANIZATION:
        return await organization_service.update_own_organization(
            current_user, organization_data, organization_id=organization_id
        )
    return await organization_service.review_organization(organization_id, organization_data)

@router.delete("/{organization_id}", response_model=MessageResponse)
async def delete_organization_by_id(
    organization_id: str,
    current_user: User = Depends(require_admin),
    organization_service: OrganizationService = Depends(get_organization_service)
):
    return await organization_service.delete_organization(organization_id)
