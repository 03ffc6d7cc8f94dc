# =============================================
# trainhub/api/v1/endpoints/freelancers.py
# =============================================
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from trainhub.config.database import get_db
from trainhub.core.auth import (
    get_current_user,
    require_admin,
    require_admin_or_maintainer,
    require_freelancer
)
from trainhub.database.models.user import User
from trainhub.services.freelancer_service import FreelancerService
from trainhub.schemas.base import BulkActionRequest, BulkActionResponse, MessageResponse
from trainhub.schemas.enums import AvailabilityStatus, TrainerType
from trainhub.schemas.freelancer import (
    FreelancerUpdate,
    FreelancerResponse,
    FreelancerListResponse,
    FreelancerSearchFilters
)

router = APIRouter()

async def get_freelancer_service(db: AsyncSession = Depends(get_db)) -> FreelancerService:
    return FreelancerService(db)

@router.get("", response_model=FreelancerListResponse)
async def list_freelancers(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    search: Optional[str] = Query(None, description="Matches name, email, skills or location"),
    trainer_type: Optional[TrainerType] = Query(None, alias="trainerType"),
    availability: Optional[AvailabilityStatus] = Query(None),
    current_user: User = Depends(get_current_user),
    freelancer_service: FreelancerService = Depends(get_freelancer_service)
):
    filters = FreelancerSearchFilters(search=search, trainer_type=trainer_type, availability=availability)
    return await freelancer_service.list_freelancers(filters, page=page, limit=limit)

@router.put("", response_model=FreelancerResponse)
async def update_own_profile(
    profile_data: FreelancerUpdate,
    current_user: User = Depends(require_freelancer),
    freelancer_service: FreelancerService = Depends(get_freelancer_service)
):
    """Update the caller's own trainer profile"""
    return await freelancer_service.update_own_profile(current_user, profile_data)

@router.patch("", response_model=BulkActionResponse)
async def bulk_freelancer_action(
    request: BulkActionRequest,
    current_user: User = Depends(require_admin_or_maintainer),
    freelancer_service: FreelancerService = Depends(get_freelancer_service)
):
    """**freelancerIds** (or **ids**) with action activate, deactivate or delete"""
    return await freelancer_service.bulk_action(request)

@router.delete("", response_model=MessageResponse)
async def delete_freelancer(
    id: Optional[str] = Query(None, description="Freelancer profile id"),
    current_user: User = Depends(require_admin),
    freelancer_service: FreelancerService = Depends(get_freelancer_service)
):
    return await freelancer_service.delete_freelancer(id)
