# =============================================
# trainhub/api/v1/endpoints/trainings.py
# =============================================
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from uuid import UUID

from trainhub.config.database import get_db
from trainhub.core.auth import (
    get_current_user,
    require_admin_or_maintainer,
    require_admin_or_organization
)
from trainhub.database.models.user import User
from trainhub.services.training_service import TrainingService
from trainhub.schemas.base import BulkActionRequest, BulkActionResponse, MessageResponse
from trainhub.schemas.enums import TrainingType
from trainhub.schemas.training import (
    TrainingCreate,
    TrainingUpdate,
    TrainingResponse,
    TrainingListResponse,
    TrainingSearchFilters
)

# =============================================
# ROUTER INSTANCE
# =============================================
router = APIRouter()

# =============================================
# DEPENDENCIES
# =============================================
async def get_training_service(db: AsyncSession = Depends(get_db)) -> TrainingService:
    return TrainingService(db)

# =============================================
# TRAINING ROUTES
# =============================================

@router.get("", response_model=TrainingListResponse)
async def list_trainings(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, description="Page size"),
    search: Optional[str] = Query(None, description="Matches title or description"),
    category: Optional[str] = Query(None, description="Category name contains"),
    type: Optional[TrainingType] = Query(None),
    is_published: Optional[bool] = Query(None, alias="isPublished"),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    organization_id: Optional[UUID] = Query(None, alias="organizationId"),
    current_user: User = Depends(get_current_user),
    training_service: TrainingService = Depends(get_training_service)
):
    """
    Search trainings, newest first

    **Requires authentication.** Organization users only see their own
    trainings.
    """
    filters = TrainingSearchFilters(
        search=search,
        category=category,
        type=type,
        is_published=is_published,
        is_active=is_active,
        organization_id=organization_id
    )
    return await training_service.list_trainings(current_user, filters, page=page, limit=limit)

@router.post("", response_model=TrainingResponse, status_code=status.HTTP_201_CREATED)
async def create_training(
    training_data: TrainingCreate,
    current_user: User = Depends(require_admin_or_organization),
    training_service: TrainingService = Depends(get_training_service)
):
    """
    Post a training

    **Requires ADMIN or ORGANIZATION**

    - Required: **title**, **description**, **categoryId**, **type**,
      **locationId**, **stackId**, **startDate**, **endDate**, **openings**
    - **organizationId**: Admins only; defaults to the system organization
    """
    return await training_service.create_training(current_user, training_data)

@router.patch("", response_model=BulkActionResponse)
async def bulk_training_action(
    request: BulkActionRequest,
    current_user: User = Depends(require_admin_or_maintainer),
    training_service: TrainingService = Depends(get_training_service)
):
    """
    Apply one action to many trainings

    - **trainingIds**: Training ids (or **ids**)
    - **action**: activate, deactivate, publish, unpublish, approve, reject or delete
    """
    return await training_service.bulk_action(request)

@router.delete("", response_model=MessageResponse)
async def delete_training(
    id: Optional[str] = Query(None, description="Training id"),
    current_user: User = Depends(require_admin_or_organization),
    training_service: TrainingService = Depends(get_training_service)
):
    """Delete a training and its feedback; organizations may only delete their own"""
    return await training_service.delete_training(current_user, id)

@router.get("/{training_id}", response_model=TrainingResponse)
async def get_training(
    training_id: str,
    current_user: User = Depends(get_current_user),
    training_service: TrainingService = Depends(get_training_service)
):
    return await training_service.get_training(training_id)

@router.put("/{training_id}", response_model=TrainingResponse)
async def update_training(
    training_id: str,
    training_data: TrainingUpdate,
    current_user: User = Depends(require_admin_or_organization),
    training_service: TrainingService = Depends(get_training_service)
):
    """
    Update a training, or send **action** activate, deactivate, publish
    or unpublish
    """
    return await training_service.update_training(current_user, training_id, training_data)
