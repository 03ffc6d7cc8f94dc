# =============================================
# trainhub/api/v1/endpoints/training_locations.py
# =============================================
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from trainhub.config.database import get_db
from trainhub.core.auth import require_admin
from trainhub.database.models.user import User
from trainhub.services.training_location_service import TrainingLocationService
from trainhub.schemas.base import BulkActionRequest, BulkActionResponse, MessageResponse
from trainhub.schemas.training_location import (
    TrainingLocationCreate,
    TrainingLocationUpdate,
    TrainingLocationResponse
)

router = APIRouter()

async def get_location_service(db: AsyncSession = Depends(get_db)) -> TrainingLocationService:
    return TrainingLocationService(db)

@router.get("", response_model=List[TrainingLocationResponse])
async def list_locations(
    search: Optional[str] = Query(None, description="Matches state or district"),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    current_user: User = Depends(require_admin),
    location_service: TrainingLocationService = Depends(get_location_service)
):
    """List training locations ordered by state, with training counts"""
    return await location_service.list_items(search=search, is_active=is_active)

@router.post("", response_model=TrainingLocationResponse, status_code=status.HTTP_201_CREATED)
async def create_location(
    location_data: TrainingLocationCreate,
    current_user: User = Depends(require_admin),
    location_service: TrainingLocationService = Depends(get_location_service)
):
    """
    Create a training location

    - **state**, **district**: Required; the pair must be unique
    - **isActive**: Defaults to true
    """
    return await location_service.create_item(location_data)

@router.put("", response_model=TrainingLocationResponse)
async def update_location(
    location_data: TrainingLocationUpdate,
    current_user: User = Depends(require_admin),
    location_service: TrainingLocationService = Depends(get_location_service)
):
    return await location_service.update_item(location_data)

@router.patch("", response_model=BulkActionResponse)
async def bulk_location_action(
    request: BulkActionRequest,
    current_user: User = Depends(require_admin),
    location_service: TrainingLocationService = Depends(get_location_service)
):
    """**locationIds** (or **ids**) with action activate, deactivate or delete"""
    return await location_service.bulk_action(request)

@router.delete("", response_model=MessageResponse)
async def delete_location(
    id: Optional[str] = Query(None, description="Location id"),
    current_user: User = Depends(require_admin),
    location_service: TrainingLocationService = Depends(get_location_service)
):
    """Delete a location; refused while trainings reference it"""
    return await location_service.delete_item(id)
