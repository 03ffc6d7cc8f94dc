# =============================================
# trainhub/api/v1/endpoints/maintainers.py
# =============================================
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from trainhub.config.database import get_db
from trainhub.core.auth import require_admin
from trainhub.database.models.user import User
from trainhub.services.maintainer_service import MaintainerService
from trainhub.schemas.base import BulkActionRequest, MessageResponse
from trainhub.schemas.maintainer import (
    MaintainerCreate,
    MaintainerUpdate,
    MaintainerResponse,
    MaintainerBulkResponse
)

router = APIRouter()

async def get_maintainer_service(db: AsyncSession = Depends(get_db)) -> MaintainerService:
    return MaintainerService(db)

@router.get("", response_model=List[MaintainerResponse])
async def list_maintainers(
    search: Optional[str] = Query(None, description="Matches name or email"),
    current_user: User = Depends(require_admin),
    maintainer_service: MaintainerService = Depends(get_maintainer_service)
):
    """List maintainers with the number of reviews each has written"""
    return await maintainer_service.list_maintainers(search=search)

@router.post("", response_model=MaintainerResponse, status_code=status.HTTP_201_CREATED)
async def create_maintainer(
    maintainer_data: MaintainerCreate,
    current_user: User = Depends(require_admin),
    maintainer_service: MaintainerService = Depends(get_maintainer_service)
):
    return await maintainer_service.create_maintainer(maintainer_data)

@router.patch("", response_model=MaintainerBulkResponse)
async def bulk_maintainer_action(
    request: BulkActionRequest,
    current_user: User = Depends(require_admin),
    maintainer_service: MaintainerService = Depends(get_maintainer_service)
):
    """**ids** (maintainer user ids) with action activate, deactivate or delete"""
    return await maintainer_service.bulk_action(request)

@router.get("/{maintainer_id}", response_model=MaintainerResponse)
async def get_maintainer(
    maintainer_id: str,
    current_user: User = Depends(require_admin),
    maintainer_service: MaintainerService = Depends(get_maintainer_service)
):
    return await maintainer_service.get_maintainer(maintainer_id)

@router.put("/{maintainer_id}", response_model=MaintainerResponse)
async def update_maintainer(
    maintainer_id: str,
    maintainer_data: MaintainerUpdate,
    current_user: User = Depends(require_admin),
    maintainer_service: MaintainerService = Depends(get_maintainer_service)
):
    """Edit name, email or phone, or send **action** activate/deactivate"""
    return await maintainer_service.update_maintainer(maintainer_id, maintainer_data)

@router.delete("/{maintainer_id}", response_model=MessageResponse)
async def delete_maintainer(
    maintainer_id: str,
    current_user: User = Depends(require_admin),
    maintainer_service: MaintainerService = Depends(get_maintainer_service)
):
    return await maintainer_service.delete_maintainer(maintainer_id)
