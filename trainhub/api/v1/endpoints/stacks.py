# =============================================
# trainhub/api/v1/endpoints/stacks.py
# =============================================
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from trainhub.config.database import get_db
from trainhub.core.auth import require_admin
from trainhub.database.models.user import User
from trainhub.services.stack_service import StackService
from trainhub.schemas.base import BulkActionRequest, BulkActionResponse, MessageResponse
from trainhub.schemas.stack import StackCreate, StackUpdate, StackResponse

router = APIRouter()

async def get_stack_service(db: AsyncSession = Depends(get_db)) -> StackService:
    return StackService(db)

@router.get("", response_model=List[StackResponse])
async def list_stacks(
    search: Optional[str] = Query(None),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    current_user: User = Depends(require_admin),
    stack_service: StackService = Depends(get_stack_service)
):
    """List stacks by name, with training counts"""
    return await stack_service.list_items(search=search, is_active=is_active)

@router.post("", response_model=StackResponse, status_code=status.HTTP_201_CREATED)
async def create_stack(
    stack_data: StackCreate,
    current_user: User = Depends(require_admin),
    stack_service: StackService = Depends(get_stack_service)
):
    return await stack_service.create_item(stack_data)

@router.put("", response_model=StackResponse)
async def update_stack(
    stack_data: StackUpdate,
    current_user: User = Depends(require_admin),
    stack_service: StackService = Depends(get_stack_service)
):
    return await stack_service.update_item(stack_data)

@router.patch("", response_model=BulkActionResponse)
async def bulk_stack_action(
    request: BulkActionRequest,
    current_user: User = Depends(require_admin),
    stack_service: StackService = Depends(get_stack_service)
):
    return await stack_service.bulk_action(request)

@router.delete("", response_model=MessageResponse)
async def delete_stack(
    id: Optional[str] = Query(None, description="Stack id"),
    current_user: User = Depends(require_admin),
    stack_service: StackService = Depends(get_stack_service)
):
    return await stack_service.delete_item(id)
