# =============================================
# trainhub/api/v1/endpoints/users.py
# =============================================
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from trainhub.config.database import get_db
from trainhub.core.auth import require_admin
from trainhub.database.models.user import User
from trainhub.services.user_service import UserService
from trainhub.schemas.base import BulkActionRequest, BulkActionResponse, MessageResponse
from trainhub.schemas.user import UserCreate, UserUpdate, UserDetail

# =============================================
# ROUTER INSTANCE
# =============================================
router = APIRouter()

# =============================================
# DEPENDENCIES
# =============================================
async def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)

# =============================================
# USER MANAGEMENT ROUTES (ADMIN)
# =============================================

@router.get("", response_model=List[UserDetail])
async def list_users(
    current_user: User = Depends(require_admin),
    user_service: UserService = Depends(get_user_service)
):
    """List every user with its role profile"""
    return await user_service.list_users()

@router.post("", response_model=UserDetail, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    current_user: User = Depends(require_admin),
    user_service: UserService = Depends(get_user_service)
):
    """
    Create a user and the profile matching its role

    - **email**, **password**, **role**: Required
    - **role**: FREELANCER, ORGANIZATION, ADMIN or MAINTAINER
    """
    return await user_service.create_user(user_data)

@router.patch("", response_model=BulkActionResponse)
async def bulk_user_action(
    request: BulkActionRequest,
    current_user: User = Depends(require_admin),
    user_service: UserService = Depends(get_user_service)
):
    """**userIds** (or **ids**) with action activate, deactivate or delete"""
    return await user_service.bulk_action(request)

@router.delete("", response_model=MessageResponse)
async def delete_user(
    id: Optional[str] = Query(None, description="User id"),
    current_user: User = Depends(require_admin),
    user_service: UserService = Depends(get_user_service)
):
    """Delete a user together with everything its profile owns"""
    return await user_service.delete_user(id)

@router.get("/{user_id}", response_model=UserDetail)
async def get_user(
    user_id: str,
    current_user: User = Depends(require_admin),
    user_service: UserService = Depends(get_user_service)
):
    return await user_service.get_user(user_id)

@router.put("/{user_id}", response_model=UserDetail)
async def update_user(
    user_id: str,
    user_data: UserUpdate,
    current_user: User = Depends(require_admin),
    user_service: UserService = Depends(get_user_service)
):
    return await user_service.update_user(user_id, user_data)
