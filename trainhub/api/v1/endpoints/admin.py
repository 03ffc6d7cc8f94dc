# =============================================
# trainhub/api/v1/endpoints/admin.py
# =============================================
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from trainhub.config.database import get_db
from trainhub.core.auth import require_admin
from trainhub.database.models.user import User
from trainhub.services.admin_service import AdminService
from trainhub.schemas.dashboard import AdminProfileResponse, AdminProfileUpdate, DashboardStats
from trainhub.schemas.user import UserResponse

router = APIRouter()

async def get_admin_service(db: AsyncSession = Depends(get_db)) -> AdminService:
    return AdminService(db)

@router.get("/dashboard/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    current_user: User = Depends(require_admin),
    admin_service: AdminService = Depends(get_admin_service)
):
    """Platform totals and the latest sign-ups"""
    return await admin_service.get_dashboard_stats()

@router.get("/profile", response_model=UserResponse)
async def get_profile(
    current_user: User = Depends(require_admin),
    admin_service: AdminService = Depends(get_admin_service)
):
    return await admin_service.get_profile(current_user)

@router.put("/profile", response_model=AdminProfileResponse)
async def update_profile(
    profile_data: AdminProfileUpdate,
    current_user: User = Depends(require_admin),
    admin_service: AdminService = Depends(get_admin_service)
):
    return await admin_service.update_profile(current_user, profile_data)
