# =============================================
# trainhub/schemas/dashboard.py
# =============================================
from typing import List, Optional
from datetime import datetime
from uuid import UUID

from trainhub.schemas.base import CamelModel, RequestModel
from trainhub.schemas.user import UserResponse

class RecentActivity(CamelModel):
    """A freelancer or organization sign-up"""
    id: UUID
    type: str
    action: str
    user_name: str
    created_at: datetime

class DashboardStats(CamelModel):
    total_users: int = 0
    total_organizations: int = 0
    total_freelancers: int = 0
    total_maintainers: int = 0
    total_trainings: int = 0
    active_trainings: int = 0
    pending_verifications: int = 0
    recent_activities: List[RecentActivity] = []

class AdminProfileUpdate(RequestModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

class AdminProfileResponse(CamelModel):
    success: bool = True
    message: str
    data: UserResponse
