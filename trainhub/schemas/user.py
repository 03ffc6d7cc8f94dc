# =============================================
# trainhub/schemas/user.py
# =============================================
from typing import Optional
from datetime import datetime
from uuid import UUID

from trainhub.schemas.base import CamelModel, RequestModel
from trainhub.schemas.enums import (
    UserRole, ActiveStatus, AvailabilityStatus, TrainerType, VerificationStatus
)

# =============================================
# REQUEST SCHEMAS
# =============================================
class UserCreate(RequestModel):
    """Admin "Add User": one user plus the profile matching its role"""
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None

class UserUpdate(RequestModel):
    """Partial update; absent fields keep their stored value"""
    email: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None

# =============================================
# RESPONSE SCHEMAS
# =============================================
class UserResponse(CamelModel):
    id: UUID
    email: str
    role: UserRole
    name: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

class OrganizationProfileSummary(CamelModel):
    id: UUID
    organization_name: str
    verified_status: VerificationStatus
    active_status: ActiveStatus

class MaintainerProfileSummary(CamelModel):
    id: UUID
    status: ActiveStatus

class FreelancerProfileSummary(CamelModel):
    id: UUID
    trainer_type: TrainerType
    availability: AvailabilityStatus

class UserDetail(UserResponse):
    """User with the profile matching its role"""
    organization_profile: Optional[OrganizationProfileSummary] = None
    maintainer_profile: Optional[MaintainerProfileSummary] = None
    freelancer_profile: Optional[FreelancerProfileSummary] = None
