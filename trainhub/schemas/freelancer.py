# =============================================
# trainhub/schemas/freelancer.py
# =============================================
from pydantic import Field, field_validator
from typing import Any, Optional, List
from datetime import datetime
from uuid import UUID

from trainhub.core.validators import parse_skills
from trainhub.schemas.base import CamelModel, RequestModel, Pagination
from trainhub.schemas.enums import AvailabilityStatus, TrainerType

class FreelancerUpdate(RequestModel):
    """Self-service profile update; absent fields keep their stored value"""
    name: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[Any] = None
    trainer_type: Optional[TrainerType] = None
    availability: Optional[AvailabilityStatus] = None
    experience_years: Optional[int] = Field(None, ge=0)
    location: Optional[str] = None

class FreelancerOwner(CamelModel):
    id: UUID
    email: str
    name: Optional[str] = None
    phone: Optional[str] = None

class FreelancerResponse(CamelModel):
    id: UUID
    user_id: UUID
    bio: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    trainer_type: TrainerType
    availability: AvailabilityStatus
    experience_years: Optional[int] = None
    location: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    user: Optional[FreelancerOwner] = None

    @field_validator('skills', mode='before')
    @classmethod
    def read_skills(cls, v):
        return parse_skills(v)

class FreelancerListResponse(CamelModel):
    freelancers: List[FreelancerResponse]
    pagination: Pagination

class FreelancerSearchFilters(CamelModel):
    search: Optional[str] = None
    trainer_type: Optional[TrainerType] = None
    availability: Optional[AvailabilityStatus] = None
