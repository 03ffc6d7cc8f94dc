# =============================================
# trainhub/schemas/training.py
# =============================================
from pydantic import Field, field_validator
from typing import Any, Optional, List
from datetime import datetime
from uuid import UUID

from trainhub.core.validators import parse_skills
from trainhub.schemas.base import CamelModel, RequestModel, Pagination
from trainhub.schemas.enums import TrainingType, TrainingMode, ContractType

REQUIRED_TRAINING_FIELDS = (
    "title", "description", "category_id", "type", "location_id",
    "stack_id", "start_date", "end_date", "openings",
)

# =============================================
# CREATE SCHEMA
# =============================================
class TrainingCreate(RequestModel):
    title: Optional[str] = None
    description: Optional[str] = None
    skills: Optional[Any] = None
    category_id: Optional[UUID] = None
    location_id: Optional[UUID] = None
    stack_id: Optional[UUID] = None
    organization_id: Optional[UUID] = Field(None, description="Admins only; defaults to the system organization")
    type: Optional[TrainingType] = None
    mode: Optional[TrainingMode] = None
    contract_type: Optional[ContractType] = None
    experience_min: Optional[int] = Field(None, ge=0)
    experience_max: Optional[int] = Field(None, ge=0)
    openings: Optional[int] = Field(None, ge=1)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    has_payment: bool = False
    payment_term: Optional[str] = None
    payment_amount: Optional[float] = Field(None, ge=0)
    is_published: bool = False
    is_active: bool = True

    def missing_fields(self) -> List[str]:
        return [name for name in REQUIRED_TRAINING_FIELDS if getattr(self, name) in (None, "")]

# =============================================
# UPDATE SCHEMA
# =============================================
class TrainingUpdate(RequestModel):
    """
    Partial update. `action` selects a single transition (activate,
    deactivate, publish, unpublish) or `update` (default) for field edits.
    """
    action: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    skills: Optional[Any] = None
    category_id: Optional[UUID] = None
    location_id: Optional[UUID] = None
    stack_id: Optional[UUID] = None
    type: Optional[TrainingType] = None
    mode: Optional[TrainingMode] = None
    contract_type: Optional[ContractType] = None
    experience_min: Optional[int] = Field(None, ge=0)
    experience_max: Optional[int] = Field(None, ge=0)
    openings: Optional[int] = Field(None, ge=1)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    has_payment: Optional[bool] = None
    payment_term: Optional[str] = None
    payment_amount: Optional[float] = Field(None, ge=0)

    def training_fields(self) -> dict:
        return {key: value for key, value in self.provided().items() if key != "action" and value is not None}

# =============================================
# RESPONSE SCHEMAS
# =============================================
class TrainingCategoryRef(CamelModel):
    id: UUID
    name: str

class TrainingLocationRef(CamelModel):
    id: UUID
    state: str
    district: str

class StackRef(CamelModel):
    id: UUID
    name: str

class TrainingOrganizationRef(CamelModel):
    id: UUID
    organization_name: str
    logo: Optional[str] = None

class TrainingResponse(CamelModel):
    id: UUID
    title: str
    description: str
    skills: List[str] = Field(default_factory=list)
    category_id: UUID
    location_id: UUID
    stack_id: UUID
    organization_id: UUID
    freelancer_id: Optional[UUID] = None
    type: TrainingType
    mode: TrainingMode
    contract_type: Optional[ContractType] = None
    experience_min: Optional[int] = None
    experience_max: Optional[int] = None
    openings: int
    start_date: datetime
    end_date: datetime
    has_payment: bool
    payment_term: Optional[str] = None
    payment_amount: Optional[float] = None
    is_published: bool
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    category: Optional[TrainingCategoryRef] = None
    location: Optional[TrainingLocationRef] = None
    stack: Optional[StackRef] = None
    organization: Optional[TrainingOrganizationRef] = None

    @field_validator('skills', mode='before')
    @classmethod
    def read_skills(cls, v):
        """Stored as a JSON array or a legacy comma separated string"""
        return parse_skills(v)

class TrainingListResponse(CamelModel):
    trainings: List[TrainingResponse]
    pagination: Pagination

# =============================================
# SEARCH FILTERS SCHEMA
# =============================================
class TrainingSearchFilters(CamelModel):
    search: Optional[str] = Field(None, description="Matches title or description")
    category: Optional[str] = Field(None, description="Category name contains")
    type: Optional[TrainingType] = None
    is_published: Optional[bool] = None
    is_active: Optional[bool] = None
    organization_id: Optional[UUID] = None
