# =============================================
# trainhub/schemas/training_location.py
# =============================================
from typing import Optional
from datetime import datetime
from uuid import UUID

from trainhub.schemas.base import CamelModel, RequestModel

class TrainingLocationCreate(RequestModel):
    state: Optional[str] = None
    district: Optional[str] = None
    is_active: Optional[bool] = True

class TrainingLocationUpdate(RequestModel):
    id: Optional[str] = None
    state: Optional[str] = None
    district: Optional[str] = None
    is_active: Optional[bool] = None

class TrainingLocationResponse(CamelModel):
    id: UUID
    state: str
    district: str
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    trainings_count: int = 0
    active_trainings_count: int = 0
