# =============================================
# trainhub/schemas/stack.py
# =============================================
from typing import Optional
from datetime import datetime
from uuid import UUID

from trainhub.schemas.base import CamelModel, RequestModel

class StackCreate(RequestModel):
    name: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = True

class StackUpdate(RequestModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None

class StackResponse(CamelModel):
    id: UUID
    name: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    trainings_count: int = 0
    active_trainings_count: int = 0
