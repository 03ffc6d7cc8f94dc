# =============================================
# trainhub/schemas/maintainer.py
# =============================================
from typing import Optional
from datetime import datetime
from uuid import UUID

from trainhub.schemas.base import CamelModel, RequestModel
from trainhub.schemas.enums import ActiveStatus

class MaintainerCreate(RequestModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None

class MaintainerUpdate(RequestModel):
    """Field edits, or `action` activate/deactivate"""
    action: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

class MaintainerResponse(CamelModel):
    """A maintainer is addressed by its user id"""
    id: UUID
    profile_id: UUID
    email: str
    name: Optional[str] = None
    phone: Optional[str] = None
    status: ActiveStatus
    reviews_count: int = 0
    created_at: datetime

class MaintainerBulkResponse(CamelModel):
    message: str
    count: int
