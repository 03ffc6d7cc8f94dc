# =============================================
# trainhub/schemas/training_category.py
# =============================================
from pydantic import Field, field_validator
from typing import Any, Optional, List
from datetime import datetime
from uuid import UUID

from trainhub.schemas.base import CamelModel, RequestModel

class TrainingCategoryCreate(RequestModel):
    name: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = True

class TrainingCategoryUpdate(RequestModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None

class TrainingCategoryImport(RequestModel):
    """Bulk import payload; rows are validated one by one by the service"""
    categories: Optional[Any] = None

class TrainingCategoryResponse(CamelModel):
    id: UUID
    name: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    trainings_count: int = 0
    active_trainings_count: int = 0

class TrainingCategoryImportResult(CamelModel):
    success: bool = True
    imported_count: int
    skipped_count: int
    errors: Optional[List[str]] = None

class TrainingCategoryImportRow(RequestModel):
    """One row of a bulk import"""
    name: Optional[str] = Field(None, validate_default=True)
    description: Optional[str] = Field(None, validate_default=True)
    is_active: bool = True

    @field_validator('name')
    @classmethod
    def check_name(cls, v):
        if not v or len(v) < 2:
            raise ValueError("Category name must be at least 2 characters")
        return v

    @field_validator('description')
    @classmethod
    def check_description(cls, v):
        if not v:
            raise ValueError("Description is required")
        return v
