# =============================================
# trainhub/api/v1/endpoints/training_categories.py
# =============================================
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from trainhub.config.database import get_db
from trainhub.core.auth import require_admin
from trainhub.database.models.user import User
from trainhub.services.training_category_service import TrainingCategoryService
from trainhub.schemas.base import BulkActionRequest, BulkActionResponse, MessageResponse
from trainhub.schemas.training_category import (
    TrainingCategoryCreate,
    TrainingCategoryUpdate,
    TrainingCategoryImport,
    TrainingCategoryImportResult,
    TrainingCategoryResponse
)

router = APIRouter()

async def get_category_service(db: AsyncSession = Depends(get_db)) -> TrainingCategoryService:
    return TrainingCategoryService(db)

@router.get("", response_model=List[TrainingCategoryResponse])
async def list_categories(
    search: Optional[str] = Query(None, description="Matches name or description"),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    current_user: User = Depends(require_admin),
    category_service: TrainingCategoryService = Depends(get_category_service)
):
    """List training categories, newest first, with training counts"""
    return await category_service.list_items(search=search, is_active=is_active)

@router.post("", response_model=TrainingCategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: TrainingCategoryCreate,
    current_user: User = Depends(require_admin),
    category_service: TrainingCategoryService = Depends(get_category_service)
):
    """
    Create a training category

    - **name**: Required, unique
    - **description**: Required
    """
    return await category_service.create_item(category_data)

@router.post("/bulk-import", response_model=TrainingCategoryImportResult, response_model_exclude_none=True)
async def import_categories(
    import_data: TrainingCategoryImport,
    current_user: User = Depends(require_admin),
    category_service: TrainingCategoryService = Depends(get_category_service)
):
    """Create many categories at once; existing names are skipped"""
    return await category_service.import_categories(import_data)

@router.put("", response_model=TrainingCategoryResponse)
async def update_category(
    category_data: TrainingCategoryUpdate,
    current_user: User = Depends(require_admin),
    category_service: TrainingCategoryService = Depends(get_category_service)
):
    return await category_service.update_item(category_data)

@router.patch("", response_model=BulkActionResponse)
async def bulk_category_action(
    request: BulkActionRequest,
    current_user: User = Depends(require_admin),
    category_service: TrainingCategoryService = Depends(get_category_service)
):
    """**categoryIds** (or **ids**) with action activate, deactivate or delete"""
    return await category_service.bulk_action(request)

@router.delete("", response_model=MessageResponse)
async def delete_category(
    id: Optional[str] = Query(None, description="Category id"),
    current_user: User = Depends(require_admin),
    category_service: TrainingCategoryService = Depends(get_category_service)
):
    return await category_service.delete_item(id)
