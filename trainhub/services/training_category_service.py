# =============================================
# trainhub/services/training_category_service.py
# =============================================
from typing import Any, Dict, List
from pydantic import ValidationError as PydanticValidationError
import logging

from trainhub.core.exceptions import ValidationError
from trainhub.core.lifecycle import CATEGORY_BULK_POLICY
from trainhub.database.models.training_category import TrainingCategory
from trainhub.repositories.training_category_repository import TrainingCategoryRepository
from trainhub.schemas.training_category import (
    TrainingCategoryImport,
    TrainingCategoryImportResult,
    TrainingCategoryImportRow,
    TrainingCategoryResponse
)
from trainhub.services.reference_data_service import ReferenceDataService

logger = logging.getLogger(__name__)

def _row_error(error: PydanticValidationError) -> str:
    first = error.errors()[0]
    reason = first.get("ctx", {}).get("error")
    return str(reason) if reason else first["msg"]

class TrainingCategoryService(ReferenceDataService):
    repository_class = TrainingCategoryRepository
    response_schema = TrainingCategoryResponse
    policy = CATEGORY_BULK_POLICY
    training_column_name = "category_id"
    label = "Category"
    plural = "categories"
    ids_key = "categoryIds"
    required_fields = ("name", "description")
    duplicate_message = "Category with this name already exists"

    async def find_duplicate(self, values: Dict[str, Any], exclude_id=None):
        return await self.repo.get_by_name(values["name"], exclude_id=exclude_id)

    async def import_categories(self, data: TrainingCategoryImport) -> TrainingCategoryImportResult:
        """
        Create every valid row whose name is not taken yet.

        Invalid rows are reported in `errors` and counted as skipped, as are
        names that already exist (or repeat within the payload).
        """
        rows = data.categories
        if not isinstance(rows, list) or not rows:
            raise ValidationError("Invalid categories data", field="categories")

        valid: List[TrainingCategoryImportRow] = []
        errors: List[str] = []
        for raw in rows:
            name = raw.get("name") if isinstance(raw, dict) else None
            try:
                valid.append(TrainingCategoryImportRow.model_validate(raw))
            except PydanticValidationError as e:
                errors.append(f'Invalid data for category "{name}": {_row_error(e)}')

        skipped = len(errors)
        imported = 0
        async with self.transaction("import categories"):
            taken = await self.repo.existing_names([row.name for row in valid])
            for row in valid:
                if row.name.lower() in taken:
                    skipped += 1
                    continue
                taken.add(row.name.lower())
                await self.repo.add(TrainingCategory(
                    name=row.name,
                    description=row.description,
                    is_active=row.is_active
                ))
                imported += 1

        logger.info(f"Category import: {imported} imported, {skipped} skipped")
        return TrainingCategoryImportResult(
            imported_count=imported,
            skipped_count=skipped,
            errors=errors or None
        )
