# =============================================
# trainhub/services/stack_service.py
# =============================================
from typing import Any, Dict

from trainhub.core.lifecycle import STACK_BULK_POLICY
from trainhub.repositories.stack_repository import StackRepository
from trainhub.schemas.stack import StackResponse
from trainhub.services.reference_data_service import ReferenceDataService

class StackService(ReferenceDataService):
    repository_class = StackRepository
    response_schema = StackResponse
    policy = STACK_BULK_POLICY
    training_column_name = "stack_id"
    label = "Stack"
    plural = "stacks"
    ids_key = "stackIds"
    required_fields = ("name",)
    duplicate_message = "Stack with this name already exists"

    async def find_duplicate(self, values: Dict[str, Any], exclude_id=None):
        return await self.repo.get_by_name(values["name"], exclude_id=exclude_id)
