# =============================================
# trainhub/services/training_location_service.py
# =============================================
from typing import Any, Dict

from trainhub.core.lifecycle import LOCATION_BULK_POLICY
from trainhub.repositories.training_location_repository import TrainingLocationRepository
from trainhub.schemas.training_location import TrainingLocationResponse
from trainhub.services.reference_data_service import ReferenceDataService

class TrainingLocationService(ReferenceDataService):
    repository_class = TrainingLocationRepository
    response_schema = TrainingLocationResponse
    policy = LOCATION_BULK_POLICY
    training_column_name = "location_id"
    label = "Location"
    plural = "locations"
    ids_key = "locationIds"
    required_fields = ("state", "district")
    duplicate_message = "Location with this state and district already exists"

    async def find_duplicate(self, values: Dict[str, Any], exclude_id=None):
        """(state, district) pairs are unique"""
        return await self.repo.get_by_state_district(values["state"], values["district"], exclude_id=exclude_id)
