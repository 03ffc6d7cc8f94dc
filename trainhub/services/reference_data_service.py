# =============================================
# trainhub/services/reference_data_service.py
# =============================================
"""
Shared behaviour of the lookup tables trainings point at: locations,
categories and stacks.

Each one lists with training counts, enforces a uniqueness rule on
create/update, and refuses deletion while any training references it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple, Type
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from trainhub.core.exceptions import NotFoundError, ValidationError
from trainhub.core.lifecycle import ActionPolicy
from trainhub.database.models.training import Training
from trainhub.repositories.base_repository import BaseRepository
from trainhub.repositories.cascade_repository import CascadeRepository
from trainhub.repositories.training_repository import TrainingRepository
from trainhub.schemas.base import BulkActionRequest, BulkActionResponse, CamelModel, MessageResponse, RequestModel
from trainhub.services.base_service import BaseService, as_uuid
from trainhub.services.bulk_action_service import BulkActionDispatcher

logger = logging.getLogger(__name__)

class ReferenceDataService(BaseService, ABC):
    repository_class: Type[BaseRepository]
    response_schema: Type[CamelModel]
    policy: ActionPolicy
    training_column_name: str
    label: str
    plural: str
    ids_key: str
    required_fields: Tuple[str, ...]
    duplicate_message: str

    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.repo = self.repository_class(db)
        self.training_repo = TrainingRepository(db)
        self.cascade = CascadeRepository(db)
        self.bulk = BulkActionDispatcher(db)

    @abstractmethod
    async def find_duplicate(self, values: Dict[str, Any], exclude_id=None):
        """Row clashing with `values` on the uniqueness rule, ignoring `exclude_id`"""

    @property
    def training_column(self):
        return getattr(Training, self.training_column_name)

    @property
    def in_use_message(self) -> str:
        return (
            f"Cannot delete {self.label.lower()} with associated trainings. "
            "Please reassign or delete the trainings first."
        )

    @property
    def bulk_in_use_message(self) -> str:
        return (
            f"Cannot delete {self.plural} with associated trainings. "
            "Please reassign or delete the trainings first."
        )

    # =============================================
    # READ
    # =============================================

    async def with_counts(self, items: List[Any]) -> List[CamelModel]:
        counts = await self.training_repo.counts_by(self.training_column, [item.id for item in items])
        responses = []
        for item in items:
            response = self.response_schema.model_validate(item)
            response.trainings_count, response.active_trainings_count = counts.get(item.id, (0, 0))
            responses.append(response)
        return responses

    async def list_items(self, search: Optional[str] = None, is_active: Optional[bool] = None) -> List[CamelModel]:
        items = await self.repo.search(search=search, is_active=is_active)
        return await self.with_counts(items)

    # =============================================
    # WRITE
    # =============================================

    def _require(self, values: Dict[str, Any], *extra: str) -> None:
        if any(not values.get(name) for name in (*extra, *self.required_fields)):
            raise ValidationError("Missing required fields")

    async def create_item(self, data: RequestModel) -> CamelModel:
        values = data.model_dump(by_alias=False)
        self._require(values)
        if values.get("is_active") is None:
            values["is_active"] = True

        async with self.transaction(f"create {self.label.lower()}"):
            if await self.find_duplicate(values):
                raise ValidationError(self.duplicate_message)
            item = await self.repo.add(self.repo.model(**values))

        logger.info(f"{self.label} created: {item.id}")
        return (await self.with_counts([item]))[0]

    async def update_item(self, data: RequestModel) -> CamelModel:
        values = data.model_dump(by_alias=False)
        self._require(values, "id")

        item_id = as_uuid(values.pop("id"))
        item = await self.repo.get_by_id(item_id) if item_id else None
        if not item:
            raise NotFoundError(f"{self.label} not found")

        changes = {key: value for key, value in values.items() if value is not None}
        async with self.transaction(f"update {self.label.lower()} {item.id}"):
            if await self.find_duplicate(values, exclude_id=item.id):
                raise ValidationError(self.duplicate_message)
            await self.repo.update_fields(item, changes)

        logger.info(f"{self.label} updated: {item.id}")
        return (await self.with_counts([item]))[0]

    async def bulk_action(self, request: BulkActionRequest) -> BulkActionResponse:
        async def delete_unused(ids):
            await self.cascade.ensure_no_trainings(self.training_column, ids, self.bulk_in_use_message)
            await self.repo.delete_many(ids)

        return await self.bulk.dispatch(
            self.policy,
            request.resolve_ids(self.ids_key),
            request.action,
            repository=self.repo,
            on_delete=delete_unused
        )

    async def delete_item(self, item_id: Optional[str]) -> MessageResponse:
        if not item_id:
            raise ValidationError(f"{self.label} ID is required", field="id")

        parsed = as_uuid(item_id)
        item = await self.repo.get_by_id(parsed) if parsed else None
        if not item:
            raise NotFoundError(f"{self.label} not found")

        async with self.transaction(f"delete {self.label.lower()} {parsed}"):
            await self.cascade.ensure_no_trainings(self.training_column, [parsed], self.in_use_message)
            await self.repo.delete_many([parsed])

        logger.info(f"{self.label} deleted: {parsed}")
        return MessageResponse(message=f"{self.label} deleted successfully")
