# =============================================
# trainhub/services/bulk_action_service.py
# =============================================
from typing import Any, Awaitable, Callable, List, Optional
from uuid import UUID
import logging

from trainhub.core.exceptions import NotFoundError
from trainhub.core.lifecycle import ActionPolicy, DELETE, parse_ids
from trainhub.repositories.base_repository import BaseRepository
from trainhub.schemas.base import BulkActionResponse
from trainhub.services.base_service import BaseService

logger = logging.getLogger(__name__)

IdsHandler = Callable[[List[UUID]], Awaitable[Any]]
ActionHandler = Callable[[List[UUID], str], Awaitable[Any]]

class BulkActionDispatcher(BaseService):
    """
    Applies one named action to a list of ids.

    Order: ids are validated, then the action name, then every id must
    exist. All mutations run in one transaction, so a request either
    applies to every id or to none.
    """

    async def dispatch(
        self,
        policy: ActionPolicy,
        raw_ids: Any,
        action: Optional[str],
        repository: BaseRepository,
        on_delete: IdsHandler,
        on_update: Optional[ActionHandler] = None,
        match_column=None
    ) -> BulkActionResponse:
        raw_ids, action = policy.validate_bulk(raw_ids, action)
        ids, malformed = parse_ids(raw_ids)

        async with self.transaction(f"{action} {policy.entity.lower()} records"):
            missing = malformed + [str(item) for item in await repository.missing_ids(ids, column=match_column)]
            if missing:
                raise NotFoundError.for_ids(policy.entity, missing)

            if action == DELETE:
                await on_delete(ids)
            elif on_update:
                await on_update(ids, action)
            else:
                await repository.update_many(ids, policy.changes_for(action), column=match_column)

        logger.info(f"Bulk {action} applied to {len(ids)} {policy.entity.lower()} record(s)")
        return BulkActionResponse(message=f"{action} action completed", count=len(ids))
