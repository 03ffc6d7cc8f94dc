# =============================================
# trainhub/repositories/training_repository.py
# =============================================
from sqlalchemy import select, func, or_, and_, case
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from trainhub.database.models.training import Training
from trainhub.database.models.training_category import TrainingCategory
from trainhub.repositories.base_repository import BaseRepository
from trainhub.schemas.training import TrainingSearchFilters

class TrainingRepository(BaseRepository[Training]):
    model = Training

    # =============================================
    # SEARCH
    # =============================================

    def _apply_filters(self, stmt, filters: Optional[TrainingSearchFilters]):
        if not filters:
            return stmt

        if filters.search:
            pattern = f"%{filters.search.lower()}%"
            stmt = stmt.where(or_(
                func.lower(Training.title).like(pattern),
                func.lower(Training.description).like(pattern)
            ))

        if filters.category:
            stmt = stmt.join(TrainingCategory, TrainingCategory.id == Training.category_id).where(
                func.lower(TrainingCategory.name).like(f"%{filters.category.lower()}%")
            )

        if filters.type:
            stmt = stmt.where(Training.type == filters.type)

        if filters.is_published is not None:
            stmt = stmt.where(Training.is_published == filters.is_published)

        if filters.is_active is not None:
            stmt = stmt.where(Training.is_active == filters.is_active)

        if filters.organization_id:
            stmt = stmt.where(Training.organization_id == filters.organization_id)

        return stmt

    async def search(
        self,
        filters: Optional[TrainingSearchFilters],
        skip: int = 0,
        limit: int = 10
    ) -> Tuple[List[Training], int]:
        """Filtered page, newest first, plus the total matching count"""
        stmt = self._apply_filters(select(Training), filters)
        stmt = stmt.order_by(Training.created_at.desc()).offset(skip).limit(limit)
        result = await self.db.execute(stmt)
        items = list(result.scalars().all())

        count_stmt = self._apply_filters(
            select(func.count(Training.id)).select_from(Training), filters
        )
        total = (await self.db.execute(count_stmt)).scalar_one()

        return items, total

    # =============================================
    # RELATION QUERIES
    # =============================================

    async def ids_for_organizations(self, organization_ids: Sequence[UUID]) -> List[UUID]:
        if not organization_ids:
            return []
        stmt = select(Training.id).where(Training.organization_id.in_(organization_ids))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count_referencing(self, column, ids: Sequence[UUID]) -> int:
        """Trainings whose `column` (category_id, location_id, stack_id) points at any of `ids`"""
        if not ids:
            return 0
        return await self.count(column.in_(ids))

    async def counts_by(self, column, ids: Sequence[UUID]) -> Dict[UUID, Tuple[int, int]]:
        """(trainingsCount, activeTrainingsCount) per referenced id"""
        if not ids:
            return {}
        stmt = (
            select(
                column,
                func.count(Training.id),
                func.sum(case((Training.is_active.is_(True), 1), else_=0))
            )
            .where(column.in_(ids))
            .group_by(column)
        )
        result = await self.db.execute(stmt)
        return {key: (total, int(active or 0)) for key, total, active in result.all()}

    async def count_running(self, now: datetime) -> int:
        """Active trainings whose schedule covers `now`"""
        return await self.count(and_(
            Training.is_active.is_(True),
            Training.start_date <= now,
            Training.end_date >= now
        ))
