# =============================================
# trainhub/repositories/training_location_repository.py
# =============================================
from sqlalchemy import select, func, or_, and_
from typing import List, Optional
from uuid import UUID

from trainhub.database.models.training_location import TrainingLocation
from trainhub.repositories.base_repository import BaseRepository

class TrainingLocationRepository(BaseRepository[TrainingLocation]):
    model = TrainingLocation

    async def get_by_state_district(
        self,
        state: str,
        district: str,
        exclude_id: Optional[UUID] = None
    ) -> Optional[TrainingLocation]:
        """Case-insensitive match on the (state, district) pair"""
        stmt = select(TrainingLocation).where(and_(
            func.lower(TrainingLocation.state) == state.lower(),
            func.lower(TrainingLocation.district) == district.lower()
        ))
        if exclude_id:
            stmt = stmt.where(TrainingLocation.id != exclude_id)
        result = await self.db.execute(stmt.limit(1))
        return result.scalar_one_or_none()

    async def search(self, search: Optional[str] = None, is_active: Optional[bool] = None) -> List[TrainingLocation]:
        stmt = select(TrainingLocation)
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(or_(
                func.lower(TrainingLocation.state).like(pattern),
                func.lower(TrainingLocation.district).like(pattern)
            ))
        if is_active is not None:
            stmt = stmt.where(TrainingLocation.is_active == is_active)
        stmt = stmt.order_by(TrainingLocation.state.asc(), TrainingLocation.district.asc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
