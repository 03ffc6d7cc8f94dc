# =============================================
# trainhub/database/models/training_location.py
# =============================================
from sqlalchemy import Column, String, Boolean, DateTime, UniqueConstraint, Uuid
from trainhub.config.database import Base, utcnow
import uuid

class TrainingLocation(Base):
    __tablename__ = "training_locations"
    __table_args__ = (
        UniqueConstraint("state", "district", name="uq_training_locations_state_district"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    state = Column(String(255), nullable=False, index=True)
    district = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<TrainingLocation(id={self.id}, state='{self.state}', district='{self.district}')>"
