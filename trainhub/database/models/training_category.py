# =============================================
# trainhub/database/models/training_category.py
# =============================================
from sqlalchemy import Column, String, Text, Boolean, DateTime, Uuid
from trainhub.config.database import Base, utcnow
import uuid

class TrainingCategory(Base):
    __tablename__ = "training_categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(255), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<TrainingCategory(id={self.id}, name='{self.name}', is_active={self.is_active})>"
