# =============================================
# trainhub/database/models/training_feedback.py
# =============================================
from sqlalchemy import Column, Text, Integer, DateTime, ForeignKey, Uuid
from trainhub.config.database import Base, utcnow
import uuid

class TrainingFeedback(Base):
    __tablename__ = "training_feedback"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)

    # Foreign Keys
    training_id = Column(Uuid, ForeignKey('trainings.id'), nullable=False, index=True)
    organization_id = Column(Uuid, ForeignKey('organization_profiles.id'), nullable=False, index=True)
    freelancer_id = Column(Uuid, ForeignKey('freelancer_profiles.id'), nullable=True, index=True)
    reviewer_id = Column(Uuid, ForeignKey('users.id'), nullable=True, index=True)

    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<TrainingFeedback(id={self.id}, training_id={self.training_id}, rating={self.rating})>"
