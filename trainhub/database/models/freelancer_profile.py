# =============================================
# trainhub/database/models/freelancer_profile.py
# =============================================
from sqlalchemy import Column, String, Text, Integer, DateTime, Enum, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from trainhub.config.database import Base, utcnow
from trainhub.schemas.enums import AvailabilityStatus, TrainerType
import uuid

class FreelancerProfile(Base):
    __tablename__ = "freelancer_profiles"

    # Primary Key
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)

    # Owner
    user_id = Column(Uuid, ForeignKey('users.id'), unique=True, nullable=False, index=True)

    # Trainer Info
    bio = Column(Text, nullable=True)
    skills = Column(Text, nullable=True)  # JSON array or legacy CSV
    trainer_type = Column(
        Enum(TrainerType, name="trainer_type", native_enum=False, length=20),
        default=TrainerType.BOTH,
        nullable=False
    )
    availability = Column(
        Enum(AvailabilityStatus, name="availability_status", native_enum=False, length=20),
        default=AvailabilityStatus.AVAILABLE,
        nullable=False,
        index=True
    )
    experience_years = Column(Integer, nullable=True)
    location = Column(String(255), nullable=True)

    # Dates
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    user = relationship("User", back_populates="freelancer_profile", lazy="selectin")

    def __repr__(self):
        return f"<FreelancerProfile(id={self.id}, user_id={self.user_id}, availability='{self.availability}')>"
