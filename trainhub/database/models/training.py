# =============================================
# trainhub/database/models/training.py
# =============================================
from sqlalchemy import (
    Column, String, Text, Integer, Float, Boolean, DateTime, Enum, ForeignKey, Uuid
)
from sqlalchemy.orm import relationship
from trainhub.config.database import Base, utcnow
from trainhub.schemas.enums import TrainingType, TrainingMode, ContractType
import uuid

class Training(Base):
    __tablename__ = "trainings"

    # Primary Key
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)

    # Basic Info
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    skills = Column(Text, nullable=True)  # JSON array or legacy CSV, see parse_skills

    # Foreign Keys
    category_id = Column(Uuid, ForeignKey('training_categories.id'), nullable=False, index=True)
    location_id = Column(Uuid, ForeignKey('training_locations.id'), nullable=False, index=True)
    stack_id = Column(Uuid, ForeignKey('stacks.id'), nullable=False, index=True)
    organization_id = Column(Uuid, ForeignKey('organization_profiles.id'), nullable=False, index=True)
    freelancer_id = Column(Uuid, ForeignKey('freelancer_profiles.id'), nullable=True, index=True)

    # Engagement
    type = Column(Enum(TrainingType, name="training_type", native_enum=False, length=20), nullable=False)
    mode = Column(
        Enum(TrainingMode, name="training_mode", native_enum=False, length=20),
        default=TrainingMode.ONLINE,
        nullable=False
    )
    contract_type = Column(Enum(ContractType, name="contract_type", native_enum=False, length=20), nullable=True)
    experience_min = Column(Integer, nullable=True)
    experience_max = Column(Integer, nullable=True)
    openings = Column(Integer, default=1, nullable=False)

    # Schedule
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)

    # Payment
    has_payment = Column(Boolean, default=False, nullable=False)
    payment_amount = Column(Float, nullable=True)
    payment_term = Column(String(100), nullable=True)

    # Status axes
    is_published = Column(Boolean, default=False, nullable=False, index=True)
    is_active = Column(Boolean, default=True, nullable=False, index=True)

    # Dates
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # =============================================
    # RELATIONSHIPS
    # =============================================
    category = relationship("TrainingCategory", lazy="selectin")
    location = relationship("TrainingLocation", lazy="selectin")
    stack = relationship("Stack", lazy="selectin")
    organization = relationship("OrganizationProfile", lazy="selectin")

    def __repr__(self):
        return f"<Training(id={self.id}, title='{self.title}', is_published={self.is_published}, is_active={self.is_active})>"
