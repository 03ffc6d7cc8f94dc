# =============================================
# trainhub/database/models/organization_profile.py
# =============================================
from sqlalchemy import Column, String, Float, DateTime, Enum, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from trainhub.config.database import Base, utcnow
from trainhub.schemas.enums import VerificationStatus, ActiveStatus
import uuid

class OrganizationProfile(Base):
    __tablename__ = "organization_profiles"

    # Primary Key
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)

    # Owner
    user_id = Column(Uuid, ForeignKey('users.id'), unique=True, nullable=False, index=True)

    # Basic Info
    organization_name = Column(String(255), nullable=False, index=True)
    website = Column(String(500), nullable=True)
    contact_mail = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    company_location = Column(String(255), nullable=False)
    logo = Column(String(500), nullable=True)

    # Status axes
    verified_status = Column(
        Enum(VerificationStatus, name="verification_status", native_enum=False, length=20),
        default=VerificationStatus.PENDING,
        nullable=False,
        index=True
    )
    active_status = Column(
        Enum(ActiveStatus, name="active_status", native_enum=False, length=20),
        default=ActiveStatus.ACTIVE,
        nullable=False,
        index=True
    )
    ratings = Column(Float, default=0.0, nullable=False)

    # Dates
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # =============================================
    # RELATIONSHIPS
    # =============================================
    user = relationship("User", back_populates="organization_profile", lazy="selectin")

    def __repr__(self):
        return (
            f"<OrganizationProfile(id={self.id}, organization_name='{self.organization_name}', "
            f"verified_status='{self.verified_status}', active_status='{self.active_status}')>"
        )
