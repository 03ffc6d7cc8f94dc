# =============================================
# trainhub/database/models/user.py
# =============================================
from sqlalchemy import Column, String, DateTime, Enum, Uuid
from sqlalchemy.orm import relationship
from trainhub.config.database import Base, utcnow
from trainhub.schemas.enums import UserRole
import uuid

class User(Base):
    __tablename__ = "users"

    # Primary Key
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)

    # Basic Info
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    role = Column(
        Enum(UserRole, name="user_role", native_enum=False, length=20),
        nullable=False,
        index=True
    )
    name = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)

    # Dates
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # =============================================
    # RELATIONSHIPS
    # =============================================
    # One profile per user, matching the role. Deletion is explicit, see
    # CascadeRepository.

    organization_profile = relationship(
        "OrganizationProfile",
        back_populates="user",
        uselist=False,
        lazy="selectin"
    )

    maintainer_profile = relationship(
        "MaintainerProfile",
        back_populates="user",
        uselist=False,
        lazy="selectin"
    )

    freelancer_profile = relationship(
        "FreelancerProfile",
        back_populates="user",
        uselist=False,
        lazy="selectin"
    )

    admin_profile = relationship(
        "AdminProfile",
        back_populates="user",
        uselist=False,
        lazy="selectin"
    )

    @property
    def profile(self):
        """The profile row matching the user's role"""
        return {
            UserRole.ORGANIZATION: self.organization_profile,
            UserRole.MAINTAINER: self.maintainer_profile,
            UserRole.FREELANCER: self.freelancer_profile,
            UserRole.ADMIN: self.admin_profile,
        }.get(self.role)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
