# =============================================
# trainhub/database/models/admin_profile.py
# =============================================
from sqlalchemy import Column, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from trainhub.config.database import Base, utcnow
import uuid

class AdminProfile(Base):
    __tablename__ = "admin_profiles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(Uuid, ForeignKey('users.id'), unique=True, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    user = relationship("User", back_populates="admin_profile", lazy="selectin")

    def __repr__(self):
        return f"<AdminProfile(id={self.id}, user_id={self.user_id})>"
