# =============================================
# trainhub/database/models/maintainer_profile.py
# =============================================
from sqlalchemy import Column, DateTime, Enum, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from trainhub.config.database import Base, utcnow
from trainhub.schemas.enums import ActiveStatus
import uuid

class MaintainerProfile(Base):
    __tablename__ = "maintainer_profiles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(Uuid, ForeignKey('users.id'), unique=True, nullable=False, index=True)
    status = Column(
        Enum(ActiveStatus, name="maintainer_status", native_enum=False, length=20),
        default=ActiveStatus.ACTIVE,
        nullable=False
    )

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    user = relationship("User", back_populates="maintainer_profile", lazy="selectin")

    def __repr__(self):
        return f"<MaintainerProfile(id={self.id}, user_id={self.user_id}, status='{self.status}')>"
