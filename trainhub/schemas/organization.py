# =============================================
# trainhub/schemas/organization.py
# =============================================
from pydantic import Field
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from trainhub.schemas.base import CamelModel, RequestModel, Pagination
from trainhub.schemas.enums import VerificationStatus, ActiveStatus

# =============================================
# CREATE SCHEMA
# =============================================
class OrganizationCreate(RequestModel):
    """Admin creation and public self-registration share this payload"""
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    organization_name: Optional[str] = None
    website: Optional[str] = None
    contact_mail: Optional[str] = None
    phone: Optional[str] = None
    company_location: Optional[str] = None
    logo: Optional[str] = None

    def missing_fields(self) -> List[str]:
        required = {
            "email": self.email,
            "password": self.password,
            "organizationName": self.organization_name,
            "contactMail": self.contact_mail,
            "companyLocation": self.company_location,
        }
        return [key for key, value in required.items() if not value]

# =============================================
# UPDATE SCHEMA
# =============================================
class OrganizationUpdate(RequestModel):
    """
    Partial profile update.

    `action` is only honoured for admins: approve, reject, activate,
    deactivate or update (the default).
    """
    action: Optional[str] = None
    organization_name: Optional[str] = None
    website: Optional[str] = None
    contact_mail: Optional[str] = None
    phone: Optional[str] = None
    company_location: Optional[str] = None
    logo: Optional[str] = None

    def profile_fields(self) -> dict:
        return {key: value for key, value in self.provided().items() if key != "action"}

# =============================================
# RESPONSE SCHEMAS
# =============================================
class OrganizationOwner(CamelModel):
    id: UUID
    email: str
    name: Optional[str] = None
    phone: Optional[str] = None

class OrganizationResponse(CamelModel):
    id: UUID
    user_id: UUID
    organization_name: str
    website: Optional[str] = None
    contact_mail: str
    phone: Optional[str] = None
    company_location: str
    logo: Optional[str] = None
    verified_status: VerificationStatus
    active_status: ActiveStatus
    ratings: float = 0.0
    created_at: datetime
    updated_at: Optional[datetime] = None
    user: Optional[OrganizationOwner] = None

class OrganizationDetail(OrganizationResponse):
    """Organization with counts populated by the service layer"""
    trainings_count: int = 0
    active_trainings_count: int = 0
    feedback_count: int = 0

class OrganizationListResponse(CamelModel):
    organizations: List[OrganizationResponse]
    pagination: Pagination

class OrganizationRegisterResponse(CamelModel):
    success: bool = True
    message: str
    data: OrganizationResponse

# =============================================
# SEARCH FILTERS SCHEMA
# =============================================
class OrganizationSearchFilters(CamelModel):
    search: Optional[str] = Field(None, description="Matches name, website or location")
    verification_status: Optional[VerificationStatus] = None
    active_status: Optional[ActiveStatus] = None
