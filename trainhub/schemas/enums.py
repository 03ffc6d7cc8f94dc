# =============================================
# trainhub/schemas/enums.py
# =============================================
from enum import Enum

class UserRole(str, Enum):
    FREELANCER = "FREELANCER"
    ORGANIZATION = "ORGANIZATION"
    ADMIN = "ADMIN"
    MAINTAINER = "MAINTAINER"

class VerificationStatus(str, Enum):
    PENDING = "PENDING"
    VERIFIED = "VERIFIED"
    REJECTED = "REJECTED"

class ActiveStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"

class AvailabilityStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    IN_TRAINING = "IN_TRAINING"
    NOT_AVAILABLE = "NOT_AVAILABLE"

class TrainerType(str, Enum):
    UNIVERSITY = "UNIVERSITY"
    CORPORATE = "CORPORATE"
    BOTH = "BOTH"

class TrainingType(str, Enum):
    CORPORATE = "CORPORATE"
    UNIVERSITY = "UNIVERSITY"

class TrainingMode(str, Enum):
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"

class ContractType(str, Enum):
    PER_DAY = "PER_DAY"
    MONTHLY = "MONTHLY"
