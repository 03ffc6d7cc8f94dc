# =============================================
# trainhub/database/models/__init__.py
# =============================================
"""
Database Models Package

Imports every model so they are registered on Base.metadata, which is what
Alembic autogenerate and create_tables() read.
"""

from .user import User
from .organization_profile import OrganizationProfile
from .maintainer_profile import MaintainerProfile
from .freelancer_profile import FreelancerProfile
from .admin_profile import AdminProfile
from .training_category import TrainingCategory
from .training_location import TrainingLocation
from .stack import Stack
from .training import Training
from .training_feedback import TrainingFeedback

__all__ = [
    "User",
    "OrganizationProfile",
    "MaintainerProfile",
    "FreelancerProfile",
    "AdminProfile",
    "TrainingCategory",
    "TrainingLocation",
    "Stack",
    "Training",
    "TrainingFeedback"
]
