# =============================================
# trainhub/api/v1/router.py
# =============================================
from fastapi import APIRouter

from trainhub.api.v1.endpoints import (
    auth,
    organizations,
    training_locations,
    training_categories,
    stacks,
    trainings,
    users,
    maintainers,
    freelancers,
    admin
)

# =============================================
# API V1 ROUTER
# =============================================
api_router = APIRouter()

# =============================================
# AUTHENTICATION ROUTES
# =============================================
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"],
    responses={
        401: {"description": "Unauthorized"}
    }
)

# =============================================
# ORGANIZATION ROUTES
# =============================================
api_router.include_router(
    organizations.router,
    prefix="/organizations",
    tags=["Organizations"],
    responses={
        404: {"description": "Organization not found"},
        400: {"description": "Invalid organization data"}
    }
)

# =============================================
# REFERENCE DATA ROUTES
# =============================================
api_router.include_router(
    training_locations.router,
    prefix="/training-locations",
    tags=["Training Locations"],
    responses={
        404: {"description": "Location not found"},
        400: {"description": "Duplicate location or location in use"}
    }
)

api_router.include_router(
    training_categories.router,
    prefix="/training-categories",
    tags=["Training Categories"],
    responses={
        404: {"description": "Category not found"},
        400: {"description": "Duplicate category or category in use"}
    }
)

api_router.include_router(
    stacks.router,
    prefix="/stacks",
    tags=["Stacks"],
    responses={
        404: {"description": "Stack not found"},
        400: {"description": "Duplicate stack or stack in use"}
    }
)

# =============================================
# TRAINING ROUTES
# =============================================
api_router.include_router(
    trainings.router,
    prefix="/trainings",
    tags=["Trainings"],
    responses={
        404: {"description": "Training not found"},
        400: {"description": "Invalid training data"}
    }
)

# =============================================
# ACCOUNT MANAGEMENT ROUTES
# =============================================
api_router.include_router(
    users.router,
    prefix="/users",
    tags=["Users"],
    responses={
        404: {"description": "User not found"},
        400: {"description": "User already exists"}
    }
)

api_router.include_router(
    maintainers.router,
    prefix="/maintainers",
    tags=["Maintainers"],
    responses={
        404: {"description": "Maintainer not found"}
    }
)

api_router.include_router(
    freelancers.router,
    prefix="/freelancers",
    tags=["Freelancers"],
    responses={
        404: {"description": "Freelancer not found"}
    }
)

# =============================================
# ADMIN ROUTES
# =============================================
api_router.include_router(
    admin.router,
    prefix="/admin",
    tags=["Admin"]
)
