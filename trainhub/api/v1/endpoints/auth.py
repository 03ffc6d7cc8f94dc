# =============================================
# trainhub/api/v1/endpoints/auth.py
# =============================================
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from trainhub.config.database import get_db
from trainhub.core.auth import get_current_user
from trainhub.database.models.user import User
from trainhub.services.auth_service import AuthService
from trainhub.schemas.auth import LoginRequest, ResetPasswordRequest, TokenResponse
from trainhub.schemas.base import MessageResponse
from trainhub.schemas.user import UserDetail

# =============================================
# ROUTER AND DEPENDENCIES
# =============================================
router = APIRouter()

async def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(db)

# =============================================
# AUTHENTICATION ROUTES
# =============================================

@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Authenticate user and return a JWT access token

    - **email**: User email
    - **password**: User password
    """
    return await auth_service.login(login_data)

@router.get("/me", response_model=UserDetail)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user information"""
    return UserDetail.model_validate(current_user)

@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    password_data: ResetPasswordRequest,
    current_user: User = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Change the current user's password

    - **currentPassword**: Must match the stored password
    - **newPassword**: At least 6 characters, different from the current one
    - **confirmPassword**: Must equal newPassword
    """
    return await auth_service.reset_password(current_user, password_data)
