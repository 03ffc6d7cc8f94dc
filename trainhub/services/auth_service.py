# =============================================
# trainhub/services/auth_service.py
# =============================================
from datetime import timedelta
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from trainhub.config.settings import get_settings
from trainhub.core.exceptions import UnauthorizedError, ValidationError
from trainhub.core.security import create_access_token, get_password_hash, verify_password, verify_token
from trainhub.core.validators import validate_password
from trainhub.database.models.user import User
from trainhub.repositories.user_repository import UserRepository
from trainhub.schemas.auth import LoginRequest, ResetPasswordRequest, TokenResponse
from trainhub.schemas.base import MessageResponse
from trainhub.schemas.user import UserResponse
from trainhub.services.base_service import BaseService, as_uuid

logger = logging.getLogger(__name__)
settings = get_settings()

class AuthService(BaseService):
    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.user_repo = UserRepository(db)

    async def login(self, data: LoginRequest) -> TokenResponse:
        """Exchange email and password for a bearer token"""
        user = await self.user_repo.get_by_email(data.email)
        if not user or not verify_password(data.password, user.password):
            logger.warning(f"Failed login attempt for {data.email}")
            raise UnauthorizedError("Invalid email or password")

        access_token = create_access_token(
            data={"sub": str(user.id), "email": user.email, "role": user.role.value},
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        )

        logger.info(f"User logged in: {user.email} ({user.role.value})")
        return TokenResponse(
            access_token=access_token,
            token_type="bearer",
            expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
            user=UserResponse.model_validate(user)
        )

    async def user_from_token(self, token: str) -> User:
        """Resolve the user a bearer token was issued to"""
        payload = verify_token(token)
        user_id = as_uuid(payload.get("sub"))
        user = await self.user_repo.get_by_id(user_id) if user_id else None
        if not user:
            raise UnauthorizedError("User not found")
        return user

    async def reset_password(self, user: User, data: ResetPasswordRequest) -> MessageResponse:
        if not data.current_password:
            raise ValidationError("Current password is required", field="currentPassword")

        password_error = validate_password(data.new_password, settings.MIN_PASSWORD_LENGTH)
        if password_error:
            raise ValidationError(password_error, field="newPassword")

        if data.new_password != data.confirm_password:
            raise ValidationError("Passwords don't match", field="confirmPassword")

        if data.current_password == data.new_password:
            raise ValidationError("New password must be different from current password", field="newPassword")

        if not verify_password(data.current_password, user.password):
            raise ValidationError("Current password is incorrect", field="currentPassword")

        async with self.transaction(f"reset password for user {user.id}"):
            await self.user_repo.update_fields(user, {"password": get_password_hash(data.new_password)})

        logger.info(f"Password reset for user {user.id}")
        return MessageResponse(message="Password has been reset successfully")
