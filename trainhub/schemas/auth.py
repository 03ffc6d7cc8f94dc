# =============================================
# trainhub/schemas/auth.py
# =============================================
from pydantic import EmailStr, Field
from typing import Optional

from trainhub.schemas.base import CamelModel, RequestModel
from trainhub.schemas.user import UserResponse

class LoginRequest(RequestModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse

class ResetPasswordRequest(RequestModel):
    current_password: Optional[str] = None
    new_password: Optional[str] = None
    confirm_password: Optional[str] = None
