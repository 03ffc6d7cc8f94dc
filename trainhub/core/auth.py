# =============================================
# trainhub/core/auth.py
# =============================================
"""Bearer-token authentication and role gating dependencies"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from trainhub.config.database import get_db
from trainhub.core.exceptions import UnauthorizedError
from trainhub.database.models.user import User
from trainhub.schemas.enums import UserRole
from trainhub.services.auth_service import AuthService

# missing credentials are reported as 401 with the usual error body
security = HTTPBearer(auto_error=False)

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> User:
    """Get current authenticated user from JWT token"""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError()
    return await AuthService(db).user_from_token(credentials.credentials)

def require_roles(*roles: UserRole):
    """Dependency factory: the current user must hold one of `roles`"""
    async def checker(user: User = Depends(get_current_user)) -> User:
        if user.role not in roles:
            raise UnauthorizedError()
        return user
    return checker

require_admin = require_roles(UserRole.ADMIN)
require_admin_or_maintainer = require_roles(UserRole.ADMIN, UserRole.MAINTAINER)
require_admin_or_organization = require_roles(UserRole.ADMIN, UserRole.ORGANIZATION)
require_organization = require_roles(UserRole.ORGANIZATION)
require_freelancer = require_roles(UserRole.FREELANCER)
