# =============================================
# trainhub/core/exceptions.py
# =============================================
from fastapi import status
from typing import Any, Dict, Iterable, Optional

# =============================================
# BASE EXCEPTION
# =============================================

class AppException(Exception):
    """Base exception class for application-specific errors"""

    def __init__(
        self,
        message: str = "An application error occurred",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

# =============================================
# ERROR TAXONOMY
# =============================================

class UnauthorizedError(AppException):
    """Missing or invalid session, wrong role, or acting on someone else's resource"""

    def __init__(self, message: str = "Unauthorized", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details
        )


class ValidationError(AppException):
    """Missing fields, bad format, restricted domain, duplicates, invalid action"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"field": field} if field else None
        )


class NotFoundError(AppException):
    """Raised when an entity id is absent"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details
        )

    @classmethod
    def for_ids(cls, entity: str, missing_ids: Iterable[str]) -> "NotFoundError":
        missing = [str(item) for item in missing_ids]
        return cls(
            message=f"{entity} not found: {', '.join(missing)}",
            details={"missing_ids": missing}
        )


class ConflictError(AppException):
    """Raised when a delete is blocked by existing dependents"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )


class InternalError(AppException):
    """Unexpected failure; the client only sees a generic message"""

    def __init__(self, operation: str, reason: Optional[str] = None):
        super().__init__(
            message="Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"operation": operation, "reason": reason}
        )
