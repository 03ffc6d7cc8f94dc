# =============================================
# trainhub/services/base_service.py
# =============================================
from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from typing import Any, Optional
from uuid import UUID
import logging

from trainhub.core.exceptions import AppException, InternalError, ValidationError

logger = logging.getLogger(__name__)

def as_uuid(value: Any) -> Optional[UUID]:
    """Parse an id coming from a query string or body; None when malformed"""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (ValueError, TypeError, AttributeError):
        return None

class BaseService:
    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def transaction(self, operation: str):
        """
        Commit everything written inside the block, or nothing.

        Application errors are re-raised untouched after the rollback; any
        other failure becomes an InternalError.
        """
        try:
            yield
            await self.db.commit()
        except AppException:
            await self.db.rollback()
            raise
        except IntegrityError as e:
            await self.db.rollback()
            logger.error(f"Integrity error trying to {operation}: {e.orig if hasattr(e, 'orig') else e}")
            raise ValidationError("A record with this information already exists")
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error trying to {operation}: {e}", exc_info=True)
            raise InternalError(operation, str(e))
