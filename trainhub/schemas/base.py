# =============================================
# trainhub/schemas/base.py
# =============================================
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, Optional
import math

# =============================================
# BASE SCHEMAS
# =============================================
class CamelModel(BaseModel):
    """Response schema: snake_case attributes, camelCase on the wire, readable from ORM rows"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

class RequestModel(BaseModel):
    """
    Request schema.

    Fields are optional on purpose at this layer: services report missing
    fields with their own messages ("Missing required fields").
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
    )

    def provided(self) -> dict:
        """Fields the client actually sent, by attribute name"""
        return self.model_dump(exclude_unset=True, by_alias=False)

# =============================================
# PAGINATION
# =============================================
class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, pages=math.ceil(total / limit) if limit else 0)

# =============================================
# BULK ACTIONS
# =============================================
class BulkActionRequest(RequestModel):
    """
    `{<entity>Ids | ids, action}`.

    The entity specific key (organizationIds, trainingIds, ...) travels as an
    extra field; `resolve_ids` picks it up and falls back to `ids`.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    ids: Optional[Any] = None
    action: Optional[str] = None

    def resolve_ids(self, key: Optional[str] = None) -> Any:
        extra = self.model_extra or {}
        if key and key in extra:
            return extra[key]
        return self.ids

class BulkActionResponse(CamelModel):
    success: bool = True
    message: str
    count: int = 0

class MessageResponse(CamelModel):
    success: bool = True
    message: str
