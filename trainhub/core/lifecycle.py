# =============================================
# trainhub/core/lifecycle.py
# =============================================
"""
Status transition tables for every managed entity.

A transition is a named action mapped to the column values it writes.
Actions that are not in an entity's table are rejected with
"Invalid action"; re-applying a transition is an idempotent no-op.
"""

from dataclasses import dataclass, field
from typing import Any, FrozenSet, List, Mapping, Optional, Tuple
from uuid import UUID

from trainhub.core.exceptions import ValidationError
from trainhub.schemas.enums import ActiveStatus, AvailabilityStatus, VerificationStatus

DELETE = "delete"
UPDATE = "update"

Transitions = Mapping[str, Mapping[str, Any]]

# =============================================
# TRANSITION TABLES
# =============================================

ORGANIZATION_BULK_TRANSITIONS: Transitions = {
    "activate": {"active_status": ActiveStatus.ACTIVE},
    "deactivate": {"active_status": ActiveStatus.INACTIVE},
    "verify": {"verified_status": VerificationStatus.VERIFIED},
    "unverify": {"verified_status": VerificationStatus.PENDING},
}

ORGANIZATION_REVIEW_TRANSITIONS: Transitions = {
    "approve": {"verified_status": VerificationStatus.VERIFIED},
    "reject": {"verified_status": VerificationStatus.REJECTED},
    "activate": {"active_status": ActiveStatus.ACTIVE},
    "deactivate": {"active_status": ActiveStatus.INACTIVE},
}

TRAINING_TRANSITIONS: Transitions = {
    "activate": {"is_active": True},
    "deactivate": {"is_active": False},
    "publish": {"is_published": True},
    "unpublish": {"is_published": False},
}

TRAINING_BULK_TRANSITIONS: Transitions = {
    **TRAINING_TRANSITIONS,
    "approve": {"is_published": True},
    "reject": {"is_published": False},
}

LOOKUP_TRANSITIONS: Transitions = {
    "activate": {"is_active": True},
    "deactivate": {"is_active": False},
}

MAINTAINER_TRANSITIONS: Transitions = {
    "activate": {"status": ActiveStatus.ACTIVE},
    "deactivate": {"status": ActiveStatus.INACTIVE},
}

FREELANCER_TRANSITIONS: Transitions = {
    "activate": {"availability": AvailabilityStatus.AVAILABLE},
    "deactivate": {"availability": AvailabilityStatus.NOT_AVAILABLE},
}

# users carry no status of their own; the action lands on the profile axis
USER_TRANSITIONS: Transitions = {
    "activate": {
        "organization": ORGANIZATION_BULK_TRANSITIONS["activate"],
        "maintainer": MAINTAINER_TRANSITIONS["activate"],
        "freelancer": FREELANCER_TRANSITIONS["activate"],
    },
    "deactivate": {
        "organization": ORGANIZATION_BULK_TRANSITIONS["deactivate"],
        "maintainer": MAINTAINER_TRANSITIONS["deactivate"],
        "freelancer": FREELANCER_TRANSITIONS["deactivate"],
    },
}

# =============================================
# POLICY
# =============================================

def parse_ids(raw_ids: List[Any]) -> Tuple[List[UUID], List[str]]:
    """Split raw ids into parsed UUIDs (deduplicated, order kept) and malformed values"""
    parsed: List[UUID] = []
    malformed: List[str] = []
    for raw in raw_ids:
        try:
            value = raw if isinstance(raw, UUID) else UUID(str(raw))
        except (ValueError, TypeError, AttributeError):
            malformed.append(str(raw))
            continue
        if value not in parsed:
            parsed.append(value)
    return parsed, malformed


@dataclass(frozen=True)
class ActionPolicy:
    """Allow-list of actions for one entity and one surface (bulk or single)"""

    entity: str
    transitions: Transitions
    extra_actions: FrozenSet[str] = field(default_factory=frozenset)
    ids_label: Optional[str] = None

    @property
    def allowed_actions(self) -> List[str]:
        return sorted(set(self.transitions) | set(self.extra_actions))

    def is_allowed(self, action: Optional[str]) -> bool:
        return isinstance(action, str) and (action in self.transitions or action in self.extra_actions)

    def require_action(self, action: Optional[str]) -> str:
        if not self.is_allowed(action):
            raise ValidationError("Invalid action", field="action")
        return action

    def changes_for(self, action: str) -> Mapping[str, Any]:
        """Column values written by a non destructive action"""
        self.require_action(action)
        return self.transitions.get(action, {})

    def validate_bulk(self, raw_ids: Any, action: Optional[str]) -> Tuple[List[Any], str]:
        """
        Validate a bulk request in the documented order: ids first, then action.

        Returns the raw id list and the action. Existence of the ids is the
        caller's job, since it needs the database.
        """
        if not isinstance(raw_ids, list) or not raw_ids:
            label = self.ids_label or self.entity
            raise ValidationError(f"Invalid {label} IDs", field="ids")
        return raw_ids, self.require_action(action)


ORGANIZATION_BULK_POLICY = ActionPolicy(
    "Organization", ORGANIZATION_BULK_TRANSITIONS, frozenset({DELETE}), ids_label="organization"
)
ORGANIZATION_REVIEW_POLICY = ActionPolicy(
    "Organization", ORGANIZATION_REVIEW_TRANSITIONS, frozenset({UPDATE})
)
TRAINING_BULK_POLICY = ActionPolicy(
    "Training", TRAINING_BULK_TRANSITIONS, frozenset({DELETE}), ids_label="training"
)
TRAINING_SINGLE_POLICY = ActionPolicy("Training", TRAINING_TRANSITIONS, frozenset({UPDATE}))
LOCATION_BULK_POLICY = ActionPolicy(
    "Location", LOOKUP_TRANSITIONS, frozenset({DELETE}), ids_label="location"
)
CATEGORY_BULK_POLICY = ActionPolicy(
    "Category", LOOKUP_TRANSITIONS, frozenset({DELETE}), ids_label="category"
)
STACK_BULK_POLICY = ActionPolicy(
    "Stack", LOOKUP_TRANSITIONS, frozenset({DELETE}), ids_label="stack"
)
USER_BULK_POLICY = ActionPolicy("User", USER_TRANSITIONS, frozenset({DELETE}), ids_label="user")
MAINTAINER_BULK_POLICY = ActionPolicy(
    "Maintainer", MAINTAINER_TRANSITIONS, frozenset({DELETE}), ids_label="maintainer"
)
MAINTAINER_SINGLE_POLICY = ActionPolicy("Maintainer", MAINTAINER_TRANSITIONS, frozenset({UPDATE}))
FREELANCER_BULK_POLICY = ActionPolicy(
    "Freelancer", FREELANCER_TRANSITIONS, frozenset({DELETE}), ids_label="freelancer"
)
