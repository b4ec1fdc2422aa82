"""Status conditions recorded on release resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import MutableSequence, Optional, Sequence, Union


class ConditionStatus(str, Enum):
    """Tri-state status of a condition."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class ConditionType(str, Enum):
    """Kinds of conditions tracked on releases, plans and admissions."""

    FINAL_PROCESSED = "FinalPipelineProcessed"
    MANAGED_PROCESSED = "ManagedPipelineProcessed"
    TENANT_PROCESSED = "TenantPipelineProcessed"
    RELEASED = "Released"
    VALIDATED = "Validated"
    MATCHED = "Matched"


class ConditionReason(str, Enum):
    """Reasons explaining the current status of a condition."""

    FAILED = "Failed"
    PROGRESSING = "Progressing"
    SKIPPED = "Skipped"
    SUCCEEDED = "Succeeded"
    MATCHED = "Matched"


def _text(value: Union[str, Enum]) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Condition:
    """A single observation about the state of a resource."""

    type: str
    status: ConditionStatus
    reason: str
    message: str = ""
    last_transition_time: datetime = field(default_factory=_now)

    def __post_init__(self) -> None:
        self.type = _text(self.type)
        self.reason = _text(self.reason)
        self.status = ConditionStatus(self.status)


def find_condition(
    conditions: Sequence[Condition], condition_type: Union[str, ConditionType]
) -> Optional[Condition]:
    """Return the condition of the given type, or None if there is none."""
    wanted = _text(condition_type)
    return next((c for c in conditions if c.type == wanted), None)


def set_condition(
    conditions: MutableSequence[Condition],
    condition_type: Union[str, ConditionType],
    status: Union[str, ConditionStatus],
    reason: Union[str, ConditionReason],
    message: str = "",
) -> Condition:
    """Add or update a condition in place and return it.

    The transition time only changes when the status changes.
    """
    new_status = ConditionStatus(status)
    existing = find_condition(conditions, condition_type)
    if existing is None:
        created = Condition(condition_type, new_status, reason, message)
        conditions.append(created)
        return created

    if existing.status != new_status:
        existing.status = new_status
        existing.last_transition_time = _now()
    existing.reason = _text(reason)
    existing.message = message
    return existing


def is_condition_true(
    conditions: Sequence[Condition], condition_type: Union[str, ConditionType]
) -> bool:
    """Whether the condition of the given type exists and is True."""
    return is_condition_present_and_equal(conditions, condition_type, ConditionStatus.TRUE)


def is_condition_present_and_equal(
    conditions: Sequence[Condition],
    condition_type: Union[str, ConditionType],
    status: Union[str, ConditionStatus],
) -> bool:
    """Whether the condition of the given type exists with the given status."""
    condition = find_condition(conditions, condition_type)
    return condition is not None and condition.status == ConditionStatus(status)