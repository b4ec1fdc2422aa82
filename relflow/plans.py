"""ReleasePlan and ReleasePlanAdmission resources and how they are matched."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from relflow.collectors import Collector
from relflow.conditions import (
    Condition,
    ConditionReason,
    ConditionStatus,
    ConditionType,
    is_condition_present_and_equal,
    set_condition,
)
from relflow.meta import ObjectMeta

DEFAULT_RELEASE_GRACE_PERIOD_DAYS = 7


@dataclass
class ReleasePlanSpec:
    """Desired state of a release plan."""

    application: str = ""
    collectors: List[Collector] = field(default_factory=list)
    data: Optional[Dict[str, Any]] = None
    tenant_pipeline: Optional[Dict[str, Any]] = None
    final_pipeline: Optional[Dict[str, Any]] = None
    release_grace_period_days: int = DEFAULT_RELEASE_GRACE_PERIOD_DAYS
    target: str = ""


@dataclass
class MatchedReleasePlanAdmission:
    """The admission a release plan is matched to."""

    name: str = ""
    active: bool = False


@dataclass
class ReleasePlanStatus:
    """Observed state of a release plan."""

    conditions: List[Condition] = field(default_factory=list)
    release_plan_admission: MatchedReleasePlanAdmission = field(
        default_factory=MatchedReleasePlanAdmission
    )


@dataclass
class ReleasePlan:
    """Describes how an application is released from a tenant namespace."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: ReleasePlanSpec = field(default_factory=ReleasePlanSpec)
    status: ReleasePlanStatus = field(default_factory=ReleasePlanStatus)

    def mark_matched(self, release_plan_admission: "ReleasePlanAdmission") -> None:
        """Mark the plan as matched to the given admission."""
        self.set_matched_status(release_plan_admission, ConditionStatus.TRUE)

    def mark_unmatched(self) -> None:
        """Mark the plan as not matched to any admission."""
        if is_condition_present_and_equal(
            self.status.conditions, ConditionType.MATCHED, ConditionStatus.FALSE
        ):
            return
        self.set_matched_status(None, ConditionStatus.FALSE)

    def set_matched_status(
        self,
        release_plan_admission: Optional["ReleasePlanAdmission"],
        status: Union[str, ConditionStatus],
    ) -> None:
        """Record the matched admission (if any) and set the Matched condition."""
        matched = MatchedReleasePlanAdmission()
        if release_plan_admission is not None:
            matched.name = release_plan_admission.metadata.namespaced_name()
            matched.active = release_plan_admission.metadata.is_auto_release()
        self.status.release_plan_admission = matched
        set_condition(self.status.conditions, ConditionType.MATCHED, status, ConditionReason.MATCHED)


@dataclass
class ReleasePlanList:
    """A list of release plans."""

    items: List[ReleasePlan] = field(default_factory=list)


@dataclass
class ReleasePlanAdmissionSpec:
    """Desired state of a release plan admission."""

    applications: List[str] = field(default_factory=list)
    collectors: List[Collector] = field(default_factory=list)
    data: Optional[Dict[str, Any]] = None
    environment: str = ""
    origin: str = ""
    pipeline: Optional[Dict[str, Any]] = None
    policy: str = ""


@dataclass
class MatchedReleasePlan:
    """A release plan matched to an admission."""

    name: str = ""
    active: bool = False


@dataclass
class ReleasePlanAdmissionStatus:
    """Observed state of a release plan admission."""

    conditions: List[Condition] = field(default_factory=list)
    release_plans: List[MatchedReleasePlan] = field(default_factory=list)


@dataclass
class ReleasePlanAdmission:
    """Describes which releases a managed namespace accepts and how."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: ReleasePlanAdmissionSpec = field(default_factory=ReleasePlanAdmissionSpec)
    status: ReleasePlanAdmissionStatus = field(default_factory=ReleasePlanAdmissionStatus)

    def clear_matching_info(self) -> None:
        """Forget all matched plans and mark the admission as unmatched."""
        self.status.release_plans = []
        set_condition(
            self.status.conditions,
            ConditionType.MATCHED,
            ConditionStatus.FALSE,
            ConditionReason.MATCHED,
        )

    def mark_matched(self, release_plan: ReleasePlan) -> None:
        """Add the plan to the matched list, kept sorted by name."""
        self.status.release_plans.append(
            MatchedReleasePlan(
                name=release_plan.metadata.namespaced_name(),
                active=release_plan.metadata.is_auto_release(),
            )
        )
        self.status.release_plans.sort(key=lambda plan: plan.name)
        set_condition(
            self.status.conditions,
            ConditionType.MATCHED,
            ConditionStatus.TRUE,
            ConditionReason.MATCHED,
        )


@dataclass
class ReleasePlanAdmissionList:
    """A list of release plan admissions."""

    items: List[ReleasePlanAdmission] = field(default_factory=list)