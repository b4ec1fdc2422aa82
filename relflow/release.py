"""The Release resource and its lifecycle state transitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Union

from relflow.conditions import (
    Condition,
    ConditionReason,
    ConditionStatus,
    ConditionType,
    find_condition,
    is_condition_true,
    set_condition,
)
from relflow.meta import ObjectMeta


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AttributionInfo:
    """Who the release is attributed to."""

    author: str = ""
    standing_authorization: bool = False


@dataclass
class PipelineInfo:
    """Observed state of one release pipeline's processing."""

    completion_time: Optional[datetime] = None
    pipeline_run: str = ""
    role_binding: str = ""
    start_time: Optional[datetime] = None


@dataclass
class ValidationInfo:
    """Observed state of the release validation."""

    failed_post_validation: bool = False
    time: Optional[datetime] = None


@dataclass
class ReleaseSpec:
    """Desired state of a release."""

    snapshot: str = ""
    release_plan: str = ""
    data: Optional[Dict[str, Any]] = None
    grace_period_days: int = 0


@dataclass
class ReleaseStatus:
    """Observed state of a release."""

    artifacts: Optional[Dict[str, Any]] = None
    attribution: AttributionInfo = field(default_factory=AttributionInfo)
    collectors: Optional[Dict[str, Any]] = None
    conditions: List[Condition] = field(default_factory=list)
    final_processing: PipelineInfo = field(default_factory=PipelineInfo)
    managed_processing: PipelineInfo = field(default_factory=PipelineInfo)
    tenant_processing: PipelineInfo = field(default_factory=PipelineInfo)
    validation: ValidationInfo = field(default_factory=ValidationInfo)
    target: str = ""
    automated: bool = False
    completion_time: Optional[datetime] = None
    start_time: Optional[datetime] = None
    expiration_time: Optional[datetime] = None


_PIPELINE_ATTRS = {
    ConditionType.FINAL_PROCESSED: "final_processing",
    ConditionType.MANAGED_PROCESSED: "managed_processing",
    ConditionType.TENANT_PROCESSED: "tenant_processing",
}


@dataclass
class Release:
    """A request to release a snapshot through a release plan."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: ReleaseSpec = field(default_factory=ReleaseSpec)
    status: ReleaseStatus = field(default_factory=ReleaseStatus)

    # -- queries -----------------------------------------------------------

    def has_final_pipeline_processing_finished(self) -> bool:
        return self.has_phase_finished(ConditionType.FINAL_PROCESSED)

    def has_managed_pipeline_processing_finished(self) -> bool:
        return self.has_phase_finished(ConditionType.MANAGED_PROCESSED)

    def has_tenant_pipeline_processing_finished(self) -> bool:
        return self.has_phase_finished(ConditionType.TENANT_PROCESSED)

    def has_release_finished(self) -> bool:
        return self.has_phase_finished(ConditionType.RELEASED)

    def is_attributed(self) -> bool:
        return self.status.attribution.author != ""

    def is_automated(self) -> bool:
        return self.status.automated

    def is_final_pipeline_processed(self) -> bool:
        return is_condition_true(self.status.conditions, ConditionType.FINAL_PROCESSED)

    def is_managed_pipeline_processed(self) -> bool:
        return is_condition_true(self.status.conditions, ConditionType.MANAGED_PROCESSED)

    def is_tenant_pipeline_processed(self) -> bool:
        return is_condition_true(self.status.conditions, ConditionType.TENANT_PROCESSED)

    def is_final_pipeline_processing(self) -> bool:
        return self.is_phase_progressing(ConditionType.FINAL_PROCESSED)

    def is_managed_pipeline_processing(self) -> bool:
        return self.is_phase_progressing(ConditionType.MANAGED_PROCESSED)

    def is_tenant_pipeline_processing(self) -> bool:
        return self.is_phase_progressing(ConditionType.TENANT_PROCESSED)

    def is_released(self) -> bool:
        return is_condition_true(self.status.conditions, ConditionType.RELEASED)

    def is_releasing(self) -> bool:
        return self.is_phase_progressing(ConditionType.RELEASED)

    def is_valid(self) -> bool:
        return is_condition_true(self.status.conditions, ConditionType.VALIDATED)

    # -- pipeline transitions ----------------------------------------------

    def _pipeline(self, condition_type: ConditionType) -> PipelineInfo:
        return getattr(self.status, _PIPELINE_ATTRS[condition_type])

    def _mark_pipeline_processing(self, condition_type: ConditionType) -> None:
        if self.has_phase_finished(condition_type):
            return
        if not self.is_phase_progressing(condition_type):
            self._pipeline(condition_type).start_time = _now()
        set_condition(
            self.status.conditions, condition_type, ConditionStatus.FALSE, ConditionReason.PROGRESSING
        )

    def _complete_pipeline(
        self,
        condition_type: ConditionType,
        status: ConditionStatus,
        reason: ConditionReason,
        message: str = "",
    ) -> None:
        if not self.is_phase_progressing(condition_type) or self.has_phase_finished(condition_type):
            return
        self._pipeline(condition_type).completion_time = _now()
        set_condition(self.status.conditions, condition_type, status, reason, message)

    def _skip_pipeline(self, condition_type: ConditionType) -> None:
        if self.has_phase_finished(condition_type):
            return
        set_condition(self.status.conditions, condition_type, ConditionStatus.TRUE, ConditionReason.SKIPPED)

    def mark_final_pipeline_processed(self) -> None:
        self._complete_pipeline(ConditionType.FINAL_PROCESSED, ConditionStatus.TRUE, ConditionReason.SUCCEEDED)

    def mark_managed_pipeline_processed(self) -> None:
        self._complete_pipeline(
            ConditionType.MANAGED_PROCESSED, ConditionStatus.TRUE, ConditionReason.SUCCEEDED
        )

    def mark_tenant_pipeline_processed(self) -> None:
        self._complete_pipeline(ConditionType.TENANT_PROCESSED, ConditionStatus.TRUE, ConditionReason.SUCCEEDED)

    def mark_final_pipeline_processing(self) -> None:
        self._mark_pipeline_processing(ConditionType.FINAL_PROCESSED)

    def mark_managed_pipeline_processing(self) -> None:
        self._mark_pipeline_processing(ConditionType.MANAGED_PROCESSED)

    def mark_tenant_pipeline_processing(self) -> None:
        self._mark_pipeline_processing(ConditionType.TENANT_PROCESSED)

    def mark_final_pipeline_processing_failed(self, message: str) -> None:
        self._complete_pipeline(
            ConditionType.FINAL_PROCESSED, ConditionStatus.FALSE, ConditionReason.FAILED, message
        )

    def mark_managed_pipeline_processing_failed(self, message: str) -> None:
        self._complete_pipeline(
            ConditionType.MANAGED_PROCESSED, ConditionStatus.FALSE, ConditionReason.FAILED, message
        )

    def mark_tenant_pipeline_processing_failed(self, message: str) -> None:
        self._complete_pipeline(
            ConditionType.TENANT_PROCESSED, ConditionStatus.FALSE, ConditionReason.FAILED, message
        )

    def mark_final_pipeline_processing_skipped(self) -> None:
        self._skip_pipeline(ConditionType.FINAL_PROCESSED)

    def mark_managed_pipeline_processing_skipped(self) -> None:
        self._skip_pipeline(ConditionType.MANAGED_PROCESSED)

    def mark_tenant_pipeline_processing_skipped(self) -> None:
        self._skip_pipeline(ConditionType.TENANT_PROCESSED)

    # -- release transitions -----------------------------------------------

    def mark_released(self) -> None:
        if not self.is_releasing() or self.has_release_finished():
            return
        self.status.completion_time = _now()
        set_condition(
            self.status.conditions, ConditionType.RELEASED, ConditionStatus.TRUE, ConditionReason.SUCCEEDED
        )

    def mark_releasing(self, message: str) -> None:
        if self.has_release_finished():
            return
        if not self.is_releasing():
            self.status.start_time = _now()
        set_condition(
            self.status.conditions,
            ConditionType.RELEASED,
            ConditionStatus.FALSE,
            ConditionReason.PROGRESSING,
            message,
        )

    def mark_release_failed(self, message: str) -> None:
        if not self.is_releasing() or self.has_release_finished():
            return
        self.status.completion_time = _now()
        set_condition(
            self.status.conditions,
            ConditionType.RELEASED,
            ConditionStatus.FALSE,
            ConditionReason.FAILED,
            message,
        )

    def mark_validated(self) -> None:
        if self.is_valid():
            return
        self.status.validation.time = _now()
        set_condition(
            self.status.conditions, ConditionType.VALIDATED, ConditionStatus.TRUE, ConditionReason.SUCCEEDED
        )

    def mark_validation_failed(self, message: str) -> None:
        if self.is_valid():
            self.status.validation.failed_post_validation = True
        self.status.validation.time = _now()
        set_condition(
            self.status.conditions,
            ConditionType.VALIDATED,
            ConditionStatus.FALSE,
            ConditionReason.FAILED,
            message,
        )

    def set_automated(self) -> None:
        self.status.automated = True

    def set_expiration_time(self, expire_days: Union[int, float]) -> None:
        """Set the time, relative to creation, after which the release can be purged."""
        self.status.expiration_time = self.metadata.creation_timestamp + timedelta(days=expire_days)

    # -- phase helpers -----------------------------------------------------

    def phase_reason(self, condition_type: Union[str, ConditionType]) -> str:
        """Return the reason of the given condition, or "" if it is absent."""
        condition = find_condition(self.status.conditions, condition_type)
        return condition.reason if condition is not None else ""

    def has_phase_finished(self, condition_type: Union[str, ConditionType]) -> bool:
        """Whether a phase has finished, successfully or not."""
        condition = find_condition(self.status.conditions, condition_type)
        if condition is None:
            return False
        if condition.status == ConditionStatus.TRUE:
            return True
        return (
            condition.status == ConditionStatus.FALSE
            and condition.reason != ConditionReason.PROGRESSING.value
        )

    def is_phase_progressing(self, condition_type: Union[str, ConditionType]) -> bool:
        """Whether a phase is currently in progress."""
        condition = find_condition(self.status.conditions, condition_type)
        if condition is None or condition.status == ConditionStatus.TRUE:
            return False
        return (
            condition.status == ConditionStatus.FALSE
            and condition.reason == ConditionReason.PROGRESSING.value
        )


@dataclass
class ReleaseList:
    """A list of releases."""

    items: List[Release] = field(default_factory=list)