# relflow

Plain Python models for release resources and the status conditions that
track their progress. The resources are `Release`, `ReleasePlan`,
`ReleasePlanAdmission` and `ReleaseServiceConfig`. The package needs only
the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `relflow.conditions` holds the `Condition` dataclass and the enums
  `ConditionStatus` (`True`, `False`, `Unknown`), `ConditionType` and
  `ConditionReason`. It also has functions that work on a list of conditions:
  - `find_condition(conditions, condition_type)` returns the matching
    condition, or `None`.
  - `set_condition(conditions, condition_type, status, reason, message="")`
    adds or updates a condition in place and returns it. The
    `last_transition_time` changes only when the status changes.
  - `is_condition_true(conditions, condition_type)`.
  - `is_condition_present_and_equal(conditions, condition_type, status)`.
- `relflow.meta` holds `GroupVersion`, whose `str()` is `group/version`, and
  the constant `GROUP_VERSION` (`appstudio.redhat.com/v1alpha1`). It also
  holds `ObjectMeta`, which has a name, a namespace, labels and a creation
  timestamp. `ObjectMeta.namespaced_name()` returns `namespace/name`.
  `ObjectMeta.is_auto_release()` tells whether the label
  `release.appstudio.openshift.io/auto-release` is `"true"`.
- `relflow.collectors` holds `Param` and `Collector`. `Collector.validate()`
  checks the collector's name and type against the pattern
  `^[a-z0-9]([-a-z0-9]*[a-z0-9])?$`. It raises `ValueError` when either one
  does not match, and otherwise returns the collector.
- `relflow.config` holds `ReleaseServiceConfig` and its spec, which has a
  `debug` flag and default `TimeoutFields`. It also holds
  `ReleaseServiceConfigList`. `ReleaseServiceConfig.default(namespace)` builds
  a config named `release-service-config` in the given namespace.
- `relflow.release` holds `Release`, its spec and status records
  (`AttributionInfo`, `PipelineInfo`, `ValidationInfo`), and `ReleaseList`.
- `relflow.plans` holds `ReleasePlan`, `ReleasePlanAdmission`, their spec and
  status records, and the list types. It also handles the matching between
  plans and admissions.

## Release lifecycle

A `Release` tracks three pipeline phases: tenant, managed and final. It also
tracks the release as a whole and its validation. Each one is kept as a
condition in `release.status.conditions`.

```python
from relflow.release import Release

release = Release()
release.mark_releasing("starting")
release.mark_managed_pipeline_processing()
release.mark_managed_pipeline_processed()
release.mark_released()

assert release.is_managed_pipeline_processed()
assert release.is_released()
assert release.has_release_finished()
```

The rules for each state change:

- A phase or release that has finished is not started again.
  `mark_*_processing()` and `mark_releasing()` set the start time only when
  the phase is not already in progress.
- `mark_*_processed()`, `mark_*_processing_failed(message)`, `mark_released()`
  and `mark_release_failed(message)` take effect only while the phase is in
  progress. They set the completion time.
- `mark_*_processing_skipped()` sets the condition to `True` with reason
  `Skipped`, unless the phase has already finished.
- `mark_validated()` does nothing if the release is already valid.
  `mark_validation_failed(message)` always records the failure. If the
  release was valid before, it also sets `failed_post_validation`.
- `set_expiration_time(days)` sets `status.expiration_time` to the creation
  timestamp plus that many days.
- `phase_reason`, `has_phase_finished` and `is_phase_progressing` answer
  these questions for any condition type.

## Matching plans and admissions

```python
from relflow.meta import ObjectMeta
from relflow.plans import ReleasePlan, ReleasePlanAdmission

plan = ReleasePlan(metadata=ObjectMeta(name="rp", namespace="default"))
admission = ReleasePlanAdmission(metadata=ObjectMeta(name="rpa", namespace="default"))

plan.mark_matched(admission)
admission.mark_matched(plan)

assert plan.status.release_plan_admission.name == "default/rpa"
assert admission.status.release_plans[0].name == "default/rp"
```

- `ReleasePlanAdmission.mark_matched(plan)` adds the plan to the matched
  list, which is kept sorted by name.
- `ReleasePlanAdmission.clear_matching_info()` empties that list.
- `ReleasePlan.mark_unmatched()` clears the matched admission. It leaves the
  condition untouched if it is already `False`.

## What it does not do

These are in-memory data models only. The package does not talk to a
cluster, and it does not store or load resources. It does not run pipelines
and does not record metrics. It has no command-line program. Pipeline
references and free-form data fields are plain dictionaries and are not
checked.