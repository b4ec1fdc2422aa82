"""API group identity and object metadata shared by all resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict

NAMESPACE_SEPARATOR = "/"
AUTO_RELEASE_LABEL = "release.appstudio.openshift.io/auto-release"
ZERO_TIME = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class GroupVersion:
    """An API group together with its version."""

    group: str
    version: str

    def __str__(self) -> str:
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"


GROUP_VERSION = GroupVersion(group="appstudio.redhat.com", version="v1alpha1")


@dataclass
class ObjectMeta:
    """Identity and labels of a stored resource."""

    name: str = ""
    namespace: str = ""
    labels: Dict[str, str] = field(default_factory=dict)
    creation_timestamp: datetime = ZERO_TIME

    def namespaced_name(self) -> str:
        """Return the name qualified by namespace, as ``namespace/name``."""
        return f"{self.namespace}{NAMESPACE_SEPARATOR}{self.name}"

    def is_auto_release(self) -> bool:
        """Whether the auto-release label is set to ``"true"``."""
        return self.labels.get(AUTO_RELEASE_LABEL) == "true"