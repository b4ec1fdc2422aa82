"""Service-wide configuration resource."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import List, Optional

from relflow.meta import ObjectMeta

RELEASE_SERVICE_CONFIG_RESOURCE_NAME = "release-service-config"


@dataclass
class TimeoutFields:
    """Default pipeline timeouts; None means no default is set."""

    pipeline: Optional[timedelta] = None
    tasks: Optional[timedelta] = None
    finally_: Optional[timedelta] = None


@dataclass
class ReleaseServiceConfigSpec:
    """Desired state of the service configuration."""

    debug: bool = False
    default_timeouts: TimeoutFields = field(default_factory=TimeoutFields)


@dataclass
class ReleaseServiceConfig:
    """Configuration of the release service."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: ReleaseServiceConfigSpec = field(default_factory=ReleaseServiceConfigSpec)

    @classmethod
    def default(cls, namespace: str) -> "ReleaseServiceConfig":
        """Return a configuration with the standard name in the given namespace."""
        return cls(metadata=ObjectMeta(name=RELEASE_SERVICE_CONFIG_RESOURCE_NAME, namespace=namespace))


@dataclass
class ReleaseServiceConfigList:
    """A list of service configurations."""

    items: List[ReleaseServiceConfig] = field(default_factory=list)