from datetime import timedelta

from relflow.config import (
    RELEASE_SERVICE_CONFIG_RESOURCE_NAME,
    ReleaseServiceConfig,
    ReleaseServiceConfigList,
    ReleaseServiceConfigSpec,
    TimeoutFields,
)


def test_resource_name():
    config = ReleaseServiceConfig.default("ns")
    assert config.metadata.name == RELEASE_SERVICE_CONFIG_RESOURCE_NAME
    assert RELEASE_SERVICE_CONFIG_RESOURCE_NAME == "release-service-config"


def test_default_config_identity():
    config = ReleaseServiceConfig.default("ns")
    assert config.metadata.name == "release-service-config"
    assert config.metadata.namespace == "ns"
    assert config.metadata.namespaced_name() == "ns/release-service-config"


def test_default_config_spec():
    config = ReleaseServiceConfig.default("ns")
    assert config.spec.debug is False
    assert config.spec.default_timeouts == TimeoutFields()
    assert config.spec.default_timeouts.pipeline is None


def test_spec_carries_timeouts():
    timeouts = TimeoutFields(pipeline=timedelta(hours=1), tasks=timedelta(minutes=30))
    spec = ReleaseServiceConfigSpec(debug=True, default_timeouts=timeouts)
    assert spec.default_timeouts.pipeline == timedelta(hours=1)
    assert spec.default_timeouts.tasks == timedelta(minutes=30)
    assert spec.default_timeouts.finally_ is None
    assert spec.debug is True


def test_defaults_are_independent():
    first = ReleaseServiceConfig.default("a")
    second = ReleaseServiceConfig.default("b")
    first.spec.default_timeouts.pipeline = timedelta(seconds=5)
    assert second.spec.default_timeouts.pipeline is None


def test_list_holds_items():
    items = [ReleaseServiceConfig.default("a"), ReleaseServiceConfig.default("b")]
    config_list = ReleaseServiceConfigList(items=items)
    assert [c.metadata.namespace for c in config_list.items] == ["a", "b"]
    assert ReleaseServiceConfigList().items == []