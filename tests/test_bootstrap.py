import pytest

from driver_kernel import DriverError, DriverErrorKind
from driver_kernel.bootstrap import bootstrap, get_driver_registry, registry_from_settings
from driver_kernel.config.base_settings import DriverSettings
from sample_drivers import FileStore, MemoryStore, StorageDriver, StorageDriverContract


def test_settings_configure_and_enable():
    settings = DriverSettings(
        attribute="sample_drivers.StorageDriver",
        contract="sample_drivers.StorageDriverContract",
        enabled=["sample_drivers.FileStore", "sample_drivers.MemoryStore"],
    )
    registry = registry_from_settings(settings, bootstrap())

    assert registry.configuration.attribute is StorageDriver
    assert registry.configuration.contract is StorageDriverContract
    assert registry.enabled_drivers() == [FileStore, MemoryStore]
    assert isinstance(registry.get(FileStore), FileStore)


def test_empty_settings_leave_registry_unconfigured():
    registry = registry_from_settings(DriverSettings(), bootstrap())
    assert not registry.is_configured()


def test_enabling_without_configuration_fails():
    with pytest.raises(DriverError) as exc:
        registry_from_settings(DriverSettings(enabled=["sample_drivers.FileStore"]), bootstrap())
    assert exc.value.kind is DriverErrorKind.NOT_CONFIGURED


def test_settings_with_unsupported_driver_fail():
    settings = DriverSettings(
        contract="sample_drivers.StorageDriverContract",
        enabled=["sample_drivers.Plain"],
    )
    with pytest.raises(DriverError) as exc:
        registry_from_settings(settings, bootstrap())
    assert exc.value.kind is DriverErrorKind.NOT_SUPPORTED


def test_global_registry_reads_environment(monkeypatch, fresh_global_registry):
    monkeypatch.setenv("DRIVERS_CONTRACT", "sample_drivers.StorageDriverContract")
    monkeypatch.setenv("DRIVERS_ENABLED", '["sample_drivers.FileStore"]')

    registry = get_driver_registry()

    assert registry is get_driver_registry()
    assert registry.is_enabled(FileStore)
    assert registry.get(FileStore) is registry.get(FileStore)
