import pytest

from theme_lab.services.service_locator import (
    ServiceAlreadyRegisteredError,
    ServiceLocator,
    ServiceNotFoundError,
    services,
)


def test_register_and_get():
    services.register("settings", {"debounce_ms": 750})
    assert services.get("settings")["debounce_ms"] == 750


def test_double_register_raises():
    services.register("x", 1)
    with pytest.raises(ServiceAlreadyRegisteredError):
        services.register("x", 2)
    services.register("x", 3, allow_override=True)
    assert services.get("x") == 3


def test_get_typed():
    services.register("n", 5)
    assert services.get_typed("n", int) == 5
    with pytest.raises(TypeError):
        services.get_typed("n", str)


def test_missing_key():
    with pytest.raises(ServiceNotFoundError):
        services.get("missing")
    assert services.try_get("missing", 123) == 123


def test_clear():
    services.register("a", 1)
    services.clear()
    assert services.try_get("a") is None


def test_local_instance_isolated():
    local = ServiceLocator()
    local.register("foo", 1)
    assert local.get("foo") == 1
    with pytest.raises(ServiceNotFoundError):
        services.get("foo")
