"""Tests for the explicit process-wide registry holder."""

from collections.abc import Iterator

import pytest

from regwire import registry_context as exported_registry_context
from regwire.exceptions import RegwireRegistryNotSetError
from regwire.registry import Registry
from regwire.registry_context import RegistryContext, registry_context
from regwire.resolution_context import ResolutionContext


@pytest.fixture()
def context() -> RegistryContext:
    return RegistryContext()


@pytest.fixture()
def reset_module_context() -> Iterator[RegistryContext]:
    yield registry_context
    registry_context.reset()


def test_get_current_raises_when_unbound(context: RegistryContext) -> None:
    with pytest.raises(RegwireRegistryNotSetError, match="set_current"):
        context.get_current()


def test_resolve_raises_when_unbound(context: RegistryContext) -> None:
    with pytest.raises(RegwireRegistryNotSetError):
        context.resolve("value")


def test_set_current_binds_registry(context: RegistryContext, registry: Registry) -> None:
    context.set_current(registry)

    assert context.get_current() is registry


def test_registrations_before_binding_are_replayed(context: RegistryContext, registry: Registry) -> None:
    context.register("value", lambda _: "recorded")

    context.set_current(registry)

    assert registry.resolve("value") == "recorded"
    assert context.resolve("value") == "recorded"


def test_registrations_after_binding_apply_immediately(context: RegistryContext, registry: Registry) -> None:
    context.set_current(registry)

    context.register("value", lambda _: "immediate")

    assert registry.is_registered_locally("value")


def test_rebinding_replays_into_new_registry(context: RegistryContext) -> None:
    context.register("value", lambda _: "recorded")
    context.set_current(Registry())

    replacement = Registry()
    context.set_current(replacement)

    assert replacement.resolve("value") == "recorded"


def test_factory_decorator_registers_function(context: RegistryContext, registry: Registry) -> None:
    @context.factory("greeting")
    def greeting(_: ResolutionContext) -> str:
        return "hello"

    context.set_current(registry)

    assert registry.resolve("greeting") == "hello"
    assert greeting(ResolutionContext(registry)) == "hello"


def test_register_rejects_non_callable(context: RegistryContext) -> None:
    with pytest.raises(TypeError, match="must be callable"):
        context.register("value", "not callable")  # type: ignore[arg-type]


def test_reset_unbinds_and_forgets(context: RegistryContext, registry: Registry) -> None:
    context.register("value", lambda _: 1)
    context.set_current(registry)

    context.reset()

    with pytest.raises(RegwireRegistryNotSetError):
        context.get_current()
    fresh = Registry()
    context.set_current(fresh)
    assert not fresh.is_registered("value")


def test_module_level_instance_is_exported(reset_module_context: RegistryContext) -> None:
    assert exported_registry_context is reset_module_context

    registry = Registry()
    reset_module_context.set_current(registry)

    assert exported_registry_context.get_current() is registry


def test_registries_never_consult_the_holder(reset_module_context: RegistryContext) -> None:
    reset_module_context.set_current(Registry().register("value", lambda _: 1))

    assert not Registry().is_registered("value")
