"""Tests for ResolutionContext and Deferred handles."""

from __future__ import annotations

from typing import Any

import pytest

from regwire.exceptions import RegwireBindingNotFoundError
from regwire.registry import Registry
from regwire.resolution_context import Deferred, ResolutionContext


class TestResolutionContext:
    def test_factory_receives_resolution_context(self, registry: Registry) -> None:
        registry.register("context", lambda context: context)

        context = registry.resolve("context")

        assert isinstance(context, ResolutionContext)
        assert context.registry is registry

    def test_fresh_context_per_top_level_resolve(self, registry: Registry) -> None:
        registry.register("context", lambda context: context)

        assert registry.resolve("context") is not registry.resolve("context")

    def test_nested_requests_share_the_context(self, registry: Registry) -> None:
        registry.register("inner", lambda context: context)
        registry.register("outer", lambda context: (context, context.request("inner")))

        outer_context, inner_context = registry.resolve("outer")

        assert outer_context is inner_context

    def test_call_and_request_are_equivalent(self, registry: Registry) -> None:
        registry.register("value", lambda _: 5)
        registry.register("both", lambda inject: (inject("value"), inject.request("value")))

        assert registry.resolve("both") == (5, 5)

    def test_request_reports_missing_binding(self, registry: Registry) -> None:
        registry.register("broken", lambda inject: inject("missing"))

        with pytest.raises(RegwireBindingNotFoundError):
            registry.resolve("broken")

    def test_retained_context_sees_later_registrations(self, registry: Registry) -> None:
        registry.register("context", lambda context: context)
        context = registry.resolve("context")

        registry.register("late", lambda _: "late")

        assert context.request("late") == "late"

    def test_repr_mentions_registry(self, parent: Registry) -> None:
        assert repr(ResolutionContext(parent)) == f"ResolutionContext(registry={parent!r})"


class TestDeferred:
    def test_defer_does_not_resolve(self, registry: Registry) -> None:
        calls: list[str] = []
        registry.register("value", lambda _: calls.append("value") or "value")
        registry.register("holder", lambda context: context.defer("value"))

        handle = registry.resolve("holder")

        assert isinstance(handle, Deferred)
        assert not handle.resolved
        assert calls == []

    def test_get_resolves_once_per_handle(self, registry: Registry) -> None:
        calls: list[str] = []

        def value(_: ResolutionContext) -> object:
            calls.append("value")
            return object()

        registry.register("value", value)
        registry.register("holder", lambda context: context.defer("value"))
        handle = registry.resolve("holder")

        first = handle.get()
        second = handle.get()

        assert first is second
        assert handle.resolved
        assert calls == ["value"]

    def test_deferred_uses_originating_registry(self, parent: Registry, child: Registry) -> None:
        parent.register("value", lambda _: "parent")
        parent.register("holder", lambda context: context.defer("value"))
        child.register("value", lambda _: "child")

        assert child.resolve("holder").get() == "child"

    def test_deferred_missing_binding_raises_on_get(self, registry: Registry) -> None:
        registry.register("holder", lambda context: context.defer("missing"))
        handle = registry.resolve("holder")

        with pytest.raises(RegwireBindingNotFoundError):
            handle.get()

        assert not handle.resolved

    def test_two_phase_mutual_dependency(self, registry: Registry) -> None:
        calls = {"parent": 0, "child": 0}

        class Parent:
            def __init__(self, child: Deferred[Any]) -> None:
                self._child = child
                self.name = "parent"

            def child_name(self) -> str:
                return self._child.get().name

        class Child:
            def __init__(self, parent: Deferred[Any]) -> None:
                self._parent = parent
                self.name = "child"

            def parent_name(self) -> str:
                return self._parent.get().name

        def make_parent(context: ResolutionContext) -> Parent:
            calls["parent"] += 1
            return Parent(context.defer("child"))

        def make_child(context: ResolutionContext) -> Child:
            calls["child"] += 1
            return Child(context.defer("parent"))

        registry.register("parent", make_parent)
        registry.register("child", make_child)

        parent = registry.resolve("parent")
        assert calls == {"parent": 1, "child": 0}

        assert parent.child_name() == "child"
        assert parent.child_name() == "child"
        assert calls == {"parent": 1, "child": 1}

    def test_repr_shows_state(self, registry: Registry) -> None:
        registry.register("value", lambda _: 1)
        registry.register("holder", lambda context: context.defer("value"))
        handle = registry.resolve("holder")

        assert repr(handle) == "Deferred('value', pending)"
        handle.get()
        assert repr(handle) == "Deferred('value', resolved)"
        assert handle.identifier == "value"
