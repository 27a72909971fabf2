from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar, overload

from regwire.exceptions import RegwireRegistryNotSetError

if TYPE_CHECKING:
    from regwire.identifiers import Identifier
    from regwire.registry import Registry
    from regwire.types import Factory, IdentifierKey

T = TypeVar("T")
F = TypeVar("F", bound=Callable[[Any], Any])

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Registration:
    """Registration recorded by RegistryContext and replayed on bind."""

    identifier: Any
    factory: Factory[Any]

    def apply(self, registry: Registry) -> None:
        registry.register(self.identifier, self.factory)


class RegistryContext:
    """Explicitly bound, process-wide registry holder.

    Nothing in ``Registry`` consults it: it exists for applications that want
    one shared registry reachable from module level. Bindings declared before
    a registry is bound are recorded and replayed by ``set_current``, so
    modules can register factories at import time.

    The binding is process-global for this instance; it is neither
    thread-local nor task-local.
    """

    def __init__(self) -> None:
        self._registry: Registry | None = None
        self._registrations: list[_Registration] = []

    def set_current(self, registry: Registry) -> None:
        """Bind ``registry`` and replay previously recorded registrations."""
        self._registry = registry
        for registration in self._registrations:
            registration.apply(registry)
        logger.debug("Bound %r with %d recorded registrations", registry, len(self._registrations))

    def get_current(self) -> Registry:
        """Return the bound registry or raise when none is bound."""
        if self._registry is None:
            msg = (
                "Registry is not set for registry_context. "
                "Call registry_context.set_current(registry) before using registry_context."
            )
            raise RegwireRegistryNotSetError(msg)
        return self._registry

    def reset(self) -> None:
        """Unbind the current registry and forget recorded registrations."""
        self._registry = None
        self._registrations.clear()

    def register(self, identifier: IdentifierKey, factory: Factory[Any]) -> None:
        """Record a binding and apply it immediately when a registry is bound."""
        if not callable(factory):
            msg = f"Factory for {identifier!r} must be callable, got {factory!r}"
            raise TypeError(msg)
        registration = _Registration(identifier=identifier, factory=factory)
        if self._registry is not None:
            registration.apply(self._registry)
        self._registrations.append(registration)

    def factory(self, identifier: IdentifierKey) -> Callable[[F], F]:
        """Register the decorated function as the factory for ``identifier``."""

        def decorator(func: F) -> F:
            self.register(identifier, func)
            return func

        return decorator

    @overload
    def resolve(self, identifier: Identifier[T]) -> T: ...

    @overload
    def resolve(self, identifier: IdentifierKey) -> Any: ...

    def resolve(self, identifier: Any) -> Any:
        return self.get_current().resolve(identifier)


registry_context = RegistryContext()
"""Module-level holder; unbound until ``set_current`` is called."""
