from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

from regwire.identifiers import Identifier

if TYPE_CHECKING:
    from regwire.registry import Registry
    from regwire.types import IdentifierKey

T = TypeVar("T")

_UNRESOLVED: Any = object()


class ResolutionContext:
    """Capability handed to every factory while it is being invoked.

    A context is created for each top-level ``Registry.resolve`` call and is
    bound to the registry that call started on, even when the factory itself
    was found on an ancestor. Requests made through it therefore see the full
    scope of the originating registry, including its local overrides.

    The context is callable, so a factory can use it directly as an
    ``inject`` function::

        def adder(inject: ResolutionContext) -> Adder:
            carrier = inject(NUMBER_CARRIER)
            return Adder(carrier.num2)

    Factories may keep the context and request dependencies later, after they
    have returned; this is how mutually-dependent factories defer dereference.
    """

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    @property
    def registry(self) -> Registry:
        """The registry resolution started on."""
        return self._registry

    @overload
    def request(self, identifier: Identifier[T]) -> T: ...

    @overload
    def request(self, identifier: IdentifierKey) -> Any: ...

    def request(self, identifier: Any) -> Any:
        """Resolve ``identifier`` against the originating registry."""
        return self._registry._resolve_in_context(identifier, self)  # noqa: SLF001

    __call__ = request

    @overload
    def defer(self, identifier: Identifier[T]) -> Deferred[T]: ...

    @overload
    def defer(self, identifier: IdentifierKey) -> Deferred[Any]: ...

    def defer(self, identifier: Any) -> Deferred[Any]:
        """Return a handle that resolves ``identifier`` on first ``get()``.

        Nothing is looked up when the handle is created, so a factory can hand
        out a reference to a dependency that is still being constructed.
        """
        return Deferred(self, identifier)

    def __repr__(self) -> str:
        return f"ResolutionContext(registry={self._registry!r})"


class Deferred(Generic[T]):
    """Placeholder populated with a dependency the first time it is read.

    Mutually-dependent factories use it as an explicit two-phase handle: the
    factory builds its own value around the placeholder first and the
    dependency is materialized only when ``get()`` is called, after both
    factories have returned. The populated value is kept on the handle; the
    registry itself never caches.
    """

    def __init__(self, context: ResolutionContext, identifier: Any) -> None:
        self._context = context
        self._identifier = identifier
        self._value: Any = _UNRESOLVED

    @property
    def identifier(self) -> Any:
        return self._identifier

    @property
    def resolved(self) -> bool:
        return self._value is not _UNRESOLVED

    def get(self) -> T:
        if self._value is _UNRESOLVED:
            self._value = self._context.request(self._identifier)
        return self._value

    def __repr__(self) -> str:
        state = "resolved" if self.resolved else "pending"
        return f"Deferred({self._identifier!r}, {state})"
