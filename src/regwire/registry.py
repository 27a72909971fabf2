from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar, overload

from regwire.exceptions import RegwireBindingNotFoundError
from regwire.identifiers import Identifier, display_identifier
from regwire.resolution_context import ResolutionContext

if TYPE_CHECKING:
    from collections.abc import Iterator

    from typing_extensions import Self

    from regwire.types import AnyFactory, Factory, IdentifierKey

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Registry:
    """Map identifiers to factories, falling back to ancestor registries.

    A registry owns its local bindings and an ordered list of ancestors
    (``parents``). ``resolve`` looks an identifier up locally first, then in
    each ancestor in the order they were added, depth-first, and invokes the
    first factory it finds. The factory receives a ``ResolutionContext`` bound
    to the registry ``resolve`` was called on, so a factory registered on a
    parent still sees a child's local overrides.

    Nothing is cached: every ``resolve`` call invokes the factory again. A
    factory that should behave as a singleton must keep its own state (see
    ``regwire.lifetimes``).

    Registries are not synchronized. Mutating bindings from one thread while
    another resolves from the same hierarchy requires external locking.
    """

    def __init__(self, name: str | None = None) -> None:
        """Create a root registry with no bindings and no ancestors.

        Args:
            name: Optional label used in ``repr`` and log records.

        """
        self._name = name
        self._bindings: dict[Any, AnyFactory] = {}
        self._parents: list[Registry] = []
        # Owned by lifetime wrappers (see regwire.lifetimes), keyed per wrapper.
        # Never copied by create_child or merge.
        self._scoped_values: dict[object, Any] = {}

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def parents(self) -> tuple[Registry, ...]:
        """Ancestor registries in lookup order."""
        return tuple(self._parents)

    def identifiers(self) -> tuple[Any, ...]:
        """Return the locally bound identifiers in registration order."""
        return tuple(self._bindings)

    def register(self, identifier: IdentifierKey, factory: Factory[Any]) -> Self:
        """Bind ``factory`` to ``identifier``, replacing any local binding.

        Ancestor bindings for the same identifier are left untouched; the local
        one shadows them for lookups starting at this registry or its children.

        Args:
            identifier: Hashable key naming the dependency.
            factory: Callable taking the resolution context and returning the
                dependency value.

        Returns:
            This registry, so registrations can be chained.

        Raises:
            TypeError: If ``factory`` is not callable.

        """
        if not callable(factory):
            msg = f"Factory for {display_identifier(identifier)!r} must be callable, got {factory!r}"
            raise TypeError(msg)

        self._bindings[identifier] = factory
        logger.debug("Registered %s on %r", display_identifier(identifier), self)
        return self

    def remove(self, identifier: IdentifierKey) -> Self:
        """Drop the local binding for ``identifier`` if there is one."""
        if self._bindings.pop(identifier, None) is not None:
            logger.debug("Removed %s from %r", display_identifier(identifier), self)
        return self

    def is_registered_locally(self, identifier: IdentifierKey) -> bool:
        return identifier in self._bindings

    def is_registered(self, identifier: IdentifierKey) -> bool:
        """Check this registry and, on a miss, its ancestors."""
        return self._find(identifier) is not None

    def __contains__(self, identifier: object) -> bool:
        return self.is_registered(identifier)

    @overload
    def resolve(self, identifier: Identifier[T]) -> T: ...

    @overload
    def resolve(self, identifier: IdentifierKey) -> Any: ...

    def resolve(self, identifier: Any) -> Any:
        """Look ``identifier`` up and return what its factory produces.

        Search order is this registry first, then each ancestor in turn with
        its own ancestors, depth-first and left-to-right. The nearest binding
        wins. The factory is called with a fresh ``ResolutionContext`` bound to
        this registry.

        Factories may request each other, but only if neither needs the
        other's final value before returning (hold on to the context or use
        ``context.defer`` instead). Two factories that each eagerly materialize
        the other recurse until Python raises ``RecursionError``.

        Raises:
            RegwireBindingNotFoundError: If no registry in the search order
                binds ``identifier``.

        """
        return self._resolve_in_context(identifier, ResolutionContext(self))

    def _resolve_in_context(self, identifier: Any, context: ResolutionContext) -> Any:
        found = self._find(identifier)
        if found is None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("No binding for %s reachable from %r", display_identifier(identifier), self)
            raise RegwireBindingNotFoundError(identifier)

        factory, owner = found
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Resolving %s for %r using binding from %r", display_identifier(identifier), self, owner)
        return factory(context)

    def _find(self, identifier: Any) -> tuple[AnyFactory, Registry] | None:
        for registry in self._search_order():
            factory = registry._bindings.get(identifier)  # noqa: SLF001
            if factory is not None:
                return factory, registry
        return None

    def _search_order(self) -> Iterator[Registry]:
        """Yield this registry and its ancestors in lookup priority order.

        The walk is a pre-order depth-first traversal over ``parents``. A
        registry reachable through several paths is yielded once, at its first
        position, which also makes cyclic ``extend`` chains terminate.
        """
        seen: set[int] = set()
        stack: list[Registry] = [self]
        while stack:
            registry = stack.pop()
            if id(registry) in seen:
                continue
            seen.add(id(registry))
            yield registry
            stack.extend(reversed(registry._parents))  # noqa: SLF001

    def extend(self, *registries: Registry) -> Self:
        """Append ``registries`` to the ancestor list.

        Registries already present (by identity) are skipped, as is this
        registry itself, so repeated calls never reorder or duplicate
        ancestors.

        Returns:
            This registry.

        """
        for registry in registries:
            if not isinstance(registry, Registry):
                msg = f"Registry can only be extended with registries, got {registry!r}"
                raise TypeError(msg)
            if registry is self or any(parent is registry for parent in self._parents):
                continue
            self._parents.append(registry)
            logger.debug("Extended %r with %r", self, registry)
        return self

    def create_child(self, name: str | None = None) -> Registry:
        """Return a new registry whose only ancestor is this one."""
        return Registry(name).extend(self)

    @staticmethod
    def merge(*registries: Registry) -> Registry:
        """Copy the local bindings of ``registries`` into a new root registry.

        See ``regwire.registry.merge``.
        """
        return merge(*registries)

    def __repr__(self) -> str:
        if self._name is None:
            return f"Registry(bindings={len(self._bindings)}, parents={len(self._parents)})"
        return f"Registry({self._name!r}, bindings={len(self._bindings)}, parents={len(self._parents)})"


def merge(*registries: Registry) -> Registry:
    """Flatten the local bindings of ``registries`` into a standalone registry.

    Bindings are copied in argument order, so a later registry's binding for an
    identifier replaces an earlier one. Ancestors of the inputs are neither
    searched nor copied, and the result has no ancestors of its own: changing
    an input afterwards does not affect the merged registry.
    """
    merged = Registry()
    for registry in registries:
        if not isinstance(registry, Registry):
            msg = f"Only registries can be merged, got {registry!r}"
            raise TypeError(msg)
        for identifier, factory in registry._bindings.items():  # noqa: SLF001
            merged._bindings[identifier] = factory  # noqa: SLF001
    logger.debug("Merged %d registries into %r", len(registries), merged)
    return merged
