from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any, Protocol, TypeAlias, TypeVar, overload

from regwire.identifiers import Identifier

T = TypeVar("T")

IdentifierKey: TypeAlias = Hashable
"""Any hashable value usable as a binding key (``str``, ``Identifier``, a class, ...)."""


class Inject(Protocol):
    """Request another dependency while a factory is running.

    Both ``ResolutionContext`` and ``Registry.resolve`` satisfy this protocol.
    """

    @overload
    def __call__(self, identifier: Identifier[T]) -> T: ...

    @overload
    def __call__(self, identifier: IdentifierKey) -> Any: ...

    def __call__(self, identifier: Any) -> Any: ...


Factory: TypeAlias = Callable[[Any], T]
"""Produce a value from the resolution context passed as the only argument."""

AnyFactory: TypeAlias = Callable[[Any], Any]
"""A factory with its produced type erased, as stored by the registry."""
