from __future__ import annotations

import threading
from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")


class Identifier(Generic[T]):
    """Opaque, symbol-like key naming a registered dependency.

    Two identifiers created with the same name are still distinct keys::

        ADDER: Identifier[Adder] = Identifier("adder")
        assert ADDER != Identifier("adder")

    Use ``Identifier.for_`` when equal names must map to one shared key (for
    example when separate modules declare the same dependency independently).

    The type parameter only exists for call-site typing: ``registry.resolve(ADDER)``
    is typed ``Adder`` by static checkers. Nothing is checked at runtime.
    """

    _interned: ClassVar[dict[str, Identifier[Any]]] = {}
    _interned_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @classmethod
    def for_(cls, name: str) -> Identifier[Any]:
        """Return the process-wide identifier interned under ``name``.

        The first call creates it; later calls with the same name return the
        same object, so the identifiers compare equal.
        """
        with cls._interned_lock:
            identifier = cls._interned.get(name)
            if identifier is None:
                identifier = cls(name)
                cls._interned[name] = identifier
            return identifier

    def __repr__(self) -> str:
        return f"Identifier({self._name})"

    __str__ = __repr__


def display_identifier(identifier: Any) -> str:
    """Render an identifier for error messages and log records."""
    if isinstance(identifier, str):
        return identifier
    if isinstance(identifier, Identifier):
        return str(identifier)
    if isinstance(identifier, type):
        return identifier.__qualname__
    return repr(identifier)
