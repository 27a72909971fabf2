from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing_extensions import Self


class Scope:
    """Hierarchical store of already-built values.

    Lookups fall back to the parent chain; writes and deletes only ever touch
    the scope they are called on. Unlike ``Registry`` a scope holds values,
    not factories, which makes it a convenient carrier for per-request data
    (a request id, the current user) that factories read through a binding.
    """

    def __init__(self, parent: Scope | None = None) -> None:
        self._parent = parent
        self._values: dict[Any, Any] = {}

    @property
    def parent(self) -> Scope | None:
        return self._parent

    def set(self, key: Any, value: Any) -> Self:
        self._values[key] = value
        return self

    def has(self, key: Any) -> bool:
        scope: Scope | None = self
        while scope is not None:
            if key in scope._values:  # noqa: SLF001
                return True
            scope = scope._parent  # noqa: SLF001
        return False

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the nearest value stored under ``key``, or ``default``."""
        scope: Scope | None = self
        while scope is not None:
            if key in scope._values:  # noqa: SLF001
                return scope._values[key]  # noqa: SLF001
            scope = scope._parent  # noqa: SLF001
        return default

    def delete(self, key: Any) -> bool:
        """Delete ``key`` from this scope only; return whether it was present."""
        if key in self._values:
            del self._values[key]
            return True
        return False

    def create_child(self) -> Scope:
        return Scope(parent=self)

    def __contains__(self, key: object) -> bool:
        return self.has(key)
