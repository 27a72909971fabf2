from __future__ import annotations

import functools
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from regwire.resolution_context import ResolutionContext
    from regwire.types import Factory

T = TypeVar("T")

_UNSET: Any = object()


class Lifetime(Enum):
    """How long a value produced by a factory is reused.

    The registry never caches, so a lifetime is applied by wrapping the factory
    before registering it (``with_lifetime``).
    """

    TRANSIENT = "transient"
    """A new value is produced on every resolution."""

    REQUEST = "request"
    """One value per originating registry, typically a child registry per request."""

    SINGLETON = "singleton"
    """One value shared by every registry the factory is resolved through."""


def transient(factory: Factory[T]) -> Factory[T]:
    return factory


def singleton(factory: Factory[T]) -> Factory[T]:
    """Wrap ``factory`` so it runs once and its value is reused afterwards.

    The first caller's resolution context is the one the value is built with.
    If ``factory`` raises, nothing is stored and the next resolution retries.
    """
    value: Any = _UNSET

    @functools.wraps(factory)
    def wrapper(context: ResolutionContext) -> T:
        nonlocal value
        if value is _UNSET:
            value = factory(context)
        return value

    return wrapper


def request_scoped(factory: Factory[T]) -> Factory[T]:
    """Wrap ``factory`` so it runs once per originating registry.

    The value is stored on ``context.registry`` itself, so it is released
    together with that registry, even when the value refers back to it
    through a retained context or ``Deferred``. This makes
    ``registry.create_child()`` per request a request scope.
    """
    key = object()

    @functools.wraps(factory)
    def wrapper(context: ResolutionContext) -> T:
        values = context.registry._scoped_values  # noqa: SLF001
        if key not in values:
            values[key] = factory(context)
        return values[key]

    return wrapper


_WRAPPERS = {
    Lifetime.TRANSIENT: transient,
    Lifetime.REQUEST: request_scoped,
    Lifetime.SINGLETON: singleton,
}


def with_lifetime(factory: Factory[T], lifetime: Lifetime) -> Factory[T]:
    """Apply ``lifetime`` to ``factory``.

    Raises:
        ValueError: If ``lifetime`` is not a ``Lifetime`` member.

    """
    try:
        wrap = _WRAPPERS[lifetime]
    except KeyError:
        msg = f"Unsupported lifetime: {lifetime!r}"
        raise ValueError(msg) from None
    return wrap(factory)
