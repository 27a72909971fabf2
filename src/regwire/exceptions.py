from __future__ import annotations

from typing import Any

from regwire.identifiers import display_identifier


class RegwireError(Exception):
    """Base class for errors raised by regwire itself.

    Errors raised inside user factories are never wrapped in it; they reach the
    ``resolve`` caller unchanged.
    """


class RegwireBindingNotFoundError(RegwireError, LookupError):
    """Signal that an identifier has no binding in the searched hierarchy.

    Raised by ``Registry.resolve`` (and by the resolution context handed to
    factories) once the local bindings and every ancestor registry have been
    searched without a match. It is the only error the resolution engine raises
    by itself; errors raised inside factories propagate unchanged.

    Typical fixes include registering the identifier on the registry (or one of
    its ancestors) or extending the registry with the registry that owns it.
    """

    def __init__(self, identifier: Any) -> None:
        self.identifier = identifier
        super().__init__(f'Binding "{display_identifier(identifier)}" not found!')


class RegwireRegistryNotSetError(RegwireError):
    """Signal use of ``registry_context`` before a registry is bound.

    Raised by ``RegistryContext.get_current`` and by operations that delegate
    to the active registry.

    Typical fix is calling ``registry_context.set_current(registry)`` during
    application startup before resolution calls.
    """
