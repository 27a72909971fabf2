from regwire.exceptions import (
    RegwireBindingNotFoundError,
    RegwireError,
    RegwireRegistryNotSetError,
)
from regwire.identifiers import Identifier, display_identifier
from regwire.lifetimes import Lifetime, request_scoped, singleton, transient, with_lifetime
from regwire.registry import Registry, merge
from regwire.registry_context import RegistryContext, registry_context
from regwire.resolution_context import Deferred, ResolutionContext
from regwire.scope import Scope
from regwire.types import Factory, Inject

__all__ = [
    "Deferred",
    "Factory",
    "Identifier",
    "Inject",
    "Lifetime",
    "Registry",
    "RegistryContext",
    "RegwireBindingNotFoundError",
    "RegwireError",
    "RegwireRegistryNotSetError",
    "ResolutionContext",
    "Scope",
    "display_identifier",
    "merge",
    "registry_context",
    "request_scoped",
    "singleton",
    "transient",
    "with_lifetime",
]
