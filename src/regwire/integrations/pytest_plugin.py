from __future__ import annotations

import pytest

from regwire.registry import Registry

_REGWIRE_BIND_MARKER = "regwire_bind"


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        f"{_REGWIRE_BIND_MARKER}(identifier, factory): bind factory to identifier on regwire_child.",
    )


@pytest.fixture()
def regwire_registry() -> Registry:
    """Create the per-test root registry used by the plugin.

    Override this fixture in your own test suite to return a registry with the
    application's bindings. It is function-scoped, so registrations are
    isolated between tests unless the fixture scope is widened explicitly.

    Returns:
        A new, empty ``Registry``.

    """
    return Registry(name="regwire_registry")


@pytest.fixture()
def regwire_child(request: pytest.FixtureRequest, regwire_registry: Registry) -> Registry:
    """Create a child of ``regwire_registry`` for test-local overrides.

    Bindings from ``@pytest.mark.regwire_bind(identifier, factory)`` markers are
    registered on the child, closest marker last, so the root registry is never
    mutated by a test.

    Returns:
        A new child registry of ``regwire_registry``.

    """
    child = regwire_registry.create_child(name=request.node.name)
    markers = list(request.node.iter_markers(_REGWIRE_BIND_MARKER))
    # iter_markers yields the closest marker first.
    for marker in reversed(markers):
        identifier, factory = marker.args
        child.register(identifier, factory)
    return child
