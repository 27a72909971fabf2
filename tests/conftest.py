"""Shared pytest fixtures for regwire tests."""

import pytest

from regwire.registry import Registry

pytest_plugins = ["regwire.integrations.pytest_plugin"]


@pytest.fixture()
def registry() -> Registry:
    """Empty root registry."""
    return Registry()


@pytest.fixture()
def parent() -> Registry:
    """Root registry used as the ancestor in hierarchy tests."""
    return Registry(name="parent")


@pytest.fixture()
def child(parent: Registry) -> Registry:
    """Child of the ``parent`` fixture."""
    return parent.create_child(name="child")
