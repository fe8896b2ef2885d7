"""Shared pytest fixtures for dotwire tests."""

import pytest

from dotwire.config import ConfigBucket
from dotwire.introspection import ConstructorInspector
from dotwire.notation import DotNotation, NameRegistry
from dotwire.resolver import InjectionResolver


@pytest.fixture()
def registry() -> NameRegistry:
    """Empty registry without fallback: unknown names fail."""
    return NameRegistry()


@pytest.fixture()
def config() -> ConfigBucket:
    return ConfigBucket()


@pytest.fixture()
def resolver(registry: NameRegistry, config: ConfigBucket) -> InjectionResolver:
    """Resolver over the registry and config fixtures."""
    return InjectionResolver(registry, config)


@pytest.fixture()
def dotted_resolver(config: ConfigBucket) -> InjectionResolver:
    """Resolver importing every name through DotNotation."""
    return InjectionResolver(DotNotation(), config)


@pytest.fixture()
def inspector() -> ConstructorInspector:
    return ConstructorInspector()
