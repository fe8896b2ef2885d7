"""Pytest fixtures for tests that build objects with dotwire.

Enable the plugin in a test module or the root ``conftest.py``:

.. code-block:: python

    pytest_plugins = ["dotwire.integrations.pytest_plugin"]

Configured mappings can be attached per test with the ``dotwire`` marker:

.. code-block:: python

    @pytest.mark.dotwire(dependencies={"app.service": {"logger": "app.file_logger"}})
    def test_service(dotwire_resolver: InjectionResolver) -> None: ...

"""

from __future__ import annotations

from typing import Any

import pytest

from dotwire.config import ConfigBucket
from dotwire.notation import DotNotation, NameRegistry
from dotwire.resolver import InjectionResolver

_MARKER_NAME = "dotwire"


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        f"{_MARKER_NAME}(dependencies=None, detect_cycles=True): "
        "configure the dotwire_resolver fixture for this test",
    )


def _marker_kwargs(request: pytest.FixtureRequest) -> dict[str, Any]:
    marker = request.node.get_closest_marker(_MARKER_NAME)
    return dict(marker.kwargs) if marker is not None else {}


@pytest.fixture()
def dotwire_registry() -> NameRegistry:
    """Create a per-test name registry falling back to dotted imports.

    Register test doubles on it to pin names; anything unregistered is
    imported through ``DotNotation``.
    """
    return NameRegistry(fallback=DotNotation())


@pytest.fixture()
def dotwire_config(request: pytest.FixtureRequest) -> ConfigBucket:
    """Create a per-test config bucket preloaded from the ``dotwire`` marker."""
    return ConfigBucket(_marker_kwargs(request).get("dependencies"))


@pytest.fixture()
def dotwire_resolver(
    request: pytest.FixtureRequest,
    dotwire_registry: NameRegistry,
    dotwire_config: ConfigBucket,
) -> InjectionResolver:
    """Create a resolver wired to the per-test registry and config bucket."""
    detect_cycles = _marker_kwargs(request).get("detect_cycles", True)
    return InjectionResolver(dotwire_registry, dotwire_config, detect_cycles=detect_cycles)


__all__ = ["dotwire_config", "dotwire_registry", "dotwire_resolver"]
