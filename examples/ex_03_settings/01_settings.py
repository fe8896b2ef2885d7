"""Resolver configuration from pydantic settings.

This module demonstrates:

1. ``ResolverSettings`` read from ``DOTWIRE_*`` environment variables.
2. ``InjectionResolver.from_settings`` wiring the configured mappings.
"""

from __future__ import annotations

import json
import os

from dotwire import InjectionResolver, ResolverSettings


class Transport:
    name = "default"


class HttpTransport(Transport):
    name = "http"


class Client:
    def __init__(self, transport: Transport) -> None:
        self.transport = transport


def main() -> None:
    os.environ["DOTWIRE_DEPENDENCIES"] = json.dumps(
        {f"{__name__}.Client": {"transport": f"{__name__}.HttpTransport"}},
    )
    settings = ResolverSettings()
    print(f"detect_cycles={settings.detect_cycles}")  # => detect_cycles=True

    resolver = InjectionResolver.from_settings(settings)
    client = resolver.make(f"{__name__}.Client")
    print(f"transport={client.transport.name}")  # => transport=http


if __name__ == "__main__":
    main()
