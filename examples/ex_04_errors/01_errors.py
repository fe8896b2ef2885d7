"""Errors raised while resolving and constructing.

This module demonstrates:

1. ``DotwireUnknownNameError`` for names that map to nothing.
2. ``DotwireIntrospectionError`` for a primitive parameter nobody supplied.
3. ``DotwireCyclicDependencyError`` for a configured cycle.
4. ``DotwireConstructionError`` for an abstract target.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from dotwire import (
    ConfigBucket,
    DotwireConstructionError,
    DotwireCyclicDependencyError,
    DotwireIntrospectionError,
    DotwireResolutionError,
    InjectionResolver,
    NameRegistry,
)


class Client:
    def __init__(self, retries: int) -> None:
        self.retries = retries


class Node:
    def __init__(self, parent: Any) -> None:
        self.parent = parent


class Shape(ABC):
    @abstractmethod
    def area(self) -> float: ...


def main() -> None:
    names = NameRegistry({"app.client": Client, "app.node": Node, "app.shape": Shape})
    config = ConfigBucket({"app.node": {"parent": "app.node"}})
    resolver = InjectionResolver(names, config)

    try:
        resolver.make("app.missing")
    except DotwireResolutionError as error:
        print(type(error).__name__)  # => DotwireUnknownNameError

    try:
        resolver.make("app.client")
    except DotwireIntrospectionError as error:
        print(f"parameter={error.parameter}")  # => parameter=retries
    print(f"retries={resolver.make('app.client', {'retries': 2}).retries}")  # => retries=2

    try:
        resolver.make("app.node")
    except DotwireCyclicDependencyError as error:
        print(error)  # => Circular dependency detected: app.node -> app.node

    try:
        resolver.make("app.shape")
    except DotwireConstructionError as error:
        print(error)  # => Unable to construct 'Shape': it has abstract methods area


if __name__ == "__main__":
    main()
