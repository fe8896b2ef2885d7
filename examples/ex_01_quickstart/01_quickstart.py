"""Quickstart: build an object graph from a dotted name.

This module demonstrates:

1. Resolving a class by its dotted name with ``DotNotation``.
2. Constructor parameters filled from their type hints, recursively.
3. A fresh object graph on every ``make`` call.
"""

from __future__ import annotations

from dotwire import DotNotation, InjectionResolver


class Engine:
    pass


class Car:
    def __init__(self, engine: Engine) -> None:
        self.engine = engine


def main() -> None:
    resolver = InjectionResolver(DotNotation())

    car = resolver.make(f"{__name__}.Car")
    print(f"car={type(car).__name__}")  # => car=Car
    print(f"engine={type(car.engine).__name__}")  # => engine=Engine

    other = resolver.make(f"{__name__}.Car")
    print(f"fresh_engine={other.engine is not car.engine}")  # => fresh_engine=True


if __name__ == "__main__":
    main()
