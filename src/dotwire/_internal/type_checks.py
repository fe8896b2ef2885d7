from __future__ import annotations

import inspect
import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a plain class usable as an injection target.

    Parameterized generics such as ``list[int]`` report ``isinstance(x, type)``
    on some interpreters and are excluded explicitly.

    Args:
        candidate: Value being checked.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_abstract_class(candidate: object) -> bool:
    """Return true for classes that still declare abstract methods."""
    return is_runtime_class(candidate) and inspect.isabstract(candidate)


__all__ = ["is_abstract_class", "is_runtime_class"]
