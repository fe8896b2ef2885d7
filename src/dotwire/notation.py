"""Translation between symbolic dotted names and the types they denote."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from dotwire._internal.type_checks import is_runtime_class
from dotwire.exceptions import DotwireInvalidConfigurationError, DotwireUnknownNameError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_BUILTINS_MODULE = "builtins"


@runtime_checkable
class NameResolver(Protocol):
    """Map a symbolic name to the callable that produces instances of it."""

    def resolve(self, name: str) -> Any: ...


def symbolic_name_of(candidate: object) -> str | None:
    """Return the dotted name a runtime class is resolved by.

    Classes from ``builtins`` (``int``, ``str``, ``dict``, ``object``...) have
    no symbolic name because they cannot be meaningfully injected, and neither
    have generic aliases or non-class objects.

    Args:
        candidate: Annotation or class to name.

    Returns:
        ``"<module>.<qualname>"`` for eligible classes, otherwise ``None``.

    """
    if not is_runtime_class(candidate):
        return None
    module = getattr(candidate, "__module__", None)
    if not module or module == _BUILTINS_MODULE:
        return None
    return f"{module}.{candidate.__qualname__}"


class DotNotation:
    """Resolve dotted names by importing them.

    ``"app.services.Mailer"`` is resolved by importing the longest importable
    module prefix (``app.services``) and walking the remaining segments as
    attributes, so nested classes such as ``"app.services.Mailer.Backend"``
    work as well.
    """

    def resolve(self, name: str) -> Any:
        parts = self._split(name)

        for boundary in range(len(parts), 0, -1):
            module_name = ".".join(parts[:boundary])
            try:
                module = importlib.import_module(module_name)
            except ModuleNotFoundError as error:
                if error.name is not None and _is_prefix(error.name, module_name):
                    continue
                raise DotwireUnknownNameError(name, str(error)) from error
            except ImportError as error:
                raise DotwireUnknownNameError(name, str(error)) from error

            attributes = parts[boundary:]
            if not attributes:
                raise DotwireUnknownNameError(name, "it refers to a module, not a type")
            logger.debug("Resolved module '%s' for symbolic name '%s'", module_name, name)
            return self._walk(module, attributes, name)

        raise DotwireUnknownNameError(name, "no importable module prefix")

    def _split(self, name: str) -> list[str]:
        parts = name.split(".") if isinstance(name, str) else []
        if not parts or not all(part.isidentifier() for part in parts):
            raise DotwireUnknownNameError(str(name), "not a valid dotted name")
        return parts

    def _walk(self, module: Any, attributes: list[str], name: str) -> Any:
        current = module
        for attribute in attributes:
            try:
                current = getattr(current, attribute)
            except AttributeError as error:
                raise DotwireUnknownNameError(name, f"'{attribute}' is not defined") from error
        return current


def _is_prefix(missing_module: str, module_name: str) -> bool:
    return module_name == missing_module or module_name.startswith(f"{missing_module}.")


class NameRegistry:
    """Explicit symbolic name to callable registry.

    Names that are not registered are delegated to ``fallback`` when one is
    given, which lets a registry pin a few names while leaving the rest to
    ``DotNotation``.
    """

    def __init__(
        self,
        entries: Mapping[str, Callable[..., Any]] | None = None,
        fallback: NameResolver | None = None,
    ) -> None:
        self._entries: dict[str, Callable[..., Any]] = {}
        self._fallback = fallback
        for name, target in (entries or {}).items():
            self.register(name, target)

    def register(self, name: str, target: Callable[..., T]) -> Callable[..., T]:
        """Register ``target`` under ``name``, replacing any previous entry.

        Args:
            name: Symbolic name to register.
            target: Class or factory invoked to produce instances.

        Returns:
            ``target`` unchanged.

        """
        if not isinstance(name, str) or not name:
            msg = f"Symbolic name must be a non-empty string, got {name!r}."
            raise DotwireInvalidConfigurationError(msg)
        if not callable(target):
            msg = f"Target registered for '{name}' is not callable: {target!r}."
            raise DotwireInvalidConfigurationError(msg)
        self._entries[name] = target
        return target

    def register_type(self, cls: type[T]) -> type[T]:
        """Register a class under its own symbolic name.

        Usable as a class decorator.
        """
        name = symbolic_name_of(cls)
        if name is None:
            msg = f"{cls!r} has no symbolic name and cannot be registered by type."
            raise DotwireInvalidConfigurationError(msg)
        self.register(name, cls)
        return cls

    def resolve(self, name: str) -> Any:
        target = self._entries.get(name)
        if target is not None:
            return target
        if self._fallback is not None:
            return self._fallback.resolve(name)
        raise DotwireUnknownNameError(name, "it is not registered")

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = [
    "DotNotation",
    "NameRegistry",
    "NameResolver",
    "symbolic_name_of",
]
