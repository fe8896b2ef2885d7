from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from dotwire._internal.type_checks import is_abstract_class
from dotwire.config import ConfigBucket, ConfigStore, ResolverSettings
from dotwire.exceptions import (
    DotwireConstructionError,
    DotwireCyclicDependencyError,
    DotwireError,
    DotwireIntrospectionError,
)
from dotwire.introspection import ConstructorInspector
from dotwire.notation import DotNotation, NameResolver

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, Any] = {}


@runtime_checkable
class Provider(Protocol):
    """Anything that builds instances from symbolic names."""

    def make(self, name: str, custom: Mapping[str, Any] | None = None) -> Any: ...


class InjectionResolver:
    """Build instances by name, wiring constructor parameters recursively.

    Each constructor parameter is filled from the first source that has it:

    1. ``custom``, the values passed to ``make`` for this one instance;
    2. the mapping stored in ``config`` for the name being built, whose value
       is a symbolic name resolved recursively;
    3. the parameter's declared type hint, resolved recursively by its
       symbolic name.

    Recursive resolutions always start with empty ``custom`` values. Nothing
    is cached: every ``make`` call builds a fresh object graph.

    Examples:
        .. code-block:: python

            names = NameRegistry({"app.service": Service, "app.file_logger": FileLogger})
            config = ConfigBucket({"app.service": {"logger": "app.file_logger"}})
            resolver = InjectionResolver(names, config)

            service = resolver.make("app.service")

    """

    def __init__(
        self,
        names: NameResolver,
        config: ConfigStore | None = None,
        *,
        inspector: ConstructorInspector | None = None,
        detect_cycles: bool = True,
    ) -> None:
        self._names = names
        self._config: ConfigStore = config if config is not None else ConfigBucket()
        self._inspector = inspector or ConstructorInspector()
        self._detect_cycles = detect_cycles

    @classmethod
    def from_settings(
        cls,
        settings: ResolverSettings | None = None,
        names: NameResolver | None = None,
    ) -> InjectionResolver:
        """Create a resolver configured from ``ResolverSettings``.

        Args:
            settings: Settings to use; read from the environment when omitted.
            names: Name resolver to use; ``DotNotation`` when omitted.

        """
        settings = settings if settings is not None else ResolverSettings()
        return cls(
            names if names is not None else DotNotation(),
            ConfigBucket.from_settings(settings),
            detect_cycles=settings.detect_cycles,
        )

    @property
    def names(self) -> NameResolver:
        return self._names

    @property
    def config(self) -> ConfigStore:
        return self._config

    def make(self, name: str, custom: Mapping[str, Any] | None = None) -> Any:
        """Return a new, fully wired instance of the type named ``name``.

        Args:
            name: Symbolic name of the type to build.
            custom: Values for constructor parameters of this type, by
                parameter name. They are used as-is and are not passed on to
                the dependencies built along the way.

        Raises:
            DotwireResolutionError: If a name along the way cannot be resolved,
                a parameter has no usable type, or the dependencies form a cycle.
            DotwireConstructionError: If a type cannot be instantiated with the
                assembled arguments.

        """
        return self._make(name, custom if custom is not None else _EMPTY, ())

    def get_injected_instance(
        self,
        target: Callable[..., Any],
        specd: Mapping[str, str] | None = None,
        custom: Mapping[str, Any] | None = None,
    ) -> Any:
        """Build one instance of an already resolved ``target``.

        Args:
            target: Class or factory to invoke.
            specd: Configured parameter name to symbolic name mapping.
            custom: Values for parameters of ``target``, used as-is.

        """
        return self._get_injected_instance(
            target,
            specd if specd is not None else _EMPTY,
            custom if custom is not None else _EMPTY,
            (),
        )

    def _make(self, name: str, custom: Mapping[str, Any], chain: tuple[str, ...]) -> Any:
        if self._detect_cycles and name in chain:
            raise DotwireCyclicDependencyError(name, chain)

        specd = self._config.get(name) or _EMPTY
        target = self._names.resolve(name)
        logger.debug("Making '%s' with %s (depth=%d)", name, target, len(chain))
        return self._get_injected_instance(target, specd, custom, (*chain, name))

    def _get_injected_instance(
        self,
        target: Callable[..., Any],
        specd: Mapping[str, str],
        custom: Mapping[str, Any],
        chain: tuple[str, ...],
    ) -> Any:
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        skipped_positional: str | None = None

        for spec in self._inspector.parse_constructor_args(target):
            if spec.is_positional_only and skipped_positional is not None:
                # later positional-only values would shift into the skipped slot
                if spec.name in custom or spec.name in specd:
                    raise DotwireIntrospectionError(target, skipped_positional)
                continue

            if spec.name in custom:
                logger.debug("Parameter '%s' taken from custom values", spec.name)
                value = custom[spec.name]
            elif spec.name in specd:
                logger.debug("Parameter '%s' configured as '%s'", spec.name, specd[spec.name])
                value = self._make(specd[spec.name], _EMPTY, chain)
            elif spec.declared_type is not None:
                logger.debug("Parameter '%s' inferred as '%s'", spec.name, spec.declared_type)
                value = self._make(spec.declared_type, _EMPTY, chain)
            elif spec.has_default:
                if spec.is_positional_only:
                    skipped_positional = spec.name
                continue
            else:
                raise DotwireIntrospectionError(target, spec.name)

            if spec.is_positional_only:
                args.append(value)
            else:
                kwargs[spec.name] = value

        return self._construct(target, args, kwargs)

    def _construct(
        self,
        target: Callable[..., Any],
        args: list[Any],
        kwargs: dict[str, Any],
    ) -> Any:
        if not callable(target):
            raise DotwireConstructionError(target, "it is not callable")
        if is_abstract_class(target):
            abstract = ", ".join(sorted(target.__abstractmethods__))  # type: ignore[attr-defined]
            raise DotwireConstructionError(target, f"it has abstract methods {abstract}")

        try:
            signature: inspect.Signature | None = inspect.signature(target)
        except (TypeError, ValueError):
            signature = None

        if signature is not None:
            try:
                signature.bind(*args, **kwargs)
            except TypeError as error:
                logger.debug("Arguments %s, %s do not fit %s", args, kwargs, signature)
                raise DotwireConstructionError(target, str(error)) from error

        try:
            return target(*args, **kwargs)
        except DotwireError:
            raise
        except Exception as error:
            logger.debug("Constructor of %s raised %r", target, error)
            raise DotwireConstructionError(target, f"{type(error).__name__}: {error}") from error


__all__ = ["InjectionResolver", "Provider"]
