from __future__ import annotations

import inspect
import sys
import types
from collections.abc import Callable
from dataclasses import dataclass
from inspect import Parameter
from typing import Annotated, Any, Final, Union, get_args, get_origin, get_type_hints

from dotwire._internal.type_checks import is_runtime_class
from dotwire.markers import Named
from dotwire.notation import symbolic_name_of

_MISSING_ANNOTATION: Final[Any] = object()
_VARIADIC_KINDS: Final[frozenset[Any]] = frozenset(
    {Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD},
)


def _annotation_holder() -> None:
    """Code object reused to evaluate one annotation in a foreign namespace."""


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    """Describe one constructor parameter as seen by the resolver.

    Attributes:
        name: Parameter name in the constructor signature.
        declared_type: Symbolic name of the declared type hint, or ``None``
            when the hint cannot be resolved by name.
        kind: Parameter kind, used to pass the value positionally or by keyword.
        has_default: Whether the constructor provides a default value.

    """

    name: str
    declared_type: str | None
    kind: Any = Parameter.POSITIONAL_OR_KEYWORD
    has_default: bool = False

    @property
    def is_positional_only(self) -> bool:
        return self.kind is Parameter.POSITIONAL_ONLY


class ConstructorInspector:
    """Read constructor parameters and their declared types from a callable.

    Nothing is cached: every call inspects the target again.
    """

    def parse_constructor_args(self, target: Callable[..., Any]) -> tuple[ParameterSpec, ...]:
        """Return the target's constructor parameters in declaration order.

        Args:
            target: Class or factory callable to inspect.

        Returns:
            One ``ParameterSpec`` per named parameter. Variadic parameters are
            skipped; targets without an inspectable constructor yield ``()``.

        """
        parameters = self._constructor_parameters(target)
        if not parameters:
            return ()

        annotations = self._resolved_type_hints(target)
        return tuple(
            ParameterSpec(
                name=parameter.name,
                declared_type=self._declared_type(parameter, annotations),
                kind=parameter.kind,
                has_default=parameter.default is not Parameter.empty,
            )
            for parameter in parameters
        )

    def _constructor_parameters(self, target: Callable[..., Any]) -> tuple[Parameter, ...]:
        if is_runtime_class(target) and not self._declares_constructor(target):
            return ()
        try:
            parameters = tuple(inspect.signature(target).parameters.values())
        except (TypeError, ValueError):
            # builtins and extension types without signature metadata
            return ()
        return tuple(parameter for parameter in parameters if parameter.kind not in _VARIADIC_KINDS)

    def _declares_constructor(self, cls: type[Any]) -> bool:
        return any(
            "__init__" in vars(klass) or "__new__" in vars(klass)
            for klass in cls.__mro__
            if klass is not object
        )

    def _resolved_type_hints(self, target: Callable[..., Any]) -> dict[str, Any]:
        annotations: dict[str, Any] = {}
        members: list[Any] = [target]
        if inspect.isclass(target):
            # class-level annotations cover NamedTuple and similar generated constructors
            members = [target.__init__, target.__new__, target]

        for member in members:
            try:
                member_annotations = get_type_hints(member, include_extras=True)
            except (AttributeError, NameError, TypeError):
                member_annotations = self._type_hints_one_by_one(member)
            for parameter_name, annotation in member_annotations.items():
                annotations.setdefault(parameter_name, annotation)

        annotations.pop("return", None)
        return annotations

    def _type_hints_one_by_one(self, member: Any) -> dict[str, Any]:
        # a single broken forward reference must not hide the resolvable ones
        raw_annotations = getattr(member, "__annotations__", None)
        globalns = self._annotation_globals(member)
        if not isinstance(raw_annotations, dict) or globalns is None:
            return {}

        resolved: dict[str, Any] = {}
        for name, raw_annotation in raw_annotations.items():
            holder = types.FunctionType(_annotation_holder.__code__, globalns)
            holder.__annotations__ = {name: raw_annotation}
            try:
                resolved.update(get_type_hints(holder, include_extras=True))
            except (AttributeError, NameError, TypeError):
                continue
        return resolved

    def _annotation_globals(self, member: Any) -> dict[str, Any] | None:
        if inspect.isclass(member):
            module = sys.modules.get(member.__module__)
            return vars(module) if module is not None else None
        try:
            unwrapped = inspect.unwrap(member)
        except ValueError:
            return None
        globalns = getattr(unwrapped, "__globals__", None)
        return globalns if isinstance(globalns, dict) else None

    def _declared_type(self, parameter: Parameter, annotations: dict[str, Any]) -> str | None:
        annotation = annotations.get(parameter.name, _MISSING_ANNOTATION)
        if annotation is _MISSING_ANNOTATION:
            annotation = parameter.annotation
            if annotation is Parameter.empty or isinstance(annotation, str):
                return None
        return self.symbolic_name(annotation)

    def symbolic_name(self, annotation: Any) -> str | None:
        """Translate a type hint into the symbolic name it is resolved by.

        ``Annotated[T, Named("x")]`` yields ``"x"``, other ``Annotated`` hints
        and ``Optional[T]`` are unwrapped to ``T``.
        """
        if get_origin(annotation) is Annotated:
            inner, *metadata = get_args(annotation)
            for item in metadata:
                if isinstance(item, Named):
                    return item.value
            return self.symbolic_name(inner)

        if get_origin(annotation) in (Union, types.UnionType):
            members = [arg for arg in get_args(annotation) if arg is not type(None)]
            if len(members) != 1:
                return None
            return self.symbolic_name(members[0])

        return symbolic_name_of(annotation)


__all__ = ["ConstructorInspector", "ParameterSpec"]
