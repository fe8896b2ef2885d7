from __future__ import annotations

from typing import Any


class DotwireError(Exception):
    """Represent a base class for all dotwire-specific failures.

    Catch this type when you want to handle any dotwire error path without
    matching each concrete exception class individually.
    """


class DotwireResolutionError(DotwireError):
    """Signal that a symbolic name could not be turned into an instance source.

    This is the parent of every failure that happens before a constructor is
    invoked: unknown names, uninjectable parameters and dependency cycles.
    It is never recovered locally and unwinds the whole ``make`` call.
    """


class DotwireUnknownNameError(DotwireResolutionError):
    """Signal that a name resolver has no mapping for a symbolic name.

    Raised by ``DotNotation.resolve`` when no module prefix of the dotted name
    can be imported or an attribute along the path is missing, and by
    ``NameRegistry.resolve`` when the name was never registered.

    Typical fixes include checking the spelling of the dotted name, making the
    module importable, or registering the name explicitly.
    """

    def __init__(self, name: str, reason: str | None = None) -> None:
        self.name = name
        self.reason = reason
        msg = f"Symbolic name '{name}' cannot be resolved to a type"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class DotwireIntrospectionError(DotwireResolutionError):
    """Signal a constructor parameter whose type cannot be inferred.

    Raised while building an instance when a required parameter has no type
    hint, or a hint that has no symbolic name (``int``, ``str``, ``Any``,
    generic aliases), and the parameter was supplied neither through the
    ``custom`` overrides nor through the configured mapping.

    Typical fixes include passing the value in ``custom``, adding a configured
    mapping for the parameter, or annotating it with a concrete class or
    ``Annotated[T, Named("...")]``.
    """

    def __init__(self, target: Any, parameter: str) -> None:
        self.target = target
        self.parameter = parameter
        target_name = getattr(target, "__qualname__", repr(target))
        msg = (
            f"Unable to infer dependency for parameter '{parameter}' of '{target_name}'. "
            "Pass it in custom overrides or configure a symbolic name for it."
        )
        super().__init__(msg)


class DotwireCyclicDependencyError(DotwireResolutionError):
    """Signal that a symbolic name depends on itself.

    Raised when a name reappears in the chain of names currently being
    resolved, e.g. ``a`` requires ``b`` which requires ``a``.

    Typical fixes include breaking the cycle with a configured mapping or by
    supplying one side of it through ``custom`` overrides.
    """

    def __init__(self, name: str, chain: tuple[str, ...]) -> None:
        self.name = name
        self.chain = chain
        path = " -> ".join((*chain, name))
        super().__init__(f"Circular dependency detected: {path}")


class DotwireConstructionError(DotwireError):
    """Signal that a resolved type could not be instantiated.

    Raised when the assembled arguments do not fit the constructor signature,
    when the target is not callable or abstract, or when the constructor
    itself fails. The original exception, if any, is kept as ``__cause__``.
    """

    def __init__(self, target: Any, reason: str) -> None:
        self.target = target
        self.reason = reason
        target_name = getattr(target, "__qualname__", repr(target))
        super().__init__(f"Unable to construct '{target_name}': {reason}")


class DotwireInvalidConfigurationError(DotwireError):
    """Signal a malformed dependency mapping passed to a config store.

    Every configured mapping must map constructor parameter names to symbolic
    names, both given as non-empty strings.
    """


__all__ = [
    "DotwireConstructionError",
    "DotwireCyclicDependencyError",
    "DotwireError",
    "DotwireIntrospectionError",
    "DotwireInvalidConfigurationError",
    "DotwireResolutionError",
    "DotwireUnknownNameError",
]
