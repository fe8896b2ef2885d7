"""Storage of configured parameter-to-name mappings.

A resolver consults its config store once per ``make`` call, keyed by the
symbolic name being built. The stored mapping says, for some constructor
parameters, which symbolic name to resolve instead of the declared type hint.
This is how an abstract or interface-typed parameter gets a concrete
implementation.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Annotated, Protocol, runtime_checkable

from pydantic import Field, StringConstraints, TypeAdapter, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from dotwire.exceptions import DotwireInvalidConfigurationError

if TYPE_CHECKING:
    from typing_extensions import Self

SymbolicName = Annotated[str, StringConstraints(strict=True, min_length=1)]

_CONFIGURED_MAP_ADAPTER: TypeAdapter[dict[str, str]] = TypeAdapter(
    dict[SymbolicName, SymbolicName],
)


@runtime_checkable
class ConfigStore(Protocol):
    """Read-only view of configured mappings, keyed by symbolic name."""

    def get(self, name: str) -> Mapping[str, str] | None: ...


class ResolverSettings(BaseSettings):
    """Resolver configuration loaded from keyword arguments or the environment.

    Environment variables use the ``DOTWIRE_`` prefix; ``DOTWIRE_DEPENDENCIES``
    holds a JSON object such as
    ``{"app.service": {"logger": "app.file_logger"}}``.
    """

    model_config = SettingsConfigDict(env_prefix="DOTWIRE_", extra="ignore")

    dependencies: dict[SymbolicName, dict[SymbolicName, SymbolicName]] = Field(
        default_factory=dict,
    )
    detect_cycles: bool = True


class ConfigBucket:
    """In-memory config store.

    Mappings are validated and copied on the way in and exposed read-only on
    the way out, so a resolver can never mutate what it reads.
    """

    def __init__(self, mappings: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._params: dict[str, dict[str, str]] = {}
        if mappings:
            self.load(mappings)

    @classmethod
    def from_settings(cls, settings: ResolverSettings) -> ConfigBucket:
        return cls(settings.dependencies)

    def store(self, name: str, mapping: Mapping[str, str]) -> Self:
        """Set the configured mapping for ``name``, replacing any previous one.

        Args:
            name: Symbolic name whose constructor the mapping applies to.
            mapping: Constructor parameter name to symbolic name.

        Returns:
            The bucket itself, for chaining.

        Raises:
            DotwireInvalidConfigurationError: If ``name`` is empty or the
                mapping is not made of non-empty strings.

        """
        if not isinstance(name, str) or not name:
            msg = f"Symbolic name must be a non-empty string, got {name!r}."
            raise DotwireInvalidConfigurationError(msg)
        try:
            validated = _CONFIGURED_MAP_ADAPTER.validate_python(dict(mapping))
        except (TypeError, ValueError, ValidationError) as error:
            msg = f"Invalid configured mapping for '{name}': {error}"
            raise DotwireInvalidConfigurationError(msg) from error
        self._params[name] = validated
        return self

    def load(self, mappings: Mapping[str, Mapping[str, str]]) -> Self:
        """Store several mappings at once."""
        for name, mapping in mappings.items():
            self.store(name, mapping)
        return self

    def get(self, name: str) -> Mapping[str, str] | None:
        mapping = self._params.get(name)
        if mapping is None:
            return None
        return MappingProxyType(mapping)

    def exists(self, name: str) -> bool:
        return name in self._params

    def remove(self, name: str) -> None:
        self._params.pop(name, None)

    def clear(self) -> None:
        self._params.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._params

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)


__all__ = ["ConfigBucket", "ConfigStore", "ResolverSettings", "SymbolicName"]
