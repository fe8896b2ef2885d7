from dotwire.config import ConfigBucket, ConfigStore, ResolverSettings
from dotwire.exceptions import (
    DotwireConstructionError,
    DotwireCyclicDependencyError,
    DotwireError,
    DotwireIntrospectionError,
    DotwireInvalidConfigurationError,
    DotwireResolutionError,
    DotwireUnknownNameError,
)
from dotwire.introspection import ConstructorInspector, ParameterSpec
from dotwire.markers import Named
from dotwire.notation import DotNotation, NameRegistry, NameResolver, symbolic_name_of
from dotwire.resolver import InjectionResolver, Provider

__all__ = [
    "ConfigBucket",
    "ConfigStore",
    "ConstructorInspector",
    "DotNotation",
    "DotwireConstructionError",
    "DotwireCyclicDependencyError",
    "DotwireError",
    "DotwireIntrospectionError",
    "DotwireInvalidConfigurationError",
    "DotwireResolutionError",
    "DotwireUnknownNameError",
    "InjectionResolver",
    "NameRegistry",
    "NameResolver",
    "Named",
    "ParameterSpec",
    "Provider",
    "ResolverSettings",
    "symbolic_name_of",
]
