from __future__ import annotations

from dataclasses import dataclass
from inspect import Parameter
from typing import Annotated, Any, NamedTuple, Optional

import pytest

from dotwire.introspection import ConstructorInspector, ParameterSpec
from dotwire.markers import Named


class Database:
    pass


class Cache:
    pass


class Repository:
    def __init__(self, database: Database, cache: Cache | None) -> None:
        self.database = database
        self.cache = cache


class NoInit:
    pass


class InheritsInit(Repository):
    pass


class WithNew:
    def __new__(cls, database: Database) -> WithNew:
        return super().__new__(cls)


class Variadic:
    def __init__(self, database: Database, *args: Any, **kwargs: Any) -> None:
        pass


class Mixed:
    def __init__(
        self,
        raw,  # type: ignore[no-untyped-def]
        count: int,
        anything: Any,
        items: list[Database],
        either: Database | Cache,
        legacy: Optional[Cache] = None,
    ) -> None:
        pass


class Marked:
    def __init__(
        self,
        primary: Annotated[Database, Named("db.primary")],
        replica: Annotated[Database, "replica"],
    ) -> None:
        pass


class Unresolvable:
    def __init__(self, database: Database, missing: NotDefinedAnywhere) -> None:  # type: ignore[name-defined] # noqa: F821
        pass


class PartlyResolvable:
    def __init__(
        self,
        database: Database,
        cache: Optional[Cache],
        extra: NotDefinedAnywhere = None,  # type: ignore[name-defined] # noqa: F821
    ) -> None:
        pass


@dataclass
class Settings:
    database: Database
    retries: int = 3


class Point(NamedTuple):
    database: Database
    label: str = "origin"


def _name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def test_parameters_in_declaration_order(inspector: ConstructorInspector) -> None:
    specs = inspector.parse_constructor_args(Repository)

    assert specs == (
        ParameterSpec("database", _name(Database), Parameter.POSITIONAL_OR_KEYWORD, False),
        ParameterSpec("cache", _name(Cache), Parameter.POSITIONAL_OR_KEYWORD, False),
    )


def test_class_without_constructor(inspector: ConstructorInspector) -> None:
    assert inspector.parse_constructor_args(NoInit) == ()


def test_inherited_constructor(inspector: ConstructorInspector) -> None:
    names = [spec.name for spec in inspector.parse_constructor_args(InheritsInit)]

    assert names == ["database", "cache"]


def test_constructor_declared_by_new(inspector: ConstructorInspector) -> None:
    specs = inspector.parse_constructor_args(WithNew)

    assert [(spec.name, spec.declared_type) for spec in specs] == [
        ("database", _name(Database)),
    ]


def test_variadic_parameters_are_skipped(inspector: ConstructorInspector) -> None:
    names = [spec.name for spec in inspector.parse_constructor_args(Variadic)]

    assert names == ["database"]


def test_uninjectable_hints_have_no_declared_type(inspector: ConstructorInspector) -> None:
    specs = {spec.name: spec for spec in inspector.parse_constructor_args(Mixed)}

    assert specs["raw"].declared_type is None
    assert specs["count"].declared_type is None
    assert specs["anything"].declared_type is None
    assert specs["items"].declared_type is None
    assert specs["either"].declared_type is None
    assert specs["legacy"].declared_type == _name(Cache)
    assert specs["legacy"].has_default
    assert not specs["count"].has_default


def test_annotated_hints(inspector: ConstructorInspector) -> None:
    specs = {spec.name: spec.declared_type for spec in inspector.parse_constructor_args(Marked)}

    assert specs == {"primary": "db.primary", "replica": _name(Database)}


def test_unresolvable_forward_reference(inspector: ConstructorInspector) -> None:
    specs = {
        spec.name: spec.declared_type for spec in inspector.parse_constructor_args(Unresolvable)
    }

    assert specs == {"database": _name(Database), "missing": None}


def test_unresolvable_hint_only_affects_its_own_parameter(
    inspector: ConstructorInspector,
) -> None:
    specs = {spec.name: spec for spec in inspector.parse_constructor_args(PartlyResolvable)}

    assert specs["database"].declared_type == _name(Database)
    assert specs["cache"].declared_type == _name(Cache)
    assert specs["extra"].declared_type is None
    assert specs["extra"].has_default


def test_dataclass_fields(inspector: ConstructorInspector) -> None:
    specs = inspector.parse_constructor_args(Settings)

    assert [(spec.name, spec.declared_type, spec.has_default) for spec in specs] == [
        ("database", _name(Database), False),
        ("retries", None, True),
    ]


def test_namedtuple_fields(inspector: ConstructorInspector) -> None:
    specs = inspector.parse_constructor_args(Point)

    assert [(spec.name, spec.declared_type) for spec in specs] == [
        ("database", _name(Database)),
        ("label", None),
    ]


def test_factory_function(inspector: ConstructorInspector) -> None:
    def make_repository(database: Database, *, cache: Cache) -> Repository:
        return Repository(database, cache)

    specs = inspector.parse_constructor_args(make_repository)

    assert [(spec.name, spec.kind) for spec in specs] == [
        ("database", Parameter.POSITIONAL_OR_KEYWORD),
        ("cache", Parameter.KEYWORD_ONLY),
    ]


@pytest.mark.parametrize("target", [int, dict, object, Exception])
def test_builtin_types(inspector: ConstructorInspector, target: type) -> None:
    assert all(spec.declared_type is None for spec in inspector.parse_constructor_args(target))


def test_results_are_not_cached(inspector: ConstructorInspector) -> None:
    first = inspector.parse_constructor_args(Repository)
    second = inspector.parse_constructor_args(Repository)

    assert first == second
    assert first is not second


@pytest.mark.parametrize(
    ("annotation", "expected"),
    [
        (Database, _name(Database)),
        (Optional[Database], _name(Database)),
        (Annotated[Optional[Database], "meta"], _name(Database)),
        (Annotated[Database, Named("x.y")], "x.y"),
        (str, None),
        (Any, None),
        (list[Database], None),
    ],
)
def test_symbolic_name(
    inspector: ConstructorInspector,
    annotation: Any,
    expected: str | None,
) -> None:
    assert inspector.symbolic_name(annotation) == expected
