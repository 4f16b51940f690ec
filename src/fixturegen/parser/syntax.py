# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration-level syntax tree for Go source files.

Only what fixture generation needs is kept: the package clause, type
declarations with their type expressions, and const declarations. Imports,
function bodies, variables and expression values are skipped by the parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class IdentExpr:
    """A bare type name such as ``string`` or ``User``."""

    name: str


@dataclass(frozen=True)
class QualifiedExpr:
    """A package-qualified type name such as ``timestamppb.Timestamp``."""

    package: str
    name: str


@dataclass(frozen=True)
class PointerExpr:
    """``*T``"""

    element: TypeExpr


@dataclass(frozen=True)
class SliceExpr:
    """``[]T``"""

    element: TypeExpr


@dataclass(frozen=True)
class ArrayExpr:
    """``[N]T``. The length expression is not kept."""

    element: TypeExpr


@dataclass(frozen=True)
class MapExpr:
    """``map[K]V``"""

    key: TypeExpr
    value: TypeExpr


@dataclass(frozen=True)
class ChanExpr:
    """``chan T``, ``<-chan T`` or ``chan<- T``."""

    element: TypeExpr


@dataclass(frozen=True)
class FuncExpr:
    """A function type. Parameters and results are not kept."""


@dataclass(frozen=True)
class GenericExpr:
    """An instantiated generic type such as ``List[int]``. Type arguments are not kept."""

    base: TypeExpr


@dataclass(frozen=True)
class FieldDecl:
    """One line of a struct body.

    Attributes:
        names: Declared field names; empty for an embedded field.
        type: The field's type expression.
        tag: Raw struct tag text, if any.
    """

    names: tuple[str, ...]
    type: TypeExpr
    tag: str | None = None

    @property
    def is_embedded(self) -> bool:
        return not self.names


@dataclass(frozen=True)
class StructExpr:
    """``struct { ... }``"""

    fields: tuple[FieldDecl, ...] = ()


@dataclass(frozen=True)
class InterfaceExpr:
    """``interface { ... }``. Only method names are kept."""

    methods: tuple[str, ...] = ()


TypeExpr = (
    IdentExpr
    | QualifiedExpr
    | PointerExpr
    | SliceExpr
    | ArrayExpr
    | MapExpr
    | ChanExpr
    | FuncExpr
    | GenericExpr
    | StructExpr
    | InterfaceExpr
)


@dataclass(frozen=True)
class TypeSpec:
    """A single type declaration.

    Attributes:
        name: Declared type name.
        type: The underlying type expression.
        line: 1-based line of the declared name.
        is_generic: True if the declaration has type parameters.
        is_alias: True for ``type A = B`` declarations.
    """

    name: str
    type: TypeExpr
    line: int
    is_generic: bool = False
    is_alias: bool = False


@dataclass(frozen=True)
class ConstSpec:
    """One line of a const declaration.

    Attributes:
        names: Declared constant names.
        type: Explicit type, if written.
        has_values: True if the line carries ``= expr, ...``.
        line: 1-based line of the first name.
    """

    names: tuple[str, ...]
    type: TypeExpr | None
    has_values: bool
    line: int


@dataclass
class SourceFile:
    """The declarations of one Go source file, in source order."""

    package: str
    types: list[TypeSpec] = field(default_factory=list)
    const_groups: list[list[ConstSpec]] = field(default_factory=list)


def spell(expr: TypeExpr) -> str:
    """Return a Go-like spelling of *expr* for diagnostics."""
    if isinstance(expr, IdentExpr):
        return expr.name
    if isinstance(expr, QualifiedExpr):
        return f"{expr.package}.{expr.name}"
    if isinstance(expr, PointerExpr):
        return "*" + spell(expr.element)
    if isinstance(expr, SliceExpr):
        return "[]" + spell(expr.element)
    if isinstance(expr, ArrayExpr):
        return "[...]" + spell(expr.element)
    if isinstance(expr, MapExpr):
        return f"map[{spell(expr.key)}]{spell(expr.value)}"
    if isinstance(expr, ChanExpr):
        return "chan " + spell(expr.element)
    if isinstance(expr, FuncExpr):
        return "func(...)"
    if isinstance(expr, GenericExpr):
        return spell(expr.base) + "[...]"
    if isinstance(expr, StructExpr):
        return "struct{...}"
    return "interface{...}"
